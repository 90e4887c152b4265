"""
PetHealth client core.

Session/local store and authenticated REST client for the PetHealth UK
pet-owner application.
"""

__version__ = "0.1.0"
