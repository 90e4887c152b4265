"""
Application services.
"""

from pethealth.services.demo_data import build_demo_data
from pethealth.services.session_store import DEFAULT_SESSION_KEY, LoadResult, LoadStatus, SessionStore

__all__ = [
    "DEFAULT_SESSION_KEY",
    "LoadResult",
    "LoadStatus",
    "SessionStore",
    "build_demo_data",
]
