"""Cross-cutting helpers: logging and dependency wiring."""
