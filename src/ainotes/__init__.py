"""AI Notes: note lifecycle handlers and semantic related-notes engine."""

__version__ = "0.1.0"
