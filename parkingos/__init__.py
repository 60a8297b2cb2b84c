"""Zone-based parking allocation with undo history and an HTML dashboard."""

__version__ = "0.1.0"
__all__ = ["allocation", "models", "request", "rollback", "system"]