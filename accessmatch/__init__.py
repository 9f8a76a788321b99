"""String, list and eval() helpers for access-control models, with a periodic ticker and error types."""

__version__ = "0.1.0"
__all__ = ["arrays", "errors", "strings", "ticker"]