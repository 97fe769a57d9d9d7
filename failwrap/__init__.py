"""Declare exception classes that map to HTTP statuses, responses and errors."""

__version__ = "0.1.0"
__all__ = ["errors", "status", "response_error"]