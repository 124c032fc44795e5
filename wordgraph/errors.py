"""
Exception classes for the word graph package.

Analyses report data problems in-band as strings, so these are reserved for
misuse of the API (for example starting a second walk while one is running).
"""

from typing import Dict, Any


class WordGraphError(Exception):
    """Base exception for all word graph errors."""

    def __init__(self, message: str, **context):
        """
        Initialize the error with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context for debugging (must be JSON-serializable)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to JSON-serializable dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context
        }


class WalkInProgressError(WordGraphError):
    """A random walk was started while another one is still running."""
    pass
