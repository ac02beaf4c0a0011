"""
Error types for hlstags.

Every parse failure is reported as an ``InvalidInputError``. Errors carry a
short history of context frames that are added as the error propagates
through the parsing layers, so a rejected playlist line can be traced back to
the exact attribute that failed.
"""

from enum import Enum
from typing import List


class ErrorKind(Enum):
    """Possible error kinds."""
    INVALID_INPUT = "invalid_input"


class HLSTagError(Exception):
    """Base class for all hlstags errors."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.history: List[str] = []

    def track(self, context: str) -> "HLSTagError":
        """
        Record a context frame on the error.

        Args:
            context: Description of the layer the error is passing through

        Returns:
            The same error, so it can be re-raised inline

        Example:
            >>> try:
            ...     parse_yes_or_no(value)
            ... except HLSTagError as e:
            ...     raise e.track("PRECISE attribute")
        """
        self.history.append(context)
        return self

    def __str__(self) -> str:
        if not self.history:
            return self.message
        frames = "\n".join(f"  at {frame}" for frame in self.history)
        return f"{self.message}\n{frames}"


class InvalidInputError(HLSTagError, ValueError):
    """Raised when a tag line or attribute value is malformed."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.INVALID_INPUT, message)
