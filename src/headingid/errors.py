from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    UNTERMINATED_HEADING = "UNTERMINATED_HEADING"
    INVALID_CONFIG = "INVALID_CONFIG"


class HeadingIdError(Exception):
    """Raised for conditions the filter cannot degrade around silently.

    Malformed markers are never an error. This is reserved for an unterminated
    heading under the ``"error"`` policy and for configuration that fails
    validation. Let it propagate to the caller driving the event stream.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str = "",
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
            }
        }
