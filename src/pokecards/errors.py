"""Error types raised across the pokecards package boundary."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    FETCH_FAILED = "FETCH_FAILED"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    LOAD_FAILED = "LOAD_FAILED"
    SEARCH_FAILED = "SEARCH_FAILED"


class PokeCardsError(Exception):
    """Single exception type surfaced to callers.

    ``recoverable`` tells the caller whether repeating the same call may
    succeed (network blips, 5xx) or is pointless (unknown identifier).
    """

    def __init__(self, code: ErrorCode, message: str, *, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def __repr__(self) -> str:
        return f"PokeCardsError(code={self.code!s}, message={self.message!r})"
