"""
codes.errors - Failure kinds raised by client code generation.

Every error is a ValueError so callers that only care about
"bad input" keep working, while ``kind`` lets them branch
without reading the message.
"""

from __future__ import annotations

from enum import Enum


class CodeErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    EXHAUSTED = "exhausted"
    DEPENDENCY = "dependency"


class ClientCodeError(ValueError):
    kind: CodeErrorKind


class InvalidInput(ClientCodeError):
    """Client name is empty or whitespace-only."""

    kind = CodeErrorKind.INVALID_INPUT

    def __init__(self, message: str = "client name cannot be empty"):
        super().__init__(message)


class Exhausted(ClientCodeError):
    """Every suffix 001-999 is already taken for a prefix."""

    kind = CodeErrorKind.EXHAUSTED

    def __init__(self, prefix: str):
        super().__init__(f"no free client code suffix left for prefix {prefix!r}")
        self.prefix = prefix
