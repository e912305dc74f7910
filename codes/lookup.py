"""
codes.lookup - Port for reading the codes already in use.

The generator only needs one question answered: which codes start
with this prefix.  Storage adapters implement CodeLookup; the
in-memory version backs tests and offline use.
"""

from __future__ import annotations

from typing import Iterable, Protocol


class CodeLookup(Protocol):
    def find_codes_with_prefix(self, prefix: str) -> set[str]:
        """Every stored code starting with *prefix* (case-sensitive).  Empty set when none."""
        ...


class InMemoryCodeLookup:

    def __init__(self, codes: Iterable[str] = ()):
        self.codes: set[str] = set(codes)

    def add(self, code: str) -> None:
        self.codes.add(code)

    def find_codes_with_prefix(self, prefix: str) -> set[str]:
        return {c for c in self.codes if c.startswith(prefix)}
