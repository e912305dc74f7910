"""
codes.suffix - Numeric suffix allocation and code formatting.

Format:  AAANNN
         AAA = alpha part (3 letters), NNN = 3 digits (001-999).
"""

from __future__ import annotations

from typing import Iterable, Optional

from codes.errors import Exhausted

MAX_SUFFIX = 999


def format_code(prefix: str, suffix: int) -> str:
    """Assemble a client code from its alpha part and numeric suffix."""
    return f"{prefix}{suffix:03d}"


def parse_code(code: str) -> Optional[dict]:
    """
    Parse 'ACM001' → {alpha: 'ACM', suffix: 1}.
    Returns None on any format violation.
    """
    code = code.strip().upper()
    if len(code) != 6:
        return None
    alpha, digits = code[:3], code[3:]
    if not (alpha.isascii() and alpha.isalpha()):
        return None
    if not (digits.isascii() and digits.isdigit()):
        return None
    suffix = int(digits)
    if not 1 <= suffix <= MAX_SUFFIX:
        return None
    return {"alpha": alpha, "suffix": suffix}


def allocate_suffix(prefix: str, existing: Iterable[str]) -> int:
    """
    Return the smallest suffix whose code is not in *existing*.

    Probes 1, 2, 3 ... rather than max+1, so gaps left by removed
    codes are reused.  Raises Exhausted past 999.
    """
    taken = set(existing)
    for candidate in range(1, MAX_SUFFIX + 1):
        if format_code(prefix, candidate) not in taken:
            return candidate
    raise Exhausted(prefix)
