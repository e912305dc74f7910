"""
codes.alpha - Three-letter prefix derived from a client name.

    3+ words   first letter of the first three words
    2 words    first letter of each word + next letter of the second
    1 word     first three letters, padded A, B, ... when short

Words are separated by ASCII spaces only; a tab or newline stays
inside its word.  Only ASCII letters count as letters.  A position that cannot be
filled from the name falls back to 'A', so any non-blank name
yields exactly three characters in A-Z.
"""

from __future__ import annotations

from typing import Optional

from codes.errors import InvalidInput

ALPHA_LENGTH = 3
FALLBACK = "A"


def is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _first_letter(word: str) -> str:
    """Upper-cased first char of *word*, or 'A' when it is not a letter."""
    if word and is_letter(word[0]):
        return word[0].upper()
    return FALLBACK


def _next_letter(word: str, start: int) -> Optional[str]:
    """First letter at or after *start*, upper-cased."""
    for ch in word[start:]:
        if is_letter(ch):
            return ch.upper()
    return None


def _from_two_words(first: str, second: str) -> str:
    head = _first_letter(first) + _first_letter(second)
    if len(second) > 1 and is_letter(second[1]):
        return head + second[1].upper()
    return head + (_next_letter(second, 1) or FALLBACK)


def _from_one_word(word: str) -> str:
    chars = []
    for i in range(ALPHA_LENGTH):
        if i >= len(word):
            chars.append(chr(ord("A") + i - len(word)))
        elif is_letter(word[i]):
            chars.append(word[i].upper())
        else:
            chars.append(_next_letter(word, i) or FALLBACK)
    return "".join(chars)


def derive_alpha_part(name: str) -> str:
    """
    Return the 3-letter alpha part for *name*.

    Raises InvalidInput when *name* is empty or only whitespace.
    """
    if not name or not name.strip():
        raise InvalidInput()

    words = [w for w in name.split(" ") if w]
    if len(words) >= 3:
        return "".join(_first_letter(w) for w in words[:3])
    if len(words) == 2:
        return _from_two_words(words[0], words[1])
    return _from_one_word(words[0])
