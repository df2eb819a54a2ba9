"""
Diacritic stripping.

Removes accents, cedillas, tildes and other combining marks so that
``"Crème Brûlée"`` segments and formats like ``"Creme Brulee"``.

Only nonspacing (``Mn``) and enclosing (``Me``) marks are removed. Spacing
marks (``Mc``) are vowel signs in Indic and other scripts and are kept, as are
variation selectors and the keycap mark, which belong to emoji sequences.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

__all__ = ["deburr", "base_char"]

_STRIPPED_CATEGORIES = {"Mn", "Me"}

# Emoji presentation: variation selectors and the keycap mark.
_EMOJI_MARKS = frozenset(
    [chr(cp) for cp in range(0xFE00, 0xFE10)]
    + [chr(cp) for cp in range(0xE0100, 0xE01F0)]
    + ["\u20e3"]
)


def _is_stripped(ch: str) -> bool:
    if ch in _EMOJI_MARKS:
        return False
    return unicodedata.category(ch) in _STRIPPED_CATEGORIES


@lru_cache(maxsize=4096)
def base_char(ch: str) -> str:
    """
    Return ``ch`` without its combining marks.

    A character whose canonical decomposition carries no marks is returned
    unchanged, so compatibility singletons (e.g. KELVIN SIGN) and Hangul
    syllables keep their identity. A bare combining mark maps to ``""``.

    Example:
        >>> base_char("é")
        'e'
        >>> base_char("Ç")
        'C'
    """
    if _is_stripped(ch):
        return ""
    decomposed = unicodedata.normalize("NFD", ch)
    if not any(_is_stripped(c) for c in decomposed):
        return ch
    stripped = "".join(c for c in decomposed if not _is_stripped(c))
    return unicodedata.normalize("NFC", stripped)


def deburr(text: str) -> str:
    """
    Strip diacritics from ``text``, preserving case and everything else.

    Handles both precomposed characters (é → e) and combining sequences
    (e + U+0301 → e).

    Args:
        text: Any string

    Returns:
        Text with combining marks removed

    Example:
        >>> deburr("déjà vu")
        'deja vu'
        >>> deburr("Ångström")
        'Angstrom'
    """
    if text.isascii():
        return text
    return "".join(base_char(ch) for ch in text)
