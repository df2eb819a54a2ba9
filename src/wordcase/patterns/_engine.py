"""
Adapter around the ``regex`` engine.

Everything that touches compiled patterns goes through :class:`Matcher`, so
the rest of the package only sees :class:`CodeUnitRange` values. ``regex``
addresses a Python ``str`` by code point, which makes one code point the
code unit of every range produced here.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import regex

__all__ = [
    "CodeUnitRange",
    "Matcher",
    "PatternError",
    "compile_pattern",
    "escape",
]


class PatternError(ValueError):
    """Raised when a pattern cannot be compiled."""


@dataclass(frozen=True)
class CodeUnitRange:
    """Half-open range in the matching engine's code-unit space."""

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(
                f"CodeUnitRange fields must be non-negative, got "
                f"start={self.start}, length={self.length}"
            )

    @property
    def end(self) -> int:
        return self.start + self.length


class Matcher:
    """A compiled pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        try:
            self._compiled = regex.compile(pattern)
        except regex.error as exc:
            raise PatternError(f"Invalid pattern {pattern!r}: {exc}") from exc

    def tests_against(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in ``text``."""
        return self._compiled.search(text) is not None

    def first_match_range(self, text: str, pos: int = 0) -> Optional[CodeUnitRange]:
        """Return the range of the first match at or after ``pos``."""
        match = self._compiled.search(text, pos)
        if match is None:
            return None
        start, end = match.span()
        return CodeUnitRange(start, end - start)

    def all_match_ranges(self, text: str) -> list[CodeUnitRange]:
        """Return the ranges of all non-overlapping matches, left to right."""
        return [
            CodeUnitRange(m.start(), m.end() - m.start())
            for m in self._compiled.finditer(text)
        ]

    def __repr__(self) -> str:
        return f"Matcher({self.pattern!r})"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Matcher:
    """Compile ``pattern``, reusing earlier compilations of the same string."""
    return Matcher(pattern)


def escape(literal: str) -> str:
    """
    Escape ``literal`` so it matches itself verbatim.

    Example:
        >>> escape("a.b")
        'a\\\\.b'
    """
    return regex.escape(literal, special_only=True)
