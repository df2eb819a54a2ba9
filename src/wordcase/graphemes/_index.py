"""
Translation between code-unit offsets and grapheme-cluster positions.

The matching engine reports offsets in code units (code points of the
Python string). Callers address text by user-perceived character, i.e.
extended grapheme cluster. All arithmetic between the two spaces lives
here.

A boundary table is the sorted tuple of code-unit offsets at which a
grapheme cluster starts, plus ``len(text)``. Grapheme index ``i`` sits at
code-unit offset ``boundaries[i]``; an offset that is not in the table
falls inside a cluster and has no grapheme position.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional

import regex

from wordcase.patterns import CodeUnitRange

__all__ = [
    "GraphemeIndexer",
    "GraphemeRange",
    "grapheme_boundaries",
    "grapheme_length",
    "graphemes",
    "to_code_unit_offset",
    "to_code_unit_range",
    "to_grapheme_index",
    "to_grapheme_range",
]

_GRAPHEME = regex.compile(r"\X")


@dataclass(frozen=True)
class GraphemeRange:
    """Half-open range of grapheme indices, ``0 <= start <= end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"GraphemeRange start must be non-negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(
                f"GraphemeRange start must not exceed end, got {self.start} > {self.end}"
            )

    @property
    def length(self) -> int:
        return self.end - self.start


def grapheme_boundaries(text: str) -> tuple[int, ...]:
    """Return the code-unit offset of every grapheme boundary in ``text``."""
    bounds = [m.start() for m in _GRAPHEME.finditer(text)]
    bounds.append(len(text))
    return tuple(bounds)


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def grapheme_length(text: str) -> int:
    """Number of user-perceived characters in ``text``."""
    return len(grapheme_boundaries(text)) - 1


class GraphemeIndexer:
    """
    Boundary table for one string.

    Build it once when translating many ranges over the same text; the
    tokenizer does this for every match it collects.

    Example:
        >>> idx = GraphemeIndexer("he\\u0301llo")
        >>> idx.to_grapheme_index(3)
        2
        >>> idx.to_grapheme_index(2) is None
        True
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.boundaries = grapheme_boundaries(text)

    def __len__(self) -> int:
        return len(self.boundaries) - 1

    def to_grapheme_index(self, offset: int) -> Optional[int]:
        """Grapheme index at code-unit ``offset``, or None if not on a boundary."""
        if offset < 0 or offset > len(self.text):
            return None
        pos = bisect_left(self.boundaries, offset)
        if pos < len(self.boundaries) and self.boundaries[pos] == offset:
            return pos
        return None

    def to_grapheme_range(self, span: CodeUnitRange) -> Optional[GraphemeRange]:
        start = self.to_grapheme_index(span.start)
        if start is None:
            return None
        end = self.to_grapheme_index(span.end)
        if end is None:
            return None
        return GraphemeRange(start, end)

    def to_code_unit_offset(self, index: int) -> int:
        """Code-unit offset of grapheme ``index``; ``len(self)`` maps to the end."""
        if index < 0 or index >= len(self.boundaries):
            raise IndexError(
                f"grapheme index {index} out of range for text of length {len(self)}"
            )
        return self.boundaries[index]

    def to_code_unit_range(self, span: GraphemeRange) -> CodeUnitRange:
        start = self.to_code_unit_offset(span.start)
        end = self.to_code_unit_offset(span.end)
        return CodeUnitRange(start, end - start)

    def slice(self, span: GraphemeRange) -> str:
        """Substring covered by ``span``."""
        code_units = self.to_code_unit_range(span)
        return self.text[code_units.start : code_units.end]


def to_grapheme_index(offset: int, text: str) -> Optional[int]:
    return GraphemeIndexer(text).to_grapheme_index(offset)


def to_grapheme_range(span: CodeUnitRange, text: str) -> Optional[GraphemeRange]:
    """
    Translate a code-unit range reported by the matching engine.

    Returns None when either end falls inside a grapheme cluster or
    outside the text.
    """
    return GraphemeIndexer(text).to_grapheme_range(span)


def to_code_unit_offset(index: int, text: str) -> int:
    return GraphemeIndexer(text).to_code_unit_offset(index)


def to_code_unit_range(span: GraphemeRange, text: str) -> CodeUnitRange:
    return GraphemeIndexer(text).to_code_unit_range(span)
