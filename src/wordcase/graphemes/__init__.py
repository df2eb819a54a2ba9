"""
Grapheme indexing submodule.

Converts between the matching engine's code-unit offsets and the grapheme
positions used by every public indexing function.

Basic usage:
    >>> from wordcase.graphemes import to_grapheme_range
    >>> from wordcase.patterns import CodeUnitRange
    >>> to_grapheme_range(CodeUnitRange(3, 3), "he\\u0301llo")
    GraphemeRange(start=2, end=5)
"""

from wordcase.graphemes._index import (
    GraphemeIndexer,
    GraphemeRange,
    grapheme_boundaries,
    grapheme_length,
    graphemes,
    to_code_unit_offset,
    to_code_unit_range,
    to_grapheme_index,
    to_grapheme_range,
)

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
