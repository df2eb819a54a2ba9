"""
Grapheme-addressed string access.

Every index taken or returned here counts user-perceived characters, so
``"he\\u0301llo"`` has length 5 and ``index_of`` on it agrees with what a
reader sees. Pattern offsets are translated through
:class:`~wordcase.graphemes.GraphemeIndexer`.
"""

from __future__ import annotations

from typing import Optional, Union

from wordcase.graphemes import GraphemeIndexer, GraphemeRange
from wordcase.patterns import compile_pattern, escape

__all__ = [
    "char_at",
    "first_match_range",
    "first_match_substring",
    "index_of",
    "index_of_pattern",
    "length",
    "matches",
    "substring",
]

SpanLike = Union[GraphemeRange, range, tuple[int, int]]


def _as_range(span: SpanLike) -> GraphemeRange:
    if isinstance(span, GraphemeRange):
        return span
    if isinstance(span, range):
        if span.step != 1:
            raise ValueError(f"substring range must have step 1, got {span.step}")
        return GraphemeRange(span.start, span.stop)
    start, end = span
    return GraphemeRange(start, end)


def length(text: str) -> int:
    """Number of grapheme clusters in ``text``."""
    return len(GraphemeIndexer(text))


def char_at(text: str, index: int) -> Optional[str]:
    """
    Return the grapheme cluster at ``index``, or None when out of bounds.

    Negative indices are out of bounds; they do not count from the end.

    Example:
        >>> char_at("cafe\\u0301", 2)
        'f'
    """
    if index < 0:
        return None
    indexer = GraphemeIndexer(text)
    if index >= len(indexer):
        return None
    return indexer.slice(GraphemeRange(index, index + 1))


def substring(text: str, span: SpanLike) -> str:
    """
    Return the graphemes of ``text`` covered by ``span``.

    Args:
        text: Source string
        span: A :class:`GraphemeRange`, a step-1 ``range`` or a
            ``(start, end)`` pair

    Raises:
        ValueError: if ``start > end`` or ``start < 0``
        IndexError: if ``end`` exceeds the grapheme length of ``text``
    """
    grapheme_range = _as_range(span)
    indexer = GraphemeIndexer(text)
    if grapheme_range.end > len(indexer):
        raise IndexError(
            f"substring end {grapheme_range.end} out of range for text of length {len(indexer)}"
        )
    return indexer.slice(grapheme_range)


def first_match_range(text: str, pattern: str) -> Optional[GraphemeRange]:
    """Grapheme range of the first match of ``pattern``, or None."""
    code_units = compile_pattern(pattern).first_match_range(text)
    if code_units is None:
        return None
    return GraphemeIndexer(text).to_grapheme_range(code_units)


def first_match_substring(text: str, pattern: str) -> Optional[str]:
    """
    Return the first substring matching ``pattern``.

    None when nothing matches, or when the match starts or ends inside a
    grapheme cluster.
    """
    code_units = compile_pattern(pattern).first_match_range(text)
    if code_units is None:
        return None
    indexer = GraphemeIndexer(text)
    grapheme_range = indexer.to_grapheme_range(code_units)
    if grapheme_range is None:
        return None
    return indexer.slice(grapheme_range)


def index_of_pattern(text: str, pattern: str) -> Optional[int]:
    """
    Grapheme index where the first whole-grapheme match of ``pattern`` starts.

    Matches that start or end inside a grapheme cluster are passed over and
    the search resumes after their start. None when no aligned match exists.
    """
    matcher = compile_pattern(pattern)
    indexer = GraphemeIndexer(text)
    pos = 0
    while pos <= len(text):
        code_units = matcher.first_match_range(text, pos)
        if code_units is None:
            return None
        grapheme_range = indexer.to_grapheme_range(code_units)
        if grapheme_range is not None:
            return grapheme_range.start
        pos = code_units.start + 1
    return None


def index_of(text: str, needle: str) -> Optional[int]:
    """
    Grapheme index of the first occurrence of ``needle``, or None.

    ``needle`` is matched literally.

    Example:
        >>> index_of("he\\u0301llo", "llo")
        2
    """
    return index_of_pattern(text, escape(needle))


def matches(text: str, pattern: str) -> bool:
    """True if ``pattern`` occurs anywhere in ``text``."""
    return compile_pattern(pattern).tests_against(text)
