"""
Word segmentation.

Splits text into words using one of two grammars:

- **basic**: maximal runs of letters and digits; anything else separates.
- **complex**: additionally splits on case changes, acronym boundaries and
  letter/digit transitions (``XMLHttpRequest2`` → XML, Http, Request, 2).

A probe decides which grammar applies. With the ``"global"`` strategy the
probe runs once and one hit anywhere selects the complex grammar for the
whole string. With ``"per_token"`` every basic run is probed on its own.

Example:
    >>> from wordcase.tokenizer import words
    >>> words("fooBar baz")
    ['foo', 'Bar', 'baz']
    >>> words("XMLHttpRequest2")
    ['XML', 'Http', 'Request', '2']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from wordcase._deburr import deburr
from wordcase.graphemes import GraphemeIndexer, GraphemeRange
from wordcase.patterns import CodeUnitRange, compile_pattern

__all__ = [
    "BASIC",
    "COMPLEX",
    "GLOBAL",
    "PER_TOKEN",
    "STRATEGIES",
    "Word",
    "segment",
    "select_grammar",
    "words",
]

_LOGGER = logging.getLogger("wordcase.tokenizer")

# =============================================================================
# Grammars
# =============================================================================

BASIC = "basic"
COMPLEX = "complex"

GLOBAL = "global"
PER_TOKEN = "per_token"
STRATEGIES = (GLOBAL, PER_TOKEN)

_UPPER = r"[\p{Lu}\p{Lt}]"
_LOWER = r"[\p{Ll}\p{M}]"
# Letters without case (CJK, kana, Thai, ...) form words of their own.
_CASELESS = r"[\p{Lo}\p{Lm}][\p{Lo}\p{Lm}\p{M}]*"
_DIGIT = r"\p{N}"

HAS_COMPLEX_WORD = "|".join(
    [
        r"\p{Ll}[\p{Lu}\p{Lt}]",  # fooBar
        r"[\p{Lu}\p{Lt}]{2,}\p{Ll}",  # XMLParser
        r"\p{N}\p{L}",  # 2nd
        r"\p{L}\p{N}",  # v2
    ]
)

BASIC_WORD = r"[\p{L}\p{N}\p{M}]+"

COMPLEX_WORD = "|".join(
    [
        # Acronym ending before a capitalized word: XML in XMLParser
        rf"{_UPPER}+(?={_UPPER}{_LOWER})",
        rf"{_UPPER}?{_LOWER}+",
        rf"{_UPPER}+",
        _CASELESS,
        rf"{_DIGIT}+",
    ]
)

_GRAMMARS = {
    BASIC: BASIC_WORD,
    COMPLEX: COMPLEX_WORD,
}


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Word:
    """A word and its grapheme span in the normalized text."""

    text: str
    span: GraphemeRange

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Word text must be non-empty")

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Segmentation
# =============================================================================


def select_grammar(text: str) -> str:
    """Return ``"complex"`` if any part of ``text`` needs the complex grammar."""
    if compile_pattern(HAS_COMPLEX_WORD).tests_against(text):
        return COMPLEX
    return BASIC


def _global_ranges(text: str) -> list[CodeUnitRange]:
    grammar = select_grammar(text)
    _LOGGER.debug("Using %s grammar for %r", grammar, text)
    return compile_pattern(_GRAMMARS[grammar]).all_match_ranges(text)


def _per_token_ranges(text: str) -> list[CodeUnitRange]:
    probe = compile_pattern(HAS_COMPLEX_WORD)
    complex_word = compile_pattern(COMPLEX_WORD)
    ranges = []
    for run in compile_pattern(BASIC_WORD).all_match_ranges(text):
        token = text[run.start : run.end]
        if not probe.tests_against(token):
            ranges.append(run)
            continue
        ranges.extend(
            CodeUnitRange(run.start + sub.start, sub.length)
            for sub in complex_word.all_match_ranges(token)
        )
    return ranges


def _to_words(ranges: Iterable[CodeUnitRange], indexer: GraphemeIndexer) -> Iterator[Word]:
    text = indexer.text
    for code_units in ranges:
        if code_units.length == 0:
            continue
        span = indexer.to_grapheme_range(code_units)
        if span is None:
            _LOGGER.debug(
                "Skipping token %r: offsets %d..%d split a grapheme cluster",
                text[code_units.start : code_units.end],
                code_units.start,
                code_units.end,
            )
            continue
        yield Word(text[code_units.start : code_units.end], span)


def segment(text: str, strategy: str = GLOBAL) -> tuple[Word, ...]:
    """
    Strip diacritics from ``text`` and split it into words.

    Word spans index the normalized (deburred) text. A token whose match
    boundaries fall inside a grapheme cluster is skipped; the rest of the
    string is still segmented.

    Args:
        text: Any string
        strategy: ``"global"`` (one grammar for the whole string) or
            ``"per_token"`` (grammar chosen per letter/digit run)

    Returns:
        Words in document order

    Raises:
        ValueError: for an unknown strategy
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy: {strategy}. Expected one of {', '.join(STRATEGIES)}."
        )
    normalized = deburr(text)
    if not normalized:
        return ()
    if strategy == GLOBAL:
        ranges = _global_ranges(normalized)
    else:
        ranges = _per_token_ranges(normalized)
    return tuple(_to_words(ranges, GraphemeIndexer(normalized)))


def words(text: str, strategy: str = GLOBAL) -> list[str]:
    """Return the words of ``text`` as plain strings."""
    return [word.text for word in segment(text, strategy)]
