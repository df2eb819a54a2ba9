"""
wordcase: diacritic stripping, word segmentation and case styles.

Also provides grapheme-safe indexing, so positions and substrings agree
with what a reader perceives as a character.

Basic usage:
    >>> from wordcase import camel_case, snake_case, words
    >>> words("XMLHttpRequest2")
    ['XML', 'Http', 'Request', '2']
    >>> camel_case("Crème brûlée")
    'cremeBrulee'
    >>> snake_case("fooBar baz")
    'foo_bar_baz'

Indexing:
    >>> from wordcase import index_of, substring
    >>> index_of("he\\u0301llo", "llo")
    2
    >>> substring("he\\u0301llo", (2, 5))
    'llo'
"""

from wordcase._deburr import base_char, deburr
from wordcase._access import (
    char_at,
    first_match_range,
    first_match_substring,
    index_of,
    index_of_pattern,
    length,
    matches,
    substring,
)
from wordcase.case import (
    CASE_STYLES,
    camel_case,
    format_words,
    kebab_case,
    snake_case,
    start_case,
    to_case,
)
from wordcase.graphemes import (
    GraphemeRange,
    to_code_unit_offset,
    to_code_unit_range,
    to_grapheme_range,
)
from wordcase.patterns import CodeUnitRange, PatternError, escape
from wordcase.tokenizer import Word, segment, select_grammar, words

__version__ = "0.1.0"
__all__ = [
    "CASE_STYLES",
    "CodeUnitRange",
    "GraphemeRange",
    "PatternError",
    "Word",
    "base_char",
    "camel_case",
    "char_at",
    "deburr",
    "escape",
    "first_match_range",
    "first_match_substring",
    "format_words",
    "index_of",
    "index_of_pattern",
    "kebab_case",
    "length",
    "matches",
    "segment",
    "select_grammar",
    "snake_case",
    "start_case",
    "substring",
    "to_case",
    "to_code_unit_offset",
    "to_code_unit_range",
    "to_grapheme_range",
    "words",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "CaseFormatterComponent":
        try:
            from wordcase.spacy import CaseFormatterComponent
            return CaseFormatterComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install wordcase[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
