"""
Word segmentation submodule.

Re-exports the tokenizer and its grammar constants.
"""

from wordcase.tokenizer._rules import (
    BASIC,
    BASIC_WORD,
    COMPLEX,
    COMPLEX_WORD,
    GLOBAL,
    HAS_COMPLEX_WORD,
    PER_TOKEN,
    STRATEGIES,
    Word,
    segment,
    select_grammar,
    words,
)

__all__ = [
    "BASIC",
    "BASIC_WORD",
    "COMPLEX",
    "COMPLEX_WORD",
    "GLOBAL",
    "HAS_COMPLEX_WORD",
    "PER_TOKEN",
    "STRATEGIES",
    "Word",
    "segment",
    "select_grammar",
    "words",
]
