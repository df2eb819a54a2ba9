"""
Pattern matching submodule.

Thin interface over the ``regex`` engine: compile, test, first match,
all matches. Ranges are reported in code units (code points).

Basic usage:
    >>> from wordcase.patterns import compile_pattern
    >>> compile_pattern(r"\\d+").first_match_range("abc123")
    CodeUnitRange(start=3, length=3)
"""

from wordcase.patterns._engine import (
    CodeUnitRange,
    Matcher,
    PatternError,
    compile_pattern,
    escape,
)

__all__ = [
    "CodeUnitRange",
    "Matcher",
    "PatternError",
    "compile_pattern",
    "escape",
]
