"""
Case formatting submodule.

Basic usage:
    >>> from wordcase.case import snake_case, to_case
    >>> snake_case("XMLHttpRequest")
    'xml_http_request'
    >>> to_case("crème brûlée", "camel")
    'cremeBrulee'
"""

from wordcase.case._styles import (
    CASE_STYLES,
    camel_case,
    format_words,
    kebab_case,
    snake_case,
    start_case,
    to_case,
)

__all__ = [
    "CASE_STYLES",
    "camel_case",
    "format_words",
    "kebab_case",
    "snake_case",
    "start_case",
    "to_case",
]
