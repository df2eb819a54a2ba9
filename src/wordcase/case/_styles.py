"""
Case styles.

Each style is a per-word transform plus a separator; :func:`format_words`
folds a word sequence with one of them.
"""

from __future__ import annotations

from typing import Callable, Iterable, Union

from wordcase.tokenizer import GLOBAL, Word, segment

__all__ = [
    "CASE_STYLES",
    "camel_case",
    "format_words",
    "kebab_case",
    "snake_case",
    "start_case",
    "to_case",
]


def _lower(index: int, word: str) -> str:
    return word.lower()


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _capitalize(index: int, word: str) -> str:
    return _upper_first(word)


def _camel(index: int, word: str) -> str:
    return _upper_first(word) if index > 0 else word.lower()


# style name -> (transform, separator)
_STYLES: dict[str, tuple[Callable[[int, str], str], str]] = {
    "camel": (_camel, ""),
    "kebab": (_lower, "-"),
    "snake": (_lower, "_"),
    "start": (_capitalize, " "),
}

CASE_STYLES = tuple(_STYLES)


def format_words(words: Iterable[Union[Word, str]], style: str) -> str:
    """
    Join ``words`` in the given case style.

    Args:
        words: Words in order, as :class:`Word` or plain strings
        style: One of ``CASE_STYLES``

    Returns:
        The formatted string; ``""`` for no words

    Raises:
        ValueError: for an unknown style
    """
    try:
        transform, separator = _STYLES[style]
    except KeyError:
        raise ValueError(
            f"Unknown case style: {style}. Expected one of {', '.join(CASE_STYLES)}."
        ) from None
    return separator.join(transform(i, str(word)) for i, word in enumerate(words))


def to_case(text: str, style: str, strategy: str = GLOBAL) -> str:
    """Deburr, segment and format ``text`` in ``style``."""
    return format_words(segment(text, strategy), style)


def camel_case(text: str) -> str:
    """
    Example:
        >>> camel_case("foo bar")
        'fooBar'
    """
    return to_case(text, "camel")


def kebab_case(text: str) -> str:
    """
    Example:
        >>> kebab_case("FooBar")
        'foo-bar'
    """
    return to_case(text, "kebab")


def snake_case(text: str) -> str:
    """
    Example:
        >>> snake_case("XMLHttpRequest")
        'xml_http_request'
    """
    return to_case(text, "snake")


def start_case(text: str) -> str:
    """
    Example:
        >>> start_case("some_value")
        'Some Value'
    """
    return to_case(text, "start")
