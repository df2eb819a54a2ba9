"""Shared fixtures for wordcase tests."""

import pytest

# "hello" with an acute accent as a separate combining code point: six code
# points, five graphemes.
DECOMPOSED_HELLO = "he\u0301llo"


@pytest.fixture
def decomposed_hello() -> str:
    return DECOMPOSED_HELLO


@pytest.fixture
def sample_texts() -> list[str]:
    """Strings covering ASCII, accents, combining marks, emoji and CJK."""
    return [
        "",
        "foo bar",
        "fooBar",
        "XMLHttpRequest2",
        "some_value",
        DECOMPOSED_HELLO,
        "Crème Brûlée",
        "👍🏽 thumbs up",
        "日本語 text",
        "🇫🇷 flag",
    ]
