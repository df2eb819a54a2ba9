"""
spaCy integration for wordcase.

Provides a pipeline component that attaches word segmentation and case
styles to docs and tokens.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("case_formatter")
    >>> doc = nlp("XMLHttpRequest handler")
    >>> doc._.snake_case
    'xml_http_request_handler'
    >>> doc[0]._.kebab_case
    'xml-http-request'
"""

from typing import Optional, Sequence

from spacy.language import Language
from spacy.tokens import Doc, Token

from wordcase.case import CASE_STYLES, format_words
from wordcase.tokenizer import GLOBAL, STRATEGIES, segment

__all__ = [
    "CaseFormatterComponent",
    "create_case_formatter",
    "get_case_formatter_pipe",
]


def _extension_name(style: str) -> str:
    return f"{style}_case"


@Language.factory(
    "case_formatter",
    default_config={"styles": list(CASE_STYLES), "strategy": GLOBAL},
    assigns=["doc._.words"]
    + [f"doc._.{_extension_name(s)}" for s in CASE_STYLES]
    + [f"token._.{_extension_name(s)}" for s in CASE_STYLES],
)
def create_case_formatter(
    nlp: Language,
    name: str,
    styles: Sequence[str] = CASE_STYLES,
    strategy: str = GLOBAL,
) -> "CaseFormatterComponent":
    """Create a case formatter pipeline component."""
    return CaseFormatterComponent(nlp, name, styles=styles, strategy=strategy)


class CaseFormatterComponent:
    """
    spaCy pipeline component for word segmentation and case styles.

    Extensions:
        - Doc._.words: Words of the whole doc text.
        - Doc._.<style>_case: Doc text in each configured style.
        - Token._.<style>_case: Token text in each configured style.

    Token text is segmented on its own, so ``"fooBar"`` as one token gets
    ``token._.snake_case == "foo_bar"``.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        styles: Sequence[str] = CASE_STYLES,
        strategy: str = GLOBAL,
    ) -> None:
        self.name = name
        self.styles = list(styles)
        self.strategy = strategy

        unknown = [s for s in self.styles if s not in CASE_STYLES]
        if unknown:
            raise ValueError(
                f"Unknown case style(s): {', '.join(unknown)}. "
                f"Expected a subset of {', '.join(CASE_STYLES)}."
            )
        if strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy: {strategy}. Expected one of {', '.join(STRATEGIES)}."
            )

        if not Doc.has_extension("words"):
            Doc.set_extension("words", default=None)
        for style in self.styles:
            ext = _extension_name(style)
            if not Doc.has_extension(ext):
                Doc.set_extension(ext, default=None)
            if not Token.has_extension(ext):
                Token.set_extension(ext, default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc_words = segment(doc.text, self.strategy)
        doc._.words = [word.text for word in doc_words]
        for style in self.styles:
            doc._.set(_extension_name(style), format_words(doc_words, style))

        for token in doc:
            token_words = segment(token.text, self.strategy)
            for style in self.styles:
                token._.set(_extension_name(style), format_words(token_words, style))

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "CaseFormatterComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "CaseFormatterComponent":
        return self


def get_case_formatter_pipe(nlp: Language) -> Optional[CaseFormatterComponent]:
    """Get the case formatter component from a pipeline."""
    if "case_formatter" in nlp.pipe_names:
        return nlp.get_pipe("case_formatter")
    return None
