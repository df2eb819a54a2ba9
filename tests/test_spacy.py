"""Tests for the spaCy pipeline component."""

import pytest

spacy = pytest.importorskip("spacy")

from wordcase.spacy import CaseFormatterComponent, get_case_formatter_pipe  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    for ext in ["words", "camel_case", "kebab_case", "snake_case", "start_case"]:
        if Doc.has_extension(ext):
            Doc.remove_extension(ext)
        if Token.has_extension(ext):
            Token.remove_extension(ext)


class TestCaseFormatter:
    def test_factory_registered(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter")
        assert "case_formatter" in nlp.pipe_names

    def test_doc_words(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter")
        doc = nlp("XMLHttpRequest handler")
        assert doc._.words == ["XML", "Http", "Request", "handler"]

    def test_doc_styles(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter")
        doc = nlp("Crème brûlée recipe")
        assert doc._.camel_case == "cremeBruleeRecipe"
        assert doc._.kebab_case == "creme-brulee-recipe"
        assert doc._.snake_case == "creme_brulee_recipe"
        assert doc._.start_case == "Creme Brulee Recipe"

    def test_token_styles(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter")
        doc = nlp("fooBar baz")
        assert doc[0]._.snake_case == "foo_bar"
        assert doc[0]._.start_case == "Foo Bar"
        assert doc[1]._.camel_case == "baz"

    def test_punctuation_token(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter")
        doc = nlp("hello !")
        assert doc[1]._.kebab_case == ""

    def test_configured_styles(self):
        from spacy.tokens import Doc

        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter", config={"styles": ["snake"]})
        doc = nlp("fooBar")
        assert doc._.snake_case == "foo_bar"
        assert not Doc.has_extension("camel_case")

    def test_per_token_strategy(self):
        nlp = spacy.blank("en")
        nlp.add_pipe("case_formatter", config={"strategy": "per_token"})
        doc = nlp("日本Tokyo fooBar")
        assert doc._.words == ["日本Tokyo", "foo", "Bar"]

    def test_unknown_style(self):
        nlp = spacy.blank("en")
        with pytest.raises(ValueError, match="Unknown case style"):
            CaseFormatterComponent(nlp, "case_formatter", styles=["title"])

    def test_unknown_strategy(self):
        nlp = spacy.blank("en")
        with pytest.raises(ValueError, match="Unknown strategy"):
            CaseFormatterComponent(nlp, "case_formatter", strategy="sometimes")

    def test_get_pipe(self):
        nlp = spacy.blank("en")
        assert get_case_formatter_pipe(nlp) is None
        nlp.add_pipe("case_formatter")
        assert isinstance(get_case_formatter_pipe(nlp), CaseFormatterComponent)

    def test_lazy_root_import(self):
        import wordcase

        assert wordcase.CaseFormatterComponent is CaseFormatterComponent

    def test_serialization_noop(self):
        nlp = spacy.blank("en")
        component = nlp.add_pipe("case_formatter")
        assert component.to_bytes() == b""
        assert component.from_bytes(b"") is component
