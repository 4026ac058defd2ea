"""Tests for SearchQuery value object."""

import pytest

from notedeck.domain.common.value_objects import SearchQuery


class TestSearchQuery:
    """Test suite for SearchQuery.parse."""

    def test_loose_terms(self) -> None:
        query = SearchQuery.parse("math  beginners")

        assert query.terms == ("math", "beginners")
        assert query.phrases == ()
        assert query.excluded == ()

    def test_quoted_phrase(self) -> None:
        query = SearchQuery.parse('"computer science" history')

        assert query.phrases == ("computer science",)
        assert query.terms == ("history",)

    def test_excluded_word_and_phrase(self) -> None:
        query = SearchQuery.parse('math -advanced -"ancient greece"')

        assert query.terms == ("math",)
        assert query.excluded == ("ancient greece", "advanced")

    def test_punctuation_is_stripped(self) -> None:
        query = SearchQuery.parse("C++ (basics) AND/OR NEAR*")

        assert query.terms == ("C", "basics", "AND", "OR", "NEAR")

    def test_phrase_punctuation_collapses_to_words(self) -> None:
        query = SearchQuery.parse('"state-of-the-art, methods"')

        assert query.phrases == ("state of the art methods",)

    def test_unbalanced_quote_treated_as_separator(self) -> None:
        query = SearchQuery.parse('"open ended')

        assert query.phrases == ()
        assert query.terms == ("open", "ended")

    def test_unicode_words(self) -> None:
        query = SearchQuery.parse("Café Müller")

        assert query.terms == ("Café", "Müller")

    @pytest.mark.parametrize("raw", ["", "   ", '""', "-only", "!!! ???", '-"just this"'])
    def test_is_empty(self, raw: str) -> None:
        assert SearchQuery.parse(raw).is_empty

    def test_not_empty_with_phrase_only(self) -> None:
        assert not SearchQuery.parse('"one phrase"').is_empty

    def test_is_frozen(self) -> None:
        query = SearchQuery.parse("x")
        with pytest.raises(AttributeError):
            query.terms = ("y",)  # type: ignore[misc]
