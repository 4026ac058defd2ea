"""
Search query value object.

Parses a free-text search term the way users type it into a search box:

    math beginners          -> either word
    "computer science"      -> the exact phrase
    "computer science" -art -> the phrase, excluding names containing "art"

Words are reduced to their word characters; punctuation never reaches the
index engine, so no user input can produce an invalid engine query.
"""

import re
from dataclasses import dataclass

from ..value_object import ValueObject

_PHRASE_PATTERN = re.compile(r'(-?)"([^"]*)"')
_WORD_PATTERN = re.compile(r"\w+", re.UNICODE)


def _words(text: str) -> list[str]:
    return _WORD_PATTERN.findall(text)


@dataclass(frozen=True)
class SearchQuery(ValueObject):
    """
    Parsed search term.

    Attributes:
        terms: Loose words; a name matching any of them is a hit.
        phrases: Quoted phrases; a name must contain every one of them.
        excluded: Words or phrases a matching name must not contain.
    """

    terms: tuple[str, ...] = ()
    phrases: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "SearchQuery":
        phrases: list[str] = []
        excluded: list[str] = []
        for match in _PHRASE_PATTERN.finditer(raw):
            phrase = " ".join(_words(match.group(2)))
            if not phrase:
                continue
            (excluded if match.group(1) else phrases).append(phrase)

        # Unbalanced quotes are treated as plain separators
        remainder = _PHRASE_PATTERN.sub(" ", raw).replace('"', " ")

        terms: list[str] = []
        for token in remainder.split():
            words = _words(token)
            if token.startswith("-"):
                excluded.extend(words)
            else:
                terms.extend(words)

        return cls(terms=tuple(terms), phrases=tuple(phrases), excluded=tuple(excluded))

    @property
    def is_empty(self) -> bool:
        """True when nothing can match: no words and no phrases to look for."""
        return not self.terms and not self.phrases
