# realiser/core/domain/categories.py
"""
Closed category sets for elements.

Lexical, phrase and document categories live in separate enums, so an
`is_a` test never confuses, e.g., the ADJECTIVE word class with the
ADJECTIVE_PHRASE phrase class.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union


class LexicalCategory(Enum):
    ANY = "any"
    SYMBOL = "symbol"
    NOUN = "noun"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    VERB = "verb"
    DETERMINER = "determiner"
    PRONOUN = "pronoun"
    CONJUNCTION = "conjunction"
    PREPOSITION = "preposition"
    COMPLEMENTISER = "complementiser"
    MODAL = "modal"
    AUXILIARY = "auxiliary"

    @classmethod
    def parse(cls, raw: Any) -> Optional["LexicalCategory"]:
        """Map a lexicon category label ("noun", "VERB") to the enum."""
        if isinstance(raw, LexicalCategory):
            return raw
        if not isinstance(raw, str):
            return None
        label = raw.strip().lower()
        for category in cls:
            if category.value == label:
                return category
        return None


class PhraseCategory(Enum):
    CLAUSE = "clause"
    ADJECTIVE_PHRASE = "adjective_phrase"
    ADVERB_PHRASE = "adverb_phrase"
    NOUN_PHRASE = "noun_phrase"
    PREPOSITIONAL_PHRASE = "prepositional_phrase"
    VERB_PHRASE = "verb_phrase"
    CANNED_TEXT = "canned_text"


class DocumentCategory(Enum):
    DOCUMENT = "document"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"
    LIST = "list"
    LIST_ITEM = "list_item"


ElementCategory = Union[LexicalCategory, PhraseCategory, DocumentCategory]


def is_lexical(category: Any) -> bool:
    return isinstance(category, LexicalCategory)


def is_phrase(category: Any) -> bool:
    return isinstance(category, PhraseCategory)


__all__ = [
    "LexicalCategory",
    "PhraseCategory",
    "DocumentCategory",
    "ElementCategory",
    "is_lexical",
    "is_phrase",
]
