# realiser/core/domain/morphology/base.py
"""
morphology/base.py

Shared part of the morphology stage.

This module defines:
- `MorphologyHelper`, the MORPHOLOGY-role base class. It dispatches an
  `InflectedWordElement` on its lexical category and returns the spelled
  out `StringElement`.
- Small utilities every rule set needs: reading an inflected form from the
  occurrence or its lexicon entry, the hyphenated particle suffix and the
  resolved agreement values with their documented defaults.

Morphology never raises for missing data. A form absent from the lexicon is
built by the regular rules of the category; a category without rules keeps
its base form.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from ..categories import LexicalCategory
from ..elements import InflectedWordElement, NLGElement, StringElement, WordElement
from ..features import Feature, Gender, LexicalFeature, NumberAgreement, Person, Tense

if TYPE_CHECKING:  # pragma: no cover
    from ..registry import HelperRegistry


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def lexical_form(element: NLGElement, base_word: Optional[WordElement], name: Any) -> Optional[str]:
    """
    Inflected form stored under `name`, looked up on the occurrence first and
    on its lexicon entry second. Empty strings count as missing.
    """
    value = element.get_feature_as_string(name)
    if not value and base_word is not None:
        value = base_word.get_feature_as_string(name)
    return value or None


def particle_suffix(element: NLGElement) -> str:
    """'-' + particle, or '' when the word carries no particle."""
    particle = element.get_feature_as_string(Feature.PARTICLE)
    if not particle:
        return ""
    return f"-{particle}"


def number_of(element: Optional[NLGElement]) -> NumberAgreement:
    value = element.get_feature(Feature.NUMBER) if element is not None else None
    return value if isinstance(value, NumberAgreement) else NumberAgreement.SINGULAR


def person_of(element: Optional[NLGElement]) -> Person:
    value = element.get_feature(Feature.PERSON) if element is not None else None
    return value if isinstance(value, Person) else Person.THIRD


def gender_of(element: Optional[NLGElement]) -> Gender:
    value = element.get_feature(LexicalFeature.GENDER) if element is not None else None
    return value if isinstance(value, Gender) else Gender.MASCULINE


def tense_of(element: Optional[NLGElement]) -> Tense:
    value = element.get_feature(Feature.TENSE) if element is not None else None
    return value if isinstance(value, Tense) else Tense.PRESENT


# ---------------------------------------------------------------------------
# Base helper
# ---------------------------------------------------------------------------


class MorphologyHelper:
    """
    Base of the per-language morphology rule sets.

    Subclasses override the `do_*` methods they have rules for; the defaults
    return the base form unchanged.
    """

    def __init__(self, registry: "HelperRegistry") -> None:
        self.registry = registry

    def realise(self, element: InflectedWordElement) -> Optional[NLGElement]:
        """
        Spell out one word occurrence.

        Args:
            element: the occurrence, with its agreement features resolved by
                the syntax stage. Its `parent` is still the syntax-stage
                container, which some agreement rules read.

        Returns:
            A StringElement carrying the final spelling.
        """
        handlers: Dict[Any, Callable[[InflectedWordElement, Optional[WordElement]], NLGElement]] = {
            LexicalCategory.PRONOUN: self.do_pronoun,
            LexicalCategory.NOUN: self.do_noun,
            LexicalCategory.VERB: self.do_verb,
            LexicalCategory.ADJECTIVE: self.do_adjective,
            LexicalCategory.ADVERB: self.do_adverb,
            LexicalCategory.DETERMINER: self.do_determiner,
        }
        handler = handlers.get(element.category)
        if handler is None:
            return self.do_default(element, element.base_word)
        return handler(element, element.base_word)

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def base_form(element: InflectedWordElement, base_word: Optional[WordElement]) -> str:
        """The occurrence's base form, else the lexicon entry's."""
        form = element.base_form
        if not form and base_word is not None:
            form = base_word.base_form
        return form or ""

    @staticmethod
    def spelled(text: Optional[str], element: NLGElement) -> StringElement:
        return StringElement(text, element)

    # -- per-category rules --------------------------------------------------

    def do_default(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.spelled(self.base_form(element, base_word), element)

    def do_pronoun(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.do_default(element, base_word)

    def do_noun(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.do_default(element, base_word)

    def do_verb(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.do_default(element, base_word)

    def do_adjective(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.do_default(element, base_word)

    def do_adverb(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.do_default(element, base_word)

    def do_determiner(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        return self.do_default(element, base_word)


__all__ = [
    "MorphologyHelper",
    "lexical_form",
    "particle_suffix",
    "number_of",
    "person_of",
    "gender_of",
    "tense_of",
]
