# realiser/core/domain/syntax/phrase.py
"""
syntax/phrase.py

Language-neutral part of the syntax stage.

This module defines:
- `SyntaxHelper`, the base of every syntax helper. Helpers are stateless
  strategies; they only keep a reference to the registry that built them
  and recurse through it.
- `GenericPhraseHelper`, the PHRASE-role helper: prepositional, adjective
  and adverb phrases, coordination, and the `realise_list` primitive the
  clause, noun phrase and verb phrase helpers build on.

Output shape
------------
Every phrase is realised into a `ListElement` that inherits the phrase's
category and features. Modifier and complement slots are realised into
nested sub-lists so that orthography can still see constituency (e.g. to
comma-separate premodifiers).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, List, Optional

import structlog

from ..categories import LexicalCategory, PhraseCategory
from ..elements import (
    CoordinatedPhraseElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
    WordElement,
)
from ..features import (
    DiscourseFunction,
    Feature,
    FrenchLexicalFeature,
    InternalFeature,
    LexicalFeature,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..registry import HelperRegistry

logger = structlog.get_logger()


# Features a coordination hands down to each of its coordinates.
_COORDINATION_FEATURES = (
    Feature.PROGRESSIVE,
    Feature.PERFECT,
    Feature.NUMBER,
    Feature.TENSE,
    Feature.PERSON,
    Feature.NEGATED,
    Feature.MODAL,
    Feature.FORM,
    InternalFeature.SPECIFIER,
    InternalFeature.DISCOURSE_FUNCTION,
    InternalFeature.CLAUSE_STATUS,
)


def specifier_form(element: Optional[NLGElement]) -> Optional[str]:
    """Base form of the specifier of a noun phrase (None if it has none)."""
    if element is None:
        return None
    specifier = element.get_feature_as_element(InternalFeature.SPECIFIER)
    if specifier is None:
        return None
    if isinstance(specifier, WordElement):
        return specifier.base_form
    return specifier.get_feature_as_string(LexicalFeature.BASE_FORM)


def is_word(element: Any, base_form: str, category: Optional[LexicalCategory] = None) -> bool:
    """
    True if `element` is the lexicon word `base_form` (or an occurrence of
    it). Words are identified by base form and category, never by object
    identity, so that words of different lexicons compare equal.
    """
    if isinstance(element, (WordElement, InflectedWordElement)):
        if element.base_form != base_form:
            return False
        return category is None or element.category == category
    if isinstance(element, str) and not isinstance(element, Enum):
        return element == base_form
    return False


def head_word(element: Optional[NLGElement]) -> Optional[WordElement]:
    """Lexicon word at the head of a word or phrase, if any."""
    if isinstance(element, WordElement):
        return element
    if isinstance(element, InflectedWordElement):
        return element.base_word
    if isinstance(element, PhraseElement):
        return head_word(element.head)
    return None


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


class SyntaxHelper:
    """Base of the syntax helpers: holds the registry used for recursion."""

    def __init__(self, registry: "HelperRegistry") -> None:
        self.registry = registry

    def realise_syntax(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        return self.registry.realise_syntax(element)

    def phrase_helper_for(self, element: NLGElement) -> "GenericPhraseHelper":
        return self.registry.phrase_helper(element.language)

    def realise_list(
        self,
        realised: ListElement,
        elements: Iterable[NLGElement],
        function: DiscourseFunction,
    ) -> None:
        self.phrase_helper_for(realised).realise_list(realised, elements, function)

    def report_unsupported(self, detail: str, **context) -> None:
        self.registry.report_unsupported(detail, **context)


# ---------------------------------------------------------------------------
# Generic phrases and coordination
# ---------------------------------------------------------------------------


class GenericPhraseHelper(SyntaxHelper):
    """
    Realises prepositional, adjective and adverb phrases and coordinated
    phrases. Language rule sets subclass it to override the expletive
    subject test or the specifier raising rule.
    """

    # -- simple phrases ----------------------------------------------------

    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None:
            return None
        realised = ListElement(phrase)
        self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)
        self.realise_head(phrase, realised)
        self.realise_complements(phrase, realised)
        self.realise_list(realised, phrase.post_modifiers, DiscourseFunction.POST_MODIFIER)
        return realised

    def realise_head(self, phrase: PhraseElement, realised: ListElement) -> None:
        head = phrase.head
        if head is None:
            return
        current = self.realise_syntax(head)
        if current is None:
            return
        if phrase.has_feature(Feature.IS_COMPARATIVE):
            current.set_feature(Feature.IS_COMPARATIVE, phrase.get_feature(Feature.IS_COMPARATIVE))
        elif phrase.has_feature(Feature.IS_SUPERLATIVE):
            current.set_feature(Feature.IS_SUPERLATIVE, phrase.get_feature(Feature.IS_SUPERLATIVE))
        current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.HEAD)
        realised.add_component(current)

    def realise_complements(self, phrase: PhraseElement, realised: ListElement) -> None:
        """Complements in order, joined by the additive conjunction."""
        first_processed = False
        for complement in phrase.complements:
            current = self.realise_syntax(complement)
            if current is None:
                continue
            current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.COMPLEMENT)
            if first_processed:
                lexicon = phrase.lexicon
                if lexicon is not None:
                    realised.add_component(InflectedWordElement(lexicon.get_addition_coord_conjunction()))
            else:
                first_processed = True
            realised.add_component(current)

    def realise_list(
        self,
        realised: ListElement,
        elements: Iterable[NLGElement],
        function: DiscourseFunction,
    ) -> None:
        """
        Realise `elements` into a sub-list of `realised`, tagging each with
        `function`. Nothing is added when every element realises to None.
        """
        sub_list = ListElement(realised)
        for element in elements:
            current = self.realise_syntax(element)
            if current is not None:
                current.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
                sub_list.add_component(current)
        if sub_list.get_children():
            realised.add_component(sub_list)

    def is_expletive_subject(self, phrase: PhraseElement) -> bool:
        subjects = phrase.get_feature_as_element_list(InternalFeature.SUBJECTS)
        if len(subjects) != 1:
            return False
        subject = subjects[0]
        if subject.is_a(PhraseCategory.NOUN_PHRASE):
            return subject.get_feature_as_boolean(LexicalFeature.EXPLETIVE_SUBJECT)
        return False

    # -- coordination ------------------------------------------------------

    def realise_coordinated(self, phrase: Optional[CoordinatedPhraseElement]) -> Optional[ListElement]:
        if phrase is None:
            return None

        realised = ListElement(phrase)
        self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)

        coordinated = CoordinatedPhraseElement(phrase.factory)
        conjunction = phrase.conjunction
        coordinated.set_feature(Feature.CONJUNCTION, conjunction)
        coordinated.set_feature(Feature.CONJUNCTION_TYPE, phrase.get_feature(Feature.CONJUNCTION_TYPE))

        children = phrase.get_children()
        if children:
            if phrase.get_feature_as_boolean(Feature.RAISE_SPECIFIER):
                self.raise_specifier(children)

            if phrase.has_feature(Feature.POSSESSIVE):
                children[-1].set_feature(Feature.POSSESSIVE, phrase.get_feature(Feature.POSSESSIVE))

            repeated = conjunction is not None and conjunction.get_feature_as_boolean(
                FrenchLexicalFeature.REPEATED_CONJUNCTION
            )
            for index, child in enumerate(children):
                self.set_child_features(phrase, child)
                if index > 0 and phrase.get_feature_as_boolean(Feature.AGGREGATE_AUXILIARY):
                    child.set_feature(InternalFeature.REALISE_AUXILIARY, False)
                if index > 0 and child.is_a(PhraseCategory.CLAUSE):
                    child.set_feature(
                        Feature.SUPPRESSED_COMPLEMENTISER,
                        phrase.get_feature(Feature.SUPPRESSED_COMPLEMENTISER),
                    )
                if conjunction is not None and (index != 0 or repeated):
                    conjunction_element = InflectedWordElement(conjunction)
                    conjunction_element.set_feature(
                        InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.CONJUNCTION
                    )
                    coordinated.add_coordinate(conjunction_element)
                coordinated.add_coordinate(self.realise_syntax(child))
            realised.add_component(coordinated)

        self.realise_list(realised, phrase.post_modifiers, DiscourseFunction.POST_MODIFIER)
        self.realise_list(realised, phrase.complements, DiscourseFunction.COMPLEMENT)
        return realised

    def set_child_features(self, phrase: CoordinatedPhraseElement, child: NLGElement) -> None:
        """Hand the coordination's grammatical features down to a coordinate."""
        for name in _COORDINATION_FEATURES:
            if phrase.has_feature(name):
                child.set_feature(name, phrase.get_feature(name))
        # nominal coordinates keep their own gender
        nominal = child.is_a(LexicalCategory.NOUN) or child.is_a(PhraseCategory.NOUN_PHRASE)
        if not nominal and phrase.has_feature(LexicalFeature.GENDER):
            child.set_feature(LexicalFeature.GENDER, phrase.get_feature(LexicalFeature.GENDER))
        if phrase.has_feature(Feature.INTERROGATIVE_TYPE):
            child.set_feature(InternalFeature.IGNORE_MODAL, True)

    def raise_specifier(self, children: List[NLGElement]) -> None:
        """
        When every coordinate has the same specifier, only the first one
        keeps it ("the cat and dog").
        """
        test = specifier_form(children[0])
        if test is None:
            return
        for child in children[1:]:
            if specifier_form(child) != test:
                return
        for child in children[1:]:
            child.set_feature(InternalFeature.RAISED, True)


__all__ = ["SyntaxHelper", "GenericPhraseHelper", "specifier_form", "head_word", "is_word"]
