# realiser/core/domain/syntax/noun_phrase.py
"""
syntax/noun_phrase.py

Noun phrase realisation shared by the rule sets:

    specifier + premodifiers + head + complements + postmodifiers

or a single pronoun when the phrase is PRONOMINAL. Pronoun creation and
modifier placement are language-specific.
"""

from __future__ import annotations

import abc
from typing import Any, List, Optional

from ..categories import LexicalCategory
from ..elements import ListElement, NLGElement, PhraseElement
from ..features import DiscourseFunction, Feature, InternalFeature, LexicalFeature
from .phrase import SyntaxHelper

# Features of the noun phrase copied onto its realised head.
_HEAD_FEATURES = (
    LexicalFeature.GENDER,
    InternalFeature.ACRONYM,
    Feature.NUMBER,
    Feature.PERSON,
    Feature.POSSESSIVE,
    Feature.PASSIVE,
)


class AbstractNounPhraseHelper(SyntaxHelper, abc.ABC):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None or phrase.get_feature_as_boolean(Feature.ELIDED):
            return None
        realised = ListElement(phrase)
        if phrase.get_feature_as_boolean(Feature.PRONOMINAL):
            realised.add_component(self.create_pronoun(phrase))
            return realised

        self.realise_specifier(phrase, realised)
        self.realise_pre_modifiers(phrase, realised)
        self.realise_head_noun(phrase, realised)
        self.realise_list(realised, phrase.complements, DiscourseFunction.COMPLEMENT)
        self.realise_list(realised, phrase.post_modifiers, DiscourseFunction.POST_MODIFIER)
        return realised

    def realise_head_noun(self, phrase: PhraseElement, realised: ListElement) -> None:
        head = phrase.head
        if head is None:
            return
        current = self.realise_syntax(head)
        if current is None:
            return
        for name in _HEAD_FEATURES:
            current.set_feature(name, phrase.get_feature(name))
        current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SUBJECT)
        realised.add_component(current)

    def realise_pre_modifiers(self, phrase: PhraseElement, realised: ListElement) -> None:
        modifiers = phrase.pre_modifiers
        if phrase.get_feature_as_boolean(Feature.ADJECTIVE_ORDERING):
            modifiers = self.sort_pre_modifiers(modifiers)
        self.realise_list(realised, modifiers, DiscourseFunction.PRE_MODIFIER)

    def realise_specifier(self, phrase: PhraseElement, realised: ListElement) -> None:
        specifier = phrase.get_feature_as_element(InternalFeature.SPECIFIER)
        if specifier is None or phrase.get_feature_as_boolean(InternalFeature.RAISED):
            return
        current = self.realise_syntax(specifier)
        if current is None:
            return
        # a determiner agrees with the phrase, a possessive pronoun keeps its own number
        if not specifier.is_a(LexicalCategory.PRONOUN):
            current.set_feature(Feature.NUMBER, phrase.get_feature(Feature.NUMBER))
        current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SPECIFIER)
        realised.add_component(current)

    def sort_pre_modifiers(self, modifiers: List[NLGElement]) -> List[NLGElement]:
        return modifiers

    @abc.abstractmethod
    def create_pronoun(self, phrase: PhraseElement) -> NLGElement:
        """Pronoun standing for the whole phrase."""
        raise NotImplementedError

    @abc.abstractmethod
    def add_modifier(self, noun_phrase: PhraseElement, modifier: Any) -> None:
        """Attach `modifier` as a pre- or postmodifier of `noun_phrase`."""
        raise NotImplementedError


__all__ = ["AbstractNounPhraseHelper"]
