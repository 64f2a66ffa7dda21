# realiser/core/domain/syntax/verb_phrase.py
"""
syntax/verb_phrase.py

Verb phrase realisation shared by the rule sets.

A language builds the *verb group* of a phrase as a stack (bottom = main
verb side, top = first word spoken) and splits it into a main-verb stack
and an auxiliary stack. The realised phrase is then:

    auxiliaries + premodifiers + main verb + complements + postmodifiers

with the premodifiers moved after the main verb when auxiliaries are not
realised (aggregated coordinates) and the head is a copula.
"""

from __future__ import annotations

import abc
from typing import Any, List, Optional

from ..elements import InflectedWordElement, ListElement, NLGElement, PhraseElement, WordElement
from ..features import (
    DiscourseFunction,
    Feature,
    InternalFeature,
    InterrogativeType,
    Tense,
)
from .phrase import SyntaxHelper

# Verb groups are plain lists used as stacks: append = push, pop = pop.
VerbGroup = List[NLGElement]


def realises_auxiliary(phrase: NLGElement) -> bool:
    """True unless REALISE_AUXILIARY is explicitly False."""
    if not phrase.has_feature(InternalFeature.REALISE_AUXILIARY):
        return True
    return phrase.get_feature_as_boolean(InternalFeature.REALISE_AUXILIARY)


def complement_function(complement: NLGElement) -> DiscourseFunction:
    function = complement.get_feature(InternalFeature.DISCOURSE_FUNCTION)
    return function if isinstance(function, DiscourseFunction) else DiscourseFunction.COMPLEMENT


class AbstractVerbPhraseHelper(SyntaxHelper, abc.ABC):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None:
            return None

        verb_group = self.create_verb_group(phrase)
        main_verb: VerbGroup = []
        auxiliaries: VerbGroup = []
        self.split_verb_group(verb_group, main_verb, auxiliaries)

        realised = ListElement(phrase)
        if realises_auxiliary(phrase):
            self.realise_auxiliaries(realised, auxiliaries)
            self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)
            self.realise_main_verb(phrase, main_verb, realised)
        elif self.is_copular(phrase.head):
            self.realise_main_verb(phrase, main_verb, realised)
            self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)
        else:
            self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)
            self.realise_main_verb(phrase, main_verb, realised)

        self.realise_complements(phrase, realised)
        self.realise_list(realised, phrase.post_modifiers, DiscourseFunction.POST_MODIFIER)
        return realised

    # ------------------------------------------------------------------
    # Verb group
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def create_verb_group(self, phrase: PhraseElement) -> VerbGroup:
        """Stack of verb group components, top = first in surface order."""
        raise NotImplementedError

    @abc.abstractmethod
    def split_verb_group(
        self, verb_group: VerbGroup, main_verb: VerbGroup, auxiliaries: VerbGroup
    ) -> None:
        raise NotImplementedError

    def grab_head_verb(self, phrase: PhraseElement, tense: Tense, has_modal: bool) -> Optional[NLGElement]:
        """The head verb as a fresh occurrence; the front of the group under construction."""
        front = phrase.head
        if isinstance(front, WordElement):
            front = InflectedWordElement(front)
        if front is not None:
            if tense == Tense.FUTURE:
                front.set_tense(Tense.FUTURE)
            if has_modal:
                front.set_negated(False)
        return front

    def push_if_modal(
        self, has_modal: bool, phrase: PhraseElement, front: Optional[NLGElement], verb_group: VerbGroup
    ) -> Optional[NLGElement]:
        """Below a modal the front verb stays uninflected and the modal becomes the front."""
        if not has_modal or phrase.get_feature_as_boolean(InternalFeature.IGNORE_MODAL):
            return front
        if front is not None:
            front.set_feature(InternalFeature.NON_MORPH, True)
            verb_group.append(front)
        return None

    def realise_auxiliaries(self, realised: ListElement, auxiliaries: VerbGroup) -> None:
        while auxiliaries:
            current = self.realise_syntax(auxiliaries.pop())
            if current is not None:
                realised.add_component(current)
                current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.AUXILIARY)

    def realise_main_verb(self, phrase: PhraseElement, main_verb: VerbGroup, realised: ListElement) -> None:
        interrogative_type = phrase.get_feature(Feature.INTERROGATIVE_TYPE)
        while main_verb:
            element = main_verb.pop()
            if interrogative_type is not None:
                element.set_feature(Feature.INTERROGATIVE_TYPE, interrogative_type)
            current = self.realise_syntax(element)
            if current is not None:
                realised.add_component(current)

    # ------------------------------------------------------------------
    # Complements
    # ------------------------------------------------------------------

    def realise_complements(self, phrase: PhraseElement, realised: ListElement) -> None:
        """
        Indirect objects, then direct objects, then other complements.
        Passive phrases drop their objects (they are realised as subjects);
        wh-questions drop the questioned object.
        """
        indirects: List[NLGElement] = []
        directs: List[NLGElement] = []
        unknowns: List[NLGElement] = []

        for complement in phrase.complements:
            function = complement_function(complement)
            current = self.realise_syntax(complement)
            if current is None:
                continue
            current.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
            if function == DiscourseFunction.INDIRECT_OBJECT:
                indirects.append(current)
            elif function == DiscourseFunction.OBJECT:
                directs.append(current)
            else:
                unknowns.append(current)

        interrogative_type = phrase.get_feature(Feature.INTERROGATIVE_TYPE)
        if not InterrogativeType.is_indirect_object(interrogative_type):
            realised.add_components(indirects)
        if not phrase.get_feature_as_boolean(Feature.PASSIVE):
            if not InterrogativeType.is_object(interrogative_type):
                realised.add_components(directs)
            realised.add_components(unknowns)

    # ------------------------------------------------------------------
    # Language hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def is_copular(self, element: Optional[NLGElement]) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def add_modifier(self, verb_phrase: PhraseElement, modifier: Any) -> None:
        raise NotImplementedError


__all__ = [
    "AbstractVerbPhraseHelper",
    "VerbGroup",
    "realises_auxiliary",
    "complement_function",
]
