# realiser/core/domain/syntax/english/noun_phrase.py
"""
English noun phrases: adjective ordering, pronominalisation and modifier
placement.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ...categories import LexicalCategory, PhraseCategory
from ...elements import InflectedWordElement, NLGElement, PhraseElement, WordElement
from ...features import (
    DiscourseFunction,
    Feature,
    Gender,
    InternalFeature,
    Language,
    LexicalFeature,
    Person,
)
from ...phrases import AdjPhraseSpec
from ...registry import HelperRole, register_helper
from ..noun_phrase import AbstractNounPhraseHelper
from ..phrase import head_word

# Premodifier slots, left to right: "big red wooden box".
QUALITATIVE_POSITION = 1
COLOUR_POSITION = 2
CLASSIFYING_POSITION = 3
NOUN_POSITION = 4


def _is_adjectival(modifier: NLGElement) -> bool:
    return modifier.is_a(LexicalCategory.ADJECTIVE) or modifier.is_a(PhraseCategory.ADJECTIVE_PHRASE)


def min_position(modifier: NLGElement) -> int:
    """Leftmost slot the modifier may occupy."""
    if modifier.is_a(LexicalCategory.NOUN) or modifier.is_a(PhraseCategory.NOUN_PHRASE):
        return NOUN_POSITION
    if _is_adjectival(modifier):
        adjective = head_word(modifier)
        if adjective is None:
            return QUALITATIVE_POSITION
        if adjective.get_feature_as_boolean(LexicalFeature.QUALITATIVE):
            return QUALITATIVE_POSITION
        if adjective.get_feature_as_boolean(LexicalFeature.COLOUR):
            return COLOUR_POSITION
        if adjective.get_feature_as_boolean(LexicalFeature.CLASSIFYING):
            return CLASSIFYING_POSITION
    return QUALITATIVE_POSITION


def max_position(modifier: NLGElement) -> int:
    """Rightmost slot the modifier may occupy."""
    if not _is_adjectival(modifier):
        return NOUN_POSITION
    adjective = head_word(modifier)
    if adjective is None:
        return CLASSIFYING_POSITION
    if adjective.get_feature_as_boolean(LexicalFeature.CLASSIFYING):
        return CLASSIFYING_POSITION
    if adjective.get_feature_as_boolean(LexicalFeature.COLOUR):
        return COLOUR_POSITION
    if adjective.get_feature_as_boolean(LexicalFeature.QUALITATIVE):
        return QUALITATIVE_POSITION
    return CLASSIFYING_POSITION


def modifier_word(element: Optional[NLGElement]) -> Optional[WordElement]:
    if isinstance(element, WordElement):
        return element
    if isinstance(element, InflectedWordElement):
        return element.base_word
    return None


@register_helper(Language.ENGLISH, HelperRole.NOUN_PHRASE)
class EnglishNounPhraseHelper(AbstractNounPhraseHelper):
    def sort_pre_modifiers(self, modifiers: List[NLGElement]) -> List[NLGElement]:
        if len(modifiers) <= 1:
            return modifiers
        ordered = list(modifiers)
        changed = True
        while changed:
            changed = False
            for index in range(len(ordered) - 1):
                if min_position(ordered[index]) > max_position(ordered[index + 1]):
                    ordered[index], ordered[index + 1] = ordered[index + 1], ordered[index]
                    changed = True
        return ordered

    def create_pronoun(self, phrase: PhraseElement) -> NLGElement:
        person = phrase.get_feature(Feature.PERSON)
        if person == Person.FIRST:
            pronoun = "I"
        elif person == Person.SECOND:
            pronoun = "you"
        else:
            gender = phrase.get_feature(LexicalFeature.GENDER)
            if gender == Gender.FEMININE:
                pronoun = "she"
            elif gender == Gender.MASCULINE:
                pronoun = "he"
            else:
                pronoun = "it"

        word = phrase.factory.create_word(pronoun, LexicalCategory.PRONOUN)
        if isinstance(word, WordElement):
            element: NLGElement = InflectedWordElement(word)
            element.set_feature(LexicalFeature.GENDER, word.get_feature(LexicalFeature.GENDER))
        else:
            element = word

        element.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SPECIFIER)
        element.set_feature(Feature.POSSESSIVE, phrase.get_feature(Feature.POSSESSIVE))
        element.set_feature(Feature.NUMBER, phrase.get_feature(Feature.NUMBER))
        if phrase.has_feature(InternalFeature.DISCOURSE_FUNCTION):
            element.set_feature(
                InternalFeature.DISCOURSE_FUNCTION, phrase.get_feature(InternalFeature.DISCOURSE_FUNCTION)
            )
        return element

    def add_modifier(self, noun_phrase: PhraseElement, modifier: Any) -> None:
        """Adjectives (words or phrases) go before the noun, anything else after."""
        if modifier is None:
            return
        element: Optional[NLGElement] = None
        if isinstance(modifier, NLGElement):
            element = modifier
        elif isinstance(modifier, str) and modifier and " " not in modifier:
            element = noun_phrase.factory.create_word(modifier, LexicalCategory.ANY)

        if element is None:
            noun_phrase.add_post_modifier(str(modifier))
            return
        if isinstance(element, AdjPhraseSpec):
            noun_phrase.add_pre_modifier(element)
            return
        word = modifier_word(element)
        if word is not None and word.category == LexicalCategory.ADJECTIVE:
            noun_phrase.add_pre_modifier(word)
            return
        noun_phrase.add_post_modifier(element)
