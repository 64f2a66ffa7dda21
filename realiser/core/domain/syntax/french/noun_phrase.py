# realiser/core/domain/syntax/french/noun_phrase.py
"""
French noun phrases.

On top of the shared specifier / modifiers / head order this handles:

- the partitive article: "du vin" is realised as "de" + "le vin" so that
  morphophonology can contract it ("du", "de l'", "des"), and becomes bare
  "de" under negation ("il ne boit pas de vin");
- "un"/"une"/"des" turning into "de" after a negated verb;
- adverbs used as determiners taking "de" ("beaucoup de vin");
- the particle of demonstratives ("ce chien-là");
- pronominalisation through a lexicon query on the personal pronouns.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

from ...categories import LexicalCategory
from ...elements import (
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
    StringElement,
    WordElement,
)
from ...features import (
    DiscourseFunction,
    Feature,
    FrenchLexicalFeature,
    Gender,
    InternalFeature,
    Language,
    LexicalFeature,
    NumberAgreement,
    Person,
    PronounType,
)
from ...phrases import AdjPhraseSpec, NPPhraseSpec
from ...registry import HelperRole, register_helper
from ..noun_phrase import AbstractNounPhraseHelper
from ..phrase import is_word

logger = structlog.get_logger()


def is_ordinal(value: Any) -> bool:
    """Ordinal adjectives ("deuxième", "troisième") always precede the noun."""
    if isinstance(value, (WordElement, InflectedWordElement)):
        value = value.base_form
    elif isinstance(value, StringElement):
        value = value.realisation
    return isinstance(value, str) and value.endswith("ième")


def rightmost_terminal(element: Optional[NLGElement]) -> Optional[NLGElement]:
    """Last word-level element of a realised tree."""
    if element is None:
        return None
    children = element.get_children()
    if not children:
        return element
    for child in reversed(children):
        found = rightmost_terminal(child)
        if found is not None:
            return found
    return None


@register_helper(Language.FRENCH, HelperRole.NOUN_PHRASE)
class FrenchNounPhraseHelper(AbstractNounPhraseHelper):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None or phrase.get_feature_as_boolean(Feature.ELIDED):
            return None

        specifier = phrase.get_feature_as_element(InternalFeature.SPECIFIER)
        raised = phrase.get_feature_as_boolean(InternalFeature.RAISED)
        realised: Optional[ListElement]

        if phrase.get_feature_as_boolean(Feature.PRONOMINAL):
            realised = ListElement(phrase)
            realised.add_component(self.create_pronoun(phrase))
        elif not raised and is_word(specifier, "du", LexicalCategory.DETERMINER):
            realised = ListElement(phrase)
            self.add_de(phrase, realised)
            sub_phrase = NPPhraseSpec.copy_of(phrase)
            if self.check_negated_object(phrase):
                sub_phrase.set_specifier(None)
            else:
                sub_phrase.set_specifier(phrase.lexicon.require_word("le", LexicalCategory.DETERMINER))
            realised.add_component(super().realise(sub_phrase))
        elif (
            not raised
            and is_word(specifier, "un", LexicalCategory.DETERMINER)
            and self.check_negated_object(phrase)
        ):
            new_phrase = NPPhraseSpec.copy_of(phrase)
            new_phrase.set_specifier(phrase.lexicon.require_word("de", LexicalCategory.PREPOSITION))
            realised = super().realise(new_phrase)
        else:
            realised = super().realise(phrase)

        self.add_particle(phrase, realised)
        return realised

    def realise_specifier(self, phrase: PhraseElement, realised: ListElement) -> None:
        super().realise_specifier(phrase, realised)
        specifier = phrase.get_feature_as_element(InternalFeature.SPECIFIER)
        if (
            specifier is not None
            and not phrase.get_feature_as_boolean(InternalFeature.RAISED)
            and specifier.is_a(LexicalCategory.ADVERB)
        ):
            self.add_de(phrase, realised)

    def add_de(self, phrase: PhraseElement, realised: ListElement) -> None:
        de = self.realise_syntax(phrase.lexicon.require_word("de", LexicalCategory.PREPOSITION))
        if de is not None:
            de.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SPECIFIER)
            realised.add_component(de)

    def check_negated_object(self, phrase: PhraseElement) -> bool:
        """True for the direct object of an active negated verb."""
        parent = phrase.parent
        if parent is None:
            return False
        negated = parent.is_negated() or parent.check_if_ne_only_negation()
        return (
            negated
            and not parent.get_feature_as_boolean(Feature.PASSIVE)
            and phrase.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.OBJECT
        )

    def add_particle(self, phrase: PhraseElement, realised: Optional[ListElement]) -> None:
        specifier = phrase.get_feature_as_element(InternalFeature.SPECIFIER)
        if specifier is None or realised is None:
            return
        particle = specifier.get_feature_as_string(Feature.PARTICLE)
        if particle is None:
            return
        last = rightmost_terminal(realised)
        if isinstance(last, InflectedWordElement):
            last.set_feature(Feature.PARTICLE, particle)
        elif isinstance(last, StringElement):
            last.realisation = f"{last.realisation}-{particle}"

    def create_pronoun(self, phrase: PhraseElement) -> NLGElement:
        person = phrase.get_feature(Feature.PERSON)
        if not isinstance(person, Person):
            person = Person.THIRD
        number = phrase.get_feature(Feature.NUMBER)
        if not isinstance(number, NumberAgreement):
            number = NumberAgreement.SINGULAR

        query = {
            FrenchLexicalFeature.PRONOUN_TYPE: PronounType.PERSONAL,
            Feature.PERSON: person,
            Feature.NUMBER: number,
            Feature.POSSESSIVE: phrase.get_feature_as_boolean(Feature.POSSESSIVE),
        }
        # gender only distinguishes third person pronouns
        if person == Person.THIRD:
            gender = phrase.get_feature(LexicalFeature.GENDER)
            query[LexicalFeature.GENDER] = gender if isinstance(gender, Gender) else Gender.MASCULINE

        lexicon = phrase.lexicon
        word = lexicon.get_word_by_features(LexicalCategory.PRONOUN, query)
        if word is None:
            logger.debug("pronoun_not_found", person=person.value, number=number.value)
            word = lexicon.lookup_word("il", LexicalCategory.PRONOUN)

        element = InflectedWordElement(word)
        if phrase.has_feature(InternalFeature.DISCOURSE_FUNCTION):
            element.set_feature(
                InternalFeature.DISCOURSE_FUNCTION, phrase.get_feature(InternalFeature.DISCOURSE_FUNCTION)
            )
        if phrase.has_feature(Feature.PASSIVE):
            element.set_feature(Feature.PASSIVE, phrase.get_feature(Feature.PASSIVE))
        return element

    def add_modifier(self, noun_phrase: PhraseElement, modifier: Any) -> None:
        """
        Preposed adjectives ("petit", "beau") and ordinals go before the noun;
        every other modifier follows it ("un chat noir").
        """
        if modifier is None:
            return
        element: Optional[NLGElement] = None
        if isinstance(modifier, NLGElement):
            element = modifier
        elif isinstance(modifier, str):
            lexicon = noun_phrase.lexicon
            if lexicon.has_word(modifier):
                element = lexicon.lookup_word(modifier)
            elif is_ordinal(modifier) or (modifier and " " not in modifier):
                element = noun_phrase.factory.create_word(modifier, LexicalCategory.ADJECTIVE)

        if element is None:
            noun_phrase.add_post_modifier(str(modifier))
            return

        if isinstance(element, AdjPhraseSpec):
            head = element.head
            preposed = head is not None and (
                head.get_feature_as_boolean(FrenchLexicalFeature.PREPOSED) or is_ordinal(head)
            )
            if preposed and not element.complements:
                noun_phrase.add_pre_modifier(element)
                return

        word: Optional[WordElement] = None
        if isinstance(element, WordElement):
            word = element
        elif isinstance(element, InflectedWordElement):
            word = element.base_word
        if (
            word is not None
            and word.category == LexicalCategory.ADJECTIVE
            and (element.get_feature_as_boolean(FrenchLexicalFeature.PREPOSED) or is_ordinal(word))
        ):
            noun_phrase.add_pre_modifier(word)
            return
        noun_phrase.add_post_modifier(element)


__all__ = ["FrenchNounPhraseHelper", "is_ordinal", "rightmost_terminal"]
