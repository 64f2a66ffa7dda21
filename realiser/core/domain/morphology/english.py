# realiser/core/domain/morphology/english.py
"""
English inflection rules.

Irregular forms come from the lexicon (plural, past, past_participle,
present3s, present_participle, comparative, superlative). Everything else is
built from the base form; `default_infl` selects the consonant-doubling
("reg_double"), Greco-Latin ("glreg") or uncountable ("uncount") paradigms.
"""

from __future__ import annotations

import re
from typing import Optional

from ..categories import PhraseCategory
from ..elements import InflectedWordElement, NLGElement, WordElement
from ..features import (
    DiscourseFunction,
    Feature,
    Form,
    Gender,
    InternalFeature,
    Language,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
)
from ..registry import HelperRole, register_helper
from .base import MorphologyHelper, lexical_form, number_of, person_of

_CONSONANT_Y = re.compile(r".*[b-df-hj-np-tv-z]y$")
_SIBILANT = re.compile(r".*([szx]|[cs]h)$")
_DROP_E = re.compile(r".*[^iyeo]e$")

REGULAR_DOUBLE = "reg_double"
GRECO_LATIN = "glreg"
UNCOUNTABLE = "uncount"

# pronoun forms indexed by number, then case, then person/gender
_SUBJECTIVE, _OBJECTIVE, _DETERMINER, _POSSESSIVE, _REFLEXIVE = range(5)
_PRONOUNS = {
    NumberAgreement.SINGULAR: (
        ("I", "you", "he", "she", "it"),
        ("me", "you", "him", "her", "it"),
        ("my", "your", "his", "her", "its"),
        ("mine", "yours", "his", "hers", "its"),
        ("myself", "yourself", "himself", "herself", "itself"),
    ),
    NumberAgreement.PLURAL: (
        ("we", "you", "they", "they", "they"),
        ("us", "you", "them", "them", "them"),
        ("our", "your", "their", "their", "their"),
        ("ours", "yours", "theirs", "theirs", "theirs"),
        ("ourselves", "yourselves", "themselves", "themselves", "themselves"),
    ),
}
_PERSONAL_FORMS = {
    form.lower() for table in _PRONOUNS.values() for row in table for form in row
}

_PLURAL_DETERMINERS = {"this": "these", "that": "those", "a": "some", "an": "some"}


def _double_final(base: str) -> str:
    return base + base[-1] if base else base


def build_regular_plural(base: str) -> str:
    if _CONSONANT_Y.match(base):
        return base[:-1] + "ies"
    if _SIBILANT.match(base):
        return base + "es"
    return base + "s"


def build_greco_latin_plural(base: str) -> str:
    if base.endswith("us"):
        return base[:-2] + "i"
    if base.endswith("ma"):
        return base + "ta"
    if base.endswith("a"):
        return base + "e"
    if base.endswith(("um", "on")):
        return base[:-2] + "a"
    if base.endswith("sis"):
        return base[:-2] + "es"
    if base.endswith("is"):
        return base[:-2] + "ides"
    if base.endswith("men"):
        return base[:-2] + "ina"
    if base.endswith("ex"):
        return base[:-2] + "ices"
    if base.endswith("x"):
        return base[:-1] + "ces"
    return base


def build_present3s(base: str) -> str:
    if _SIBILANT.match(base):
        return base + "es"
    if _CONSONANT_Y.match(base):
        return base[:-1] + "ies"
    return base + "s"


def build_past(base: str, double: bool = False) -> str:
    if double:
        return _double_final(base) + "ed"
    if base.endswith("e"):
        return base + "d"
    if _CONSONANT_Y.match(base):
        return base[:-1] + "ied"
    return base + "ed"


def build_present_participle(base: str, double: bool = False) -> str:
    if double:
        return _double_final(base) + "ing"
    if base.endswith("ie"):
        return base[:-2] + "ying"
    if _DROP_E.match(base):
        return base[:-1] + "ing"
    return base + "ing"


def build_comparative(base: str, double: bool = False) -> str:
    if double:
        return _double_final(base) + "er"
    if _CONSONANT_Y.match(base):
        return base[:-1] + "ier"
    if base.endswith("e"):
        return base + "r"
    return base + "er"


def build_superlative(base: str, double: bool = False) -> str:
    if double:
        return _double_final(base) + "est"
    if _CONSONANT_Y.match(base):
        return base[:-1] + "iest"
    if base.endswith("e"):
        return base + "st"
    return base + "est"


def add_possessive(text: str) -> str:
    return text + "'" if text.endswith("s") else text + "'s"


@register_helper(Language.ENGLISH, HelperRole.MORPHOLOGY)
class EnglishMorphologyHelper(MorphologyHelper):
    @staticmethod
    def inflection_pattern(element: InflectedWordElement, base_word: Optional[WordElement]) -> Optional[str]:
        return lexical_form(element, base_word, LexicalFeature.DEFAULT_INFL)

    # ------------------------------------------------------------------
    # Nouns
    # ------------------------------------------------------------------

    def do_noun(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        base = self.base_form(element, base_word)
        realised = base
        pattern = self.inflection_pattern(element, base_word)

        if element.is_plural() and not element.get_feature_as_boolean(LexicalFeature.PROPER):
            uncountable = pattern == UNCOUNTABLE or element.get_feature_as_boolean(LexicalFeature.NON_COUNT)
            if not uncountable:
                realised = lexical_form(element, base_word, LexicalFeature.PLURAL)
                if realised is None:
                    if pattern == GRECO_LATIN:
                        realised = build_greco_latin_plural(base)
                    else:
                        realised = build_regular_plural(base)

        if element.get_feature_as_boolean(Feature.POSSESSIVE):
            realised = add_possessive(realised)
        return self.spelled(realised, element)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def do_verb(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        base = self.base_form(element, base_word)
        number = number_of(element)
        person = person_of(element)
        tense = element.get_feature(Feature.TENSE)
        form = element.get_feature(Feature.FORM)
        double = self.inflection_pattern(element, base_word) == REGULAR_DOUBLE
        is_be = base.lower() == "be"
        singular = number != NumberAgreement.PLURAL

        if element.is_negated() or form == Form.BARE_INFINITIVE:
            realised = base
        elif form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            realised = lexical_form(element, base_word, LexicalFeature.PRESENT_PARTICIPLE)
            if realised is None:
                realised = "being" if is_be else build_present_participle(base, double)
        elif form == Form.PAST_PARTICIPLE:
            realised = lexical_form(element, base_word, LexicalFeature.PAST_PARTICIPLE)
            if realised is None:
                realised = "been" if is_be else build_past(base, double)
        elif tense == Tense.PAST:
            realised = lexical_form(element, base_word, LexicalFeature.PAST)
            if is_be:
                realised = "was" if singular and person in (Person.FIRST, Person.THIRD) else "were"
            elif realised is None:
                realised = build_past(base, double)
        elif singular and person == Person.THIRD and tense in (None, Tense.PRESENT):
            realised = lexical_form(element, base_word, LexicalFeature.PRESENT3S)
            if is_be:
                realised = "is"
            elif realised is None:
                realised = build_present3s(base)
        elif is_be:
            realised = "am" if singular and person == Person.FIRST else "are"
        else:
            realised = base
        return self.spelled(realised, element)

    # ------------------------------------------------------------------
    # Adjectives and adverbs
    # ------------------------------------------------------------------

    def do_adjective(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        base = self.base_form(element, base_word)
        double = self.inflection_pattern(element, base_word) == REGULAR_DOUBLE
        realised = base
        if element.get_feature_as_boolean(Feature.IS_COMPARATIVE):
            realised = lexical_form(element, base_word, LexicalFeature.COMPARATIVE) or build_comparative(
                base, double
            )
        elif element.get_feature_as_boolean(Feature.IS_SUPERLATIVE):
            realised = lexical_form(element, base_word, LexicalFeature.SUPERLATIVE) or build_superlative(
                base, double
            )
        return self.spelled(realised, element)

    def do_adverb(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        realised = self.base_form(element, base_word)
        if element.get_feature_as_boolean(Feature.IS_COMPARATIVE):
            realised = lexical_form(element, base_word, LexicalFeature.COMPARATIVE) or realised
        elif element.get_feature_as_boolean(Feature.IS_SUPERLATIVE):
            realised = lexical_form(element, base_word, LexicalFeature.SUPERLATIVE) or realised
        return self.spelled(realised, element)

    # ------------------------------------------------------------------
    # Pronouns and determiners
    # ------------------------------------------------------------------

    def do_pronoun(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        base = self.base_form(element, base_word)
        if base.lower() not in _PERSONAL_FORMS:
            return self.spelled(base, element)

        parent = element.parent
        function = element.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if function in (None, DiscourseFunction.SUBJECT, DiscourseFunction.HEAD) and parent is not None:
            if parent.is_a(PhraseCategory.NOUN_PHRASE) and parent.has_feature(InternalFeature.DISCOURSE_FUNCTION):
                function = parent.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        passive = element.get_feature_as_boolean(Feature.PASSIVE) or (
            parent is not None and parent.get_feature_as_boolean(Feature.PASSIVE)
        )

        if element.get_feature_as_boolean(LexicalFeature.REFLEXIVE):
            position = _REFLEXIVE
        elif element.get_feature_as_boolean(Feature.POSSESSIVE):
            position = _DETERMINER if function == DiscourseFunction.SPECIFIER else _POSSESSIVE
        elif (
            function is None
            or function == DiscourseFunction.SPECIFIER
            or (function == DiscourseFunction.SUBJECT and not passive)
            or (function == DiscourseFunction.OBJECT and passive)
        ):
            position = _SUBJECTIVE
        else:
            position = _OBJECTIVE

        person = person_of(element)
        if person == Person.FIRST:
            column = 0
        elif person == Person.SECOND:
            column = 1
        else:
            gender = element.get_feature(LexicalFeature.GENDER)
            column = {Gender.MASCULINE: 2, Gender.FEMININE: 3}.get(gender, 4)

        number = NumberAgreement.PLURAL if element.is_plural() else NumberAgreement.SINGULAR
        return self.spelled(_PRONOUNS[number][position][column], element)

    def do_determiner(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        base = self.base_form(element, base_word)
        realised = base
        if element.is_plural():
            realised = lexical_form(element, base_word, LexicalFeature.PLURAL) or _PLURAL_DETERMINERS.get(
                base.lower(), base
            )
        return self.spelled(realised, element)


__all__ = [
    "EnglishMorphologyHelper",
    "build_regular_plural",
    "build_greco_latin_plural",
    "build_present3s",
    "build_past",
    "build_present_participle",
    "build_comparative",
    "build_superlative",
    "add_possessive",
]
