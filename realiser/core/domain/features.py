# realiser/core/domain/features.py
"""
core/domain/features.py

Feature vocabulary shared by every stage of the realiser.

Feature *names* are enumerated keys grouped by namespace:

- Feature                 public grammatical features set by callers
- InternalFeature         slots and bookkeeping written by the syntax stage
- LexicalFeature          features stored on lexicon entries
- FrenchFeature           public features only meaningful in French
- FrenchLexicalFeature    French lexicon features
- FrenchInternalFeature   French syntax bookkeeping

All name enums derive from `str`, so a key coming from a JSON lexicon
("gender") and the enumerated key (LexicalFeature.GENDER) address the same
slot of an element's feature map. Unknown string keys are still accepted by
the feature map as an escape hatch for extension flags.

Feature *values* with a closed domain are `str` enums as well, which keeps
lexicon data and code comparisons interchangeable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .exceptions import LanguageNotSupportedError


# ---------------------------------------------------------------------------
# Feature names
# ---------------------------------------------------------------------------


class Feature(str, Enum):
    ADJECTIVE_ORDERING = "adjective_ordering"
    AGGREGATE_AUXILIARY = "aggregate_auxiliary"
    COMPLEMENTISER = "complementiser"
    CONJUNCTION = "conjunction"
    CONJUNCTION_TYPE = "conjunction_type"
    CUE_PHRASE = "cue_phrase"
    ELIDED = "elided"
    FORM = "form"
    INTERROGATIVE_TYPE = "interrogative_type"
    IS_COMPARATIVE = "is_comparative"
    IS_SUPERLATIVE = "is_superlative"
    MODAL = "modal"
    NEGATED = "negated"
    NUMBER = "number"
    PARTICLE = "particle"
    PASSIVE = "passive"
    PERFECT = "perfect"
    PERSON = "person"
    POSSESSIVE = "possessive"
    PROGRESSIVE = "progressive"
    PRONOMINAL = "pronominal"
    RAISE_SPECIFIER = "raise_specifier"
    SUPPRESSED_COMPLEMENTISER = "suppressed_complementiser"
    SUPPRESS_GENITIVE_IN_GERUND = "suppress_genitive_in_gerund"
    TENSE = "tense"


class InternalFeature(str, Enum):
    ACRONYM = "acronym"
    BASE_WORD = "base_word"
    CLAUSE_STATUS = "clause_status"
    COMPLEMENTS = "complements"
    COMPONENTS = "components"
    COORDINATES = "coordinates"
    DISCOURSE_FUNCTION = "discourse_function"
    FRONT_MODIFIERS = "front_modifiers"
    HEAD = "head"
    IGNORE_MODAL = "ignore_modal"
    INTERROGATIVE = "interrogative"
    NON_MORPH = "non_morph"
    POSTMODIFIERS = "postmodifiers"
    PREMODIFIERS = "premodifiers"
    RAISED = "raised"
    REALISE_AUXILIARY = "realise_auxiliary"
    SPECIFIER = "specifier"
    SUBJECTS = "subjects"
    VERB_PHRASE = "verb_phrase"


class LexicalFeature(str, Enum):
    ACRONYM_OF = "acronym_of"
    BASE_COMPARATIVE = "base_comparative"
    BASE_FORM = "base_form"
    BASE_SUPERLATIVE = "base_superlative"
    CLASSIFYING = "classifying"
    COLOUR = "colour"
    COMPARATIVE = "comparative"
    DEFAULT_INFL = "default_infl"
    DITRANSITIVE = "ditransitive"
    EXPLETIVE_SUBJECT = "expletive_subject"
    GENDER = "gender"
    INTRANSITIVE = "intransitive"
    NO_COMMA = "no_comma"
    NON_COUNT = "non_count"
    PAST = "past"
    PAST_PARTICIPLE = "past_participle"
    PLURAL = "plural"
    PREDICATIVE = "predicative"
    PRESENT3S = "present3s"
    PRESENT_PARTICIPLE = "present_participle"
    PROPER = "proper"
    QUALITATIVE = "qualitative"
    REFLEXIVE = "reflexive"
    SENTENCE_MODIFIER = "sentence_modifier"
    SUPERLATIVE = "superlative"
    TRANSITIVE = "transitive"
    VERB_MODIFIER = "verb_modifier"


class FrenchFeature(str, Enum):
    NEGATION_AUXILIARY = "negation_auxiliary"
    RELATIVE_PHRASE = "relative_phrase"


class FrenchLexicalFeature(str, Enum):
    ASPIRED_H = "aspired_h"
    AUXILIARY_ETRE = "auxiliary_etre"
    CLITIC_RISING = "clitic_rising"
    COPULAR = "copular"
    DETACHED = "detached"
    FEMININE_PAST_PARTICIPLE = "feminine_past_participle"
    FEMININE_PLURAL = "feminine_plural"
    FEMININE_SINGULAR = "feminine_singular"
    FUTURE_RADICAL = "future_radical"
    IMPARFAIT_RADICAL = "imparfait_radical"
    IMPERATIVE1P = "imperative1p"
    IMPERATIVE2P = "imperative2p"
    IMPERATIVE2S = "imperative2s"
    LIAISON = "liaison"
    NE_ONLY_NEGATION = "ne_only_negation"
    OPPOSITE_GENDER = "opposite_gender"
    PREPOSED = "preposed"
    PRESENT1P = "present1p"
    PRESENT1S = "present1s"
    PRESENT2P = "present2p"
    PRESENT2S = "present2s"
    PRESENT3P = "present3p"
    PRESENT3S = "present3s"
    PRONOUN_TYPE = "pronoun_type"
    REPEATED_CONJUNCTION = "repeated_conjunction"
    SUBJUNCTIVE1P = "subjunctive1p"
    SUBJUNCTIVE1S = "subjunctive1s"
    SUBJUNCTIVE2P = "subjunctive2p"
    SUBJUNCTIVE2S = "subjunctive2s"
    SUBJUNCTIVE3P = "subjunctive3p"
    SUBJUNCTIVE3S = "subjunctive3s"
    VOWEL_ELISION = "vowel_elision"


class FrenchInternalFeature(str, Enum):
    CLITIC = "clitic"
    RELATIVISED = "relativised"


# ---------------------------------------------------------------------------
# Closed value sets
# ---------------------------------------------------------------------------


class Tense(str, Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"
    CONDITIONAL = "conditional"


class Form(str, Enum):
    BARE_INFINITIVE = "bare_infinitive"
    GERUND = "gerund"
    IMPERATIVE = "imperative"
    INFINITIVE = "infinitive"
    NORMAL = "normal"
    PAST_PARTICIPLE = "past_participle"
    PRESENT_PARTICIPLE = "present_participle"
    SUBJUNCTIVE = "subjunctive"


class NumberAgreement(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"
    BOTH = "both"


class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class DiscourseFunction(str, Enum):
    AUXILIARY = "auxiliary"
    COMPLEMENT = "complement"
    CONJUNCTION = "conjunction"
    CUE_PHRASE = "cue_phrase"
    FRONT_MODIFIER = "front_modifier"
    HEAD = "head"
    INDIRECT_OBJECT = "indirect_object"
    OBJECT = "object"
    POST_MODIFIER = "post_modifier"
    PRE_MODIFIER = "pre_modifier"
    SPECIFIER = "specifier"
    SUBJECT = "subject"
    VERB_PHRASE = "verb_phrase"


class ClauseStatus(str, Enum):
    MATRIX = "matrix"
    SUBORDINATE = "subordinate"


class InterrogativeType(str, Enum):
    HOW = "how"
    HOW_MANY = "how_many"
    WHAT_OBJECT = "what_object"
    WHERE = "where"
    WHO_INDIRECT_OBJECT = "who_indirect_object"
    WHO_OBJECT = "who_object"
    WHO_SUBJECT = "who_subject"
    WHY = "why"
    YES_NO = "yes_no"

    @staticmethod
    def is_object(value: Any) -> bool:
        return value in (InterrogativeType.WHO_OBJECT, InterrogativeType.WHAT_OBJECT)

    @staticmethod
    def is_indirect_object(value: Any) -> bool:
        return value == InterrogativeType.WHO_INDIRECT_OBJECT


class PronounType(str, Enum):
    PERSONAL = "personal"
    SPECIAL_PERSONAL = "special_personal"
    NUMERAL = "numeral"
    POSSESSIVE = "possessive"
    DEMONSTRATIVE = "demonstrative"
    RELATIVE = "relative"
    INTERROGATIVE = "interrogative"
    INDEFINITE = "indefinite"


class Language(str, Enum):
    ENGLISH = "en"
    FRENCH = "fr"

    @classmethod
    def from_code(cls, code: Any) -> Optional["Language"]:
        """Return the language for an ISO code (case-insensitive), or None."""
        if isinstance(code, Language):
            return code
        if not isinstance(code, str):
            return None
        wanted = code.strip().lower()
        for language in cls:
            if language.value == wanted:
                return language
        return None


# Language assumed when an element cannot be traced to a factory or lexicon.
DEFAULT_LANGUAGE = Language.ENGLISH

_fallback_language: Language = DEFAULT_LANGUAGE


def get_default_language() -> Language:
    """The fallback language currently in force for this process."""
    return _fallback_language


def set_default_language(language: Any) -> Language:
    """
    Change the fallback language used by `NLGElement.language` for
    elements with no factory or lexicon in reach. Accepts a Language member
    or an ISO code; an unknown code raises LanguageNotSupportedError.
    """
    global _fallback_language
    resolved = Language.from_code(language)
    if resolved is None:
        raise LanguageNotSupportedError(language)
    _fallback_language = resolved
    return resolved


def reset_default_language() -> None:
    global _fallback_language
    _fallback_language = DEFAULT_LANGUAGE


# Enum domains used when coercing raw lexicon values.
VALUE_DOMAINS = {
    LexicalFeature.GENDER.value: Gender,
    Feature.NUMBER.value: NumberAgreement,
    Feature.PERSON.value: Person,
    Feature.TENSE.value: Tense,
    Feature.FORM.value: Form,
    InternalFeature.DISCOURSE_FUNCTION.value: DiscourseFunction,
    FrenchLexicalFeature.PRONOUN_TYPE.value: PronounType,
}


def coerce_value(name: str, value: Any) -> Any:
    """
    Convert a raw (JSON) feature value to its enum when the feature has a
    closed domain. Unknown values are returned untouched.
    """
    domain = VALUE_DOMAINS.get(name)
    if domain is None or not isinstance(value, str) or isinstance(value, Enum):
        return value
    try:
        return domain(value.strip().lower())
    except ValueError:
        return value


__all__ = [
    "Feature",
    "InternalFeature",
    "LexicalFeature",
    "FrenchFeature",
    "FrenchLexicalFeature",
    "FrenchInternalFeature",
    "Tense",
    "Form",
    "NumberAgreement",
    "Person",
    "Gender",
    "DiscourseFunction",
    "ClauseStatus",
    "InterrogativeType",
    "PronounType",
    "Language",
    "DEFAULT_LANGUAGE",
    "get_default_language",
    "set_default_language",
    "reset_default_language",
    "VALUE_DOMAINS",
    "coerce_value",
]
