# realiser/core/domain/morphology/french.py
"""
morphology/french.py

French inflection rules.

Responsibilities:
- determiners: plural, feminine singular and feminine plural forms from the
  lexicon ("le" -> "la" / "les"), "des" -> "de" before premodified nouns;
- adjectives: feminine and plural built by the general rules (sections
  528-539 of Grevisse), agreeing with the noun phrase they modify or, as an
  attribute of the direct object, with that object;
- nouns: regular plural, opposite-gender forms ("acteur" -> "actrice");
- verbs: present, imperative, subjunctive, future, conditional, imparfait
  and participles, from lexicon forms when present and built by conjugation
  group otherwise;
- pronouns: personal pronouns re-selected from the lexicon by person,
  number, gender, function, reflexivity and detachment; relative pronouns
  agreeing with their antecedent ("lequel" -> "laquelle").

Irregular forms are lexicon data. The builders below implement only the
regular paradigms, so an unknown irregular verb falls back to them.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from ..categories import LexicalCategory, PhraseCategory
from ..elements import (
    CoordinatedPhraseElement,
    InflectedWordElement,
    NLGElement,
    WordElement,
)
from ..features import (
    DiscourseFunction,
    Feature,
    Form,
    FrenchInternalFeature,
    FrenchLexicalFeature,
    Gender,
    InternalFeature,
    Language,
    LexicalFeature,
    NumberAgreement,
    Person,
    PronounType,
    Tense,
)
from ..registry import HelperRole, register_helper
from .base import MorphologyHelper, gender_of, lexical_form, number_of, particle_suffix, person_of

_A_O = re.compile(r"^[aäàâoô]")

_MODIFIER_FUNCTIONS = (
    DiscourseFunction.FRONT_MODIFIER,
    DiscourseFunction.PRE_MODIFIER,
    DiscourseFunction.POST_MODIFIER,
)

_PERSON_INDEX = {Person.FIRST: 0, Person.SECOND: 1, Person.THIRD: 2}

# singular present endings by verb ending category (1: -er, 2: -ir/-oir, 3: -re)
_PRESENT_SINGULAR = {
    0: ("", "", ""),
    1: ("e", "es", "e"),
    2: ("s", "s", "t"),
    3: ("s", "s", ""),
}
_PRESENT_PLURAL = ("ons", "ez", "ent")
_SUBJUNCTIVE_ENDINGS = (("e", "es", "e"), ("ions", "iez", "ent"))
_FUTURE_ENDINGS = (("ai", "as", "a"), ("ons", "ez", "ont"))
_IMPARFAIT_ENDINGS = (("ais", "ais", "ait"), ("ions", "iez", "aient"))

_PRESENT_FEATURES = (
    (
        FrenchLexicalFeature.PRESENT1S,
        FrenchLexicalFeature.PRESENT2S,
        FrenchLexicalFeature.PRESENT3S,
    ),
    (
        FrenchLexicalFeature.PRESENT1P,
        FrenchLexicalFeature.PRESENT2P,
        FrenchLexicalFeature.PRESENT3P,
    ),
)
_SUBJUNCTIVE_FEATURES = (
    (
        FrenchLexicalFeature.SUBJUNCTIVE1S,
        FrenchLexicalFeature.SUBJUNCTIVE2S,
        FrenchLexicalFeature.SUBJUNCTIVE3S,
    ),
    (
        FrenchLexicalFeature.SUBJUNCTIVE1P,
        FrenchLexicalFeature.SUBJUNCTIVE2P,
        FrenchLexicalFeature.SUBJUNCTIVE3P,
    ),
)


def _cell(table: Tuple[Tuple[Any, ...], ...], number: NumberAgreement, person: Person) -> Any:
    return table[1 if number == NumberAgreement.PLURAL else 0][_PERSON_INDEX[person]]


# ---------------------------------------------------------------------------
# Regular builders
# ---------------------------------------------------------------------------


def build_regular_plural(form: str) -> str:
    """Plural of a noun or adjective ("chat" -> "chats", "cheval" -> "chevaux")."""
    if form.endswith(("s", "x", "z")):
        return form
    # "au" also covers "-eau"
    if form.endswith(("au", "eu")):
        return form + "x"
    if form.endswith("al"):
        return form[:-2] + "aux"
    return form + "s"


def build_feminine_adjective(form: str, has_variant: Any = None) -> str:
    """
    Feminine of a masculine adjective by the general rules. `has_variant`
    tells whether a form exists in the lexicon; it decides "-eur" -> "-euse"
    (when the matching "-ant" participle exists) over "-eur" -> "-eure".
    """
    if form.endswith("e"):
        return form
    if form.endswith(("el", "eil")):
        return form + "le"
    if form.endswith(("en", "on")):
        return form + "ne"
    if form.endswith("et"):
        return form + "te"
    if form.endswith("eux"):
        return form[:-1] + "se"
    if form.endswith("er"):
        return form[:-2] + "ère"
    if form.endswith("eau"):
        return form[:-3] + "elle"
    if form.endswith("gu"):
        return form + "ë"
    if form.endswith("g"):
        return form + "ue"
    if form.endswith("eur") and has_variant is not None and has_variant(form[:-3] + "ant"):
        return form[:-1] + "se"
    if form.endswith("teur"):
        return form[:-4] + "trice"
    if form.endswith("if"):
        return form[:-1] + "ve"
    return form + "e"


def present_radical(base: str, number: NumberAgreement) -> Tuple[str, int]:
    """
    Present radical and verb ending category (0 when the infinitive ending
    is not recognised). Modelled on "aimer", "voir", "finir", "vendre" and
    "mettre".
    """
    plural = number == NumberAgreement.PLURAL
    if base.endswith("er"):
        return base[:-2], 1
    if base.endswith("oir"):
        return base[:-2] + ("y" if plural else "i"), 2
    if base.endswith("ir"):
        radical = base[:-1]
        if plural:
            radical += "ss"
        elif radical.endswith("ï"):
            # "haïr" -> "je hais"
            radical = radical[:-1] + "i"
        return radical, 2
    if base.endswith("re"):
        radical = base[:-2]
        if not plural and radical.endswith("t"):
            radical = radical[:-1]
        return radical, 3
    return base, 0


def add_suffix(radical: str, suffix: str) -> str:
    """
    Join a radical and an ending (sections 760-761 of Grevisse): "c" -> "ç"
    and "g" -> "ge" before a/o; before a mute "e", "y" -> "i" and a final
    e/é of the radical's last syllable -> "è".
    """
    length = len(radical)
    if _A_O.match(suffix):
        if radical.endswith("c"):
            radical = radical[:-1] + "ç"
        elif radical.endswith("g"):
            radical += "e"
    if suffix != "ez" and suffix.startswith("e"):
        if radical.endswith("y") and not radical.endswith("ey"):
            radical = radical[:-1] + "i"
        if length >= 2 and radical[length - 2] in ("e", "é"):
            radical = radical[: length - 2] + "è" + radical[length - 1:]
    return radical + suffix


def build_present_verb(base: str, number: NumberAgreement, person: Person) -> str:
    radical, category = present_radical(base, number)
    if number == NumberAgreement.PLURAL:
        suffix = _PRESENT_PLURAL[_PERSON_INDEX[person]] if category else ""
    else:
        suffix = _PRESENT_SINGULAR[category][_PERSON_INDEX[person]]
    return add_suffix(radical, suffix)


def build_subjunctive_verb(base: str, number: NumberAgreement, person: Person) -> str:
    # every person is built on the plural radical ("finiss-e", "mett-e")
    radical, _ = present_radical(base, NumberAgreement.PLURAL)
    return add_suffix(radical, _cell(_SUBJUNCTIVE_ENDINGS, number, person))


def build_past_participle(base: str) -> str:
    if base.endswith("er"):
        return base[:-2] + "é"
    if base.endswith("oir"):
        return base[:-3] + "u"
    if base.endswith("ir"):
        return base[:-1]
    if base.endswith("mettre"):
        return base[:-5] + "is"
    if base.endswith("re"):
        return base[:-2] + "u"
    return base


def build_future_radical(base: str) -> str:
    if base.endswith("e"):
        # "mettre" -> "mettr"
        return base[:-1]
    if base.endswith("yer"):
        return base[:-3] + "ier"
    if len(base) >= 4 and base[-4] in ("e", "é"):
        # "lever" -> "lèver"
        return base[:-4] + "è" + base[-3:]
    return base


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


@register_helper(Language.FRENCH, HelperRole.MORPHOLOGY)
class FrenchMorphologyHelper(MorphologyHelper):
    # ------------------------------------------------------------------
    # Determiners
    # ------------------------------------------------------------------

    def do_determiner(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        parent = element.parent
        gender = (parent if parent is not None else element).get_feature(LexicalFeature.GENDER)
        feminine = gender == Gender.FEMININE

        plural_form = lexical_form(element, base_word, LexicalFeature.PLURAL)
        feminine_singular = lexical_form(element, base_word, FrenchLexicalFeature.FEMININE_SINGULAR)
        if element.is_plural() and plural_form is not None:
            realised = plural_form
            feminine_plural = lexical_form(element, base_word, FrenchLexicalFeature.FEMININE_PLURAL)
            if feminine and feminine_plural is not None:
                realised = feminine_plural
            # "des" -> "de" in front of noun premodifiers
            if parent is not None and realised == "des":
                if parent.get_feature_as_element_list(InternalFeature.PREMODIFIERS):
                    realised = "de"
        elif feminine and feminine_singular is not None:
            realised = feminine_singular
        else:
            realised = self.base_form(element, base_word)
            particle = particle_suffix(element)
            if particle:
                realised = realised.replace(particle, "", 1).strip()
        return self.spelled(realised, element)

    # ------------------------------------------------------------------
    # Adjectives
    # ------------------------------------------------------------------

    @staticmethod
    def direct_object_of(phrase: NLGElement) -> Optional[NLGElement]:
        direct_object = None
        for complement in phrase.get_feature_as_element_list(InternalFeature.COMPLEMENTS):
            if complement.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.OBJECT:
                direct_object = complement
        return direct_object

    def agreement_source(self, element: InflectedWordElement) -> NLGElement:
        """
        Element an adjective takes its gender and number from: the parent,
        or the grandparent when the parent has no gender; the direct object
        when the adjective modifies a verb phrase.
        """
        parent = element.parent
        function = element.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if parent is None:
            return element
        if function == DiscourseFunction.HEAD:
            function = parent.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if not parent.has_feature(LexicalFeature.GENDER) and parent.parent is not None:
            parent = parent.parent
        if parent.is_a(PhraseCategory.VERB_PHRASE) and function in _MODIFIER_FUNCTIONS:
            direct_object = self.direct_object_of(parent)
            if direct_object is not None:
                return direct_object
        return parent

    def do_adjective(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        realised = self.base_form(element, base_word)
        # comparatives are built by syntax ("plus grand"); only "meilleur" and the like come from here
        if element.get_feature_as_boolean(Feature.IS_COMPARATIVE):
            realised = lexical_form(element, base_word, LexicalFeature.COMPARATIVE) or realised

        source = self.agreement_source(element)
        feminine = source.get_feature(LexicalFeature.GENDER) == Gender.FEMININE

        if feminine:
            feminine_singular = element.get_feature_as_string(FrenchLexicalFeature.FEMININE_SINGULAR)
            if feminine_singular:
                realised = feminine_singular
            else:
                lexicon = element.lexicon
                has_variant = lexicon.has_word_from_variant if lexicon is not None else None
                realised = build_feminine_adjective(realised, has_variant)

        if source.is_plural():
            if feminine:
                feminine_plural = element.get_feature_as_string(FrenchLexicalFeature.FEMININE_PLURAL)
                realised = feminine_plural or realised + "s"
            else:
                realised = element.get_feature_as_string(LexicalFeature.PLURAL) or build_regular_plural(realised)

        return self.spelled(realised + particle_suffix(element), element)

    # ------------------------------------------------------------------
    # Nouns
    # ------------------------------------------------------------------

    def do_noun(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        if base_word is not None:
            wanted = element.get_feature(LexicalFeature.GENDER)
            own = base_word.get_feature(LexicalFeature.GENDER)
            opposite = {Gender.MASCULINE: Gender.FEMININE, Gender.FEMININE: Gender.MASCULINE}
            if own in opposite and wanted == opposite[own]:
                form = base_word.get_feature_as_string(FrenchLexicalFeature.OPPOSITE_GENDER)
                if form and base_word.lexicon is not None:
                    element.set_feature(LexicalFeature.BASE_FORM, form)
                    base_word = base_word.lexicon.lookup_word(form, LexicalCategory.NOUN)
                    element.base_word = base_word

        realised = self.base_form(element, base_word)
        if element.is_plural() and not element.get_feature_as_boolean(LexicalFeature.PROPER):
            realised = lexical_form(element, base_word, LexicalFeature.PLURAL) or build_regular_plural(realised)
        return self.spelled(realised + particle_suffix(element), element)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def participle_agreement(
        self, element: InflectedWordElement, gender: Gender, number: NumberAgreement
    ) -> Tuple[Gender, NumberAgreement]:
        """
        Participles outside a verb phrase (epithets, subject attributes)
        agree like adjectives; inside one, only as attribute of the direct
        object. Otherwise the syntax stage has already set the features.
        """
        parent = element.parent
        if parent is None:
            return gender, number
        function = element.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        source: Optional[NLGElement] = None
        if not parent.is_a(PhraseCategory.VERB_PHRASE) or function == DiscourseFunction.OBJECT:
            if not parent.has_feature(LexicalFeature.GENDER) and parent.parent is not None:
                parent = parent.parent
            source = parent
        elif function in _MODIFIER_FUNCTIONS:
            source = self.direct_object_of(parent) or parent
        if source is None:
            return gender, number

        source_gender = source.get_feature(LexicalFeature.GENDER)
        source_number = source.get_feature(Feature.NUMBER)
        return (
            source_gender if isinstance(source_gender, Gender) else gender,
            source_number if isinstance(source_number, NumberAgreement) else number,
        )

    def imparfait_radical(self, element: InflectedWordElement, base_word: Optional[WordElement], base: str) -> str:
        """Radical of the imparfait and the present participle ("finiss")."""
        radical = lexical_form(element, base_word, FrenchLexicalFeature.IMPARFAIT_RADICAL)
        if radical is not None:
            return radical
        radical = lexical_form(element, base_word, FrenchLexicalFeature.PRESENT1P)
        if radical is None:
            radical = build_present_verb(base, NumberAgreement.PLURAL, Person.FIRST)
        if len(radical) > 3:
            radical = radical[:-3]
        return radical

    def do_verb(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        number = number_of(element)
        person = person_of(element)
        gender = gender_of(element)
        tense = element.get_feature(Feature.TENSE)
        form = element.get_feature(Feature.FORM)
        if number == NumberAgreement.BOTH:
            number = NumberAgreement.SINGULAR

        if form in (Form.PRESENT_PARTICIPLE, Form.PAST_PARTICIPLE, Form.GERUND):
            gender, number = self.participle_agreement(element, gender, number)

        base = self.base_form(element, base_word)
        realised: Optional[str]

        if form in (Form.BARE_INFINITIVE, Form.INFINITIVE):
            realised = base

        elif form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            realised = lexical_form(element, base_word, LexicalFeature.PRESENT_PARTICIPLE)
            if realised is None:
                realised = self.imparfait_radical(element, base_word, base) + "ant"
            # only set by syntax when the participle is used as an adjective
            if gender == Gender.FEMININE:
                realised += "e"
            if number == NumberAgreement.PLURAL:
                realised += "s"

        elif form == Form.PAST_PARTICIPLE:
            realised = lexical_form(element, base_word, LexicalFeature.PAST_PARTICIPLE) or build_past_participle(base)
            if gender == Gender.FEMININE:
                feminine = lexical_form(element, base_word, FrenchLexicalFeature.FEMININE_PAST_PARTICIPLE)
                realised = feminine or realised + "e"
            if number == NumberAgreement.PLURAL and not realised.endswith("s"):
                realised += "s"

        elif form == Form.SUBJUNCTIVE:
            realised = lexical_form(element, base_word, _cell(_SUBJUNCTIVE_FEATURES, number, person))
            if realised is None:
                realised = build_subjunctive_verb(base, number, person)

        elif tense in (None, Tense.PRESENT) or form == Form.IMPERATIVE:
            realised = None
            if form == Form.IMPERATIVE:
                realised, person = self.imperative_form(element, base_word, number, person)
            if realised is None:
                realised = lexical_form(element, base_word, _cell(_PRESENT_FEATURES, number, person))
            if realised is None:
                realised = build_present_verb(base, number, person)

        elif tense in (Tense.FUTURE, Tense.CONDITIONAL):
            radical = lexical_form(element, base_word, FrenchLexicalFeature.FUTURE_RADICAL)
            if radical is None:
                radical = build_future_radical(base)
            endings = _FUTURE_ENDINGS if tense == Tense.FUTURE else _IMPARFAIT_ENDINGS
            realised = radical + _cell(endings, number, person)

        elif tense == Tense.PAST:
            realised = self.imparfait_radical(element, base_word, base) + _cell(_IMPARFAIT_ENDINGS, number, person)

        else:
            realised = base

        return self.spelled(realised + particle_suffix(element), element)

    @staticmethod
    def imperative_form(
        element: InflectedWordElement,
        base_word: Optional[WordElement],
        number: NumberAgreement,
        person: Person,
    ) -> Tuple[Optional[str], Person]:
        """
        Imperative form from the lexicon, or the person whose indicative
        present stands in for it (2S = 1S, 1P = 1P, 2P = 2P).
        """
        if number != NumberAgreement.PLURAL:
            form = lexical_form(element, base_word, FrenchLexicalFeature.IMPERATIVE2S)
            return form, person if form is not None else Person.FIRST
        if person == Person.FIRST:
            return lexical_form(element, base_word, FrenchLexicalFeature.IMPERATIVE1P), person
        form = lexical_form(element, base_word, FrenchLexicalFeature.IMPERATIVE2P)
        return form, person if form is not None else Person.SECOND

    # ------------------------------------------------------------------
    # Adverbs
    # ------------------------------------------------------------------

    def do_adverb(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        realised = self.base_form(element, base_word)
        if element.get_feature_as_boolean(Feature.IS_COMPARATIVE):
            realised = lexical_form(element, base_word, LexicalFeature.COMPARATIVE) or realised
        return self.spelled(realised + particle_suffix(element), element)

    # ------------------------------------------------------------------
    # Pronouns
    # ------------------------------------------------------------------

    def do_pronoun(self, element: InflectedWordElement, base_word: Optional[WordElement]) -> NLGElement:
        pronoun_type = element.get_feature(FrenchLexicalFeature.PRONOUN_TYPE)
        function = element.get_feature(InternalFeature.DISCOURSE_FUNCTION)

        # "y" and "en" are SPECIAL_PERSONAL and never re-selected
        if pronoun_type == PronounType.PERSONAL and function != DiscourseFunction.COMPLEMENT:
            word = self.select_personal_pronoun(element)
            if word is not None:
                selected = InflectedWordElement(word)
                if element.has_feature(FrenchInternalFeature.CLITIC):
                    selected.set_feature(FrenchInternalFeature.CLITIC, element.get_feature(FrenchInternalFeature.CLITIC))
                return self.spelled(word.base_form + particle_suffix(element), selected)
            return self.spelled(self.base_form(element, base_word) + particle_suffix(element), element)

        realised = self.base_form(element, base_word)
        if pronoun_type == PronounType.RELATIVE:
            realised = self.relative_pronoun_form(element) or realised
        return self.spelled(realised + particle_suffix(element), element)

    def select_personal_pronoun(self, element: InflectedWordElement) -> Optional[WordElement]:
        """
        Query the lexicon for the personal pronoun matching the occurrence
        (sections 633-634 of Grevisse). None leaves the pronoun unchanged.
        """
        passive = element.get_feature_as_boolean(Feature.PASSIVE)
        reflexive = element.get_feature_as_boolean(LexicalFeature.REFLEXIVE)
        detached = self.is_detached_pronoun(element)
        parent = element.parent

        gender = element.get_feature(LexicalFeature.GENDER)
        if not isinstance(gender, Gender) or gender == Gender.NEUTER:
            gender = Gender.MASCULINE

        person: Any = element.get_feature(Feature.PERSON)
        number: Any = element.get_feature(Feature.NUMBER)
        # a reflexive pronoun agrees with the subject, i.e. with the verb phrase
        if reflexive and parent is not None:
            grandparent = parent.parent
            if grandparent is not None and grandparent.is_a(PhraseCategory.VERB_PHRASE):
                person = grandparent.get_feature(Feature.PERSON)
                number = grandparent.get_feature(Feature.NUMBER)
                # imperative reflexives only exist in 2S, 1P and 2P
                if grandparent.get_feature(Feature.FORM) == Form.IMPERATIVE:
                    if number != NumberAgreement.PLURAL or person not in (Person.FIRST, Person.SECOND):
                        person = Person.SECOND
        if not isinstance(person, Person):
            person = Person.THIRD
        if not isinstance(number, NumberAgreement):
            number = NumberAgreement.SINGULAR

        function = element.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        # the head of a noun phrase takes the function of the phrase
        if function == DiscourseFunction.SUBJECT and parent is not None and parent.is_a(PhraseCategory.NOUN_PHRASE):
            function = parent.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if not detached and not isinstance(function, DiscourseFunction):
            function = DiscourseFunction.SUBJECT
        if passive:
            if function == DiscourseFunction.SUBJECT:
                function = DiscourseFunction.OBJECT
            elif function == DiscourseFunction.OBJECT:
                function = DiscourseFunction.SUBJECT

        if function not in (DiscourseFunction.OBJECT, DiscourseFunction.INDIRECT_OBJECT) and not detached:
            reflexive = False

        query: Dict[Any, Any] = {
            FrenchLexicalFeature.PRONOUN_TYPE: PronounType.PERSONAL,
            Feature.PERSON: person,
        }
        if person == Person.THIRD:
            query[LexicalFeature.REFLEXIVE] = reflexive
            query[FrenchLexicalFeature.DETACHED] = detached
            if not reflexive:
                query[Feature.NUMBER] = number
                if detached:
                    query[LexicalFeature.GENDER] = gender
                else:
                    query[InternalFeature.DISCOURSE_FUNCTION] = function
                    singular_direct = (
                        number != NumberAgreement.PLURAL and function != DiscourseFunction.INDIRECT_OBJECT
                    )
                    if singular_direct or function == DiscourseFunction.SUBJECT:
                        query[LexicalFeature.GENDER] = gender
        else:
            query[Feature.NUMBER] = number
            if not element.is_plural():
                query[FrenchLexicalFeature.DETACHED] = detached
                if not detached:
                    query[InternalFeature.DISCOURSE_FUNCTION] = (
                        function if function == DiscourseFunction.SUBJECT else None
                    )

        lexicon = element.lexicon
        if lexicon is None:
            return None
        return lexicon.get_word_by_features(LexicalCategory.PRONOUN, query)

    @staticmethod
    def relative_pronoun_form(element: InflectedWordElement) -> Optional[str]:
        """
        Form of a relative pronoun agreeing with the noun phrase its clause
        modifies. Missing feminine plural falls back to the plural, missing
        feminine singular and plural to the base form.
        """
        clause = element.parent
        while clause is not None and not clause.is_a(PhraseCategory.CLAUSE):
            clause = clause.parent
        antecedent = clause.parent if clause is not None else None
        if antecedent is None:
            return None

        feminine = antecedent.get_feature(LexicalFeature.GENDER) == Gender.FEMININE
        plural = antecedent.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL
        form = None
        if feminine and plural:
            form = element.get_feature_as_string(FrenchLexicalFeature.FEMININE_PLURAL)
        elif feminine:
            form = element.get_feature_as_string(FrenchLexicalFeature.FEMININE_SINGULAR)
        if plural and form is None:
            form = element.get_feature_as_string(LexicalFeature.PLURAL)
        return form

    @staticmethod
    def is_detached_pronoun(element: InflectedWordElement) -> bool:
        """
        True when the pronoun is not attached to the verb: it has no parent,
        it is not a subject or object, it sits in a prepositional phrase or
        a coordination, or it is a 1st/2nd person or reflexive pronoun after
        an affirmative imperative ("regarde-moi").
        """
        if element.category != LexicalCategory.PRONOUN:
            return False
        parent = element.parent
        if parent is None:
            return True

        function = parent.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if function not in (
            DiscourseFunction.SUBJECT,
            DiscourseFunction.OBJECT,
            DiscourseFunction.INDIRECT_OBJECT,
        ):
            return True

        person = element.get_feature(Feature.PERSON)
        imperative_sensitive = person in (Person.FIRST, Person.SECOND) or element.get_feature_as_boolean(
            LexicalFeature.REFLEXIVE
        )

        def detaches(node: Optional[NLGElement]) -> bool:
            if node is None:
                return False
            if node.is_a(PhraseCategory.PREPOSITIONAL_PHRASE) or isinstance(node, CoordinatedPhraseElement):
                return True
            return (
                imperative_sensitive
                and node.get_feature(Feature.FORM) == Form.IMPERATIVE
                and not node.get_feature_as_boolean(Feature.NEGATED)
            )

        return detaches(parent) or detaches(parent.parent)


__all__ = [
    "FrenchMorphologyHelper",
    "build_regular_plural",
    "build_feminine_adjective",
    "build_present_verb",
    "build_subjunctive_verb",
    "build_past_participle",
    "build_future_radical",
    "present_radical",
    "add_suffix",
]
