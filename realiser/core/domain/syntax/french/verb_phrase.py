# realiser/core/domain/syntax/french/verb_phrase.py
"""
French verb groups.

The group is built on a stack, bottom first, from the main verb outwards:

    passive       -> être + past participle (agreeing with the subject)
    progressive   -> être + "en train de" + infinitive
    compound past -> avoir/être + past participle
    modal         -> modal + infinitive

Negation wraps the first verb in "ne ... pas" (or another negation
auxiliary), and complement pronouns become clitics placed before the verb
that carries them ("il la lui a donnée") or after an affirmative
imperative ("donne-la-lui").

The stack is then split into the part realised after the premodifiers
(main verb, its clitics and "ne") and the auxiliary part realised before
them.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ...categories import LexicalCategory, PhraseCategory
from ...elements import (
    CoordinatedPhraseElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
    StringElement,
    WordElement,
    count_words,
)
from ...features import (
    ClauseStatus,
    DiscourseFunction,
    Feature,
    Form,
    FrenchFeature,
    FrenchInternalFeature,
    FrenchLexicalFeature,
    Gender,
    InternalFeature,
    InterrogativeType,
    Language,
    LexicalFeature,
    NumberAgreement,
    Person,
    PronounType,
    Tense,
)
from ...phrases import NPPhraseSpec
from ...registry import HelperRole, register_helper
from ..verb_phrase import AbstractVerbPhraseHelper, VerbGroup, complement_function, realises_auxiliary
from ..phrase import is_word


def _subordinate_si(phrase: PhraseElement) -> bool:
    """True inside a clause introduced by the complementiser "si"."""
    parent = phrase.parent
    if parent is None:
        return False
    if parent.get_feature(InternalFeature.CLAUSE_STATUS) != ClauseStatus.SUBORDINATE:
        return False
    if parent.get_feature_as_boolean(Feature.SUPPRESSED_COMPLEMENTISER):
        return False
    # a bare StringElement "si" (indirect yes/no question) does not count
    return is_word(parent.get_feature(Feature.COMPLEMENTISER), "si")


def _agreement_number(element: NLGElement) -> NumberAgreement:
    value = element.get_feature(Feature.NUMBER)
    return NumberAgreement.PLURAL if value == NumberAgreement.PLURAL else NumberAgreement.SINGULAR


@register_helper(Language.FRENCH, HelperRole.VERB_PHRASE)
class FrenchVerbPhraseHelper(AbstractVerbPhraseHelper):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None:
            return None

        verb_group = self.create_verb_group(phrase)
        main_verb: VerbGroup = []
        auxiliaries: VerbGroup = []
        self.split_verb_group(verb_group, main_verb, auxiliaries)

        realised = ListElement(phrase)
        if realises_auxiliary(phrase) and auxiliaries:
            self.realise_auxiliaries(realised, auxiliaries)
            top = main_verb[-1] if main_verb else None
            if top is not None and top.get_feature(Feature.FORM) == Form.INFINITIVE:
                self.realise_main_verb(phrase, main_verb, realised)
                self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)
            else:
                self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)
                self.realise_main_verb(phrase, main_verb, realised)
        else:
            self.realise_main_verb(phrase, main_verb, realised)
            self.realise_list(realised, phrase.pre_modifiers, DiscourseFunction.PRE_MODIFIER)

        self.realise_complements(phrase, realised)
        self.realise_list(realised, phrase.post_modifiers, DiscourseFunction.POST_MODIFIER)
        return realised

    def is_copular(self, element: Optional[NLGElement]) -> bool:
        if element is None:
            return True
        return element.get_feature_as_boolean(FrenchLexicalFeature.COPULAR)

    def split_verb_group(self, verb_group: VerbGroup, main_verb: VerbGroup, auxiliaries: VerbGroup) -> None:
        """
        From the bottom: the main verb with any adverb or clitic below it,
        then the clitics and "ne" above it, go to the main part; everything
        from the first other word up is auxiliary.
        """
        main_verb_seen = False
        clitics_seen = False
        for word in verb_group:
            if not main_verb_seen:
                main_verb.append(word)
                if not word.is_a(LexicalCategory.ADVERB) and not word.get_feature_as_boolean(
                    FrenchInternalFeature.CLITIC
                ):
                    main_verb_seen = True
            elif not clitics_seen:
                if word.get_feature_as_string(LexicalFeature.BASE_FORM) != "ne" and not word.get_feature_as_boolean(
                    FrenchInternalFeature.CLITIC
                ):
                    clitics_seen = True
                    auxiliaries.append(word)
                else:
                    main_verb.append(word)
            else:
                auxiliaries.append(word)

    # ------------------------------------------------------------------
    # Verb group
    # ------------------------------------------------------------------

    def create_verb_group(self, phrase: PhraseElement) -> VerbGroup:
        form = phrase.get_feature(Feature.FORM)
        tense = phrase.get_tense()
        modal = phrase.get_feature_as_string(Feature.MODAL)
        progressive = phrase.get_feature_as_boolean(Feature.PROGRESSIVE)
        perfect = phrase.get_feature_as_boolean(Feature.PERFECT)
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)
        negative = phrase.is_negated()
        insert_clitics = True
        verb_group: VerbGroup = []

        # "si" takes the present for the future and the imperfect for the conditional
        if _subordinate_si(phrase):
            if tense == Tense.FUTURE:
                tense = Tense.PRESENT
            elif tense == Tense.CONDITIONAL:
                tense = Tense.PAST
                if not perfect:
                    progressive = True

        modal_word: Optional[WordElement] = None
        clitic_rising = False
        if modal is not None:
            modal_word = phrase.lexicon.lookup_word(modal, LexicalCategory.VERB)
            clitic_rising = modal_word.get_feature_as_boolean(FrenchLexicalFeature.CLITIC_RISING)

        actual_modal: Optional[str] = None
        modal_past = False
        if form == Form.INFINITIVE:
            actual_modal = None
        elif form in (None, Form.NORMAL) or (form == Form.IMPERATIVE and clitic_rising):
            if modal is not None:
                actual_modal = modal
                modal_past = tense == Tense.PAST
        elif modal is not None and form == Form.SUBJUNCTIVE:
            self.report_unsupported("modal with subjunctive form", modal=modal, language="fr")
        if actual_modal is None:
            modal_word = None

        front = self.grab_head_verb(phrase, tense, modal is not None)
        if front is None:
            return verb_group
        front.set_tense(tense)

        if passive:
            front = self.add_passive_auxiliary(front, verb_group, phrase)
            front.set_tense(tense)

        if progressive and (
            tense != Tense.PAST or perfect or actual_modal is not None or form == Form.SUBJUNCTIVE
        ):
            new_front = self.add_progressive_auxiliary(front, verb_group, phrase)
            if new_front is not front:
                front = new_front
                front.set_tense(tense)
                insert_clitics = False

        past_participle_avoir: Optional[NLGElement] = None
        compound = False
        if (
            (tense == Tense.PAST and (not progressive or perfect or form == Form.SUBJUNCTIVE))
            or (tense == Tense.PRESENT and perfect)
            or modal_past
        ):
            auxiliary_tense = tense if perfect else Tense.PRESENT
            front, past_participle_avoir = self.add_auxiliary(front, verb_group, modal, auxiliary_tense, phrase)
            compound = True
            # past subjunctive perfect: "qu'il ait eu mangé"
            if form == Form.SUBJUNCTIVE and tense == Tense.PAST and perfect:
                if self.has_reflexive_object(phrase):
                    avoir = InflectedWordElement(phrase.lexicon.require_word("avoir", LexicalCategory.VERB))
                    avoir.set_feature(Feature.FORM, Form.PAST_PARTICIPLE)
                    verb_group.append(avoir)
                else:
                    front, past_participle_avoir = self.add_auxiliary(
                        front, verb_group, modal, auxiliary_tense, phrase
                    )
        elif tense in (Tense.FUTURE, Tense.CONDITIONAL) and perfect:
            front, past_participle_avoir = self.add_auxiliary(front, verb_group, modal, tense, phrase)
            compound = True

        front = self.push_if_modal(actual_modal is not None, phrase, front, verb_group)

        clitic_direct_object: Optional[NLGElement] = None
        if insert_clitics:
            if not negative and form == Form.IMPERATIVE:
                clitic_direct_object = self.insert_clitic_complement_pronouns(phrase, verb_group)
                insert_clitics = False
            elif front is None and not clitic_rising:
                clitic_direct_object = self.insert_clitic_complement_pronouns(phrase, verb_group)
                insert_clitics = False

        self.create_pas(phrase, verb_group)
        self.push_modal(modal_word, phrase, verb_group)
        if front is not None:
            self.push_front_verb(phrase, verb_group, front, form)
            front.set_feature(Feature.FORM, form)
        if insert_clitics:
            clitic_direct_object = self.insert_clitic_complement_pronouns(phrase, verb_group)
        self.create_ne(phrase, verb_group)

        if compound:
            parent = phrase.parent
            # "la pomme qu'il a mangée": the antecedent of a relativised object
            if not passive and parent is not None and parent.has_relative_phrase(DiscourseFunction.OBJECT):
                if isinstance(parent.parent, NPPhraseSpec):
                    clitic_direct_object = parent.parent
            self.make_past_participle_agree(past_participle_avoir, clitic_direct_object)
        return verb_group

    def make_past_participle_agree(
        self, past_participle: Optional[NLGElement], direct_object: Optional[NLGElement]
    ) -> None:
        """A participle conjugated with avoir agrees with a preceding direct object."""
        if past_participle is None or direct_object is None:
            return
        gender = direct_object.get_feature(LexicalFeature.GENDER)
        if isinstance(gender, Gender):
            past_participle.set_feature(LexicalFeature.GENDER, gender)
        number = direct_object.get_feature(Feature.NUMBER)
        if isinstance(number, NumberAgreement):
            past_participle.set_feature(Feature.NUMBER, number)

    def add_passive_auxiliary(self, front: NLGElement, verb_group: VerbGroup, phrase: PhraseElement) -> NLGElement:
        front.set_feature(Feature.FORM, Form.PAST_PARTICIPLE)
        front.set_feature(Feature.NUMBER, phrase.get_feature(Feature.NUMBER))
        front.set_feature(LexicalFeature.GENDER, phrase.get_feature(LexicalFeature.GENDER))
        verb_group.append(front)
        return InflectedWordElement(phrase.lexicon.require_word("être", LexicalCategory.VERB))

    def add_progressive_auxiliary(
        self, front: NLGElement, verb_group: VerbGroup, phrase: PhraseElement
    ) -> NLGElement:
        """être + "en train de" + infinitive; the clitics attach to the infinitive."""
        factory = phrase.factory
        front.set_feature(Feature.FORM, Form.INFINITIVE)
        verb_group.append(front)
        self.insert_clitic_complement_pronouns(phrase, verb_group)

        de_verb = factory.create_prepositional_phrase(
            phrase.lexicon.require_word("de", LexicalCategory.PREPOSITION)
        )
        train = factory.create_noun_phrase("train")
        train.add_post_modifier(de_verb)
        verb_group.append(
            factory.create_prepositional_phrase(phrase.lexicon.require_word("en", LexicalCategory.PREPOSITION), train)
        )
        return InflectedWordElement(phrase.lexicon.require_word("être", LexicalCategory.VERB))

    def add_auxiliary(
        self,
        front: NLGElement,
        verb_group: VerbGroup,
        modal: Optional[str],
        tense: Tense,
        phrase: PhraseElement,
    ) -> Tuple[NLGElement, Optional[NLGElement]]:
        """
        Push the past participle and return (auxiliary, participle
        conjugated with avoir or None). Verbs marked AUXILIARY_ETRE and
        reflexive constructions take être, and their participle agrees with
        the subject.
        """
        past_participle_avoir: Optional[NLGElement] = None
        front.set_feature(Feature.FORM, Form.PAST_PARTICIPLE)
        verb_group.append(front)
        if front.get_feature_as_boolean(FrenchLexicalFeature.AUXILIARY_ETRE) or self.has_reflexive_object(phrase):
            auxiliary = "être"
            front.set_feature(Feature.NUMBER, phrase.get_feature(Feature.NUMBER))
            front.set_feature(LexicalFeature.GENDER, phrase.get_feature(LexicalFeature.GENDER))
        else:
            auxiliary = "avoir"
            past_participle_avoir = front

        new_front = InflectedWordElement(phrase.lexicon.require_word(auxiliary, LexicalCategory.VERB))
        new_front.set_feature(Feature.FORM, Form.NORMAL)
        new_front.set_tense(tense)
        if modal is not None:
            new_front.set_feature(InternalFeature.NON_MORPH, True)
        return new_front, past_participle_avoir

    def has_reflexive_object(self, phrase: PhraseElement) -> bool:
        """
        An object that is reflexive, or first/second person matching the
        subject ("je me lave"), makes the verb pronominal.
        """
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)
        subject_person = phrase.get_feature(Feature.PERSON)
        subject_number = _agreement_number(phrase)
        for complement in phrase.complements:
            if complement.get_feature_as_boolean(Feature.ELIDED):
                continue
            function = complement.get_feature(InternalFeature.DISCOURSE_FUNCTION)
            if not (
                function == DiscourseFunction.INDIRECT_OBJECT
                or (not passive and function == DiscourseFunction.OBJECT)
            ):
                continue
            if complement.get_feature_as_boolean(LexicalFeature.REFLEXIVE):
                return True
            person = complement.get_feature(Feature.PERSON)
            if (
                person in (Person.FIRST, Person.SECOND)
                and person == subject_person
                and _agreement_number(complement) == subject_number
            ):
                return True
        return False

    def create_pas(self, phrase: PhraseElement, verb_group: VerbGroup) -> None:
        """Second part of the negation: "pas" unless another auxiliary is given."""
        if not phrase.is_negated():
            return
        lexicon = phrase.lexicon
        negation: Optional[WordElement] = None
        value = phrase.get_feature(FrenchFeature.NEGATION_AUXILIARY)
        if isinstance(value, WordElement):
            negation = value
        elif isinstance(value, InflectedWordElement):
            negation = value.base_word
        elif isinstance(value, StringElement):
            negation = lexicon.lookup_word(value.realisation)
        elif value is not None:
            negation = lexicon.lookup_word(str(value))
        if negation is None:
            negation = lexicon.require_word("pas", LexicalCategory.ADVERB)

        # "personne", "rien" as arguments leave only "ne", except with "plus"
        if not phrase.check_if_ne_only_negation() or is_word(negation, "plus", LexicalCategory.ADVERB):
            verb_group.append(InflectedWordElement(negation))

    def create_ne(self, phrase: PhraseElement, verb_group: VerbGroup) -> None:
        if phrase.is_negated() or phrase.check_if_ne_only_negation():
            verb_group.append(InflectedWordElement(phrase.lexicon.require_word("ne", LexicalCategory.ADVERB)))

    def push_modal(self, modal_word: Optional[WordElement], phrase: PhraseElement, verb_group: VerbGroup) -> None:
        if modal_word is None or phrase.get_feature_as_boolean(InternalFeature.IGNORE_MODAL):
            return
        modal = InflectedWordElement(modal_word)
        modal.set_feature(Feature.FORM, phrase.get_feature(Feature.FORM))
        tense = phrase.get_feature(Feature.TENSE)
        modal.set_feature(Feature.TENSE, Tense.PRESENT if tense == Tense.PAST else tense)
        modal.set_feature(Feature.PERSON, phrase.get_feature(Feature.PERSON))
        modal.set_feature(Feature.NUMBER, self.determine_number(phrase))
        verb_group.append(modal)

    def push_front_verb(self, phrase: PhraseElement, verb_group: VerbGroup, front: NLGElement, form: Any) -> None:
        if form == Form.GERUND:
            front.set_feature(Feature.FORM, Form.PRESENT_PARTICIPLE)
        elif form in (Form.PAST_PARTICIPLE, Form.PRESENT_PARTICIPLE):
            front.set_feature(Feature.FORM, form)
        elif (
            form in (None, Form.NORMAL, Form.SUBJUNCTIVE, Form.IMPERATIVE)
            or self.is_copular(phrase.head)
            or verb_group
        ):
            front.set_feature(Feature.PERSON, phrase.get_feature(Feature.PERSON))
            front.set_feature(Feature.NUMBER, self.determine_number(phrase))
        verb_group.append(front)

    def determine_number(self, phrase: PhraseElement) -> NumberAgreement:
        value = phrase.get_feature(Feature.NUMBER)
        return value if isinstance(value, NumberAgreement) else NumberAgreement.SINGULAR

    # ------------------------------------------------------------------
    # Clitic pronouns
    # ------------------------------------------------------------------

    def _relativised_away(self, phrase: PhraseElement, complement: NLGElement, function: DiscourseFunction) -> bool:
        """True when the complement is realised by the relative pronoun of the clause."""
        parent = phrase.parent
        if parent is None:
            return False
        if complement is parent.get_feature_as_element(FrenchFeature.RELATIVE_PHRASE):
            return True
        return function != DiscourseFunction.COMPLEMENT and parent.has_relative_phrase(function)

    def insert_clitic_complement_pronouns(self, phrase: PhraseElement, verb_group: VerbGroup) -> Optional[NLGElement]:
        """
        Push the pronoun complements that become clitics, in surface order
        "me/te/se/nous/vous" < "le/la/les" < "lui/leur" < "y" < "en".
        Returns the clitic direct object (for past participle agreement).
        """
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)
        pronoun_en: Optional[NLGElement] = None
        pronoun_y: Optional[NLGElement] = None
        direct_object: Optional[NLGElement] = None
        indirect_object: Optional[NLGElement] = None

        for complement in phrase.complements:
            if complement.get_feature_as_boolean(Feature.ELIDED):
                continue
            function = complement_function(complement)
            if self._relativised_away(phrase, complement, function):
                continue

            head: Optional[NLGElement] = None
            pronoun_type: Any = None
            if complement.is_a(LexicalCategory.PRONOUN):
                head = complement
            elif isinstance(complement, NPPhraseSpec) and complement.head is not None and complement.head.is_a(
                LexicalCategory.PRONOUN
            ):
                head = complement.head
            elif complement.get_feature_as_boolean(Feature.PRONOMINAL):
                pronoun_type = PronounType.PERSONAL
            if head is not None:
                pronoun_type = head.get_feature(FrenchLexicalFeature.PRONOUN_TYPE)
            if pronoun_type is None:
                continue

            complement.set_feature(FrenchInternalFeature.CLITIC, False)
            if pronoun_type == PronounType.SPECIAL_PERSONAL:
                if is_word(head, "en"):
                    pronoun_en = complement
                elif is_word(head, "y"):
                    pronoun_y = complement
            elif pronoun_type == PronounType.PERSONAL:
                declared = complement.get_feature(InternalFeature.DISCOURSE_FUNCTION)
                if declared == DiscourseFunction.OBJECT and not passive:
                    direct_object = complement
                elif declared == DiscourseFunction.INDIRECT_OBJECT:
                    indirect_object = complement

        for clitic in (pronoun_en, pronoun_y, direct_object):
            if clitic is not None:
                clitic.set_feature(FrenchInternalFeature.CLITIC, True)
                verb_group.append(clitic)

        if indirect_object is not None and (
            direct_object is None
            or (
                direct_object.get_feature(Feature.PERSON) in (None, Person.THIRD)
                and not direct_object.get_feature_as_boolean(LexicalFeature.REFLEXIVE)
            )
        ):
            indirect_object.set_feature(FrenchInternalFeature.CLITIC, True)
            # "lui"/"leur" follow "le/la/les", the other indirect clitics precede them
            lui_leur = indirect_object.get_feature(Feature.PERSON) in (None, Person.THIRD)
            if direct_object is not None and lui_leur:
                verb_group.pop()
                verb_group.append(indirect_object)
                verb_group.append(direct_object)
            else:
                verb_group.append(indirect_object)
        return direct_object

    # ------------------------------------------------------------------
    # Complements
    # ------------------------------------------------------------------

    def realise_complements(self, phrase: PhraseElement, realised: ListElement) -> None:
        """
        Non-clitic complements, the shortest group first: direct objects,
        indirect objects ("à" + noun phrase) and other complements are
        ordered by their length in words.
        """
        indirects: List[NLGElement] = []
        directs: List[NLGElement] = []
        unknowns: List[NLGElement] = []

        for complement in phrase.complements:
            if not complement.get_feature_as_boolean(FrenchInternalFeature.CLITIC):
                function = complement_function(complement)
                if complement.get_feature_as_boolean(FrenchInternalFeature.RELATIVISED) or self._relativised_away(
                    phrase, complement, function
                ):
                    complement.remove_feature(FrenchInternalFeature.RELATIVISED)
                else:
                    current_complement = complement
                    if function == DiscourseFunction.INDIRECT_OBJECT:
                        current_complement = self.check_indirect_object(complement)
                    current = self.realise_syntax(current_complement)
                    if current is not None:
                        current.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
                        if function == DiscourseFunction.INDIRECT_OBJECT:
                            indirects.append(current)
                        elif function == DiscourseFunction.OBJECT:
                            directs.append(current)
                        else:
                            unknowns.append(current)
            complement.remove_feature(FrenchInternalFeature.CLITIC)

        direct_words = count_words(directs)
        indirect_words = count_words(indirects)
        unknown_words = count_words(unknowns)
        if direct_words <= indirect_words:
            if indirect_words <= unknown_words:
                order = ("direct", "indirect", "unknown")
            elif direct_words <= unknown_words:
                order = ("direct", "unknown", "indirect")
            else:
                order = ("unknown", "direct", "indirect")
        elif direct_words <= unknown_words:
            order = ("indirect", "direct", "unknown")
        elif indirect_words <= unknown_words:
            order = ("indirect", "unknown", "direct")
        else:
            order = ("unknown", "indirect", "direct")

        interrogative_type = phrase.get_feature(Feature.INTERROGATIVE_TYPE)
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)
        for group in order:
            if group == "direct":
                if not passive and not InterrogativeType.is_object(interrogative_type):
                    realised.add_components(directs)
            elif group == "indirect":
                if not InterrogativeType.is_indirect_object(interrogative_type):
                    realised.add_components(indirects)
            elif not passive:
                realised.add_components(unknowns)

    def check_indirect_object(self, element: NLGElement) -> NLGElement:
        """A noun phrase indirect object is realised as "à" + noun phrase."""
        if isinstance(element, NPPhraseSpec):
            copy = NPPhraseSpec.copy_of(element)
            preposition = element.lexicon.require_word("à", LexicalCategory.PREPOSITION)
            wrapped = element.factory.create_prepositional_phrase(preposition, copy)
            element.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.INDIRECT_OBJECT)
            return wrapped
        if isinstance(element, CoordinatedPhraseElement):
            copy = CoordinatedPhraseElement(element.factory)
            copy.copy_features_from(element)
            copy.parent = element.parent
            copy.set_feature(
                InternalFeature.COORDINATES,
                [self.check_indirect_object(coordinate) for coordinate in element.coordinates],
            )
            return copy
        return element

    def realise_auxiliaries(self, realised: ListElement, auxiliaries: VerbGroup) -> None:
        while auxiliaries:
            current = self.realise_syntax(auxiliaries.pop())
            if current is None:
                continue
            realised.add_component(current)
            if (
                current.is_a(LexicalCategory.VERB)
                or current.is_a(LexicalCategory.MODAL)
                or current.is_a(PhraseCategory.VERB_PHRASE)
            ):
                current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.AUXILIARY)

    def add_modifier(self, verb_phrase: PhraseElement, modifier: Any) -> None:
        """Every modifier follows the verb; a single word is taken as an adverb."""
        if modifier is None:
            return
        element: Optional[NLGElement] = None
        if isinstance(modifier, NLGElement):
            element = modifier
        elif isinstance(modifier, str) and modifier and " " not in modifier:
            element = verb_phrase.factory.create_word(modifier, LexicalCategory.ADVERB)
        if element is None:
            verb_phrase.add_post_modifier(str(modifier))
        else:
            verb_phrase.add_post_modifier(element)


__all__ = ["FrenchVerbPhraseHelper"]
