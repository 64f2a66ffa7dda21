# realiser/core/domain/syntax/clause.py
"""
syntax/clause.py

Clause realisation shared by the rule sets.

The realised clause is assembled in this order:

    complementiser, cue phrase, front modifiers (or interrogative prefix),
    subjects, verb phrase (possibly split around an inverted constituent),
    passive agent phrase, interrogative front modifiers, trailing words

Before that, agreement is settled: the verb phrase receives number and
person from the subjects (or, under passive voice, from the objects that
become the surface subject).
"""

from __future__ import annotations

import abc
from typing import Any, List, Optional

from ..categories import LexicalCategory, PhraseCategory
from ..elements import (
    CoordinatedPhraseElement,
    ListElement,
    NLGElement,
    PhraseElement,
)
from ..features import (
    ClauseStatus,
    DiscourseFunction,
    Feature,
    FrenchFeature,
    Form,
    Gender,
    InternalFeature,
    InterrogativeType,
    LexicalFeature,
    NumberAgreement,
    Person,
)
from ..phrases import NPPhraseSpec
from .phrase import SyntaxHelper


def is_interrogative(phrase: NLGElement) -> bool:
    return phrase.has_feature(Feature.INTERROGATIVE_TYPE)


def genitive_gerund(phrase: NLGElement) -> bool:
    """A gerund clause puts its subject in the possessive ("John's leaving")."""
    return phrase.get_feature(Feature.FORM) == Form.GERUND and not phrase.get_feature_as_boolean(
        Feature.SUPPRESS_GENITIVE_IN_GERUND
    )


class AbstractClauseHelper(SyntaxHelper, abc.ABC):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None:
            return None

        realised = ListElement(phrase)
        verb_element = phrase.get_feature_as_element(InternalFeature.VERB_PHRASE)
        if verb_element is None:
            verb_element = phrase.head

        self.check_clausal_subjects(phrase)
        self.check_subject_number_person(phrase, verb_element)
        self.check_discourse_function(phrase)
        self.copy_front_modifiers(phrase, verb_element)
        self.add_complementiser(phrase, realised)
        self.add_cue_phrase(phrase, realised)

        split_verb: Optional[NLGElement] = None
        if is_interrogative(phrase) or phrase.has_feature(FrenchFeature.RELATIVE_PHRASE):
            split_verb = self.realise_interrogative(phrase, realised, verb_element)
        else:
            self.realise_list(realised, phrase.front_modifiers, DiscourseFunction.FRONT_MODIFIER)

        self.add_subjects_to_front(phrase, realised, split_verb)
        passive_split_verb = self.add_passive_complements_number_person(phrase, realised, verb_element)
        if passive_split_verb is not None:
            split_verb = passive_split_verb

        self.realise_verb(phrase, realised, split_verb, verb_element)
        self.add_passive_subjects(phrase, realised)
        self.add_interrogative_front_modifiers(phrase, realised)
        self.add_ending_to(phrase, realised)
        return realised

    # ------------------------------------------------------------------
    # Agreement and clause-level checks
    # ------------------------------------------------------------------

    def check_clausal_subjects(self, phrase: PhraseElement) -> None:
        """Hook: rewrite clauses used as subjects. Nothing to do by default."""

    def check_subject_number_person(self, phrase: PhraseElement, verb_element: Optional[NLGElement]) -> None:
        subjects = phrase.get_feature_as_element_list(InternalFeature.SUBJECTS)
        plural = False
        person: Optional[Person] = None

        if len(subjects) == 1:
            subject = subjects[0]
            if isinstance(subject, CoordinatedPhraseElement) and subject.check_if_plural():
                plural = True
            elif subject.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL:
                plural = True
            elif subject.is_a(PhraseCategory.NOUN_PHRASE):
                value = subject.get_feature(Feature.PERSON)
                person = value if isinstance(value, Person) else None
                head = subject.get_feature_as_element(InternalFeature.HEAD)
                if head is not None and (
                    head.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL
                    or isinstance(head, ListElement)
                ):
                    plural = True
        elif len(subjects) > 1:
            plural = True

        if verb_element is not None:
            verb_element.set_feature(
                Feature.NUMBER,
                NumberAgreement.PLURAL if plural else phrase.get_feature(Feature.NUMBER),
            )
            if person is not None:
                verb_element.set_feature(Feature.PERSON, person)

    def check_discourse_function(self, phrase: PhraseElement) -> None:
        """Clauses used as objects or subjects change form."""
        subjects = phrase.get_feature_as_element_list(InternalFeature.SUBJECTS)
        form = phrase.get_feature(Feature.FORM)
        function = phrase.get_feature(InternalFeature.DISCOURSE_FUNCTION)

        if function in (DiscourseFunction.OBJECT, DiscourseFunction.INDIRECT_OBJECT):
            if form == Form.IMPERATIVE:
                phrase.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
                phrase.set_feature(Feature.FORM, Form.INFINITIVE)
            elif form == Form.GERUND and not subjects:
                phrase.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
        elif function == DiscourseFunction.SUBJECT:
            phrase.set_feature(Feature.FORM, Form.GERUND)
            phrase.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)

    def copy_front_modifiers(self, phrase: PhraseElement, verb_element: Optional[NLGElement]) -> None:
        """
        Clause postmodifiers are realised by the verb phrase. Infinitive
        clauses have no front position: their front modifiers follow the
        verb and the verb is left uninflected.
        """
        front_modifiers = phrase.front_modifiers
        if isinstance(verb_element, (PhraseElement, CoordinatedPhraseElement)):
            existing = verb_element.get_feature_as_element_list(InternalFeature.POSTMODIFIERS)
            for modifier in phrase.post_modifiers:
                if not any(modifier is item for item in existing):
                    verb_element.add_post_modifier(modifier)

        if phrase.get_feature(Feature.FORM) == Form.INFINITIVE:
            phrase.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
            if isinstance(verb_element, PhraseElement):
                for modifier in front_modifiers:
                    verb_element.add_post_modifier(modifier)
            phrase.remove_feature(InternalFeature.FRONT_MODIFIERS)
            if verb_element is not None:
                verb_element.set_feature(InternalFeature.NON_MORPH, True)

    # ------------------------------------------------------------------
    # Leading material
    # ------------------------------------------------------------------

    def add_complementiser(self, phrase: PhraseElement, realised: ListElement) -> None:
        if phrase.get_feature(InternalFeature.CLAUSE_STATUS) != ClauseStatus.SUBORDINATE:
            return
        if phrase.get_feature_as_boolean(Feature.SUPPRESSED_COMPLEMENTISER):
            return
        self.realise_complementiser(phrase, realised)

    def realise_complementiser(self, phrase: PhraseElement, realised: ListElement) -> None:
        complementiser = phrase.factory.create_nlg_element(
            phrase.get_feature(Feature.COMPLEMENTISER), LexicalCategory.COMPLEMENTISER
        )
        current = self.realise_syntax(complementiser)
        if current is not None:
            realised.add_component(current)

    def add_cue_phrase(self, phrase: PhraseElement, realised: ListElement) -> None:
        cue_phrase = phrase.get_feature_as_element(Feature.CUE_PHRASE)
        current = self.realise_syntax(cue_phrase)
        if current is not None:
            current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.CUE_PHRASE)
            realised.add_component(current)

    # ------------------------------------------------------------------
    # Subjects
    # ------------------------------------------------------------------

    def add_subjects_to_front(
        self, phrase: PhraseElement, realised: ListElement, split_verb: Optional[NLGElement]
    ) -> None:
        form = phrase.get_feature(Feature.FORM)
        if form in (Form.INFINITIVE, Form.IMPERATIVE):
            return
        if phrase.get_feature_as_boolean(Feature.PASSIVE) or split_verb is not None:
            return
        if phrase.get_feature(Feature.INTERROGATIVE_TYPE) == InterrogativeType.WHO_SUBJECT:
            return
        realised.add_components(self.realise_subjects(phrase).get_children())

    def realise_subjects(self, phrase: PhraseElement) -> ListElement:
        realised = ListElement(phrase)
        possessive = genitive_gerund(phrase)
        for subject in phrase.get_feature_as_element_list(InternalFeature.SUBJECTS):
            subject.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SUBJECT)
            if possessive:
                subject.set_feature(Feature.POSSESSIVE, True)
            realised.add_component(self.realise_syntax(subject))
        return realised

    def add_passive_complements_number_person(
        self, phrase: PhraseElement, realised: ListElement, verb_element: Optional[NLGElement]
    ) -> Optional[NLGElement]:
        """
        Under passive voice the objects of the verb phrase become the
        surface subject: realise them in front of the verb and make the verb
        agree with them. Returns the realised object when it must be
        inverted with the verb (questions).
        """
        passive_number: Optional[Any] = None
        passive_person: Optional[Person] = None
        split_verb: Optional[NLGElement] = None
        verb_phrase = phrase.get_feature_as_element(InternalFeature.VERB_PHRASE)

        if (
            phrase.get_feature_as_boolean(Feature.PASSIVE)
            and verb_phrase is not None
            and phrase.get_feature(Feature.INTERROGATIVE_TYPE) != InterrogativeType.WHAT_OBJECT
        ):
            feminine = True
            for complement in verb_phrase.get_feature_as_element_list(InternalFeature.COMPLEMENTS):
                if complement.get_feature(InternalFeature.DISCOURSE_FUNCTION) != DiscourseFunction.OBJECT:
                    continue
                if isinstance(complement, NPPhraseSpec):
                    current = NPPhraseSpec.copy_of(complement)
                    current.set_feature(Feature.PASSIVE, True)
                else:
                    current = complement
                current = self.realise_syntax(current)
                if current is not None:
                    current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.OBJECT)
                    if is_interrogative(phrase):
                        split_verb = current
                    else:
                        realised.add_component(current)

                if passive_number is None:
                    if isinstance(complement, CoordinatedPhraseElement):
                        passive_number = (
                            NumberAgreement.PLURAL if complement.check_if_plural() else NumberAgreement.SINGULAR
                        )
                    else:
                        passive_number = complement.get_feature(Feature.NUMBER)
                else:
                    passive_number = NumberAgreement.PLURAL

                person = complement.get_feature(Feature.PERSON)
                if person == Person.FIRST:
                    passive_person = Person.FIRST
                elif person == Person.SECOND and passive_person != Person.FIRST:
                    passive_person = Person.SECOND
                elif passive_person is None:
                    passive_person = Person.THIRD

                if complement.get_feature(LexicalFeature.GENDER) != Gender.FEMININE:
                    feminine = False
                if genitive_gerund(phrase):
                    complement.set_feature(Feature.POSSESSIVE, True)

            if verb_element is not None:
                # no object at all counts as masculine
                gender = Gender.FEMININE if feminine and passive_person is not None else Gender.MASCULINE
                verb_element.set_feature(LexicalFeature.GENDER, gender)

        if verb_element is not None:
            if passive_person is not None:
                verb_element.set_feature(Feature.PERSON, passive_person)
            if passive_number is not None:
                verb_element.set_feature(Feature.NUMBER, passive_number)
        return split_verb

    # ------------------------------------------------------------------
    # Verb phrase and trailing material
    # ------------------------------------------------------------------

    def realise_verb(
        self,
        phrase: PhraseElement,
        realised: ListElement,
        split_verb: Optional[NLGElement],
        verb_element: Optional[NLGElement],
    ) -> None:
        current = self.realise_syntax(verb_element)
        if current is None:
            return
        if split_verb is None:
            current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.VERB_PHRASE)
            realised.add_component(current)
            return

        if isinstance(current, ListElement):
            children = current.get_children()
            if not children:
                realised.add_component(split_verb)
                return
            children[0].set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.VERB_PHRASE)
            realised.add_component(children[0])
            realised.add_component(split_verb)
            for child in children[1:]:
                child.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.VERB_PHRASE)
                realised.add_component(child)
        else:
            current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.VERB_PHRASE)
            realised.add_component(current)
            realised.add_component(split_verb)

    def add_passive_subjects(self, phrase: PhraseElement, realised: ListElement) -> None:
        """The logical subject of a passive clause goes in a "by" phrase."""
        if not phrase.get_feature_as_boolean(Feature.PASSIVE):
            return
        subjects = phrase.get_feature_as_element_list(InternalFeature.SUBJECTS)
        target = realised
        if subjects or is_interrogative(phrase):
            factory = phrase.factory
            preposition = factory.lexicon.get_passive_preposition()
            agent = self.realise_syntax(factory.create_prepositional_phrase(preposition))
            if isinstance(agent, ListElement):
                realised.add_component(agent)
                target = agent

        if phrase.get_feature(Feature.INTERROGATIVE_TYPE) == InterrogativeType.WHO_SUBJECT:
            return
        for subject in subjects:
            if not (subject.is_a(PhraseCategory.NOUN_PHRASE) or isinstance(subject, CoordinatedPhraseElement)):
                continue
            if isinstance(subject, NPPhraseSpec):
                current: Optional[NLGElement] = NPPhraseSpec.copy_of(subject)
                current.set_feature(Feature.PASSIVE, True)
            else:
                current = subject
            current = self.realise_syntax(current)
            if current is not None:
                current.set_feature(Feature.PASSIVE, True)
                current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SUBJECT)
                target.add_component(current)

    def add_interrogative_front_modifiers(self, phrase: PhraseElement, realised: ListElement) -> None:
        """In questions and relative clauses, front modifiers move to the end."""
        if not (is_interrogative(phrase) or phrase.has_feature(FrenchFeature.RELATIVE_PHRASE)):
            return
        for modifier in phrase.front_modifiers:
            current = self.realise_syntax(modifier)
            if current is not None:
                current.set_feature(InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.POST_MODIFIER)
                realised.add_component(current)

    # ------------------------------------------------------------------
    # Language hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def realise_interrogative(
        self, phrase: PhraseElement, realised: ListElement, verb_element: Optional[NLGElement]
    ) -> Optional[NLGElement]:
        """Add the interrogative prefix; return a constituent to invert with the verb."""
        raise NotImplementedError

    @abc.abstractmethod
    def add_ending_to(self, phrase: PhraseElement, realised: ListElement) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def add_modifier(self, clause: PhraseElement, modifier: Any) -> None:
        raise NotImplementedError


def subject_list(phrase: NLGElement) -> List[NLGElement]:
    return phrase.get_feature_as_element_list(InternalFeature.SUBJECTS)


__all__ = ["AbstractClauseHelper", "is_interrogative", "genitive_gerund", "subject_list"]
