# realiser/core/domain/syntax/french/clause.py
"""
French clauses.

Relative clauses
----------------
A clause whose RELATIVE_PHRASE feature names one of its constituents is a
relative clause. The constituent is not realised in place; a relative
pronoun chosen from its function is put at the front instead:

    subject            qui           (passive: par qui)
    direct object      que           (passive: qui)
    "de" complement    dont
    other PP / à       lequel, qui (persons), quoi (neuter), with the preposition

Questions
---------
Questions are realised as "est-ce que" relatives of a placeholder
constituent: "qui est-ce qui ...", "qu'est-ce que ...", "à qui est-ce
que ...", "combien de ... ". Indirect yes/no questions take "si".
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog

from ...categories import LexicalCategory
from ...elements import (
    CoordinatedPhraseElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
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
    Person,
)
from ...phrases import NPPhraseSpec, PPPhraseSpec, SPhraseSpec
from ...registry import HelperRole, register_helper
from ..clause import AbstractClauseHelper, subject_list
from ..phrase import is_word

logger = structlog.get_logger()

# Keeps RELATIVE_PHRASE set without naming a constituent: the clause is
# realised as a relative (front modifiers at the end) with no pronoun.
_NO_RELATIVE_PRONOUN = object()

# Relativised function of the placeholder constituent of each question.
_QUESTION_FUNCTIONS = {
    InterrogativeType.WHO_SUBJECT: DiscourseFunction.SUBJECT,
    InterrogativeType.WHO_OBJECT: DiscourseFunction.OBJECT,
    InterrogativeType.WHAT_OBJECT: DiscourseFunction.OBJECT,
    InterrogativeType.WHO_INDIRECT_OBJECT: DiscourseFunction.INDIRECT_OBJECT,
}

# Question words put before the affirmative relative clause.
_QUESTION_PREFIXES = {
    InterrogativeType.WHO_OBJECT: "qui est-ce",
    InterrogativeType.HOW: "comment est-ce",
    InterrogativeType.WHY: "pourquoi est-ce",
    InterrogativeType.WHERE: "où est-ce",
    InterrogativeType.WHAT_OBJECT: "qu'est-ce",
}


def _restore(element: NLGElement, name: Any, value: Any) -> None:
    if value is None:
        element.remove_feature(name)
    else:
        element.set_feature(name, value)


def _insert_after_first(realised: Optional[NLGElement], inserted: NLGElement) -> None:
    if not isinstance(realised, ListElement):
        return
    children = realised.get_children()
    children.insert(1, inserted)
    realised.set_components(children)


@register_helper(Language.FRENCH, HelperRole.CLAUSE)
class FrenchClauseHelper(AbstractClauseHelper):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        if phrase is None:
            return None
        question = phrase.get_feature(Feature.INTERROGATIVE_TYPE)
        if isinstance(question, InterrogativeType):
            return self.realise_question(phrase, question)
        return super().realise(phrase)

    # ------------------------------------------------------------------
    # Questions
    # ------------------------------------------------------------------

    def realise_question(self, phrase: PhraseElement, question: InterrogativeType) -> ListElement:
        factory = phrase.factory
        # the verb phrase keeps the question type: it drops the questioned complement
        phrase.remove_feature(Feature.INTERROGATIVE_TYPE)
        realised = ListElement(phrase)
        self.add_cue_phrase(phrase, realised)
        cue_phrase = phrase.get_feature(Feature.CUE_PHRASE)
        phrase.remove_feature(Feature.CUE_PHRASE)

        parent = phrase.parent
        if parent is not None:
            parent.set_feature(InternalFeature.INTERROGATIVE, True)

        clause_status = phrase.get_feature(InternalFeature.CLAUSE_STATUS)
        relative_phrase = phrase.get_feature(FrenchFeature.RELATIVE_PHRASE)
        complementiser = phrase.get_feature(Feature.COMPLEMENTISER)
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)

        placeholder = factory.create_noun_phrase()
        function = _QUESTION_FUNCTIONS.get(question)
        if function is not None:
            placeholder.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
        phrase.set_feature(FrenchFeature.RELATIVE_PHRASE, placeholder)

        logger.debug("french_question", question=question.value, passive=passive)

        if question == InterrogativeType.YES_NO:
            if clause_status == ClauseStatus.SUBORDINATE:
                # a plain string so that "si" does not shift the tense
                phrase.set_feature(Feature.COMPLEMENTISER, factory.create_string("si"))
                phrase.remove_feature(FrenchFeature.RELATIVE_PHRASE)
            else:
                realised.add_component(factory.create_string("est-ce"))
            realised.add_component(super().realise(phrase))
        elif question == InterrogativeType.WHO_SUBJECT:
            if passive:
                affirmative = super().realise(phrase)
                _insert_after_first(affirmative, factory.create_string("est-ce que"))
                realised.add_component(affirmative)
            else:
                realised.add_component(factory.create_string("qui est-ce"))
                realised.add_component(super().realise(phrase))
        elif question == InterrogativeType.WHO_INDIRECT_OBJECT:
            # the placeholder stands for a person: "à qui", not "auquel"
            placeholder.set_feature(LexicalFeature.PROPER, True)
            phrase.parent = placeholder
            affirmative = super().realise(phrase)
            phrase.parent = parent
            _insert_after_first(affirmative, factory.create_string("est-ce que"))
            realised.add_component(affirmative)
        elif question == InterrogativeType.HOW_MANY:
            phrase.set_feature(FrenchFeature.RELATIVE_PHRASE, _NO_RELATIVE_PRONOUN)
            realised.add_component(self.realise_how_many(phrase, passive))
        else:
            realised.add_component(factory.create_string(_QUESTION_PREFIXES[question]))
            realised.add_component(super().realise(phrase))

        _restore(phrase, Feature.CUE_PHRASE, cue_phrase)
        phrase.set_feature(Feature.INTERROGATIVE_TYPE, question)
        _restore(phrase, InternalFeature.CLAUSE_STATUS, clause_status)
        _restore(phrase, FrenchFeature.RELATIVE_PHRASE, relative_phrase)
        _restore(phrase, Feature.COMPLEMENTISER, complementiser)
        return realised

    def realise_how_many(self, phrase: PhraseElement, passive: bool) -> Optional[NLGElement]:
        """The surface subject takes "combien" as specifier: "combien de chats mangent"."""
        if not isinstance(phrase, SPhraseSpec):
            return super().realise(phrase)
        combien = phrase.factory.create_word("combien", LexicalCategory.ADVERB)
        if passive:
            surface_subject = phrase.object
            if surface_subject is not None:
                phrase.set_object(self.change_specifier(surface_subject, combien))
        else:
            surface_subject = phrase.subject
            if surface_subject is not None:
                phrase.set_subject(self.change_specifier(surface_subject, combien))

        current = super().realise(phrase)

        if surface_subject is not None:
            if passive:
                phrase.set_object(surface_subject)
            else:
                phrase.set_subject(surface_subject)
        return current

    def change_specifier(self, noun_phrase: NLGElement, specifier: NLGElement) -> NLGElement:
        if isinstance(noun_phrase, NPPhraseSpec):
            modified = NPPhraseSpec.copy_of(noun_phrase)
            modified.set_specifier(specifier)
            return modified
        if isinstance(noun_phrase, CoordinatedPhraseElement):
            modified_coordination = CoordinatedPhraseElement(noun_phrase.factory)
            modified_coordination.copy_features_from(noun_phrase)
            modified_coordination.parent = noun_phrase.parent
            modified_coordination.set_feature(
                InternalFeature.COORDINATES,
                [self.change_specifier(coordinate, specifier) for coordinate in noun_phrase.coordinates],
            )
            return modified_coordination
        return noun_phrase

    def realise_interrogative(
        self, phrase: PhraseElement, realised: ListElement, verb_element: Optional[NLGElement]
    ) -> Optional[NLGElement]:
        # no inversion: questions are "est-ce que" relatives
        return None

    def add_ending_to(self, phrase: PhraseElement, realised: ListElement) -> None:
        pass

    # ------------------------------------------------------------------
    # Agreement and clause-level checks
    # ------------------------------------------------------------------

    def check_subject_number_person(self, phrase: PhraseElement, verb_element: Optional[NLGElement]) -> None:
        """
        The verb agrees with its subjects: feminine only if they all are,
        first person over second over third. A relativised subject is
        replaced by the antecedent noun phrase ("les femmes qui sont venues").
        """
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)
        subjects = subject_list(phrase)
        original_subjects = phrase.get_feature(InternalFeature.SUBJECTS)
        replaced = False
        if (not passive and phrase.has_relative_phrase(DiscourseFunction.SUBJECT)) or (
            passive and phrase.has_relative_phrase(DiscourseFunction.OBJECT)
        ):
            antecedent = phrase.parent
            subjects = [antecedent] if isinstance(antecedent, NPPhraseSpec) else []
            phrase.set_feature(InternalFeature.SUBJECTS, subjects)
            replaced = True

        super().check_subject_number_person(phrase, verb_element)
        if replaced:
            _restore(phrase, InternalFeature.SUBJECTS, original_subjects)

        ne_only_negation = False
        feminine = False
        person = Person.THIRD
        if subjects:
            feminine = True
            for subject in subjects:
                if subject.get_feature(LexicalFeature.GENDER) != Gender.FEMININE:
                    feminine = False
                subject_person = subject.get_feature(Feature.PERSON)
                if subject_person == Person.FIRST:
                    person = Person.FIRST
                elif person == Person.THIRD and subject_person == Person.SECOND:
                    person = Person.SECOND
                if not ne_only_negation:
                    ne_only_negation = subject.check_if_ne_only_negation()

        if verb_element is None:
            return
        verb_element.set_feature(LexicalFeature.GENDER, Gender.FEMININE if feminine else Gender.MASCULINE)
        verb_element.set_feature(Feature.PERSON, person)
        self.set_ne_only_negation(verb_element, ne_only_negation)

    def set_ne_only_negation(self, verb_element: NLGElement, ne_only_negation: bool) -> None:
        """"personne", "rien", "aucun" as subject or complement need "ne" alone."""
        if not ne_only_negation:
            ne_only_negation = any(
                complement.check_if_ne_only_negation()
                for complement in verb_element.get_feature_as_element_list(InternalFeature.COMPLEMENTS)
            )
        verb_element.set_feature(FrenchLexicalFeature.NE_ONLY_NEGATION, ne_only_negation)

    def check_discourse_function(self, phrase: PhraseElement) -> None:
        function = phrase.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if function in (DiscourseFunction.OBJECT, DiscourseFunction.INDIRECT_OBJECT):
            if phrase.get_feature(Feature.FORM) == Form.IMPERATIVE:
                phrase.set_feature(Feature.FORM, Form.INFINITIVE)

    def check_clausal_subjects(self, phrase: PhraseElement) -> None:
        """A finite clause used as subject becomes "le fait que ..."."""
        subjects = phrase.get_feature(InternalFeature.SUBJECTS)
        if isinstance(subjects, CoordinatedPhraseElement):
            subjects = subjects.get_feature(InternalFeature.COORDINATES)
        if not isinstance(subjects, list):
            return
        for index, subject in enumerate(subjects):
            if not isinstance(subject, SPhraseSpec):
                continue
            form = subject.get_feature(Feature.FORM)
            verb_phrase = subject.verb_phrase
            if form is None and verb_phrase is not None:
                form = verb_phrase.get_feature(Feature.FORM)
            if form not in (None, Form.NORMAL):
                continue
            le_fait = phrase.factory.create_noun_phrase("le", "fait")
            le_fait.add_post_modifier(subject)
            subject.set_feature(InternalFeature.CLAUSE_STATUS, ClauseStatus.SUBORDINATE)
            subject.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, False)
            subjects[index] = le_fait

    def copy_front_modifiers(self, phrase: PhraseElement, verb_element: Optional[NLGElement]) -> None:
        super().copy_front_modifiers(phrase, verb_element)
        # an infinitive clause drops "que" but keeps "pour", "de", ...
        if (
            phrase.get_feature(Feature.FORM) == Form.INFINITIVE
            and phrase.get_feature(InternalFeature.CLAUSE_STATUS) == ClauseStatus.SUBORDINATE
        ):
            complementiser = phrase.get_feature(Feature.COMPLEMENTISER)
            phrase.set_feature(
                Feature.SUPPRESSED_COMPLEMENTISER,
                is_word(complementiser, "que", LexicalCategory.COMPLEMENTISER),
            )

    def add_cue_phrase(self, phrase: PhraseElement, realised: ListElement) -> None:
        if phrase.get_feature(Feature.FORM) != Form.INFINITIVE:
            super().add_cue_phrase(phrase, realised)

    # ------------------------------------------------------------------
    # Complementiser and relative pronoun
    # ------------------------------------------------------------------

    def add_complementiser(self, phrase: PhraseElement, realised: ListElement) -> None:
        relative_phrase = phrase.get_feature_as_element(FrenchFeature.RELATIVE_PHRASE)
        if relative_phrase is not None:
            pronoun = self.relative_pronoun(phrase, relative_phrase)
            if pronoun is not None:
                pronoun.parent = phrase
                current = self.realise_syntax(pronoun)
                if current is not None:
                    realised.add_component(current)
            return

        subordinate = phrase.get_feature(InternalFeature.CLAUSE_STATUS) == ClauseStatus.SUBORDINATE
        subjunctive = phrase.get_feature(Feature.FORM) == Form.SUBJUNCTIVE
        if (subordinate or subjunctive) and not phrase.get_feature_as_boolean(Feature.SUPPRESSED_COMPLEMENTISER):
            self.realise_complementiser(phrase, realised)

    def relative_function(self, phrase: PhraseElement, relative_phrase: NLGElement) -> DiscourseFunction:
        function = relative_phrase.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if isinstance(function, DiscourseFunction):
            return function
        if any(subject is relative_phrase for subject in subject_list(phrase)):
            return DiscourseFunction.SUBJECT
        # question placeholders have no head and rely on the "que" fallback
        if relative_phrase.get_feature(InternalFeature.HEAD) is not None and not isinstance(
            relative_phrase, PPPhraseSpec
        ):
            self.report_unsupported("relative phrase with unresolved function", language="fr")
        return DiscourseFunction.COMPLEMENT

    def relative_pronoun(self, phrase: PhraseElement, relative_phrase: NLGElement) -> Optional[NLGElement]:
        factory = phrase.factory
        lexicon = phrase.lexicon
        function = self.relative_function(phrase, relative_phrase)
        passive = phrase.get_feature_as_boolean(Feature.PASSIVE)

        def pronoun_phrase(base_form: str) -> NPPhraseSpec:
            return factory.create_noun_phrase(lexicon.lookup_word(base_form, LexicalCategory.PRONOUN))

        pronoun: NLGElement
        if function == DiscourseFunction.SUBJECT:
            pronoun = pronoun_phrase("qui")
            if passive:
                pronoun = factory.create_prepositional_phrase(lexicon.get_passive_preposition(), pronoun)
        elif function == DiscourseFunction.OBJECT:
            pronoun = pronoun_phrase("qui" if passive else "que")
        else:
            preposition: Optional[NLGElement] = None
            if function == DiscourseFunction.INDIRECT_OBJECT:
                preposition = lexicon.require_word("à", LexicalCategory.PREPOSITION)
            if isinstance(relative_phrase, PPPhraseSpec):
                relative_phrase.set_feature(FrenchInternalFeature.RELATIVISED, True)
                preposition = relative_phrase.preposition
            if preposition is None:
                pronoun = pronoun_phrase("que")
            else:
                pronoun = self.prepositional_relative(phrase, relative_phrase, preposition, pronoun_phrase)

        pronoun.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
        return pronoun

    def prepositional_relative(
        self, phrase: PhraseElement, relative_phrase: NLGElement, preposition: NLGElement, pronoun_phrase
    ) -> NLGElement:
        """
        "dont" for a "de" complement ("l'homme dont je parle"), otherwise
        preposition + "lequel"/"qui"/"quoi". When the "de" complement sits in
        an indirect object or a prepositional phrase, the whole outer phrase
        is fronted instead: "l'homme à la fille duquel je parle".
        """
        factory = phrase.factory
        lexicon = phrase.lexicon
        relative_parent = relative_phrase.parent
        dont_allowed = relative_parent is None or (
            relative_parent.get_feature(InternalFeature.DISCOURSE_FUNCTION) != DiscourseFunction.INDIRECT_OBJECT
            and not isinstance(relative_parent.parent, PPPhraseSpec)
        )
        if (is_word(preposition, "de", LexicalCategory.PREPOSITION) and dont_allowed) or is_word(
            relative_phrase.get_feature(InternalFeature.HEAD), "en", LexicalCategory.PRONOUN
        ):
            return pronoun_phrase("dont")

        pronoun_form = "lequel"
        antecedent = phrase.parent
        if isinstance(antecedent, NPPhraseSpec):
            # a person (first or second person, proper noun) takes "qui"
            if antecedent.get_feature(Feature.PERSON) in (Person.FIRST, Person.SECOND) or antecedent.get_feature_as_boolean(
                LexicalFeature.PROPER
            ):
                pronoun_form = "qui"
            elif antecedent.get_feature(LexicalFeature.GENDER) == Gender.NEUTER:
                pronoun_form = "quoi"
        pronoun: NLGElement = factory.create_prepositional_phrase(preposition, pronoun_phrase(pronoun_form))

        if not dont_allowed:
            relative_phrase.remove_feature(FrenchInternalFeature.RELATIVISED)
            grand_parent = relative_parent.parent
            if isinstance(grand_parent, PPPhraseSpec):
                parent_preposition = grand_parent.preposition
                grand_parent.set_feature(FrenchInternalFeature.RELATIVISED, True)
            else:
                parent_preposition = lexicon.require_word("à", LexicalCategory.PREPOSITION)
                relative_parent.set_feature(FrenchInternalFeature.RELATIVISED, True)
            noun_phrase_copy = factory.create_noun_phrase(
                _fresh(relative_parent.get_feature_as_element(InternalFeature.SPECIFIER)),
                _fresh(relative_parent.get_feature_as_element(InternalFeature.HEAD)),
            )
            noun_phrase_copy.add_complement(pronoun)
            pronoun = factory.create_prepositional_phrase(parent_preposition, noun_phrase_copy)
        return pronoun

    # ------------------------------------------------------------------
    # Constituents replaced by the relative pronoun
    # ------------------------------------------------------------------

    def add_subjects_to_front(
        self, phrase: PhraseElement, realised: ListElement, split_verb: Optional[NLGElement]
    ) -> None:
        if not phrase.has_relative_phrase(DiscourseFunction.SUBJECT):
            super().add_subjects_to_front(phrase, realised, split_verb)

    def add_passive_subjects(self, phrase: PhraseElement, realised: ListElement) -> None:
        if not phrase.has_relative_phrase(DiscourseFunction.SUBJECT):
            super().add_passive_subjects(phrase, realised)

    def add_passive_complements_number_person(
        self, phrase: PhraseElement, realised: ListElement, verb_element: Optional[NLGElement]
    ) -> Optional[NLGElement]:
        if phrase.has_relative_phrase(DiscourseFunction.OBJECT):
            return None
        return super().add_passive_complements_number_person(phrase, realised, verb_element)

    def add_modifier(self, clause: PhraseElement, modifier: Any) -> None:
        """Every clause modifier follows the verb phrase; a single word is taken as an adverb."""
        if modifier is None:
            return
        element: Optional[NLGElement] = None
        if isinstance(modifier, NLGElement):
            element = modifier
        elif isinstance(modifier, str) and modifier and " " not in modifier:
            element = clause.factory.create_word(modifier, LexicalCategory.ADVERB)
        clause.add_post_modifier(element if element is not None else str(modifier))


def _fresh(element: Optional[NLGElement]) -> Optional[NLGElement]:
    """A new occurrence of a word, leaving the original in its tree."""
    if isinstance(element, InflectedWordElement) and element.base_word is not None:
        return InflectedWordElement(element.base_word)
    return element


__all__ = ["FrenchClauseHelper"]
