# realiser/core/domain/syntax/english/verb_phrase.py
"""
English verb groups.

The group is built from the main verb outwards, each aspect or voice
pushing the current front verb and replacing it with its auxiliary:

    passive      -> be   + past participle
    progressive  -> be   + present participle
    perfect      -> have + past participle
    modal        -> modal + bare form
    negation     -> "not" after the first auxiliary, or do-support

The first word pushed is the main verb; everything above it is realised
as auxiliaries.
"""

from __future__ import annotations

from typing import Any, Optional

from ...categories import LexicalCategory, PhraseCategory
from ...elements import (
    CoordinatedPhraseElement,
    InflectedWordElement,
    NLGElement,
    PhraseElement,
    StringElement,
    WordElement,
)
from ...features import (
    Feature,
    Form,
    InternalFeature,
    InterrogativeType,
    Language,
    NumberAgreement,
    Tense,
)
from ...registry import HelperRole, register_helper
from ..verb_phrase import AbstractVerbPhraseHelper, VerbGroup
from .noun_phrase import modifier_word

_FINITE_FORMS = (None, Form.NORMAL, Form.SUBJUNCTIVE)


def _auxiliary(phrase: PhraseElement, base_form: str) -> InflectedWordElement:
    return InflectedWordElement(phrase.lexicon.require_word(base_form, LexicalCategory.VERB))


@register_helper(Language.ENGLISH, HelperRole.VERB_PHRASE)
class EnglishVerbPhraseHelper(AbstractVerbPhraseHelper):
    def split_verb_group(self, verb_group: VerbGroup, main_verb: VerbGroup, auxiliaries: VerbGroup) -> None:
        if not verb_group:
            return
        main_verb.append(verb_group[0])
        auxiliaries.extend(verb_group[1:])

    def create_verb_group(self, phrase: PhraseElement) -> VerbGroup:
        form = phrase.get_feature(Feature.FORM)
        tense = phrase.get_tense()
        modal = phrase.get_feature_as_string(Feature.MODAL)
        interrogative = phrase.has_feature(Feature.INTERROGATIVE_TYPE)
        actual_modal: Optional[str] = None
        modal_past = False
        verb_group: VerbGroup = []

        if form in (Form.GERUND, Form.INFINITIVE):
            tense = Tense.PRESENT

        # a coordinated head takes "will" on the coordination, not on each verb
        simple_head = not isinstance(phrase.head, CoordinatedPhraseElement) or interrogative
        if form == Form.INFINITIVE:
            actual_modal = "to"
        elif form in _FINITE_FORMS:
            if tense == Tense.FUTURE and modal is None and simple_head:
                actual_modal = "will"
            elif tense == Tense.CONDITIONAL and modal is None and simple_head:
                actual_modal = "could"
            elif modal is not None:
                actual_modal = modal
                modal_past = tense == Tense.PAST
            if modal is not None and form == Form.SUBJUNCTIVE:
                self.report_unsupported("modal with subjunctive form", modal=modal, language="en")

        self.push_particles(phrase, verb_group)
        front = self.grab_head_verb(phrase, tense, modal is not None)
        self.check_imperative_infinitive(form, front)

        if phrase.get_feature_as_boolean(Feature.PASSIVE):
            front = self.add_be(phrase, front, verb_group, Form.PAST_PARTICIPLE)
        if phrase.get_feature_as_boolean(Feature.PROGRESSIVE):
            front = self.add_be(phrase, front, verb_group, Form.PRESENT_PARTICIPLE)
        if phrase.get_feature_as_boolean(Feature.PERFECT) or modal_past:
            front = self.add_have(phrase, front, verb_group, modal, tense)

        front = self.push_if_modal(actual_modal is not None, phrase, front, verb_group)
        front = self.create_not(phrase, verb_group, front, modal is not None)
        if front is not None:
            self.push_front_verb(phrase, verb_group, front, form, interrogative)
        self.push_modal(actual_modal, phrase, verb_group)
        return verb_group

    # ------------------------------------------------------------------
    # Verb group steps
    # ------------------------------------------------------------------

    def push_particles(self, phrase: PhraseElement, verb_group: VerbGroup) -> None:
        particle = phrase.get_feature(Feature.PARTICLE)
        if isinstance(particle, str):
            verb_group.append(StringElement(particle))
        elif isinstance(particle, NLGElement):
            verb_group.append(particle)

    def check_imperative_infinitive(self, form: Any, front: Optional[NLGElement]) -> None:
        if front is not None and form in (Form.IMPERATIVE, Form.INFINITIVE, Form.BARE_INFINITIVE):
            front.set_feature(InternalFeature.NON_MORPH, True)

    def add_be(
        self, phrase: PhraseElement, front: Optional[NLGElement], verb_group: VerbGroup, front_form: Form
    ) -> NLGElement:
        if front is not None:
            front.set_feature(Feature.FORM, front_form)
            verb_group.append(front)
        return _auxiliary(phrase, "be")

    def add_have(
        self,
        phrase: PhraseElement,
        front: Optional[NLGElement],
        verb_group: VerbGroup,
        modal: Optional[str],
        tense: Tense,
    ) -> NLGElement:
        if front is not None:
            front.set_feature(Feature.FORM, Form.PAST_PARTICIPLE)
            verb_group.append(front)
        have = _auxiliary(phrase, "have")
        have.set_tense(tense)
        if modal is not None:
            have.set_feature(InternalFeature.NON_MORPH, True)
        return have

    def create_not(
        self, phrase: PhraseElement, verb_group: VerbGroup, front: Optional[NLGElement], has_modal: bool
    ) -> Optional[NLGElement]:
        if not phrase.is_negated():
            return front
        if verb_group or (front is not None and self.is_copular(front)):
            verb_group.append(InflectedWordElement("not", LexicalCategory.ADVERB))
            return front

        # do-support: "does not kiss"
        if front is not None and not has_modal:
            front.set_negated(True)
            verb_group.append(front)
        verb_group.append(InflectedWordElement("not", LexicalCategory.ADVERB))
        return _auxiliary(phrase, "do")

    def push_front_verb(
        self, phrase: PhraseElement, verb_group: VerbGroup, front: NLGElement, form: Any, interrogative: bool
    ) -> None:
        if form == Form.GERUND:
            front.set_feature(Feature.FORM, Form.PRESENT_PARTICIPLE)
        elif form == Form.PAST_PARTICIPLE:
            front.set_feature(Feature.FORM, Form.PAST_PARTICIPLE)
        elif form == Form.PRESENT_PARTICIPLE:
            front.set_feature(Feature.FORM, Form.PRESENT_PARTICIPLE)
        elif (form not in _FINITE_FORMS or interrogative) and not self.is_copular(phrase.head) and not verb_group:
            # do-support or inversion already carries the tense
            if phrase.get_feature(Feature.INTERROGATIVE_TYPE) != InterrogativeType.WHO_SUBJECT:
                front.set_feature(InternalFeature.NON_MORPH, True)
        else:
            front.set_tense(phrase.get_tense())
            front.set_feature(Feature.PERSON, phrase.get_feature(Feature.PERSON))
            front.set_feature(Feature.NUMBER, self.determine_number(phrase.parent, phrase))
        verb_group.append(front)

    def push_modal(self, actual_modal: Optional[str], phrase: PhraseElement, verb_group: VerbGroup) -> None:
        if actual_modal is not None and not phrase.get_feature_as_boolean(InternalFeature.IGNORE_MODAL):
            verb_group.append(InflectedWordElement(actual_modal, LexicalCategory.MODAL))

    # ------------------------------------------------------------------
    # Agreement
    # ------------------------------------------------------------------

    def determine_number(self, parent: Optional[NLGElement], phrase: PhraseElement) -> NumberAgreement:
        """
        The verb's own number, except after expletive "there" with a copula
        where the complement decides: "there is a dog", "there are dogs".
        """
        value = phrase.get_feature(Feature.NUMBER)
        number = value if isinstance(value, NumberAgreement) else NumberAgreement.SINGULAR
        if (
            isinstance(parent, PhraseElement)
            and parent.is_a(PhraseCategory.CLAUSE)
            and self.phrase_helper_for(phrase).is_expletive_subject(parent)
            and self.is_copular(phrase.head)
        ):
            plural = any(
                complement.is_a(PhraseCategory.NOUN_PHRASE)
                and complement.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL
                for complement in phrase.complements
            )
            number = NumberAgreement.PLURAL if plural else NumberAgreement.SINGULAR
        return number

    def is_copular(self, element: Optional[NLGElement]) -> bool:
        if isinstance(element, (InflectedWordElement, WordElement)):
            return (element.base_form or "").lower() == "be"
        return False

    def add_modifier(self, verb_phrase: PhraseElement, modifier: Any) -> None:
        """Adverbs go before the verb, anything else after it."""
        if modifier is None:
            return
        element: Optional[NLGElement] = None
        if isinstance(modifier, NLGElement):
            element = modifier
        elif isinstance(modifier, str) and modifier and " " not in modifier:
            element = verb_phrase.factory.create_word(modifier, LexicalCategory.ANY)

        if element is None:
            verb_phrase.add_post_modifier(str(modifier))
            return
        word = modifier_word(element)
        if word is not None and word.category == LexicalCategory.ADVERB:
            verb_phrase.add_pre_modifier(word)
            return
        verb_phrase.add_post_modifier(element)


__all__ = ["EnglishVerbPhraseHelper"]
