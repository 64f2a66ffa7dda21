# realiser/core/domain/syntax/english/clause.py
"""
English clauses: interrogatives by do-support or subject/auxiliary
inversion, wh-words in front, a stranded "to" for who-indirect-object
questions.
"""

from __future__ import annotations

from typing import Any, Optional

from ...categories import LexicalCategory
from ...elements import ListElement, NLGElement, PhraseElement
from ...features import (
    Feature,
    InternalFeature,
    InterrogativeType,
    Language,
    LexicalFeature,
    Tense,
)
from ...phrases import AdvPhraseSpec, VPPhraseSpec
from ...registry import HelperRole, register_helper
from ..clause import AbstractClauseHelper
from .noun_phrase import modifier_word

# Question words by interrogative type; YES_NO and WHAT_OBJECT are built apart.
_KEYWORDS = {
    InterrogativeType.WHO_SUBJECT: ("who",),
    InterrogativeType.HOW: ("how",),
    InterrogativeType.WHY: ("why",),
    InterrogativeType.WHERE: ("where",),
    InterrogativeType.HOW_MANY: ("how", "many"),
    InterrogativeType.WHO_OBJECT: ("who",),
    InterrogativeType.WHO_INDIRECT_OBJECT: ("who",),
}


@register_helper(Language.ENGLISH, HelperRole.CLAUSE)
class EnglishClauseHelper(AbstractClauseHelper):
    def add_ending_to(self, phrase: PhraseElement, realised: ListElement) -> None:
        """Stranded preposition of a who-indirect-object question: "who did Mary give the book to"."""
        if phrase.get_feature(Feature.INTERROGATIVE_TYPE) == InterrogativeType.WHO_INDIRECT_OBJECT:
            word = phrase.factory.create_word("to", LexicalCategory.PREPOSITION)
            realised.add_component(self.realise_syntax(word))

    def realise_interrogative(
        self, phrase: PhraseElement, realised: ListElement, verb_element: Optional[NLGElement]
    ) -> Optional[NLGElement]:
        if phrase.parent is not None:
            phrase.parent.set_feature(InternalFeature.INTERROGATIVE, True)

        question = phrase.get_feature(Feature.INTERROGATIVE_TYPE)
        if not isinstance(question, InterrogativeType):
            return None

        if question == InterrogativeType.YES_NO:
            return self.realise_yes_no(phrase, verb_element, realised)
        if question == InterrogativeType.WHAT_OBJECT:
            return self.realise_what_interrogative(phrase, verb_element, realised)

        for keyword in _KEYWORDS[question]:
            self.realise_keyword(keyword, phrase, realised)
        if question in (InterrogativeType.HOW, InterrogativeType.WHY, InterrogativeType.WHERE):
            return self.realise_yes_no(phrase, verb_element, realised)
        if question in (InterrogativeType.WHO_OBJECT, InterrogativeType.WHO_INDIRECT_OBJECT):
            self.add_do_auxiliary(phrase, verb_element, realised)
        return None

    def realise_what_interrogative(
        self, phrase: PhraseElement, verb_element: Optional[NLGElement], realised: ListElement
    ) -> Optional[NLGElement]:
        self.realise_keyword("what", phrase, realised)
        if phrase.get_tense() != Tense.FUTURE:
            self.add_do_auxiliary(phrase, verb_element, realised)
            return None
        if not phrase.get_feature_as_boolean(Feature.PASSIVE):
            return self.realise_subjects(phrase)
        return None

    def realise_keyword(self, keyword: str, phrase: PhraseElement, realised: ListElement) -> None:
        word = phrase.factory.create_word(keyword, LexicalCategory.NOUN)
        current = self.realise_syntax(word)
        if current is not None:
            realised.add_component(current)

    def add_do_auxiliary(
        self, phrase: PhraseElement, verb_element: Optional[NLGElement], realised: ListElement
    ) -> None:
        """Realise "do" agreeing with the clause, or with its verb when the clause is silent."""
        do_phrase = phrase.factory.create_verb_phrase("do")
        do_phrase.set_tense(phrase.get_tense())
        for name in (Feature.PERSON, Feature.NUMBER):
            value = phrase.get_feature(name)
            if value is None and verb_element is not None:
                value = verb_element.get_feature(name)
            do_phrase.set_feature(name, value)
        realised.add_component(self.realise_syntax(do_phrase))

    def realise_yes_no(
        self, phrase: PhraseElement, verb_element: Optional[NLGElement], realised: ListElement
    ) -> Optional[NLGElement]:
        """
        Do-support for a simple verb ("does the woman kiss the man");
        otherwise the first auxiliary is inverted with the subject
        ("is the woman kissing the man").
        """
        copular = isinstance(verb_element, VPPhraseSpec) and self.registry.verb_phrase_helper(
            phrase.language
        ).is_copular(verb_element.verb)
        if (
            not copular
            and not phrase.get_feature_as_boolean(Feature.PROGRESSIVE)
            and not phrase.get_feature_as_boolean(Feature.PERFECT)
            and not phrase.has_feature(Feature.MODAL)
            and phrase.get_tense() != Tense.FUTURE
            and not phrase.is_negated()
            and not phrase.get_feature_as_boolean(Feature.PASSIVE)
        ):
            self.add_do_auxiliary(phrase, verb_element, realised)
            return None
        return self.realise_subjects(phrase)

    def add_modifier(self, clause: PhraseElement, modifier: Any) -> None:
        """
        Adverb phrases and plain adverbs go before the verb, sentence
        adverbs ("however") in front of the clause, anything else at the end.
        """
        if modifier is None:
            return
        element: Optional[NLGElement] = None
        if isinstance(modifier, NLGElement):
            element = modifier
        elif isinstance(modifier, str) and modifier and " " not in modifier:
            element = clause.factory.create_word(modifier, LexicalCategory.ANY)

        if element is None:
            clause.add_post_modifier(str(modifier))
            return
        if isinstance(element, AdvPhraseSpec):
            clause.add_pre_modifier(element)
            return
        word = modifier_word(element)
        if word is not None and word.category == LexicalCategory.ADVERB:
            if word.get_feature_as_boolean(LexicalFeature.SENTENCE_MODIFIER):
                clause.add_front_modifier(word)
            else:
                clause.add_pre_modifier(word)
            return
        clause.add_post_modifier(element)


__all__ = ["EnglishClauseHelper"]
