# realiser/core/domain/syntax/english/phrase.py
from __future__ import annotations

from ...categories import PhraseCategory
from ...elements import PhraseElement
from ...features import InternalFeature, Language, LexicalFeature
from ...registry import HelperRole, register_helper
from ..phrase import GenericPhraseHelper


@register_helper(Language.ENGLISH, HelperRole.PHRASE)
class EnglishPhraseHelper(GenericPhraseHelper):
    """Generic phrases and coordination for English."""

    def is_expletive_subject(self, phrase: PhraseElement) -> bool:
        subjects = phrase.get_feature_as_element_list(InternalFeature.SUBJECTS)
        if len(subjects) != 1:
            return False
        subject = subjects[0]
        if subject.is_a(PhraseCategory.NOUN_PHRASE):
            return subject.get_feature_as_boolean(LexicalFeature.EXPLETIVE_SUBJECT)
        if subject.is_a(PhraseCategory.CANNED_TEXT):
            return (subject.realisation or "").lower() == "there"
        return False
