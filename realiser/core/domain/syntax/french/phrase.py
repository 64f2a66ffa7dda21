# realiser/core/domain/syntax/french/phrase.py
from __future__ import annotations

from typing import Optional

from ...elements import ListElement, PhraseElement
from ...features import FrenchInternalFeature, Language
from ...registry import HelperRole, register_helper
from ..phrase import GenericPhraseHelper


@register_helper(Language.FRENCH, HelperRole.PHRASE)
class FrenchPhraseHelper(GenericPhraseHelper):
    def realise(self, phrase: Optional[PhraseElement]) -> Optional[ListElement]:
        """
        A prepositional phrase moved to the front of a relative clause
        ("la maison dans laquelle ...") is marked RELATIVISED and realised
        there; in its original position it produces nothing. The mark is
        consumed so that a second realisation of the tree is unaffected.
        """
        if phrase is None:
            return None
        if phrase.get_feature_as_boolean(FrenchInternalFeature.RELATIVISED):
            phrase.remove_feature(FrenchInternalFeature.RELATIVISED)
            return None
        return super().realise(phrase)


__all__ = ["FrenchPhraseHelper"]
