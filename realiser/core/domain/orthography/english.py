# realiser/core/domain/orthography/english.py
from __future__ import annotations

import re
from typing import List, Sequence

from ..elements import ListElement, NLGElement, StringElement
from ..features import DiscourseFunction, InternalFeature, Language
from ..registry import HelperRole, register_helper
from .base import OrthographyHelper

_VOWEL_START = re.compile(r"^[aeiouAEIOU]")


@register_helper(Language.ENGLISH, HelperRole.ORTHOGRAPHY)
class EnglishOrthographyHelper(OrthographyHelper):
    def apply_morphophonology(self, left: StringElement, right: StringElement) -> None:
        """'a' becomes 'an' before a vowel-initial word."""
        if left.realisation not in ("a", "A"):
            return
        if right.realisation and _VOWEL_START.match(right.realisation):
            left.realisation = left.realisation + "n"

    def list_separator(self, element: ListElement) -> str:
        """Premodifiers are comma-separated ("a big, red ball") unless NO_COMMA is set."""
        children = element.get_children()
        if not children or not self.registry.comma_sep_premodifiers:
            return ""
        first = children[0]
        if first.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.PRE_MODIFIER and self.comma_allowed(
            first
        ):
            return ","
        return ""

    def realise_list(self, components: Sequence[NLGElement], separator: str = "") -> str:
        if not self.registry.comma_sep_cuephrase:
            return super().realise_list(components, separator)

        parts: List[str] = []
        last = len(components) - 1
        for index, child in enumerate(components):
            text = self.realise_child(child)
            if not text:
                continue
            cue_phrase = child.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.CUE_PHRASE
            if index < last and (separator or (cue_phrase and self.comma_allowed(child))):
                text += separator or ","
            parts.append(text)
        return self.tidy(" ".join(parts))


__all__ = ["EnglishOrthographyHelper"]
