# realiser/core/domain/orthography/base.py
"""
orthography/base.py

Last stage of the pipeline: turns the morphology output (string elements
nested in lists, coordinations and documents) into settled strings.

This module defines `OrthographyHelper`, the ORTHOGRAPHY-role base class.
It owns both passes the stage is made of:

- morphophonology (`apply_morphophonology`), applied by the registry to
  every pair of adjacent words before linearisation;
- linearisation (`realise_list_element`, `realise_coordinated_phrase`,
  `realise_sentence`): single-space joining, sentence capitalisation and
  terminal punctuation.

A child whose realisation is None or empty (elided, or absorbed by a
contraction such as "de" + "le" -> "du") produces neither text nor
separator.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..elements import DocumentElement, ListElement, NLGElement, StringElement
from ..features import DiscourseFunction, InternalFeature, LexicalFeature

if TYPE_CHECKING:  # pragma: no cover
    from ..registry import HelperRegistry

# a space followed by another space or a comma
_EXTRA_SPACE = re.compile(r" (?=( |,))")


def capitalise_first_letter(text: str) -> str:
    """Upper-case the first letter, accented Latin-1 lowercase letters included."""
    if not text:
        return text
    first = text[0]
    if "a" <= first <= "z" or "à" <= first <= "ý":
        return first.upper() + text[1:]
    return text


def terminate_sentence(text: str, interrogative: bool) -> str:
    if not text or text[-1] in ".?":
        return text
    return text + ("?" if interrogative else ".")


class OrthographyHelper:
    """Base orthography rules; the English rules are these with "a" -> "an"."""

    def __init__(self, registry: "HelperRegistry") -> None:
        self.registry = registry

    # ------------------------------------------------------------------
    # Morphophonology
    # ------------------------------------------------------------------

    def apply_morphophonology(self, left: StringElement, right: StringElement) -> None:
        """Rewrite the realisations of two adjacent words in place."""
        return None

    # ------------------------------------------------------------------
    # Linearisation
    # ------------------------------------------------------------------

    def realise_child(self, child: NLGElement) -> Optional[str]:
        realised = self.registry.realise_orthography(child)
        if realised is None or not realised.realisation:
            return None
        return realised.realisation.strip()

    def list_separator(self, element: ListElement) -> str:
        return ""

    def realise_list(self, components: Sequence[NLGElement], separator: str = "") -> str:
        parts: List[str] = []
        last = len(components) - 1
        for index, child in enumerate(components):
            text = self.realise_child(child)
            if not text:
                continue
            if separator and index < last:
                text += separator
            parts.append(text)
        return self.tidy(" ".join(parts))

    def realise_list_element(self, element: ListElement) -> StringElement:
        text = self.realise_list(element.get_children(), self.list_separator(element))
        realised = StringElement(text)
        # list items keep their category for later formatting
        realised.category = element.category
        return realised

    def realise_coordinated_phrase(self, components: Sequence[NLGElement]) -> StringElement:
        """
        Coordinates joined by their conjunctions; every conjunction except
        the last becomes a comma ("A, B and C").
        """
        parts: List[str] = []
        length = len(components)
        for index, child in enumerate(components):
            is_conjunction = child.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.CONJUNCTION
            if is_conjunction and index < length - 2:
                if index > 0:
                    parts.append(",")
                continue
            text = self.realise_child(child)
            if text:
                parts.append(text)
        return StringElement(self.tidy(" ".join(parts)))

    @staticmethod
    def tidy(text: str) -> str:
        return _EXTRA_SPACE.sub("", text).strip()

    def realise_sentence(self, components: Sequence[NLGElement], element: NLGElement) -> NLGElement:
        """
        Realise a sentence document: join its components, capitalise and
        punctuate. The components are consumed, so that realising the
        sentence again leaves it unchanged.
        """
        if not components:
            return element
        text = self.tidy(self.realise_list(list(components)))
        if text:
            text = capitalise_first_letter(text)
            text = terminate_sentence(text, element.get_feature_as_boolean(InternalFeature.INTERROGATIVE))
        if isinstance(element, DocumentElement):
            element.clear_components()
        element.realisation = text
        return element

    @staticmethod
    def comma_allowed(element: NLGElement) -> bool:
        return not element.get_feature_as_boolean(LexicalFeature.NO_COMMA)


__all__ = ["OrthographyHelper", "capitalise_first_letter", "terminate_sentence"]
