# realiser/core/domain/orthography/french.py
"""
French orthography and morphophonology.

Morphophonology (pairs of adjacent words):
- contraction of "de"/"à" with the articles "le"/"les" and the relative
  pronouns "lequel"/"lesquel(le)s": du, des, au, aux, duquel, auxquelles...
- elision before a vowel or a mute h: l', d', qu', j', m', t', s', n', c',
  and "si il" -> "s'il";
- liaison forms: "bel", "nouvel", "vieil" before a masculine noun, "cet",
  and "mon"/"ton"/"son" for a feminine possessive;
- a detached 1st/2nd person pronoun before "en"/"y" takes its clitic form
  ("donne-m'en");
- a duplicated "de" or "que" keeps only the second one.

Linearisation: no space after an apostrophe, commas between consecutive
adverbs and after front modifiers and cue phrases, a hyphen between an
imperative verb and its clitic pronouns ("donne-le-moi").
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from ..categories import LexicalCategory, PhraseCategory
from ..elements import InflectedWordElement, NLGElement, StringElement, WordElement
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
)
from ..registry import HelperRole, register_helper
from .base import OrthographyHelper

_VOWEL_OR_H = re.compile(r"^[aAäÄàÀâÂeEëËéÉèÈêÊiIïÏîÎoOôÔuUûÛüÜùÙyYýÝÿŸhH]")

_ENDS_WITH_DE = re.compile(r"^(.+ |)de$")
_ENDS_WITH_A = re.compile(r"^(.+ |)à$")
_LE = re.compile(r"^le(quel)?$")
_LES = re.compile(r"^les(quel(le)?s)?$")
_IL = re.compile(r"^ils?$")

_ADVERBIAL = (LexicalCategory.ADVERB, PhraseCategory.ADVERB_PHRASE)
_VERBAL = (LexicalCategory.VERB, LexicalCategory.MODAL, LexicalCategory.AUXILIARY)


def begins_with_vowel(word: StringElement) -> bool:
    """
    True if the word starts with a vowel or a mute h. Words marked
    ASPIRED_H and ordinals ("le onzième") count as consonant-initial.
    """
    text = word.realisation
    if not text:
        return False
    return (
        bool(_VOWEL_OR_H.match(text))
        and not word.get_feature_as_boolean(FrenchLexicalFeature.ASPIRED_H)
        and not text.endswith("ième")
    )


@register_helper(Language.FRENCH, HelperRole.ORTHOGRAPHY)
class FrenchOrthographyHelper(OrthographyHelper):
    # ------------------------------------------------------------------
    # Morphophonology
    # ------------------------------------------------------------------

    def apply_morphophonology(self, left: StringElement, right: StringElement) -> None:
        if left.realisation is None or right.realisation is None:
            return
        self.contract(left, right)
        self.attach_before_special_pronoun(left, right)
        self.elide(left, right)
        self.use_liaison_form(left, right)
        self.remove_duplicate(left, right)

    @staticmethod
    def contract(left: StringElement, right: StringElement) -> None:
        """"de le" -> "du", "à les" -> "aux", also with "lequel"."""
        if not left.is_a(LexicalCategory.PREPOSITION):
            return
        relative = right.get_feature(FrenchLexicalFeature.PRONOUN_TYPE) == PronounType.RELATIVE
        if not (right.is_a(LexicalCategory.DETERMINER) or relative):
            return

        left_text, right_text = left.realisation, right.realisation
        if _ENDS_WITH_DE.match(left_text):
            stem, singular, plural = left_text[:-2], "du", "des"
        elif _ENDS_WITH_A.match(left_text):
            stem, singular, plural = left_text[:-1], "au", "aux"
        else:
            return

        if _LE.match(right_text):
            left.realisation = stem + singular + right_text[2:]
            right.realisation = None
        elif _LES.match(right_text):
            left.realisation = stem + plural + right_text[3:]
            right.realisation = None

    @staticmethod
    def attach_before_special_pronoun(left: StringElement, right: StringElement) -> None:
        """A detached "moi"/"toi" before "en" or "y" takes its clitic form."""
        if not (left.is_a(LexicalCategory.PRONOUN) and right.is_a(LexicalCategory.PRONOUN)):
            return
        if right.get_feature(FrenchLexicalFeature.PRONOUN_TYPE) != PronounType.SPECIAL_PERSONAL:
            return
        if (
            left.get_feature(Feature.PERSON) not in (Person.FIRST, Person.SECOND)
            or left.get_feature(FrenchLexicalFeature.PRONOUN_TYPE) != PronounType.PERSONAL
            or left.get_feature(Feature.NUMBER) != NumberAgreement.SINGULAR
            or not left.get_feature_as_boolean(FrenchLexicalFeature.DETACHED)
        ):
            return

        base_word = left.get_feature(InternalFeature.BASE_WORD)
        if not isinstance(base_word, WordElement) or base_word.lexicon is None:
            return
        query: Dict[Any, Any] = base_word.all_features()
        for name in (LexicalFeature.BASE_FORM, LexicalFeature.DEFAULT_INFL):
            query.pop(name.value, None)
        query[FrenchLexicalFeature.DETACHED.value] = False
        query[InternalFeature.DISCOURSE_FUNCTION.value] = None

        word = base_word.lexicon.get_word_by_features(LexicalCategory.PRONOUN, query)
        if word is None:
            return
        replacement = InflectedWordElement(word)
        left.clear_all_features()
        left.copy_features_from(replacement)
        left.category = replacement.category
        left.set_feature(Feature.ELIDED, False)
        left.realisation = word.base_form

    @staticmethod
    def elide(left: StringElement, right: StringElement) -> None:
        """Replace the final vowel of the left word by an apostrophe."""
        left_text, right_text = left.realisation, right.realisation
        if not left_text or right_text is None:
            return
        elidable = (
            left.get_feature_as_boolean(FrenchLexicalFeature.VOWEL_ELISION) and not left.is_plural()
        ) or left_text.endswith((" de", " que"))
        si_il = (left_text == "si" or left_text.endswith(" si")) and bool(_IL.match(right_text))
        if (elidable and begins_with_vowel(right)) or si_il:
            left.realisation = left_text[:-1] + "'"

    @staticmethod
    def use_liaison_form(left: StringElement, right: StringElement) -> None:
        """
        "beau" -> "bel" before a masculine singular noun, "ce" -> "cet",
        "ma" -> "mon" before a vowel.
        """
        parent = left.parent
        if parent is None:
            return
        is_determiner = left.is_a(LexicalCategory.DETERMINER)
        if not (is_determiner or left.is_a(LexicalCategory.ADJECTIVE)):
            return
        if not parent.has_feature(LexicalFeature.GENDER) and parent.parent is not None:
            parent = parent.parent
        feminine = parent.get_feature(LexicalFeature.GENDER) == Gender.FEMININE

        liaison = left.get_feature_as_string(FrenchLexicalFeature.LIAISON)
        if not liaison or not begins_with_vowel(right) or parent.is_plural():
            return
        possessive = left.get_feature_as_boolean(Feature.POSSESSIVE)
        if (is_determiner and possessive == feminine) or (
            not is_determiner and not feminine and right.is_a(LexicalCategory.NOUN)
        ):
            left.realisation = liaison

    @staticmethod
    def remove_duplicate(left: StringElement, right: StringElement) -> None:
        left_text, right_text = left.realisation, right.realisation
        if (left_text == "de" and right_text in ("de", "du", "d'")) or (
            left_text == "que" and right_text in ("que", "qu'")
        ):
            left.realisation = None

    # ------------------------------------------------------------------
    # Linearisation
    # ------------------------------------------------------------------

    def realise_coordinated_phrase(self, components: Sequence[NLGElement]) -> StringElement:
        """
        Like the base rule, with repeated conjunctions ("ni A ni B") and
        a comma before conjunctions other than "et"/"ou" (those carry
        NO_COMMA in the lexicon).
        """
        parts: List[str] = []
        length = len(components)
        for index, child in enumerate(components):
            if child.get_feature(InternalFeature.DISCOURSE_FUNCTION) == DiscourseFunction.CONJUNCTION:
                repeated = child.get_feature_as_boolean(FrenchLexicalFeature.REPEATED_CONJUNCTION)
                if index == 0:
                    if not repeated:
                        continue
                elif index < length - 2 and not repeated:
                    parts.append(",")
                    continue
                elif self.comma_allowed(child):
                    parts.append(",")
            text = self.realise_child(child)
            if text:
                parts.append(text)
        return StringElement(self.tidy(" ".join(parts)))

    def realise_list(self, components: Sequence[NLGElement], separator: str = "") -> str:
        text = ""
        imperative = False
        last = len(components) - 1

        for index, child in enumerate(components):
            realised = self.realise_child(child)
            if not realised:
                continue
            text += realised

            separator_added = False
            if index < last:
                following = components[index + 1]
                parent_category = child.parent.category if child.parent is not None else None
                if separator:
                    text += separator
                    separator_added = True
                elif (
                    parent_category != PhraseCategory.ADVERB_PHRASE
                    and child.category in _ADVERBIAL
                    and following.category in _ADVERBIAL
                ):
                    text += ","
                    separator_added = True

            function = child.get_feature(InternalFeature.DISCOURSE_FUNCTION)
            if (
                not separator_added
                and function in (DiscourseFunction.FRONT_MODIFIER, DiscourseFunction.CUE_PHRASE)
                and self.comma_allowed(child)
            ):
                text += ","
                separator_added = True

            dash_added = False
            if not separator_added and index < last:
                following = components[index + 1]
                if child.category in _VERBAL and child.get_feature(Feature.FORM) == Form.IMPERATIVE:
                    imperative = True
                if imperative and self.is_clitic(following):
                    if not realised.endswith("'"):
                        text += "-"
                        dash_added = True
                else:
                    imperative = False

            # no space after an apostrophe or a hyphen
            if not realised.endswith("'") and not dash_added:
                text += " "

        return self.tidy(text)

    @staticmethod
    def is_clitic(element: Optional[NLGElement]) -> bool:
        if element is None:
            return False
        nominal = element.is_a(LexicalCategory.PRONOUN) or element.is_a(PhraseCategory.NOUN_PHRASE)
        return nominal and element.get_feature_as_boolean(FrenchInternalFeature.CLITIC)


__all__ = ["FrenchOrthographyHelper", "begins_with_vowel"]
