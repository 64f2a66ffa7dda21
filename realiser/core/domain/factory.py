# realiser/core/domain/factory.py
"""
core/domain/factory.py

`NLGFactory` builds elements bound to one lexicon (and therefore one
language). Every element it creates points back to it, which is how the
pipeline resolves an element's language and lexicon.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .categories import DocumentCategory, LexicalCategory
from .elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    InflectedWordElement,
    NLGElement,
    PhraseElement,
    StringElement,
    WordElement,
)
from .features import Language
from .phrases import (
    AdjPhraseSpec,
    AdvPhraseSpec,
    NPPhraseSpec,
    PPPhraseSpec,
    SPhraseSpec,
    VPPhraseSpec,
)
from .registry import HelperRegistry, default_registry


class NLGFactory:
    """
    Element factory for one lexicon.

    Args:
        lexicon: any object implementing `ILexicon`.
        registry: helper registry used by language-specific phrase methods
            (`add_modifier`). Defaults to the process-wide registry.
    """

    def __init__(self, lexicon: Any, registry: Optional[HelperRegistry] = None) -> None:
        self.lexicon = lexicon
        self.registry = registry or default_registry()

    @property
    def language(self) -> Language:
        return self.lexicon.language

    # Elements are snapshotted with deepcopy before realisation; the factory
    # and its lexicon are shared, never copied.
    def __copy__(self) -> "NLGFactory":
        return self

    def __deepcopy__(self, memo) -> "NLGFactory":
        return self

    # ------------------------------------------------------------------
    # Words and strings
    # ------------------------------------------------------------------

    def create_word(self, word: Any, category: LexicalCategory = LexicalCategory.ANY) -> Optional[NLGElement]:
        """Return the lexicon word for `word` (created on the fly if unknown)."""
        if word is None:
            return None
        if isinstance(word, NLGElement):
            return word
        return self.lexicon.lookup_word(str(word), category)

    def create_inflected_word(self, word: Any, category: LexicalCategory = LexicalCategory.ANY) -> Optional[NLGElement]:
        if word is None:
            return None
        if isinstance(word, WordElement):
            return InflectedWordElement(word)
        if isinstance(word, NLGElement):
            return word
        base = self.create_word(word, category)
        if isinstance(base, WordElement):
            return InflectedWordElement(base)
        return InflectedWordElement(str(word), category)

    def create_string(self, text: Optional[str]) -> StringElement:
        element = StringElement(text)
        element.factory = self
        return element

    def create_nlg_element(self, element: Any, category: LexicalCategory = LexicalCategory.ANY) -> Optional[NLGElement]:
        """
        Coerce `element` into an NLGElement.

        Strings resolve, in order, to: a lexicon word of `category`; for
        nouns, a pronoun with that base form; a lexicon word of any
        category; a word found by inflected variant; a new word of
        `category` for a single token; canned text otherwise.
        """
        if element is None:
            return None
        if isinstance(element, NLGElement):
            return element
        if not isinstance(element, str):
            return self.create_string(str(element))

        text = element.strip()
        lexicon = self.lexicon
        if lexicon.has_word(text, category):
            return lexicon.get_word(text, category)
        if category == LexicalCategory.NOUN and lexicon.has_word(text, LexicalCategory.PRONOUN):
            return lexicon.get_word(text, LexicalCategory.PRONOUN)
        if category != LexicalCategory.ANY and lexicon.has_word(text, LexicalCategory.ANY):
            return lexicon.get_word(text, LexicalCategory.ANY)
        if lexicon.has_word_from_variant(text, category):
            return lexicon.get_word_from_variant(text, category)
        if text and " " not in text:
            return lexicon.lookup_word(text, category)
        return self.create_string(text)

    # ------------------------------------------------------------------
    # Phrases
    # ------------------------------------------------------------------

    def create_noun_phrase(self, specifier_or_noun: Any = None, noun: Any = None) -> NPPhraseSpec:
        """
        `create_noun_phrase(noun)` or `create_noun_phrase(specifier, noun)`.
        An existing NPPhraseSpec is returned unchanged.
        """
        if noun is None:
            noun, specifier = specifier_or_noun, None
        else:
            specifier = specifier_or_noun

        if isinstance(noun, NPPhraseSpec):
            phrase = noun
        else:
            phrase = NPPhraseSpec(self)
            head = self.create_nlg_element(noun, LexicalCategory.NOUN)
            if head is not None:
                phrase.set_head(head)
        if specifier is not None:
            phrase.set_specifier(specifier)
        return phrase

    def create_verb_phrase(self, verb: Any = None) -> VPPhraseSpec:
        if isinstance(verb, VPPhraseSpec):
            return verb
        phrase = VPPhraseSpec(self)
        if verb is not None:
            phrase.set_verb(verb)
        return phrase

    def create_clause(self, subject: Any = None, verb: Any = None, direct_object: Any = None) -> SPhraseSpec:
        phrase = SPhraseSpec(self)
        if verb is not None:
            if isinstance(verb, (PhraseElement, CoordinatedPhraseElement)) and not isinstance(verb, NPPhraseSpec):
                phrase.set_verb_phrase(verb)
            else:
                phrase.set_verb(verb)
        if direct_object is not None:
            phrase.set_object(direct_object)
        if subject is not None:
            phrase.set_subject(subject)
        return phrase

    def create_prepositional_phrase(self, preposition: Any = None, complement: Any = None) -> PPPhraseSpec:
        phrase = PPPhraseSpec(self)
        if preposition is not None:
            phrase.set_preposition(preposition)
        if complement is not None:
            phrase.set_object(complement)
        return phrase

    def create_adjective_phrase(self, adjective: Any = None) -> AdjPhraseSpec:
        phrase = AdjPhraseSpec(self)
        if adjective is not None:
            phrase.set_adjective(adjective)
        return phrase

    def create_adverb_phrase(self, adverb: Any = None) -> AdvPhraseSpec:
        phrase = AdvPhraseSpec(self)
        if adverb is not None:
            phrase.set_adverb(adverb)
        return phrase

    def create_coordinated_phrase(self, *coordinates: Any) -> CoordinatedPhraseElement:
        return CoordinatedPhraseElement(self, *coordinates)

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def create_sentence(self, *components: Any) -> DocumentElement:
        """
        `create_sentence(element_or_text)` wraps one component;
        `create_sentence(subject, verb, complement=None)` builds a clause.
        """
        sentence = DocumentElement(DocumentCategory.SENTENCE, factory=self)
        if len(components) == 1:
            component = components[0]
            if isinstance(component, (list, tuple)):
                for item in component:
                    sentence.add_component(self._document_component(item))
            else:
                sentence.add_component(self._document_component(component))
        elif len(components) >= 2:
            clause = self.create_clause(components[0], components[1])
            if len(components) > 2 and components[2] is not None:
                clause.add_complement(components[2])
            sentence.add_component(clause)
        return sentence

    def create_paragraph(self, components: Optional[Iterable[Any]] = None) -> DocumentElement:
        paragraph = DocumentElement(DocumentCategory.PARAGRAPH, factory=self)
        for component in components or ():
            paragraph.add_component(self._document_component(component))
        return paragraph

    def _document_component(self, component: Any) -> Optional[NLGElement]:
        if component is None or isinstance(component, NLGElement):
            return component
        return self.create_string(str(component))


__all__ = ["NLGFactory"]
