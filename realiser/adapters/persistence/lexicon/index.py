# realiser/adapters/persistence/lexicon/index.py
"""
lexicon/index.py

In-memory lexicon built from the raw records returned by the loader.

Design goals
------------
- No filesystem knowledge (loader handles I/O).
- Exact-match lookups by base form, id, inflected variant and category,
  plus feature-set queries (used for pronoun selection).
- First-writer-wins ordering: every query returns words in load order.
- Words unknown to the lexicon are created on request and remembered, so
  a word looked up twice is the same object.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from realiser.core.domain.categories import LexicalCategory
from realiser.core.domain.elements import WordElement
from realiser.core.domain.features import Language, LexicalFeature, coerce_value
from realiser.core.ports.lexicon_port import ILexicon

from .errors import LexemeNotFound, LexiconSchemaError

logger = logging.getLogger(__name__)

_RESERVED_KEYS = {"base", "category", "id"}

# Lexicon features holding an inflected form of the word (French).
_FRENCH_FORM_FEATURES = (
    "plural",
    "feminine_singular",
    "feminine_plural",
    "liaison",
    "opposite_gender",
    "past_participle",
    "present_participle",
    "feminine_past_participle",
    "present1s", "present2s", "present3s", "present1p", "present2p", "present3p",
    "subjunctive1s", "subjunctive2s", "subjunctive3s",
    "subjunctive1p", "subjunctive2p", "subjunctive3p",
    "imperative2s", "imperative1p", "imperative2p",
)

# Closed-class words the grammar asks for by role.
_CLOSED_CLASS: Dict[Language, Dict[str, str]] = {
    Language.ENGLISH: {
        "addition_conjunction": "and",
        "passive_preposition": "by",
        "complementiser": "that",
    },
    Language.FRENCH: {
        "addition_conjunction": "et",
        "passive_preposition": "par",
        "complementiser": "que",
    },
}


def _english_form(base: str, suffix: str) -> str:
    if base.endswith("y") and not suffix.startswith("i"):
        base = base[:-1] + "ie"
    if base.endswith("e") and suffix[:1] in ("e", "i"):
        base = base[:-1]
    if suffix.startswith("s") and base.endswith(("s", "x", "z", "ch", "sh")):
        base = base + "e"
    return base + suffix


class LexiconIndex(ILexicon):
    """
    `ILexicon` implementation over a list of word records.

    Args:
        language: language of the records.
        records: dicts with "base", "category", optional "id" and features.

    Raises:
        LexiconSchemaError: if a record has no usable "base".
    """

    def __init__(self, language: Language, records: Iterable[Mapping[str, Any]] = ()) -> None:
        self._language = language
        self._words: List[WordElement] = []
        self._by_base: Dict[str, List[WordElement]] = {}
        self._by_id: Dict[str, WordElement] = {}
        self._by_variant: Dict[str, List[WordElement]] = {}
        self._by_category: Dict[LexicalCategory, List[WordElement]] = {}
        self._lock = threading.RLock()

        for record in records:
            self.add_word(self._word_from_record(record))

        if language == Language.ENGLISH:
            self._add_be_variants()

    @property
    def language(self) -> Language:
        return self._language

    def closed_class_base_form(self, role: str) -> str:
        try:
            return _CLOSED_CLASS[self._language][role]
        except KeyError:
            raise LexemeNotFound(self._language.value, role) from None

    def __len__(self) -> int:
        return len(self._words)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _word_from_record(self, record: Mapping[str, Any]) -> WordElement:
        base = record.get("base")
        if not isinstance(base, str) or not base.strip():
            raise LexiconSchemaError(f"<{self._language.value} records>", f"word without 'base': {dict(record)!r}")
        category = LexicalCategory.parse(record.get("category")) or LexicalCategory.ANY
        word = WordElement(base.strip(), category, record.get("id"), self)
        for name, value in record.items():
            if name in _RESERVED_KEYS:
                continue
            word.set_feature(name, coerce_value(name, value))
        return word

    def add_word(self, word: WordElement) -> None:
        """Index a word (base form, id, category and inflected variants)."""
        with self._lock:
            word.lexicon = self
            self._words.append(word)
            self._by_base.setdefault(word.base_form, []).append(word)
            if word.id:
                if word.id in self._by_id:
                    logger.warning("Lexicon error: id %s occurs more than once", word.id)
                else:
                    self._by_id[word.id] = word
            if isinstance(word.category, LexicalCategory):
                self._by_category.setdefault(word.category, []).append(word)
            for variant in self._variants(word):
                bucket = self._by_variant.setdefault(variant, [])
                if word not in bucket:
                    bucket.append(word)

    def _variants(self, word: WordElement) -> Set[str]:
        variants = {word.base_form}
        if self._language == Language.FRENCH:
            variants.update(self._french_variants(word))
        else:
            variants.update(self._english_variants(word))
        variants.discard("")
        return variants

    @staticmethod
    def _english_variants(word: WordElement) -> Set[str]:
        def variant(feature: LexicalFeature, suffix: str) -> str:
            value = word.get_feature_as_string(feature)
            return value if value else _english_form(word.base_form, suffix)

        category = word.category
        if category == LexicalCategory.NOUN:
            return {variant(LexicalFeature.PLURAL, "s")}
        if category == LexicalCategory.ADJECTIVE:
            return {variant(LexicalFeature.COMPARATIVE, "er"), variant(LexicalFeature.SUPERLATIVE, "est")}
        if category == LexicalCategory.VERB:
            return {
                variant(LexicalFeature.PRESENT3S, "s"),
                variant(LexicalFeature.PAST, "ed"),
                variant(LexicalFeature.PAST_PARTICIPLE, "ed"),
                variant(LexicalFeature.PRESENT_PARTICIPLE, "ing"),
            }
        return set()

    @staticmethod
    def _french_variants(word: WordElement) -> Set[str]:
        variants: Set[str] = set()
        for name in _FRENCH_FORM_FEATURES:
            value = word.get_feature(name)
            if isinstance(value, str) and value:
                variants.add(value)
        base = word.base_form
        if word.category == LexicalCategory.NOUN and not word.has_feature("plural"):
            variants.add(base if base.endswith(("s", "x", "z")) else base + "s")
        elif word.category == LexicalCategory.ADJECTIVE:
            feminine = base if base.endswith("e") else base + "e"
            variants.update({base + "s", feminine, feminine + "s"})
        return variants

    def _add_be_variants(self) -> None:
        be = self.get_words("be", LexicalCategory.VERB)
        if not be:
            return
        for form in ("is", "am", "are", "was", "were"):
            bucket = self._by_variant.setdefault(form, [])
            if be[0] not in bucket:
                bucket.append(be[0])

    # ------------------------------------------------------------------
    # ILexicon primitives
    # ------------------------------------------------------------------

    @staticmethod
    def _filter(words: List[WordElement], category: LexicalCategory) -> List[WordElement]:
        if category == LexicalCategory.ANY or category is None:
            return list(words)
        return [word for word in words if word.category == category]

    def get_words(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> List[WordElement]:
        return self._filter(self._by_base.get(base_form, []), category)

    def get_words_by_id(self, word_id: str) -> List[WordElement]:
        word = self._by_id.get(word_id)
        return [word] if word is not None else []

    def get_words_from_variant(self, variant: str, category: LexicalCategory = LexicalCategory.ANY) -> List[WordElement]:
        return self._filter(self._by_variant.get(variant, []), category)

    def get_words_by_features(
        self, category: LexicalCategory, features: Optional[Mapping[str, Any]]
    ) -> List[WordElement]:
        if category == LexicalCategory.ANY:
            candidates = list(self._words)
        else:
            candidates = list(self._by_category.get(category, []))
        if not features:
            return candidates

        query = [(getattr(name, "value", name), value) for name, value in features.items()]
        result = []
        for word in candidates:
            if all(self._matches(word, name, value) for name, value in query):
                result.append(word)
        return result

    @staticmethod
    def _matches(word: WordElement, name: str, value: Any) -> bool:
        if word.has_feature(name):
            return word.get_feature(name) == value
        return value is None or value is False

    def create_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        with self._lock:
            existing = self._filter(self._by_base.get(base_form, []), category)
            if existing:
                return existing[0]
            word = WordElement(base_form, category or LexicalCategory.ANY, None, self)
            self.add_word(word)
            logger.debug("Created word %r (%s) on the fly", base_form, word.category.value)
            return word

    # ------------------------------------------------------------------
    # Strict access
    # ------------------------------------------------------------------

    def get_word_strict(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        """
        Like get_word, without on-the-fly creation.

        Raises:
            LexemeNotFound: if no word matches.
        """
        words = self.get_words(base_form, category)
        if not words:
            pos = None if category == LexicalCategory.ANY else category.value
            raise LexemeNotFound(self._language.value, base_form, pos)
        return words[0]

    def words(self, category: LexicalCategory = LexicalCategory.ANY) -> List[WordElement]:
        if category == LexicalCategory.ANY:
            return list(self._words)
        return list(self._by_category.get(category, []))


__all__ = ["LexiconIndex"]
