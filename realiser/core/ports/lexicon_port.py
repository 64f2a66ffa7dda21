# realiser/core/ports/lexicon_port.py
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from realiser.core.domain.categories import LexicalCategory
from realiser.core.domain.elements import WordElement
from realiser.core.domain.exceptions import MissingClosedClassWordError
from realiser.core.domain.features import Language


class ILexicon(ABC):
    """
    Interface (Port) for the word store consulted by the realiser.

    Implementations provide the four primitive queries (by base form, by id,
    by inflected variant, by feature set) and word creation; the lookup
    conveniences used by the pipeline are derived from them here.
    """

    @property
    @abstractmethod
    def language(self) -> Language:
        """Language of every word in this lexicon."""
        pass

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def get_words(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> List[WordElement]:
        """All words with this base form (and category, unless ANY)."""
        pass

    @abstractmethod
    def get_words_by_id(self, word_id: str) -> List[WordElement]:
        pass

    @abstractmethod
    def get_words_from_variant(self, variant: str, category: LexicalCategory = LexicalCategory.ANY) -> List[WordElement]:
        """Words having `variant` among their base form or inflected forms."""
        pass

    @abstractmethod
    def get_words_by_features(
        self, category: LexicalCategory, features: Optional[Mapping[str, Any]]
    ) -> List[WordElement]:
        """
        Words of `category` matching a feature query. A word matches when,
        for every queried feature, it carries the same value, or the queried
        value is None/False and the word lacks the feature.
        """
        pass

    @abstractmethod
    def create_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        """Create (and remember) a word unknown to the lexicon."""
        pass

    # ------------------------------------------------------------------
    # Derived lookups
    # ------------------------------------------------------------------

    def has_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> bool:
        return bool(self.get_words(base_form, category))

    def get_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        words = self.get_words(base_form, category)
        return words[0] if words else self.create_word(base_form, category)

    def has_word_by_id(self, word_id: str) -> bool:
        return bool(self.get_words_by_id(word_id))

    def get_word_by_id(self, word_id: str) -> WordElement:
        words = self.get_words_by_id(word_id)
        return words[0] if words else self.create_word(word_id)

    def has_word_from_variant(self, variant: str, category: LexicalCategory = LexicalCategory.ANY) -> bool:
        return bool(self.get_words_from_variant(variant, category))

    def get_word_from_variant(self, variant: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        words = self.get_words_from_variant(variant, category)
        return words[0] if words else self.create_word(variant, category)

    def get_word_by_features(
        self, category: LexicalCategory, features: Optional[Mapping[str, Any]]
    ) -> Optional[WordElement]:
        words = self.get_words_by_features(category, features)
        return words[0] if words else None

    def has_word_by_features(self, category: LexicalCategory, features: Optional[Mapping[str, Any]]) -> bool:
        return bool(self.get_words_by_features(category, features))

    def lookup_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        """
        Fail-soft lookup: base form, then inflected variant, then id; an
        unknown word is created on the fly.
        """
        if self.has_word(base_form, category):
            return self.get_word(base_form, category)
        if self.has_word_from_variant(base_form, category):
            return self.get_word_from_variant(base_form, category)
        if self.has_word_by_id(base_form):
            return self.get_word_by_id(base_form)
        return self.create_word(base_form, category)

    def require_word(self, base_form: str, category: LexicalCategory) -> WordElement:
        """
        Strict lookup for closed-class words the grammar cannot do without
        ("ne", "être", "do", ...).

        Raises:
            MissingClosedClassWordError: if the lexicon lacks the word.
        """
        words = self.get_words(base_form, category)
        if not words:
            raise MissingClosedClassWordError(base_form, category, self.language)
        return words[0]

    # ------------------------------------------------------------------
    # Closed-class shortcuts
    # ------------------------------------------------------------------

    @abstractmethod
    def closed_class_base_form(self, role: str) -> str:
        """
        Base form this lexicon uses for a closed-class role:
        "addition_conjunction", "passive_preposition" or "complementiser".
        """
        pass

    def get_addition_coord_conjunction(self) -> WordElement:
        return self.require_word(self.closed_class_base_form("addition_conjunction"), LexicalCategory.CONJUNCTION)

    def get_passive_preposition(self) -> WordElement:
        return self.require_word(self.closed_class_base_form("passive_preposition"), LexicalCategory.PREPOSITION)

    def get_default_complementiser(self) -> WordElement:
        return self.require_word(self.closed_class_base_form("complementiser"), LexicalCategory.COMPLEMENTISER)
