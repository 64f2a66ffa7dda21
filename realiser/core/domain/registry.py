# realiser/core/domain/registry.py
"""
core/domain/registry.py

Helper registry and stage dispatcher.

Every language contributes six helpers, one per `HelperRole`:

    CLAUSE, NOUN_PHRASE, VERB_PHRASE, PHRASE  -> syntax stage
    MORPHOLOGY                                -> morphology stage
    ORTHOGRAPHY                               -> morphophonology + orthography

Helper classes register themselves with the `register_helper` class
decorator. A `HelperRegistry` instance builds each helper lazily on first
use and memoizes it per (language, role); helpers receive the registry so
they can dispatch recursively without touching global state.

The registry also owns the four per-stage dispatch functions
(`realise_syntax`, `realise_morphology`, `realise_morphophonology`,
`realise_orthography`). Each one matches on the element variant and, for
phrases and words, on the category; nothing else in the pipeline branches
on language.
"""

from __future__ import annotations

import importlib
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

import structlog

from .categories import DocumentCategory, LexicalCategory, PhraseCategory
from .elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
    StringElement,
    WordElement,
)
from .exceptions import (
    HelperRegistrationError,
    LanguageNotSupportedError,
    UnsupportedFeatureCombinationError,
)
from .features import (
    DiscourseFunction,
    Feature,
    InternalFeature,
    Language,
    LexicalFeature,
)

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Roles and class registry
# ---------------------------------------------------------------------------


class HelperRole(str, Enum):
    CLAUSE = "clause"
    NOUN_PHRASE = "noun_phrase"
    VERB_PHRASE = "verb_phrase"
    PHRASE = "phrase"
    MORPHOLOGY = "morphology"
    ORTHOGRAPHY = "orthography"


HELPER_CLASSES: Dict[Tuple[Language, HelperRole], Type[Any]] = {}
"""
Global registry mapping (language, role) -> helper class.

Filled at import time by the language packages listed in
`_BUILTIN_HELPER_MODULES`.
"""

# Modules whose import registers the built-in rule sets.
_BUILTIN_HELPER_MODULES = (
    "realiser.core.domain.syntax.english",
    "realiser.core.domain.syntax.french",
    "realiser.core.domain.morphology.english",
    "realiser.core.domain.morphology.french",
    "realiser.core.domain.orthography.english",
    "realiser.core.domain.orthography.french",
)

_builtins_loaded = False
_builtins_lock = threading.Lock()


def register_helper(language: Language, role: HelperRole) -> Callable[[Type[Any]], Type[Any]]:
    """
    Class decorator registering a helper implementation.

    Usage:

        @register_helper(Language.FRENCH, HelperRole.VERB_PHRASE)
        class FrenchVerbPhraseHelper(AbstractVerbPhraseHelper):
            ...
    """
    if not isinstance(language, Language):
        raise HelperRegistrationError(f"unknown language {language!r}")
    if not isinstance(role, HelperRole):
        raise HelperRegistrationError(f"unknown role {role!r}")

    def decorator(cls: Type[Any]) -> Type[Any]:
        key = (language, role)
        if key in HELPER_CLASSES and HELPER_CLASSES[key] is not cls:
            raise HelperRegistrationError(
                f"'{role.value}' helper already registered for language '{language.value}'"
            )
        HELPER_CLASSES[key] = cls
        cls.language = language  # type: ignore[attr-defined]
        cls.role = role  # type: ignore[attr-defined]
        return cls

    return decorator


def load_builtin_helpers() -> None:
    """Import the bundled English and French rule sets (idempotent)."""
    global _builtins_loaded
    if _builtins_loaded:
        return
    with _builtins_lock:
        if _builtins_loaded:
            return
        for module_name in _BUILTIN_HELPER_MODULES:
            importlib.import_module(module_name)
        _builtins_loaded = True


def list_registered_helpers() -> Dict[Tuple[Language, HelperRole], Type[Any]]:
    """Snapshot of the class registry, for introspection."""
    load_builtin_helpers()
    return dict(HELPER_CLASSES)


def supported_languages() -> List[Language]:
    """Languages with a complete set of six helpers."""
    load_builtin_helpers()
    return [
        language for language in Language
        if all((language, role) in HELPER_CLASSES for role in HelperRole)
    ]


# ---------------------------------------------------------------------------
# Registry instance
# ---------------------------------------------------------------------------


class HelperRegistry:
    """
    Language-indexed helper instances plus the per-stage dispatchers.

    One registry is normally shared by every factory and realiser of a
    process (see `default_registry`), but tests and hosts may build their
    own.
    """

    def __init__(
        self,
        strict: bool = False,
        comma_sep_premodifiers: bool = True,
        comma_sep_cuephrase: bool = False,
    ) -> None:
        self._instances: Dict[Tuple[Language, HelperRole], Any] = {}
        self._lock = threading.Lock()
        self.strict = strict
        # orthography options
        self.comma_sep_premodifiers = comma_sep_premodifiers
        self.comma_sep_cuephrase = comma_sep_cuephrase

    def report_unsupported(self, detail: str, **context: Any) -> None:
        """
        Log a feature combination with no defined realisation. In strict
        mode the combination is an error instead of a best-effort fallback.
        """
        logger.warning("unsupported_feature_combination", detail=detail, **context)
        if self.strict:
            raise UnsupportedFeatureCombinationError(detail)

    # -- helper lookup -----------------------------------------------------

    def helper_for(self, language: Any, role: HelperRole) -> Any:
        lang = Language.from_code(language)
        if lang is None:
            raise LanguageNotSupportedError(language)
        key = (lang, role)
        helper = self._instances.get(key)
        if helper is not None:
            return helper

        load_builtin_helpers()
        cls = HELPER_CLASSES.get(key)
        if cls is None:
            raise LanguageNotSupportedError(lang, role.value)

        with self._lock:
            helper = self._instances.get(key)
            if helper is None:
                helper = cls(self)
                self._instances[key] = helper
                logger.debug("helper_created", language=lang.value, role=role.value,
                             helper=cls.__name__)
        return helper

    def clause_helper(self, language: Any) -> Any:
        return self.helper_for(language, HelperRole.CLAUSE)

    def noun_phrase_helper(self, language: Any) -> Any:
        return self.helper_for(language, HelperRole.NOUN_PHRASE)

    def verb_phrase_helper(self, language: Any) -> Any:
        return self.helper_for(language, HelperRole.VERB_PHRASE)

    def phrase_helper(self, language: Any) -> Any:
        return self.helper_for(language, HelperRole.PHRASE)

    def morphology_helper(self, language: Any) -> Any:
        return self.helper_for(language, HelperRole.MORPHOLOGY)

    def orthography_helper(self, language: Any) -> Any:
        return self.helper_for(language, HelperRole.ORTHOGRAPHY)

    # -- syntax stage ------------------------------------------------------

    def realise_syntax(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """Rewrite a phrase tree into ordered lists of word-level elements."""
        if element is None:
            return None
        if element.get_feature_as_boolean(Feature.ELIDED):
            return None

        if isinstance(element, WordElement):
            return InflectedWordElement(element)

        if isinstance(element, InflectedWordElement):
            self._resolve_base_word(element)
            return element

        if isinstance(element, StringElement):
            return element

        if isinstance(element, ListElement):
            realised = ListElement(element)
            for child in element.get_children():
                # nested lists are flattened into their parent
                result = self.realise_syntax(child)
                if isinstance(result, ListElement):
                    realised.add_components(result.get_children())
                else:
                    realised.add_component(result)
            return realised

        if isinstance(element, DocumentElement):
            realised_children = [self.realise_syntax(child) for child in element.get_children()]
            element.set_components(child for child in realised_children if child is not None)
            return element

        if isinstance(element, CoordinatedPhraseElement):
            return self.phrase_helper(element.language).realise_coordinated(element)

        if isinstance(element, PhraseElement):
            language = element.language
            category = element.category
            if category == PhraseCategory.CLAUSE:
                return self.clause_helper(language).realise(element)
            if category == PhraseCategory.NOUN_PHRASE:
                return self.noun_phrase_helper(language).realise(element)
            if category == PhraseCategory.VERB_PHRASE:
                return self.verb_phrase_helper(language).realise(element)
            if category in (
                PhraseCategory.PREPOSITIONAL_PHRASE,
                PhraseCategory.ADJECTIVE_PHRASE,
                PhraseCategory.ADVERB_PHRASE,
            ):
                return self.phrase_helper(language).realise(element)
            return element

        return element

    @staticmethod
    def _resolve_base_word(element: InflectedWordElement) -> None:
        if element.base_word is not None:
            return
        lexicon = element.lexicon
        base_form = element.base_form
        if lexicon is None or not base_form:
            return
        category = element.category if isinstance(element.category, LexicalCategory) else LexicalCategory.ANY
        element.base_word = lexicon.lookup_word(base_form, category)

    # -- morphology stage --------------------------------------------------

    def realise_morphology(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """Spell out every inflected word of a syntax-stage tree."""
        if element is None:
            return None

        if isinstance(element, InflectedWordElement):
            return self._inflect(element)

        if isinstance(element, WordElement):
            return self._inflect(InflectedWordElement(element))

        if isinstance(element, ListElement):
            realised = ListElement(element)
            for child in element.get_children():
                realised.add_component(self.realise_morphology(child))
            return realised

        if isinstance(element, CoordinatedPhraseElement):
            children = [self.realise_morphology(child) for child in element.get_children()]
            element.clear_coordinates()
            for child in children:
                if child is not None:
                    element.add_coordinate(child)
            return element

        if isinstance(element, DocumentElement):
            realised_children = [self.realise_morphology(child) for child in element.get_children()]
            element.set_components(child for child in realised_children if child is not None)
            return element

        return element

    def _inflect(self, element: InflectedWordElement) -> NLGElement:
        function = element.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        if element.get_feature_as_boolean(InternalFeature.NON_MORPH):
            realised = StringElement(element.base_form, element)
            realised.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
            return realised

        self._resolve_base_word(element)
        helper = self.morphology_helper(element.language)
        realised = helper.realise(element)
        if realised is None:
            realised = StringElement(element.base_form, element)
        realised.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)
        return realised

    # -- morphophonology stage ---------------------------------------------

    def realise_morphophonology(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """
        Apply the pairwise rules (elision, contraction, a/an) to adjacent
        words. Each pair is handled by the left word's language, then by the
        right word's language when it differs.
        """
        if element is None:
            return None
        if isinstance(element, StringElement):
            return element

        children = element.get_children()
        for child in children:
            self.realise_morphophonology(child)

        for left, right in zip(children, children[1:]):
            left_word = left.rightmost_string_element()
            right_word = right.leftmost_string_element()
            if left_word is None or right_word is None:
                continue
            left_language = left_word.language
            self.orthography_helper(left_language).apply_morphophonology(left_word, right_word)
            right_language = right_word.language
            if right_language != left_language:
                self.orthography_helper(right_language).apply_morphophonology(left_word, right_word)
        return element

    # -- orthography stage -------------------------------------------------

    def realise_orthography(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """Linearise the tree into settled, trimmed realisation strings."""
        if element is None:
            return None

        if isinstance(element, StringElement):
            if element.realisation:
                element.realisation = self.orthography_helper(element.language).tidy(element.realisation)
            return element

        if isinstance(element, ListElement):
            return self.orthography_helper(element.language).realise_list_element(element)

        if isinstance(element, CoordinatedPhraseElement):
            helper = self.orthography_helper(element.language)
            return helper.realise_coordinated_phrase(element.get_children())

        if isinstance(element, DocumentElement):
            return self._realise_document(element)

        if isinstance(element, (WordElement, InflectedWordElement)):
            # a word that escaped morphology keeps its base form
            base = element.base_form
            return StringElement(base, element)

        return element

    def _realise_document(self, element: DocumentElement) -> NLGElement:
        helper = self.orthography_helper(element.language)
        if element.category == DocumentCategory.SENTENCE:
            return helper.realise_sentence(element.get_children(), element)

        realised_children: List[NLGElement] = []
        for child in element.get_children():
            realised = self.realise_orthography(child)
            if realised is not None:
                realised_children.append(realised)
        element.set_components(realised_children)
        parts = [child.realisation for child in realised_children if child.realisation]
        element.realisation = " ".join(part.strip() for part in parts).strip()
        return element


# ---------------------------------------------------------------------------
# Shared instance
# ---------------------------------------------------------------------------

_DEFAULT_REGISTRY: Optional[HelperRegistry] = None


def default_registry() -> HelperRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = HelperRegistry()
    return _DEFAULT_REGISTRY


def set_discourse_function(element: Optional[NLGElement], function: DiscourseFunction) -> None:
    if element is not None:
        element.set_feature(InternalFeature.DISCOURSE_FUNCTION, function)


def base_form_of(element: Optional[NLGElement]) -> Optional[str]:
    """Base form of a word-level element (None for phrases)."""
    if element is None:
        return None
    if isinstance(element, WordElement):
        return element.base_form
    return element.get_feature_as_string(LexicalFeature.BASE_FORM)


__all__ = [
    "HelperRole",
    "HELPER_CLASSES",
    "register_helper",
    "load_builtin_helpers",
    "list_registered_helpers",
    "supported_languages",
    "HelperRegistry",
    "default_registry",
    "set_discourse_function",
    "base_form_of",
]
