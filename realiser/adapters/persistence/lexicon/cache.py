# realiser/adapters/persistence/lexicon/cache.py
"""
Per-language LexiconIndex cache.

Every factory built for a language shares one index, so the JSON shards of
a language are read once per process. Keys are language codes after
strip + casefold ("EN " and "en" are the same entry). The first request for
a language builds its index under a lock; concurrent first requests build
it once.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from realiser.core.domain.features import Language

from .errors import LexiconConfigError
from .index import LexiconIndex
from .loader import load_lexicon

# ---------------------------------------------------------------------------
# Internal state
# ---------------------------------------------------------------------------

_INDEX_CACHE: Dict[str, LexiconIndex] = {}

# guards inserts; reads of an existing entry skip it
_CACHE_LOCK = threading.RLock()


def _norm_lang(lang: object) -> str:
    if isinstance(lang, Language):
        return lang.value
    if not isinstance(lang, str):
        return ""
    return lang.strip().casefold()


# ---------------------------------------------------------------------------
# Core cache API
# ---------------------------------------------------------------------------


def get_or_build_index(lang: object) -> LexiconIndex:
    """
    Index of one language, loaded from its shards on first use.

    Args:
        lang: Language code ("en", "fr") or Language member.

    Returns:
        The shared LexiconIndex (same object on every call until cleared).

    Raises:
        LexiconConfigError: empty or unknown language code.
        LexiconNotFound: bubbled from the loader.
    """
    nlang = _norm_lang(lang)
    if not nlang:
        raise LexiconConfigError("Language code must be a non-empty string.")

    existing = _INDEX_CACHE.get(nlang)
    if existing is not None:
        return existing

    language = Language.from_code(nlang)
    if language is None:
        raise LexiconConfigError(f"Unknown language code: {nlang!r}")

    with _CACHE_LOCK:
        existing = _INDEX_CACHE.get(nlang)
        if existing is not None:
            return existing

        index = LexiconIndex(language, load_lexicon(nlang))
        _INDEX_CACHE[nlang] = index
        return index


def set_index(lang: object, index: LexiconIndex) -> None:
    """
    Install a prebuilt index for a language, replacing any cached one
    (e.g. a small in-memory lexicon in tests).
    """
    nlang = _norm_lang(lang)
    if not nlang:
        raise LexiconConfigError("Language code must be a non-empty string.")
    if index is None:
        raise ValueError("set_index() needs a LexiconIndex, got None.")

    with _CACHE_LOCK:
        _INDEX_CACHE[nlang] = index


def clear_cache(lang: Optional[object] = None) -> None:
    """
    Drop cached indexes: one language, or all of them when `lang` is None.
    The next lookup reloads from the configured lexicon directory.
    """
    with _CACHE_LOCK:
        if lang is None:
            _INDEX_CACHE.clear()
            return
        _INDEX_CACHE.pop(_norm_lang(lang), None)


def cached_languages() -> List[str]:
    """Codes of the languages whose index is currently built."""
    with _CACHE_LOCK:
        return sorted(_INDEX_CACHE.keys())


def preload_languages(langs: Iterable[object]) -> None:
    """
    Build the indexes of several languages up front. Blank codes are
    skipped; a missing lexicon raises LexiconNotFound.
    """
    for lang in langs:
        nlang = _norm_lang(lang)
        if not nlang:
            continue
        get_or_build_index(nlang)


# Alias used by host startup code.
warmup_languages = preload_languages


__all__ = [
    "get_or_build_index",
    "set_index",
    "clear_cache",
    "cached_languages",
    "preload_languages",
    "warmup_languages",
]
