# realiser/adapters/persistence/lexicon/__init__.py
"""
JSON lexicon adapter.

    from realiser.adapters.persistence.lexicon import get_or_build_index

    lexicon = get_or_build_index("fr")
    word = lexicon.lookup_word("être")
"""

from .cache import (
    cached_languages,
    clear_cache,
    get_or_build_index,
    preload_languages,
    set_index,
    warmup_languages,
)
from .config import LexiconConfig, get_config, reset_config, set_config
from .errors import (
    LexemeNotFound,
    LexiconConfigError,
    LexiconError,
    LexiconNotFound,
    LexiconSchemaError,
)
from .index import LexiconIndex
from .loader import available_languages, load_lexicon

__all__ = [
    "LexiconIndex",
    "LexiconConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_lexicon",
    "available_languages",
    "get_or_build_index",
    "set_index",
    "clear_cache",
    "cached_languages",
    "preload_languages",
    "warmup_languages",
    "LexiconError",
    "LexiconNotFound",
    "LexiconSchemaError",
    "LexemeNotFound",
    "LexiconConfigError",
]
