# realiser/adapters/persistence/lexicon/errors.py
"""
Errors raised by the JSON lexicon adapter.

They are kept apart from the domain errors: the realiser lets both families
through unchanged, and a host can catch `LexiconError` alone to report
missing or broken lexicon data.

    try:
        factory = NLGFactory(get_or_build_index("fr"))
    except LexiconNotFound as e:
        log.error("French is not installed: %s", e)
"""

from __future__ import annotations


class LexiconError(Exception):
    """Root of the lexicon adapter errors."""


class LexiconNotFound(LexiconError):
    """The lexicon directory has no folder (or no shard) for the language."""

    def __init__(self, language: str, message: str | None = None) -> None:
        if message is None:
            message = f"No lexicon shards for language '{language}'."
        super().__init__(message)
        self.language = language


class LexiconSchemaError(LexiconError):
    """
    Raised when records handed directly to a LexiconIndex break the word
    schema (no "base"). The file loader skips such words with a warning
    instead.
    """

    def __init__(self, path: str, detail: str | None = None) -> None:
        text = f"Malformed lexicon records in {path}"
        super().__init__(f"{text}: {detail}" if detail else text)
        self.path = path
        self.detail = detail


class LexemeNotFound(LexiconError):
    """`LexiconIndex.get_word_strict` found no entry."""

    def __init__(self, language: str, key: str, pos: str | None = None) -> None:
        where = f"'{key}' ({pos})" if pos else f"'{key}'"
        super().__init__(f"No {language} lexicon entry for {where}.")
        self.language = language
        self.key = key
        self.pos = pos


class LexiconConfigError(LexiconError):
    """Unusable lexicon settings: blank or unknown language code, bad directory."""


__all__ = [
    "LexiconError",
    "LexiconNotFound",
    "LexiconSchemaError",
    "LexemeNotFound",
    "LexiconConfigError",
]
