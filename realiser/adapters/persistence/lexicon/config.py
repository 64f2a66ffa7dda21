# realiser/adapters/persistence/lexicon/config.py
"""
Where the lexicon adapter finds its JSON shards, and how loudly it logs.

A process-wide `LexiconConfig` is read from the environment on first use:

    RLZ_LEXICON_DIR             folder holding one sub-folder per language
                                (relative paths resolve against the
                                `realiser` package; default "data/lexicon",
                                the bundled English and French lexicons)
    RLZ_LEXICON_LOG_COLLISIONS  warn when a later shard redefines a
                                (base form, category) pair; default off
    RLZ_LEXICON_LOG_LEVEL       level for the adapter loggers; empty keeps
                                the host setting

Tests and hosts swap it with `set_config()`; `reset_config()` goes back to
the environment. Changing the directory does not drop indexes already
built, call `clear_cache()` for that.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_DIR = "data/lexicon"


def _parse_bool(raw: str, default: bool) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def _parse_log_level(raw: str) -> str:
    level = (raw or "").strip().upper()
    return level if level in _LEVELS else ""


def _clean_dir(value: str) -> str:
    value = (value or "").strip()
    return os.path.expandvars(os.path.expanduser(value)) if value else _DEFAULT_DIR


def package_root() -> Path:
    """Directory of the `realiser` package (bundled data lives below it)."""
    return Path(__file__).resolve().parents[3]


# ---------------------------------------------------------------------------
# Config object
# ---------------------------------------------------------------------------


@dataclass
class LexiconConfig:
    """
    Lexicon adapter settings.

    Fields:
        lexicon_dir: root of the per-language shard folders.
        log_collisions: warn about (base form, category) pairs defined twice.
        log_level: adapter logger level, "" to leave it alone.
    """

    lexicon_dir: str = _DEFAULT_DIR
    log_collisions: bool = False
    log_level: str = ""

    @classmethod
    def from_env(cls) -> "LexiconConfig":
        return cls(
            lexicon_dir=_clean_dir(os.getenv("RLZ_LEXICON_DIR", cls.lexicon_dir)),
            log_collisions=_parse_bool(os.getenv("RLZ_LEXICON_LOG_COLLISIONS", ""), cls.log_collisions),
            log_level=_parse_log_level(os.getenv("RLZ_LEXICON_LOG_LEVEL", "")),
        )

    def resolved_lexicon_dir(self, *, root: Optional[Path] = None) -> Path:
        """
        Absolute Path for lexicon_dir. Relative paths resolve against `root`
        (default: the package directory).
        """
        base = Path(os.path.expandvars(os.path.expanduser(self.lexicon_dir)))
        if base.is_absolute():
            return base
        return ((root or package_root()) / base).resolve()


_CONFIG: Optional[LexiconConfig] = None


def get_config() -> LexiconConfig:
    """The process-wide LexiconConfig, built from the environment on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = LexiconConfig.from_env()
    return _CONFIG


def set_config(config: LexiconConfig) -> None:
    """
    Install `config` as the process-wide settings (see
    `realiser.shared.container.configure_lexicon` for the settings-driven path).
    """
    global _CONFIG
    if not isinstance(config, LexiconConfig):
        raise TypeError(f"expected a LexiconConfig, got {type(config).__name__}")
    _CONFIG = config


def reset_config() -> None:
    """Forget the current instance; the next get_config() re-reads the env."""
    global _CONFIG
    _CONFIG = None


__all__ = ["LexiconConfig", "get_config", "set_config", "reset_config", "package_root"]
