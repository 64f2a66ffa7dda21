# realiser/adapters/persistence/lexicon/loader.py
"""
lexicon/loader.py
=================

Load per-language lexicon files from `<lexicon_dir>/<lang>/*.json`.

File format
-----------
Each file is a JSON object with a "words" list (and optional "_meta"):

    {
      "_meta": {"language": "fr", "description": "closed-class words"},
      "words": [
        {"id": "fr_etre", "base": "être", "category": "verb",
         "present3s": "est", "copular": true, ...}
      ]
    }

"base" and "category" are required; "id" is optional; every other key is a
lexical feature stored on the word as-is.

Behaviour
---------
- Files are read in sorted filename order; word order within a file is kept,
  so lookups that return the first match are deterministic.
- Corrupt JSON files and non-object roots are skipped with a warning.
- Malformed words are skipped with a warning.
- A missing language folder raises `LexiconNotFound`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Set, Tuple

from realiser.core.domain.categories import LexicalCategory

from .config import get_config
from .errors import LexiconConfigError, LexiconNotFound

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def _lexicon_base_dir() -> Path:
    return get_config().resolved_lexicon_dir()


def _language_dir(lang_code: str) -> Path:
    return _lexicon_base_dir() / lang_code


def _apply_log_level() -> None:
    level = get_config().log_level
    if level:
        logger.setLevel(level)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_json_file(path: Path) -> Dict[str, Any]:
    """Load a single JSON file. Returns an empty dict on failure (logs a warning)."""
    if not path.is_file():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning("Skipping %s: JSON decode error: %s", path.name, e)
        return {}
    except OSError as e:
        logger.warning("Skipping %s: read error: %s", path.name, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Skipping %s: root must be a JSON object (dict).", path.name)
        return {}
    return data


def _valid_word(path: Path, position: int, raw: Any) -> bool:
    if not isinstance(raw, dict):
        logger.warning("Skipping word #%d in %s: not an object.", position, path.name)
        return False
    base = raw.get("base")
    if not isinstance(base, str) or not base.strip():
        logger.warning("Skipping word #%d in %s: missing 'base'.", position, path.name)
        return False
    if LexicalCategory.parse(raw.get("category")) is None:
        logger.warning(
            "Skipping word %r in %s: unknown category %r.", base, path.name, raw.get("category")
        )
        return False
    return True


def _words_from_file(path: Path, raw_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    words = raw_data.get("words")
    if not isinstance(words, list):
        logger.warning("Skipping %s: no 'words' list.", path.name)
        return []
    return [dict(raw) for position, raw in enumerate(words) if _valid_word(path, position, raw)]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_lexicon(lang_code: str) -> List[Dict[str, Any]]:
    """
    Load and concatenate all lexicon files for a language.

    Args:
        lang_code: Language code such as "en" or "fr".

    Returns:
        The raw word records, in file then list order.

    Raises:
        LexiconConfigError: if lang_code is empty.
        LexiconNotFound: if the language directory does not exist.
    """
    lang = (lang_code or "").strip().lower()
    if not lang:
        raise LexiconConfigError("Language code must be a non-empty string.")
    _apply_log_level()

    lang_dir = _language_dir(lang)
    if not lang_dir.is_dir():
        raise LexiconNotFound(lang, f"Lexicon directory not found: {lang_dir}")

    log_collisions = get_config().log_collisions
    seen: Set[Tuple[str, str]] = set()
    records: List[Dict[str, Any]] = []
    files_processed = 0

    for file_path in sorted(lang_dir.glob("*.json")):
        raw_data = _load_json_file(file_path)
        if not raw_data:
            continue
        words = _words_from_file(file_path, raw_data)
        files_processed += 1
        for word in words:
            key = (word["base"], str(word["category"]).lower())
            if log_collisions and key in seen:
                logger.warning(
                    "Lexicon key collision for lang=%s: %r (%s) redefined in %s",
                    lang, key[0], key[1], file_path.name,
                )
            seen.add(key)
            records.append(word)

    if files_processed == 0:
        logger.warning("Lexicon folder for %r exists but contains no valid JSON files.", lang)
    logger.debug("Loaded %d words for %r from %s", len(records), lang, lang_dir)
    return records


def available_languages() -> List[str]:
    """Sorted language codes for which a lexicon directory with JSON files exists."""
    lex_dir = _lexicon_base_dir()
    if not lex_dir.is_dir():
        return []
    return sorted(
        item.name for item in lex_dir.iterdir() if item.is_dir() and any(item.glob("*.json"))
    )


__all__ = ["load_lexicon", "available_languages"]
