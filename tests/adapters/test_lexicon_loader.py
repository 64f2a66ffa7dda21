# tests/adapters/test_lexicon_loader.py
"""
Loader, configuration and cache of the JSON lexicons.
"""

from __future__ import annotations

import logging

import pytest

from realiser.adapters.persistence.lexicon import (
    LexiconConfig,
    LexiconConfigError,
    LexiconIndex,
    LexiconNotFound,
    available_languages,
    cached_languages,
    clear_cache,
    get_config,
    get_or_build_index,
    load_lexicon,
    preload_languages,
    reset_config,
    set_config,
    set_index,
)
from realiser.core.domain.features import Language


class TestLoadLexicon:
    """Reading per-language folders of JSON files."""

    def test_concatenates_files_in_name_order(self, temp_lexicon_dir):
        """
        Scenario: two valid files and one corrupt file in the "en" folder.
        Expected: the valid words of both files, first file first.
        """
        records = load_lexicon("en")

        bases = [record["base"] for record in records]
        assert bases == ["the", "that", "cat", "sleep", "cat"]

    def test_skips_bad_words_and_files_with_warnings(self, temp_lexicon_dir, caplog):
        """
        Scenario: a word without base, a word with an unknown category, a corrupt file.
        Expected: each is skipped and reported; loading still succeeds.
        """
        with caplog.at_level(logging.WARNING):
            load_lexicon("en")

        messages = caplog.text
        assert "missing 'base'" in messages
        assert "unknown category" in messages
        assert "c_broken.json" in messages

    def test_logs_collisions_when_enabled(self, temp_lexicon_dir, caplog):
        with caplog.at_level(logging.WARNING):
            load_lexicon("en")

        assert "collision" in caplog.text

    def test_code_is_normalised(self, temp_lexicon_dir):
        assert len(load_lexicon(" EN ")) == 5

    def test_missing_language_folder(self, temp_lexicon_dir):
        with pytest.raises(LexiconNotFound) as exc:
            load_lexicon("fr")

        assert exc.value.language == "fr"

    def test_empty_code_is_rejected(self, temp_lexicon_dir):
        with pytest.raises(LexiconConfigError):
            load_lexicon("")

    def test_available_languages_need_json_files(self, temp_lexicon_dir):
        """
        Scenario: an "en" folder with files and an empty "de" folder.
        Expected: only "en" is available.
        """
        assert available_languages() == ["en"]

    def test_bundled_lexicons(self):
        reset_config()
        assert {"en", "fr"} <= set(available_languages())


class TestLexiconConfig:
    """Environment-driven configuration."""

    def test_defaults(self):
        config = LexiconConfig()

        assert config.lexicon_dir == "data/lexicon"
        assert config.log_collisions is False
        assert config.log_level == ""

    def test_from_env(self, monkeypatch, tmp_path):
        """
        Scenario: the RLZ_LEXICON_* variables are set.
        Expected: the config reflects them after a reset.
        """
        monkeypatch.setenv("RLZ_LEXICON_DIR", str(tmp_path))
        monkeypatch.setenv("RLZ_LEXICON_LOG_COLLISIONS", "yes")
        monkeypatch.setenv("RLZ_LEXICON_LOG_LEVEL", "debug")
        reset_config()

        try:
            config = get_config()
            assert config.resolved_lexicon_dir() == tmp_path
            assert config.log_collisions is True
            assert config.log_level == "DEBUG"
        finally:
            monkeypatch.undo()
            reset_config()

    def test_relative_dir_resolves_against_package(self, tmp_path):
        config = LexiconConfig(lexicon_dir="lexicons")

        assert config.resolved_lexicon_dir(root=tmp_path) == (tmp_path / "lexicons").resolve()

    def test_set_config_type_checks(self):
        with pytest.raises(TypeError):
            set_config({"lexicon_dir": "x"})


class TestIndexCache:
    """Per-language memoisation of built indexes."""

    def test_index_is_built_once(self, temp_lexicon_dir):
        """
        Scenario: the same language is requested by code and by enum.
        Expected: one cached index holding the loaded words.
        """
        first = get_or_build_index("en")
        second = get_or_build_index(Language.ENGLISH)

        assert first is second
        assert len(first) == 5
        assert cached_languages() == ["en"]

    def test_clear_single_language(self, temp_lexicon_dir):
        first = get_or_build_index("en")

        clear_cache("en")

        assert cached_languages() == []
        assert get_or_build_index("en") is not first

    def test_set_index_overrides(self, temp_lexicon_dir):
        custom = LexiconIndex(Language.FRENCH, [{"base": "chat", "category": "noun"}])

        set_index("fr", custom)

        assert get_or_build_index("fr") is custom

    def test_unknown_codes_are_rejected(self, temp_lexicon_dir):
        with pytest.raises(LexiconConfigError):
            get_or_build_index("")
        with pytest.raises(LexiconConfigError):
            get_or_build_index("zz")

    def test_preload_propagates_missing_folders(self, temp_lexicon_dir):
        preload_languages(["en", ""])
        assert cached_languages() == ["en"]

        with pytest.raises(LexiconNotFound):
            preload_languages(["fr"])


if __name__ == "__main__":
    pytest.main([__file__])
