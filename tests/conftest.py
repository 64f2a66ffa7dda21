# tests/conftest.py
import json

import pytest

from realiser.adapters.persistence.lexicon import (
    LexiconConfig,
    clear_cache,
    get_or_build_index,
    reset_config,
    set_config,
)
from realiser.core.domain.factory import NLGFactory
from realiser.core.domain.registry import HelperRegistry
from realiser.core.use_cases.realise_text import Realiser
from realiser.shared.container import Container


@pytest.fixture(scope="function")
def registry():
    """A fresh helper registry with the default orthography options."""
    return HelperRegistry()


@pytest.fixture(scope="session")
def en_lexicon():
    """The bundled English lexicon (cached per process)."""
    return get_or_build_index("en")


@pytest.fixture(scope="session")
def fr_lexicon():
    """The bundled French lexicon (cached per process)."""
    return get_or_build_index("fr")


@pytest.fixture
def en_factory(en_lexicon, registry):
    """Element factory over the English lexicon."""
    return NLGFactory(en_lexicon, registry)


@pytest.fixture
def fr_factory(fr_lexicon, registry):
    """Element factory over the French lexicon."""
    return NLGFactory(fr_lexicon, registry)


@pytest.fixture
def realiser(registry):
    """Realiser sharing the factories' registry."""
    return Realiser(registry)


@pytest.fixture
def temp_lexicon_dir(tmp_path):
    """
    Points the lexicon subsystem at a temporary directory holding a small
    English lexicon split across two files, plus one corrupt file.
    Restores the global config and cache afterwards.
    """
    en_dir = tmp_path / "en"
    en_dir.mkdir()

    core = {
        "_meta": {"language": "en"},
        "words": [
            {"id": "E_the", "base": "the", "category": "determiner"},
            {"id": "E_that", "base": "that", "category": "complementiser"},
            {"id": "E_cat", "base": "cat", "category": "noun"},
            {"base": "", "category": "noun"},
            {"base": "blorp", "category": "not-a-category"},
        ],
    }
    extra = {
        "words": [
            {"id": "E_sleep", "base": "sleep", "category": "verb", "past": "slept"},
            {"id": "E_cat_verb", "base": "cat", "category": "noun"},
        ]
    }
    with open(en_dir / "a_core.json", "w", encoding="utf-8") as f:
        json.dump(core, f)
    with open(en_dir / "b_extra.json", "w", encoding="utf-8") as f:
        json.dump(extra, f)
    (en_dir / "c_broken.json").write_text("{ not json", encoding="utf-8")

    # an empty language folder is not "available"
    (tmp_path / "de").mkdir()

    set_config(LexiconConfig(lexicon_dir=str(tmp_path), log_collisions=True))
    clear_cache()
    yield tmp_path
    reset_config()
    clear_cache()


@pytest.fixture(scope="function")
def container():
    """
    A fresh Dependency Injection Container.
    Overrides set by a test are reset afterwards.
    """
    container = Container()
    yield container
    container.reset_override()
