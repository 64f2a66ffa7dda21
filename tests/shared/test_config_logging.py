# tests/shared/test_config_logging.py
import logging
import re

import pytest
import structlog
from dependency_injector import providers
from pydantic import ValidationError

from realiser.adapters.persistence.lexicon import (
    clear_cache,
    get_config,
    get_or_build_index,
    reset_config,
)
from realiser.core.domain.elements import StringElement
from realiser.core.domain.exceptions import LanguageNotSupportedError
from realiser.core.domain.factory import NLGFactory
from realiser.core.domain.features import Language, reset_default_language, set_default_language
from realiser.core.domain.registry import HelperRegistry
from realiser.core.use_cases.realise_text import Realiser
from realiser.shared.config import AppEnv, Settings
from realiser.shared.container import configure_language, configure_lexicon
from realiser.shared.logging_config import (
    add_open_telemetry_spans,
    build_processors,
    configure_logging,
)
from realiser.shared.observability import get_tracer, setup_tracing


@pytest.fixture
def restore_logging():
    """Puts structlog and the root logger back as they were."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


class TestSettings:
    """Tests for the pydantic-settings configuration."""

    def test_defaults(self, monkeypatch):
        """
        Scenario: No environment overrides.
        Expected: Lenient features, comma-separated premodifiers, JSON logs.
        """
        for name in ("LOG_FORMAT", "STRICT_FEATURES", "LEXICON_DIR", "APP_ENV", "DEFAULT_LANGUAGE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.APP_NAME == "realiser"
        assert settings.APP_ENV == AppEnv.DEVELOPMENT
        assert settings.LOG_FORMAT == "json"
        assert settings.DEFAULT_LANGUAGE == "en"
        assert settings.LEXICON_DIR is None
        assert settings.STRICT_FEATURES is False
        assert settings.COMMA_SEP_PREMODIFIERS is True
        assert settings.COMMA_SEP_CUEPHRASE is False

    def test_environment_overrides(self, monkeypatch):
        """
        Scenario: Variables set in the environment.
        Expected: Parsed into the typed fields.
        """
        monkeypatch.setenv("STRICT_FEATURES", "true")
        monkeypatch.setenv("LOG_FORMAT", "console")
        monkeypatch.setenv("APP_ENV", "testing")

        settings = Settings(_env_file=None)

        assert settings.STRICT_FEATURES is True
        assert settings.LOG_FORMAT == "console"
        assert settings.APP_ENV == AppEnv.TESTING


class TestLogging:
    """Tests for the structlog setup."""

    def test_json_renderer_last(self):
        processors = build_processors(Settings(_env_file=None, LOG_FORMAT="json"))
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_open_telemetry_spans in processors

    def test_console_renderer_last(self):
        processors = build_processors(Settings(_env_file=None, LOG_FORMAT="console"))
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_logging(self, restore_logging, capsys):
        """
        Scenario: Logging configured for JSON output at INFO.
        Expected: Info lines are printed as JSON with a level; debug lines are filtered.
        """
        configure_logging(Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="info"))
        logger = structlog.get_logger("realiser.test")

        logger.debug("hidden_event")
        logger.info("visible_event", language="en")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert '"event": "visible_event"' in out
        assert '"level": "info"' in out

    def test_unknown_level_falls_back_to_info(self, restore_logging, capsys):
        configure_logging(Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="chatty"))
        logger = structlog.get_logger("realiser.test")

        logger.debug("hidden_event")
        logger.info("visible_event")

        out = capsys.readouterr().out
        assert structlog.is_configured()
        assert "hidden_event" not in out
        assert "visible_event" in out


class TestTracing:
    """Tests for the trace id injection."""

    def test_no_active_span(self):
        event = add_open_telemetry_spans(None, "info", {"event": "x"})
        assert event["trace_id"] is None
        assert event["span_id"] is None

    def test_inside_span(self):
        """
        Scenario: A log event emitted while a span is recording.
        Expected: The 32-hex trace id and 16-hex span id are attached.
        """
        provider = setup_tracing(Settings(_env_file=None, OTEL_SERVICE_NAME="realiser-test"))
        tracer = provider.get_tracer("tests")

        with tracer.start_as_current_span("unit"):
            event = add_open_telemetry_spans(None, "info", {"event": "x"})

        assert re.fullmatch(r"[0-9a-f]{32}", event["trace_id"])
        assert re.fullmatch(r"[0-9a-f]{16}", event["span_id"])
        assert provider.resource.attributes["service.name"] == "realiser-test"

    def test_get_tracer(self):
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("noop") as span:
            assert span is not None


class TestContainer:
    """Tests for the dependency injection wiring."""

    def test_registry_is_shared(self, container, en_lexicon):
        """
        Scenario: Building a factory and a realiser from the container.
        Expected: Both use the same singleton helper registry.
        """
        registry = container.helper_registry()

        factory = container.nlg_factory(en_lexicon)
        realiser = container.realiser()

        assert isinstance(registry, HelperRegistry)
        assert container.helper_registry() is registry
        assert isinstance(factory, NLGFactory)
        assert isinstance(realiser, Realiser)
        assert factory.registry is registry
        assert realiser.registry is registry

    def test_lexicon_provider(self, container):
        lexicon = container.lexicon("en")
        assert lexicon is get_or_build_index("en")
        assert lexicon.language == Language.ENGLISH

    def test_registry_override(self, container, en_lexicon):
        """
        Scenario: A strict registry swapped in for the configured one.
        Expected: The realiser and the factory pick up the override.
        """
        strict = HelperRegistry(strict=True)
        container.helper_registry.override(providers.Object(strict))

        assert container.realiser().registry is strict
        assert container.nlg_factory(en_lexicon).registry is strict

    def test_container_realises(self, container, en_lexicon):
        factory = container.nlg_factory(en_lexicon)
        realiser = container.realiser()

        clause = factory.create_clause(
            factory.create_noun_phrase("the", "woman"),
            "kiss",
            factory.create_noun_phrase("the", "man"),
        )

        assert realiser.realise_sentence(clause) == "The woman kisses the man."


class TestDefaultLanguage:
    """Tests for DEFAULT_LANGUAGE as the fallback language of bare elements."""

    def test_unknown_code_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DEFAULT_LANGUAGE="xx")
        with pytest.raises(LanguageNotSupportedError):
            set_default_language("xx")

    def test_configured_language_reaches_elements(self):
        """
        Scenario: DEFAULT_LANGUAGE=fr applied through configure_language.
        Expected: An element built without a factory reports French.
        """
        try:
            # Act
            configure_language(Settings(_env_file=None, DEFAULT_LANGUAGE="fr"))

            # Assert
            assert StringElement("x").language == Language.FRENCH
        finally:
            reset_default_language()

        assert StringElement("x").language == Language.ENGLISH

    def test_default_factory_follows_config(self, container):
        """
        Scenario: The container's DEFAULT_LANGUAGE overridden to fr.
        Expected: default_lexicon and default_factory are French.
        """
        assert container.default_lexicon().language == Language.ENGLISH

        container.config.DEFAULT_LANGUAGE.override("fr")

        lexicon = container.default_lexicon()
        factory = container.default_factory()
        assert lexicon is get_or_build_index("fr")
        assert factory.lexicon is lexicon
        assert factory.registry is container.helper_registry()


class TestConfigureLexicon:
    """Tests for handing LEXICON_DIR to the lexicon subsystem."""

    def test_unset_dir_keeps_config(self):
        before = get_config().lexicon_dir
        configure_lexicon(Settings(_env_file=None, LEXICON_DIR=None))
        assert get_config().lexicon_dir == before

    def test_dir_is_applied(self, tmp_path):
        """
        Scenario: LEXICON_DIR set in the application settings.
        Expected: The lexicon config points at it and the cache is emptied.
        """
        try:
            # Act
            configure_lexicon(Settings(_env_file=None, LEXICON_DIR=str(tmp_path)))

            # Assert
            assert get_config().lexicon_dir == str(tmp_path)
            assert get_config().resolved_lexicon_dir() == tmp_path
        finally:
            reset_config()
            clear_cache()


if __name__ == "__main__":
    pytest.main([__file__])
