# realiser/shared/container.py
from dependency_injector import containers, providers

from realiser.shared.config import settings
from realiser.adapters.persistence.lexicon.cache import clear_cache, get_or_build_index
from realiser.adapters.persistence.lexicon.config import get_config
from realiser.core.domain.factory import NLGFactory
from realiser.core.domain.features import set_default_language
from realiser.core.domain.registry import HelperRegistry
from realiser.core.use_cases.realise_text import Realiser


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Wires the settings into the helper registry and hands the same registry
    to every factory and realiser it builds.

        container = Container()
        lexicon = container.lexicon("fr")
        factory = container.nlg_factory(lexicon)
        realiser = container.realiser()

    `default_factory()` builds a factory for DEFAULT_LANGUAGE.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Domain services (Singleton: helpers are memoized per registry)
    helper_registry = providers.Singleton(
        HelperRegistry,
        strict=config.STRICT_FEATURES,
        comma_sep_premodifiers=config.COMMA_SEP_PREMODIFIERS,
        comma_sep_cuephrase=config.COMMA_SEP_CUEPHRASE,
    )

    # 3. Lexicons (the cache module keeps one index per language)
    lexicon = providers.Callable(get_or_build_index)
    default_lexicon = providers.Callable(get_or_build_index, config.DEFAULT_LANGUAGE)

    # 4. Element factories and the use case
    nlg_factory = providers.Factory(
        NLGFactory,
        registry=helper_registry,
    )

    default_factory = providers.Factory(
        NLGFactory,
        lexicon=default_lexicon,
        registry=helper_registry,
    )

    realiser = providers.Factory(
        Realiser,
        registry=helper_registry,
        debug=config.DEBUG,
    )


def configure_lexicon(app_settings=settings) -> None:
    """Point the lexicon subsystem at LEXICON_DIR when it is set."""
    if not app_settings.LEXICON_DIR:
        return
    get_config().lexicon_dir = app_settings.LEXICON_DIR
    clear_cache()


def configure_language(app_settings=settings) -> None:
    """Make DEFAULT_LANGUAGE the fallback for elements built without a factory."""
    set_default_language(app_settings.DEFAULT_LANGUAGE)


# Instantiate the container for global access
configure_lexicon()
configure_language()
container = Container()
