# realiser/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from realiser.core.domain.features import Language


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central configuration.
    Strictly typed and validated via Pydantic; every field can be set from
    the environment or a `.env` file.
    """

    # --- Application Meta ---
    APP_NAME: str = "realiser"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "realiser"
    OTEL_CONSOLE_EXPORT: bool = False

    # --- Realisation ---
    # fallback for elements that reach no factory or lexicon
    DEFAULT_LANGUAGE: Language = Language.ENGLISH
    # None keeps the lexicon subsystem's own setting (RLZ_LEXICON_DIR)
    LEXICON_DIR: Optional[str] = None
    STRICT_FEATURES: bool = False

    # --- Orthography ---
    COMMA_SEP_PREMODIFIERS: bool = True
    COMMA_SEP_CUEPHRASE: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
