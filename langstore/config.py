"""Environment-driven language configuration."""
from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LanguageSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LANGSTORE_")

    path_languages: str = "translations"
    default_language: str = "en"
    # usually taken from the Accept-Language header instead
    current_language: Optional[str] = None
