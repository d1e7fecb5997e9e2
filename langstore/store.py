"""Loading and merging of per-language translation tables."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .config import LanguageSettings

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"
DEFAULT_PATH_LANGUAGES = Path("translations")

LoadError = Literal["missing", "read", "parse"]


class LoadResult(BaseModel):
    tag: str
    path: Path
    translations: Dict[str, Any] = Field(default_factory=dict)
    error: Optional[LoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_tag(tag: str) -> str:
    """Reduce a raw locale string such as ``fr-FR,fr;q=0.9`` to ``fr``."""
    # lower() can expand some characters, so cut again afterwards
    return tag[:2].lower()[:2]


class LanguageStore:
    """Holds language configuration and builds the merged translation table.

    Setters return the store so configuration can be chained::

        store = (
            LanguageStore.factory()
            .set_path_languages("translations")
            .set_current_language("fr-FR")
            .set_default_language("en")
            .build()
        )
    """

    def __init__(self) -> None:
        self._current_tag: Optional[str] = None
        self._default_tag: Optional[str] = None
        self._path_languages: Optional[Path] = None
        self._translations: Dict[str, str] = {}
        self.loads: List[LoadResult] = []

    @classmethod
    def factory(cls) -> "LanguageStore":
        return cls()

    @classmethod
    def from_settings(cls, settings: LanguageSettings) -> "LanguageStore":
        """Return a configured, not yet built, store."""
        store = cls().set_path_languages(settings.path_languages)
        store.set_default_language(settings.default_language)
        if settings.current_language is not None:
            store.set_current_language(settings.current_language)
        return store

    def set_current_language(self, tag: str) -> "LanguageStore":
        self._current_tag = normalize_tag(tag)
        return self

    def get_current_language(self) -> str:
        if self._current_tag is None:
            return self.get_default_language()
        return self._current_tag

    def set_default_language(self, tag: str) -> "LanguageStore":
        self._default_tag = normalize_tag(tag)
        return self

    def get_default_language(self) -> str:
        if self._default_tag is None:
            return FALLBACK_LANGUAGE
        return self._default_tag

    def set_path_languages(self, path: Union[str, os.PathLike]) -> "LanguageStore":
        self._path_languages = Path(path)
        return self

    def get_path_languages(self) -> Path:
        if self._path_languages is None:
            return DEFAULT_PATH_LANGUAGES
        return self._path_languages

    def build(self) -> "LanguageStore":
        """Load the default table and overlay the current language on top.

        Missing or broken files never raise; they leave the affected table
        empty and are logged.
        """
        self.loads = []
        default_tag = self.get_default_language()
        current_tag = self.get_current_language()

        default = self._load_language(default_tag)
        self.loads.append(default)
        self._translations = dict(default.translations)
        if not self._translations:
            logger.warning("Language default is empty: %s", default_tag)

        if current_tag != default_tag:
            client = self._load_language(current_tag)
            self.loads.append(client)
            if client.translations:
                self._translations.update(client.translations)
            else:
                logger.warning("Language client is empty: %s", current_tag)

        return self

    def get_translations(self) -> Dict[str, str]:
        return self._translations

    def _load_language(self, tag: str) -> LoadResult:
        path = self.get_path_languages() / f"{tag}.json"

        if not path.is_file():
            logger.error("Language file not found: %s", path.name)
            return LoadResult(tag=tag, path=path, error="missing")

        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.error("Error reading language file: %s", path.name)
            return LoadResult(tag=tag, path=path, error="read")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.error("JSON decode error in language file: %s", path.name)
            return LoadResult(tag=tag, path=path, error="parse")

        # a top-level list or scalar is valid JSON but not a table
        if not isinstance(data, dict):
            logger.error("JSON decode error in language file: %s", path.name)
            return LoadResult(tag=tag, path=path, error="parse")

        return LoadResult(tag=tag, path=path, translations=data)
