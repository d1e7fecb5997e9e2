"""Key lookup with fallback and printf-style interpolation."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .store import LanguageStore

logger = logging.getLogger(__name__)


class TranslatorNotInitialized(RuntimeError):
    """Raised when a lookup is attempted before ``initialize``."""


class Translator:
    """Lookup facade over the merged table of a built ``LanguageStore``.

    One instance per session or request keeps concurrent workers isolated.
    The module-level helpers below share a single process-wide instance.
    """

    def __init__(self) -> None:
        self._store: Optional[LanguageStore] = None
        self._translations: Optional[Dict[str, str]] = None

    @property
    def ready(self) -> bool:
        return self._store is not None

    def initialize(self, store: LanguageStore) -> None:
        """Capture ``store`` and its merged table, replacing any previous state."""
        self._store = store
        self._translations = dict(store.get_translations())

    def translate(self, key: str, fallback: Optional[str] = None, *values: Any) -> str:
        """Return the text for ``key``, or ``fallback`` (else ``key``) if absent.

        ``values`` are substituted into ``%s``/``%d`` placeholders. Without
        values the text is returned as stored, placeholders included. If
        substitution fails the unformatted fallback is returned.
        """
        if self._translations is None:
            raise TranslatorNotInitialized("Translator.initialize() has not been called")

        text_fallback = fallback or key
        text = self._translations.get(key, text_fallback)
        text = "" if text is None else str(text)

        try:
            return (text % values if values else text).strip()
        except (TypeError, ValueError) as exc:
            logger.error("Language script error: %s", exc)

        return text_fallback

    def current_store(self) -> LanguageStore:
        if self._store is None:
            raise TranslatorNotInitialized("Translator.initialize() has not been called")
        return self._store


_default = Translator()


def initialize(store: LanguageStore) -> None:
    _default.initialize(store)


def translate(key: str, fallback: Optional[str] = None, *values: Any) -> str:
    return _default.translate(key, fallback, *values)


tr = translate


def current_store() -> LanguageStore:
    return _default.current_store()
