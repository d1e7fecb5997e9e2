"""JSON-backed translation tables with default-language fallback."""

from .store import LanguageStore, LoadResult
from .translation import (
    Translator,
    TranslatorNotInitialized,
    current_store,
    initialize,
    tr,
    translate,
)
from .version import __version__

__all__ = [
    "LanguageStore",
    "LoadResult",
    "Translator",
    "TranslatorNotInitialized",
    "current_store",
    "initialize",
    "tr",
    "translate",
    "__version__",
]
