"""Streamlit demo page for langstore.

The current language comes from a raw ``Accept-Language`` value, the way a
web request would supply it; English is the default.
"""
import streamlit as st

from langstore import LanguageStore, Translator, __version__
from langstore.config import LanguageSettings
from langstore.logging_config import setup_logging

SAMPLE_KEYS = ["text_sample", "text_sample_alt"]
SAMPLE_FALLBACK = "Sample text fallback %s"

setup_logging()
settings = LanguageSettings()


def build_translator(accept_language: str) -> Translator:
    """Build a store for ``accept_language`` and wrap it in a fresh translator."""
    store = LanguageStore.from_settings(settings)
    if accept_language:
        store.set_current_language(accept_language)
    translator = Translator()
    translator.initialize(store.build())
    return translator


def init_state():
    ss = st.session_state
    ss.setdefault("accept_language", settings.current_language or settings.default_language)
    ss.setdefault("translator_source", None)


def session_translator(accept_language: str) -> Translator:
    """Return this session's translator, rebuilding it when the language changes."""
    ss = st.session_state
    if ss.get("translator") is None or ss.translator_source != accept_language:
        ss.translator = build_translator(accept_language)
        ss.translator_source = accept_language
    return ss.translator


st.set_page_config(page_title="langstore demo")
init_state()

st.sidebar.markdown(f"**langstore v{__version__}**")
accept_language = st.sidebar.text_input("Accept-Language", key="accept_language")
translator = session_translator(accept_language)
store = translator.current_store()

st.title(translator.translate("title", "Translation demo"))
st.caption(
    translator.translate(
        "language_caption",
        "Current language: %s (default: %s)",
        store.get_current_language(),
        store.get_default_language(),
    )
)
st.markdown(translator.translate("greeting", None, "World"))
st.markdown(translator.translate("farewell"))
for key in SAMPLE_KEYS:
    st.markdown(f"{key} - {translator.translate(key, SAMPLE_FALLBACK, '(Replaced)')}")
