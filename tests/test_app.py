import pathlib

import pytest
from streamlit.testing.v1 import AppTest

from langstore import __version__

ROOT = pathlib.Path(__file__).resolve().parents[1]


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("LANGSTORE_PATH_LANGUAGES", str(ROOT / "translations"))
    monkeypatch.setenv("LANGSTORE_DEFAULT_LANGUAGE", "en")
    monkeypatch.delenv("LANGSTORE_CURRENT_LANGUAGE", raising=False)
    return AppTest.from_file(str(ROOT / "app.py"))


def _markdown(at):
    return [m.value for m in at.markdown]


def test_defaults_to_english(app):
    app.run()
    assert not app.exception
    assert app.title[0].value == "Translation demo"
    texts = _markdown(app)
    assert "Hello World" in texts
    assert "text_sample - Sample text (Replaced)" in texts
    assert "text_sample_alt - Sample text fallback (Replaced)" in texts


def test_accept_language_switches_translation(app):
    app.run()
    app.sidebar.text_input[0].set_value("fr-FR,fr;q=0.9").run()
    assert app.title[0].value == "Démo de traduction"
    texts = _markdown(app)
    assert "Bonjour World" in texts
    # not in fr.json, served from the default table
    assert "Goodbye" in texts
    assert app.session_state["translator_source"] == "fr-FR,fr;q=0.9"


def test_unknown_language_falls_back_to_default(app):
    app.run()
    app.sidebar.text_input[0].set_value("xx").run()
    assert not app.exception
    assert app.title[0].value == "Translation demo"
    assert "Hello World" in _markdown(app)


def test_sidebar_shows_package_version(app):
    app.run()
    assert app.sidebar.markdown[0].value == f"**langstore v{__version__}**"
