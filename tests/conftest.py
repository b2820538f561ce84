"""Pytest fixtures for htmlchunker tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from htmlchunker.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the real ~/.htmlchunker and HTMLCHUNKER_* out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("HTMLCHUNKER_OUTPUT__DIRECTORY", "HTMLCHUNKER_DEPTH__DEFAULT", "HTMLCHUNKER_DEPTH__MAX_CHAPTERS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_html(tmp_path) -> Path:
    """A minimal single-page Asciidoctor document."""
    html = tmp_path / "book.html"
    html.write_text(
        "<html><body><div id='content'>"
        "<div class='sect1'><h2 id='_one'>1. One</h2></div>"
        "<div class='sect1'><h2 id='_two'>2. Two</h2></div>"
        "</div></body></html>"
    )
    return html


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Path for a not-yet-created output directory."""
    return tmp_path / "html_chunks"
