import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # Settings come from XDOC2ASCIIDOC_* variables; keep the developer's shell out of tests.
    for key in list(os.environ):
        if key.startswith("XDOC2ASCIIDOC_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture()
def translator():
    from xdoc2asciidoc.services.chapter_table import ChapterTable
    from xdoc2asciidoc.services.line_translator import LineTranslator

    return LineTranslator(ChapterTable())


@pytest.fixture()
def convert(translator):
    """Translate a snippet as a non-root document named out.asc."""

    def _convert(text: str) -> str:
        return translator.translate_document(text, "out.asc")

    return _convert


@pytest.fixture()
def folders(tmp_path):
    src = tmp_path / "xdoc"
    out = tmp_path / "asc"
    src.mkdir()
    out.mkdir()
    return src, out
