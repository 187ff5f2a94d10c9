from pathlib import Path

import pytest


def test_output_filename():
    from xdoc2asciidoc.services.input_layer import output_filename

    assert output_filename(Path("My Doc-1.xdoc")) == "My_Doc_1.asc"
    assert output_filename(Path("intro.xdoc")) == "intro.asc"


def test_list_sources_filters_and_sorts(tmp_path):
    from xdoc2asciidoc.services.input_layer import list_sources

    (tmp_path / "b.xdoc").write_text("b", encoding="utf-8")
    (tmp_path / "a.xdoc").write_text("a", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("n", encoding="utf-8")
    (tmp_path / "dir.xdoc").mkdir()
    assert [p.name for p in list_sources(tmp_path)] == ["a.xdoc", "b.xdoc"]


def test_read_source_normalises_line_endings(tmp_path):
    from xdoc2asciidoc.services.input_layer import read_source

    path = tmp_path / "crlf.xdoc"
    path.write_bytes(b"one\r\ntwo")
    assert read_source(path) == "one\ntwo\n"


def test_find_root_document(tmp_path):
    from xdoc2asciidoc.errors import DuplicateRootDocumentError
    from xdoc2asciidoc.services.input_layer import SourceDocument, find_root_document

    a = SourceDocument(tmp_path / "a.xdoc", "chapter[A]\n", "a.asc")
    root = SourceDocument(tmp_path / "book.xdoc", "document[Book]\n", "book.asc")
    assert find_root_document([a, root]) is root
    assert find_root_document([a]) is None

    other = SourceDocument(tmp_path / "other.xdoc", "document[Other]\n", "other.asc")
    with pytest.raises(DuplicateRootDocumentError):
        find_root_document([root, a, other])


def test_write_output_refuses_existing_file(tmp_path):
    from xdoc2asciidoc.errors import OutputExistsError
    from xdoc2asciidoc.services.output_writer import write_output

    target = tmp_path / "x.asc"
    assert write_output(target, "first") is None
    with pytest.raises(OutputExistsError):
        write_output(target, "second")
    assert target.read_text(encoding="utf-8") == "first"


def test_write_output_overwrite_without_backup(tmp_path):
    from xdoc2asciidoc.services.output_writer import write_output

    target = tmp_path / "x.asc"
    target.write_text("old", encoding="utf-8")
    assert write_output(target, "new", overwrite=True) is None
    assert target.read_text(encoding="utf-8") == "new"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["x.asc"]


def test_write_output_numbers_backups(tmp_path):
    from xdoc2asciidoc.services.output_writer import write_output

    target = tmp_path / "x.asc"
    target.write_text("v1", encoding="utf-8")
    first = write_output(target, "v2", overwrite=True, backup_suffix=".bak")
    second = write_output(target, "v3", overwrite=True, backup_suffix=".bak")
    assert first.name == "x.asc.bak"
    assert second.name == "x.asc.bak.1"
    assert first.read_text(encoding="utf-8") == "v1"
    assert second.read_text(encoding="utf-8") == "v2"
    assert target.read_text(encoding="utf-8") == "v3"
