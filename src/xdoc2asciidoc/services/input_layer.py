"""Input layer: xdoc folder scan, whole-file reads and output naming."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import DuplicateRootDocumentError

ROOT_DOCUMENT_TOKEN = "document"


@dataclass
class SourceDocument:
    path: Path
    content: str
    output_name: str

    @property
    def is_root(self) -> bool:
        return self.content.startswith(ROOT_DOCUMENT_TOKEN)


def output_filename(path: Path, input_suffix: str = ".xdoc", output_suffix: str = ".asc") -> str:
    """``My Doc-1.xdoc`` -> ``My_Doc_1.asc``."""
    name = path.name
    if input_suffix and name.endswith(input_suffix):
        name = name[: -len(input_suffix)]
    return name.replace(" ", "_").replace("-", "_") + output_suffix


def list_sources(input_dir: Path, input_suffix: str = ".xdoc") -> list[Path]:
    """Regular files in ``input_dir`` ending with ``input_suffix``, sorted by name."""
    return sorted(p for p in input_dir.iterdir() if p.is_file() and p.name.endswith(input_suffix))


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read a whole file, normalising every line ending to ``\\n``."""
    with path.open("r", encoding=encoding) as f:
        return "".join(line.rstrip("\r\n") + "\n" for line in f)


def load_sources(
    input_dir: Path,
    input_suffix: str = ".xdoc",
    output_suffix: str = ".asc",
    encoding: str = "utf-8",
) -> list[SourceDocument]:
    return [
        SourceDocument(
            path=p,
            content=read_source(p, encoding),
            output_name=output_filename(p, input_suffix, output_suffix),
        )
        for p in list_sources(input_dir, input_suffix)
    ]


def find_root_document(sources: list[SourceDocument]) -> SourceDocument | None:
    """Return the single document starting with ``document``, if any."""
    root: SourceDocument | None = None
    for src in sources:
        if not src.is_root:
            continue
        if root is not None:
            raise DuplicateRootDocumentError(root.path, src.path)
        root = src
    return root
