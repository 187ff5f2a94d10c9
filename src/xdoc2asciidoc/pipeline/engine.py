"""Two-phase conversion pipeline over a folder of xdoc files.

Phase 1 translates every non-root document, filling the chapter table.
Phase 2 writes the index stub and translates the root ``document`` file, whose
``chapter-ref`` items resolve against that table.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Callable

from ..config import load_settings
from ..errors import ConversionError, MarkupError
from ..models import ConversionSettings, FileOutcome, RunReport
from ..services.input_layer import SourceDocument, find_root_document, load_sources
from ..services.line_translator import INDEX_STUB_CONTENT, INDEX_STUB_NAME, LineTranslator
from ..services.output_writer import write_output
from .context import ConversionContext

logger = logging.getLogger(__name__)

# Event callback: (event_kind, data) -> None
EventCallback = Callable[[str, dict[str, Any]], None]


class ConversionPipeline:
    """Converts a folder of xdoc files into AsciiDoc, emitting progress events."""

    def __init__(
        self,
        settings: ConversionSettings | None = None,
        on_event: EventCallback | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self._on_event = on_event or (lambda k, d: None)
        # Chapter table and translation state belong to a single run at a time
        self._lock = threading.Lock()

    def run(self, input_dir: Path | str, output_dir: Path | str) -> RunReport:
        with self._lock:
            return self._run(Path(input_dir), Path(output_dir))

    def _run(self, input_dir: Path, output_dir: Path) -> RunReport:
        s = self.settings
        ctx = ConversionContext(s, input_dir, output_dir)
        sources = load_sources(
            input_dir,
            input_suffix=s.input_suffix,
            output_suffix=s.output_suffix,
            encoding=s.input_encoding,
        )
        # Reject two root documents before anything is written
        root = find_root_document(sources)
        translator = LineTranslator(ctx.chapters, max_depth=s.max_depth, strict=s.strict)
        report = RunReport(input_dir=str(input_dir), output_dir=str(output_dir))

        for src in sources:
            if src is root:
                continue
            report.files.append(self._convert(ctx, translator, src, is_root=False))

        if root is not None:
            stub = ctx.output_path(INDEX_STUB_NAME)
            write_output(stub, INDEX_STUB_CONTENT, overwrite=True)
            report.index_stub = str(stub)
            self._on_event("IndexStubWritten", {"path": str(stub)})
            report.files.append(self._convert(ctx, translator, root, is_root=True))

        report.chapters = ctx.chapters.snapshot()
        logger.info("All %d files processed OK... ", len(sources))
        self._on_event("RunCompleted", {"files": report.total, "chapters": len(report.chapters)})
        return report

    def _convert(
        self,
        ctx: ConversionContext,
        translator: LineTranslator,
        src: SourceDocument,
        is_root: bool,
    ) -> FileOutcome:
        target = ctx.output_path(src.output_name)
        logger.info("Processing : %s", src.path.resolve())
        self._on_event("FileStarted", {"source": str(src.path), "target": str(target), "is_root": is_root})
        try:
            text = translator.translate_document(src.content, src.output_name, is_root=is_root)
        except MarkupError as e:
            raise ConversionError(src.path, e) from e

        backup = write_output(
            target,
            text,
            overwrite=ctx.settings.overwrite,
            backup_suffix=ctx.settings.backup_suffix,
        )
        outcome = FileOutcome(
            source=str(src.path),
            target=str(target),
            is_root=is_root,
            backup=str(backup) if backup else None,
        )
        self._on_event("FileCompleted", outcome.model_dump())
        return outcome
