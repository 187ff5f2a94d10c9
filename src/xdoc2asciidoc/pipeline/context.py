"""Conversion run context: settings, folders and the run-wide chapter table."""

from __future__ import annotations

from pathlib import Path

from ..models import ConversionSettings
from ..services.chapter_table import ChapterTable


class ConversionContext:
    """State shared by every document of one conversion run."""

    def __init__(self, settings: ConversionSettings, input_dir: Path, output_dir: Path) -> None:
        self.settings = settings
        self.input_dir = input_dir
        self.output_dir = output_dir
        self.chapters = ChapterTable(allow_duplicates=settings.allow_duplicate_chapters)

    def output_path(self, name: str) -> Path:
        return self.output_dir / name

