"""Pydantic models for conversion settings and run reports."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConversionSettings(BaseModel):
    input_suffix: str = ".xdoc"
    output_suffix: str = ".asc"
    input_encoding: str = "utf-8"
    max_depth: int = Field(default=100, ge=1)
    overwrite: bool = False
    backup_suffix: str | None = None
    strict: bool = False
    allow_duplicate_chapters: bool = False
    log_level: str = "INFO"


class FileOutcome(BaseModel):
    """One converted source file."""

    source: str
    target: str
    is_root: bool = False
    backup: str | None = None


class RunReport(BaseModel):
    input_dir: str
    output_dir: str
    files: list[FileOutcome] = Field(default_factory=list)
    chapters: dict[str, str] = Field(default_factory=dict)
    index_stub: str | None = None

    @property
    def total(self) -> int:
        return len(self.files)

    @property
    def root(self) -> FileOutcome | None:
        return next((f for f in self.files if f.is_root), None)
