"""Write translated documents, refusing or backing up existing files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import OutputExistsError

logger = logging.getLogger(__name__)


def backup_path(path: Path, suffix: str) -> Path:
    """First free ``<name><suffix>``, ``<name><suffix>.1``, ``<name><suffix>.2``..."""
    candidate = path.with_name(path.name + suffix)
    count = 1
    while candidate.exists():
        candidate = path.with_name(f"{path.name}{suffix}.{count}")
        count += 1
    return candidate


def write_output(
    path: Path,
    text: str,
    overwrite: bool = False,
    backup_suffix: str | None = None,
) -> Path | None:
    """Write ``text`` to ``path`` as UTF-8.

    Returns the backup location when an existing file was moved aside.
    """
    backup: Path | None = None
    if path.exists():
        if not overwrite:
            raise OutputExistsError(f"Cannot store text in file '{path.resolve()}' as already exists.")
        if backup_suffix:
            backup = backup_path(path, backup_suffix)
            path.rename(backup)
            logger.info("Backed up %s to %s", path.name, backup.name)
        else:
            path.unlink()
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    return backup
