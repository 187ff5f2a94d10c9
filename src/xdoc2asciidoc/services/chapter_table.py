"""Chapter id -> output filename table, scoped to one conversion run."""

from __future__ import annotations

import logging

from ..errors import DuplicateChapterError

logger = logging.getLogger(__name__)


class ChapterTable:
    def __init__(self, allow_duplicates: bool = False) -> None:
        self._entries: dict[str, str] = {}
        self.allow_duplicates = allow_duplicates

    def register(self, chapter_id: str, filename: str) -> None:
        existing = self._entries.get(chapter_id)
        if existing is not None and existing != filename:
            if not self.allow_duplicates:
                raise DuplicateChapterError(chapter_id, existing, filename)
            logger.warning("Chapter id '%s' moved from %s to %s", chapter_id, existing, filename)
        self._entries[chapter_id] = filename

    def resolve(self, chapter_id: str) -> str:
        """Return the file defining ``chapter_id``, or the id itself when unknown."""
        return self._entries.get(chapter_id, chapter_id)

    def get(self, chapter_id: str) -> str | None:
        return self._entries.get(chapter_id)

    def snapshot(self) -> dict[str, str]:
        return dict(self._entries)

    def __contains__(self, chapter_id: object) -> bool:
        return chapter_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
