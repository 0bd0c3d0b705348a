"""Recent-query history persisted as a small JSON file."""

from __future__ import annotations

import json
import logging
import pathlib
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import List, Optional

from .config import DEFAULT_HISTORY_LIMIT
from .estimators.base import TakeoffResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    query: str
    title: str
    highlight: str
    time: str


class HistoryStore:
    """Most-recent-first list of past queries, capped at ``limit`` entries."""

    def __init__(self, path: pathlib.Path, *, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        self.path = pathlib.Path(path).expanduser()
        self.limit = limit

    def load(self) -> List[HistoryEntry]:
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, exc)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring history file %s: expected a list of entries", self.path)
            return []

        entries: List[HistoryEntry] = []
        for item in data:
            try:
                entries.append(
                    HistoryEntry(
                        query=str(item["query"]),
                        title=str(item["title"]),
                        highlight=str(item["highlight"]),
                        time=str(item["time"]),
                    )
                )
            except (KeyError, TypeError):
                logger.warning("Skipping malformed history entry in %s: %r", self.path, item)
        return entries[: self.limit]

    def record(self, query: str, result: TakeoffResult, *, when: Optional[datetime] = None) -> HistoryEntry:
        timestamp = (when or datetime.now(timezone.utc)).isoformat()
        entry = HistoryEntry(query=query, title=result.title, highlight=result.highlight, time=timestamp)
        entries = [entry] + self.load()
        self._save(entries[: self.limit])
        return entry

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()

    def _save(self, entries: List[HistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps([asdict(entry) for entry in entries], indent=2))
