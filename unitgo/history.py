"""
Recent Conversions
==================

Bounded most-recent-first list of conversions, one entry per unit pair.

The engine never records anything itself. Callers add an entry after a
successful conversion:

    history = HistoryStore('recents.json')
    result = engine.convert(100, 'cm', 'in')
    if result:
        history.add('cm', 'in', 100, result.value)
"""

import json
import logging
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


@dataclass
class RecentConversion:
    """One remembered conversion."""
    from_unit_id: str
    to_unit_id: str
    value: float
    result: float
    timestamp: float

    @property
    def pair(self):
        return (self.from_unit_id, self.to_unit_id)


class HistoryStore:
    """
    Most-recent-first conversion history.

    Adding a pair that is already present moves it to the front with the
    new values. Entries past the limit are dropped. With a path the list is
    persisted as JSON after every change; without one it lives in memory.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, limit: int = DEFAULT_LIMIT):
        self.path = Path(path) if path is not None else None
        self.limit = limit
        self._entries: List[RecentConversion] = self._load()

    def _load(self) -> List[RecentConversion]:
        if self.path is None or not self.path.exists():
            return []

        try:
            with open(self.path) as f:
                rows = json.load(f)
            entries = [RecentConversion(**row) for row in rows]
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Could not read history from {self.path}: {e}")
            return []

        return entries[:self.limit]

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump([asdict(e) for e in self._entries], f, indent=2)

    def add(self, from_unit_id: str, to_unit_id: str, value: float, result: float,
            timestamp: Optional[float] = None) -> RecentConversion:
        entry = RecentConversion(
            from_unit_id=from_unit_id,
            to_unit_id=to_unit_id,
            value=value,
            result=result,
            timestamp=time.time() if timestamp is None else timestamp,
        )
        others = [e for e in self._entries if e.pair != entry.pair]
        self._entries = [entry] + others[:self.limit - 1]
        self._save()
        return entry

    def recents(self) -> List[RecentConversion]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []
        self._save()

    def __len__(self) -> int:
        return len(self._entries)
