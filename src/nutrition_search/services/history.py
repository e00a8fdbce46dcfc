"""Recent searches and trending terms."""

import json
import logging
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from nutrition_search.domain.history import RecentSearch, TrendingTerm

RECENT_SEARCHES_KEY = "recent_searches"
TRENDING_TERMS_KEY = "trending_terms"
MAX_RECENT_SEARCHES = 50
MAX_TRENDING_TERMS = 30
MIN_TERM_LENGTH = 2

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence interface for string values by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def remove(self, key: str) -> None:
        """Delete a key if present."""


@dataclass
class SearchHistoryService:
    """Best-effort recent-search list and trending-term counters.

    Each key is re-read from the store, modified and written back under its
    own lock, so instances sharing a store see each other's writes. The last
    known state is kept in process and only used when the store cannot be
    read.
    """

    store: KeyValueStore
    _locks: dict[str, threading.Lock] = field(
        default_factory=lambda: {
            RECENT_SEARCHES_KEY: threading.Lock(),
            TRENDING_TERMS_KEY: threading.Lock(),
        }
    )
    _state: dict[str, list[dict[str, object]]] = field(default_factory=dict)

    def save_recent_search(self, term: str, result_count: int) -> None:
        """Record a search at the head of the recent list."""
        term = term.strip()
        if len(term) < MIN_TERM_LENGTH:
            return
        entry = {
            "term": term,
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "result_count": result_count,
        }
        with self._locks[RECENT_SEARCHES_KEY]:
            entries = [
                item
                for item in self._load(RECENT_SEARCHES_KEY)
                if str(item.get("term", "")).lower() != term.lower()
            ]
            entries.insert(0, entry)
            self._save(RECENT_SEARCHES_KEY, entries[:MAX_RECENT_SEARCHES])

    def get_recent_searches(self, limit: int = 10) -> list[RecentSearch]:
        """Return the most recent searches, newest first."""
        with self._locks[RECENT_SEARCHES_KEY]:
            entries = self._load(RECENT_SEARCHES_KEY)
        try:
            return [
                RecentSearch(
                    term=str(item["term"]),
                    timestamp=datetime.fromisoformat(str(item["timestamp"])),
                    result_count=int(item.get("result_count") or 0),
                )
                for item in entries[:limit]
            ]
        except (KeyError, TypeError, ValueError):
            _logger.warning("Discarding malformed recent searches")
            return []

    def clear_recent_searches(self) -> None:
        """Forget every recent search."""
        with self._locks[RECENT_SEARCHES_KEY]:
            self._state[RECENT_SEARCHES_KEY] = []
            try:
                self.store.remove(RECENT_SEARCHES_KEY)
            except Exception:
                _logger.exception("Failed to clear recent searches")

    def track_search_term(self, term: str) -> None:
        """Increment the frequency counter for a search term."""
        term = term.strip().lower()
        if len(term) < MIN_TERM_LENGTH:
            return
        now = datetime.now(tz=UTC).isoformat()
        with self._locks[TRENDING_TERMS_KEY]:
            entries = self._load(TRENDING_TERMS_KEY)
            for item in entries:
                if item.get("term") == term:
                    item["frequency"] = int(item.get("frequency") or 0) + 1
                    item["last_searched"] = now
                    break
            else:
                entries.append({"term": term, "frequency": 1, "last_searched": now})
            entries.sort(key=lambda item: int(item.get("frequency") or 0), reverse=True)
            self._save(TRENDING_TERMS_KEY, entries[:MAX_TRENDING_TERMS])

    def get_trending_terms(self, limit: int = 8) -> list[TrendingTerm]:
        """Return the most frequently searched terms."""
        with self._locks[TRENDING_TERMS_KEY]:
            entries = self._load(TRENDING_TERMS_KEY)
        try:
            return [
                TrendingTerm(
                    term=str(item["term"]),
                    frequency=int(item["frequency"]),
                    last_searched=datetime.fromisoformat(str(item["last_searched"])),
                )
                for item in entries[:limit]
            ]
        except (KeyError, TypeError, ValueError):
            _logger.warning("Discarding malformed trending terms")
            return []

    def _load(self, key: str) -> list[dict[str, object]]:
        try:
            raw = self.store.get(key)
        except Exception:
            _logger.exception("Failed to read %s", key)
            return [dict(item) for item in self._state.get(key, [])]
        entries = _decode_entries(key, raw)
        self._state[key] = entries
        return [dict(item) for item in entries]

    def _save(self, key: str, entries: list[dict[str, object]]) -> None:
        self._state[key] = entries
        try:
            self.store.set(key, json.dumps(entries))
        except Exception:
            _logger.exception("Failed to write %s", key)


def _decode_entries(key: str, raw: str | None) -> list[dict[str, object]]:
    if not raw:
        return []
    try:
        decoded = json.loads(raw)
    except ValueError:
        _logger.warning("Ignoring undecodable %s", key)
        return []
    if not isinstance(decoded, list):
        return []
    return [item for item in decoded if isinstance(item, dict)]
