"""In-process key-value store."""

from dataclasses import dataclass, field

from nutrition_search.services.history import KeyValueStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store used when no database is configured."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        self.values[key] = value

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        self.values.pop(key, None)
