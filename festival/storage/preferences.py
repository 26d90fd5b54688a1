"""Key/value preferences file shared by the local services."""
from typing import Any, Dict, List, Optional

from .base import BaseStore


class PreferencesStore(BaseStore):
    """Persists a flat ``{key: value}`` mapping to a JSON file.

    Every local service (favorites, ratings, tasting log, festival
    selection) namespaces its own keys inside the one file, so a single
    store instance is shared between them.  Writes go to disk immediately.

    Schema::

        {
            "favorites_<festival_id>":                 {<drink_id>: {...}},
            "ratings_<festival_id>_<drink_id>":        <int 1-5>,
            "tasting_log_<festival_id>_<drink_id>":    <epoch millis>,
            "selected_festival_id":                    "<festival_id>"
        }
    """

    def __init__(self, file_path: str = '.tapster_prefs.json') -> None:
        super().__init__(file_path)
        raw = self._load({})
        if not isinstance(raw, dict):
            self._log.warning("Ignoring non-object preferences in %s", file_path)
            raw = {}
        self.data: Dict[str, Any] = raw

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.data.get(key, default)

    def contains(self, key: str) -> bool:
        return key in self.data

    def keys(self) -> List[str]:
        return list(self.data)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key* and persist."""
        self.data[key] = value
        self.save()

    def remove(self, key: str) -> bool:
        """Delete *key*.  Returns ``True`` if it existed."""
        if key not in self.data:
            return False
        del self.data[key]
        self.save()
        return True

    def remove_many(self, keys: List[str]) -> int:
        """Delete every key in *keys* with a single write.  Returns the count removed."""
        removed = 0
        for key in keys:
            if key in self.data:
                del self.data[key]
                removed += 1
        if removed:
            self.save()
        return removed

    def save(self) -> None:
        """Persist the current in-memory data to disk."""
        self._save(self.data)
