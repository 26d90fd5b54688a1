"""Business logic for the quick "I've tasted this" flag."""
import datetime
import time
from typing import List, Optional

from ..storage import PreferencesStore


class TastingLogService:
    """Tracks which drinks the user has tasted at each festival.

    Each tasted drink is one preferences key holding the epoch-millisecond
    time it was marked; an absent key means not tasted.
    """

    KEY_PREFIX = 'tasting_log_'

    def __init__(self, store: PreferencesStore) -> None:
        self._store = store

    def _festival_prefix(self, festival_id: str) -> str:
        return f'{self.KEY_PREFIX}{festival_id}_'

    def _key(self, festival_id: str, drink_id: str) -> str:
        return f'{self._festival_prefix(festival_id)}{drink_id}'

    # ------------------------------------------------------------------
    # Per drink
    # ------------------------------------------------------------------

    def has_tasted(self, festival_id: str, drink_id: str) -> bool:
        return self._store.contains(self._key(festival_id, drink_id))

    def get_tasted_timestamp(self, festival_id: str,
                             drink_id: str) -> Optional[datetime.datetime]:
        """Return when *drink_id* was marked tasted, or ``None``."""
        millis = self._store.get(self._key(festival_id, drink_id))
        if millis is None:
            return None
        return datetime.datetime.fromtimestamp(millis / 1000)

    def mark_as_tasted(self, festival_id: str, drink_id: str) -> None:
        self._store.set(self._key(festival_id, drink_id), int(time.time() * 1000))

    def unmark_as_tasted(self, festival_id: str, drink_id: str) -> None:
        self._store.remove(self._key(festival_id, drink_id))

    def toggle_tasted(self, festival_id: str, drink_id: str) -> None:
        if self.has_tasted(festival_id, drink_id):
            self.unmark_as_tasted(festival_id, drink_id)
        else:
            self.mark_as_tasted(festival_id, drink_id)

    # ------------------------------------------------------------------
    # Per festival
    # ------------------------------------------------------------------

    def get_tasted_drink_ids(self, festival_id: str) -> List[str]:
        prefix = self._festival_prefix(festival_id)
        return [key[len(prefix):] for key in self._store.keys()
                if key.startswith(prefix)]

    def get_tasted_count(self, festival_id: str) -> int:
        return len(self.get_tasted_drink_ids(festival_id))

    def clear_festival_log(self, festival_id: str) -> None:
        prefix = self._festival_prefix(festival_id)
        self._store.remove_many([k for k in self._store.keys() if k.startswith(prefix)])

    def clear_all_logs(self) -> None:
        self._store.remove_many(
            [k for k in self._store.keys() if k.startswith(self.KEY_PREFIX)])
