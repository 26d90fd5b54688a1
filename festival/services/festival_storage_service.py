"""Remembers which festival the user last picked."""
from typing import Optional

from ..storage import PreferencesStore


class FestivalStorageService:

    SELECTED_FESTIVAL_KEY = 'selected_festival_id'

    def __init__(self, store: PreferencesStore) -> None:
        self._store = store

    def get_selected_festival_id(self) -> Optional[str]:
        """Return the last selected festival ID, or ``None`` if never set."""
        return self._store.get(self.SELECTED_FESTIVAL_KEY)

    def set_selected_festival_id(self, festival_id: str) -> None:
        self._store.set(self.SELECTED_FESTIVAL_KEY, festival_id)

    def clear_selected_festival(self) -> None:
        self._store.remove(self.SELECTED_FESTIVAL_KEY)
