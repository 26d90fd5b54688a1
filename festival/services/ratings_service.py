"""Business logic for personal drink ratings."""
from typing import Optional

from ..storage import PreferencesStore

MIN_RATING = 1
MAX_RATING = 5


class RatingsService:
    """Stores one star rating per (festival, drink), delegating persistence to
    :class:`~festival.storage.preferences.PreferencesStore`.

    Rules
    -----
    * ``rating`` must be an integer in the range **1–5** (inclusive).
    * Setting a rating again replaces the previous one.
    """

    KEY_PREFIX = 'ratings'

    def __init__(self, store: PreferencesStore) -> None:
        self._store = store

    def _key(self, festival_id: str, drink_id: str) -> str:
        return f'{self.KEY_PREFIX}_{festival_id}_{drink_id}'

    def get_rating(self, festival_id: str, drink_id: str) -> Optional[int]:
        """Return the rating for *drink_id*, or ``None`` if unrated."""
        value = self._store.get(self._key(festival_id, drink_id))
        return int(value) if value is not None else None

    def set_rating(self, festival_id: str, drink_id: str, rating: int) -> None:
        """Store *rating* for *drink_id*.

        Raises:
            ValueError: if *rating* is outside 1–5.
        """
        if isinstance(rating, bool) or not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING} inclusive, got {rating!r}")
        self._store.set(self._key(festival_id, drink_id), int(rating))

    def remove_rating(self, festival_id: str, drink_id: str) -> None:
        self._store.remove(self._key(festival_id, drink_id))
