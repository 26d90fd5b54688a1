"""Business logic for the per-festival log of favorite and tasted drinks."""
import datetime
import logging
from typing import Dict, Optional

from ..models import FavoriteItem, FavoriteStatus
from ..storage import PreferencesStore

_log = logging.getLogger('tapster.favorites')


def _to_millis(ts: datetime.datetime) -> datetime.datetime:
    return ts.replace(microsecond=ts.microsecond // 1000 * 1000)


class FavoritesService:
    """Maintains the festival log, delegating persistence to
    :class:`~festival.storage.preferences.PreferencesStore`.

    Rules
    -----
    * A drink is a *favorite* while it has any entry in the festival's log.
    * New entries start as ``want_to_try`` with no tries.
    * Each tasting appends a timestamp and moves the entry to ``tasted``;
      removing the last timestamp moves it back to ``want_to_try``.
    """

    KEY_PREFIX = 'favorites'

    def __init__(self, store: PreferencesStore) -> None:
        self._store = store

    def _key(self, festival_id: str) -> str:
        return f'{self.KEY_PREFIX}_{festival_id}'

    # ------------------------------------------------------------------
    # Whole-log access
    # ------------------------------------------------------------------

    def get_favorites(self, festival_id: str) -> Dict[str, FavoriteItem]:
        """Return the festival log as ``{drink_id: FavoriteItem}``.

        Unreadable stored data is logged and treated as an empty log.
        """
        raw = self._store.get(self._key(festival_id))
        if not raw:
            return {}
        try:
            return {drink_id: FavoriteItem.from_json(item)
                    for drink_id, item in raw.items()}
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            _log.warning("Could not load favorites for %s: %s", festival_id, exc)
            return {}

    def save_favorites(self, festival_id: str,
                       favorites: Dict[str, FavoriteItem]) -> None:
        """Replace the stored log for *festival_id* with *favorites*."""
        self._store.set(self._key(festival_id),
                        {drink_id: item.to_json() for drink_id, item in favorites.items()})

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    @staticmethod
    def _new_item(drink_id: str, now: datetime.datetime) -> FavoriteItem:
        return FavoriteItem(
            id=drink_id,
            status=FavoriteStatus.WANT_TO_TRY,
            tries=[],
            created_at=now,
            updated_at=now,
        )

    def add_favorite(self, festival_id: str, drink_id: str) -> None:
        """Put *drink_id* on the want-to-try list (replacing any entry)."""
        favorites = self.get_favorites(festival_id)
        favorites[drink_id] = self._new_item(drink_id, datetime.datetime.now())
        self.save_favorites(festival_id, favorites)

    def remove_favorite(self, festival_id: str, drink_id: str) -> None:
        favorites = self.get_favorites(festival_id)
        favorites.pop(drink_id, None)
        self.save_favorites(festival_id, favorites)

    def toggle_favorite(self, festival_id: str, drink_id: str) -> bool:
        """Add *drink_id* to the log, or drop it if already there.

        Returns:
            The new state: ``True`` if the drink is now a favorite.
        """
        favorites = self.get_favorites(festival_id)
        was_favorite = drink_id in favorites
        if was_favorite:
            del favorites[drink_id]
        else:
            favorites[drink_id] = self._new_item(drink_id, datetime.datetime.now())
        self.save_favorites(festival_id, favorites)
        return not was_favorite

    def is_favorite(self, festival_id: str, drink_id: str) -> bool:
        return drink_id in self.get_favorites(festival_id)

    def get_favorite_item(self, festival_id: str,
                          drink_id: str) -> Optional[FavoriteItem]:
        """Return the log entry for *drink_id*, or ``None``."""
        return self.get_favorites(festival_id).get(drink_id)

    # ------------------------------------------------------------------
    # Tastings
    # ------------------------------------------------------------------

    def mark_as_tasted(self, festival_id: str, drink_id: str,
                       now: Optional[datetime.datetime] = None) -> None:
        """Record one tasting of *drink_id* at *now* (default: the current time)."""
        favorites = self.get_favorites(festival_id)
        existing = favorites.get(drink_id)
        now = now or datetime.datetime.now()
        if existing is None:
            favorites[drink_id] = FavoriteItem(
                id=drink_id,
                status=FavoriteStatus.TASTED,
                tries=[now],
                created_at=now,
                updated_at=now,
            )
        else:
            favorites[drink_id] = existing.replace(
                status=FavoriteStatus.TASTED,
                tries=[*existing.tries, now],
                updated_at=now,
            )
        self.save_favorites(festival_id, favorites)

    def delete_try(self, festival_id: str, drink_id: str,
                   timestamp: datetime.datetime) -> None:
        """Remove the tasting recorded at *timestamp* (millisecond precision).

        Drinks not in the log are ignored.  Deleting the last tasting puts
        the drink back on the want-to-try list.
        """
        favorites = self.get_favorites(festival_id)
        existing = favorites.get(drink_id)
        if existing is None:
            return
        target = _to_millis(timestamp)
        remaining = [t for t in existing.tries if _to_millis(t) != target]
        if remaining:
            favorites[drink_id] = existing.replace(
                tries=remaining, updated_at=datetime.datetime.now())
        else:
            favorites[drink_id] = existing.replace(
                status=FavoriteStatus.WANT_TO_TRY,
                tries=[],
                updated_at=datetime.datetime.now(),
            )
        self.save_favorites(festival_id, favorites)

    def get_try_count(self, festival_id: str, drink_id: str) -> int:
        """Return how many tastings are logged for *drink_id* (0 if none)."""
        item = self.get_favorite_item(festival_id, drink_id)
        return len(item.tries) if item else 0

    def update_notes(self, festival_id: str, drink_id: str,
                     notes: Optional[str]) -> None:
        """Set or clear (``None``) the notes on an existing log entry."""
        favorites = self.get_favorites(festival_id)
        existing = favorites.get(drink_id)
        if existing is None:
            return
        favorites[drink_id] = existing.replace(
            notes=notes, updated_at=datetime.datetime.now())
        self.save_favorites(festival_id, favorites)
