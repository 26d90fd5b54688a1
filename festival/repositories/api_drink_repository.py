"""Drink repository backed by the remote catalog and local user state."""
import datetime
from typing import List, Optional

from ..models import Drink, Festival
from ..services import BeerApiService, FavoritesService, RatingsService, TastingLogService
from .drink_repository import DrinkRepository


class ApiDrinkRepository(DrinkRepository):
    """Combines :class:`BeerApiService` with the favorites, ratings and
    tasting-log services.

    Every method forwards to one collaborator; failures propagate
    unchanged.  Only :meth:`get_drinks` adds behaviour of its own, an
    annotation pass over the fetched catalog.
    """

    def __init__(self, *, api_service: BeerApiService,
                 favorites_service: FavoritesService,
                 ratings_service: RatingsService,
                 tasting_log_service: TastingLogService) -> None:
        self._api_service = api_service
        self._favorites_service = favorites_service
        self._ratings_service = ratings_service
        self._tasting_log_service = tasting_log_service

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def get_drinks(self, festival: Festival) -> List[Drink]:
        """Fetch the catalog and annotate each drink in place.

        Favorites are read once for the whole pass; ratings and tasted
        flags are read per drink.  A concurrent toggle may or may not be
        reflected.
        """
        drinks = self._api_service.fetch_all_drinks(festival)
        favorite_ids = self._favorites_service.get_favorites(festival.id).keys()

        for drink in drinks:
            drink.is_favorite = drink.id in favorite_ids
            drink.rating = self._ratings_service.get_rating(festival.id, drink.id)
            drink.is_tasted = self._tasting_log_service.has_tasted(festival.id, drink.id)

        return drinks

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def get_favorites(self, festival_id: str) -> List[str]:
        return list(self._favorites_service.get_favorites(festival_id))

    def toggle_favorite(self, festival_id: str, drink_id: str) -> bool:
        return self._favorites_service.toggle_favorite(festival_id, drink_id)

    # ------------------------------------------------------------------
    # Ratings
    # ------------------------------------------------------------------

    def get_rating(self, festival_id: str, drink_id: str) -> Optional[int]:
        return self._ratings_service.get_rating(festival_id, drink_id)

    def set_rating(self, festival_id: str, drink_id: str, rating: int) -> None:
        self._ratings_service.set_rating(festival_id, drink_id, rating)

    def remove_rating(self, festival_id: str, drink_id: str) -> None:
        self._ratings_service.remove_rating(festival_id, drink_id)

    # ------------------------------------------------------------------
    # Tasted flag
    # ------------------------------------------------------------------

    def has_tasted(self, festival_id: str, drink_id: str) -> bool:
        return self._tasting_log_service.has_tasted(festival_id, drink_id)

    def toggle_tasted(self, festival_id: str, drink_id: str) -> bool:
        self._tasting_log_service.toggle_tasted(festival_id, drink_id)
        return self._tasting_log_service.has_tasted(festival_id, drink_id)

    def get_tasted_drinks(self, festival_id: str) -> List[str]:
        return self._tasting_log_service.get_tasted_drink_ids(festival_id)

    # ------------------------------------------------------------------
    # Festival log
    # ------------------------------------------------------------------

    def get_favorite_status(self, festival_id: str, drink_id: str) -> Optional[str]:
        item = self._favorites_service.get_favorite_item(festival_id, drink_id)
        return item.status.value if item is not None else None

    def mark_as_tasted(self, festival_id: str, drink_id: str) -> None:
        self._favorites_service.mark_as_tasted(festival_id, drink_id)

    def delete_try(self, festival_id: str, drink_id: str,
                   timestamp: datetime.datetime) -> None:
        self._favorites_service.delete_try(festival_id, drink_id, timestamp)

    def get_try_count(self, festival_id: str, drink_id: str) -> int:
        return self._favorites_service.get_try_count(festival_id, drink_id)
