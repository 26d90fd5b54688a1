"""Pure filters over drink lists."""
from typing import Iterable, List, Optional

from ..models import AvailabilityStatus, Drink

_UNAVAILABLE = (AvailabilityStatus.OUT, AvailabilityStatus.NOT_YET_AVAILABLE)


def _is_available(drink: Drink) -> bool:
    return drink.availability_status not in _UNAVAILABLE


def _matches_query(drink: Drink, lower_query: str) -> bool:
    return (lower_query in drink.name.lower()
            or lower_query in drink.brewery_name.lower()
            or lower_query in (drink.style or '').lower()
            or lower_query in (drink.notes or '').lower())


class DrinkFilterService:
    """Filters drinks by category, style, favourites, availability and text.

    Every filter returns the input list untouched when its criterion is
    inactive (``None``, empty or ``False``).
    """

    def filter_by_category(self, drinks: List[Drink],
                           category: Optional[str]) -> List[Drink]:
        if category is None:
            return drinks
        return [d for d in drinks if d.category == category]

    def filter_by_styles(self, drinks: List[Drink],
                         styles: Iterable[str]) -> List[Drink]:
        """Keep drinks whose style is any of *styles*."""
        styles = set(styles)
        if not styles:
            return drinks
        return [d for d in drinks if d.style is not None and d.style in styles]

    def filter_by_favorites(self, drinks: List[Drink],
                            favorites_only: bool) -> List[Drink]:
        if not favorites_only:
            return drinks
        return [d for d in drinks if d.is_favorite]

    def filter_by_availability(self, drinks: List[Drink],
                               hide_unavailable: bool) -> List[Drink]:
        """Drop drinks that are sold out or not yet on."""
        if not hide_unavailable:
            return drinks
        return [d for d in drinks if _is_available(d)]

    def filter_by_search(self, drinks: List[Drink], query: str) -> List[Drink]:
        """Case-insensitive match on name, brewery, style and notes."""
        if not query:
            return drinks
        lower_query = query.lower()
        return [d for d in drinks if _matches_query(d, lower_query)]

    def apply_all_filters(self, drinks: List[Drink],
                          category: Optional[str] = None,
                          styles: Optional[Iterable[str]] = None,
                          favorites_only: bool = False,
                          hide_unavailable: bool = False,
                          search_query: str = '') -> List[Drink]:
        """Apply every active filter in one pass over *drinks*."""
        styles = set(styles or ())
        lower_query = search_query.lower()

        def keep(drink: Drink) -> bool:
            if category is not None and drink.category != category:
                return False
            if styles and (drink.style is None or drink.style not in styles):
                return False
            if favorites_only and not drink.is_favorite:
                return False
            if hide_unavailable and not _is_available(drink):
                return False
            if lower_query and not _matches_query(drink, lower_query):
                return False
            return True

        return [d for d in drinks if keep(d)]
