"""Models package: expose all record types from one import."""
from .drink import AvailabilityStatus, Drink, Producer, Product
from .favorite_item import FavoriteItem, FavoriteStatus
from .festival import (
    DEFAULT_FESTIVAL,
    DEFAULT_FESTIVALS,
    Festival,
    FestivalStatus,
    sort_by_date,
    status_in_context,
)

__all__ = [
    'AvailabilityStatus',
    'Drink',
    'Producer',
    'Product',
    'FavoriteItem',
    'FavoriteStatus',
    'DEFAULT_FESTIVAL',
    'DEFAULT_FESTIVALS',
    'Festival',
    'FestivalStatus',
    'sort_by_date',
    'status_in_context',
]
