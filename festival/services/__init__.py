"""Services package: expose all concrete services from one import."""
from .beer_api_service import BeerApiException, BeerApiService
from .festival_service import (
    DEFAULT_FESTIVALS_URL,
    FestivalService,
    FestivalServiceException,
    FestivalsResponse,
)
from .favorites_service import FavoritesService
from .ratings_service import RatingsService
from .tasting_log_service import TastingLogService
from .festival_storage_service import FestivalStorageService
from .drink_filter_service import DrinkFilterService
from .drink_sort_service import DrinkSort, DrinkSortService

__all__ = [
    'BeerApiException',
    'BeerApiService',
    'DEFAULT_FESTIVALS_URL',
    'FestivalService',
    'FestivalServiceException',
    'FestivalsResponse',
    'FavoritesService',
    'RatingsService',
    'TastingLogService',
    'FestivalStorageService',
    'DrinkFilterService',
    'DrinkSort',
    'DrinkSortService',
]
