"""Repository package: expose the contracts and their implementations."""
from .drink_repository import DrinkRepository
from .festival_repository import FestivalRepository
from .api_drink_repository import ApiDrinkRepository
from .api_festival_repository import ApiFestivalRepository

__all__ = [
    'DrinkRepository',
    'FestivalRepository',
    'ApiDrinkRepository',
    'ApiFestivalRepository',
]
