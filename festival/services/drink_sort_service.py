"""In-place ordering of drink lists."""
from enum import Enum
from typing import List

from ..models import Drink


class DrinkSort(str, Enum):
    NAME_ASC = 'name_asc'
    NAME_DESC = 'name_desc'
    ABV_HIGH = 'abv_high'
    ABV_LOW = 'abv_low'
    BREWERY = 'brewery'
    STYLE = 'style'


class DrinkSortService:
    """Sorts drinks in place and returns the same list."""

    def sort_drinks(self, drinks: List[Drink], sort_by: DrinkSort) -> List[Drink]:
        sort_by = DrinkSort(sort_by)
        if sort_by == DrinkSort.NAME_ASC:
            return self.sort_by_name_asc(drinks)
        if sort_by == DrinkSort.NAME_DESC:
            return self.sort_by_name_desc(drinks)
        if sort_by == DrinkSort.ABV_HIGH:
            return self.sort_by_abv_high(drinks)
        if sort_by == DrinkSort.ABV_LOW:
            return self.sort_by_abv_low(drinks)
        if sort_by == DrinkSort.BREWERY:
            return self.sort_by_brewery(drinks)
        return self.sort_by_style(drinks)

    def sort_by_name_asc(self, drinks: List[Drink]) -> List[Drink]:
        drinks.sort(key=lambda d: d.name)
        return drinks

    def sort_by_name_desc(self, drinks: List[Drink]) -> List[Drink]:
        drinks.sort(key=lambda d: d.name, reverse=True)
        return drinks

    def sort_by_abv_high(self, drinks: List[Drink]) -> List[Drink]:
        drinks.sort(key=lambda d: d.abv, reverse=True)
        return drinks

    def sort_by_abv_low(self, drinks: List[Drink]) -> List[Drink]:
        drinks.sort(key=lambda d: d.abv)
        return drinks

    def sort_by_brewery(self, drinks: List[Drink]) -> List[Drink]:
        drinks.sort(key=lambda d: d.brewery_name)
        return drinks

    def sort_by_style(self, drinks: List[Drink]) -> List[Drink]:
        # Unstyled drinks compare as "" and so lead the list.
        drinks.sort(key=lambda d: d.style or '')
        return drinks
