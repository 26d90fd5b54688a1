"""Contract for drink data access."""
import datetime
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Drink, Festival


class DrinkRepository(ABC):
    """Drink catalog plus the user's per-festival annotations.

    Implementations decide where drinks and user state come from; callers
    only see annotated :class:`~festival.models.Drink` records.
    """

    @abstractmethod
    def get_drinks(self, festival: Festival) -> List[Drink]:
        """Return the festival's drinks with ``is_favorite``, ``rating`` and
        ``is_tasted`` populated."""

    @abstractmethod
    def get_favorites(self, festival_id: str) -> List[str]:
        """Return the IDs of the festival's favorite drinks."""

    @abstractmethod
    def toggle_favorite(self, festival_id: str, drink_id: str) -> bool:
        """Flip favorite membership and return the new state."""

    @abstractmethod
    def get_rating(self, festival_id: str, drink_id: str) -> Optional[int]:
        ...

    @abstractmethod
    def set_rating(self, festival_id: str, drink_id: str, rating: int) -> None:
        ...

    @abstractmethod
    def remove_rating(self, festival_id: str, drink_id: str) -> None:
        ...

    @abstractmethod
    def has_tasted(self, festival_id: str, drink_id: str) -> bool:
        ...

    @abstractmethod
    def toggle_tasted(self, festival_id: str, drink_id: str) -> bool:
        """Flip the tasted flag and return the new state."""

    @abstractmethod
    def get_tasted_drinks(self, festival_id: str) -> List[str]:
        ...

    @abstractmethod
    def get_favorite_status(self, festival_id: str, drink_id: str) -> Optional[str]:
        """Return ``'want_to_try'``, ``'tasted'`` or ``None`` if not logged."""

    @abstractmethod
    def mark_as_tasted(self, festival_id: str, drink_id: str) -> None:
        """Record one tasting of the drink at the current time."""

    @abstractmethod
    def delete_try(self, festival_id: str, drink_id: str,
                   timestamp: datetime.datetime) -> None:
        ...

    @abstractmethod
    def get_try_count(self, festival_id: str, drink_id: str) -> int:
        ...
