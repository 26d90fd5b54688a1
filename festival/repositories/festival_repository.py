"""Contract for festival data access."""
from abc import ABC, abstractmethod
from typing import Optional

from ..services.festival_service import FestivalsResponse


class FestivalRepository(ABC):

    @abstractmethod
    def get_festivals(self) -> FestivalsResponse:
        """Return every known festival together with the default pick."""

    @abstractmethod
    def get_selected_festival_id(self) -> Optional[str]:
        """Return the persisted selection, or ``None`` if nothing is selected."""

    @abstractmethod
    def set_selected_festival_id(self, festival_id: str) -> None:
        ...
