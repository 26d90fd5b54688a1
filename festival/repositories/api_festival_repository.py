"""Festival repository backed by the remote registry and local selection."""
from typing import Optional

from ..services import FestivalService, FestivalsResponse, FestivalStorageService
from .festival_repository import FestivalRepository


class ApiFestivalRepository(FestivalRepository):
    """Forwards to :class:`FestivalService` and :class:`FestivalStorageService`."""

    def __init__(self, *, festival_service: FestivalService,
                 storage_service: FestivalStorageService) -> None:
        self._festival_service = festival_service
        self._storage_service = storage_service

    def get_festivals(self) -> FestivalsResponse:
        return self._festival_service.fetch_festivals()

    def get_selected_festival_id(self) -> Optional[str]:
        return self._storage_service.get_selected_festival_id()

    def set_selected_festival_id(self, festival_id: str) -> None:
        self._storage_service.set_selected_festival_id(festival_id)
