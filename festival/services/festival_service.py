"""Client for the festival registry."""
import datetime
import logging
from typing import Any, Dict, List, Optional

import requests

from ..models import Festival

DEFAULT_FESTIVALS_URL = 'https://cbf-data-proxy.richard-alcock.workers.dev/festivals.json'
DEFAULT_TIMEOUT = 30


class FestivalServiceException(Exception):
    """Raised when the festival registry answers with a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f'FestivalServiceException: {self.message}'


def _parse_timestamp(value: Any) -> Optional[datetime.datetime]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None


class FestivalsResponse:
    """The registry document: every known festival plus the default pick.

    Schema::

        {
            "festivals":           [<festival>, ...],
            "default_festival_id": "<festival_id>",
            "version":             "<str>",          (optional)
            "last_updated":        "<ISO-8601>"      (optional)
        }
    """

    def __init__(self, festivals: List[Festival], default_festival_id: str,
                 version: str = '1.0.0',
                 last_updated: Optional[datetime.datetime] = None) -> None:
        self.festivals = festivals
        self.default_festival_id = default_festival_id
        self.version = version
        self.last_updated = last_updated

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'FestivalsResponse':
        return cls(
            festivals=[Festival.from_json(f) for f in data['festivals']],
            default_festival_id=str(data['default_festival_id']),
            version=str(data.get('version') or '1.0.0'),
            last_updated=_parse_timestamp(data.get('last_updated')),
        )

    @property
    def default_festival(self) -> Optional[Festival]:
        """The festival named by ``default_festival_id``, else the first, else ``None``."""
        if not self.festivals:
            return None
        for festival in self.festivals:
            if festival.id == self.default_festival_id:
                return festival
        return self.festivals[0]

    @property
    def active_festivals(self) -> List[Festival]:
        return [f for f in self.festivals if f.is_active]


class FestivalService:
    """Fetches festival metadata from the registry URL."""

    def __init__(self, festivals_url: str = DEFAULT_FESTIVALS_URL,
                 session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT) -> None:
        self.festivals_url = festivals_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self._log = logging.getLogger('tapster.festivals')

    def fetch_festivals(self) -> FestivalsResponse:
        """Fetch and parse the festival registry.

        Raises:
            FestivalServiceException: on a non-200 status.
            requests.RequestException: on transport failure.
        """
        response = self.session.get(self.festivals_url, timeout=self.timeout)
        if response.status_code != 200:
            raise FestivalServiceException(
                f'Failed to fetch festivals: {response.status_code}',
                response.status_code,
            )
        result = FestivalsResponse.from_json(response.json())
        self._log.debug("Loaded %d festivals (version %s)",
                        len(result.festivals), result.version)
        return result

    def close(self) -> None:
        self.session.close()
