"""Client for the festival drink catalog."""
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import requests

from ..models import Drink, Festival, Producer

DEFAULT_TIMEOUT = 30


class BeerApiException(Exception):
    """Raised when the catalog cannot be loaded.

    ``status_code`` is the HTTP status when the server answered, else ``None``.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f'BeerApiException: {self.message}'


class BeerApiService:
    """Fetches a festival's drinks, one JSON document per beverage type.

    Each document lists ``producers``, each with its ``products``; every
    product becomes one :class:`~festival.models.Drink`.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT, max_workers: int = 4) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_workers = max_workers
        self._log = logging.getLogger('tapster.api')

    def fetch_drinks(self, festival: Festival, beverage_type: str) -> List[Drink]:
        """Fetch the drinks of one beverage type.

        Returns:
            The drinks, or ``[]`` when the festival does not publish that
            type (HTTP 404).

        Raises:
            BeerApiException: on any other non-200 status.
            requests.RequestException: on transport failure.
        """
        url = festival.beverage_url(beverage_type)
        response = self.session.get(url, timeout=self.timeout)

        if response.status_code == 200:
            # Decode explicitly: without a charset header requests falls back
            # to Latin-1 and "Rosé" comes out as "RosÃ©".
            data = json.loads(response.content.decode('utf-8'))
            return self._parse_drinks(data, festival.id)
        if response.status_code == 404:
            self._log.debug("No %s list for %s", beverage_type, festival.id)
            return []
        raise BeerApiException(
            f'Failed to fetch {beverage_type}: {response.status_code}',
            response.status_code,
        )

    def fetch_all_drinks(self, festival: Festival) -> List[Drink]:
        """Fetch every beverage type the festival offers, in parallel.

        Results are concatenated in the order of
        ``festival.available_beverage_types``.  A failing type is logged and
        skipped; only when nothing at all could be loaded is the failure
        raised.

        Raises:
            BeerApiException: if no drinks were loaded and at least one
                beverage type failed.
        """
        types = list(festival.available_beverage_types)
        errors: Dict[str, str] = {}
        all_drinks: List[Drink] = []

        if not types:
            return all_drinks

        workers = max(1, min(self.max_workers, len(types)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='tapster_api') as pool:
            futures = [(t, pool.submit(self.fetch_drinks, festival, t)) for t in types]
            for beverage_type, future in futures:
                try:
                    all_drinks.extend(future.result())
                except (BeerApiException, requests.RequestException,
                        ValueError, KeyError, TypeError) as exc:
                    self._log.warning("Error fetching %s for %s: %s",
                                      beverage_type, festival.id, exc)
                    errors[beverage_type] = str(exc)

        if not all_drinks and errors:
            details = '\n'.join(f'{t}: {msg}' for t, msg in errors.items())
            raise BeerApiException(
                'Failed to load any drinks. This may be a network or CORS issue.'
                f'\n\nDetails:\n{details}'
            )
        return all_drinks

    @staticmethod
    def _parse_drinks(data: Dict[str, Any], festival_id: str) -> List[Drink]:
        drinks: List[Drink] = []
        for producer_json in data.get('producers') or []:
            producer = Producer.from_json(producer_json)
            for product in producer.products:
                drinks.append(Drink(product=product, producer=producer,
                                    festival_id=festival_id))
        return drinks

    def close(self) -> None:
        self.session.close()
