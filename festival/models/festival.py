"""Festival records and date-based ordering helpers."""
import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

_MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
           'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

_END_OF_DAY = datetime.time(23, 59, 59)


class FestivalStatus(str, Enum):
    """Where a festival sits relative to *now*."""

    LIVE = 'live'
    UPCOMING = 'upcoming'
    MOST_RECENT = 'most_recent'
    PAST = 'past'


def _parse_date(value: Any) -> Optional[datetime.date]:
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        return datetime.datetime.fromisoformat(value.replace('Z', '+00:00')).date()
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass
class Festival:
    """A dated event with its own drink catalog and user-state namespace.

    Each beverage type is published as a separate JSON document under
    ``data_base_url`` (see :meth:`beverage_url`).
    """

    id: str
    name: str
    data_base_url: str
    hashtag: Optional[str] = None
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    location: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    hours: Optional[Dict[str, str]] = None
    available_beverage_types: List[str] = field(default_factory=lambda: ['beer'])
    is_active: bool = False

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Festival':
        latitude = data.get('latitude')
        longitude = data.get('longitude')
        hours = data.get('hours')
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            data_base_url=str(data['data_base_url']),
            hashtag=data.get('hashtag'),
            start_date=_parse_date(data.get('start_date')),
            end_date=_parse_date(data.get('end_date')),
            location=data.get('location'),
            address=data.get('address'),
            latitude=float(latitude) if latitude is not None else None,
            longitude=float(longitude) if longitude is not None else None,
            description=data.get('description'),
            website_url=data.get('website_url'),
            hours={str(k): str(v) for k, v in hours.items()} if hours is not None else None,
            available_beverage_types=list(data.get('available_beverage_types') or ['beer']),
            is_active=bool(data.get('is_active', False)),
        )

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'id': self.id, 'name': self.name}
        optional = {
            'hashtag': self.hashtag,
            'start_date': self.start_date.isoformat() if self.start_date else None,
            'end_date': self.end_date.isoformat() if self.end_date else None,
            'location': self.location,
            'address': self.address,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'description': self.description,
            'website_url': self.website_url,
            'hours': self.hours,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        data['available_beverage_types'] = list(self.available_beverage_types)
        data['data_base_url'] = self.data_base_url
        data['is_active'] = self.is_active
        return data

    def beverage_url(self, beverage_type: str) -> str:
        """Return the catalog URL for one beverage type."""
        return f"{self.data_base_url}/{beverage_type}.json"

    @property
    def formatted_dates(self) -> str:
        """Human-readable date range, e.g. ``May 19-24, 2025``."""
        if self.start_date is None:
            return ''
        start = self.start_date
        end = self.end_date
        if end is None:
            return f"{_MONTHS[start.month - 1]} {start.day}, {start.year}"
        if start.month == end.month and start.year == end.year:
            return f"{_MONTHS[start.month - 1]} {start.day}-{end.day}, {start.year}"
        return (f"{_MONTHS[start.month - 1]} {start.day} - "
                f"{_MONTHS[end.month - 1]} {end.day}, {start.year}")

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def is_live(self, now: Optional[datetime.datetime] = None) -> bool:
        """``True`` between the start of the first day and the end of the last."""
        if self.start_date is None:
            return False
        current = now or datetime.datetime.now()
        start = datetime.datetime.combine(self.start_date, datetime.time.min)
        end = datetime.datetime.combine(self.end_date or self.start_date, _END_OF_DAY)
        return start <= current <= end

    def is_upcoming(self, now: Optional[datetime.datetime] = None) -> bool:
        if self.start_date is None:
            return False
        current = now or datetime.datetime.now()
        return current < datetime.datetime.combine(self.start_date, datetime.time.min)

    def has_ended(self, now: Optional[datetime.datetime] = None) -> bool:
        if self.start_date is None:
            return False
        current = now or datetime.datetime.now()
        end = datetime.datetime.combine(self.end_date or self.start_date, _END_OF_DAY)
        return current > end

    def basic_status(self, now: Optional[datetime.datetime] = None) -> FestivalStatus:
        """LIVE, UPCOMING or PAST. Use :func:`status_in_context` for MOST_RECENT."""
        if self.is_live(now):
            return FestivalStatus.LIVE
        if self.is_upcoming(now):
            return FestivalStatus.UPCOMING
        return FestivalStatus.PAST


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

_STATUS_RANK = {
    FestivalStatus.LIVE: 0,
    FestivalStatus.UPCOMING: 1,
    FestivalStatus.PAST: 2,
}


def _sort_key(festival: Festival, now: datetime.datetime):
    status = festival.basic_status(now)
    rank = _STATUS_RANK[status]
    if status == FestivalStatus.UPCOMING:
        # soonest first, undated last
        start = festival.start_date
        return (rank, start is None, start.toordinal() if start else 0)
    if status == FestivalStatus.PAST:
        # most recent first, undated last
        end = festival.end_date or festival.start_date
        return (rank, end is None, -end.toordinal() if end else 0)
    return (rank, False, 0)


def sort_by_date(festivals: List[Festival],
                 now: Optional[datetime.datetime] = None) -> List[Festival]:
    """Return a new list: live first, then upcoming, then past.

    Upcoming festivals are ordered soonest first and past festivals most
    recent first; festivals without dates go last within their group.
    The sort is stable, so ties keep their input order.
    """
    current = now or datetime.datetime.now()
    return sorted(festivals, key=lambda f: _sort_key(f, current))


def status_in_context(festival: Festival, sorted_festivals: List[Festival],
                      now: Optional[datetime.datetime] = None) -> FestivalStatus:
    """Like :meth:`Festival.basic_status`, but the first past festival in
    *sorted_festivals* is reported as MOST_RECENT."""
    current = now or datetime.datetime.now()
    status = festival.basic_status(current)
    if status != FestivalStatus.PAST:
        return status
    for candidate in sorted_festivals:
        if candidate.basic_status(current) == FestivalStatus.PAST:
            if candidate.id == festival.id:
                return FestivalStatus.MOST_RECENT
            break
    return FestivalStatus.PAST


# ---------------------------------------------------------------------------
# Built-in festivals, used when nothing has been loaded or selected yet
# ---------------------------------------------------------------------------

_DATA_PROXY = 'https://cbf-data-proxy.richard-alcock.workers.dev'

DEFAULT_FESTIVAL = Festival(
    id='cbf2025',
    name='Cambridge Beer Festival 2025',
    hashtag='#cbf2025',
    start_date=datetime.date(2025, 5, 19),
    end_date=datetime.date(2025, 5, 24),
    location='Jesus Green, Cambridge',
    description='The largest volunteer-run beer festival in the UK',
    website_url='https://www.cambridgebeerfestival.com',
    available_beverage_types=['beer', 'international-beer', 'cider', 'perry',
                              'mead', 'wine', 'low-no'],
    data_base_url=f'{_DATA_PROXY}/cbf2025',
    is_active=True,
)

DEFAULT_FESTIVALS = [
    DEFAULT_FESTIVAL,
    Festival(
        id='cbfw2025',
        name='Cambridge Winter Beer Festival 2025',
        hashtag='#cbfw2025',
        start_date=datetime.date(2025, 12, 10),
        end_date=datetime.date(2025, 12, 13),
        location='Cambridge Corn Exchange, Cambridge',
        available_beverage_types=['beer', 'international-beer', 'cider',
                                  'perry', 'low-no'],
        data_base_url=f'{_DATA_PROXY}/cbfw2025',
    ),
    Festival(
        id='cbf2024',
        name='Cambridge Beer Festival 2024',
        hashtag='#cbf2024',
        start_date=datetime.date(2024, 5, 20),
        end_date=datetime.date(2024, 5, 25),
        location='Jesus Green, Cambridge',
        description='The 50th Anniversary Cambridge Beer Festival',
        website_url='https://www.cambridgebeerfestival.com',
        available_beverage_types=['beer', 'international-beer', 'cider',
                                  'perry', 'mead', 'wine', 'low-no'],
        data_base_url=f'{_DATA_PROXY}/cbf2024',
    ),
]
