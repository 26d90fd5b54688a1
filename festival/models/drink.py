"""Catalog records: producers, their products, and festival drinks."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class AvailabilityStatus(str, Enum):
    """Availability bucket derived from a product's free-text status."""

    PLENTY = 'plenty'
    LOW = 'low'
    OUT = 'out'
    NOT_YET_AVAILABLE = 'not_yet_available'


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _parse_abv(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def _parse_allergens(raw: Any) -> Dict[str, int]:
    """Normalise allergen flags to ``{name: 0|1}``.

    The feed is inconsistent: values arrive as ints, bools or floats.
    Anything else is dropped.
    """
    allergens: Dict[str, int] = {}
    if not isinstance(raw, dict):
        return allergens
    for key, value in raw.items():
        if isinstance(value, bool):
            allergens[key] = 1 if value else 0
        elif isinstance(value, (int, float)):
            allergens[key] = int(value)
    return allergens


def _parse_bar(value: Any) -> Optional[str]:
    # bool must be checked first: it is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None


@dataclass
class Product:
    """A beverage (beer, cider, mead, ...) as listed by its producer."""

    id: str
    name: str
    category: str = 'beer'
    style: Optional[str] = None
    dispense: str = 'cask'
    abv: float = 0.0
    notes: Optional[str] = None
    status_text: Optional[str] = None
    bar: Optional[str] = None
    allergens: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Product':
        style = data.get('style')
        notes = data.get('notes')
        status_text = data.get('status_text')
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            category=str(data.get('category') or 'beer'),
            style=str(style) if style is not None else None,
            dispense=str(data.get('dispense') or 'cask'),
            abv=_parse_abv(data.get('abv')),
            notes=str(notes) if notes is not None else None,
            status_text=str(status_text) if status_text is not None else None,
            bar=_parse_bar(data.get('bar')),
            allergens=_parse_allergens(data.get('allergens')),
        )

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'dispense': self.dispense,
            'abv': str(self.abv),
            'allergens': dict(self.allergens),
        }
        if self.style is not None:
            data['style'] = self.style
        if self.notes is not None:
            data['notes'] = self.notes
        if self.status_text is not None:
            data['status_text'] = self.status_text
        if self.bar is not None:
            data['bar'] = self.bar
        return data

    @property
    def availability_status(self) -> Optional[AvailabilityStatus]:
        """Bucket ``status_text`` into an :class:`AvailabilityStatus`.

        Returns ``None`` when the feed carries no status at all; unknown
        wording is treated as available.
        """
        if self.status_text is None:
            return None
        lower = self.status_text.lower()
        if 'not yet' in lower:
            return AvailabilityStatus.NOT_YET_AVAILABLE
        if 'plenty' in lower or 'arrived' in lower or 'available' in lower:
            return AvailabilityStatus.PLENTY
        if 'remaining' in lower or 'nearly' in lower or 'low' in lower:
            return AvailabilityStatus.LOW
        if 'out' in lower or 'sold' in lower:
            return AvailabilityStatus.OUT
        return AvailabilityStatus.PLENTY

    @property
    def allergen_text(self) -> Optional[str]:
        """Comma-separated, capitalised list of flagged allergens, or ``None``."""
        names = [
            key[0].upper() + key[1:]
            for key, value in self.allergens.items()
            if value == 1 and key
        ]
        if not names:
            return None
        return ', '.join(names)


@dataclass
class Producer:
    """A brewery, cidery or meadery and the products it brought."""

    id: str
    name: str
    location: str = ''
    year_founded: Optional[int] = None
    notes: Optional[str] = None
    products: List[Product] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'Producer':
        notes = data.get('notes')
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            location=str(data.get('location') or ''),
            year_founded=_parse_int(data.get('year_founded')),
            notes=str(notes) if notes is not None else None,
            products=[Product.from_json(p) for p in data.get('products') or []],
        )

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'location': self.location,
            'products': [p.to_json() for p in self.products],
        }
        if self.year_founded is not None:
            data['year_founded'] = self.year_founded
        if self.notes is not None:
            data['notes'] = self.notes
        return data


@dataclass
class Drink:
    """A product served at a specific festival, plus this user's annotations.

    ``is_favorite``, ``rating`` and ``is_tasted`` are filled in by
    :class:`~festival.repositories.api_drink_repository.ApiDrinkRepository`
    after the catalog fetch.
    """

    product: Product
    producer: Producer
    festival_id: str
    is_favorite: bool = False
    rating: Optional[int] = None
    is_tasted: bool = False

    @property
    def id(self) -> str:
        return self.product.id

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def brewery_name(self) -> str:
        return self.producer.name

    @property
    def brewery_location(self) -> str:
        return self.producer.location

    @property
    def category(self) -> str:
        return self.product.category

    @property
    def style(self) -> Optional[str]:
        return self.product.style

    @property
    def dispense(self) -> str:
        return self.product.dispense

    @property
    def abv(self) -> float:
        return self.product.abv

    @property
    def notes(self) -> Optional[str]:
        return self.product.notes

    @property
    def status_text(self) -> Optional[str]:
        return self.product.status_text

    @property
    def bar(self) -> Optional[str]:
        return self.product.bar

    @property
    def allergens(self) -> Dict[str, int]:
        return self.product.allergens

    @property
    def availability_status(self) -> Optional[AvailabilityStatus]:
        return self.product.availability_status

    @property
    def allergen_text(self) -> Optional[str]:
        return self.product.allergen_text
