"""Festival-log entries: drinks the user wants to try or has tasted."""
import datetime
from dataclasses import dataclass, field, replace as _dataclass_replace
from enum import Enum
from typing import Any, Dict, List, Optional


class FavoriteStatus(str, Enum):
    WANT_TO_TRY = 'want_to_try'
    TASTED = 'tasted'

    @classmethod
    def from_string(cls, value: Optional[str]) -> 'FavoriteStatus':
        """Parse a stored status; unknown or missing values mean WANT_TO_TRY."""
        for status in cls:
            if status.value == value:
                return status
        return cls.WANT_TO_TRY


@dataclass(eq=False)
class FavoriteItem:
    """One drink in the user's festival log.

    ``tries`` holds one timestamp per tasting and is empty while the drink is
    still on the want-to-try list.  Two items compare equal when they track
    the same drink ``id``, whatever their state.

    Stored schema::

        {
            "id":        "<drink_id>",
            "status":    "want_to_try" | "tasted",
            "tries":     ["<ISO-8601>", ...],
            "notes":     "<str>",            (optional)
            "createdAt": "<ISO-8601>",
            "updatedAt": "<ISO-8601>"
        }
    """

    id: str
    status: FavoriteStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime
    tries: List[datetime.datetime] = field(default_factory=list)
    notes: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'FavoriteItem':
        return cls(
            id=str(data['id']),
            status=FavoriteStatus.from_string(data.get('status')),
            tries=[datetime.datetime.fromisoformat(t) for t in data.get('tries') or []],
            notes=data.get('notes'),
            created_at=datetime.datetime.fromisoformat(data['createdAt']),
            updated_at=datetime.datetime.fromisoformat(data['updatedAt']),
        )

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'id': self.id,
            'status': self.status.value,
            'tries': [t.isoformat() for t in self.tries],
            'createdAt': self.created_at.isoformat(),
            'updatedAt': self.updated_at.isoformat(),
        }
        if self.notes is not None:
            data['notes'] = self.notes
        return data

    def replace(self, **changes) -> 'FavoriteItem':
        """Return a copy with *changes* applied (``notes=None`` clears notes)."""
        return _dataclass_replace(self, **changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FavoriteItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
