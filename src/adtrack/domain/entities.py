"""Domain model entities for adtrack.

These are pure data classes representing business concepts, independent of
the storage schema. Enumerations carry stable internal identifiers; display
text for them lives in ``adtrack.domain.labels``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Project(Enum):
    """Projects whose ad spend is tracked."""

    AZZA = "azza"
    BRONZE = "bronze"
    MARAYA = "maraya"
    SABORIO = "saborio"


class Platform(Enum):
    """Advertising platforms.

    Declaration order is the canonical platform order.
    """

    META = "meta"
    SNAPCHAT = "snapchat"
    TIKTOK = "tiktok"
    GOOGLE = "google"


class DateRangeOption(Enum):
    """Named, calendar-relative date windows."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_7_DAYS = "last-7-days"
    THIS_MONTH = "this-month"
    LAST_30_DAYS = "last-30-days"
    LAST_3_MONTHS = "last-3-months"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DailyEntry:
    """Spend and purchases for one project, platform and day."""

    id: str
    date: str
    project: Project
    platform: Platform
    spend: float
    purchases: float

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted layout of the entry."""
        return {
            "id": self.id,
            "date": self.date,
            "project": self.project.value,
            "platform": self.platform.value,
            "spend": self.spend,
            "purchases": self.purchases,
        }


@dataclass(frozen=True)
class DateFilterState:
    """View-local date range selection.

    The custom dates are only meaningful when ``option`` is CUSTOM.
    """

    option: DateRangeOption = DateRangeOption.TODAY
    custom_start_date: Optional[str] = None
    custom_end_date: Optional[str] = None


@dataclass(frozen=True)
class AggregatedStats:
    """Derived statistics over a set of entries.

    ``best_platform`` and ``highest_cost_platform`` are None when no platform
    qualifies.
    """

    total_spend: float
    total_purchases: float
    cpr: float
    best_platform: Optional[Platform]
    highest_cost_platform: Optional[Platform]

    @classmethod
    def empty(cls) -> "AggregatedStats":
        return cls(
            total_spend=0.0,
            total_purchases=0.0,
            cpr=0.0,
            best_platform=None,
            highest_cost_platform=None,
        )


@dataclass(frozen=True)
class PlatformStats:
    """Spend and purchases accumulated for one platform."""

    platform: Platform
    spend: float
    purchases: float
    cpr: float


@dataclass(frozen=True)
class DailyPoint:
    """Spend and purchases accumulated for one day."""

    date: str
    spend: float
    purchases: float
    cpr: float


@dataclass(frozen=True)
class PlatformShare:
    """A platform's portion of total spend."""

    platform: Platform
    spend: float
    share: float


@dataclass(frozen=True)
class EntrySnapshot:
    """Immutable, versioned copy of the entry collection."""

    version: int
    entries: tuple[DailyEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)
