"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the storage schema can change
without touching the domain entities.
"""

from adtrack.domain import entities as domain
from adtrack.database.models import Entry as ORMEntry


def entry_to_domain(orm_entry: ORMEntry) -> domain.DailyEntry:
    """Convert SQLAlchemy Entry model to domain DailyEntry entity."""
    return domain.DailyEntry(
        id=orm_entry.entry_id,
        date=orm_entry.date,
        project=domain.Project(orm_entry.project),
        platform=domain.Platform(orm_entry.platform),
        spend=orm_entry.spend,
        purchases=orm_entry.purchases,
    )


def entry_to_orm(entry: domain.DailyEntry) -> ORMEntry:
    """Convert domain DailyEntry entity to a new SQLAlchemy Entry model."""
    return ORMEntry(
        entry_id=entry.id,
        date=entry.date,
        project=entry.project.value,
        platform=entry.platform.value,
        spend=entry.spend,
        purchases=entry.purchases,
    )


def apply_entry(orm_entry: ORMEntry, entry: domain.DailyEntry) -> None:
    """Copy every field except the id from a domain entry onto a model."""
    orm_entry.date = entry.date
    orm_entry.project = entry.project.value
    orm_entry.platform = entry.platform.value
    orm_entry.spend = entry.spend
    orm_entry.purchases = entry.purchases
