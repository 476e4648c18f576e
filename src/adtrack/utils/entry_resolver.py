"""Utility for resolving entry ids from user input."""

from adtrack.domain.entry_store import EntryStore
from adtrack.domain.errors import NotFoundError, ValidationError, entry_not_found

# Shortest id prefix accepted on the command line
MIN_PREFIX_LENGTH = 4


def resolve_entry_id(store: EntryStore, entry: str) -> str:
    """Resolve a full entry id or a unique id prefix to the full id.

    Args:
        store: EntryStore instance
        entry: Full id, or a prefix of at least MIN_PREFIX_LENGTH characters

    Returns:
        Full entry id

    Raises:
        NotFoundError: If no entry matches
        ValidationError: If the prefix matches more than one entry
    """
    entry = entry.strip()
    if store.get_entry(entry) is not None:
        return entry

    if len(entry) < MIN_PREFIX_LENGTH:
        raise NotFoundError(entry_not_found(entry))

    matches = [e.id for e in store.snapshot().entries if e.id.startswith(entry)]
    if not matches:
        raise NotFoundError(entry_not_found(entry))
    if len(matches) > 1:
        raise ValidationError(
            f"Entry id prefix '{entry}' is ambiguous ({len(matches)} matches)"
        )
    return matches[0]
