"""Canonical group-by utility.

Every grouping in adtrack goes through ``group_by`` so that group iteration
order (and therefore tie-breaking) is the order of first occurrence.
"""

from typing import Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by key, keeping keys in order of first occurrence.

    Args:
        items: Items to group
        key: Function returning the group key for an item

    Returns:
        Dict mapping each key to the items that produced it, in input order
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
