"""Tests for resolving entry ids from user input."""

import pytest

from adtrack.domain.errors import NotFoundError, ValidationError
from adtrack.utils.entry_resolver import resolve_entry_id


@pytest.fixture
def populated_store(entry_store, make_entry):
    entry_store.replace_all(
        [
            make_entry(id="abcd1111"),
            make_entry(id="abcd2222"),
            make_entry(id="ef01aaaa"),
        ]
    )
    return entry_store


def test_exact_id(populated_store):
    assert resolve_entry_id(populated_store, "abcd1111") == "abcd1111"


def test_unique_prefix(populated_store):
    assert resolve_entry_id(populated_store, "ef01") == "ef01aaaa"
    assert resolve_entry_id(populated_store, " abcd2 ") == "abcd2222"


def test_ambiguous_prefix(populated_store):
    with pytest.raises(ValidationError, match="ambiguous"):
        resolve_entry_id(populated_store, "abcd")


def test_short_prefix_is_not_expanded(populated_store):
    with pytest.raises(NotFoundError):
        resolve_entry_id(populated_store, "ef0")


def test_unknown_id(populated_store):
    with pytest.raises(NotFoundError):
        resolve_entry_id(populated_store, "zzzz9999")
