"""Master Lab List: tests for the lab catalog.

Tests cover:
    - add / contains / remove with DuplicateLabError and LabNotFoundError
    - replace in place, replace_all atomicity
    - numbers() and the live read-only view
"""

import pytest

from tabook.core.errors import DuplicateLabError, LabNotFoundError
from tabook.core.lab import Lab
from tabook.core.master_lab_list import MasterLabList, find_duplicate_lab


def _catalog(*numbers: int) -> MasterLabList:
    catalog = MasterLabList()
    for n in numbers:
        catalog.add(Lab(n))
    return catalog


def test_add_keeps_insertion_order():
    assert _catalog(3, 1, 2).numbers() == [3, 1, 2]


def test_add_duplicate_rejected():
    catalog = _catalog(1)
    with pytest.raises(DuplicateLabError) as exc_info:
        catalog.add(Lab(1))
    assert exc_info.value.code == "DUPLICATE_LAB"
    assert exc_info.value.context.lab_number == 1
    assert catalog.numbers() == [1]


def test_contains():
    catalog = _catalog(1)
    assert catalog.contains(Lab(1))
    assert Lab(2) not in catalog


def test_remove():
    catalog = _catalog(1, 2)
    catalog.remove(Lab(1))
    assert catalog.numbers() == [2]


def test_remove_missing_raises():
    with pytest.raises(LabNotFoundError) as exc_info:
        _catalog(1).remove(Lab(2))
    assert exc_info.value.code == "LAB_NOT_FOUND"


def test_replace_in_place():
    catalog = _catalog(1, 2, 3)
    catalog.replace(Lab(2), Lab(20))
    assert catalog.numbers() == [1, 20, 3]


def test_replace_with_itself_is_allowed():
    catalog = _catalog(1)
    catalog.replace(Lab(1), Lab(1))
    assert catalog.numbers() == [1]


def test_replace_missing_target_raises():
    with pytest.raises(LabNotFoundError):
        _catalog(1).replace(Lab(2), Lab(3))


def test_replace_onto_existing_number_raises():
    catalog = _catalog(1, 2)
    with pytest.raises(DuplicateLabError):
        catalog.replace(Lab(1), Lab(2))
    assert catalog.numbers() == [1, 2]


def test_replace_all_rejects_duplicates_atomically():
    catalog = _catalog(1)
    with pytest.raises(DuplicateLabError):
        catalog.replace_all([Lab(2), Lab(2)])
    assert catalog.numbers() == [1]


def test_read_only_view_tracks_mutations():
    catalog = _catalog(1)
    view = catalog.as_read_only()
    catalog.add(Lab(2))
    catalog.replace_all([Lab(5)])
    assert list(view) == [Lab(5)]


def test_find_duplicate_lab():
    assert find_duplicate_lab([Lab(1), Lab(2)]) is None
    assert find_duplicate_lab([Lab(1), Lab(2), Lab(1)]) == Lab(1)
