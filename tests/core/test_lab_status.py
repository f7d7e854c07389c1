"""Lab Status: tests for the per-student status state machine.

Tests cover:
    - Default UNSUBMITTED with no mark
    - Any-to-any transitions, mark cleared when leaving GRADED
    - InvalidMarkError for negative, NaN, infinite, non-numeric scores
    - Failed transitions leave the record unchanged
    - Constructor rejects inconsistent status/mark pairs
    - Unknown status values raise InvalidStatusError; value strings are accepted
"""

import math

import pytest

from tabook.core.errors import InvalidLabNumberError, InvalidMarkError, InvalidStatusError
from tabook.core.lab import Lab
from tabook.core.lab_status import LabStatus, Status


# ─── Construction ────────────────────────────────────────────────

def test_unsubmitted_factory_uses_lab_number():
    entry = LabStatus.unsubmitted(Lab(4))
    assert entry.lab_number == 4
    assert entry.status is Status.UNSUBMITTED
    assert entry.mark is None


def test_constructor_rejects_mark_without_graded():
    with pytest.raises(InvalidMarkError):
        LabStatus(1, Status.SUBMITTED, 5.0)


def test_constructor_rejects_graded_without_mark():
    with pytest.raises(InvalidMarkError):
        LabStatus(1, Status.GRADED)


def test_constructor_rejects_bad_lab_number():
    with pytest.raises(InvalidLabNumberError):
        LabStatus(0)


def test_constructor_coerces_int_mark_to_float():
    entry = LabStatus(1, Status.GRADED, 7)
    assert entry.mark == 7.0
    assert isinstance(entry.mark, float)


# ─── Transitions ─────────────────────────────────────────────────

def test_mark_submitted():
    entry = LabStatus(1)
    entry.mark_submitted()
    assert entry.status is Status.SUBMITTED
    assert entry.mark is None


def test_mark_graded_sets_mark():
    entry = LabStatus(1)
    entry.mark_graded(8.5)
    assert entry.status is Status.GRADED
    assert entry.mark == 8.5
    assert entry.is_graded


def test_mark_graded_accepts_zero():
    entry = LabStatus(1)
    entry.mark_graded(0)
    assert entry.mark == 0.0


def test_leaving_graded_clears_mark():
    entry = LabStatus(1, Status.GRADED, 9.0)
    entry.mark_unsubmitted()
    assert entry.status is Status.UNSUBMITTED
    assert entry.mark is None


def test_regrade_overwrites_mark():
    entry = LabStatus(1, Status.GRADED, 3.0)
    entry.mark_graded(4.0)
    assert entry.mark == 4.0


@pytest.mark.parametrize("bad", [-0.5, math.nan, math.inf, -math.inf, "8", True])
def test_mark_graded_rejects_out_of_domain(bad):
    entry = LabStatus(1, Status.SUBMITTED)
    with pytest.raises(InvalidMarkError) as exc_info:
        entry.mark_graded(bad)
    assert exc_info.value.code == "INVALID_MARK"
    assert exc_info.value.context.lab_number == 1
    assert entry.status is Status.SUBMITTED
    assert entry.mark is None


def test_apply_rejects_mark_for_submitted_and_keeps_state():
    entry = LabStatus(2, Status.GRADED, 6.0)
    with pytest.raises(InvalidMarkError):
        entry.apply(Status.SUBMITTED, 6.0)
    assert entry == LabStatus(2, Status.GRADED, 6.0)


@pytest.mark.parametrize("status", ["GRADED", "done", None])
def test_constructor_rejects_unknown_status(status):
    with pytest.raises(InvalidStatusError) as excinfo:
        LabStatus(4, status)
    assert excinfo.value.context.lab_number == 4


def test_apply_rejects_unknown_status_and_keeps_state():
    entry = LabStatus(2, Status.SUBMITTED)
    with pytest.raises(InvalidStatusError):
        entry.apply("finished")
    assert entry == LabStatus(2, Status.SUBMITTED)


def test_status_value_string_is_coerced():
    entry = LabStatus(1, "graded", 7)
    assert entry.status is Status.GRADED
    entry.apply("submitted")
    assert entry.status is Status.SUBMITTED
    assert entry.mark is None


def test_copy_is_independent():
    entry = LabStatus(1, Status.GRADED, 5.0)
    clone = entry.copy()
    clone.mark_unsubmitted()
    assert entry.mark == 5.0


def test_str_shows_mark_only_when_graded():
    assert str(LabStatus(1)) == "Lab 1: UNSUBMITTED"
    assert str(LabStatus(1, Status.GRADED, 8.5)) == "Lab 1: GRADED (8.5)"
