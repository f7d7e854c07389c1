"""Lab Status: per-student, per-lab record (status + optional mark).

Invariants:
    - mark is not None iff status is GRADED
    - a mark is a finite, non-negative real number (NaN and infinities rejected)
    - A failed transition leaves the record exactly as it was

Design Decisions:
    - Refers to its lab by number, never by Lab object (ADR: no lifetime entanglement with catalog)
    - Any-to-any transitions: which ones users may trigger is collaborator policy
"""

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real

from tabook.core.errors import ErrorContext, InvalidMarkError, InvalidStatusError
from tabook.core.lab import Lab


class Status(str, Enum):
    """Submission state of one lab for one student."""
    UNSUBMITTED = "unsubmitted"
    SUBMITTED = "submitted"
    GRADED = "graded"


def parse_status(value: object, lab_number: int | None = None) -> Status:
    """Coerce a Status or its value string; anything else is InvalidStatusError."""
    if isinstance(value, Status):
        return value
    try:
        return Status(value)
    except (ValueError, TypeError):
        raise InvalidStatusError(value, ErrorContext(lab_number=lab_number)) from None


def validate_mark(status: Status, mark: float | None, lab_number: int | None = None) -> float | None:
    """Check a (status, mark) pair. Returns the mark as float, or None."""
    status = parse_status(status, lab_number)
    ctx = ErrorContext(lab_number=lab_number)
    if status is not Status.GRADED:
        if mark is not None:
            raise InvalidMarkError(
                f"Mark is only allowed for GRADED labs, status is {status.name}", ctx,
            )
        return None
    if mark is None:
        raise InvalidMarkError("GRADED lab requires a mark", ctx)
    if isinstance(mark, bool) or not isinstance(mark, Real):
        raise InvalidMarkError(f"Mark must be a number, got {mark!r}", ctx)
    value = float(mark)
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidMarkError(f"Mark must be a finite number >= 0, got {mark!r}", ctx)
    return value


@dataclass
class LabStatus:
    """Status of a single lab for a single student."""

    lab_number: int
    status: Status = Status.UNSUBMITTED
    mark: float | None = None

    def __post_init__(self) -> None:
        # Reuse Lab's positive-int check
        Lab(self.lab_number)
        self.status = parse_status(self.status, self.lab_number)
        self.mark = validate_mark(self.status, self.mark, self.lab_number)

    @classmethod
    def unsubmitted(cls, lab: Lab) -> "LabStatus":
        return cls(lab.number)

    @property
    def is_graded(self) -> bool:
        return self.status is Status.GRADED

    def apply(self, status: Status, mark: float | None = None) -> None:
        """Move to any state. Validates before writing."""
        status = parse_status(status, self.lab_number)
        value = validate_mark(status, mark, self.lab_number)
        self.status = status
        self.mark = value

    def mark_unsubmitted(self) -> None:
        self.apply(Status.UNSUBMITTED)

    def mark_submitted(self) -> None:
        self.apply(Status.SUBMITTED)

    def mark_graded(self, score: float) -> None:
        self.apply(Status.GRADED, score)

    def copy(self) -> "LabStatus":
        return LabStatus(self.lab_number, self.status, self.mark)

    def __str__(self) -> str:
        if self.mark is None:
            return f"Lab {self.lab_number}: {self.status.name}"
        return f"Lab {self.lab_number}: {self.status.name} ({self.mark:g})"
