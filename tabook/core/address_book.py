"""Address Book: aggregate root over the student roster and the lab catalog.

Invariants:
    - Student uniqueness and lab uniqueness hold after every public mutation
    - Coverage: every stored student's view holds exactly the catalog's labs,
      in catalog order (order parity)
    - Marks are present iff GRADED, finite and >= 0
    - Failed mutations leave the book observationally unchanged and fire no event

Design Decisions:
    - Lab propagation is explicit here (add_lab → catalog add → broadcast), never a
      side effect inside either list (ADR: no re-entrant container mutation)
    - reset_data is two-phase: validate the whole incoming snapshot, then write
    - Equality compares students AND labs: two books with equal rosters but different
      catalogs are not interchangeable (ADR: stricter than the minimum contract)
    - One private initializer (_init_lists) shared by every construction path
    - Every write path stores copies: a stored student never shares its view with
      a caller or with another stored student
"""

import logging
from collections.abc import Iterable, Sequence

from tabook.core.boundary_protocols import ReadOnlyAddressBook
from tabook.core.errors import (
    DuplicateLabError,
    DuplicateStudentError,
    LabNotFoundError,
    StudentNotFoundError,
    ViewMismatchError,
)
from tabook.core.lab import Lab
from tabook.core.lab_status import Status, validate_mark
from tabook.core.master_lab_list import MasterLabList, find_duplicate_lab
from tabook.core.observable import ChangeKind, Observable, ReadOnlyList
from tabook.core.student import Student, StudentLabView
from tabook.core.unique_student_list import UniqueStudentList, find_duplicate

logger = logging.getLogger(__name__)


def check_view(student: Student, catalog: Sequence[Lab]) -> None:
    """Raise unless the student's view mirrors the catalog with well-formed entries."""
    if not student.labs.mirrors(catalog):
        raise ViewMismatchError(
            student.name,
            [lab.number for lab in catalog],
            student.labs.lab_numbers(),
        )
    for entry in student.labs:
        validate_mark(entry.status, entry.mark, entry.lab_number)


class AddressBook(Observable):
    """Wraps all data at the address-book level."""

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None):
        super().__init__()
        self._init_lists()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    def _init_lists(self) -> None:
        self._students = UniqueStudentList()
        self._labs = MasterLabList()

    # --- List overwrite operations ------------------------------------------------

    def set_students(self, students: Iterable[Student]) -> None:
        """Replace the roster. Every view must already mirror the current catalog."""
        incoming = list(students)
        duplicate = find_duplicate(incoming)
        if duplicate is not None:
            raise DuplicateStudentError(duplicate.name)
        catalog = list(self._labs)
        for student in incoming:
            check_view(student, catalog)
        self._students.replace_all([student.copy() for student in incoming])
        self._notify(ChangeKind.STUDENTS_REPLACED, count=len(incoming))

    def set_labs(self, labs: Iterable[Lab]) -> None:
        """Replace the catalog. Only allowed when it cannot break coverage."""
        incoming = list(labs)
        duplicate = find_duplicate_lab(incoming)
        if duplicate is not None:
            raise DuplicateLabError(duplicate.number)
        for student in self._students:
            check_view(student, incoming)
        self._labs.replace_all(incoming)
        self._notify(ChangeKind.LABS_REPLACED, count=len(incoming))

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """Replace roster and catalog from a snapshot; all-or-nothing."""
        labs = list(new_data.master_lab_list())
        students = list(new_data.student_list())

        # Phase 1: validate the snapshot on its own terms
        duplicate_lab = find_duplicate_lab(labs)
        if duplicate_lab is not None:
            raise DuplicateLabError(duplicate_lab.number)
        duplicate = find_duplicate(students)
        if duplicate is not None:
            raise DuplicateStudentError(duplicate.name)
        for student in students:
            check_view(student, labs)

        # Phase 2: nothing below can fail
        copies = [student.copy() for student in students]
        self._labs.replace_all(labs)
        self._students.replace_all(copies)
        logger.debug(
            "Address book reset",
            extra={"event": ChangeKind.DATA_RESET.value},
        )
        self._notify(ChangeKind.DATA_RESET, students=len(copies), labs=len(labs))

    # --- Student-level operations -------------------------------------------------

    def has_student(self, student: Student) -> bool:
        return self._students.contains(student)

    def add_student(self, student: Student) -> None:
        """Add a student with a fresh view built from the current catalog.

        The book stores its own copy; the caller's object and view are never touched.
        """
        if self._students.contains(student):
            raise DuplicateStudentError(student.name)
        stored = student.with_labs(StudentLabView())
        stored.labs.initialize(self._labs)
        self._students.add(stored)
        logger.debug("Student added", extra={"student": student.name})
        self._notify(ChangeKind.STUDENT_ADDED, student=student.name)

    def set_student(self, target: Student, edited: Student) -> None:
        """Replace target with edited, keeping its position in the roster."""
        if not self._students.contains(target):
            raise StudentNotFoundError(target.name)
        check_view(edited, list(self._labs))
        self._students.replace(target, edited.copy())
        logger.debug("Student replaced", extra={"student": edited.name})
        self._notify(
            ChangeKind.STUDENT_REPLACED, target=target.name, student=edited.name,
        )

    def remove_student(self, key: Student) -> None:
        self._students.remove(key)
        logger.debug("Student removed", extra={"student": key.name})
        self._notify(ChangeKind.STUDENT_REMOVED, student=key.name)

    def set_lab_status(
        self, student: Student, lab: Lab, status: Status, mark: float | None = None,
    ) -> None:
        """Update one stored student's entry for one catalog lab."""
        stored = self._students.get(student)
        if not self._labs.contains(lab):
            raise LabNotFoundError(lab.number)
        index = stored.labs.index_of(lab)
        stored.labs.set_status_at(index, status, mark)
        logger.debug(
            "Lab status changed",
            extra={"student": stored.name, "lab_number": lab.number},
        )
        self._notify(
            ChangeKind.LAB_STATUS_CHANGED,
            student=stored.name, lab_number=lab.number, status=stored.labs[index].status.value,
        )

    # --- Lab-level operations -----------------------------------------------------

    def has_lab(self, lab: Lab) -> bool:
        return self._labs.contains(lab)

    def add_lab(self, lab: Lab) -> None:
        """Add a lab to the catalog and an UNSUBMITTED entry to every student."""
        self._labs.add(lab)
        self._students.broadcast_new_lab(lab)
        logger.debug("Lab added", extra={"lab_number": lab.number})
        self._notify(ChangeKind.LAB_ADDED, lab_number=lab.number)

    def remove_lab(self, lab: Lab) -> None:
        """Remove a lab from the catalog and its entry from every student."""
        self._labs.remove(lab)
        self._students.broadcast_removed_lab(lab)
        logger.debug("Lab removed", extra={"lab_number": lab.number})
        self._notify(ChangeKind.LAB_REMOVED, lab_number=lab.number)

    # --- Read accessors -----------------------------------------------------------

    def student_list(self) -> ReadOnlyList[Student]:
        return self._students.as_read_only()

    def master_lab_list(self) -> ReadOnlyList[Lab]:
        return self._labs.as_read_only()

    # --- Util ---------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{len(self._students)} students"

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._students == other._students and self._labs == other._labs

    __hash__ = None
