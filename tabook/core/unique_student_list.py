"""Unique Student List: ordered roster with an identity-uniqueness invariant.

Invariants:
    - No two students satisfy is_same_student (exact name match)
    - Iteration order is insertion order; replace() keeps position
    - Every failed mutation leaves the list unchanged (validate, then write)

Design Decisions:
    - broadcast_new_lab lives here but is only called by AddressBook: propagation
      stays explicit in the aggregate root (ADR: no container triggers another)
    - as_read_only() hands out a live ReadOnlyList, never the backing list
"""

from collections.abc import Iterable, Iterator

from tabook.core.errors import DuplicateStudentError, StudentNotFoundError
from tabook.core.lab import Lab
from tabook.core.observable import ReadOnlyList
from tabook.core.student import Student


def find_duplicate(students: Iterable[Student]) -> Student | None:
    """First student whose name was already seen, or None."""
    seen: set[str] = set()
    for student in students:
        if student.name in seen:
            return student
        seen.add(student.name)
    return None


class UniqueStudentList:
    """Ordered students, unique by identity."""

    def __init__(self) -> None:
        self._students: list[Student] = []
        self._view: ReadOnlyList[Student] = ReadOnlyList(self._students)

    def _index_of(self, student: Student) -> int:
        for i, existing in enumerate(self._students):
            if existing.is_same_student(student):
                return i
        raise StudentNotFoundError(student.name)

    def contains(self, student: Student) -> bool:
        return any(existing.is_same_student(student) for existing in self._students)

    __contains__ = contains

    def get(self, student: Student) -> Student:
        """Stored student with the same identity."""
        return self._students[self._index_of(student)]

    def add(self, student: Student) -> None:
        if self.contains(student):
            raise DuplicateStudentError(student.name)
        self._students.append(student)

    def remove(self, student: Student) -> None:
        del self._students[self._index_of(student)]

    def replace(self, target: Student, replacement: Student) -> None:
        """Replace target in place. Renaming onto another student's identity fails."""
        index = self._index_of(target)
        stored = self._students[index]
        if not stored.is_same_student(replacement) and self.contains(replacement):
            raise DuplicateStudentError(replacement.name)
        self._students[index] = replacement

    def replace_all(self, students: Iterable[Student]) -> None:
        incoming = list(students)
        duplicate = find_duplicate(incoming)
        if duplicate is not None:
            raise DuplicateStudentError(duplicate.name)
        # Slice assignment keeps the ReadOnlyList bound to the same list object
        self._students[:] = incoming

    def broadcast_new_lab(self, lab: Lab) -> None:
        for student in self._students:
            student.labs.append_for_new_lab(lab)

    def broadcast_removed_lab(self, lab: Lab) -> None:
        for student in self._students:
            student.labs.remove_for_lab(lab)

    def as_read_only(self) -> ReadOnlyList[Student]:
        return self._view

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueStudentList):
            return NotImplemented
        return self._students == other._students

    __hash__ = None
