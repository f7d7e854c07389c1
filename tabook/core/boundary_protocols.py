"""Boundary Protocols: contracts between core and collaborators.

Invariants:
    - Core NEVER imports from collaborators; dependency arrows point inward only
    - A ReadOnlyAddressBook is observation-only; mutating what it returns is undefined

Design Decisions:
    - Protocol over ABC: structural subtyping, AddressBook satisfies it without inheritance
    - AddressBookData: plain frozen record a storage layer can build after loading,
      so collaborators never need a half-built AddressBook to seed a new one
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from tabook.core.lab import Lab
from tabook.core.student import Student


class ReadOnlyAddressBook(Protocol):
    """Read-only capability used for copy construction and reset_data."""
    def student_list(self) -> Sequence[Student]: ...
    def master_lab_list(self) -> Sequence[Lab]: ...


@dataclass(frozen=True)
class AddressBookData:
    """Detached snapshot satisfying ReadOnlyAddressBook."""
    students: tuple[Student, ...] = ()
    labs: tuple[Lab, ...] = ()

    def student_list(self) -> Sequence[Student]:
        return self.students

    def master_lab_list(self) -> Sequence[Lab]:
        return self.labs
