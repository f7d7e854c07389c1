"""Student: identity, contact attributes and the per-lab status view.

Invariants:
    - name is a non-blank str
    - Identity is the name, compared as an exact case-sensitive string
    - StudentLabView holds one LabStatus per catalog lab, in catalog order,
      once the owning AddressBook has accepted the student
    - Every failed view operation leaves the view unchanged

Design Decisions:
    - Full equality (__eq__) compares every field; identity (is_same_student)
      compares name only. Lists use identity for uniqueness, equality for comparison
    - The view is owned by its student: copy() deep-copies entries so two
      address books never share LabStatus objects
"""

from collections.abc import Iterable, Iterator

from tabook.core.errors import IndexOutOfRangeError, InvalidNameError, LabNotFoundError
from tabook.core.lab import Lab
from tabook.core.lab_status import LabStatus, Status


class StudentLabView:
    """Ordered LabStatus entries of one student, mirroring the catalog."""

    def __init__(self, entries: Iterable[LabStatus] = ()):
        self._entries: list[LabStatus] = list(entries)

    # --- Queries ------------------------------------------------------------------

    def __iter__(self) -> Iterator[LabStatus]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> LabStatus:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentLabView):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"StudentLabView({self._entries!r})"

    def lab_numbers(self) -> list[int]:
        return [entry.lab_number for entry in self._entries]

    def mirrors(self, catalog: Iterable[Lab]) -> bool:
        """Coverage + order parity against a catalog."""
        return self.lab_numbers() == [lab.number for lab in catalog]

    def index_of(self, lab: Lab) -> int:
        for i, entry in enumerate(self._entries):
            if entry.lab_number == lab.number:
                return i
        raise LabNotFoundError(lab.number)

    # --- Mutations ----------------------------------------------------------------

    def initialize(self, catalog: Iterable[Lab]) -> None:
        """Reset to one UNSUBMITTED entry per catalog lab."""
        self._entries = [LabStatus.unsubmitted(lab) for lab in catalog]

    def append_for_new_lab(self, lab: Lab) -> None:
        self._entries.append(LabStatus.unsubmitted(lab))

    def remove_for_lab(self, lab: Lab) -> None:
        del self._entries[self.index_of(lab)]

    def set_status_at(self, index: int, status: Status, mark: float | None = None) -> None:
        """Update the entry at index. Negative indices are out of range."""
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRangeError(index, len(self._entries))
        self._entries[index].apply(status, mark)

    def copy(self) -> "StudentLabView":
        return StudentLabView(entry.copy() for entry in self._entries)


class Student:
    """A student on the roster."""

    def __init__(
        self,
        name: str,
        phone: str | None = None,
        email: str | None = None,
        address: str | None = None,
        tags: Iterable[str] = (),
        labs: StudentLabView | None = None,
    ):
        if not isinstance(name, str) or not name.strip():
            raise InvalidNameError(name)
        self._name = name
        self._phone = phone
        self._email = email
        self._address = address
        self._tags = frozenset(tags)
        self._labs = labs if labs is not None else StudentLabView()

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def email(self) -> str | None:
        return self._email

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def tags(self) -> frozenset[str]:
        return self._tags

    @property
    def labs(self) -> StudentLabView:
        return self._labs

    def is_same_student(self, other: "Student | None") -> bool:
        """Identity check used for uniqueness: exact name match."""
        if other is self:
            return True
        return other is not None and other.name == self._name

    def copy(self) -> "Student":
        """Deep copy, lab view included."""
        return Student(
            self._name, self._phone, self._email, self._address,
            self._tags, self._labs.copy(),
        )

    def with_labs(self, labs: StudentLabView) -> "Student":
        """Same contact details, a private copy of the given lab view."""
        return Student(
            self._name, self._phone, self._email, self._address, self._tags, labs.copy(),
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Student):
            return NotImplemented
        return (
            self._name == other._name
            and self._phone == other._phone
            and self._email == other._email
            and self._address == other._address
            and self._tags == other._tags
            and self._labs == other._labs
        )

    __hash__ = None  # mutable through its lab view

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Student(name={self._name!r}, labs={len(self._labs)})"
