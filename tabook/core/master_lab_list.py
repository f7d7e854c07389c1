"""Master Lab List: the authoritative, ordered lab catalog.

Invariants:
    - No two labs share a number
    - Failed mutations leave the catalog unchanged

Design Decisions:
    - Stores Lab values; student views refer to labs by number only
    - No broadcast obligation: AddressBook owns cross-container propagation
"""

from collections.abc import Iterable, Iterator

from tabook.core.errors import DuplicateLabError, LabNotFoundError
from tabook.core.lab import Lab
from tabook.core.observable import ReadOnlyList


def find_duplicate_lab(labs: Iterable[Lab]) -> Lab | None:
    seen: set[int] = set()
    for lab in labs:
        if lab.number in seen:
            return lab
        seen.add(lab.number)
    return None


class MasterLabList:
    """Ordered labs, unique by lab number."""

    def __init__(self) -> None:
        self._labs: list[Lab] = []
        self._view: ReadOnlyList[Lab] = ReadOnlyList(self._labs)

    def contains(self, lab: Lab) -> bool:
        return lab in self._labs

    __contains__ = contains

    def add(self, lab: Lab) -> None:
        if self.contains(lab):
            raise DuplicateLabError(lab.number)
        self._labs.append(lab)

    def remove(self, lab: Lab) -> None:
        if not self.contains(lab):
            raise LabNotFoundError(lab.number)
        self._labs.remove(lab)

    def replace(self, target: Lab, replacement: Lab) -> None:
        if not self.contains(target):
            raise LabNotFoundError(target.number)
        if replacement != target and self.contains(replacement):
            raise DuplicateLabError(replacement.number)
        self._labs[self._labs.index(target)] = replacement

    def replace_all(self, labs: Iterable[Lab]) -> None:
        incoming = list(labs)
        duplicate = find_duplicate_lab(incoming)
        if duplicate is not None:
            raise DuplicateLabError(duplicate.number)
        self._labs[:] = incoming

    def numbers(self) -> list[int]:
        return [lab.number for lab in self._labs]

    def as_read_only(self) -> ReadOnlyList[Lab]:
        return self._view

    def __iter__(self) -> Iterator[Lab]:
        return iter(self._labs)

    def __len__(self) -> int:
        return len(self._labs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MasterLabList):
            return NotImplemented
        return self._labs == other._labs

    __hash__ = None
