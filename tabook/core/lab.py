"""Lab: value record identifying one lab session.

Invariants:
    - number is a positive int (bool rejected even though it subclasses int)
    - Equality, hashing and ordering all use number only

Design Decisions:
    - Frozen dataclass with order=True: value semantics and stable display order for free
"""

from dataclasses import dataclass

from tabook.core.errors import InvalidLabNumberError


@dataclass(frozen=True, order=True)
class Lab:
    """One lab session in the master catalog."""

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise InvalidLabNumberError(self.number)
        if self.number <= 0:
            raise InvalidLabNumberError(self.number)

    def __str__(self) -> str:
        return f"Lab {self.number}"
