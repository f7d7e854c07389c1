"""Observation Glue: live read-only sequences and push notification.

Invariants:
    - ReadOnlyList wraps the owner's list by reference: always equals current state
    - ReadOnlyList exposes no mutators (Sequence ABC only)
    - Listeners fire after a mutation completes, never for a failed one

Design Decisions:
    - Pull-based view + optional subscription callback: no GUI toolkit in core
      (ADR: keep the core importable without a display stack)
    - Listener errors are logged, never raised from the mutator (it has already committed)
    - Every listener is called even when an earlier one fails
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReadOnlyList(Sequence, Generic[T]):
    """Live, read-only view over a list owned by a container."""

    __slots__ = ("_items",)

    def __init__(self, items: list[T]):
        self._items = items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"ReadOnlyList({self._items!r})"


class ChangeKind(str, Enum):
    """What a successful aggregate mutation did."""
    STUDENT_ADDED = "student_added"
    STUDENT_REPLACED = "student_replaced"
    STUDENT_REMOVED = "student_removed"
    STUDENTS_REPLACED = "students_replaced"
    LAB_ADDED = "lab_added"
    LAB_REMOVED = "lab_removed"
    LABS_REPLACED = "labs_replaced"
    LAB_STATUS_CHANGED = "lab_status_changed"
    DATA_RESET = "data_reset"


@dataclass(frozen=True)
class ChangeEvent:
    kind: ChangeKind
    payload: dict[str, Any] = field(default_factory=dict)


Listener = Callable[[ChangeEvent], None]


class Observable:
    """Subscription registry mixed into the aggregate root."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: ChangeKind, **payload: Any) -> None:
        event = ChangeEvent(kind, payload)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Listener failed", extra={"event": kind.value},
                )
