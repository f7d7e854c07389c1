"""Error Hierarchy: typed, categorized exceptions for every core failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - No error subclasses a generic runtime exception (ValueError, IndexError, ...)
    - Raising an error never mutates core state; mutators validate before writing
    - User-facing wording is built by collaborators; messages here are for logs

Design Decisions:
    - Single hierarchy with TABookError base: collaborators catch one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and collaborator handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    student_name: str | None = None
    lab_number: int | None = None
    index: int | None = None
    debug_info: dict[str, Any] | None = None


class TABookError(Exception):
    """Base exception for all address book core errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Structured envelope for collaborators (command layer, storage, UI)."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "student_name": self.context.student_name,
                    "lab_number": self.context.lab_number,
                    "index": self.context.index,
                },
            }
        }


# ─── Student Errors ─────────────────────────────────────────────

class DuplicateStudentError(TABookError):
    """A student with the same identity already exists."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.student_name = name
        super().__init__(
            f"Student '{name}' already exists",
            "DUPLICATE_STUDENT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name


class StudentNotFoundError(TABookError):
    """Target of a remove/replace is not in the list."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.student_name = name
        super().__init__(
            f"Student '{name}' not found",
            "STUDENT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name


class InvalidNameError(TABookError):
    """Student name is not a non-blank string."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Student name must be a non-blank string, got {value!r}",
            "INVALID_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.value = value


# ─── Lab Errors ─────────────────────────────────────────────────

class DuplicateLabError(TABookError):
    """Lab number already present in the catalog."""
    def __init__(self, number: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.lab_number = number
        super().__init__(
            f"Lab {number} already exists",
            "DUPLICATE_LAB", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx,
        )
        self.number = number


class LabNotFoundError(TABookError):
    """Target of a lab remove/replace is not in the catalog."""
    def __init__(self, number: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.lab_number = number
        super().__init__(
            f"Lab {number} not found",
            "LAB_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.number = number


class InvalidLabNumberError(TABookError):
    """Lab number is not a positive integer."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Lab number must be a positive integer, got {value!r}",
            "INVALID_LAB_NUMBER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.value = value


# ─── Lab Status Errors ──────────────────────────────────────────

class InvalidStatusError(TABookError):
    """Value is not one of the lab status states."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown lab status {value!r}",
            "INVALID_STATUS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.value = value


class InvalidMarkError(TABookError):
    """Mark out of domain, or present/absent inconsistently with status."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_MARK", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class IndexOutOfRangeError(TABookError):
    """View index outside [0, len)."""
    def __init__(self, index: int, size: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.index = index
        super().__init__(
            f"Index {index} out of range for view of size {size}",
            "INDEX_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.index = index
        self.size = size


class ViewMismatchError(TABookError):
    """A student's lab view does not mirror the catalog."""
    def __init__(
        self, name: str, expected: list[int], actual: list[int],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.student_name = name
        ctx.debug_info = {"expected": expected, "actual": actual}
        super().__init__(
            f"Lab view of '{name}' covers labs {actual}, catalog has {expected}",
            "VIEW_MISMATCH", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name
        self.expected = expected
        self.actual = actual
