from dataclasses import dataclass
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class TodoAppError(Exception):
    """Base class for errors the caller can correct."""


class ValidationError(TodoAppError):
    """One or more field-level violations. Raised before any state changes."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: List[FieldError] = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field, message)])

    def by_field(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class NotFoundError(TodoAppError):
    """The referenced task does not exist or has been soft-deleted."""
