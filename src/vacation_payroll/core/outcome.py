"""Result wrapper handed to the presentation layer.

Loading state belongs to the caller, so the service never returns bare
``is_loading``/``error`` flags. A calling layer that has not received a value
yet holds ``Outcome.pending()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .enums import ErrorCode, OutcomeState
from .exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class CalculationFailure:
    code: ErrorCode
    message: str

    @classmethod
    def from_error(cls, error: DomainError) -> "CalculationFailure":
        return cls(code=error.code, message=str(error))

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


@dataclass(frozen=True)
class Outcome(Generic[T]):
    state: OutcomeState
    value: Optional[T] = None
    error: Optional[CalculationFailure] = None

    @classmethod
    def pending(cls) -> "Outcome[T]":
        return cls(state=OutcomeState.PENDING)

    @classmethod
    def ready(cls, value: T) -> "Outcome[T]":
        return cls(state=OutcomeState.READY, value=value)

    @classmethod
    def failed(cls, error: DomainError | CalculationFailure) -> "Outcome[T]":
        if isinstance(error, DomainError):
            error = CalculationFailure.from_error(error)
        return cls(state=OutcomeState.FAILED, error=error)

    @property
    def is_ready(self) -> bool:
        return self.state == OutcomeState.READY

    @property
    def is_failed(self) -> bool:
        return self.state == OutcomeState.FAILED
