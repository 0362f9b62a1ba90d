"""Outcome values returned by browser operations."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field, replace
from typing import ClassVar, Generic, Optional, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, enum.Enum):
    """Why an operation did not succeed."""

    STOP = "stop"
    ELEMENT_NOT_FOUND = "element_not_found"
    ELEMENT_NOT_CLICKABLE = "element_not_clickable"
    CANCEL = "cancel"


RETRYABLE_KINDS = frozenset({FailureKind.ELEMENT_NOT_FOUND, FailureKind.ELEMENT_NOT_CLICKABLE})


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome, optionally carrying a value."""

    value: Optional[T] = None

    ok: ClassVar[bool] = True

    def traced(self, marker: Optional[str] = None) -> "Ok[T]":
        return self


@dataclass(frozen=True)
class Failed:
    """Failed outcome with its kind, a message and the call chain it crossed."""

    kind: FailureKind
    message: str = ""
    trace: tuple[str, ...] = field(default_factory=tuple)

    ok: ClassVar[bool] = False

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS

    def traced(self, marker: Optional[str] = None) -> "Failed":
        """Return a copy with ``marker`` (the caller's location by default) appended."""

        return replace(self, trace=self.trace + (marker or trace_marker(depth=2),))

    def __str__(self) -> str:
        text = f"{self.kind.value}: {self.message}" if self.message else self.kind.value
        if self.trace:
            text += " [" + " <- ".join(reversed(self.trace)) + "]"
        return text


Outcome = Union[Ok[T], Failed]


def trace_marker(depth: int = 1) -> str:
    """Describe the frame ``depth`` levels above the caller as ``module:function:line``."""

    frame = sys._getframe(depth)
    return f"{frame.f_globals.get('__name__', '?')}:{frame.f_code.co_name}:{frame.f_lineno}"


def stop(message: str) -> Failed:
    return Failed(FailureKind.STOP, message, (trace_marker(depth=2),))


def cancel() -> Failed:
    return Failed(FailureKind.CANCEL, "Operation cancelled", (trace_marker(depth=2),))


def element_not_found(selector: str) -> Failed:
    return Failed(
        FailureKind.ELEMENT_NOT_FOUND,
        f"Element not found: {selector}",
        (trace_marker(depth=2),),
    )


def element_not_clickable(selector: str) -> Failed:
    return Failed(
        FailureKind.ELEMENT_NOT_CLICKABLE,
        f"Element is not displayed or not enabled: {selector}",
        (trace_marker(depth=2),),
    )
