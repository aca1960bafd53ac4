"""Exceptions raised by the system, described from their exception records."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from types import FrameType, TracebackType

from minxtra.traceable_exception import TraceableException

# Walking the stack is only done in debug runs.
_STACK_TRACE_ENABLED = __debug__


class ExceptionCode(enum.IntEnum):
    """System exception codes with known descriptions."""

    EXCEPTION_ACCESS_VIOLATION = 0xC0000005
    EXCEPTION_ARRAY_BOUNDS_EXCEEDED = 0xC000008C
    EXCEPTION_BREAKPOINT = 0x80000003
    EXCEPTION_DATATYPE_MISALIGNMENT = 0x80000002
    EXCEPTION_FLT_DENORMAL_OPERAND = 0xC000008D
    EXCEPTION_FLT_DIVIDE_BY_ZERO = 0xC000008E
    EXCEPTION_FLT_INEXACT_RESULT = 0xC000008F
    EXCEPTION_FLT_INVALID_OPERATION = 0xC0000090
    EXCEPTION_FLT_OVERFLOW = 0xC0000091
    EXCEPTION_FLT_STACK_CHECK = 0xC0000092
    EXCEPTION_FLT_UNDERFLOW = 0xC0000093
    EXCEPTION_ILLEGAL_INSTRUCTION = 0xC000001D
    EXCEPTION_IN_PAGE_ERROR = 0xC0000006
    EXCEPTION_INT_DIVIDE_BY_ZERO = 0xC0000094
    EXCEPTION_INT_OVERFLOW = 0xC0000095
    EXCEPTION_INVALID_DISPOSITION = 0xC0000026
    EXCEPTION_NONCONTINUABLE_EXCEPTION = 0xC0000025
    EXCEPTION_PRIV_INSTRUCTION = 0xC0000096
    EXCEPTION_SINGLE_STEP = 0x80000004
    EXCEPTION_STACK_OVERFLOW = 0xC00000FD


_MEMORY_FAULTS = (
    ExceptionCode.EXCEPTION_ACCESS_VIOLATION,
    ExceptionCode.EXCEPTION_IN_PAGE_ERROR,
)

_OPERATIONS = {
    0: "Read access violation",
    1: "Write access violation",
    8: "User-mode DEP violation",
}


@dataclass(frozen=True)
class ExceptionRecord:
    """A system exception: its code, parameters and the record it followed."""

    code: int
    information: tuple[int, ...] = ()
    previous: ExceptionRecord | None = None


def exception_code_details(code: int) -> str:
    """The name of a known exception code, or a generic description."""
    try:
        return ExceptionCode(code).name
    except ValueError:
        return "Unknown Win32 exception"


def _describe(record: ExceptionRecord) -> str:
    code = record.code & 0xFFFFFFFF
    text = exception_code_details(code)
    if code in _MEMORY_FAULTS:
        params = record.information
        if len(params) < 2:
            raise ValueError(
                f"{exception_code_details(code)} needs at least 2 parameters, got {len(params)}"
            )
        operation = _OPERATIONS.get(params[0], "Unknown operation type")
        text += f" - {operation} on address 0x{params[1]:x}"
        if len(params) >= 3:
            text += f", NTSTATUS code {params[2]:x}"
    return f"{text} (code 0x{code:x})"


def create_exception_message(record: ExceptionRecord) -> str:
    """Describe ``record`` and each record it followed, one per line."""
    lines = [_describe(record)]
    previous = record.previous
    while previous is not None:
        lines.append(f"  ∟ {_describe(previous)}")
        previous = previous.previous
    lines.append("See the documentation of GetExceptionCode for the meaning of the code")
    return "\n".join(lines)


class Win32Exception(TraceableException):
    """A system exception translated into a Python exception."""

    def __init__(
        self,
        record: ExceptionRecord,
        context: FrameType | TracebackType | None = None,
    ) -> None:
        if context is None:
            context = sys._getframe(1)
        super().__init__(
            create_exception_message(record),
            context=context,
            stack_trace_enabled=_STACK_TRACE_ENABLED,
        )
        self.record = record