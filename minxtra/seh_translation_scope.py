"""A scope that turns low-level faults into Win32Exception."""

from __future__ import annotations

from minxtra.win32_exception import ExceptionCode, ExceptionRecord, Win32Exception

_TRANSLATIONS = (
    (RecursionError, ExceptionCode.EXCEPTION_STACK_OVERFLOW),
    (ZeroDivisionError, ExceptionCode.EXCEPTION_INT_DIVIDE_BY_ZERO),
    (FloatingPointError, ExceptionCode.EXCEPTION_FLT_INVALID_OPERATION),
    (OverflowError, ExceptionCode.EXCEPTION_FLT_OVERFLOW),
)


class SehTranslationScope:
    """Context manager inside which faults are raised as Win32Exception.

    Division by zero, stack exhaustion and floating point faults leaving the
    block are replaced by a Win32Exception whose trace starts where the fault
    happened; other exceptions pass through unchanged.
    """

    def __enter__(self) -> SehTranslationScope:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None or isinstance(exc, Win32Exception):
            return None
        for kind, code in _TRANSLATIONS:
            if isinstance(exc, kind):
                raise Win32Exception(ExceptionRecord(code), tb) from exc
        return None