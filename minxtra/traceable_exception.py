"""An exception that carries the call stack trace from where it was created."""

from __future__ import annotations

from types import FrameType, TracebackType

from minxtra.call_stack import get_trace
from minxtra.console import Color

_DISABLED_TRACE = "(disabled in this build)"


class TraceableException(RuntimeError):
    """A runtime error with the call stack trace taken when it was created."""

    _colors_enabled = False

    def __init__(
        self,
        message: str,
        inner_exception: BaseException | None = None,
        context: FrameType | TracebackType | None = None,
        stack_trace_enabled: bool = True,
    ) -> None:
        super().__init__(message)
        self._inner_exception = inner_exception
        colored = TraceableException._colors_enabled
        if not stack_trace_enabled:
            self._call_stack_trace = _DISABLED_TRACE
        elif context is None:
            self._call_stack_trace = get_trace(colored)
        else:
            self._call_stack_trace = get_trace(colored, context)

    @classmethod
    def use_colors_on_stack_trace(cls, enable: bool) -> None:
        """Enable or disable ANSI colours in traces and serialized exceptions."""
        TraceableException._colors_enabled = bool(enable)

    @property
    def call_stack_trace(self) -> str:
        """The trace of the call stack when the exception was created."""
        return self._call_stack_trace

    @property
    def inner_exception(self) -> BaseException | None:
        """The preceding exception, if any."""
        return self._inner_exception

    @property
    def type_name(self) -> str:
        """The qualified name of the exception's type."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def serialize(self) -> str:
        """This exception as text: type, message, inner exception and trace."""
        color = Color(TraceableException._colors_enabled)
        parts = [f"{color.bright_red()}{self.type_name}: {self}{color.reset()}\n"]
        if self._inner_exception is not None:
            parts.append(f"{color.red()}  ∟ {self._inner_exception}{color.reset()}\n")
        parts.append("=== CALL STACK TRACE ===\n")
        parts.append(f"{self._call_stack_trace}\n")
        return "".join(parts)