"""Readable traces of the current call stack."""

from __future__ import annotations

import inspect
import re
import sys
from dataclasses import dataclass
from types import FrameType, TracebackType

from minxtra.call_stack_access_scope import is_active
from minxtra.console import Color
from minxtra.win32_errors import Win32ErrorCode, get_error_message

_TOP_IRRELEVANT = (
    f"{__name__}.get_trace",
    "minxtra.traceable_exception.TraceableException.",
)

_BOTTOM_IRRELEVANT = (
    "runpy._run_module_as_main",
    "runpy._run_code",
    "threading.Thread._bootstrap",
    "threading._bootstrap",
)

_MANGLED_LAMBDA = re.compile(r"lambda_\w+")


@dataclass(frozen=True)
class ResolvedFrame:
    """One stack frame with its symbol, or the error that prevented resolving it."""

    status: int
    function: str = ""
    file_name: str = ""
    line_number: int = 0


def _qualified_name(frame: FrameType) -> str:
    code = frame.f_code
    name = getattr(code, "co_qualname", code.co_name)
    module = inspect.getmodule(frame)
    return f"{module.__name__}.{name}" if module is not None else name


def _resolve(frame: FrameType) -> ResolvedFrame:
    if not is_active():
        return ResolvedFrame(Win32ErrorCode.ERROR_INVALID_HANDLE)
    file_name = frame.f_code.co_filename
    if file_name.startswith("<"):
        return ResolvedFrame(Win32ErrorCode.ERROR_SUCCESS, _qualified_name(frame))
    return ResolvedFrame(
        Win32ErrorCode.ERROR_SUCCESS,
        _qualified_name(frame),
        file_name,
        frame.f_lineno,
    )


def _innermost_frame(context: FrameType | TracebackType) -> FrameType:
    if isinstance(context, TracebackType):
        while context.tb_next is not None:
            context = context.tb_next
        return context.tb_frame
    return context


def resolve_frames(context: FrameType | TracebackType | None = None) -> list[ResolvedFrame]:
    """Resolve the frames from ``context`` (default: the caller) outwards."""
    frame: FrameType | None = (
        sys._getframe(1) if context is None else _innermost_frame(context)
    )
    frames = []
    while frame is not None:
        frames.append(_resolve(frame))
        frame = frame.f_back
    return frames


def _is_top_irrelevant(frame: ResolvedFrame) -> bool:
    return frame.status == Win32ErrorCode.ERROR_INVALID_ADDRESS or any(
        frame.function.startswith(name) for name in _TOP_IRRELEVANT
    )


def filter_frames(frames: list[ResolvedFrame]) -> list[ResolvedFrame]:
    """Drop the tracing machinery on top and interpreter start-up at the bottom."""
    begin = 0
    match_count = 0
    last_match = -1
    for idx, frame in enumerate(frames):
        if _is_top_irrelevant(frame):
            match_count += 1
            last_match = idx
        if idx + 1 >= match_count + 2:
            begin = last_match + 1
            break

    end = len(frames)
    while end > 0 and any(
        frames[end - 1].function.startswith(name) for name in _BOTTOM_IRRELEVANT
    ):
        end -= 1

    return frames[begin:end]


def serialize_stack_trace(frames: list[ResolvedFrame], is_console: bool = False) -> str:
    """Render frames as numbered text, coloured for a console if asked."""
    color = Color(is_console)
    parts: list[str] = []
    idx = 0
    prev_status = Win32ErrorCode.ERROR_SUCCESS

    for frame in frames:
        if frame.status != Win32ErrorCode.ERROR_SUCCESS and frame.status == prev_status:
            continue

        parts.append(f"#{idx} ")
        idx += 1

        if frame.status == Win32ErrorCode.ERROR_SUCCESS:
            parts.append(color.yellow() + frame.function)
            if frame.file_name:
                parts.append(
                    f"\n{color.bright_black()}  in {frame.file_name}, line {frame.line_number}"
                )
        elif frame.status == Win32ErrorCode.ERROR_MOD_NOT_FOUND:
            parts.append("[.NET managed?] cannot resolve symbol for frame(s)")
        else:
            parts.append("cannot resolve symbol for frame(s) - ")
            parts.append(get_error_message(frame.status))

        parts.append(color.reset() + "\n")
        if not is_console:
            parts.append("---\n")

        prev_status = frame.status

    return _MANGLED_LAMBDA.sub("lambda", "".join(parts))


def get_trace(
    is_console: bool = False, context: FrameType | TracebackType | None = None
) -> str:
    """A trace of the call stack, from ``context`` or from the caller."""
    start = sys._getframe() if context is None else context
    return serialize_stack_trace(filter_frames(resolve_frames(start)), is_console)