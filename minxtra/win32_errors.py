"""Readable messages for Win32 error codes."""

from __future__ import annotations

import enum


class Win32ErrorCode(enum.IntEnum):
    """Win32 error codes that the package reports or recognises."""

    ERROR_SUCCESS = 0
    ERROR_INVALID_FUNCTION = 1
    ERROR_FILE_NOT_FOUND = 2
    ERROR_PATH_NOT_FOUND = 3
    ERROR_ACCESS_DENIED = 5
    ERROR_INVALID_HANDLE = 6
    ERROR_NOT_ENOUGH_MEMORY = 8
    ERROR_INVALID_PARAMETER = 87
    ERROR_MOD_NOT_FOUND = 126
    ERROR_INVALID_ADDRESS = 487


_MESSAGES = {
    Win32ErrorCode.ERROR_SUCCESS: "The operation completed successfully.",
    Win32ErrorCode.ERROR_INVALID_FUNCTION: "Incorrect function.",
    Win32ErrorCode.ERROR_FILE_NOT_FOUND: "The system cannot find the file specified.",
    Win32ErrorCode.ERROR_PATH_NOT_FOUND: "The system cannot find the path specified.",
    Win32ErrorCode.ERROR_ACCESS_DENIED: "Access is denied.",
    Win32ErrorCode.ERROR_INVALID_HANDLE: "The handle is invalid.",
    Win32ErrorCode.ERROR_NOT_ENOUGH_MEMORY: (
        "Not enough memory resources are available to process this command."
    ),
    Win32ErrorCode.ERROR_INVALID_PARAMETER: "The parameter is incorrect.",
    Win32ErrorCode.ERROR_MOD_NOT_FOUND: "The specified module could not be found.",
    Win32ErrorCode.ERROR_INVALID_ADDRESS: "Attempt to access invalid address.",
}


def _hresult_from_win32(code: int) -> int:
    if code == 0 or code & 0x80000000:
        return code
    return (code & 0xFFFF) | 0x80070000


def error_message(err_code: int) -> str:
    """The system description of a Win32 error code."""
    code = int(err_code) & 0xFFFFFFFF
    message = _MESSAGES.get(code)
    if message is not None:
        return message
    return f"Unknown error 0x{_hresult_from_win32(code):08X}"


def get_error_message(err_code: int, func_name: str | None = None) -> str:
    """A line describing the error, naming the failing function if given."""
    code = int(err_code) & 0xFFFFFFFF
    prefix = f"{func_name} returned error " if func_name else "Win32 API error code "
    return f"{prefix}{code}: {error_message(code)}"