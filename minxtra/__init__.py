"""UTF transcoding, ANSI console colours, call stack traces and traceable exceptions."""

__version__ = "0.1.0"

__all__ = [
    "utfcore",
    "utfchecked",
    "utfunchecked",
    "console",
    "win32_api_strings",
    "win32_errors",
    "call_stack_access_scope",
    "call_stack",
    "traceable_exception",
    "win32_exception",
    "seh_translation_scope",
]