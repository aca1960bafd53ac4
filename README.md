# minxtra

A small utility library:

- **UTF-8 / UTF-16 / UTF-32 transcoding** with validation, in a checked flavour
  (`minxtra.utfchecked`, raises on malformed input) and an unchecked one
  (`minxtra.utfunchecked`, trusts its input). Shared primitives such as
  `validate_next`, `validate_next16`, `find_invalid`, `is_valid` and
  `starts_with_bom` are in `minxtra.utfcore`.
- **ANSI console colours** in `minxtra.console` (`Color`, `Background`). Created with
  `False`, they return empty strings instead of escape codes.
- **String helpers** in `minxtra.win32_api_strings`: `to_utf8` turns UTF-16 code units
  (or a `str`) into UTF-8 bytes, `to_utf16` turns UTF-8 bytes (or a `str`) into a list
  of UTF-16 code units. Without a `count`, input ends at the first zero unit.
- **Error messages** in `minxtra.win32_errors`: `get_error_message(code, func_name)`
  builds a line such as `Foo returned error 5: Access is denied.` from a small table
  of known codes (`Win32ErrorCode`); other codes are described as
  `Unknown error 0x8007....`.
- **Call stack traces** in `minxtra.call_stack` (`get_trace`). The tracing machinery on
  top and the interpreter start-up frames at the bottom are filtered out, and the
  output can be coloured for a terminal. Frames are only resolved to function names,
  files and lines while a `CallStackAccessScope` (from
  `minxtra.call_stack_access_scope`) is open; outside one, the trace holds a single
  "cannot resolve symbol for frame(s)" entry.
- **Traceable exceptions** in `minxtra.traceable_exception`. A `TraceableException`
  records the call stack where it was created and can hold an inner exception.
- **Translated faults** in `minxtra.win32_exception` and
  `minxtra.seh_translation_scope`. Inside a `SehTranslationScope`, a
  `ZeroDivisionError`, `RecursionError`, `FloatingPointError` or `OverflowError`
  leaving the block is raised again as a `Win32Exception` carrying the matching
  `ExceptionCode` and the trace from where the fault happened. When Python runs
  with `-O`, the trace of a `Win32Exception` reads `(disabled in this build)`.

## Installation

```
pip install minxtra
```

## Examples

Transcoding:

```python
from minxtra import utfchecked

utfchecked.utf8to16("excluído".encode("utf-8"))   # list of UTF-16 code units
utfchecked.utf16to8([0xD83D, 0xDE00])             # b"\xf0\x9f\x98\x80"
utfchecked.replace_invalid(b"a\xffb")             # b"a\xef\xbf\xbdb"
```

Invalid input raises a subclass of `utfchecked.Utf8Exception`: `InvalidUtf8`,
`InvalidUtf16`, `InvalidCodePoint` or `NotEnoughRoom`.

Coloured console output:

```python
from minxtra.console import Color

color = Color(True)
print(f"{color.yellow()}warning{color.reset()}")
```

Exceptions that carry a stack trace:

```python
from minxtra.call_stack_access_scope import CallStackAccessScope
from minxtra.traceable_exception import TraceableException

TraceableException.use_colors_on_stack_trace(False)

with CallStackAccessScope():
    try:
        try:
            raise RuntimeError("inner failure")
        except RuntimeError as inner:
            raise TraceableException("outer failure", inner) from inner
    except TraceableException as ex:
        print(ex.serialize())
```

`serialize()` gives the qualified type name and message, the inner exception's
message, and then the call stack trace under a `=== CALL STACK TRACE ===` heading.

Translating a fault:

```python
from minxtra.call_stack_access_scope import CallStackAccessScope
from minxtra.seh_translation_scope import SehTranslationScope
from minxtra.win32_exception import Win32Exception

try:
    with CallStackAccessScope(), SehTranslationScope():
        1 // 0
except Win32Exception as ex:
    print(ex)   # EXCEPTION_INT_DIVIDE_BY_ZERO (code 0xc0000094) ...
```

## What it does not do

Traces are made of Python frames only; the package does not read debug symbols of
native code. The translation scope only converts the Python exceptions listed
above; it does not catch hardware faults or signals. Error descriptions come from a
built-in table, not from the operating system. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```