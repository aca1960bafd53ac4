import pytest

from minxtra.call_stack_access_scope import CallStackAccessScope
from minxtra.traceable_exception import TraceableException

EXPECTED_EX_MESSAGE = "I am an exception."
EXPECTED_INNER_EX_MESSAGE = "And this is the inner exception."


class MyTestException(TraceableException):
    def __init__(self, message, inner_exception):
        super().__init__(message, inner_exception)


def count_matches(needle, text):
    return sum(1 for i in range(len(text)) if text.startswith(needle, i))


def throw_traceable_exception():
    try:
        raise RuntimeError(EXPECTED_INNER_EX_MESSAGE)
    except RuntimeError as ex:
        raise MyTestException(EXPECTED_EX_MESSAGE, ex) from ex


def failing_helper():
    raise ValueError("boom")


@pytest.fixture(autouse=True)
def reset_colors():
    yield
    TraceableException.use_colors_on_stack_trace(False)


def test_catch_exception():
    TraceableException.use_colors_on_stack_trace(True)
    with pytest.raises(TraceableException) as info:
        with CallStackAccessScope():
            throw_traceable_exception()
    ex = info.value

    assert count_matches("throw_traceable_exception", ex.call_stack_trace) == 1

    serialized = ex.serialize()
    assert count_matches(EXPECTED_EX_MESSAGE, str(ex)) == 1

    inner = ex.inner_exception
    assert inner is not None
    assert str(inner) == EXPECTED_INNER_EX_MESSAGE
    assert count_matches(str(inner), serialized) == 1


def test_print_exception_contains_trace():
    TraceableException.use_colors_on_stack_trace(True)
    with pytest.raises(TraceableException) as info:
        with CallStackAccessScope():
            throw_traceable_exception()
    serialized = info.value.serialize()
    assert "=== CALL STACK TRACE ===\n" in serialized
    assert info.value.call_stack_trace in serialized


def test_is_runtime_error():
    ex = TraceableException("plain")
    assert isinstance(ex, RuntimeError)
    assert str(ex) == "plain"
    assert ex.inner_exception is None
    assert count_matches("plain", ex.serialize()) == 1


def test_serialize_without_colors():
    with CallStackAccessScope():
        ex = TraceableException("message")
    serialized = ex.serialize()
    assert serialized.startswith(f"{ex.type_name}: message\n=== CALL STACK TRACE ===\n")
    assert serialized.endswith(ex.call_stack_trace + "\n")
    assert "∟" not in serialized
    assert "\033[" not in serialized


def test_serialize_with_colors_and_inner():
    TraceableException.use_colors_on_stack_trace(True)
    ex = TraceableException("message", ValueError("inner"))
    serialized = ex.serialize()
    assert serialized.startswith(f"\033[91m{ex.type_name}: message\033[0m\n")
    assert "\033[31m  ∟ inner\033[0m\n" in serialized


def test_type_name_of_subclass():
    ex = MyTestException("m", ValueError("x"))
    assert ex.type_name.endswith("MyTestException")
    assert TraceableException("m").type_name == "minxtra.traceable_exception.TraceableException"


def test_disabled_stack_trace():
    ex = TraceableException("m", stack_trace_enabled=False)
    assert ex.call_stack_trace == "(disabled in this build)"
    assert ex.inner_exception is None


def test_trace_from_traceback_context():
    try:
        failing_helper()
    except ValueError as err:
        tb = err.__traceback__
    with CallStackAccessScope():
        ex = TraceableException("wrapped", context=tb)
    assert count_matches("failing_helper", ex.call_stack_trace) == 1


def test_trace_excludes_own_machinery():
    with CallStackAccessScope():
        ex = TraceableException("m")
    assert "TraceableException.__init__" not in ex.call_stack_trace
    assert "test_trace_excludes_own_machinery" in ex.call_stack_trace


def test_without_access_scope_symbols_are_unresolved():
    ex = TraceableException("m")
    trace = ex.call_stack_trace
    assert "cannot resolve symbol for frame(s)" in trace
    assert "The handle is invalid." in trace
    assert "#1 " not in trace