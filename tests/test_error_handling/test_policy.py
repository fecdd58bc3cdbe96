import pytest

from flagkit import ERR_HELP, ErrorHandling, ErrorKind, FlagPanic, ParseError
from flagkit.error_handling import EXIT_HELP, EXIT_USAGE, exit_code, handle_parse_error
from flagkit.parse_error import parse_error, range_error


@pytest.mark.parametrize(
    "value,expected",
    [
        ("continue", ErrorHandling.CONTINUE_ON_ERROR),
        ("recover", ErrorHandling.CONTINUE_ON_ERROR),
        ("continue-on-error", ErrorHandling.CONTINUE_ON_ERROR),
        ("EXIT", ErrorHandling.EXIT_ON_ERROR),
        ("terminate", ErrorHandling.EXIT_ON_ERROR),
        ("exit_on_error", ErrorHandling.EXIT_ON_ERROR),
        ("panic", ErrorHandling.PANIC_ON_ERROR),
        ("escalate", ErrorHandling.PANIC_ON_ERROR),
        (ErrorHandling.PANIC_ON_ERROR, ErrorHandling.PANIC_ON_ERROR),
    ],
)
def test_policy_aliases(value, expected):
    assert ErrorHandling(value) is expected


@pytest.mark.parametrize("value", ["ignore", 1, None])
def test_invalid_policy(value):
    with pytest.raises(ValueError, match="Invalid ErrorHandling"):
        ErrorHandling(value)


def test_exit_code():
    assert exit_code(ERR_HELP) == EXIT_HELP == 0
    assert exit_code(ParseError("bad", ErrorKind.BAD_SYNTAX)) == EXIT_USAGE == 2


def test_continue_returns_error():
    error = ParseError("bad", ErrorKind.BAD_SYNTAX)
    calls = []
    result = handle_parse_error(ErrorHandling.CONTINUE_ON_ERROR, error, calls.append)
    assert result is error
    assert calls == []


def test_exit_calls_collaborator():
    error = ParseError("bad", ErrorKind.UNDEFINED_FLAG)
    calls = []
    result = handle_parse_error(ErrorHandling.EXIT_ON_ERROR, error, calls.append)
    assert result is error
    assert calls == [2]


def test_panic_chains_cause():
    cause = ValueError("x")
    wrapped = parse_error(cause)
    error = ParseError("invalid value", ErrorKind.INVALID_VALUE, cause, wrapped)
    with pytest.raises(FlagPanic, match="invalid value") as excinfo:
        handle_parse_error(ErrorHandling.PANIC_ON_ERROR, error, lambda code: None)
    assert excinfo.value.error is error
    assert excinfo.value.__cause__ is cause


def test_parse_error_reason():
    outer = ParseError("outer", ErrorKind.INVALID_VALUE, wrapped=range_error())
    assert outer.reason == ErrorKind.RANGE
    assert outer.is_out_of_range
    assert not outer.is_parse_error
    assert not outer.is_help
    assert str(outer) == "outer"
    assert str(ERR_HELP) == "flag: help requested"
    assert ERR_HELP.is_help


def test_parse_error_is_immutable():
    with pytest.raises(AttributeError):
        ERR_HELP.message = "changed"
