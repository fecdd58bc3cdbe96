import io

import pytest

from flagkit import ERR_HELP, ErrorHandling, ErrorKind, FlagPanic, FlagSet


@pytest.mark.parametrize(
    "define,argument",
    [
        (lambda flags: flags.int_flag("f"), "x"),
        (lambda flags: flags.int64_flag("f"), "1.5"),
        (lambda flags: flags.uint_flag("f"), "abc"),
        (lambda flags: flags.uint64_flag("f"), "0x"),
        (lambda flags: flags.float_flag("f"), "1e"),
        (lambda flags: flags.double_flag("f"), "one"),
        (lambda flags: flags.decimal_flag("f"), "1,5"),
        (lambda flags: flags.duration_flag("f"), "2m"),
    ],
)
def test_parse_errors(define, argument):
    flags = FlagSet("test", output=io.StringIO())
    flag = define(flags)
    error = flags.parse(["-f", argument])
    assert error is not None
    assert error.kind == ErrorKind.INVALID_VALUE
    assert error.reason == ErrorKind.PARSE
    assert error.is_parse_error
    assert not error.is_out_of_range
    assert str(error) == f'invalid value "{argument}" for flag -f: parse error'
    assert flag.value == flag.default


@pytest.mark.parametrize(
    "define,argument",
    [
        (lambda flags: flags.int_flag("f"), "2147483648"),
        (lambda flags: flags.int_flag("f"), "-2147483649"),
        (lambda flags: flags.int64_flag("f"), "9223372036854775808"),
        (lambda flags: flags.uint_flag("f"), "4294967296"),
        (lambda flags: flags.uint_flag("f"), "-1"),
        (lambda flags: flags.uint64_flag("f"), "18446744073709551616"),
        (lambda flags: flags.uint64_flag("f"), "0x10000000000000000"),
        (lambda flags: flags.decimal_flag("f"), "1e30"),
        (lambda flags: flags.duration_flag("f"), "24:00:00"),
    ],
)
def test_range_errors(define, argument):
    flags = FlagSet("test", output=io.StringIO())
    flag = define(flags)
    error = flags.parse([f"-f={argument}"])
    assert error is not None
    assert error.kind == ErrorKind.INVALID_VALUE
    assert error.is_out_of_range
    assert isinstance(error.cause, OverflowError)
    assert str(error) == f'invalid value "{argument}" for flag -f: value out of range'
    assert flag.value == flag.default


def test_integer_bounds_are_inclusive():
    flags = FlagSet("test", output=io.StringIO())
    small = flags.int_flag("small")
    large = flags.uint64_flag("large")
    assert flags.parse(["-small=-2147483648", "-large=18446744073709551615"]) is None
    assert small.value == -(2**31)
    assert large.value == 2**64 - 1


def test_floats_saturate():
    flags = FlagSet("test", output=io.StringIO())
    single = flags.float_flag("single")
    double = flags.double_flag("double")
    assert flags.parse(["-single=1e39", "-double=-1e309"]) is None
    assert single.value == float("inf")
    assert double.value == float("-inf")


class ExitRecorder:
    def __init__(self):
        self.codes = []

    def __call__(self, code):
        self.codes.append(code)


@pytest.mark.parametrize(
    "argument,code",
    [
        ("-h", 0),
        ("-help", 0),
        ("--help", 0),
        ("-undefined", 2),
        ("---bad", 2),
    ],
)
def test_exit_on_error_codes(argument, code):
    recorder = ExitRecorder()
    flags = FlagSet(
        "test", ErrorHandling.EXIT_ON_ERROR, output=io.StringIO(), exit=recorder
    )
    flags.parse([argument])
    assert recorder.codes == [code]


def test_exit_on_error_uses_system_exit():
    flags = FlagSet("test", ErrorHandling.EXIT_ON_ERROR, output=io.StringIO())
    with pytest.raises(SystemExit) as excinfo:
        flags.parse(["-undefined"])
    assert excinfo.value.code == 2


def test_exit_on_error_success_does_not_exit():
    recorder = ExitRecorder()
    flags = FlagSet("test", "exit", output=io.StringIO(), exit=recorder)
    flags.bool_flag("v")
    assert flags.parse(["-v"]) is None
    assert recorder.codes == []


def test_panic_on_error():
    flags = FlagSet("test", ErrorHandling.PANIC_ON_ERROR, output=io.StringIO())
    flags.int_flag("count")
    with pytest.raises(FlagPanic) as excinfo:
        flags.parse(["-count", "ten"])
    assert str(excinfo.value) == 'invalid value "ten" for flag -count: parse error'
    assert excinfo.value.error.kind == ErrorKind.INVALID_VALUE
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_panic_on_help():
    flags = FlagSet("test", "escalate", output=io.StringIO())
    with pytest.raises(FlagPanic) as excinfo:
        flags.parse(["-help"])
    assert excinfo.value.error is ERR_HELP
    assert excinfo.value.__cause__ is None


def test_continue_on_error_reports_to_output():
    output = io.StringIO()
    flags = FlagSet("app", output=output)
    flags.int_flag("i")
    flags.set_output(output)
    flags.usage = lambda: output.write("Usage of app:\n")
    error = flags.parse(["-undefined"])
    assert error is not None
    assert output.getvalue() == "flag provided but not defined: -undefined\nUsage of app:\n"


def test_exact_output_for_undefined_flag():
    output = io.StringIO()
    flags = FlagSet("app", output=output)
    error = flags.parse(["-i"])
    assert str(error) == "flag provided but not defined: -i"
    assert output.getvalue() == "flag provided but not defined: -i\nUsage of app:\n"


@pytest.mark.parametrize(
    "define",
    [
        lambda flags: flags.int_flag("n"),
        lambda flags: flags.int64_flag("n"),
        lambda flags: flags.uint64_flag("n"),
    ],
)
def test_very_long_integer_is_out_of_range(define):
    flags = FlagSet("test", output=io.StringIO())
    flag = define(flags)
    error = flags.parse(["-n=" + "9" * 5000])
    assert error is not None
    assert error.is_out_of_range
    assert "digits" not in str(error)
    assert flag.value == 0


def test_leading_zeros_do_not_count_toward_width():
    flags = FlagSet("test", output=io.StringIO())
    flag = flags.uint64_flag("n")
    assert flags.parse(["-n=" + "0" * 5000 + "42"]) is None
    assert flag.value == 42


def test_float_max_is_not_saturated():
    flags = FlagSet("test", output=io.StringIO())
    single = flags.float_flag("single")
    assert flags.parse(["-single=3.4028235e38"]) is None
    assert single.value == 3.4028234663852886e38
    assert flags.parse(["-single=-3.4028235e38"]) is None
    assert single.value == -3.4028234663852886e38
    assert flags.parse(["-single=3.4028236e38"]) is None
    assert single.value == float("inf")
