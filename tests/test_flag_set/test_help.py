import io

import pytest

from flagkit import ERR_HELP, FlagSet


def test_help():
    output = io.StringIO()
    help_called = []

    flags = FlagSet("help test", output=output)
    flags.usage = lambda: help_called.append(True)
    flag = flags.bool_flag("flag", False, "regular flag")

    # Regular flag invocation should work
    assert flags.parse(["--flag=true"]) is None
    assert flag.value is True
    assert not help_called

    # Help flag should work as expected.
    error = flags.parse(["--help"])
    assert error is ERR_HELP
    assert help_called == [True]

    # If we define a help flag, that should override.
    help_flag = flags.bool_flag("help", False, "help flag")
    help_called.clear()
    assert flags.parse(["--help"]) is None
    assert help_flag.value is True
    assert not help_called

    # If we define a help flag, that should override when the default is true.
    flags.bool_flag("h", True, "help flag")
    assert flags.parse(["-h"]) is None
    assert not help_called


@pytest.mark.parametrize("token", ["-h", "--h", "-help", "--help", "-HELP", "--Help", "-H"])
def test_help_aliases(token):
    output = io.StringIO()
    flags = FlagSet("app", output=output)
    flags.bool_flag("v", False, "verbose")
    error = flags.parse([token])
    assert error is ERR_HELP
    assert error.is_help
    assert output.getvalue() == "Usage of app:\n  -v\tverbose\n"


def test_help_with_value_is_still_help():
    flags = FlagSet(output=io.StringIO())
    assert flags.parse(["-help=yes"]) is ERR_HELP


def test_help_stops_parsing():
    flags = FlagSet(output=io.StringIO())
    verbose = flags.bool_flag("v")
    assert flags.parse(["-h", "-v"]) is ERR_HELP
    assert verbose.value is False
    assert flags.args == ["-v"]
