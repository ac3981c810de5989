import pytest

from shopcore.options import (
    BLUE,
    LIST_LEN,
    NO_COLOR,
    RED,
    SUBTEST_LEN,
    OptionError,
    Options,
    colorize,
    format_help,
    parse_args,
    serror,
    show_msg,
    slog,
)


def test_defaults():
    opts = Options()
    assert opts.list_length == 10
    assert opts.subtest_length_max == SUBTEST_LEN
    assert not (opts.use_list or opts.debug or opts.tests or opts.log or opts.deep_debug)
    assert opts.active_tests() == []


def test_colorize_red():
    assert colorize("x", RED) == "\033[0;31mx\033[0m"


def test_boolean_flags():
    opts = parse_args(["-l", "-t", "-D", "-d"])
    assert opts.log and opts.tests and opts.deep_debug and opts.debug


@pytest.mark.parametrize("flag", ["--log", "-l"])
def test_log_flag(flag):
    assert parse_args([flag]).log is True


def test_enable_subtests():
    opts = parse_args(["-e", "3", "--use-test", "7"])
    assert opts.test_active(3)
    assert opts.test_active(7)
    assert not opts.test_active(4)
    assert opts.active_tests() == [3, 7]


def test_too_many_subtests():
    opts = Options()
    for n in range(SUBTEST_LEN):
        opts.enable_subtest(n)
    with pytest.raises(OptionError):
        opts.enable_subtest(1)


def test_set_length():
    opts = parse_args(["-s", "length", "42"])
    assert opts.list_length == 42
    assert opts.use_list is False


def test_set_list():
    opts = parse_args(["--set", "list", "3", "5", "6", "7", "-t"])
    assert opts.values == [5, 6, 7]
    assert opts.list_length == 3
    assert opts.use_list
    assert opts.tests


def test_set_list_missing_elements():
    with pytest.raises(OptionError):
        parse_args(["-s", "list", "4", "1"])


def test_set_span():
    opts = parse_args(["-s", "span", "2", "5"])
    assert opts.values == list(range(2, 6))
    assert opts.values[0] == 2 and opts.values[-1] == 5
    assert opts.use_list


def test_span_too_large():
    with pytest.raises(OptionError):
        parse_args(["-s", "span", "0", str(LIST_LEN + 1)])


def test_exit_flag_is_invalid():
    with pytest.raises(OptionError, match="-x"):
        parse_args(["-x"])


def test_help_stops_parsing():
    opts = parse_args(["-h", "-t"])
    assert opts.help is True
    assert opts.tests is False


def test_unknown_arguments_ignored():
    opts = parse_args(["whatever", "-t"])
    assert opts.tests is True


def test_missing_value():
    with pytest.raises(OptionError):
        parse_args(["-e"])


def test_existing_options_updated():
    opts = Options()
    result = parse_args(["-l"], opts)
    assert result is opts
    assert opts.log


def test_non_numeric_value_reads_as_zero():
    opts = parse_args(["-e", "abc"])
    assert opts.subtests == [0]


def test_format_help_mentions_flags():
    text = format_help()
    assert text.startswith("Usage (--help or -h will show this message):\n")
    assert colorize("-t --run-tests            (Run tests)", BLUE) in text
    assert f"({LIST_LEN})" in text


def test_show_msg(capsys):
    show_msg("LOG: ", "func", "msg", 4)
    out = capsys.readouterr().out
    assert out == f"{RED}LOG: {NO_COLOR}{BLUE}func{NO_COLOR}(4)msg\n"


def test_slog_and_serror(capsys):
    slog("f", "m", 1)
    serror("f", "m", 2)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith(colorize("LOG: ", RED))
    assert lines[1].startswith(colorize("ERROR: ", RED))
    assert lines[1].endswith("(2)m")