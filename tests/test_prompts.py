import io

import pytest

from shopcore.prompts import (
    Console,
    is_float,
    is_number,
    is_positive,
    is_shelf,
    not_empty,
    valid_command,
    valid_command_webstore,
    valid_int,
)


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


@pytest.mark.parametrize("text", ["A00", "Z99", "F12"])
def test_is_shelf_accepts(text):
    assert is_shelf(text) is True


@pytest.mark.parametrize("text", ["AA0", "000", "0A0", "0AA", "", "AAAA", "A00A", "a12"])
def test_is_shelf_rejects(text):
    assert is_shelf(text) is False


@pytest.mark.parametrize("text", ["A111", "1A11", "111A", "11A1", "", "AAAA"])
def test_is_number_rejects(text):
    assert is_number(text) is False


@pytest.mark.parametrize("text", ["0", "42", "-17"])
def test_is_number_accepts(text):
    assert is_number(text) is True


def test_is_positive_rejects_sign_and_empty():
    assert is_positive("12") is True
    assert is_positive("-12") is False
    assert is_positive("") is False


def test_is_float_needs_exactly_one_dot():
    assert is_float("1.5") is True
    assert is_float("-0.25") is True
    assert is_float("15") is False
    assert is_float("1.2.3") is False
    assert is_float("1a.5") is False
    assert is_float("") is False


def test_not_empty():
    assert not_empty("x") is True
    assert not_empty("") is False


def test_valid_commands():
    assert valid_command("S") is True
    assert valid_command("x") is False
    assert valid_command_webstore("R") is True
    assert valid_command_webstore("L") is False
    assert [valid_int(n) for n in (0, 1, 2, 3, 4)] == [False, True, True, True, False]


def test_read_string_stops_at_newline():
    console, _ = make_console("hello\nworld\n")
    assert console.read_string() == "hello"
    assert console.read_string() == "world"


def test_read_string_leaves_rest_of_long_line():
    console, _ = make_console("abcdef\n")
    assert console.read_string(4) == "abc"
    assert console.read_string(4) == "def"


def test_read_string_at_end_of_input_raises():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_string()


def test_ask_question_int_retries_until_number():
    console, out = make_console("x\n\n12\n")
    assert console.ask_question_int("Q: ") == 12
    assert out.getvalue().count("Q: ") == 3


def test_ask_question_int_negative():
    console, _ = make_console("-5\n")
    assert console.ask_question_int("Q: ") == -5


def test_ask_question_int_safe_returns_minus_one_on_text():
    console, _ = make_console("abc\n7\n")
    assert console.ask_question_int_safe("Q: ", 10) == -1
    assert console.ask_question_int_safe("Q: ", 10) == 7


def test_ask_question_float():
    console, _ = make_console("3\n2.5\n")
    assert console.ask_question_float("F: ") == 2.5


def test_ask_question_string_skips_empty():
    console, _ = make_console("\nname\n")
    assert console.ask_question_string("S: ") == "name"


def test_ask_question_shelf_retries():
    console, _ = make_console("a12\nA1\nB34\n")
    assert console.ask_question_shelf("Shelf: ") == "B34"


@pytest.mark.parametrize("answer,expected", [("y", True), ("Y", True), ("j", True), ("J", True), ("n", False), ("", False)])
def test_choice_prompt(answer, expected):
    console, out = make_console(answer + "\n")
    assert console.choice_prompt("Sure?") is expected
    assert "Sure?" in out.getvalue()


def test_prompt_string_returns_answer():
    console, out = make_console("value\n")
    assert console.prompt_string("P: ", "Q\n", "Again?") == "value"
    assert out.getvalue().startswith("Q\n")


def test_prompt_string_retry_then_answer():
    console, _ = make_console("\ny\nlater\n")
    assert console.prompt_string("P: ", "Q\n", "Again?") == "later"


def test_prompt_string_give_up():
    console, _ = make_console("\nn\n")
    assert console.prompt_string("P: ", "Q\n", "Again?") is None


def test_continue_printing():
    assert make_console("y\n")[0].continue_printing() is True
    assert make_console("yes\n")[0].continue_printing() is False


def test_menus_retry_until_valid():
    console, _ = make_console("5\n0\n2\n")
    assert console.ask_question_menu() == 2
    console, _ = make_console("9\n3\n")
    assert console.ask_question_edit() == 3


def test_string_menus_retry_until_valid():
    console, _ = make_console("x\nT\n")
    assert console.ask_question_menu_cart() == "T"
    console, _ = make_console("L\nR\n")
    assert console.ask_question_menu_webstore() == "R"