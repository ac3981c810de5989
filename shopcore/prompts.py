"""Input validation and interactive question helpers for terminal prompts."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from shopcore.options import GREEN, NO_COLOR

BOLD = "\033[1m"
ITALIC = "\033[3m"
NORMAL = "\033[0m"

BUFFER_SIZE = 255
COMMAND_SIZE = 10

_DIGITS = frozenset("0123456789")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

_CART_COMMANDS = "SsLlTtGgHhAIiBb"
_WEBSTORE_COMMANDS = "SsTtRrGgHhIi"

_RETRY = "Använd ett giltigt kommando: \n"


def not_empty(text: str) -> bool:
    """True for a non-empty string."""
    return len(text) > 0


def is_shelf(text: str) -> bool:
    """True for a shelf name: one capital letter followed by two digits."""
    return (
        len(text) == 3
        and text[0] in _UPPER
        and all(char in _DIGITS for char in text[1:])
    )


def is_positive(text: str) -> bool:
    """True for a non-empty string of decimal digits."""
    return bool(text) and all(char in _DIGITS for char in text)


def is_number(text: str) -> bool:
    """True for an optionally negative string of decimal digits."""
    if not text:
        return False
    digits = text[1:] if text[0] == "-" else text
    return all(char in _DIGITS for char in digits)


def is_float(text: str) -> bool:
    """True for an optionally negative number with exactly one decimal point."""
    if not text:
        return False
    body = text[1:] if text[0] == "-" else text
    if any(char != "." and char not in _DIGITS for char in body):
        return False
    return body.count(".") == 1


def valid_command(command: str) -> bool:
    """True if command occurs in the cart menu's command letters."""
    return command in _CART_COMMANDS


def valid_command_webstore(command: str) -> bool:
    """True if command occurs in the store menu's command letters."""
    return command in _WEBSTORE_COMMANDS


def valid_int(command: int) -> bool:
    """True for the numeric menu choices 1, 2 and 3."""
    return command in (1, 2, 3)


def _to_int(text: str) -> int:
    return int(text) if text.strip("-") else 0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class Console:
    """Reads answers from an input stream and writes questions to an output stream."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.inp = stdin if stdin is not None else sys.stdin
        self.out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)

    def read_string(self, size: int = BUFFER_SIZE) -> str:
        """Read one line of at most size - 1 characters.

        Reading stops at a newline, which is consumed, or when the limit is
        reached, in which case the rest of the line stays unread.
        """
        if size < 2:
            raise ValueError("buffer size must be at least 2")
        chars = []
        while len(chars) < size - 1:
            char = self.inp.read(1)
            if char == "":
                if not chars:
                    raise EOFError("end of input")
                break
            if char == "\n":
                break
            chars.append(char)
        return "".join(chars)

    def ask_question(
        self, question: str, check: Callable[[str], bool], convert: Callable[[str], Any]
    ) -> Any:
        """Ask until an answer passes check, then return convert(answer)."""
        while True:
            self._write(question)
            answer = self.read_string(BUFFER_SIZE)
            if check(answer):
                return convert(answer)

    def ask_question_string(self, question: str) -> str:
        return self.ask_question(question, not_empty, str)

    def ask_question_shelf(self, question: str) -> str:
        return self.ask_question(question, is_shelf, str)

    def ask_question_int(self, question: str) -> int:
        return self.ask_question(question, is_number, _to_int)

    def ask_question_int_safe(self, question: str, size: int = BUFFER_SIZE) -> int:
        """Ask once; return the number given, or -1 if the answer is not a number."""
        self._write(question)
        answer = self.read_string(size)
        return _to_int(answer) if is_number(answer) else -1

    def ask_question_float(self, question: str) -> float:
        return self.ask_question(question, is_float, _to_float)

    def choice_prompt(self, prompt: str) -> bool:
        """Ask a yes/no question; Y, y, J or j count as yes."""
        self._write(f"┃ ===[  {BOLD}{prompt}{NORMAL}  ]===\n")
        self._write(f"┃ {GREEN}[Y]{NO_COLOR} {ITALIC}Yes{NORMAL}\n")
        self._write(f"┃ {GREEN}[N]{NO_COLOR} {ITALIC}No{NORMAL}\n")
        self._write("┃ > ")
        answer = self.read_string(COMMAND_SIZE)
        return answer[:1] in ("Y", "y", "J", "j") and answer != ""

    def prompt_string(
        self, prompt: str, question: str, prompt_again: str, size: int = BUFFER_SIZE
    ) -> Optional[str]:
        """Ask for a non-empty string, offering to retry after an empty answer.

        Returns the answer, or None when the user gives up.
        """
        self._write(question)
        while True:
            self._write(prompt)
            answer = self.read_string(size)
            self._write(answer + "\n")
            if not_empty(answer) or not self.choice_prompt(prompt_again):
                break
        if not_empty(answer):
            return answer
        self._write("!" + answer)
        return None

    def continue_printing(self) -> bool:
        """Ask whether to continue; only y or Y count as yes."""
        answer = self.ask_question_string("Continue? y/n\n> ")
        return answer in ("y", "Y")

    def _ask_valid_int(self, header: str, question: str) -> int:
        self._write(header + "\n")
        command = self.ask_question_int(question)
        while not valid_int(command):
            command = self.ask_question_int(_RETRY)
        return command

    def _ask_valid_command(
        self, header: str, question: str, valid: Callable[[str], bool]
    ) -> str:
        self._write(header + "\n")
        command = self.ask_question_string(question)
        while not valid(command):
            command = self.ask_question_string(_RETRY)
        return command

    def ask_question_menu(self) -> int:
        return self._ask_valid_int(
            "--- Huvudmeny ---",
            "[1] Meny för Webstore \n[2] Meny för Cart \n"
            "[3] Avsluta körning utan att checka ut\n",
        )

    def ask_question_edit(self) -> int:
        return self._ask_valid_int(
            "--- Redigera Vara ---",
            "[1] Ändra beskrivning \n[2] Ändra pris \n[3] Ändra stocken\n",
        )

    def ask_question_menu_cart(self) -> str:
        return self._ask_valid_command(
            "--- Meny för kundvagnen ---",
            "[S]kapa en ny kundvagn \n[B]yt cart id \n[L]ägga till en vara \n"
            "[T]a bort en vara \nÅn[g]ra senaste ändringen \nLista [h]ela kundvagnen \n"
            "[A]vsluta och checka ut nuvarande kundvagn\n T[i]llbaka till huvudmenyn\n",
            valid_command,
        )

    def ask_question_menu_webstore(self) -> str:
        return self._ask_valid_command(
            "--- Meny för Webstore ---",
            "[S]kapa en ny vara och lägg till den \n[T]a bort en vara \n"
            "[R]edigera en vara \nÅn[g]ra senaste ändringen \nLista [h]ela storage \n"
            "T[i]llbaka till huvudmenyn\n",
            valid_command_webstore,
        )