"""Command-line options shared by the store tools, plus coloured message helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

RED = "\033[0;31m"
BLUE = "\033[0;34m"
GREEN = "\033[0;32m"
NO_COLOR = "\033[0m"

SUBTEST_LEN = 20
LIST_LEN = 2000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class OptionError(ValueError):
    """Raised when the command line cannot be accepted."""


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: anything unreadable counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def colorize(text: str, color: str) -> str:
    """Wrap text in an ANSI colour code and a reset code."""
    return f"{color}{text}{NO_COLOR}"


@dataclass
class Options:
    """Settings collected from the command line."""

    values: List[int] = field(default_factory=list)
    list_length: int = 10
    subtests: List[int] = field(default_factory=list)
    subtest_length_max: int = SUBTEST_LEN
    use_list: bool = False
    debug: bool = False
    tests: bool = False
    log: bool = False
    deep_debug: bool = False
    help: bool = False

    def test_active(self, test_number: int) -> bool:
        """True if test_number has been enabled."""
        return test_number in self.subtests

    def enable_subtest(self, test_number: int) -> None:
        """Enable a subtest; at most subtest_length_max may be enabled."""
        if len(self.subtests) >= self.subtest_length_max:
            raise OptionError("Invalid test")
        self.subtests.append(test_number)
        if self.debug:
            print(f"ENABLED SUBTEST (KEY: {test_number})")

    def active_tests(self) -> List[int]:
        """The enabled test numbers below subtest_length_max, in ascending order."""
        return [n for n in range(self.subtest_length_max) if self.test_active(n)]


def _arg(argv: Sequence[str], index: int, flag: str) -> str:
    if index >= len(argv):
        raise OptionError(f"The flag '{flag}' is missing a value")
    return argv[index]


def parse_args(argv: Sequence[str], options: Optional[Options] = None) -> Options:
    """Parse command-line arguments (without the program name) into options.

    Parsing stops early when help is asked for; options.help is then set.
    Unknown arguments are ignored.
    """
    opts = options if options is not None else Options()
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in ("--log", "-l"):
            opts.log = True
        elif arg in ("--help", "-h"):
            opts.help = True
            return opts
        elif arg in ("--use-test", "-e"):
            opts.enable_subtest(_atoi(_arg(argv, i + 1, arg)))
            i += 1
        elif arg in ("--set", "-s"):
            setting = _arg(argv, i + 1, arg)
            if setting == "length":
                value = _atoi(_arg(argv, i + 2, setting))
                opts.list_length = value
                print(f"Setting: {setting} = {value}")
                i += 2
            elif setting == "list":
                count = _atoi(_arg(argv, i + 2, setting))
                start = i + 3
                if start + count > len(argv):
                    raise OptionError(f"The list needs {count} elements")
                opts.values = [_atoi(text) for text in argv[start:start + count]]
                i += count + 2
                opts.use_list = True
                opts.list_length = count
            elif setting == "span":
                low = _atoi(_arg(argv, i + 2, setting))
                high = _atoi(_arg(argv, i + 3, setting))
                if high - low > LIST_LEN:
                    raise OptionError(f"Span can be a max of {LIST_LEN}")
                opts.values = list(range(low, high + 1))
                i += 3
                opts.use_list = True
                opts.list_length = high - low
        elif arg in ("--deep-debug", "-D"):
            opts.deep_debug = True
        elif arg in ("-d", "--debug", "-v"):
            print("Debugging enabled")
            opts.debug = True
        elif arg in ("-w", "--working"):
            print("Working?")
            print(f"Next: {_atoi(_arg(argv, i + 1, arg))}")
            i += 1
        elif arg in ("--run-tests", "-t"):
            opts.tests = True
        elif arg in ("--exit", "-x"):
            raise OptionError(f"The flag '{arg}' is invalid")
        i += 1
    return opts


def format_help() -> str:
    """The usage text, coloured for a terminal."""

    def blue(line: str) -> str:
        return colorize(line, BLUE) + "\n"

    return "".join(
        [
            "Usage (--help or -h will show this message):\n",
            blue("-h --help                 (Show this message)"),
            blue("-d --debug (-v)           (Enable debug/verbose output)"),
            blue("-t --run-tests            (Run tests)"),
            blue("-l -log            (Enable logging)"),
            blue("-D --deep-debug           (More detailed debugging)"),
            blue("-t --enable-test          (Enable part of a test or a test)"),
            blue("-s --set list_length <length>"),
            "       (Length of linked list <length> < 100)\n",
            blue(
                "-e --enable-test  (Run separate tests (subtests) that checks "
                "diffrent things."
            ),
            blue("-s --set list <size> <e_0> ... <e_(size - 1)>"),
            "       (Length and individual elements of the linked list)\n",
            blue("-s --set span <lower> <upper> (set option)"),
            "       (All integers between <lower> and <upper> will be used in the "
            "linked list)\n",
            blue("-s --set list_length <length>  (Set the length of the list)"),
            "       (This changes how long the used list is, but it must be lower "
            "than\n",
            f"        the allocated list size ({LIST_LEN}), and the values of the list "
            "defaults to\n",
            "        all natural numbers from 0 --> <length>)\n",
        ]
    )


def show_msg(kind: str, function: str, message: str, number: int) -> None:
    """Print a coloured one-line message: kind in red, function in blue."""
    print(f"{colorize(kind, RED)}{colorize(function, BLUE)}({number}){message}")


def slog(function: str, message: str, number: int) -> None:
    """Print a log message."""
    show_msg("LOG: ", function, message, number)


def serror(function: str, message: str, number: int) -> None:
    """Print an error message."""
    show_msg("ERROR: ", function, message, number)