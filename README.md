# shopcore

Building blocks for a small terminal webstore. It has no dependencies outside the standard library.

## Modules

- `shopcore.linked_list`
  - `LinkedList` is a singly linked list with a pluggable equality function (`elem_cmp` by default), which `contains` and `in` use.
  - It supports `append`, `prepend`, `insert(index, value)` and `get(index)`. `insert` accepts indexes 0 to `len`; both raise `IndexError` when the index is out of range.
  - `remove(index)` clamps the index into the list's bounds and returns the removed element.
  - It also has `all`, `any`, `apply_to_all`, `clear` and `is_empty`, and it supports iteration.
  - `iterator()` returns a `ListIterator`. This is a cursor with `current`, `has_next`, `next`, `reset`, `insert` and `remove`:
    - `insert` places the new element before the current one.
    - `remove` moves the cursor on to the following element.
- `shopcore.hash_table`
  - `HashTable` is a separate-chaining table with optional hash and equality functions. Integer keys hash to themselves by default.
  - It starts with 17 buckets. Once the size exceeds the load factor (0.75) times the capacity, it grows through the primes 31, 67, 127, …, 16381.
  - `lookup` and `remove` raise `KeyError` for a missing key, while `get` returns a default.
  - `increase` adds one to a stored value.
  - `keys()` and `values()` return `LinkedList`s in the same order.
  - Helpers: `string_knr_hash`, `extract_int_hash_key`, `eq_elem_int`, `eq_elem_string`.
- `shopcore.options`
  - `parse_args(argv, options=None)` fills an `Options` dataclass from flags such as:
    - `-l/--log`, `-d/--debug/-v`, `-D/--deep-debug`, `-t/--run-tests`
    - `-e/--use-test N`
    - `-s/--set length N`, `-s/--set list N e1 … eN`, `-s/--set span LOW HIGH`
  - `-h/--help` sets `options.help` and stops parsing.
  - `-x/--exit`, a missing value, too many subtests or a span over 2000 raise `OptionError`.
  - `format_help()` returns the usage text.
  - `colorize`, `show_msg`, `slog` and `serror` print coloured messages.
- `shopcore.prompts`
  - Validators: `not_empty`, `is_shelf` (a capital letter and two digits, e.g. `A12`), `is_positive`, `is_number`, `is_float`, `valid_command`, `valid_command_webstore`, `valid_int`.
  - `Console(stdin, stdout)` asks questions on any text streams and repeats until the answer is valid. Its methods are `ask_question_string`, `ask_question_int`, `ask_question_float`, `ask_question_shelf`, `choice_prompt` and the menu questions.
  - `read_string` raises `EOFError` at the end of input.
- `shopcore.items`
  - `Item` is a record of name, description, price in öre and shelf; `describe()` returns its text.
  - `input_item` asks for each field.
  - `edit_items` replaces an item chosen by its 1-based number.
  - `list_items` returns a numbered list of names.
  - `random_name` builds names of the form `first-second third`.
- `shopcore.cat`
  - `cat(path, out)` writes a file with a running line counter.
  - `numbered` produces that output from text chunks.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]`, then run `pytest`.

## Examples

```python
from shopcore.linked_list import LinkedList, elem_cmp

items = LinkedList(elem_cmp)
items.append(1)
items.append(2)
items.insert(0, 0)
assert list(items) == [0, 1, 2]
```

```python
from shopcore.hash_table import HashTable, string_knr_hash

stock = HashTable(string_knr_hash)
stock.insert("Apple", 128)
stock.increase("Apple")
assert stock.lookup("Apple") == 129
```

```python
import io
from shopcore.prompts import Console, is_shelf

assert is_shelf("A12")
console = Console(stdin=io.StringIO("abc\n42\n"), stdout=io.StringIO())
assert console.ask_question_int("Number: ") == 42
```

```python
from shopcore.options import parse_args

options = parse_args(["--log", "-s", "span", "1", "4"])
assert options.log and options.values == [1, 2, 3, 4]
```

## Command line

To print one or more files with line numbers:

```
shopcore-cat notes.txt other.txt
```

With no file names, it prints a usage line. A file that cannot be opened is reported on standard error, and the exit status is then 1.

## What this package does not do

This package has no merchandise database, no shopping carts, no checkout and no interactive store menu. It only supplies the data structures, option parsing and prompt helpers that such a program would be built on.