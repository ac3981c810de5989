"""A small in-memory list of store items that can be listed and edited."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Sequence

from shopcore.prompts import Console


@dataclass
class Item:
    """An item for sale; price is in öre."""

    name: str
    desc: str
    price: int
    shelf: str

    def describe(self) -> str:
        """A multi-line description of the item."""
        return (
            f"Name: {self.name}\n"
            f"Desc: {self.desc}\n"
            f"Price: {self.price // 100}.{self.price % 100}\n"
            f"Shelf: {self.shelf}\n"
        )


def input_item(console: Console) -> Item:
    """Ask for every field of an item and return it."""
    name = console.ask_question_string("Enter Name: ")
    desc = console.ask_question_string("Enter Desc: ")
    price = console.ask_question_int("Enter Price: ")
    shelf = console.ask_question_shelf("Enter Shelf: ")
    return Item(name, desc, price, shelf)


def random_name(
    first: Sequence[str],
    second: Sequence[str],
    third: Sequence[str],
    rng: Optional[random.Random] = None,
) -> str:
    """Build a name of the form "<first>-<second> <third>" from random picks."""
    pick = rng if rng is not None else random.Random()
    return f"{pick.choice(first)}-{pick.choice(second)} {pick.choice(third)}"


def edit_items(items: MutableSequence[Item], console: Console) -> int:
    """Ask for an item number (1-based), show it and replace it with new input.

    Returns the 0-based index of the replaced item.
    """
    while True:
        number = console.ask_question_int("Number to Edit: ")
        if 1 <= number <= len(items):
            index = number - 1
            console.out.write(items[index].describe())
            items[index] = input_item(console)
            return index
        console.out.write("Non item!\n")


def list_items(items: Sequence[Item]) -> str:
    """Numbered list of item names, one per line."""
    lines: List[str] = [f"{number}. {item.name}\n" for number, item in enumerate(items, 1)]
    return "".join(lines)