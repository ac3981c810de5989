"""Singly linked list with a pluggable equality function and a cursor-style iterator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

EqFunction = Callable[[Any, Any], bool]


def elem_cmp(fst: Any, snd: Any) -> bool:
    """Default element equality: identical or equal values compare true."""
    return fst is snd or fst == snd


@dataclass
class _Link:
    element: Any
    next: Optional["_Link"] = None


class LinkedList:
    """A singly linked list whose membership test uses a supplied equality function."""

    def __init__(self, eq: EqFunction = elem_cmp) -> None:
        self._eq = eq
        self._first: Optional[_Link] = None
        self._last: Optional[_Link] = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _links(self) -> Iterator[_Link]:
        link = self._first
        while link is not None:
            yield link
            link = link.next

    def _link_at(self, index: int) -> _Link:
        for position, link in enumerate(self._links()):
            if position == index:
                return link
        raise IndexError(f"index {index} out of range")

    def append(self, value: Any) -> None:
        """Add value at the end of the list."""
        link = _Link(value)
        if self._last is None:
            self._first = link
        else:
            self._last.next = link
        self._last = link
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add value at the front of the list."""
        self._first = _Link(value, self._first)
        if self._last is None:
            self._last = self._first
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert value so that it ends up at position index (0 to len inclusive)."""
        if index < 0 or index > self._size:
            raise IndexError(f"insert index {index} out of range 0..{self._size}")
        if index == 0:
            self.prepend(value)
            return
        before = self._link_at(index - 1)
        before.next = _Link(value, before.next)
        if before is self._last:
            self._last = before.next
        self._size += 1

    def remove(self, index: int) -> Any:
        """Remove and return the element at index, clamping index into the list's bounds."""
        if self._size == 0:
            raise IndexError("remove from empty list")
        index = max(0, min(index, self._size - 1))
        if index == 0:
            removed = self._first
            self._first = removed.next
            if self._first is None:
                self._last = None
        else:
            before = self._link_at(index - 1)
            removed = before.next
            before.next = removed.next
            if removed is self._last:
                self._last = before
        self._size -= 1
        return removed.element

    def get(self, index: int) -> Any:
        """Return the element at index (0 to len - 1)."""
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of range")
        return self._link_at(index).element

    def contains(self, value: Any) -> bool:
        """True if some element equals value under the list's equality function."""
        return any(self._eq(link.element, value) for link in self._links())

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for link in self._links():
            yield link.element

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Remove every element."""
        self._first = None
        self._last = None
        self._size = 0

    def all(self, prop: Callable[[Any], bool]) -> bool:
        """True if prop holds for every element; stops at the first failure."""
        return all(prop(element) for element in self)

    def any(self, prop: Callable[[Any], bool]) -> bool:
        """True if prop holds for some element; stops at the first success."""
        return any(prop(element) for element in self)

    def apply_to_all(self, fun: Callable[[Any], Any]) -> None:
        """Replace every element with fun(element)."""
        for link in self._links():
            link.element = fun(link.element)

    def iterator(self) -> "ListIterator":
        """Return a cursor positioned at the start of the list."""
        return ListIterator(self)


class ListIterator:
    """A cursor over a LinkedList that can also insert and remove elements."""

    def __init__(self, linked_list: LinkedList) -> None:
        self._list = linked_list
        self._current: Optional[_Link] = linked_list._first

    def _require_current(self) -> _Link:
        if self._current is None:
            raise IndexError("iterator has no current element")
        return self._current

    def _previous(self, target: _Link) -> Optional[_Link]:
        previous = None
        for link in self._list._links():
            if link is target:
                return previous
            previous = link
        raise IndexError("iterator position is no longer in the list")

    def has_next(self) -> bool:
        """True if there is an element after the current one."""
        return self._current is not None and self._current.next is not None

    def next(self) -> Any:
        """Step forward and return the new current element."""
        if not self.has_next():
            raise IndexError("iterator has no next element")
        self._current = self._current.next
        return self._current.element

    def current(self) -> Any:
        """Return the element the cursor is on."""
        return self._require_current().element

    def remove(self) -> Any:
        """Remove and return the current element.

        The cursor moves to the following element, or to the new last
        element when the last one was removed.
        """
        current = self._require_current()
        lst = self._list
        previous = self._previous(current)
        if previous is None:
            lst._first = current.next
            if lst._first is None:
                lst._last = None
            self._current = current.next
        else:
            previous.next = current.next
            if current is lst._last:
                lst._last = previous
                self._current = previous
            else:
                self._current = current.next
        lst._size -= 1
        return current.element

    def insert(self, element: Any) -> None:
        """Insert element before the current one, making the current element its next."""
        lst = self._list
        if lst._size == 0:
            lst.append(element)
            self._current = lst._first
            return
        if self._current is None:
            lst.append(element)
            return
        previous = self._previous(self._current)
        link = _Link(element, self._current)
        if previous is None:
            lst._first = link
        else:
            previous.next = link
        lst._size += 1

    def reset(self) -> None:
        """Move the cursor back to the first element."""
        self._current = self._list._first