"""Doubly-linked node list with stable item handles.

A ``ListItem`` obtained from a list keeps pointing at the same entry no matter
how many other entries are inserted or removed around it, so several
expansions can splice into one body concurrently, each holding its own handle.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ListItem(Generic[T]):
    """A single entry of a NodeList; the handle used for positional edits."""

    __slots__ = ("data", "prev", "next", "owner")

    def __init__(self, data: T) -> None:
        self.data = data
        self.prev: ListItem[T] | None = None
        self.next: ListItem[T] | None = None
        self.owner: NodeList[T] | None = None

    def __repr__(self) -> str:
        return f"ListItem({self.data!r})"


class NodeList(Generic[T]):
    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: ListItem[T] | None = None
        self.tail: ListItem[T] | None = None
        self._size = 0
        for data in items:
            self.append(data)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NodeList[T]:
        return cls(items)

    # --- inspection -----------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        for item in self.items():
            yield item.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"NodeList({list(self)!r})"

    def items(self) -> Iterator[ListItem[T]]:
        """Yield item handles in order.

        The successor is read before each yield, so the caller may remove the
        current item while iterating.
        """
        cursor = self.head
        while cursor is not None:
            following = cursor.next
            yield cursor
            cursor = following

    @property
    def first(self) -> T | None:
        return self.head.data if self.head is not None else None

    @property
    def last(self) -> T | None:
        return self.tail.data if self.tail is not None else None

    def to_list(self) -> list[T]:
        return list(self)

    # --- mutation -------------------------------------------------------------

    def _check(self, item: ListItem[T]) -> None:
        if item.owner is not self:
            raise ValueError("item does not belong to this list")

    def _link(self, item: ListItem[T], before: ListItem[T] | None) -> None:
        item.owner = self
        if before is None:
            item.prev = self.tail
            item.next = None
            if self.tail is not None:
                self.tail.next = item
            else:
                self.head = item
            self.tail = item
        else:
            self._check(before)
            item.prev = before.prev
            item.next = before
            if before.prev is not None:
                before.prev.next = item
            else:
                self.head = item
            before.prev = item
        self._size += 1

    def append(self, data: T) -> ListItem[T]:
        return self.insert(data)

    def insert(self, data: T, before: ListItem[T] | None = None) -> ListItem[T]:
        """Insert *data* before the *before* handle (or at the end)."""
        item = ListItem(data)
        self._link(item, before)
        return item

    def insert_list(self, other: NodeList[T], before: ListItem[T] | None = None) -> None:
        """Move every item of *other* into this list before *before*.

        *other* is left empty; the moved handles stay valid.
        """
        if other is self:
            raise ValueError("cannot insert a list into itself")
        if before is not None:
            self._check(before)
        for item in list(other.items()):
            other.remove(item)
            self._link(item, before)

    def append_list(self, other: NodeList[T]) -> None:
        self.insert_list(other)

    def remove(self, item: ListItem[T]) -> ListItem[T]:
        self._check(item)
        if item.prev is not None:
            item.prev.next = item.next
        else:
            self.head = item.next
        if item.next is not None:
            item.next.prev = item.prev
        else:
            self.tail = item.prev
        item.prev = item.next = None
        item.owner = None
        self._size -= 1
        return item

    # --- derived lists --------------------------------------------------------

    def copy(self) -> NodeList[T]:
        """Shallow copy: new handles, same data objects."""
        return NodeList(self)

    def map(self, fn: Callable[[T], U]) -> NodeList[U]:
        return NodeList(fn(data) for data in self)

    def filter(self, predicate: Callable[[T], bool]) -> NodeList[T]:
        return NodeList(data for data in self if predicate(data))
