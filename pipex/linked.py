"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One element of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with constant-time access to both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def pop_front(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the first element, pass it to ``delete`` if given, and return it."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every element, front to back, passing each to ``delete`` if given."""
        while self._head is not None:
            self.pop_front(delete)

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each element's content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func`` applied to each element.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result