"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

Deleter = Callable[[Any], object]


@dataclass(eq=False, slots=True)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def pop_front(self, delete: Deleter | None = None) -> Any:
        """Remove the first node and return its content.

        When delete is given it is called with the content first.
        Raises IndexError on an empty list.
        """
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

    def clear(self, delete: Deleter | None = None) -> None:
        """Remove every node, calling delete on each content in order."""
        while self._head is not None:
            self.pop_front(delete)

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call f with every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter | None = None) -> LinkedList:
        """A new list of f applied to every content.

        If f raises, the contents already produced are passed to delete
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result