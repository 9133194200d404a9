"""Singly linked lists and doubly linked nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    content: Any
    next: Optional[Node] = None


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list holding an integer."""

    value: int
    prev: Optional[DoublyNode] = None
    next: Optional[DoublyNode] = None


class LinkedList:
    """A singly linked list of arbitrary contents."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.append(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, release: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each content to ``release`` if given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], None]] = None,
    ) -> LinkedList:
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents mapped so far are passed to
        ``release`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(release)
            raise
        return result