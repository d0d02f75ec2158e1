"""A minimal singly linked list and the usual operations on it."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    content: Any = None
    next: Optional[ListNode] = None

    def nodes(self) -> Iterator[ListNode]:
        """Yield this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of this node and of every node after it."""
        for node in self.nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def lst_new(content: Any) -> ListNode:
    """Return a single node holding ``content``."""
    return ListNode(content)


def lst_add_front(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put ``node`` before ``head`` and return the new head.

    When ``node`` is ``None`` the list is left as it was.
    """
    if node is None:
        return head
    node.next = head
    return node


def lst_size(head: Optional[ListNode]) -> int:
    """Return the number of nodes from ``head`` on."""
    return 0 if head is None else sum(1 for _ in head.nodes())


def lst_last(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the last node of the list, or ``None`` for an empty list."""
    if head is None:
        return None
    last = head
    for last in head.nodes():
        pass
    return last


def lst_add_back(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Append ``node`` at the end of the list and return the head."""
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_delone(node: Optional[ListNode], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release the content of one node with ``delete``; the rest of the list is untouched."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def lst_clear(
    head: Optional[ListNode], delete: Optional[Callable[[Any], Any]]
) -> Optional[ListNode]:
    """Release every node of the list and return the new, empty head.

    Without a ``delete`` function nothing is released and ``head`` is returned.
    """
    if delete is None:
        return head
    node = head
    while node is not None:
        following = node.next
        lst_delone(node, delete)
        node = following
    return None


def lst_iter(head: Optional[ListNode], func: Optional[Callable[[Any], Any]]) -> None:
    """Call ``func`` on the content of every node."""
    if func is None or head is None:
        return
    for content in head:
        func(content)


def lst_map(
    head: Optional[ListNode],
    func: Callable[[Any], Any],
    delete: Optional[Callable[[Any], Any]],
) -> Optional[ListNode]:
    """Return a new list of ``func(content)`` for every node.

    When ``func`` returns ``None`` the new list built so far is released with
    ``delete`` and ``None`` is returned.
    """
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    node = head
    while node is not None:
        mapped = func(node.content)
        if mapped is None:
            lst_clear(new_head, delete)
            return None
        created = lst_new(mapped)
        if tail is None:
            new_head = created
        else:
            tail.next = created
        tail = created
        node = node.next
    return new_head