"""Doubly circular linked list that hands out node snapshots instead of live nodes."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .errors import EmptyListError, NoNextNeighborError, NoPrevNeighborError

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """Live node in a doubly circular linked list. Nodes compare by identity."""

    value: T
    next: Optional["Node[T]"] = field(default=None, repr=False)
    prev: Optional["Node[T]"] = field(default=None, repr=False)


@dataclass(frozen=True, eq=False)
class NodeSnapshot(Generic[T]):
    """Point-in-time copy of a node's value and the identities of its neighbors.

    A snapshot never references the node it was copied from. Operations that
    need that node find it as the predecessor of the recorded successor, which
    the ring invariant guarantees is the original node.
    """

    value: T
    next_node: Optional[Node[T]] = field(default=None, repr=False)
    prev_node: Optional[Node[T]] = field(default=None, repr=False)

    @classmethod
    def of(cls, node: Node[T]) -> "NodeSnapshot[T]":
        return cls(value=copy.deepcopy(node.value), next_node=node.next, prev_node=node.prev)

    def next(self) -> "NodeSnapshot[T]":
        """Snapshot the node that follows this one."""
        if self.next_node is None:
            raise NoNextNeighborError()
        return type(self).of(self.next_node)

    def prev(self) -> "NodeSnapshot[T]":
        """Snapshot the node that precedes this one."""
        if self.prev_node is None:
            raise NoPrevNeighborError()
        return type(self).of(self.prev_node)

    def resolve(self) -> Node[T]:
        """Return the live node this snapshot was taken from.

        The node is found as the predecessor of the recorded successor, so the
        answer reflects the links at call time. A snapshot taken before an
        ``add`` that relinked its successor resolves to the newly added node:
        in a one-node ring, ``tail()`` taken before ``add(2)`` resolves to the
        node holding 2. Take fresh snapshots after appending.
        """
        if self.next_node is None:
            raise NoNextNeighborError()
        node = self.next_node.prev
        if node is None:
            raise NoPrevNeighborError()
        return node

    def mutate(self, value: T) -> None:
        """Write value into the live node. This snapshot keeps its old value."""
        self.resolve().value = value


class RingCursor(Generic[T]):
    """One revolution over a ring, forward from the origin or backward to it."""

    def __init__(self, origin: Optional[Node[T]], backward: bool = False) -> None:
        self._origin = origin
        self._current = origin
        self._backward = backward

    def __iter__(self) -> Iterator[NodeSnapshot[T]]:
        return self

    def __next__(self) -> NodeSnapshot[T]:
        node = self._current
        if node is None:
            raise StopIteration
        if self._backward:
            previous = node.prev
            if previous is None:
                raise NoPrevNeighborError()
            self._current = None if previous is self._origin else previous
            return NodeSnapshot.of(previous)
        following = node.next
        if following is None:
            raise NoNextNeighborError()
        self._current = None if following is self._origin else following
        return NodeSnapshot.of(node)

    def __reversed__(self) -> "RingCursor[T]":
        # The back cursor takes over this cursor's position; this one is consumed.
        cursor: RingCursor[T] = RingCursor(self._origin, backward=not self._backward)
        cursor._current = self._current
        self._current = None
        return cursor

    @property
    def backward(self) -> bool:
        return self._backward

    @property
    def exhausted(self) -> bool:
        return self._current is None


class RingList(Generic[T]):
    """Doubly circular linked list exposing nodes only as snapshots."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        if values is not None:
            self.extend(values)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> RingCursor[T]:
        return self.iter()

    def __reversed__(self) -> RingCursor[T]:
        return reversed(self.iter())

    def __repr__(self) -> str:
        return f"RingList({self.values()!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def add(self, value: T) -> None:
        """Link a new node in front of the head, making it the new tail."""
        node = Node(value=value)
        if self._head is None or self._tail is None:
            node.next = node.prev = node
            self._head = self._tail = node
        else:
            head, tail = self._head, self._tail
            node.prev = tail
            node.next = head
            head.prev = node
            tail.next = node
            self._tail = node
        self._size += 1

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.add(value)

    def head(self) -> NodeSnapshot[T]:
        return NodeSnapshot.of(self._head_node())

    def tail(self) -> NodeSnapshot[T]:
        return NodeSnapshot.of(self._tail_node())

    def is_head(self, snapshot: NodeSnapshot[T]) -> bool:
        head = self._head_node()
        return snapshot.resolve() is head

    def is_tail(self, snapshot: NodeSnapshot[T]) -> bool:
        tail = self._tail_node()
        return snapshot.resolve() is tail

    def mutate(self, snapshot: NodeSnapshot[T], value: T) -> None:
        snapshot.mutate(value)

    def iter(self) -> RingCursor[T]:
        """Return a cursor positioned at the current head."""
        return RingCursor(self._head)

    def values(self) -> list[T]:
        """Read the live values in forward order."""
        values: list[T] = []
        node = self._head
        for _ in range(self._size):
            assert node is not None  # circular invariant
            values.append(node.value)
            node = node.next
        return values

    def _head_node(self) -> Node[T]:
        if self._head is None:
            raise EmptyListError()
        return self._head

    def _tail_node(self) -> Node[T]:
        if self._tail is None:
            raise EmptyListError()
        return self._tail
