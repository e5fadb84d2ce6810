"""Exceptions raised by the ring list and its snapshots."""

from __future__ import annotations


class RingListError(Exception):
    """Base class for ring list failures."""


class EmptyListError(RingListError, ValueError):
    """Raised when head or tail is requested from a ring with no nodes."""

    def __init__(self, message: str = "The list is empty.") -> None:
        super().__init__(message)


class MissingNeighborError(RingListError, LookupError):
    """Raised when a node link needed for a traversal is unset."""


class NoNextNeighborError(MissingNeighborError):
    def __init__(self, message: str = "No `next` neighbor available.") -> None:
        super().__init__(message)


class NoPrevNeighborError(MissingNeighborError):
    def __init__(self, message: str = "No `prev` neighbor available.") -> None:
        super().__init__(message)
