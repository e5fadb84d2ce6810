"""Walkthrough engine that drives a ring list through chaining, mutation and traversal."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .errors import EmptyListError
from .linked_list import NodeSnapshot, RingList

logger = logging.getLogger(__name__)

DEFAULT_VALUES = range(1, 10)


@dataclass(frozen=True)
class TraversalStep:
    """A value seen during a pass and whether it sat at the head or tail."""

    value: int
    role: str = ""

    ROLE_HEAD = "head"
    ROLE_TAIL = "tail"


class RingWalkthrough:
    """Coordinates passes over an integer ring and tracks a focus node."""

    def __init__(
        self,
        values: Optional[Iterable[int]] = None,
        factor: int = 4,
        hops: int = 3,
    ) -> None:
        if hops <= 0:
            raise ValueError("hops must be positive.")
        self._factor = factor
        self._hops = hops
        self._ring: RingList[int] = RingList(DEFAULT_VALUES if values is None else values)
        self._focus: Optional[NodeSnapshot[int]] = None
        self._focus_index = 0
        if not self._ring.is_empty():
            self._focus = self._ring.head()

    @property
    def ring(self) -> RingList[int]:
        return self._ring

    @property
    def factor(self) -> int:
        return self._factor

    @property
    def focus(self) -> Optional[NodeSnapshot[int]]:
        return self._focus

    @property
    def focus_index(self) -> int:
        return self._focus_index

    def values(self) -> list[int]:
        return self._ring.values()

    def append(self, value: int) -> None:
        if self._focus is None:
            self._ring.add(value)
            self._focus = self._ring.head()
            self._focus_index = 0
        else:
            # Resolve before linking; the focus snapshot goes stale once the tail moves.
            node = self._focus.resolve()
            self._ring.add(value)
            self._focus = NodeSnapshot.of(node)
        logger.info("Appended %d, ring now holds %d nodes", value, len(self._ring))

    def chain_round_trip(self) -> int:
        """Hop forward then back the same number of times starting at the head."""
        node = self._ring.head()
        for _ in range(self._hops):
            node = node.next()
        for _ in range(self._hops):
            node = node.prev()
        return node.value

    def forward_pass(self, mutate: bool = True) -> list[TraversalStep]:
        """Walk head to tail, scaling each node by the factor when mutate is set."""
        steps: list[TraversalStep] = []
        for snapshot in self._ring.iter():
            steps.append(TraversalStep(value=snapshot.value, role=self._role(snapshot)))
            if mutate:
                snapshot.mutate(self._factor * snapshot.value)
        if mutate and self._focus is not None:
            self._focus = self._refetch(self._focus)
        logger.info("Forward pass visited %d nodes", len(steps))
        return steps

    def backward_pass(self) -> list[TraversalStep]:
        steps = [
            TraversalStep(value=snapshot.value, role=self._role(snapshot))
            for snapshot in reversed(self._ring.iter())
        ]
        logger.info("Backward pass visited %d nodes", len(steps))
        return steps

    def step_forward(self) -> NodeSnapshot[int]:
        """Move the focus clockwise on the ring."""
        focus = self._require_focus()
        self._focus = focus.next()
        self._focus_index = (self._focus_index + 1) % len(self._ring)
        return self._focus

    def step_backward(self) -> NodeSnapshot[int]:
        """Move the focus counter-clockwise on the ring."""
        focus = self._require_focus()
        self._focus = focus.prev()
        self._focus_index = (self._focus_index - 1) % len(self._ring)
        return self._focus

    def scale_focus(self) -> NodeSnapshot[int]:
        focus = self._require_focus()
        focus.mutate(self._factor * focus.value)
        self._focus = self._refetch(focus)
        logger.debug("Scaled focus at index %d to %d", self._focus_index, self._focus.value)
        return self._focus

    def _role(self, snapshot: NodeSnapshot[int]) -> str:
        if self._ring.is_head(snapshot):
            return TraversalStep.ROLE_HEAD
        if self._ring.is_tail(snapshot):
            return TraversalStep.ROLE_TAIL
        return ""

    def _require_focus(self) -> NodeSnapshot[int]:
        if self._focus is None:
            raise EmptyListError()
        return self._focus

    @staticmethod
    def _refetch(snapshot: NodeSnapshot[int]) -> NodeSnapshot[int]:
        return NodeSnapshot.of(snapshot.resolve())
