from __future__ import annotations

import logging

import pytest

from ringlist.errors import EmptyListError
from ringlist.walkthrough import RingWalkthrough, TraversalStep


def test_chain_round_trip_lands_on_head() -> None:
    walkthrough = RingWalkthrough()

    assert walkthrough.chain_round_trip() == 1


def test_forward_pass_labels_ends_and_scales_values() -> None:
    walkthrough = RingWalkthrough()

    steps = walkthrough.forward_pass()

    assert [step.value for step in steps] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert steps[0] == TraversalStep(value=1, role=TraversalStep.ROLE_HEAD)
    assert steps[-1] == TraversalStep(value=9, role=TraversalStep.ROLE_TAIL)
    assert all(step.role == "" for step in steps[1:-1])
    assert walkthrough.values() == [4, 8, 12, 16, 20, 24, 28, 32, 36]
    assert walkthrough.focus is not None
    assert walkthrough.focus.value == 4


def test_backward_pass_after_scaling() -> None:
    walkthrough = RingWalkthrough()
    walkthrough.forward_pass()

    steps = walkthrough.backward_pass()

    assert [step.value for step in steps] == [36, 32, 28, 24, 20, 16, 12, 8, 4]
    assert steps[0].role == TraversalStep.ROLE_TAIL
    assert steps[-1].role == TraversalStep.ROLE_HEAD


def test_forward_pass_without_mutation_keeps_values() -> None:
    walkthrough = RingWalkthrough(values=[5, 6])

    steps = walkthrough.forward_pass(mutate=False)

    assert [step.value for step in steps] == [5, 6]
    assert walkthrough.values() == [5, 6]


def test_focus_steps_around_the_ring() -> None:
    walkthrough = RingWalkthrough()

    assert walkthrough.step_forward().value == 2
    assert walkthrough.focus_index == 1

    walkthrough.step_backward()
    walkthrough.step_backward()
    assert walkthrough.focus is not None
    assert walkthrough.focus.value == 9
    assert walkthrough.focus_index == 8


def test_scale_focus_updates_live_node() -> None:
    walkthrough = RingWalkthrough(factor=3)
    walkthrough.step_forward()

    scaled = walkthrough.scale_focus()

    assert scaled.value == 6
    assert walkthrough.values()[:3] == [1, 6, 3]


def test_append_keeps_focus_on_the_old_tail() -> None:
    walkthrough = RingWalkthrough(values=[1, 2, 3])
    walkthrough.step_backward()

    walkthrough.append(4)

    assert walkthrough.focus is not None
    assert walkthrough.focus.value == 3
    assert walkthrough.step_forward().value == 4
    assert walkthrough.focus_index == 3
    assert walkthrough.step_forward().value == 1


def test_empty_walkthrough() -> None:
    walkthrough = RingWalkthrough(values=[])

    assert walkthrough.focus is None
    with pytest.raises(EmptyListError):
        walkthrough.step_forward()
    with pytest.raises(EmptyListError):
        walkthrough.chain_round_trip()
    assert walkthrough.forward_pass() == []

    walkthrough.append(5)

    assert walkthrough.focus is not None
    assert walkthrough.focus.value == 5
    assert walkthrough.chain_round_trip() == 5


def test_rejects_non_positive_hops() -> None:
    with pytest.raises(ValueError):
        RingWalkthrough(hops=0)


def test_passes_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="ringlist.walkthrough")
    walkthrough = RingWalkthrough()

    walkthrough.forward_pass()
    walkthrough.backward_pass()

    assert "Forward pass visited 9 nodes" in caplog.text
    assert "Backward pass visited 9 nodes" in caplog.text
