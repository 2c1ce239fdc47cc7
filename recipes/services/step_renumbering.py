"""
Plans the position writes for a step move and the matching edge rewrites.

Step positions are unique per recipe and the database checks that on every
single-row write, so a move can't be applied as one mapping. The plan parks
the moved step on a sentinel position, shifts the steps in between one slot
at a time (always into a slot that was just freed), then takes the moved step
from the sentinel to its target.
"""

from dataclasses import dataclass

from recipes.services.errors import StepNotFound


@dataclass(frozen=True)
class PositionAssignment:
    """Move the step that started at `origin` from `old` to `new`."""
    origin: int
    old: int
    new: int


def sentinel_position(positions):
    """A position no step in `positions` holds, still valid for the position column."""
    return max(positions, default=0) + 1


def plan_move(positions, current, target):
    """
    Return the assignments that move the step at `current` to `target`.

    Forward moves shift the steps in (current, target] down by one, lowest
    first; backward moves shift the steps in [target, current) up by one,
    highest first. An empty list means there is nothing to do.
    """
    positions = sorted(positions)
    if current not in positions:
        raise StepNotFound(current)
    if not 1 <= target <= positions[-1]:
        raise ValueError(f"Position {target} is outside 1..{positions[-1]}")
    if target == current:
        return []

    sentinel = sentinel_position(positions)
    plan = [PositionAssignment(current, current, sentinel)]
    if target > current:
        shifting = [p for p in positions if current < p <= target]
        plan.extend(PositionAssignment(p, p, p - 1) for p in shifting)
    else:
        shifting = [p for p in reversed(positions) if target <= p < current]
        plan.extend(PositionAssignment(p, p, p + 1) for p in shifting)
    plan.append(PositionAssignment(current, sentinel, target))
    return plan


def plan_gap_closure(positions, removed):
    """Shift every step after `removed` down by one, lowest first."""
    return [
        PositionAssignment(p, p, p - 1)
        for p in sorted(positions)
        if p > removed
    ]


def apply_plan(positions, plan):
    """
    Replay `plan` over a set of positions and return the result, ascending.

    Raises ValueError on the first assignment that reads an empty slot or
    writes an occupied one.
    """
    held = set(positions)
    for step in plan:
        if step.old not in held:
            raise ValueError(f"No step holds position {step.old}")
        if step.new in held:
            raise ValueError(f"Position {step.new} is already taken")
        held.discard(step.old)
        held.add(step.new)
    return sorted(held)


def rewrite_edges(edges, old, new):
    """Replace `old` with `new` on either end of every edge."""
    return [
        (new if out == old else out, new if inp == old else inp)
        for out, inp in edges
    ]


def rewrite_edges_for_plan(edges, plan):
    for step in plan:
        edges = rewrite_edges(edges, step.old, step.new)
    return edges
