"""
Checks that decide whether a step may move or be deleted.

Everything here is pure: the functions take the recipe's edges as
(output_position, input_position) pairs and never touch the database, so the
ordering service can run them on a snapshot before issuing any write.

A step that nothing references is always movable, including a position no
step holds; callers that care about existence check it themselves.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    blocking: tuple = ()
    error: Optional[str] = None

    @classmethod
    def ok(cls):
        return cls(valid=True)

    @classmethod
    def rejected(cls, blocking, error):
        return cls(valid=False, blocking=tuple(blocking), error=error)

    def __bool__(self):
        return self.valid


def format_step_list(positions):
    """Render positions as "Step 2", "Steps 2 and 3" or "Steps 2, 3, and 4"."""
    positions = list(positions)
    if not positions:
        raise ValueError("format_step_list needs at least one position")
    if len(positions) == 1:
        return f"Step {positions[0]}"
    if len(positions) == 2:
        return f"Steps {positions[0]} and {positions[1]}"
    head = ", ".join(str(p) for p in positions[:-1])
    return f"Steps {head}, and {positions[-1]}"


def _sorted_unique(positions):
    return sorted(set(positions))


def dependents(edges, position):
    """Positions of the steps that use the output of `position`."""
    return _sorted_unique(inp for out, inp in edges if out == position)


def dependencies(edges, position):
    """Positions of the steps whose output `position` uses."""
    return _sorted_unique(out for out, inp in edges if inp == position)


def validate_incoming(edges, current, target):
    """
    Reject a forward move that would carry the step past one of its dependents.

    Moving backward can't break these edges: every dependent already sits
    after `current`, so it stays after the new, smaller position.
    """
    if target <= current:
        return ValidationResult.ok()

    blocking = [p for p in dependents(edges, current) if current < p <= target]
    if not blocking:
        return ValidationResult.ok()

    verb = "uses" if len(blocking) == 1 else "use"
    error = (
        f"Cannot move Step {current} to position {target} because "
        f"{format_step_list(blocking)} {verb} its output"
    )
    return ValidationResult.rejected(blocking, error)


def validate_outgoing(edges, current, target):
    """Reject a backward move that would put the step before one of its dependencies."""
    if target >= current:
        return ValidationResult.ok()

    blocking = [p for p in dependencies(edges, current) if target <= p < current]
    if not blocking:
        return ValidationResult.ok()

    error = (
        f"Cannot move Step {current} to position {target} because it uses output "
        f"from {format_step_list(blocking)}"
    )
    return ValidationResult.rejected(blocking, error)


def validate_reorder(edges, current, target):
    """Run both reorder checks; the incoming one reports first."""
    incoming = validate_incoming(edges, current, target)
    if not incoming:
        return incoming
    return validate_outgoing(edges, current, target)


def can_delete(edges, position):
    return not dependents(edges, position)


def validate_deletion(edges, position):
    """Refuse to delete a step whose output other steps still use."""
    blocking = dependents(edges, position)
    if not blocking:
        return ValidationResult.ok()
    error = f"Cannot delete Step {position} because it is used by {format_step_list(blocking)}"
    return ValidationResult.rejected(blocking, error)


def validate_dependency_selection(input_position, output_positions):
    """
    Check that every selected output comes before `input_position`.

    Returns the offending positions, ascending; an empty list means the
    selection is acceptable.
    """
    return _sorted_unique(p for p in output_positions if p <= 0 or p >= input_position)


def find_inconsistencies(positions, edges):
    """
    Describe every way a recipe snapshot breaks the ordering rules.

    Checks that positions are exactly 1..N and that each edge points from an
    existing earlier step to an existing later one.
    """
    problems = []
    ordered = sorted(positions)
    if len(set(ordered)) != len(ordered):
        dupes = sorted({p for p in ordered if ordered.count(p) > 1})
        problems.append(f"duplicate positions {dupes}")
    expected = list(range(1, len(set(ordered)) + 1))
    if sorted(set(ordered)) != expected:
        problems.append(f"positions {sorted(set(ordered))} are not 1..{len(expected)}")

    held = set(ordered)
    for out, inp in edges:
        if out >= inp:
            problems.append(f"edge {out}->{inp} does not point forward")
        missing = [p for p in (out, inp) if p not in held]
        if missing:
            problems.append(f"edge {out}->{inp} references missing {format_step_list(missing)}")
    return problems
