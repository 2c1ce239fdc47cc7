"""Service running step reorders, dependency edits and deletions for one recipe."""

import logging
from contextlib import contextmanager

from django.db import DatabaseError, transaction

from recipes.models import Recipe
from recipes.repos import StepOutputUseRepo, StepRepo
from recipes.services.errors import StepNotFound, StoreFailure
from recipes.services.step_output_uses import StepOutputUseService
from recipes.services.step_renumbering import (
    apply_plan,
    plan_gap_closure,
    plan_move,
    rewrite_edges_for_plan,
)
from recipes.services.step_validation import (
    ValidationResult,
    find_inconsistencies,
    validate_deletion,
    validate_reorder,
)

logger = logging.getLogger(__name__)

DIRECTIONS = ("up", "down")


class StepOrderingService:
    """
    Each public method is one atomic unit of work against a single recipe.

    The recipe row is locked first, then positions and edges are read once;
    every check runs on that snapshot before the first write. Position writes
    and the matching edge rewrites happen in the same transaction, so a failed
    write leaves the recipe exactly as it was.
    """

    def __init__(self, recipe, step_repo=None, output_use_repo=None):
        self.recipe = recipe
        self.recipe_id = recipe.pk
        self.step_repo = step_repo or StepRepo()
        self.output_use_repo = output_use_repo or StepOutputUseRepo()
        self.output_uses = StepOutputUseService(self.step_repo, self.output_use_repo)

    def _lock(self):
        Recipe.objects.select_for_update().get(pk=self.recipe_id)

    def _snapshot(self):
        return (
            self.step_repo.load_positions(self.recipe_id),
            self.output_use_repo.load_edges(self.recipe_id),
        )

    @contextmanager
    def _store_writes(self, operation):
        try:
            yield
        except DatabaseError as exc:
            logger.error(
                "Could not %s in recipe %s; rolled back", operation, self.recipe_id,
                exc_info=True,
            )
            raise StoreFailure(f"Could not {operation} in recipe {self.recipe_id}") from exc

    def _apply(self, plan, ids_by_position):
        for step in plan:
            self.step_repo.assign_position(self.recipe_id, ids_by_position[step.origin], step.new)
            rewritten = self.output_use_repo.rewrite_position(self.recipe_id, step.old, step.new)
            logger.debug(
                "Recipe %s: step %s -> %s (%s edge endpoints rewritten)",
                self.recipe_id, step.old, step.new, rewritten,
            )

    def _check_outcome(self, positions, edges, plan):
        """Raise ValueError if `plan` would leave a consistent snapshot inconsistent."""
        if find_inconsistencies(positions, edges):
            return
        problems = find_inconsistencies(
            apply_plan(positions, plan), rewrite_edges_for_plan(edges, plan)
        )
        if problems:
            raise ValueError(
                f"Move plan for recipe {self.recipe_id} would leave it inconsistent: "
                + "; ".join(problems)
            )

    @transaction.atomic
    def reorder_step(self, current, target):
        """Move the step at `current` to `target`, shifting the steps in between."""
        self._lock()
        if current == target:
            return ValidationResult.ok()

        positions, edges = self._snapshot()
        result = validate_reorder(edges, current, target)
        if not result:
            logger.warning("Rejected move in recipe %s: %s", self.recipe_id, result.error)
            return result

        if current not in positions or not 1 <= target <= positions[-1]:
            logger.warning(
                "Ignoring move of step %s to %s in recipe %s: no such position",
                current, target, self.recipe_id,
            )
            return result

        plan = plan_move(positions, current, target)
        self._check_outcome(positions, edges, plan)
        ids_by_position = self.step_repo.ids_by_position(self.recipe_id)
        with self._store_writes("move a step"):
            self._apply(plan, ids_by_position)
        logger.info(
            "Moved step %s to %s in recipe %s (%s writes)",
            current, target, self.recipe_id, len(plan),
        )
        return result

    @transaction.atomic
    def move_step(self, step_id, direction):
        """Swap a step with its neighbour above ("up") or below ("down")."""
        if direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, not {direction!r}")
        self._lock()
        step = self.step_repo.scoped(self.recipe_id, id=step_id).first()
        if step is None:
            logger.warning("Ignoring move of unknown step %s in recipe %s", step_id, self.recipe_id)
            return ValidationResult.ok()
        target = step.position - 1 if direction == "up" else step.position + 1
        return self.reorder_step(step.position, target)

    @transaction.atomic
    def delete_step(self, position):
        """Delete the step at `position` unless another step uses its output."""
        self._lock()
        positions, edges = self._snapshot()
        if position not in positions:
            raise StepNotFound(position, self.recipe_id)

        result = validate_deletion(edges, position)
        if not result:
            logger.warning("Rejected deletion in recipe %s: %s", self.recipe_id, result.error)
            return result

        remaining = [p for p in positions if p != position]
        plan = plan_gap_closure(remaining, position)
        apply_plan(remaining, plan)
        ids_by_position = self.step_repo.ids_by_position(self.recipe_id)
        with self._store_writes("delete a step"):
            dropped = self.output_use_repo.delete_for_input(self.recipe_id, position)
            self.step_repo.delete_at(self.recipe_id, position)
            self._apply(plan, ids_by_position)
        logger.info(
            "Deleted step %s from recipe %s (%s dependencies dropped, %s steps renumbered)",
            position, self.recipe_id, dropped, len(plan),
        )
        return result

    @transaction.atomic
    def replace_dependencies(self, input_position, output_positions):
        self._lock()
        with self._store_writes("save step dependencies"):
            return self.output_uses.replace_dependencies(
                self.recipe_id, input_position, output_positions
            )

    @transaction.atomic
    def append_step(self, description, title="", uses_steps=()):
        """Add a step after the last one, optionally using output from earlier steps."""
        self._lock()
        self.output_uses.check_selection(
            self.step_repo.next_position(self.recipe_id), uses_steps
        )
        with self._store_writes("add a step"):
            step = self.step_repo.append(self.recipe_id, description=description, title=title)
            self.output_uses.replace_dependencies(self.recipe_id, step.position, uses_steps)
        return step
