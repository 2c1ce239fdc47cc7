"""Service for replacing the set of steps a step uses output from."""

import logging
from dataclasses import dataclass

from recipes.repos import StepOutputUseRepo, StepRepo
from recipes.services.errors import StepNotFound, ValidationRejected
from recipes.services.step_validation import format_step_list, validate_dependency_selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencyChange:
    deleted: int
    created: int


class StepOutputUseService:
    """Delete-then-insert editor for one input step's dependency edges."""

    def __init__(self, step_repo=None, output_use_repo=None):
        self.step_repo = step_repo or StepRepo()
        self.output_use_repo = output_use_repo or StepOutputUseRepo()

    def _distinct(self, output_positions):
        seen = []
        for position in output_positions:
            if position not in seen:
                seen.append(position)
        return seen

    def check_selection(self, input_position, output_positions):
        """Raise unless every output position is positive and before `input_position`."""
        wrong_way = validate_dependency_selection(input_position, output_positions)
        if wrong_way:
            raise ValidationRejected(
                f"Step {input_position} can only use output from earlier steps, "
                f"not {format_step_list(wrong_way)}",
                blocking=wrong_way,
            )

    def check(self, recipe_id, input_position, output_positions):
        """Raise unless every output is an existing step before `input_position`."""
        positions = set(self.step_repo.load_positions(recipe_id))
        if input_position not in positions:
            raise StepNotFound(input_position, recipe_id)

        self.check_selection(input_position, output_positions)

        missing = sorted(set(output_positions) - positions)
        if missing:
            raise StepNotFound(missing[0], recipe_id)

    def replace_dependencies(self, recipe_id, input_position, output_positions):
        """
        Make `output_positions` the exact dependency set of `input_position`.

        Validation happens before anything is deleted. Run inside the
        caller's transaction; see StepOrderingService.replace_dependencies.
        """
        outputs = self._distinct(output_positions)
        self.check(recipe_id, input_position, outputs)

        deleted = self.output_use_repo.delete_for_input(recipe_id, input_position)
        created = self.output_use_repo.insert_for_input(recipe_id, input_position, outputs)
        logger.info(
            "Replaced dependencies of step %s in recipe %s: %s removed, %s added",
            input_position, recipe_id, deleted, created,
        )
        return DependencyChange(deleted=deleted, created=created)

    def dependencies_of(self, recipe_id, input_position):
        return self.output_use_repo.dependencies_of(recipe_id, input_position)

    def dependents_of(self, recipe_id, output_position):
        return self.output_use_repo.dependents_of(recipe_id, output_position)

    def uses_for_recipe(self, recipe_id):
        return self.output_use_repo.uses_for_recipe(recipe_id)
