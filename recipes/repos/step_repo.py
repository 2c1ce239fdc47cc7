"""Repository helpers for recipe step positions."""

from typing import Any, List, Optional
from recipes.db_accessor import DB_Accessor
from recipes.models.recipe_step import RecipeStep


class StepRepo(DB_Accessor):
    """Repository for RecipeStep rows of a single recipe."""
    def __init__(self) -> None:
        """Initialise with the RecipeStep model."""
        super().__init__(RecipeStep)

    def load_positions(self, recipe_id: Any) -> List[int]:
        """Return the recipe's step positions, ascending."""
        return list(
            self.scoped(recipe_id).order_by("position").values_list("position", flat=True)
        )

    def ids_by_position(self, recipe_id: Any) -> dict:
        """Map each position to the stable id of the step holding it."""
        return dict(self.scoped(recipe_id).values_list("position", "id"))

    def get_at(self, recipe_id: Any, position: int) -> Optional[RecipeStep]:
        """Return the step at `position`, or None."""
        return self.scoped(recipe_id, position=position).first()

    def next_position(self, recipe_id: Any) -> int:
        positions = self.load_positions(recipe_id)
        return positions[-1] + 1 if positions else 1

    def append(self, recipe_id: Any, *, description: str, title: str = "") -> RecipeStep:
        """Create a step after the current last one."""
        return self.create(
            recipe_id,
            position=self.next_position(recipe_id),
            title=title,
            description=description,
        )

    def assign_position(self, recipe_id: Any, step_id: Any, position: int) -> int:
        """Move one step, found by its own id, to `position`."""
        return self.update(recipe_id, {"id": step_id}, position=position)

    def delete_at(self, recipe_id: Any, position: int) -> int:
        """Delete the step at `position`; return count deleted."""
        return self.delete(recipe_id, position=position)
