"""Repository helpers for step dependency edges."""

from typing import Any, Dict, Iterable, List, Tuple
from django.db.models import OuterRef, Subquery
from recipes.db_accessor import DB_Accessor
from recipes.models.recipe_step import RecipeStep
from recipes.models.step_output_use import StepOutputUse

Edge = Tuple[int, int]


class StepOutputUseRepo(DB_Accessor):
    """Repository for StepOutputUse edges, keyed by step positions."""
    def __init__(self) -> None:
        """Initialise with the StepOutputUse model."""
        super().__init__(StepOutputUse)

    def load_edges(self, recipe_id: Any) -> List[Edge]:
        """Return every edge of the recipe as (output_position, input_position)."""
        return list(
            self.scoped(recipe_id)
            .order_by("input_position", "output_position")
            .values_list("output_position", "input_position")
        )

    def dependents_of(self, recipe_id: Any, position: int) -> List[int]:
        """Positions of the steps that use the output of `position`."""
        return list(
            self.scoped(recipe_id, output_position=position)
            .order_by("input_position")
            .values_list("input_position", flat=True)
        )

    def dependencies_of(self, recipe_id: Any, position: int) -> List[int]:
        """Positions of the steps whose output `position` uses."""
        return list(
            self.scoped(recipe_id, input_position=position)
            .order_by("output_position")
            .values_list("output_position", flat=True)
        )

    def uses_for_recipe(self, recipe_id: Any) -> List[Dict[str, Any]]:
        """All edges of a recipe with the output step's title, for display."""
        output_title = RecipeStep.objects.filter(
            recipe_id=OuterRef("recipe_id"),
            position=OuterRef("output_position"),
        ).values("title")[:1]
        return list(
            self.scoped(recipe_id)
            .annotate(output_title=Subquery(output_title))
            .order_by("input_position", "output_position")
            .values("output_position", "input_position", "output_title")
        )

    def rewrite_position(self, recipe_id: Any, old: int, new: int) -> int:
        """Point every edge endpoint naming `old` at `new`; return rows touched."""
        touched = self.update(recipe_id, {"output_position": old}, output_position=new)
        touched += self.update(recipe_id, {"input_position": old}, input_position=new)
        return touched

    def delete_for_input(self, recipe_id: Any, input_position: int) -> int:
        """Delete every edge whose input step is `input_position`."""
        return self.delete(recipe_id, input_position=input_position)

    def insert_for_input(
        self, recipe_id: Any, input_position: int, output_positions: Iterable[int]
    ) -> int:
        """Create one edge per output position for `input_position`."""
        created = self.bulk_create(
            recipe_id,
            (
                {"output_position": output, "input_position": input_position}
                for output in output_positions
            ),
        )
        return len(created)
