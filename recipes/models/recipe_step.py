"""Model representing an individual recipe step with ordering."""

from django.db import models
from .recipe import Recipe

STEP_TITLE_MAX_LENGTH = 200
STEP_DESCRIPTION_MAX_LENGTH = 5000


class RecipeStep(models.Model):
    """Ordered instruction step for a recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='steps'
    )

    # position (1..N, dense within the recipe)
    position = models.PositiveIntegerField()

    title = models.CharField(max_length=STEP_TITLE_MAX_LENGTH, blank=True, default="")

    # description (1–5000 chars)
    description = models.TextField(max_length=STEP_DESCRIPTION_MAX_LENGTH)

    class Meta:
        """Uniqueness and ordering constraints for steps."""
        unique_together = (
            ('recipe', 'position'),
        )

        constraints = [
            models.CheckConstraint(
                condition=models.Q(position__gt=0),
                name="recipe_step_position_gt_0"
            ),
        ]

        ordering = ['recipe', 'position']
        db_table = "recipe_step"

    def __str__(self):
        """Readable snippet of the step for admin/debugging."""
        label = self.title or self.description[:30]
        return f"Step {self.position}: {label}"
