"""Dependency edge between two steps of the same recipe."""

from django.core.exceptions import ValidationError
from django.db import models
from .recipe import Recipe


class StepOutputUse(models.Model):
    """
    "The step at input_position uses the output of the step at output_position."

    Both ends are step positions, not foreign keys: when a step moves, the
    ordering service rewrites the matching endpoints itself. There is no
    database check on orientation because an edge may point at the transient
    sentinel position while a renumbering transaction is in flight; `clean()`
    enforces it for everything written through forms and admin.
    """
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='step_output_uses'
    )
    output_position = models.PositiveIntegerField()
    input_position = models.PositiveIntegerField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "output_position", "input_position"],
                name="uniq_step_output_use_recipe_output_input",
            ),
        ]
        indexes = [
            models.Index(fields=["recipe", "output_position"], name="step_output_use_output_idx"),
            models.Index(fields=["recipe", "input_position"], name="step_output_use_input_idx"),
        ]
        ordering = ["input_position", "output_position"]
        db_table = "step_output_use"

    def clean(self):
        super().clean()
        if (
            self.output_position is not None
            and self.input_position is not None
            and self.output_position >= self.input_position
        ):
            raise ValidationError(
                {"output_position": "A step can only use output from an earlier step."}
            )

    def as_edge(self):
        return (self.output_position, self.input_position)

    def __str__(self):
        return f"Step {self.input_position} uses Step {self.output_position}"
