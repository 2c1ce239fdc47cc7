import uuid
from django.conf import settings
from django.db import models

"""
Recipe model

A recipe owns an ordered list of steps (`RecipeStep`, related_name="steps")
and the dependency edges between them (`StepOutputUse`,
related_name="step_output_uses"). Both are deleted with the recipe.

The recipe row doubles as the lock for step ordering: every reorder,
dependency edit or step deletion selects it `FOR UPDATE` first, so two
writers never renumber the same recipe at once.
"""

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000


class Recipe(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # ownership is checked by the calling layer, not here
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='author_id',
        null=True,
        blank=True,
    )

    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    description = models.TextField(max_length=DESCRIPTION_MAX_LENGTH, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipe'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def step_count(self):
        return self.steps.count()
