import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Recipe",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, default="", max_length=2000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(blank=True, db_column="author_id", null=True, on_delete=django.db.models.deletion.CASCADE, related_name="recipes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="RecipeStep",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField()),
                ("title", models.CharField(blank=True, default="", max_length=200)),
                ("description", models.TextField(max_length=5000)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="steps", to="recipes.recipe")),
            ],
            options={
                "db_table": "recipe_step",
                "ordering": ["recipe", "position"],
                "unique_together": {("recipe", "position")},
            },
        ),
        migrations.AddConstraint(
            model_name="recipestep",
            constraint=models.CheckConstraint(condition=models.Q(("position__gt", 0)), name="recipe_step_position_gt_0"),
        ),
        migrations.CreateModel(
            name="StepOutputUse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("output_position", models.PositiveIntegerField()),
                ("input_position", models.PositiveIntegerField()),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="step_output_uses", to="recipes.recipe")),
            ],
            options={
                "db_table": "step_output_use",
                "ordering": ["input_position", "output_position"],
                "indexes": [
                    models.Index(fields=["recipe", "output_position"], name="step_output_use_output_idx"),
                    models.Index(fields=["recipe", "input_position"], name="step_output_use_input_idx"),
                ],
            },
        ),
        migrations.AddConstraint(
            model_name="stepoutputuse",
            constraint=models.UniqueConstraint(fields=("recipe", "output_position", "input_position"), name="uniq_step_output_use_recipe_output_input"),
        ),
    ]
