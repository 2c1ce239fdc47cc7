"""Management command to seed the database with sample recipes, steps and step dependencies."""

from random import Random
from typing import List

from faker import Faker
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from recipes.models import Recipe, RecipeStep, StepOutputUse


class Command(BaseCommand):
    """Management command to seed recipes whose steps use each other's output."""
    RECIPE_COUNT = 20
    help = 'Seeds the database with sample recipes, steps and step dependencies'

    def add_arguments(self, parser):
        """Add sizing and reproducibility flags."""
        parser.add_argument("--recipes", type=int, default=self.RECIPE_COUNT, help="Number of recipes to create.")
        parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data.")
        parser.add_argument("--min-steps", type=int, default=4)
        parser.add_argument("--max-steps", type=int, default=7)

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        if options["min_steps"] < 1 or options["min_steps"] > options["max_steps"]:
            raise CommandError(
                f"--min-steps ({options['min_steps']}) must be at least 1 and no more than "
                f"--max-steps ({options['max_steps']})"
            )
        self.random = Random(options.get("seed"))
        self.faker = Faker('en_GB')
        if options.get("seed") is not None:
            self.faker.seed_instance(options["seed"])

        with transaction.atomic():
            recipes = self.seed_recipes(options["recipes"])
            steps = self.seed_recipe_steps(recipes, min_steps=options["min_steps"], max_steps=options["max_steps"])
            uses = self.seed_step_output_uses(steps)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(recipes)} recipes, {sum(steps.values())} steps and {uses} step dependencies."
            )
        )

    def seed_recipes(self, count: int) -> List[Recipe]:
        return [
            Recipe.objects.create(
                title=self.faker.sentence(nb_words=4).rstrip(".")[:200],
                description=self.faker.paragraph(nb_sentences=3)[:2000],
            )
            for _ in range(count)
        ]

    def seed_recipe_steps(self, recipes, *, min_steps: int = 4, max_steps: int = 7) -> dict:
        """Give each recipe a dense 1..N run of steps; return N per recipe id."""
        rows: List[RecipeStep] = []
        counts = {}
        for recipe in recipes:
            step_count = self.random.randint(min_steps, max_steps)
            counts[recipe.id] = step_count
            for pos in range(1, step_count + 1):
                rows.append(
                    RecipeStep(
                        recipe=recipe,
                        position=pos,
                        title=self.faker.word().capitalize(),
                        description=self.faker.sentence(nb_words=12),
                    )
                )
        RecipeStep.objects.bulk_create(rows, batch_size=1000)
        return counts

    def seed_step_output_uses(self, step_counts: dict) -> int:
        """Let some steps use the output of one or two earlier steps."""
        rows: List[StepOutputUse] = []
        for recipe_id, step_count in step_counts.items():
            for input_position in range(2, step_count + 1):
                if self.random.random() < 0.5:
                    continue
                earlier = range(1, input_position)
                picks = self.random.sample(earlier, k=min(len(earlier), self.random.randint(1, 2)))
                rows.extend(
                    StepOutputUse(recipe_id=recipe_id, output_position=output, input_position=input_position)
                    for output in sorted(picks)
                )
        StepOutputUse.objects.bulk_create(rows, batch_size=1000)
        return len(rows)
