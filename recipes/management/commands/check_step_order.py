from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from recipes.models import Recipe
from recipes.repos import StepOutputUseRepo, StepRepo
from recipes.services.step_validation import find_inconsistencies


class Command(BaseCommand):
    """
    Audit step positions and step dependencies.

    For every recipe (or the one given with --recipe) this checks that step
    positions run 1..N without gaps or duplicates and that every dependency
    points from an existing earlier step to an existing later one. Each
    problem is printed on its own line; the command fails if any were found.
    """

    help = 'Checks step positions and step dependencies for consistency'

    def add_arguments(self, parser):
        parser.add_argument("--recipe", help="Only check the recipe with this id.")

    def handle(self, *args, **options):
        recipes = Recipe.objects.order_by("created_at", "id")
        if options.get("recipe"):
            try:
                recipes = recipes.filter(pk=options["recipe"])
                found = recipes.exists()
            except ValidationError:
                found = False
            if not found:
                raise CommandError(f"Recipe {options['recipe']} does not exist")

        step_repo = StepRepo()
        output_use_repo = StepOutputUseRepo()
        checked = 0
        problem_count = 0
        for recipe in recipes.iterator():
            checked += 1
            problems = find_inconsistencies(
                step_repo.load_positions(recipe.pk),
                output_use_repo.load_edges(recipe.pk),
            )
            for problem in problems:
                self.stdout.write(f"{recipe.pk}: {problem}")
            problem_count += len(problems)

        if problem_count:
            raise CommandError(f"Found {problem_count} problems in {checked} recipes")
        self.stdout.write(self.style.SUCCESS(f"Checked {checked} recipes; no problems found."))
