from django.test import TestCase

from recipes.models import Recipe, RecipeStep
from recipes.tests.test_utils import make_user, make_recipe, make_recipe_with_steps


class RecipeModelTestCase(TestCase):
    def test_string_representation_is_title(self):
        recipe = make_recipe(title="Onion soup")
        self.assertEqual(str(recipe), "Onion soup")

    def test_author_is_optional(self):
        recipe = make_recipe()
        self.assertIsNone(recipe.author)

    def test_recipe_belongs_to_author(self):
        user = make_user()
        recipe = make_recipe(author=user)
        self.assertEqual(list(user.recipes.all()), [recipe])

    def test_step_count(self):
        recipe = make_recipe_with_steps(4)
        self.assertEqual(recipe.step_count, 4)

    def test_steps_deleted_with_recipe(self):
        recipe = make_recipe_with_steps(2)
        recipe.delete()
        self.assertFalse(RecipeStep.objects.exists())
        self.assertFalse(Recipe.objects.exists())
