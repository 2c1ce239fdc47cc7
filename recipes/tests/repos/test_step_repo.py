from django.test import TestCase
from recipes.models import RecipeStep
from recipes.repos import StepRepo
from recipes.tests.test_utils import make_recipe, make_recipe_with_steps


class StepRepoTestCase(TestCase):

    def setUp(self):
        self.recipe = make_recipe_with_steps(3)
        self.other = make_recipe_with_steps(5, title="other")
        self.repo = StepRepo()

    def test_load_positions_sorted_and_scoped(self):
        self.assertEqual(self.repo.load_positions(self.recipe.id), [1, 2, 3])
        self.assertEqual(self.repo.load_positions(self.other.id), [1, 2, 3, 4, 5])

    def test_load_positions_empty_recipe(self):
        empty = make_recipe(title="empty")
        self.assertEqual(self.repo.load_positions(empty.id), [])

    def test_ids_by_position(self):
        mapping = self.repo.ids_by_position(self.recipe.id)
        self.assertEqual(sorted(mapping), [1, 2, 3])
        self.assertEqual(RecipeStep.objects.get(id=mapping[2]).description, "Step 2")

    def test_get_at(self):
        self.assertEqual(self.repo.get_at(self.recipe.id, 3).description, "Step 3")
        self.assertIsNone(self.repo.get_at(self.recipe.id, 4))

    def test_next_position(self):
        self.assertEqual(self.repo.next_position(self.recipe.id), 4)
        self.assertEqual(self.repo.next_position(make_recipe(title="empty").id), 1)

    def test_append_adds_after_last_step(self):
        step = self.repo.append(self.recipe.id, description="Serve", title="Plate up")
        self.assertEqual(step.position, 4)
        self.assertEqual(step.recipe_id, self.recipe.id)
        self.assertEqual(self.repo.load_positions(self.recipe.id), [1, 2, 3, 4])

    def test_assign_position_moves_one_step_by_id(self):
        step = self.repo.get_at(self.recipe.id, 1)
        updated = self.repo.assign_position(self.recipe.id, step.id, 7)
        self.assertEqual(updated, 1)
        step.refresh_from_db()
        self.assertEqual(step.position, 7)

    def test_assign_position_ignores_other_recipes(self):
        step = self.repo.get_at(self.other.id, 1)
        updated = self.repo.assign_position(self.recipe.id, step.id, 9)
        self.assertEqual(updated, 0)
        step.refresh_from_db()
        self.assertEqual(step.position, 1)

    def test_delete_at(self):
        self.assertEqual(self.repo.delete_at(self.recipe.id, 2), 1)
        self.assertEqual(self.repo.load_positions(self.recipe.id), [1, 3])
        self.assertEqual(self.repo.load_positions(self.other.id), [1, 2, 3, 4, 5])
