from django.core.exceptions import ObjectDoesNotExist
from django.test import TestCase
from recipes.db_accessor import DB_Accessor
from recipes.models import RecipeStep
from recipes.tests.test_utils import make_recipe_with_steps


class DBAccessorTests(TestCase):

    def setUp(self):
        self.recipe = make_recipe_with_steps(3)
        self.other = make_recipe_with_steps(2, title="other")
        self.repo = DB_Accessor(RecipeStep)

    # ---------- scoped() / list() ----------

    def test_scoped_only_returns_rows_of_the_recipe(self):
        self.assertEqual(self.repo.scoped(self.recipe.id).count(), 3)
        self.assertEqual(self.repo.scoped(self.other.id).count(), 2)

    def test_scoped_with_lookup(self):
        qs = self.repo.scoped(self.recipe.id, position__gt=1)
        self.assertEqual(qs.count(), 2)

    def test_list_filters_and_orders(self):
        qs = self.repo.list(self.recipe.id, filters={"position__lte": 2}, order_by=["-position"])
        self.assertEqual([s.position for s in qs], [2, 1])

    def test_list_with_fields_returns_dicts(self):
        rows = self.repo.list(self.recipe.id, order_by=["position"], fields=["position", "description"])
        self.assertIsInstance(rows, list)
        self.assertEqual(rows[0], {"position": 1, "description": "Step 1"})

    # ---------- exists() / get() ----------

    def test_exists(self):
        self.assertTrue(self.repo.exists(self.recipe.id, position=3))
        self.assertFalse(self.repo.exists(self.other.id, position=3))

    def test_get_is_scoped(self):
        self.assertEqual(self.repo.get(self.recipe.id, position=2).description, "Step 2")
        with self.assertRaises(ObjectDoesNotExist):
            self.repo.get(self.other.id, position=3)

    # ---------- create() / bulk_create() ----------

    def test_create_sets_recipe(self):
        step = self.repo.create(self.other.id, position=3, description="Serve")
        self.assertEqual(step.recipe_id, self.other.id)

    def test_bulk_create(self):
        created = self.repo.bulk_create(
            self.other.id,
            [{"position": 3, "description": "a"}, {"position": 4, "description": "b"}],
        )
        self.assertEqual(len(created), 2)
        self.assertEqual(self.repo.scoped(self.other.id).count(), 4)

    def test_bulk_create_nothing(self):
        self.assertEqual(self.repo.bulk_create(self.other.id, []), [])

    # ---------- update() / delete() ----------

    def test_update_returns_count_and_stays_in_recipe(self):
        count = self.repo.update(self.recipe.id, {"position": 1}, description="changed")
        self.assertEqual(count, 1)
        self.assertEqual(self.repo.get(self.other.id, position=1).description, "Step 1")

    def test_delete_returns_count(self):
        self.assertEqual(self.repo.delete(self.recipe.id, position__gte=2), 2)
        self.assertEqual(self.repo.scoped(self.recipe.id).count(), 1)
        self.assertEqual(self.repo.scoped(self.other.id).count(), 2)
