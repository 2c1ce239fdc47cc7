from django.test import SimpleTestCase, TestCase

from recipes.models import RecipeStep, StepOutputUse
from recipes.serializers import (
    DependencySelectionSerializer,
    RecipeStepSerializer,
    StepOutputUseSerializer,
    ValidationResultSerializer,
)
from recipes.services.step_validation import ValidationResult, validate_incoming
from recipes.tests.test_utils import make_recipe_with_steps


class DependencySelectionSerializerTestCase(SimpleTestCase):
    def test_accepts_earlier_steps_and_drops_duplicates(self):
        serializer = DependencySelectionSerializer(
            data={"input_position": 4, "uses_steps": ["3", "1", "3", 2]}
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["uses_steps"], [3, 1, 2])

    def test_missing_selection_means_no_dependencies(self):
        serializer = DependencySelectionSerializer(data={"input_position": 2})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["uses_steps"], [])

    def test_rejects_later_steps(self):
        serializer = DependencySelectionSerializer(
            data={"input_position": 2, "uses_steps": [1, 2, 3]}
        )
        self.assertFalse(serializer.is_valid())
        self.assertEqual(
            serializer.errors["uses_steps"][0],
            "Step 2 can only use output from earlier steps, not Steps 2 and 3",
        )

    def test_rejects_non_numbers(self):
        serializer = DependencySelectionSerializer(
            data={"input_position": 3, "uses_steps": ["one"]}
        )
        self.assertFalse(serializer.is_valid())
        self.assertIn("uses_steps", serializer.errors)

    def test_rejects_non_positive_input_position(self):
        serializer = DependencySelectionSerializer(data={"input_position": 0, "uses_steps": []})
        self.assertFalse(serializer.is_valid())
        self.assertIn("input_position", serializer.errors)


class ValidationResultSerializerTestCase(SimpleTestCase):
    def test_rejected_payload(self):
        result = validate_incoming([(1, 2), (1, 3)], 1, 4)
        data = ValidationResultSerializer(result).data
        self.assertEqual(data["valid"], False)
        self.assertEqual(data["blocking"], [2, 3])
        self.assertEqual(
            data["error"],
            "Cannot move Step 1 to position 4 because Steps 2 and 3 use its output",
        )

    def test_ok_payload(self):
        data = ValidationResultSerializer(ValidationResult.ok()).data
        self.assertEqual(dict(data), {"valid": True, "blocking": [], "error": None})


class ModelSerializersTestCase(TestCase):
    def setUp(self):
        self.recipe = make_recipe_with_steps(2, edges=[(1, 2)])

    def test_step_serializer(self):
        step = RecipeStep.objects.get(recipe=self.recipe, position=2)
        data = RecipeStepSerializer(step).data
        self.assertEqual(data["position"], 2)
        self.assertEqual(data["description"], "Step 2")
        self.assertEqual(str(data["recipe"]), str(self.recipe.id))

    def test_step_serializer_cannot_change_position(self):
        step = RecipeStep.objects.get(recipe=self.recipe, position=2)
        serializer = RecipeStepSerializer(step, data={"position": 1, "description": "new"}, partial=True)
        self.assertTrue(serializer.is_valid(), serializer.errors)
        serializer.save()
        step.refresh_from_db()
        self.assertEqual((step.position, step.description), (2, "new"))

    def test_step_output_use_serializer(self):
        use = StepOutputUse.objects.get(recipe=self.recipe)
        self.assertEqual(
            dict(StepOutputUseSerializer(use).data),
            {"output_position": 1, "input_position": 2},
        )
