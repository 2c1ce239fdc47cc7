from rest_framework import serializers
from recipes.models import RecipeStep, StepOutputUse
from recipes.services.step_validation import format_step_list, validate_dependency_selection


class RecipeStepSerializer(serializers.ModelSerializer):
    """Serializer for RecipeStep with its ordering fields."""

    class Meta:
        model = RecipeStep
        fields = ["id", "recipe", "position", "title", "description"]
        read_only_fields = ["id", "recipe", "position"]


class StepOutputUseSerializer(serializers.ModelSerializer):
    """Serializer for a dependency edge; orientation is read-only."""

    class Meta:
        model = StepOutputUse
        fields = ["output_position", "input_position"]
        read_only_fields = fields


class ValidationResultSerializer(serializers.Serializer):
    """Structured payload for a reorder or deletion check."""
    valid = serializers.BooleanField()
    blocking = serializers.ListField(child=serializers.IntegerField())
    error = serializers.CharField(allow_null=True)


class DependencySelectionSerializer(serializers.Serializer):
    """
    Normalises the steps picked in a "uses output from" selector.

    Duplicates are dropped in first-seen order; anything that is not an
    earlier step than `input_position` is rejected.
    """
    input_position = serializers.IntegerField(min_value=1)
    uses_steps = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=True,
        default=list,
    )

    def validate(self, attrs):
        input_position = attrs["input_position"]
        uses_steps = []
        for position in attrs.get("uses_steps", []):
            if position not in uses_steps:
                uses_steps.append(position)

        wrong_way = validate_dependency_selection(input_position, uses_steps)
        if wrong_way:
            raise serializers.ValidationError(
                {
                    "uses_steps": (
                        f"Step {input_position} can only use output from earlier steps, "
                        f"not {format_step_list(wrong_way)}"
                    )
                }
            )
        attrs["uses_steps"] = uses_steps
        return attrs
