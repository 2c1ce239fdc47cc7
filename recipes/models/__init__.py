from .recipe import Recipe
from .recipe_step import RecipeStep
from .step_output_use import StepOutputUse

__all__ = [
    "Recipe",
    "RecipeStep",
    "StepOutputUse",
]
