from django.contrib import admin
from recipes.models import Recipe, RecipeStep, StepOutputUse


class RecipeStepInline(admin.TabularInline):
    """Show steps on the recipe page; positions are changed through the ordering service."""
    model = RecipeStep
    extra = 0
    readonly_fields = ['position']
    ordering = ['position']


class StepOutputUseInline(admin.TabularInline):
    """Show dependency edges on the recipe page, read-only."""
    model = StepOutputUse
    extra = 0
    readonly_fields = ['output_position', 'input_position']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with their steps and dependencies."""
    list_display = ('title', 'author', 'created_at', 'step_count_display')
    search_fields = ('title', 'description')
    inlines = [RecipeStepInline, StepOutputUseInline]

    def step_count_display(self, obj):
        return obj.step_count
    step_count_display.short_description = "Steps"


@admin.register(StepOutputUse)
class StepOutputUseAdmin(admin.ModelAdmin):
    list_display = ('recipe', 'output_position', 'input_position')
    list_filter = ('recipe',)
    readonly_fields = ('recipe', 'output_position', 'input_position')
