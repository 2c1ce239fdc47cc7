from django.apps import AppConfig

class RecipesConfig(AppConfig):
    """Django app config for recipes and their step ordering."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recipes'
