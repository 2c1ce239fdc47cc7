from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor scoping every query to one recipe."""

    recipe_field = "recipe_id"

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def scoped(self, recipe_id: Any, **lookup: Any) -> QuerySet:
        """Return the model's rows for one recipe, optionally filtered."""
        return self.model.objects.filter(**{self.recipe_field: recipe_id}, **lookup)

    def list(
        self,
        recipe_id: Any,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        fields: Sequence[str] = (),
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a recipe's rows, ordered, optionally as dicts of `fields`."""
        qs = self.scoped(recipe_id, **(filters or {}))
        qs = self._apply_ordering(qs, order_by)
        return list(qs.values(*fields)) if fields else qs

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def exists(self, recipe_id: Any, **lookup: Any) -> bool:
        return self.scoped(recipe_id, **lookup).exists()

    def get(self, recipe_id: Any, **lookup: Any) -> Model:
        """Fetch a single object of the recipe matching the lookup."""
        return self.scoped(recipe_id).get(**lookup)

    def create(self, recipe_id: Any, **data: Any) -> Model:
        """Create and return a new object belonging to the recipe."""
        return self.model.objects.create(**{self.recipe_field: recipe_id}, **data)

    def bulk_create(self, recipe_id: Any, rows: Iterable[Mapping[str, Any]]) -> List[Model]:
        """Create one object per mapping in `rows`; return the created objects."""
        objects = [self.model(**{self.recipe_field: recipe_id}, **row) for row in rows]
        if not objects:
            return []
        return self.model.objects.bulk_create(objects)

    def update(self, recipe_id: Any, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update the recipe's objects matching lookup; return count updated."""
        return self.scoped(recipe_id, **lookup).update(**data)

    def delete(self, recipe_id: Any, **lookup: Any) -> int:
        """Delete the recipe's objects matching lookup; return count deleted."""
        count, _ = self.scoped(recipe_id, **lookup).delete()
        return count
