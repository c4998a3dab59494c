from typing import Any, Mapping, Sequence, Tuple, Type

from django.db.models import Model, QuerySet


class DB_Accessor:
    """Thin repository base bound to one model class."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def query(self, *, order_by: Sequence[str] = (), **lookup: Any) -> QuerySet:
        """Rows matching lookup, optionally re-ordered."""
        qs: QuerySet = self.model.objects.filter(**lookup)
        return qs.order_by(*order_by) if order_by else qs

    def get(self, **lookup: Any) -> Model:
        """Exactly one row; raises model.DoesNotExist."""
        return self.model.objects.get(**lookup)

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def get_or_create(self, **lookup: Any) -> Tuple[Model, bool]:
        return self.model.objects.get_or_create(**lookup)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Bulk update rows matching lookup; returns the row count."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
