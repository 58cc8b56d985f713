"""IndexRecord - a single item about to be committed to a search index."""

from typing import Any

from pydantic import field_validator

from recast.domain.shared.model.value import ValueObject

FieldMap = dict[str, list[Any]]
"""Field name -> ordered values. A field may be multi-valued; values are opaque scalars."""

FieldUpdateSet = FieldMap
"""A full replacement for a record's fields, produced by a transform callback."""


class IndexRecord(ValueObject):
    """One content item as the indexer is about to persist it.

    Records are immutable. Transforms never mutate ``fields`` in place:
    they take a copy with :meth:`clone_fields`, change the copy and submit
    it with :meth:`with_fields`, which returns a new record.

    Attributes:
        id: Identifier of the content item.
        category: Classification tag (e.g. "content", "media", "member").
        item_type: Optional content type alias (e.g. "blogPost").
        fields: Field name -> list of values. Never holds a None list.
    """

    id: str
    category: str
    item_type: str | None = None
    fields: FieldMap = {}

    @field_validator("fields", mode="before")
    @classmethod
    def _normalize_values(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        normalized: FieldMap = {}
        for name, values in v.items():
            if values is None:
                normalized[name] = []
            elif isinstance(values, (list, tuple)):
                normalized[name] = list(values)
            else:
                normalized[name] = [values]
        return normalized

    def clone_fields(self) -> FieldMap:
        """Return a copy of the field mapping that is safe to modify."""
        return {name: list(values) for name, values in self.fields.items()}

    def with_fields(self, fields: FieldUpdateSet) -> "IndexRecord":
        """Return a new record whose fields are replaced by ``fields``."""
        return IndexRecord(
            id=self.id,
            category=self.category,
            item_type=self.item_type,
            fields=fields,
        )

    def first(self, name: str) -> Any:
        """Return the first value of a field, or None if absent or empty."""
        values = self.fields.get(name)
        return values[0] if values else None
