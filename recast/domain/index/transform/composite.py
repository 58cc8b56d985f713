"""Composite field - every field's values joined into one searchable field."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.transform.base import RecordSelector

COMBINED_FIELD = "combinedField"


def combine_fields(fields: Mapping[str, Sequence[Any]], exclude: Iterable[str] = ()) -> str:
    """Newline-join all non-null values, in field order then value order.

    Null values are skipped, so they never produce blank lines.
    """
    skip = set(exclude)
    parts: list[str] = []
    for name, values in fields.items():
        if name in skip or values is None:
            continue
        parts.extend(str(value) for value in values if value is not None)
    return "\n".join(parts)


class CombinedFieldTransform:
    """Adds a field holding the concatenation of every other field.

    Lets a single-field query match text from any field of the record.
    An existing field of the same name is replaced and is not itself
    folded into the combined value.
    """

    def __init__(
        self,
        categories: Iterable[str] = (),
        item_types: Iterable[str] = (),
        field_name: str = COMBINED_FIELD,
        exclude: Iterable[str] = (),
    ) -> None:
        self.selector = RecordSelector(categories, item_types)
        self.field_name = field_name
        self.exclude = frozenset(exclude) | {field_name}

    def __call__(self, record: IndexRecord) -> IndexRecord | None:
        if not self.selector.matches(record):
            return None

        fields = record.clone_fields()
        fields[self.field_name] = [combine_fields(record.fields, self.exclude)]
        return record.with_fields(fields)
