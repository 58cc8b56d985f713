"""Search path - ancestry paths rewritten as whitespace-separated tokens.

Content paths such as ``-1,1066,1234,1236`` are stored as one opaque token by
most analyzers. Rewriting the delimiters as spaces (``-1 1066 1234 1236``)
makes every ancestor id a separate token, so "all descendants of 1234" is a
plain token match on the search path field.
"""

import logging
from collections.abc import Iterable
from typing import Any

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.transform.base import RecordSelector

logger = logging.getLogger(__name__)

PATH_FIELD = "path"
SEARCH_PATH_FIELD = "searchPath"


class MalformedPath(ValueError):
    """Path value cannot be split on the delimiter."""


def tokenize_path(path: str, delimiter: str = ",") -> str:
    """Replace each delimiter in ``path`` with a single space.

    Raises:
        MalformedPath: If a segment is empty or contains whitespace.
    """
    if path == "":
        return ""
    segments = path.split(delimiter)
    for segment in segments:
        if not segment or any(c.isspace() for c in segment):
            raise MalformedPath(f"Invalid segment {segment!r} in path {path!r}")
    return " ".join(segments)


class SearchPathTransform:
    """Adds a tokenized copy of the record's path field.

    Records without a path get an empty search path rather than no field.
    A malformed path is copied through unchanged.
    """

    def __init__(
        self,
        categories: Iterable[str] = (),
        item_types: Iterable[str] = (),
        source_field: str = PATH_FIELD,
        target_field: str = SEARCH_PATH_FIELD,
        delimiter: str = ",",
    ) -> None:
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self.selector = RecordSelector(categories, item_types)
        self.source_field = source_field
        self.target_field = target_field
        self.delimiter = delimiter

    def __call__(self, record: IndexRecord) -> IndexRecord | None:
        if not self.selector.matches(record):
            return None

        fields = record.clone_fields()
        fields[self.target_field] = [self._tokenize(record.id, record.first(self.source_field))]
        return record.with_fields(fields)

    def _tokenize(self, record_id: str, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            logger.warning(f"Path of {record_id} is {type(value).__name__}, not text; copying as-is")
            return str(value)
        try:
            return tokenize_path(value, self.delimiter)
        except MalformedPath as e:
            logger.warning(f"Malformed path on {record_id}, copying as-is: {e}")
            return value
