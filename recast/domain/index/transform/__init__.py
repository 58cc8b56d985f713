"""Transform callbacks for the indexing transform stage."""

from recast.domain.index.transform.base import RecordSelector, fail_open
from recast.domain.index.transform.breadcrumb import BreadcrumbTransform
from recast.domain.index.transform.composite import CombinedFieldTransform, combine_fields
from recast.domain.index.transform.search_path import (
    MalformedPath,
    SearchPathTransform,
    tokenize_path,
)

__all__ = [
    "BreadcrumbTransform",
    "CombinedFieldTransform",
    "MalformedPath",
    "RecordSelector",
    "SearchPathTransform",
    "combine_fields",
    "fail_open",
    "tokenize_path",
]
