"""Configuration for the in-memory keyword backend."""

from pydantic import BaseModel


class KeywordBackendConfig(BaseModel):
    """Keyword backend configuration.

    Only the listed fields are tokenized for unscoped queries; an empty
    list means every field.
    """

    fields: list[str] = []
    lowercase: bool = True
