"""Custom Dishka scopes for recast."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """recast dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, backends, transform stage)
    - UOW: Unit of Work (one indexing job or CLI invocation)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
