"""Content-store port used by transforms that need the content tree."""

from abc import abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Protocol

from recast.domain.index.model.content import ContentNode


class ContentScope(Protocol):
    """Reads against the content store inside one consistency scope."""

    @abstractmethod
    async def get(self, node_id: str) -> ContentNode | None: ...

    @abstractmethod
    async def ancestors(self, node_id: str) -> list[ContentNode]:
        """Ancestors of a node, root first, excluding the node itself.

        Raises:
            MissingScopeError: If the scope is no longer active.
        """
        ...


class ContentStore(Protocol):
    """Source of the content tree.

    Callers never assume an ambient scope: every lookup runs inside
    ``async with store.scope() as scope``, which releases the scope on
    every exit path.
    """

    @abstractmethod
    def scope(self) -> AbstractAsyncContextManager[ContentScope]: ...
