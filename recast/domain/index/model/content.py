"""Content tree nodes as read from the content store."""

from recast.domain.shared.model.value import ValueObject


class ContentNode(ValueObject):
    """A node of the content tree.

    Attributes:
        id: Node identifier.
        parent_id: Parent identifier, "-1" for top-level nodes.
        name: Display name.
        path: Comma-joined ancestry, root to node (e.g. "-1,1066,1234").
        level: Depth below the root.
    """

    id: str
    parent_id: str
    name: str
    path: str
    level: int

    def ancestor_ids(self) -> list[str]:
        """Ancestor ids root-first, excluding the virtual root and the node itself."""
        segments = [s for s in self.path.split(",") if s]
        return [s for s in segments[:-1] if s != "-1"]
