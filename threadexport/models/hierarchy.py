"""
Hierarchy models for tree visualization.

A HierarchyNode tree is derived from the flat comment sequence on demand
and handed to an external renderer. It is never written back.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


ROOT_ID = "root"


class HierarchyNode(BaseModel):
    """
    One node of the visualization tree.
    """

    id: str = Field(
        ...,
        description="Numbering of the comment, or 'root' for the post node"
    )

    parent_id: Optional[str] = Field(
        default=None,
        description="Numbering with the last segment removed, 'root' for top-level comments, None for the root"
    )

    name: str = Field(default="", description="Label shown by the renderer")

    score: int = Field(default=0)

    snippet: str = Field(default="", description="Body truncated for display")

    count: int = Field(
        default=1,
        description="Subtree size badge: 1 for leaves, sum of children's counts otherwise"
    )

    children: List['HierarchyNode'] = Field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.id == ROOT_ID

    def iter_nodes(self):
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> Dict[str, Any]:
        """Nested plain-dict form for d3-style renderers."""
        return {
            "id": self.id,
            "parentId": self.parent_id,
            "name": self.name,
            "score": self.score,
            "snippet": self.snippet,
            "count": self.count,
            "children": [child.to_dict() for child in self.children],
        }


# Enable forward references for self-referencing model
HierarchyNode.model_rebuild()
