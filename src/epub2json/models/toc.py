"""Data models for the table of contents."""

from pydantic import BaseModel, Field


class ContentNode(BaseModel):
    """Single nav-point in the table of contents tree."""

    text: str
    href: str
    # None when the nav-point has no nested nav-points at all
    contents: list["ContentNode"] | None = None

    def count(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return 1 + sum(child.count() for child in self.contents or [])


class TableOfContents(BaseModel):
    """Book title plus the top-level nav-points."""

    title: str
    contents: list[ContentNode] = Field(default_factory=list)

    def count(self) -> int:
        """Total number of nodes in the tree."""
        return sum(node.count() for node in self.contents)
