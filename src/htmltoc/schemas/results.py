"""ToC build output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from htmltoc.schemas.headings import Heading, HeadingNode


class TocResult(BaseModel):
    """Rewritten markup plus the heading tree built from it."""

    content: str = ""
    headings: list[Heading] = Field(default_factory=list)
    tree: list[HeadingNode] = Field(default_factory=list)
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.tree
