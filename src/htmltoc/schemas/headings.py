"""Heading and heading tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """A heading element accepted during extraction."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    raw_attributes: str = ""
    text: str
    id: str
    index: int = Field(..., ge=0)


class HeadingNode(BaseModel):
    """A hierarchical heading node."""

    title: str
    id: str
    level: int = Field(..., ge=1, le=6)
    children: list["HeadingNode"] = Field(default_factory=list)
