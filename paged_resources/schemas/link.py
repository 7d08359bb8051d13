"""
Pydantic schemas for hypermedia navigation links.
"""
from enum import Enum
from pydantic import BaseModel, Field


class LinkRelation(str, Enum):
    """Relations used for page navigation links."""
    PREVIOUS = "previous"
    NEXT = "next"
    FIRST = "first"
    LAST = "last"
    SELF = "self"


class Link(BaseModel):
    """A hypermedia link."""
    href: str = Field(..., description="Target URI")
    rel: str = Field(..., description="Link relation")

    class Config:
        """Pydantic config."""
        frozen = True
