"""
Collection request schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class CollectionCreate(BaseModel):
    """Create collection request."""
    name: str = Field(..., min_length=1, max_length=100, description="Collection name")
    description: Optional[str] = Field(None, max_length=500, description="Optional description")


class CollectionUpdate(BaseModel):
    """Partial collection update."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
