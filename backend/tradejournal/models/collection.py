"""
Collection model for the journal database.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Collection(BaseModel):
    """
    Collection document model for the journal_db.collections collection.
    A collection groups an account's trades.
    """
    id: int = Field(..., description="Sequential collection identifier")
    user_id: int = Field(..., description="Owner account ID")
    name: str = Field(..., description="Collection name")
    description: Optional[str] = Field(None, description="Optional description")
    created_at: datetime = Field(..., description="Collection creation timestamp")
