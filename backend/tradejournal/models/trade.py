"""
Trade model for the journal database.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TradeDirection(str, Enum):
    """Trade direction."""
    LONG = "long"
    SHORT = "short"


class Trade(BaseModel):
    """
    Trade document model for the journal_db.trades collection.
    """
    model_config = ConfigDict(use_enum_values=True)

    id: int = Field(..., description="Sequential trade identifier")
    user_id: int = Field(..., description="Owner account ID")
    collection_id: Optional[int] = Field(None, description="Parent collection ID")
    instrument: str = Field(..., description="Traded instrument (e.g., 'AAPL', 'EURUSD')")
    direction: TradeDirection = Field(..., description="Long or short")
    entry_price: float = Field(..., ge=0, description="Entry price")
    exit_price: Optional[float] = Field(None, ge=0, description="Exit price, unset while open")
    entry_date: datetime = Field(..., description="When the position was opened")
    exit_date: Optional[datetime] = Field(None, description="When the position was closed")
    quantity: Optional[float] = Field(None, gt=0, description="Position size")
    notes: Optional[str] = Field(None, description="Optional trade notes")
    created_at: datetime = Field(..., description="When this record was created")

    @property
    def is_open(self) -> bool:
        return self.exit_price is None
