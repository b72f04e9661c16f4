"""
Trade request schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tradejournal.models.trade import TradeDirection


class TradeCreate(BaseModel):
    """Create trade request."""
    model_config = ConfigDict(use_enum_values=True)

    instrument: str = Field(..., min_length=1, description="Traded instrument")
    direction: TradeDirection = Field(..., description="Long or short")
    entry_price: float = Field(..., ge=0, description="Entry price")
    exit_price: Optional[float] = Field(None, ge=0, description="Exit price")
    entry_date: datetime = Field(..., description="When the position was opened")
    exit_date: Optional[datetime] = Field(None, description="When the position was closed")
    quantity: Optional[float] = Field(None, gt=0, description="Position size")
    collection_id: Optional[int] = Field(None, description="Collection to file the trade under")
    notes: Optional[str] = Field(None, max_length=5000, description="Optional notes")


class TradeUpdate(BaseModel):
    """
    Partial trade update. Only fields present in the request body are changed.
    """
    model_config = ConfigDict(use_enum_values=True)

    instrument: Optional[str] = Field(None, min_length=1)
    direction: Optional[TradeDirection] = None
    entry_price: Optional[float] = Field(None, ge=0)
    exit_price: Optional[float] = Field(None, ge=0)
    entry_date: Optional[datetime] = None
    exit_date: Optional[datetime] = None
    quantity: Optional[float] = Field(None, gt=0)
    collection_id: Optional[int] = None
    notes: Optional[str] = Field(None, max_length=5000)
