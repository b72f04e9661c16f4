"""
Trades router for the trade journal.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from tradejournal.core.exceptions import (
    NormalizationError,
    OwnershipError,
    RecordNotFoundError,
)
from tradejournal.dependencies.auth import CurrentUser
from tradejournal.dependencies.database import get_storage
from tradejournal.models.trade import Trade
from tradejournal.schemas.auth import MessageResponse
from tradejournal.schemas.trade import TradeCreate, TradeUpdate
from tradejournal.services.journal_service import JournalService
from tradejournal.storage import JournalStorage

router = APIRouter(prefix="/trades", tags=["Trades"])


async def get_journal_service(
    storage: JournalStorage = Depends(get_storage),
) -> JournalService:
    """Dependency to get JournalService instance."""
    return JournalService(storage)


def raise_for_journal_error(e: Exception) -> None:
    """Map journal service errors onto HTTP errors."""
    if isinstance(e, RecordNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, OwnershipError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    if isinstance(e, NormalizationError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    if isinstance(e, ValueError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    raise e


@router.get(
    "",
    response_model=list[Trade],
    summary="List trades",
)
async def list_trades(
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    List all trades of the current user.

    Requires valid token as query parameter: `?token=xxx`
    """
    return await journal.list_trades(current_user.id)


@router.post(
    "",
    response_model=Trade,
    status_code=status.HTTP_201_CREATED,
    summary="Record a trade",
)
async def create_trade(
    body: TradeCreate,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Record a new trade.

    - **instrument**: Traded instrument
    - **direction**: "long" or "short"
    - **entry_price** / **entry_date**: Position opening
    - **exit_price** / **exit_date**: Optional, position closing
    - **collection_id**: Optional collection of the current user
    - **notes**: Optional notes

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await journal.create_trade(current_user.id, body)
    except (ValueError, RecordNotFoundError, OwnershipError) as e:
        raise_for_journal_error(e)


@router.get(
    "/{trade_id}",
    response_model=Trade,
    summary="Get trade",
)
async def get_trade(
    trade_id: int,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Get a single trade of the current user.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await journal.get_trade(trade_id, current_user.id)
    except (RecordNotFoundError, OwnershipError) as e:
        raise_for_journal_error(e)


@router.put(
    "/{trade_id}",
    response_model=Trade,
    summary="Update trade",
)
async def update_trade(
    trade_id: int,
    body: TradeUpdate,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Update a trade. Only the fields present in the body are changed.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await journal.update_trade(trade_id, current_user.id, body)
    except (ValueError, RecordNotFoundError, OwnershipError, NormalizationError) as e:
        raise_for_journal_error(e)


@router.delete(
    "/{trade_id}",
    response_model=MessageResponse,
    summary="Delete trade",
)
async def delete_trade(
    trade_id: int,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Delete a trade.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        deleted = await journal.delete_trade(trade_id, current_user.id)
    except (RecordNotFoundError, OwnershipError) as e:
        raise_for_journal_error(e)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trade not found",
        )

    return {"message": "Trade deleted successfully"}
