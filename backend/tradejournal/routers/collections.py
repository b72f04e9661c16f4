"""
Collections router for grouping trades.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from tradejournal.core.exceptions import (
    NormalizationError,
    OwnershipError,
    RecordNotFoundError,
)
from tradejournal.dependencies.auth import CurrentUser
from tradejournal.models.collection import Collection
from tradejournal.models.trade import Trade
from tradejournal.routers.trades import get_journal_service, raise_for_journal_error
from tradejournal.schemas.auth import MessageResponse
from tradejournal.schemas.collection import CollectionCreate, CollectionUpdate
from tradejournal.services.journal_service import JournalService

router = APIRouter(prefix="/collections", tags=["Collections"])


@router.get(
    "",
    response_model=list[Collection],
    summary="List collections",
)
async def list_collections(
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    List all collections of the current user.

    Requires valid token as query parameter: `?token=xxx`
    """
    return await journal.list_collections(current_user.id)


@router.post(
    "",
    response_model=Collection,
    status_code=status.HTTP_201_CREATED,
    summary="Create collection",
)
async def create_collection(
    body: CollectionCreate,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Create a new collection.

    - **name**: Collection name (required)
    - **description**: Optional description

    Requires valid token as query parameter: `?token=xxx`
    """
    return await journal.create_collection(current_user.id, body)


@router.get(
    "/{collection_id}",
    response_model=Collection,
    summary="Get collection",
)
async def get_collection(
    collection_id: int,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Get a single collection of the current user.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await journal.get_collection(collection_id, current_user.id)
    except (RecordNotFoundError, OwnershipError) as e:
        raise_for_journal_error(e)


@router.get(
    "/{collection_id}/trades",
    response_model=list[Trade],
    summary="List trades in a collection",
)
async def list_collection_trades(
    collection_id: int,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    List the trades filed under a collection.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await journal.list_collection_trades(collection_id, current_user.id)
    except (RecordNotFoundError, OwnershipError) as e:
        raise_for_journal_error(e)


@router.put(
    "/{collection_id}",
    response_model=Collection,
    summary="Update collection",
)
async def update_collection(
    collection_id: int,
    body: CollectionUpdate,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Update collection details. Only the fields present in the body are changed.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await journal.update_collection(collection_id, current_user.id, body)
    except (ValueError, RecordNotFoundError, OwnershipError, NormalizationError) as e:
        raise_for_journal_error(e)


@router.delete(
    "/{collection_id}",
    response_model=MessageResponse,
    summary="Delete collection",
)
async def delete_collection(
    collection_id: int,
    current_user: CurrentUser,
    journal: JournalService = Depends(get_journal_service),
):
    """
    Delete a collection. Its trades are kept.

    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        deleted = await journal.delete_collection(collection_id, current_user.id)
    except (RecordNotFoundError, OwnershipError) as e:
        raise_for_journal_error(e)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Collection not found",
        )

    return {"message": "Collection deleted successfully"}
