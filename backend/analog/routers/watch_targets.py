"""
Watch targets router for the contracts collection and bootstrap status.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from analog.database.connections import get_mongo_client
from analog.database.databases import analog_db
from analog.schemas.bootstrap import VerificationReport
from analog.schemas.watch_target import WatchTargetCreate, WatchTargetResponse
from analog.services.bootstrap_service import BootstrapService
from analog.services.watch_target_service import WatchTargetService

router = APIRouter(tags=["Watch Targets"])


async def get_watch_target_service() -> WatchTargetService:
    """Dependency to get WatchTargetService instance."""
    client = await get_mongo_client()
    return WatchTargetService(client[analog_db.DB_NAME])


async def get_bootstrap_service() -> BootstrapService:
    """Dependency to get BootstrapService instance."""
    client = await get_mongo_client()
    return BootstrapService(client)


@router.get(
    "/watch-targets",
    response_model=list[WatchTargetResponse],
    summary="List watch targets",
)
async def list_watch_targets(
    contract_address: Optional[str] = Query(None, description="Only targets for this contract"),
    limit: int = Query(100, ge=1, le=1000),
    service: WatchTargetService = Depends(get_watch_target_service),
):
    """List stored watch targets in insertion order."""
    try:
        return await service.list_targets(contract_address=contract_address, limit=limit)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "/watch-targets/{target_id}",
    response_model=WatchTargetResponse,
    summary="Get watch target",
)
async def get_watch_target(
    target_id: str,
    service: WatchTargetService = Depends(get_watch_target_service),
):
    try:
        target = await service.get_target(target_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if target is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Watch target not found",
        )
    return target


@router.post(
    "/watch-targets",
    response_model=WatchTargetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create watch target",
)
async def create_watch_target(
    body: WatchTargetCreate,
    service: WatchTargetService = Depends(get_watch_target_service),
):
    """
    Register a new watch target.

    - **chain_endpoint**: ws, wss, http or https URI of the node
    - **contract_address**: 0x-prefixed 40 hex digit address, stored in EIP-55 form
    - **event_type**: 64 hex digit event signature hash
    """
    try:
        return await service.create_target(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.delete(
    "/watch-targets/{target_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete watch target",
)
async def delete_watch_target(
    target_id: str,
    service: WatchTargetService = Depends(get_watch_target_service),
):
    try:
        removed = await service.delete_target(target_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Watch target not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/bootstrap/status",
    response_model=VerificationReport,
    summary="Verify bootstrap state",
)
async def bootstrap_status(
    service: BootstrapService = Depends(get_bootstrap_service),
):
    """Report whether the collections exist and the seed target is stored once."""
    return await service.verify()
