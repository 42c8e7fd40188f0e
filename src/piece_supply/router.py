import asyncio
import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from piece_supply.dependencies import get_lock, get_manager
from piece_supply.manager import SupplyManager
from piece_supply.metrics import ACTIONS_TOTAL, record_sizes
from piece_supply.models import ActionResult, PieceResponse, Rejected, StateResponse

logger = logging.getLogger(__name__)
router = APIRouter()


async def _run(
    manager: SupplyManager,
    lock: asyncio.Lock,
    action: Callable[[SupplyManager], ActionResult],
) -> JSONResponse:
    async with lock:
        result = action(manager)
        snapshot = manager.snapshot()
    ACTIONS_TOTAL.labels(action=result.action, result=result.outcome).inc()
    record_sizes(snapshot)
    status_code = 409 if isinstance(result, Rejected) else 200
    return JSONResponse(content=result.model_dump(), status_code=status_code)


@router.post("/actions/play")
async def play(
    manager: SupplyManager = Depends(get_manager),
    lock: asyncio.Lock = Depends(get_lock),
) -> JSONResponse:
    return await _run(manager, lock, SupplyManager.play)


@router.post("/actions/reserve")
async def reserve(
    manager: SupplyManager = Depends(get_manager),
    lock: asyncio.Lock = Depends(get_lock),
) -> JSONResponse:
    return await _run(manager, lock, SupplyManager.reserve)


@router.post("/actions/use-reserved")
async def use_reserved(
    manager: SupplyManager = Depends(get_manager),
    lock: asyncio.Lock = Depends(get_lock),
) -> JSONResponse:
    return await _run(manager, lock, SupplyManager.use_reserved)


@router.post("/actions/swap-front")
async def swap_front(
    manager: SupplyManager = Depends(get_manager),
    lock: asyncio.Lock = Depends(get_lock),
) -> JSONResponse:
    return await _run(manager, lock, SupplyManager.swap_front)


@router.post("/actions/swap-triple")
async def swap_triple(
    manager: SupplyManager = Depends(get_manager),
    lock: asyncio.Lock = Depends(get_lock),
) -> JSONResponse:
    return await _run(manager, lock, SupplyManager.swap_triple)


@router.get("/state")
async def state(
    manager: SupplyManager = Depends(get_manager),
    lock: asyncio.Lock = Depends(get_lock),
) -> StateResponse:
    async with lock:
        snapshot = manager.snapshot()
    return StateResponse(
        queue=[PieceResponse(kind=p.kind, id=p.id) for p in snapshot.queue],
        stack=[PieceResponse(kind=p.kind, id=p.id) for p in snapshot.stack],
    )


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.get("/metrics")
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get("/ready")
async def ready(request: Request) -> dict:
    if not request.app.state.ready:
        raise HTTPException(status_code=503)
    return {"status": "ok"}
