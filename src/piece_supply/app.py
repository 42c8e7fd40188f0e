import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from piece_supply.config import Settings
from piece_supply.dependencies import get_settings
from piece_supply.logging_setup import configure_logging
from piece_supply.manager import build_manager
from piece_supply.metrics import record_sizes
from piece_supply.router import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        app.state.ready = False
        app.state.manager = build_manager(settings)
        record_sizes(app.state.manager.snapshot())
        app.state.lock = asyncio.Lock()
        app.state.ready = True
        logger.info(
            "Piece supply ready queue_capacity=%d stack_capacity=%d",
            settings.queue_capacity,
            settings.stack_capacity,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.include_router(router)
    return app
