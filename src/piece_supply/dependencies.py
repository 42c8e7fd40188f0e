import asyncio
from functools import lru_cache

from fastapi import Request

from piece_supply.config import Settings
from piece_supply.manager import SupplyManager


@lru_cache
def get_settings() -> Settings:
    return Settings()


async def get_manager(request: Request) -> SupplyManager:
    return request.app.state.manager


async def get_lock(request: Request) -> asyncio.Lock:
    return request.app.state.lock
