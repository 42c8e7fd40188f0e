import asyncio
from collections.abc import Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from piece_supply.app import create_app
from piece_supply.config import Settings
from piece_supply.dependencies import get_lock, get_manager
from piece_supply.manager import SupplyManager
from piece_supply.pieces import PieceFactory


class ScriptedRandom:
    """Returns kinds from a fixed script, cycling when it runs out."""

    def __init__(self, script: str) -> None:
        self._script = script
        self._pos = 0

    def choice(self, seq: Sequence[str]) -> str:
        kind = self._script[self._pos % len(self._script)]
        self._pos += 1
        assert kind in seq
        return kind


@pytest.fixture
def factory() -> PieceFactory:
    return PieceFactory(rng=ScriptedRandom("IOTLI"))


@pytest.fixture
def manager(factory: PieceFactory) -> SupplyManager:
    return SupplyManager(factory)


@pytest.fixture
async def client(manager: SupplyManager) -> AsyncClient:
    app = create_app(Settings())
    lock = asyncio.Lock()
    app.state.ready = True
    app.dependency_overrides[get_manager] = lambda: manager
    app.dependency_overrides[get_lock] = lambda: lock
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
