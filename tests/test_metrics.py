from httpx import ASGITransport, AsyncClient

from piece_supply.app import create_app
from piece_supply.config import Settings


async def test_metrics_endpoint_returns_200(client: AsyncClient) -> None:
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert "text/plain" in response.headers["content-type"]


async def test_metrics_exposes_action_counter(client: AsyncClient) -> None:
    response = await client.get("/metrics")
    assert "piece_supply_actions_total" in response.text


async def test_metrics_exposes_container_sizes(client: AsyncClient) -> None:
    response = await client.get("/metrics")
    assert "piece_supply_queue_size" in response.text
    assert "piece_supply_stack_size" in response.text


async def test_play_increments_success_counter(client: AsyncClient) -> None:
    await client.post("/actions/play")
    response = await client.get("/metrics")
    assert 'action="play",result="success"' in response.text


async def test_rejection_increments_rejected_counter(client: AsyncClient) -> None:
    await client.post("/actions/use-reserved")
    response = await client.get("/metrics")
    assert 'action="use_reserved",result="rejected"' in response.text


async def test_reserve_updates_stack_gauge(client: AsyncClient) -> None:
    await client.post("/actions/reserve")
    response = await client.get("/metrics")
    assert "piece_supply_stack_size 1.0" in response.text


async def test_container_gauges_set_at_startup() -> None:
    app = create_app(Settings(queue_capacity=4, stack_capacity=2))
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            response = await c.get("/metrics")
    assert "piece_supply_queue_size 4.0" in response.text
    assert "piece_supply_stack_size 0.0" in response.text
