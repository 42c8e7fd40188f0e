"""
Locust load tests for the piece supply API.

Run against a local server:
    uv run uvicorn piece_supply.app:create_app --factory --host 0.0.0.0 --port 8000

Headless benchmark (60 s, 50 users, ramp 10/s):
    uv run locust -f load_tests/locustfile.py --headless \
        -u 50 -r 10 --run-time 60s --host http://localhost:8000

Interactive web UI:
    uv run locust -f load_tests/locustfile.py --host http://localhost:8000
"""

from locust import HttpUser, between, task

from piece_supply.config import Settings

SETTINGS = Settings()


class PlayerUser(HttpUser):
    """Simulates a player issuing supply actions against the shared manager."""

    wait_time = between(0.05, 0.2)
    weight = 3

    @task(4)
    def play(self) -> None:
        self._action("play")

    @task(2)
    def reserve(self) -> None:
        self._action("reserve")

    @task(2)
    def use_reserved(self) -> None:
        self._action("use-reserved")

    @task(1)
    def swap_front(self) -> None:
        self._action("swap-front")

    @task(1)
    def swap_triple(self) -> None:
        self._action("swap-triple")

    def _action(self, name: str) -> None:
        with self.client.post(f"/actions/{name}", name=f"/actions/{name}", catch_response=True) as resp:
            if resp.status_code == 409:
                resp.success()  # rejected actions are expected: full or empty containers


class ObserverUser(HttpUser):
    """Simulates a display polling the current queue and stack."""

    wait_time = between(0.1, 0.5)
    weight = 1

    @task(3)
    def get_state(self) -> None:
        with self.client.get("/state", catch_response=True) as resp:
            body = resp.json()
            if len(body["queue"]) > SETTINGS.queue_capacity or len(body["stack"]) > SETTINGS.stack_capacity:
                resp.failure("container exceeded its capacity")

    @task(1)
    def get_health(self) -> None:
        self.client.get("/health")
