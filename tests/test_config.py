import pytest

from piece_supply.config import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.queue_capacity == 5
    assert s.stack_capacity == 3
    assert s.piece_kinds == ["I", "O", "T", "L"]
    assert s.seed is None
    assert s.log_level == "INFO"


def test_override_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUEUE_CAPACITY", "7")
    monkeypatch.setenv("PIECE_KINDS", '["S", "Z"]')
    monkeypatch.setenv("SEED", "42")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings()
    assert s.queue_capacity == 7
    assert s.piece_kinds == ["S", "Z"]
    assert s.seed == 42
    assert s.log_level == "DEBUG"
