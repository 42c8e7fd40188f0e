from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    queue_capacity: int = 5
    stack_capacity: int = 3
    piece_kinds: list[str] = ["I", "O", "T", "L"]
    seed: int | None = None
    log_level: str = "INFO"
