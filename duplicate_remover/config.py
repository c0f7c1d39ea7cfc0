"""Application settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:5173"]
    hash_chunk_size: int = 64 * 1024
    hash_workers: int = 4
    walk_batch_size: int = 64
    recent_directories_limit: int = 10
    progress_notify_interval: float = 1.0  # seconds between throttled WS updates

    model_config = {"env_prefix": "DUPREMOVER_"}


settings = Settings()
