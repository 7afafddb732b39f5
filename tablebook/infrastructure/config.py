from pathlib import Path
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TABLEBOOK_")

    reservation_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite+pysqlite:///:memory:"
    openapi_path: Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
