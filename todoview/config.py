from functools import lru_cache
from typing import Literal
from urllib.parse import urljoin

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 5173
    log_level: str = "INFO"
    environment: Literal["development", "production"] = "production"
    dev_api_url: str = "http://localhost:8080/api/todos"
    api_url: str = "/api/todos"
    service_origin: str = "http://localhost:8080"
    request_timeout: float | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "TODOVIEW_"}

    @property
    def collection_url(self) -> str:
        """Collection endpoint for the current environment, without a trailing slash."""
        if self.environment == "development":
            url = self.dev_api_url
        else:
            url = urljoin(self.service_origin, self.api_url)
        return url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
