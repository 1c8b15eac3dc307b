# File: bobo_site/core/config.py

from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Basic app info
    PROJECT_NAME: str = "Bo&Bo Site API"
    VERSION: str = "0.1.0"

    # Empty prefix keeps the public paths as /projects, /site, ...
    api_prefix: str = ""
    debug: bool = False

    # CORS
    backend_cors_origins: Annotated[List[str], NoDecode] = ["*"]

    # Database
    database_url: str = "sqlite:///./movies.db"
    seed_on_startup: bool = True

    # Uploaded posters live in <uploads_dir>/posters and are served under /uploads
    uploads_dir: Path = Path("uploads")
    max_upload_bytes: int = 5 * 1024 * 1024

    # Pre-generated project list used when the live list is unavailable
    static_feed_path: Path = Path("data/movies.json")

    # Logging
    log_level: str = "INFO"
    log_dir: str = ""

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @property
    def posters_dir(self) -> Path:
        return self.uploads_dir / "posters"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
