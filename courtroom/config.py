"""
Configuration for the courtroom service.

Values are read from the environment and from a local .env file.
Every variable uses the COURTROOM_ prefix:

- COURTROOM_DB_URL: transcript archive database (default: in-memory SQLite)
- COURTROOM_UPLOAD_DIR: where uploaded attachments are stored (default: ./uploads)
- COURTROOM_CORS_ORIGINS: comma separated list of allowed origins
- COURTROOM_INTERVENTION_EVERY: the judge intervenes when turn count % N == 0 (default: 5)
- COURTROOM_INTERVENTION_AFTER: the judge answers every turn past this count (default: 15)
- COURTROOM_FINAL_ARGUMENTS_AFTER: closing arguments are requested past this count (default: 20)
- COURTROOM_DELIBERATION_AFTER: judgment is delivered past this count (default: 25)
- COURTROOM_CITATION_PROBABILITY: chance that opposing counsel attaches citations (default: 0.3)
- COURTROOM_RESPONSE_DELAY_SECONDS: pause before a generated reply (default: 1.5)
- COURTROOM_JUDGMENT_DELAY_SECONDS: pause before the judgment is read out (default: 3.0)
- COURTROOM_LOG_LEVEL: logging level name (default: INFO)
"""

import logging
from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]


class Settings(BaseSettings):
    """Service settings. Thresholds are compared against the total turn count."""

    db_url: str = "sqlite://"
    upload_dir: str = "./uploads"
    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_ORIGINS))

    intervention_every: int = Field(default=5, ge=1)
    intervention_after: int = Field(default=15, ge=1)
    final_arguments_after: int = Field(default=20, ge=1)
    deliberation_after: int = Field(default=25, ge=1)
    citation_probability: float = Field(default=0.3, ge=0.0, le=1.0)

    response_delay_seconds: float = Field(default=1.5, ge=0.0)
    judgment_delay_seconds: float = Field(default=3.0, ge=0.0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="COURTROOM_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
