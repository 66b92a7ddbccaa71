"""Application settings and configuration helpers."""
from functools import lru_cache
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./hr_directory.db", alias="DATABASE_URL"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    acronyms_path: str | None = Field(default=None, alias="ACRONYMS_PATH")
    top_performers_limit: int = Field(default=10, ge=1, alias="TOP_PERFORMERS_LIMIT")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    defaults = Settings.model_fields
    return Settings(
        database_url=os.getenv("DATABASE_URL", defaults["database_url"].default),
        log_level=os.getenv("LOG_LEVEL", defaults["log_level"].default),
        acronyms_path=os.getenv("ACRONYMS_PATH") or None,
        top_performers_limit=int(
            os.getenv("TOP_PERFORMERS_LIMIT", defaults["top_performers_limit"].default)
        ),
    )
