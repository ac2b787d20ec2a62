from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


class AppSettings(BaseSettings):
    api_title: str = "Calculator Suite API"
    api_version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = Field(3000, validation_alias=AliasChoices("PORT", "CALCSUITE_PORT"))
    log_level: str = "INFO"

    cors_origins: List[str] = Field(default_factory=list)
    frontend_dir: Path = PACKAGE_ROOT / "static"

    max_expression_length: int = 200
    max_expression_depth: int = 32
    emi_schedule_preview_rows: int = 5
    emi_full_schedule: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def resolved_cors_origins(self) -> List[str]:
        """
        Returns the configured CORS origins without trailing slashes, deduped.
        """
        normalized: list[str] = []
        for origin in self.cors_origins:
            cleaned = origin.strip().rstrip("/")
            if cleaned and cleaned not in normalized:
                normalized.append(cleaned)
        return normalized


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
