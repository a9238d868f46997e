"""Service configuration via Pydantic settings."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class ServiceSettings(BaseModel):
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:5174"]
    descriptors_path: Optional[Path] = None
    api_host: str = "0.0.0.0"
    api_port: int = Field(8000, ge=1, le=65535)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> ServiceSettings:
    defaults = ServiceSettings()
    origins_env = os.getenv("KENNEDY_CORS_ORIGINS")
    descriptors_env = os.getenv("KENNEDY_DESCRIPTORS_PATH")
    return ServiceSettings(
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        cors_origins=_split_csv(origins_env) if origins_env is not None else defaults.cors_origins,
        descriptors_path=Path(descriptors_env) if descriptors_env else None,
        api_host=os.getenv("KENNEDY_API_HOST", defaults.api_host),
        api_port=int(os.getenv("KENNEDY_API_PORT", str(defaults.api_port))),
    )
