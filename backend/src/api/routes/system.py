"""System routes for health checks."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

import kennedy


router = APIRouter(prefix="/api", tags=["system"])


class HealthResponse(BaseModel):
    status: str


class VersionResponse(BaseModel):
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/version", response_model=VersionResponse)
async def version():
    """Classifier package version."""
    return {"version": kennedy.__version__}
