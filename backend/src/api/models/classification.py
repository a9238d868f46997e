"""Pydantic schemas for classification and taxonomy routes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ClassifyPayload(BaseModel):
    missing: Optional[list[int]] = Field(
        default=None,
        description="Missing tooth positions (universal numbering); out-of-range values are ignored",
    )
    text: Optional[str] = Field(
        default=None,
        description="Comma-separated missing positions, alternative to 'missing'",
    )
    exclude_third_molars: bool = False
    exclude_second_molars: bool = False
    strict_flags: bool = Field(
        default=False,
        description="Apply exclusion flags exactly as given instead of coupling second to third molars",
    )


class VerdictModel(BaseModel):
    arch: str
    kennedy_class: str
    modification: Optional[int] = None
    label: str
    description: str
    gaps: list[list[int]] = []


class ClassifyResponse(BaseModel):
    missing: list[int]
    exclude_third_molars: bool
    exclude_second_molars: bool
    maxillary: Optional[VerdictModel] = None
    mandibular: Optional[VerdictModel] = None
    report: str


class ToothModel(BaseModel):
    position: int
    type: str
    molar_rank: str
    rank: int
    name: str
    anterior: bool
    arch: str


class ToothListResponse(BaseModel):
    items: list[ToothModel]
