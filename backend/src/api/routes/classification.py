"""Kennedy classification and tooth taxonomy API routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from api.models.classification import (
    ClassifyPayload,
    ClassifyResponse,
    ToothListResponse,
    ToothModel,
)
from kennedy.core.arch import ExclusionConfig, arch_for_position
from kennedy.core.taxonomy import ToothDescriptor, all_teeth, describe_tooth
from kennedy.engine import classify_dentition, sanitize_missing
from kennedy.formatting import format_report
from kennedy.selection import SelectionParseError, parse_missing_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["classification"])


def _tooth_model(descriptor: ToothDescriptor) -> ToothModel:
    arch = arch_for_position(descriptor.position)
    return ToothModel(**descriptor.to_dict(), arch=arch.name.value)


def _exclusions(payload: ClassifyPayload) -> ExclusionConfig:
    if payload.strict_flags:
        return ExclusionConfig(
            exclude_third_molars=payload.exclude_third_molars,
            exclude_second_molars=payload.exclude_second_molars,
        )
    return ExclusionConfig.coupled(
        exclude_third_molars=payload.exclude_third_molars,
        exclude_second_molars=payload.exclude_second_molars,
    )


@router.post("/classify", response_model=ClassifyResponse)
def classify_endpoint(payload: ClassifyPayload):
    """Classify both arches for a set of missing teeth."""
    if (payload.missing is None) == (payload.text is None):
        raise HTTPException(status_code=400, detail="Provide exactly one of 'missing' or 'text'")

    if payload.text is not None:
        try:
            missing = parse_missing_text(payload.text)
        except SelectionParseError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    else:
        missing = sanitize_missing(payload.missing)

    exclusions = _exclusions(payload)
    dentition = classify_dentition(missing, exclusions)
    logger.info("Classified %d missing teeth: %s", len(missing), dentition.to_dict())

    return {
        "missing": sorted(missing),
        "exclude_third_molars": exclusions.exclude_third_molars,
        "exclude_second_molars": exclusions.exclude_second_molars,
        "maxillary": dentition.maxillary.to_debug_dict() if dentition.maxillary else None,
        "mandibular": dentition.mandibular.to_debug_dict() if dentition.mandibular else None,
        "report": format_report(dentition),
    }


@router.get("/teeth", response_model=ToothListResponse)
def list_teeth_endpoint():
    """List all 32 tooth positions with type and name."""
    return {"items": [_tooth_model(d) for d in all_teeth()]}


@router.get("/teeth/{position}", response_model=ToothModel)
def get_tooth_endpoint(position: int):
    """Describe a single tooth position."""
    descriptor = describe_tooth(position)
    if descriptor is None:
        raise HTTPException(status_code=404, detail=f"Tooth {position} not found (expected 1-32)")
    return _tooth_model(descriptor)
