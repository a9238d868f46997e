"""
Class descriptor texts.

Descriptions are loaded from YAML so wording can change without touching
the rules. The packaged file is always read first; an override file only
needs to carry the keys it changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.verdict import KennedyClass

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTOR_PATH = Path(__file__).parent / "rules" / "kennedy_classes.yaml"


class DescriptorError(RuntimeError):
    """Raised when a descriptor file cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class ClassDescriptors:
    classes: Dict[KennedyClass, str]
    edentulous: str

    def describe(self, kennedy_class: KennedyClass) -> str:
        return self.classes[kennedy_class]


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise DescriptorError(f"Cannot read descriptor file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise DescriptorError(f"Descriptor file {path} must contain a mapping")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: Path) -> Dict[str, Any]:
    classes = dict(base.get("classes") or {})
    override_classes = override.get("classes") or {}
    if not isinstance(override_classes, dict):
        raise DescriptorError(f"'classes' in {path} must be a mapping")
    for key, text in override_classes.items():
        try:
            KennedyClass(key)
        except ValueError as exc:
            raise DescriptorError(f"Unknown class {key!r} in {path}") from exc
        classes[key] = text
    return {
        "classes": classes,
        "edentulous": override.get("edentulous", base.get("edentulous")),
    }


def load_descriptors(path: Optional[Path] = None) -> ClassDescriptors:
    """
    Load class descriptions.

    Args:
        path: Optional override file layered on top of the packaged texts

    Returns:
        ClassDescriptors with a text for every KennedyClass

    Raises:
        DescriptorError: If a file is unreadable or incomplete
    """
    data = _load_yaml(DEFAULT_DESCRIPTOR_PATH)
    if path is not None:
        path = Path(path)
        logger.info("Loading descriptor overrides from %s", path)
        data = _merge(data, _load_yaml(path), path)

    classes = data.get("classes") or {}
    missing = [k.value for k in KennedyClass if k.value not in classes]
    if missing:
        raise DescriptorError(f"Missing descriptions for: {', '.join(missing)}")
    edentulous = data.get("edentulous")
    if not edentulous:
        raise DescriptorError("Missing description for fully edentulous arches")

    return ClassDescriptors(
        classes={k: str(classes[k.value]) for k in KennedyClass},
        edentulous=str(edentulous),
    )


@lru_cache
def default_descriptors() -> ClassDescriptors:
    return load_descriptors()
