"""
Kennedy Classification of Partially Edentulous Arches

Version: 1.0.0

Classifies each dental arch (Class I-IV plus modification count) from
the set of missing teeth, optionally ignoring third and second molars.

Main Components:
- core/: Tooth taxonomy, arch geometry, gap segmentation, verdicts
- engine.py: Rule engine (edentulism -> IV -> I/II -> III)
- descriptors.py + rules/: YAML class descriptions
- selection.py: Headless tooth selection state (text entry, drags, flags)
- formatting.py: Plain-text report rendering

Usage:
    from kennedy import ExclusionConfig, MAXILLARY, classify

    verdict = classify({1, 4, 5, 12}, MAXILLARY)
    verdict.label        # "Class II modification 2"

    verdict = classify({1, 16}, "maxillary", ExclusionConfig(exclude_third_molars=True))
    verdict is None      # nothing left to classify
"""

from .core import (
    Arch,
    ArchName,
    DentitionVerdict,
    EffectiveArch,
    ExclusionConfig,
    Gap,
    KennedyClass,
    MAXILLARY,
    MANDIBULAR,
    ToothDescriptor,
    ToothType,
    UnknownArchError,
    Verdict,
    describe_tooth,
    get_arch,
    segment,
    tooth_name,
    tooth_type,
)
from .descriptors import DescriptorError
from .engine import KennedyClassifier, classify, classify_dentition
from .formatting import format_report, format_verdict
from .selection import SelectionParseError, ToothSelection, parse_missing_text

__version__ = "1.0.0"

__all__ = [
    "Arch",
    "ArchName",
    "DentitionVerdict",
    "DescriptorError",
    "EffectiveArch",
    "ExclusionConfig",
    "Gap",
    "KennedyClass",
    "KennedyClassifier",
    "MAXILLARY",
    "MANDIBULAR",
    "SelectionParseError",
    "ToothDescriptor",
    "ToothSelection",
    "ToothType",
    "UnknownArchError",
    "Verdict",
    "classify",
    "classify_dentition",
    "describe_tooth",
    "format_report",
    "format_verdict",
    "get_arch",
    "parse_missing_text",
    "segment",
    "tooth_name",
    "tooth_type",
]
