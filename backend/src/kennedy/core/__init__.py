"""
Core data structures for Kennedy classification.

- taxonomy.py: Tooth positions, types and display names
- arch.py: Arch geometry, exclusion config and Effective Arch
- gaps.py: Gap segmentation
- verdict.py: Verdict output contract
"""

from .taxonomy import (
    ToothType,
    MolarRank,
    ToothDescriptor,
    TOOTH_TABLE,
    CENTRAL_INCISORS,
    LATERAL_INCISORS,
    CANINES,
    FIRST_PREMOLARS,
    SECOND_PREMOLARS,
    FIRST_MOLARS,
    SECOND_MOLARS,
    THIRD_MOLARS,
    all_teeth,
    describe_tooth,
    is_valid_position,
    tooth_name,
    tooth_type,
)
from .arch import (
    Arch,
    ArchName,
    EffectiveArch,
    ExclusionConfig,
    UnknownArchError,
    ARCHES,
    MAXILLARY,
    MANDIBULAR,
    NO_EXCLUSIONS,
    arch_for_position,
    get_arch,
)
from .gaps import Gap, iter_gaps, segment
from .verdict import (
    DentitionVerdict,
    KennedyClass,
    Verdict,
    INHERENT_GAPS,
    modification_for,
)

__all__ = [
    # Taxonomy
    "ToothType",
    "MolarRank",
    "ToothDescriptor",
    "TOOTH_TABLE",
    "CENTRAL_INCISORS",
    "LATERAL_INCISORS",
    "CANINES",
    "FIRST_PREMOLARS",
    "SECOND_PREMOLARS",
    "FIRST_MOLARS",
    "SECOND_MOLARS",
    "THIRD_MOLARS",
    "all_teeth",
    "describe_tooth",
    "is_valid_position",
    "tooth_name",
    "tooth_type",
    # Arch
    "Arch",
    "ArchName",
    "EffectiveArch",
    "ExclusionConfig",
    "UnknownArchError",
    "ARCHES",
    "MAXILLARY",
    "MANDIBULAR",
    "NO_EXCLUSIONS",
    "arch_for_position",
    "get_arch",
    # Gaps
    "Gap",
    "iter_gaps",
    "segment",
    # Verdict
    "DentitionVerdict",
    "KennedyClass",
    "Verdict",
    "INHERENT_GAPS",
    "modification_for",
]
