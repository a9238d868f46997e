"""
Classification Output Contract

Defines the Verdict produced per arch by the classification engine and
the DentitionVerdict pairing both arches.

Version: 1.0.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .arch import ArchName
from .gaps import Gap


class KennedyClass(str, Enum):
    CLASS_I = "Class I"
    CLASS_II = "Class II"
    CLASS_III = "Class III"
    CLASS_IV = "Class IV"
    UNSPECIFIED = "Unspecified"


# Number of gaps that define each class; only gaps beyond these count as
# modification spaces.
INHERENT_GAPS: Dict[KennedyClass, int] = {
    KennedyClass.CLASS_I: 2,
    KennedyClass.CLASS_II: 1,
    KennedyClass.CLASS_III: 1,
}


def modification_for(kennedy_class: KennedyClass, gap_count: int) -> Optional[int]:
    """
    Modification number for a class given its gap count.

    Returns None when there are no additional spaces, and always for
    classes that never carry a modification (IV, Unspecified).
    """
    inherent = INHERENT_GAPS.get(kennedy_class)
    if inherent is None:
        return None
    extra = gap_count - inherent
    return extra if extra > 0 else None


@dataclass(frozen=True)
class Verdict:
    """
    Kennedy classification of one arch.

    Attributes:
        kennedy_class: Class I-IV or Unspecified
        modification: Additional bounded spaces beyond those defining the
                      class; None when there are none
        description: Human-readable explanation of the class
        arch: Arch this verdict belongs to
        gaps: Gaps the verdict was derived from (debug, not part of repr)
    """

    kennedy_class: KennedyClass
    description: str
    modification: Optional[int] = None
    arch: Optional[ArchName] = None
    gaps: Tuple[Gap, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.modification is not None and self.modification <= 0:
            raise ValueError(f"Modification must be positive, got {self.modification}")

    @property
    def label(self) -> str:
        """Class label with modification, e.g. 'Class II modification 2'."""
        if self.modification:
            return f"{self.kennedy_class.value} modification {self.modification}"
        return self.kennedy_class.value

    @property
    def is_classified(self) -> bool:
        return self.kennedy_class is not KennedyClass.UNSPECIFIED

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "arch": self.arch.value if self.arch else None,
            "kennedy_class": self.kennedy_class.value,
            "modification": self.modification,
            "label": self.label,
            "description": self.description,
        }

    def to_debug_dict(self) -> Dict[str, Any]:
        """Serialize with the underlying gaps included."""
        result = self.to_dict()
        result["gaps"] = [gap.to_list() for gap in self.gaps]
        return result


@dataclass(frozen=True)
class DentitionVerdict:
    """Verdicts for both arches; None where an arch has nothing to classify."""

    maxillary: Optional[Verdict] = None
    mandibular: Optional[Verdict] = None

    def items(self) -> Tuple[Tuple[ArchName, Optional[Verdict]], ...]:
        return (
            (ArchName.MAXILLARY, self.maxillary),
            (ArchName.MANDIBULAR, self.mandibular),
        )

    def is_empty(self) -> bool:
        return self.maxillary is None and self.mandibular is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maxillary": self.maxillary.to_dict() if self.maxillary else None,
            "mandibular": self.mandibular.to_dict() if self.mandibular else None,
        }
