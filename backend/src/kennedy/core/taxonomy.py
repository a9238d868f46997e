"""
Tooth Taxonomy

Static lookup from universal tooth position (1-32) to anatomical type,
molar rank and display name.

The table is derived once at import time from the eight per-quadrant
ranks (central incisor = 0 ... third molar = 7). Every quadrant carries
the same ranks, so a position is reduced to its maxillary mirror
(33 - position for the mandible) and then to its distance from the
8/9 midline.

Version: 1.0.0
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

FIRST_POSITION = 1
LAST_POSITION = 32


class ToothType(str, Enum):
    """Coarse anatomical tooth type."""

    INCISOR = "incisor"
    CANINE = "canine"
    PREMOLAR = "premolar"
    MOLAR = "molar"


class MolarRank(str, Enum):
    """Molar rank, NONE for every non-molar tooth."""

    NONE = "none"
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


@dataclass(frozen=True)
class ToothDescriptor:
    """
    Read-only description of one tooth position.

    Attributes:
        position: Universal tooth number (1-32)
        tooth_type: Incisor, canine, premolar or molar
        molar_rank: Molar rank (NONE for non-molars)
        rank: Distance from the midline (0 = central incisor, 7 = third molar)
        display_name: Human-readable name shown in tooltips and tables
    """

    position: int
    tooth_type: ToothType
    molar_rank: MolarRank
    rank: int
    display_name: str

    @property
    def is_anterior(self) -> bool:
        """Canines and incisors form the anterior segment."""
        return self.tooth_type in (ToothType.INCISOR, ToothType.CANINE)

    def to_dict(self) -> Dict[str, object]:
        return {
            "position": self.position,
            "type": self.tooth_type.value,
            "molar_rank": self.molar_rank.value,
            "rank": self.rank,
            "name": self.display_name,
            "anterior": self.is_anterior,
        }


# =============================================================================
# Per-quadrant ranks (index = distance from midline)
# =============================================================================

_RANKS: Tuple[Tuple[ToothType, MolarRank, str], ...] = (
    (ToothType.INCISOR, MolarRank.NONE, "Central Incisor (Anterior)"),
    (ToothType.INCISOR, MolarRank.NONE, "Lateral Incisor (Anterior)"),
    (ToothType.CANINE, MolarRank.NONE, "Canine (Anterior)"),
    (ToothType.PREMOLAR, MolarRank.NONE, "First Premolar (Bicuspid)"),
    (ToothType.PREMOLAR, MolarRank.NONE, "Second Premolar (Bicuspid)"),
    (ToothType.MOLAR, MolarRank.FIRST, "First Molar (Posterior)"),
    (ToothType.MOLAR, MolarRank.SECOND, "Second Molar (Posterior)"),
    (ToothType.MOLAR, MolarRank.THIRD, "Third Molar (Posterior) (Wisdom Tooth)"),
)


def is_valid_position(position: object) -> bool:
    """True for integers in 1..32 (bools are rejected)."""
    return (
        isinstance(position, int)
        and not isinstance(position, bool)
        and FIRST_POSITION <= position <= LAST_POSITION
    )


def rank_of(position: int) -> int:
    """
    Distance of a valid position from the midline of its arch.

    Mandibular positions mirror onto the maxilla via 33 - position;
    maxillary 1..8 count down to the midline, 9..16 count up from it.
    """
    mirrored = position if position <= 16 else 33 - position
    return 8 - mirrored if mirrored <= 8 else mirrored - 9


def _build_table() -> Dict[int, ToothDescriptor]:
    table: Dict[int, ToothDescriptor] = {}
    for position in range(FIRST_POSITION, LAST_POSITION + 1):
        rank = rank_of(position)
        tooth_type, molar_rank, name = _RANKS[rank]
        table[position] = ToothDescriptor(
            position=position,
            tooth_type=tooth_type,
            molar_rank=molar_rank,
            rank=rank,
            display_name=name,
        )
    return table


TOOTH_TABLE: Dict[int, ToothDescriptor] = _build_table()


def positions_with_rank(rank: int) -> Tuple[int, ...]:
    """All four positions sharing a rank, in ascending order."""
    return tuple(p for p, d in TOOTH_TABLE.items() if d.rank == rank)


CENTRAL_INCISORS = positions_with_rank(0)
LATERAL_INCISORS = positions_with_rank(1)
CANINES = positions_with_rank(2)
FIRST_PREMOLARS = positions_with_rank(3)
SECOND_PREMOLARS = positions_with_rank(4)
FIRST_MOLARS = positions_with_rank(5)
SECOND_MOLARS = positions_with_rank(6)
THIRD_MOLARS = positions_with_rank(7)


# =============================================================================
# Lookups
# =============================================================================


def describe_tooth(position: int) -> Optional[ToothDescriptor]:
    """Descriptor for a position, or None when out of range."""
    if not is_valid_position(position):
        return None
    return TOOTH_TABLE[position]


def tooth_type(position: int) -> Optional[ToothType]:
    descriptor = describe_tooth(position)
    return descriptor.tooth_type if descriptor else None


def tooth_name(position: int) -> str:
    """Display name, falling back to a generic label for unknown positions."""
    descriptor = describe_tooth(position)
    if descriptor is None:
        return f"Tooth {position}"
    return descriptor.display_name


def all_teeth() -> List[ToothDescriptor]:
    return [TOOTH_TABLE[p] for p in sorted(TOOTH_TABLE)]
