"""
Arch Model

Ordered position sequences for the two dental arches, their distal ends,
midline and anterior segment, and the exclusion-filtered Effective Arch
used as the frame of reference during classification.

Maxillary runs 1..16 from the patient's right distal end across the
8/9 midline to the left distal end. Mandibular runs 17..32 the same
way with 24/25 at the midline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from .taxonomy import SECOND_MOLARS, THIRD_MOLARS, TOOTH_TABLE


class UnknownArchError(ValueError):
    """Raised when an arch name does not resolve to one of the two arches."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown arch: {name!r} (expected 'maxillary' or 'mandibular')")
        self.name = name


class ArchName(str, Enum):
    MAXILLARY = "maxillary"
    MANDIBULAR = "mandibular"


@dataclass(frozen=True)
class ExclusionConfig:
    """
    Which molars are left out of consideration.

    Excluding second molars is only meaningful together with third molars.
    The engine applies the flags as given; callers that own a UI use
    ``coupled`` to keep the pair consistent.
    """

    exclude_third_molars: bool = False
    exclude_second_molars: bool = False

    @property
    def is_consistent(self) -> bool:
        return self.exclude_third_molars or not self.exclude_second_molars

    @classmethod
    def coupled(
        cls,
        exclude_third_molars: bool = False,
        exclude_second_molars: bool = False,
    ) -> "ExclusionConfig":
        """Build a config where excluding second molars implies third molars."""
        return cls(
            exclude_third_molars=exclude_third_molars or exclude_second_molars,
            exclude_second_molars=exclude_second_molars,
        )

    def excluded_positions(self) -> FrozenSet[int]:
        excluded = set()
        if self.exclude_third_molars:
            excluded.update(THIRD_MOLARS)
        if self.exclude_second_molars:
            excluded.update(SECOND_MOLARS)
        return frozenset(excluded)

    def is_excluded(self, position: int) -> bool:
        return position in self.excluded_positions()


NO_EXCLUSIONS = ExclusionConfig()


@dataclass(frozen=True)
class EffectiveArch:
    """
    An arch's position sequence with excluded positions removed.

    Distal ends are the first and last remaining positions; the midline
    is the centre pair of the filtered sequence.
    """

    name: ArchName
    positions: Tuple[int, ...]

    @property
    def distal_ends(self) -> Tuple[int, int]:
        return self.positions[0], self.positions[-1]

    @property
    def midline(self) -> Tuple[int, int]:
        centre = len(self.positions) // 2
        return self.positions[centre - 1], self.positions[centre]

    def __contains__(self, position: object) -> bool:
        return position in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def restrict(self, missing: Iterable[int]) -> FrozenSet[int]:
        """Intersection of a missing set with this arch's positions."""
        members = set(self.positions)
        return frozenset(p for p in missing if p in members)


@dataclass(frozen=True)
class Arch:
    """One of the two dental arches."""

    name: ArchName
    first: int
    last: int

    def positions(self) -> Tuple[int, ...]:
        return tuple(range(self.first, self.last + 1))

    def distal_ends(self) -> Tuple[int, int]:
        return self.first, self.last

    def midline(self) -> Tuple[int, int]:
        centre = self.first + (self.last - self.first) // 2
        return centre, centre + 1

    def contains(self, position: int) -> bool:
        return self.first <= position <= self.last

    def is_anterior(self, position: int) -> bool:
        """Canines and incisors of this arch; fixed by anatomy."""
        return self.contains(position) and TOOTH_TABLE[position].is_anterior

    def anterior_positions(self) -> Tuple[int, ...]:
        return tuple(p for p in self.positions() if self.is_anterior(p))

    def effective(self, config: Optional[ExclusionConfig] = None) -> EffectiveArch:
        excluded = (config or NO_EXCLUSIONS).excluded_positions()
        return EffectiveArch(
            name=self.name,
            positions=tuple(p for p in self.positions() if p not in excluded),
        )


MAXILLARY = Arch(ArchName.MAXILLARY, 1, 16)
MANDIBULAR = Arch(ArchName.MANDIBULAR, 17, 32)
ARCHES: Tuple[Arch, Arch] = (MAXILLARY, MANDIBULAR)


def get_arch(name: Union[Arch, ArchName, str]) -> Arch:
    """Resolve an arch from an instance, enum member or case-insensitive name."""
    if isinstance(name, Arch):
        return name
    try:
        arch_name = ArchName(name.lower() if isinstance(name, str) else name)
    except (ValueError, AttributeError) as exc:
        raise UnknownArchError(name) from exc
    return MAXILLARY if arch_name is ArchName.MAXILLARY else MANDIBULAR


def arch_for_position(position: int) -> Optional[Arch]:
    for arch in ARCHES:
        if arch.contains(position):
            return arch
    return None
