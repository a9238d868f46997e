"""
Gap Segmenter

Partitions the missing positions of an Effective Arch into maximal
contiguous runs, in anatomical order (distal end -> midline -> distal end).
Excluded positions are not part of the Effective Arch, so teeth on
either side of an excluded molar are adjacent for segmentation purposes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Iterator, List, Tuple

from .arch import EffectiveArch


@dataclass(frozen=True)
class Gap:
    """A maximal run of consecutive missing positions (never empty)."""

    positions: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.positions:
            raise ValueError("A gap must contain at least one position")

    @property
    def first(self) -> int:
        return self.positions[0]

    @property
    def last(self) -> int:
        return self.positions[-1]

    def touches(self, position: int) -> bool:
        """True when the gap starts or ends at ``position``."""
        return position in (self.first, self.last)

    def contains_all(self, positions: Iterable[int]) -> bool:
        return all(p in self.positions for p in positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)

    def to_list(self) -> List[int]:
        return list(self.positions)


def iter_gaps(effective_arch: EffectiveArch, missing: AbstractSet[int]) -> Iterator[Gap]:
    """
    Scan the arch once, yielding each gap as soon as it closes.

    A present tooth closes the open gap; any gap still open at the end
    of the scan is flushed. Each call starts a fresh scan.
    """
    current: List[int] = []
    for position in effective_arch.positions:
        if position in missing:
            current.append(position)
        elif current:
            yield Gap(tuple(current))
            current = []
    if current:
        yield Gap(tuple(current))


def segment(effective_arch: EffectiveArch, missing: AbstractSet[int]) -> Tuple[Gap, ...]:
    """All gaps of the arch, empty when nothing is missing."""
    return tuple(iter_gaps(effective_arch, missing))
