"""
Classification Engine

Derives the Kennedy class of one arch from a set of missing positions.

Flow:
1. Stage 0: Drop out-of-range positions
2. Stage 1: Effective Arch + effective missing set (None if empty)
3. Stage 2: Gap segmentation (None if no gaps)
4. Stage 3: Fully edentulous arch -> Unspecified
5. Stage 4: Class IV (single anterior gap containing both midline teeth)
6. Stage 5: Distal extension (Class I / II) or bounded spaces (Class III)

Precedence is fixed: edentulism, then Class IV, then distal extension,
then bounded spaces. Modification counts only the gaps beyond those
that define the class.

The engine holds no mutable state; a classifier instance can be shared
across threads and called once per arch in parallel.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import AbstractSet, FrozenSet, Iterable, Optional, Tuple, Union

from .core.arch import (
    Arch,
    ArchName,
    EffectiveArch,
    ExclusionConfig,
    MANDIBULAR,
    MAXILLARY,
    NO_EXCLUSIONS,
    get_arch,
)
from .core.gaps import Gap, segment
from .core.taxonomy import is_valid_position
from .core.verdict import DentitionVerdict, KennedyClass, Verdict, modification_for
from .config import get_settings
from .descriptors import ClassDescriptors, default_descriptors, load_descriptors

logger = logging.getLogger(__name__)

ArchLike = Union[Arch, ArchName, str]


def sanitize_missing(missing: Iterable[object]) -> FrozenSet[int]:
    """Keep only well-formed positions (1-32); anything else is dropped."""
    kept = set()
    dropped = []
    for position in missing:
        if is_valid_position(position):
            kept.add(position)
        else:
            dropped.append(position)
    if dropped:
        logger.debug("Dropping out-of-range positions: %s", dropped)
    return frozenset(kept)


class KennedyClassifier:
    """
    Kennedy classification of a single arch.

    Usage:
        classifier = KennedyClassifier()
        verdict = classifier.classify({1, 2, 3}, MAXILLARY)
    """

    def __init__(
        self,
        descriptors: Optional[ClassDescriptors] = None,
        descriptor_path: Optional[Path] = None,
    ):
        """
        Args:
            descriptors: Pre-loaded descriptor texts
            descriptor_path: YAML override file, used when descriptors is None
        """
        if descriptors is not None:
            self.descriptors = descriptors
        elif descriptor_path is not None:
            self.descriptors = load_descriptors(descriptor_path)
        else:
            self.descriptors = default_descriptors()

    def classify(
        self,
        missing: Iterable[int],
        arch: ArchLike,
        config: Optional[ExclusionConfig] = None,
    ) -> Optional[Verdict]:
        """
        Classify one arch.

        Args:
            missing: Missing positions, may span both arches
            arch: Arch to classify
            config: Molar exclusions (none by default)

        Returns:
            Verdict, or None when the arch has nothing missing after exclusions
        """
        arch = get_arch(arch)
        config = config or NO_EXCLUSIONS

        # =====================================================================
        # Stage 0-1: Effective Arch and effective missing set
        # =====================================================================
        effective = arch.effective(config)
        effective_missing = effective.restrict(sanitize_missing(missing))
        if not effective_missing:
            return None

        # =====================================================================
        # Stage 2: Gap segmentation
        # =====================================================================
        gaps = segment(effective, effective_missing)
        if not gaps:
            return None

        # =====================================================================
        # Stage 3: Fully edentulous arch
        # =====================================================================
        if self._is_edentulous(effective, gaps):
            return Verdict(
                kennedy_class=KennedyClass.UNSPECIFIED,
                description=self.descriptors.edentulous,
                arch=arch.name,
                gaps=gaps,
            )

        # =====================================================================
        # Stage 4: Class IV
        # =====================================================================
        if self._is_class_iv(arch, effective, gaps):
            return self._verdict(KennedyClass.CLASS_IV, arch, gaps)

        # =====================================================================
        # Stage 5: Distal extension / bounded spaces
        # =====================================================================
        left_end, right_end = effective.distal_ends
        has_left_distal = gaps[0].touches(left_end)
        has_right_distal = gaps[-1].touches(right_end)

        if has_left_distal and has_right_distal:
            return self._verdict(KennedyClass.CLASS_I, arch, gaps)
        if has_left_distal or has_right_distal:
            return self._verdict(KennedyClass.CLASS_II, arch, gaps)
        if gaps:
            return self._verdict(KennedyClass.CLASS_III, arch, gaps)

        logger.warning("No Kennedy rule matched %s gaps %s", arch.name.value, gaps)
        return self._verdict(KennedyClass.UNSPECIFIED, arch, gaps)

    def classify_dentition(
        self,
        missing: Iterable[int],
        config: Optional[ExclusionConfig] = None,
    ) -> DentitionVerdict:
        """Classify both arches from one global missing set."""
        missing = sanitize_missing(missing)
        return DentitionVerdict(
            maxillary=self.classify(missing, MAXILLARY, config),
            mandibular=self.classify(missing, MANDIBULAR, config),
        )

    # =========================================================================
    # Rules
    # =========================================================================

    @staticmethod
    def _is_edentulous(effective: EffectiveArch, gaps: Tuple[Gap, ...]) -> bool:
        return len(gaps) == 1 and len(gaps[0]) == len(effective)

    @staticmethod
    def _is_class_iv(arch: Arch, effective: EffectiveArch, gaps: Tuple[Gap, ...]) -> bool:
        if len(gaps) != 1:
            return False
        gap = gaps[0]
        if not all(arch.is_anterior(p) for p in gap):
            return False
        if any(gap.touches(end) for end in effective.distal_ends):
            return False
        return gap.contains_all(effective.midline)

    def _verdict(self, kennedy_class: KennedyClass, arch: Arch, gaps: Tuple[Gap, ...]) -> Verdict:
        return Verdict(
            kennedy_class=kennedy_class,
            description=self.descriptors.describe(kennedy_class),
            modification=modification_for(kennedy_class, len(gaps)),
            arch=arch.name,
            gaps=gaps,
        )


# =============================================================================
# Module-level API
# =============================================================================


@lru_cache
def default_classifier() -> KennedyClassifier:
    """Shared classifier, honouring KENNEDY_DESCRIPTORS_PATH."""
    return KennedyClassifier(descriptor_path=get_settings().descriptors_path)


def classify(
    missing: AbstractSet[int],
    arch: ArchLike,
    config: Optional[ExclusionConfig] = None,
) -> Optional[Verdict]:
    """Classify one arch with the packaged descriptor texts."""
    return default_classifier().classify(missing, arch, config)


def classify_dentition(
    missing: AbstractSet[int],
    config: Optional[ExclusionConfig] = None,
) -> DentitionVerdict:
    return default_classifier().classify_dentition(missing, config)
