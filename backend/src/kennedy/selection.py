"""
Tooth selection model.

Headless state behind the tooth chart: the set of teeth marked missing,
the molar exclusion flags, free-text entry and drag gestures. The
classification engine never sees this object, only immutable snapshots
of it (``missing`` and ``exclusions``).
"""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, Iterable, Optional, Set

from .core.arch import ExclusionConfig
from .core.taxonomy import FIRST_POSITION, LAST_POSITION
from .core.verdict import DentitionVerdict
from .engine import KennedyClassifier, default_classifier

logger = logging.getLogger(__name__)

# Empty, or a comma-separated list of one/two digit numbers.
MISSING_TEXT_PATTERN = re.compile(r"^(\s*\d{1,2}\s*(,\s*\d{1,2}\s*)*)?$")

DRAG_ADD = "add"
DRAG_REMOVE = "remove"


class SelectionParseError(ValueError):
    """Raised when free-text tooth input is malformed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid tooth list: {text!r} (expected comma-separated numbers 1-32)")
        self.text = text


def parse_missing_text(text: str) -> FrozenSet[int]:
    """
    Parse a comma-separated list of tooth positions.

    Well-formed numbers outside 1-32 are dropped; anything that is not a
    comma-separated list of numbers raises SelectionParseError.
    """
    stripped = (text or "").strip()
    if not MISSING_TEXT_PATTERN.match(stripped):
        raise SelectionParseError(text)
    if not stripped:
        return frozenset()
    values = (int(part) for part in stripped.split(","))
    return frozenset(v for v in values if FIRST_POSITION <= v <= LAST_POSITION)


def format_missing_text(missing: Iterable[int]) -> str:
    return ",".join(str(p) for p in sorted(missing))


class ToothSelection:
    """
    Mutable selection of missing teeth plus exclusion flags.

    Teeth excluded by the current flags are disabled: toggles and drags
    over them are ignored, though an existing mark on them is kept.
    """

    def __init__(
        self,
        missing: Iterable[int] = (),
        exclusions: Optional[ExclusionConfig] = None,
        classifier: Optional[KennedyClassifier] = None,
    ):
        self._missing: Set[int] = set()
        self.replace(missing)
        self.exclusions = exclusions or ExclusionConfig()
        self.classifier = classifier or default_classifier()
        self._drag_mode: Optional[str] = None
        self._last_dragged: Optional[int] = None

    @property
    def missing(self) -> FrozenSet[int]:
        return frozenset(self._missing)

    @property
    def text(self) -> str:
        return format_missing_text(self._missing)

    @property
    def is_dragging(self) -> bool:
        return self._drag_mode is not None

    # =========================================================================
    # Membership
    # =========================================================================

    def is_disabled(self, position: int) -> bool:
        return self.exclusions.is_excluded(position)

    def disabled_positions(self) -> FrozenSet[int]:
        return self.exclusions.excluded_positions()

    def _accepts(self, position: int) -> bool:
        return FIRST_POSITION <= position <= LAST_POSITION and not self.is_disabled(position)

    def toggle(self, position: int) -> bool:
        """Flip a tooth; returns whether it changed."""
        if not self._accepts(position):
            return False
        if position in self._missing:
            self._missing.discard(position)
        else:
            self._missing.add(position)
        return True

    def add(self, position: int) -> bool:
        if not self._accepts(position) or position in self._missing:
            return False
        self._missing.add(position)
        return True

    def discard(self, position: int) -> bool:
        if not self._accepts(position) or position not in self._missing:
            return False
        self._missing.discard(position)
        return True

    def replace(self, positions: Iterable[int]) -> None:
        self._missing = {p for p in positions if FIRST_POSITION <= p <= LAST_POSITION}

    def apply_text(self, text: str) -> FrozenSet[int]:
        """Replace the selection from free text; malformed text leaves it untouched."""
        parsed = parse_missing_text(text)
        self.replace(parsed)
        return parsed

    def reset(self) -> None:
        """Clear all teeth and both exclusion flags."""
        self._missing.clear()
        self.exclusions = ExclusionConfig()
        self.end_drag()

    # =========================================================================
    # Exclusion flags
    # =========================================================================

    def set_exclude_third_molars(self, enabled: bool) -> None:
        """Turning third molars back on also turns second-molar exclusion off."""
        self.exclusions = ExclusionConfig(
            exclude_third_molars=enabled,
            exclude_second_molars=self.exclusions.exclude_second_molars and enabled,
        )

    def set_exclude_second_molars(self, enabled: bool) -> None:
        """Excluding second molars also excludes third molars."""
        self.exclusions = ExclusionConfig(
            exclude_third_molars=self.exclusions.exclude_third_molars or enabled,
            exclude_second_molars=enabled,
        )

    # =========================================================================
    # Drag gestures
    # =========================================================================

    def begin_drag(self, position: int) -> bool:
        """
        Start a drag on a tooth.

        The drag adds teeth when it starts on a present tooth and removes
        them when it starts on a missing one. Disabled teeth do not start
        a drag.
        """
        if not self._accepts(position):
            return False
        self._drag_mode = DRAG_REMOVE if position in self._missing else DRAG_ADD
        self._last_dragged = None
        return self.toggle(position)

    def drag_over(self, position: int) -> bool:
        if self._drag_mode is None or position == self._last_dragged:
            return False
        if not self._accepts(position):
            return False
        self._last_dragged = position
        if self._drag_mode == DRAG_REMOVE:
            return self.discard(position)
        return self.add(position)

    def end_drag(self) -> None:
        self._drag_mode = None
        self._last_dragged = None

    # =========================================================================
    # Classification
    # =========================================================================

    def classify(self) -> DentitionVerdict:
        result = self.classifier.classify_dentition(self.missing, self.exclusions)
        logger.debug("Selection %s classified as %s", self.text, result.to_dict())
        return result
