"""
Property checks for the classification engine over sampled missing sets.

Each check re-derives the expected outcome from the gaps and arch
geometry and compares it with the engine's verdict.
"""

import random

import pytest

from kennedy.core.arch import ARCHES, ExclusionConfig
from kennedy.core.gaps import segment
from kennedy.core.verdict import INHERENT_GAPS, KennedyClass
from kennedy.engine import classify

CONFIGS = [
    ExclusionConfig(),
    ExclusionConfig(exclude_third_molars=True),
    ExclusionConfig(exclude_third_molars=True, exclude_second_molars=True),
]

SAMPLES_PER_CASE = 300


def _samples(arch, seed):
    rng = random.Random(seed)
    positions = arch.positions()
    for _ in range(SAMPLES_PER_CASE):
        density = rng.random()
        yield frozenset(p for p in positions if rng.random() < density)


CASES = [
    (arch, config, seed)
    for seed, (arch, config) in enumerate((a, c) for a in ARCHES for c in CONFIGS)
]


@pytest.mark.parametrize(("arch", "config", "seed"), CASES)
def test_verdict_matches_gap_structure(arch, config, seed):
    for missing in _samples(arch, seed):
        effective = arch.effective(config)
        effective_missing = effective.restrict(missing)
        gaps = segment(effective, effective_missing)
        verdict = classify(missing, arch, config)

        if not effective_missing:
            assert verdict is None
            continue

        assert verdict is not None
        assert verdict.gaps == gaps

        full_arch = len(gaps) == 1 and len(gaps[0]) == len(effective)
        assert (verdict.kennedy_class is KennedyClass.UNSPECIFIED) == full_arch
        if full_arch:
            continue

        class_iv = (
            len(gaps) == 1
            and all(arch.is_anterior(p) for p in gaps[0])
            and gaps[0].contains_all(effective.midline)
        )
        assert (verdict.kennedy_class is KennedyClass.CLASS_IV) == class_iv
        if class_iv:
            assert verdict.modification is None
            continue

        inherent = INHERENT_GAPS[verdict.kennedy_class]
        if verdict.modification is None:
            assert len(gaps) == inherent
        else:
            assert verdict.modification == len(gaps) - inherent
            assert verdict.modification > 0


@pytest.mark.parametrize("arch", ARCHES)
def test_distal_extension_matches_arch_ends(arch):
    config = ExclusionConfig()
    for missing in _samples(arch, 99):
        verdict = classify(missing, arch, config)
        if verdict is None or verdict.kennedy_class in (KennedyClass.UNSPECIFIED, KennedyClass.CLASS_IV):
            continue
        left, right = arch.distal_ends()
        ends = (left in missing) + (right in missing)
        expected = {2: KennedyClass.CLASS_I, 1: KennedyClass.CLASS_II, 0: KennedyClass.CLASS_III}[ends]
        assert verdict.kennedy_class is expected


@pytest.mark.parametrize("arch", ARCHES)
def test_excluding_third_molars_only_trims_gaps(arch):
    plain = ExclusionConfig()
    excluded = ExclusionConfig(exclude_third_molars=True)
    for missing in _samples(arch, 7):
        before = segment(arch.effective(plain), missing)
        after = segment(arch.effective(excluded), arch.effective(excluded).restrict(missing))
        assert len(after) <= len(before)
        for gap in after:
            assert any(old.contains_all(gap) for old in before)
