"""Tests for kennedy.core.taxonomy."""

import pytest

from kennedy.core.taxonomy import (
    CANINES,
    CENTRAL_INCISORS,
    FIRST_MOLARS,
    FIRST_PREMOLARS,
    LATERAL_INCISORS,
    SECOND_MOLARS,
    SECOND_PREMOLARS,
    THIRD_MOLARS,
    MolarRank,
    ToothType,
    all_teeth,
    describe_tooth,
    is_valid_position,
    tooth_name,
    tooth_type,
)


class TestRankGroups:
    """The derived table must reproduce the four symmetric quadrants."""

    @pytest.mark.parametrize(
        ("group", "expected"),
        [
            (THIRD_MOLARS, (1, 16, 17, 32)),
            (SECOND_MOLARS, (2, 15, 18, 31)),
            (FIRST_MOLARS, (3, 14, 19, 30)),
            (SECOND_PREMOLARS, (4, 13, 20, 29)),
            (FIRST_PREMOLARS, (5, 12, 21, 28)),
            (CANINES, (6, 11, 22, 27)),
            (LATERAL_INCISORS, (7, 10, 23, 26)),
            (CENTRAL_INCISORS, (8, 9, 24, 25)),
        ],
    )
    def test_group_positions(self, group, expected):
        assert group == expected

    @pytest.mark.parametrize("position", range(1, 17))
    def test_quadrants_are_symmetric(self, position):
        rank = describe_tooth(position).rank
        assert describe_tooth(17 - position).rank == rank
        assert describe_tooth(33 - position).rank == rank

    def test_table_covers_all_positions(self):
        teeth = all_teeth()
        assert [t.position for t in teeth] == list(range(1, 33))


class TestLookups:
    @pytest.mark.parametrize(
        ("position", "expected"),
        [
            (1, ToothType.MOLAR),
            (3, ToothType.MOLAR),
            (4, ToothType.PREMOLAR),
            (12, ToothType.PREMOLAR),
            (6, ToothType.CANINE),
            (27, ToothType.CANINE),
            (8, ToothType.INCISOR),
            (23, ToothType.INCISOR),
            (30, ToothType.MOLAR),
        ],
    )
    def test_tooth_type(self, position, expected):
        assert tooth_type(position) is expected

    @pytest.mark.parametrize(
        ("position", "expected"),
        [
            (1, "Third Molar (Posterior) (Wisdom Tooth)"),
            (2, "Second Molar (Posterior)"),
            (19, "First Molar (Posterior)"),
            (13, "Second Premolar (Bicuspid)"),
            (21, "First Premolar (Bicuspid)"),
            (11, "Canine (Anterior)"),
            (26, "Lateral Incisor (Anterior)"),
            (9, "Central Incisor (Anterior)"),
        ],
    )
    def test_tooth_name(self, position, expected):
        assert tooth_name(position) == expected

    def test_molar_rank(self):
        assert describe_tooth(17).molar_rank is MolarRank.THIRD
        assert describe_tooth(15).molar_rank is MolarRank.SECOND
        assert describe_tooth(14).molar_rank is MolarRank.FIRST
        assert describe_tooth(13).molar_rank is MolarRank.NONE

    def test_anterior_flag(self):
        anterior = [t.position for t in all_teeth() if t.is_anterior]
        assert anterior == [6, 7, 8, 9, 10, 11, 22, 23, 24, 25, 26, 27]


class TestOutOfRange:
    """Malformed positions degrade instead of raising."""

    @pytest.mark.parametrize("position", [0, -3, 33, 100])
    def test_fallback_name(self, position):
        assert tooth_name(position) == f"Tooth {position}"

    @pytest.mark.parametrize("position", [0, 33, True])
    def test_no_descriptor(self, position):
        assert describe_tooth(position) is None
        assert tooth_type(position) is None

    def test_is_valid_position(self):
        assert is_valid_position(1)
        assert is_valid_position(32)
        assert not is_valid_position(0)
        assert not is_valid_position("4")
        assert not is_valid_position(False)
