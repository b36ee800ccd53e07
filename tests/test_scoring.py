"""Tests for rating bands, percentages and difficulty-scaled tips."""
import pytest

from househunt.services.scoring import (
    LEGIT_TIPS,
    SCAM_TIPS,
    compute_percentage,
    compute_rating,
    get_legit_tips,
    get_scam_tips,
)


@pytest.mark.parametrize(
    "percentage, rating",
    [
        (100, "Expert"),
        (90, "Expert"),
        (89, "Advanced"),
        (80, "Advanced"),
        (79, "Intermediate"),
        (70, "Intermediate"),
        (69, "Beginner"),
        (60, "Beginner"),
        (59, "Novice"),
        (0, "Novice"),
    ],
)
def test_rating_bands(percentage, rating):
    assert compute_rating(percentage) == rating


@pytest.mark.parametrize("level, count", [("A1", 2), ("A2", 3), ("B1", 4), ("B2", 5), ("C1", 5), ("", 5)])
def test_tip_counts_per_level(level, count):
    assert len(get_scam_tips(level)) == count
    assert len(get_legit_tips(level)) == count


def test_tips_are_catalog_prefixes():
    assert get_scam_tips("A2") == SCAM_TIPS[:3]
    assert get_legit_tips("B1") == LEGIT_TIPS[:4]


def test_tips_are_copies():
    tips = get_scam_tips("B2")
    tips.append("extra")

    assert len(SCAM_TIPS) == 5


@pytest.mark.parametrize(
    "score, total, expected",
    [
        (1, 3, 33),
        (2, 3, 67),
        (1, 2, 50),
        (1, 8, 13),  # 12.5 rounds up
        (0, 5, 0),
        (5, 5, 100),
        (0, 0, 0),
    ],
)
def test_percentage_rounds_half_up(score, total, expected):
    assert compute_percentage(score, total) == expected
