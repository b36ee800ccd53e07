"""Performance rating and difficulty-scaled tips for the accommodation game."""

# Rating bands on percentage, evaluated top-down; lower bound inclusive
RATING_BANDS = [
    (90, "Expert"),
    (80, "Advanced"),
    (70, "Intermediate"),
    (60, "Beginner"),
]
LOWEST_RATING = "Novice"

# Ordered from simplest to most nuanced
SCAM_TIPS = [
    "Be wary of unusually low prices for the area",
    "Watch out for poor grammar or spelling in listings",
    "Avoid landlords who refuse to meet in person",
    "Be suspicious of requests for money before viewing",
    "Check if photos look too professional or stock-like",
]

LEGIT_TIPS = [
    "Realistic pricing for the area and amenities",
    "Professional communication and proper grammar",
    "Willingness to arrange viewings",
    "Detailed and accurate property descriptions",
    "Proper contact information and references",
]

# Number of tips shown per level; anything else gets the full catalog
TIPS_PER_LEVEL = {
    "A1": 2,
    "A2": 3,
    "B1": 4,
}


def tip_count(difficulty: str) -> int:
    """Return how many catalog tips a learner at this level sees."""
    return TIPS_PER_LEVEL.get(difficulty, len(SCAM_TIPS))


def get_scam_tips(difficulty: str) -> list[str]:
    return SCAM_TIPS[: tip_count(difficulty)]


def get_legit_tips(difficulty: str) -> list[str]:
    return LEGIT_TIPS[: tip_count(difficulty)]


def compute_rating(percentage: float) -> str:
    """Return rating label for a 0-100 percentage."""
    for low, label in RATING_BANDS:
        if percentage >= low:
            return label
    return LOWEST_RATING


def compute_percentage(score: int, total: int) -> int:
    """Round 100 * score / total half up; 0 when there is nothing to score."""
    if total <= 0:
        return 0
    return (200 * score + total) // (2 * total)
