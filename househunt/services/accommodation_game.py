"""Accommodation swipe game: walks listings, scores accept/reject decisions, rates the run."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Iterable, Union

from househunt.services.scoring import (
    compute_percentage,
    compute_rating,
    get_legit_tips,
    get_scam_tips,
)

logger = logging.getLogger(__name__)


class SessionCompleteError(IndexError):
    """Raised when a decision is submitted after the last listing."""


@dataclass(frozen=True)
class Accommodation:
    """One listing as the game sees it. Display fields are passed through untouched."""

    id: Any
    is_scam: bool
    red_flags: tuple[str, ...] = ()
    green_flags: tuple[str, ...] = ()
    title: str = ""
    location: str = ""
    price: str = ""
    deposit: str = ""
    description: str = ""
    image: str | None = None


@dataclass(frozen=True)
class ScamExplanation:
    flags: tuple[str, ...]
    tips: tuple[str, ...]
    kind: str = field(default="scam", init=False)
    message: str = field(default="This was a scam!", init=False)


@dataclass(frozen=True)
class LegitimateExplanation:
    flags: tuple[str, ...]
    tips: tuple[str, ...]
    kind: str = field(default="legitimate", init=False)
    message: str = field(default="This was a legitimate offer!", init=False)


Explanation = Union[ScamExplanation, LegitimateExplanation]


@dataclass(frozen=True)
class DecisionRecord:
    listing: Accommodation
    user_choice: bool  # True = user says the offer is legitimate
    is_correct: bool
    explanation: Explanation
    points_awarded: int


@dataclass(frozen=True)
class FinalScore:
    score: int
    total: int
    percentage: int
    rating: str
    history: tuple[DecisionRecord, ...]


def explain(listing: Accommodation, difficulty: str) -> Explanation:
    """Build the post-decision explanation for a listing at the given level."""
    if listing.is_scam:
        return ScamExplanation(flags=tuple(listing.red_flags), tips=tuple(get_scam_tips(difficulty)))
    return LegitimateExplanation(flags=tuple(listing.green_flags), tips=tuple(get_legit_tips(difficulty)))


class AccommodationGame:
    """
    One pass over an ordered list of listings.

    The host asks for the current listing, submits a boolean decision for it
    (True = accept as legitimate, False = reject as scam) and, once
    is_complete() is true, reads get_final_score(). reset() starts over with
    the same listings in a fresh random order.
    """

    def __init__(self, listings: Iterable[Accommodation], difficulty: str = "A1", rng: random.Random | None = None):
        self._difficulty = difficulty
        self._listings = list(listings)
        self._rng = rng or random.Random()
        self._position = 0
        self._score = 0
        self._history: list[DecisionRecord] = []

    @property
    def difficulty(self) -> str:
        return self._difficulty

    @property
    def position(self) -> int:
        return self._position

    @property
    def score(self) -> int:
        return self._score

    @property
    def listings(self) -> tuple[Accommodation, ...]:
        return tuple(self._listings)

    @property
    def history(self) -> tuple[DecisionRecord, ...]:
        return tuple(self._history)

    @property
    def total(self) -> int:
        return len(self._listings)

    def get_current_accommodation(self) -> Accommodation | None:
        """Return the listing awaiting a decision, or None when the run is over."""
        if self._position >= len(self._listings):
            return None
        return self._listings[self._position]

    def submit_decision(self, user_choice: bool) -> DecisionRecord:
        listing = self.get_current_accommodation()
        if listing is None:
            raise SessionCompleteError(
                f"No accommodation left to judge (position {self._position} of {len(self._listings)})"
            )

        is_correct = bool(user_choice) != listing.is_scam
        record = DecisionRecord(
            listing=listing,
            user_choice=bool(user_choice),
            is_correct=is_correct,
            explanation=explain(listing, self._difficulty),
            points_awarded=1 if is_correct else 0,
        )

        self._history.append(record)
        self._score += record.points_awarded
        self._position += 1

        logger.debug(
            "Decision on listing %s: choice=%s correct=%s (%d/%d)",
            listing.id, record.user_choice, is_correct, self._position, len(self._listings),
        )
        return record

    def is_complete(self) -> bool:
        return self._position >= len(self._listings)

    def get_final_score(self) -> FinalScore:
        """Score summary; safe to call mid-run. An empty run scores 0% (Novice)."""
        percentage = compute_percentage(self._score, len(self._listings))
        return FinalScore(
            score=self._score,
            total=len(self._listings),
            percentage=percentage,
            rating=compute_rating(percentage),
            history=self.history,
        )

    def reset(self) -> None:
        self._position = 0
        self._score = 0
        self._history = []
        # random.shuffle is Fisher-Yates
        self._rng.shuffle(self._listings)
