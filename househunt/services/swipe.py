"""Swipe gestures on a listing card: drag tracking, threshold commit and exit animation."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 100.0
ANIMATION_SECONDS = 0.3
HINT_DISTANCE = 50.0
FADE_DISTANCE = 300.0
ROTATION_PER_UNIT = 0.1  # degrees per unit of horizontal drag
EXIT_ROTATION = 30.0

POINTER_EVENTS = ("pointerdown", "pointermove", "pointerup", "pointerleave")


class SwipeState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    ANIMATING = "animating"


class SwipeOutcome(str, Enum):
    ACCEPT = "accept"  # swipe right
    REJECT = "reject"  # swipe left
    CANCEL = "cancel"  # back to centre


@dataclass(frozen=True)
class PointerEvent:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class CardFrame:
    """What the card surface should look like right now."""

    dx: float = 0.0
    dy: float = 0.0
    rotation: float = 0.0
    opacity: float = 1.0
    hint: Optional[str] = None  # "right" | "left" | None
    offscreen: Optional[str] = None  # "right" | "left" when flying out
    animated: bool = False


CENTERED = CardFrame()


class CardSurface(Protocol):
    def add_listener(self, event: str, handler: Callable[[PointerEvent], None]) -> None: ...

    def remove_listener(self, event: str, handler: Callable[[PointerEvent], None]) -> None: ...

    def render(self, frame: CardFrame) -> None: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


def classify_swipe(dx: float, threshold: float = DEFAULT_THRESHOLD) -> SwipeOutcome:
    """Map a release offset to accept / reject / cancel. The threshold itself cancels."""
    if abs(dx) <= threshold:
        return SwipeOutcome.CANCEL
    return SwipeOutcome.ACCEPT if dx > 0 else SwipeOutcome.REJECT


def drag_frame(dx: float, dy: float) -> CardFrame:
    """Frame for a card held at (dx, dy) from where the drag started."""
    if dx > HINT_DISTANCE:
        hint = "right"
    elif dx < -HINT_DISTANCE:
        hint = "left"
    else:
        hint = None
    return CardFrame(
        dx=dx,
        dy=dy,
        rotation=dx * ROTATION_PER_UNIT,
        opacity=max(0.0, 1 - abs(dx) / FADE_DISTANCE),
        hint=hint,
    )


class SwipeInterpreter:
    """
    Turns pointer input on a card surface into swipe-left / swipe-right calls.

    Releasing past the threshold flies the card off-screen and, once the exit
    animation has run, calls on_swipe_right (positive dx) or on_swipe_left
    (negative dx). Releasing short of it snaps the card back without a call.
    Input is ignored while a card is flying out.

    If surface is None no handlers are attached; the trigger_* methods still
    work, which is what button-driven hosts use.
    """

    def __init__(
        self,
        surface: Optional[CardSurface],
        on_swipe_left: Callable[[], None],
        on_swipe_right: Callable[[], None],
        threshold: float = DEFAULT_THRESHOLD,
        animation_seconds: float = ANIMATION_SECONDS,
        scheduler: Optional[Scheduler] = None,
    ):
        self.surface = surface
        self.on_swipe_left = on_swipe_left
        self.on_swipe_right = on_swipe_right
        self.threshold = threshold
        self.animation_seconds = animation_seconds
        self._scheduler = scheduler

        self.state = SwipeState.IDLE
        self.start = (0.0, 0.0)
        self.current = (0.0, 0.0)
        self._pending: Optional[TimerHandle] = None
        self._destroyed = False

        self._handlers = {
            "pointerdown": self.handle_pointer_down,
            "pointermove": self.handle_pointer_move,
            "pointerup": self.handle_pointer_up,
            "pointerleave": self.handle_pointer_up,
        }
        if surface is None:
            return
        for event in POINTER_EVENTS:
            surface.add_listener(event, self._handlers[event])

    @property
    def offset(self) -> tuple[float, float]:
        return self.current[0] - self.start[0], self.current[1] - self.start[1]

    # ---------- pointer input ----------

    def handle_pointer_down(self, event: PointerEvent) -> None:
        if self.state is not SwipeState.IDLE or self._destroyed:
            return
        self.start = (event.x, event.y)
        self.current = (event.x, event.y)
        self.state = SwipeState.DRAGGING

    def handle_pointer_move(self, event: PointerEvent) -> None:
        if self.state is not SwipeState.DRAGGING:
            return
        self.current = (event.x, event.y)
        self._render(drag_frame(*self.offset))

    def handle_pointer_up(self, event: Optional[PointerEvent] = None) -> None:
        if self.state is not SwipeState.DRAGGING:
            return
        dx, _ = self.offset
        outcome = classify_swipe(dx, self.threshold)
        self.state = SwipeState.IDLE
        if outcome is SwipeOutcome.CANCEL:
            self._render(CardFrame(animated=True))
            return
        self._commit(outcome)

    # ---------- programmatic swipes (buttons) ----------

    def trigger_swipe_left(self) -> None:
        if self.state is SwipeState.ANIMATING or self._destroyed:
            return
        self._commit(SwipeOutcome.REJECT)

    def trigger_swipe_right(self) -> None:
        if self.state is SwipeState.ANIMATING or self._destroyed:
            return
        self._commit(SwipeOutcome.ACCEPT)

    def destroy(self) -> None:
        """Detach from the surface and drop any pending swipe callback."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        if self.surface is not None and not self._destroyed:
            for event in POINTER_EVENTS:
                self.surface.remove_listener(event, self._handlers[event])
        self._destroyed = True
        self.state = SwipeState.IDLE

    # ---------- internals ----------

    def _commit(self, outcome: SwipeOutcome) -> None:
        # Raises RuntimeError outside an event loop; state is still IDLE then.
        scheduler = self._scheduler or asyncio.get_running_loop()

        self.state = SwipeState.ANIMATING
        direction = "right" if outcome is SwipeOutcome.ACCEPT else "left"
        sign = 1 if outcome is SwipeOutcome.ACCEPT else -1
        self._render(CardFrame(rotation=sign * EXIT_ROTATION, opacity=0.0, offscreen=direction, animated=True))
        self._pending = scheduler.call_later(self.animation_seconds, lambda: self._finish(outcome))
        logger.debug("Swipe %s committed", outcome.value)

    def _finish(self, outcome: SwipeOutcome) -> None:
        self._pending = None
        if self._destroyed:
            return
        try:
            if outcome is SwipeOutcome.ACCEPT:
                self.on_swipe_right()
            else:
                self.on_swipe_left()
        finally:
            self.state = SwipeState.IDLE
            self.start = self.current = (0.0, 0.0)
            self._render(CENTERED)

    def _render(self, frame: CardFrame) -> None:
        if self.surface is not None:
            self.surface.render(frame)
