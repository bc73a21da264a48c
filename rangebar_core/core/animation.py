from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Callable, Protocol


LOGGER = logging.getLogger(__name__)

Interpolator = Callable[[float], float]
UpdateListener = Callable[[float], None]


def linear(fraction: float) -> float:
    return fraction


def accelerate_decelerate(fraction: float) -> float:
    """Ease-in/ease-out curve: slow start, fast middle, slow finish."""
    return (math.cos((fraction + 1.0) * math.pi) / 2.0) + 0.5


class AnimationHandle(Protocol):
    @property
    def is_running(self) -> bool:
        ...

    def cancel(self) -> None:
        ...


class Animator(Protocol):
    """Host animation facility: interpolate a float and report each tick."""

    def start(
        self,
        start_value: float,
        end_value: float,
        duration_ms: float,
        *,
        interpolator: Interpolator,
        on_update: UpdateListener,
    ) -> AnimationHandle:
        ...


@dataclass
class FloatAnimation:
    """One running interpolation owned by a `FrameAnimator`.

    The clock starts on the first frame that advances the animation, so time
    the host spent idle before `start` is never counted against the duration.
    """

    start_value: float
    end_value: float
    duration_ms: float
    interpolator: Interpolator
    on_update: UpdateListener
    started_at_ms: float | None = field(default=None, init=False)
    _running: bool = field(default=True, init=False, repr=False)

    @property
    def is_running(self) -> bool:
        return self._running

    def cancel(self) -> None:
        if self._running:
            LOGGER.debug("animation cancelled start=%.3f end=%.3f", self.start_value, self.end_value)
        self._running = False

    def finish(self) -> None:
        """Jump to the end value and stop."""
        if not self._running:
            return
        self._running = False
        self.on_update(self.end_value)

    def value_at(self, now_ms: float) -> float:
        if self.duration_ms <= 0:
            return self.end_value
        if self.started_at_ms is None:
            return self.start_value
        fraction = (now_ms - self.started_at_ms) / self.duration_ms
        fraction = min(1.0, max(0.0, fraction))
        if fraction >= 1.0:
            return self.end_value
        eased = self.interpolator(fraction)
        return self.start_value + (self.end_value - self.start_value) * eased

    def advance(self, now_ms: float) -> None:
        if not self._running:
            return
        if self.started_at_ms is None:
            self.started_at_ms = now_ms
        if now_ms - self.started_at_ms >= self.duration_ms:
            self.finish()
            return
        self.on_update(self.value_at(now_ms))


class FrameAnimator:
    """Animator driven by the host frame loop via `tick(now_ms)`.

    All calls are expected on the UI thread. A started animation is timed from
    the first tick after `start`, which reports the start value again. Listeners
    may cancel or start animations while being notified; newly started
    animations are first advanced on the following tick.
    """

    def __init__(self, now_ms: float = 0.0) -> None:
        self._now_ms = float(now_ms)
        self._animations: list[FloatAnimation] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def active_count(self) -> int:
        return sum(1 for anim in self._animations if anim.is_running)

    def start(
        self,
        start_value: float,
        end_value: float,
        duration_ms: float,
        *,
        interpolator: Interpolator = accelerate_decelerate,
        on_update: UpdateListener,
    ) -> FloatAnimation:
        if duration_ms < 0:
            raise ValueError("duration_ms must be >= 0")
        animation = FloatAnimation(
            start_value=float(start_value),
            end_value=float(end_value),
            duration_ms=float(duration_ms),
            interpolator=interpolator,
            on_update=on_update,
        )
        LOGGER.debug(
            "animation started start=%.3f end=%.3f duration_ms=%.1f",
            animation.start_value,
            animation.end_value,
            animation.duration_ms,
        )
        if animation.duration_ms <= 0:
            animation.finish()
            return animation
        self._animations.append(animation)
        on_update(animation.start_value)
        return animation

    def tick(self, now_ms: float) -> int:
        """Advance every running animation to `now_ms`; returns how many remain."""
        if now_ms < self._now_ms:
            raise ValueError("animation clock cannot move backwards")
        self._now_ms = float(now_ms)
        for animation in list(self._animations):
            animation.advance(self._now_ms)
        self._animations = [anim for anim in self._animations if anim.is_running]
        return len(self._animations)

    def advance(self, delta_ms: float) -> int:
        return self.tick(self._now_ms + delta_ms)

    def run_until_idle(self, step_ms: float = 16.0, max_steps: int = 10_000) -> int:
        """Tick at a fixed cadence until nothing is running; returns steps taken."""
        if step_ms <= 0:
            raise ValueError("step_ms must be > 0")
        steps = 0
        while self.active_count and steps < max_steps:
            self.advance(step_ms)
            steps += 1
        return steps
