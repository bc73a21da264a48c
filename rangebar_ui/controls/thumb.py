from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Protocol

from rangebar_core.core.animation import AnimationHandle, Animator, accelerate_decelerate
from rangebar_core.core.units import UnitConverter

from ..style.thumb_style import DEFAULT_THUMB_STYLE, ThumbStyle
from .circle_renderer import CircleRenderCommand, CircleRenderer


LOGGER = logging.getLogger(__name__)

PRESS_ANIMATION_MS = 150.0
PRESSED_RADIUS_SCALE = 1.5

RedrawSink = Callable[[], None]


class ThumbControl(Protocol):
    """Capability set the owning slider relies on for each handle."""

    @property
    def half_width(self) -> float:
        ...

    @property
    def half_height(self) -> float:
        ...

    @property
    def x(self) -> float:
        ...

    def set_x(self, x: float) -> None:
        ...

    def is_pressed(self) -> bool:
        ...

    def press(self) -> None:
        ...

    def release(self) -> None:
        ...

    def is_in_target_zone(self, x: float, y: float) -> bool:
        ...

    def draw(self, surface: CircleRenderer) -> CircleRenderCommand | None:
        ...


@dataclass
class _RadiusChannel:
    """Mutable radius plus redraw sink handed to the animator's update callback."""

    value: float
    request_redraw: RedrawSink

    def update(self, value: float) -> None:
        self.value = value
        self.request_redraw()


class Thumb:
    """Draggable slider handle: a circle whose radius grows while pressed.

    The touch target is a square of half-size `target_radius` around the
    centre, kept independent of the drawn circle so small thumbs stay easy to
    grab.
    """

    def __init__(
        self,
        *,
        y: float,
        units: UnitConverter,
        animator: Animator,
        request_redraw: RedrawSink,
        style: ThumbStyle = DEFAULT_THUMB_STYLE,
        component_id: str = "thumb",
    ) -> None:
        resolved = style.resolved()
        self.component_id = component_id
        self._animator = animator
        self._color_normal = resolved.color_normal
        self._color_pressed = resolved.color_pressed
        self._legacy_pressed_paint = resolved.legacy_pressed_paint

        self._normal_radius = units.dp_to_px(resolved.radius_dp)
        self._pressed_radius = self._normal_radius * PRESSED_RADIUS_SCALE
        self._target_radius = units.dp_to_px(resolved.target_radius_dp)

        self._radius = _RadiusChannel(value=self._normal_radius, request_redraw=request_redraw)
        self._active_animation: AnimationHandle | None = None
        self._pressed = False
        self._x = self._normal_radius
        self._y = float(y)

    @property
    def half_width(self) -> float:
        return self._normal_radius

    @property
    def half_height(self) -> float:
        return self._normal_radius

    @property
    def normal_radius(self) -> float:
        return self._normal_radius

    @property
    def pressed_radius(self) -> float:
        return self._pressed_radius

    @property
    def target_radius(self) -> float:
        return self._target_radius

    @property
    def visual_radius(self) -> float:
        return self._radius.value

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def is_animating(self) -> bool:
        return self._active_animation is not None and self._active_animation.is_running

    def set_x(self, x: float) -> None:
        self._x = x

    def is_pressed(self) -> bool:
        return self._pressed

    def press(self) -> None:
        self._pressed = True
        LOGGER.debug("thumb `%s` pressed at x=%.2f", self.component_id, self._x)
        self._animate_radius_to(self._pressed_radius)

    def release(self) -> None:
        self._pressed = False
        LOGGER.debug("thumb `%s` released at x=%.2f", self.component_id, self._x)
        self._animate_radius_to(self._normal_radius)

    def is_in_target_zone(self, x: float, y: float) -> bool:
        """Return True when `(x, y)` is close enough to count as a press on this thumb."""
        return abs(x - self._x) <= self._target_radius and abs(y - self._y) <= self._target_radius

    def draw(self, surface: CircleRenderer) -> CircleRenderCommand:
        if self._pressed or self._legacy_pressed_paint:
            color = self._color_pressed
        else:
            color = self._color_normal
        command = CircleRenderCommand(
            component_id=self.component_id,
            cx=self._x,
            cy=self._y,
            radius=self._radius.value,
            color_hex=color,
        )
        surface.draw_circle(command)
        return command

    def dispose(self) -> None:
        """Cancel any in-flight radius animation; used on owner teardown."""
        if self._active_animation is not None:
            self._active_animation.cancel()
            self._active_animation = None

    def _animate_radius_to(self, end_radius: float) -> None:
        # Cancel first so no two animations ever write the radius.
        self.dispose()
        self._active_animation = self._animator.start(
            self._radius.value,
            end_radius,
            PRESS_ANIMATION_MS,
            interpolator=accelerate_decelerate,
            on_update=self._radius.update,
        )


class NullThumb:
    """Inert stand-in for a missing or disabled handle."""

    component_id = "null_thumb"

    @property
    def half_width(self) -> float:
        return 0.0

    @property
    def half_height(self) -> float:
        return 0.0

    @property
    def x(self) -> float:
        return 0.0

    def set_x(self, x: float) -> None:
        return None

    def is_pressed(self) -> bool:
        return False

    def press(self) -> None:
        return None

    def release(self) -> None:
        return None

    def is_in_target_zone(self, x: float, y: float) -> bool:
        return False

    def draw(self, surface: CircleRenderer) -> None:
        return None
