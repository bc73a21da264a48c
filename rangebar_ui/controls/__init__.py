"""Thumb control and render contracts for RangeBar UI."""

from .circle_renderer import CircleRenderCommand, CircleRenderer
from .thumb import (
    PRESS_ANIMATION_MS,
    PRESSED_RADIUS_SCALE,
    NullThumb,
    RedrawSink,
    Thumb,
    ThumbControl,
)

__all__ = [
    "CircleRenderCommand",
    "CircleRenderer",
    "NullThumb",
    "PRESS_ANIMATION_MS",
    "PRESSED_RADIUS_SCALE",
    "RedrawSink",
    "Thumb",
    "ThumbControl",
]
