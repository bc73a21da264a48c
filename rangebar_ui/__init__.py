"""First-party range-slider thumb control for RangeBar."""

from .controls.circle_renderer import CircleRenderCommand, CircleRenderer
from .controls.thumb import NullThumb, RedrawSink, Thumb, ThumbControl
from .style.thumb_style import (
    DEFAULT_THUMB_COLOR_NORMAL,
    DEFAULT_THUMB_COLOR_PRESSED,
    DEFAULT_THUMB_RADIUS_DP,
    DEFAULT_THUMB_STYLE,
    MINIMUM_TARGET_RADIUS_DP,
    ResolvedThumbStyle,
    ThumbStyle,
    load_thumb_style,
    validate_thumb_style,
)

__all__ = [
    "CircleRenderCommand",
    "CircleRenderer",
    "DEFAULT_THUMB_COLOR_NORMAL",
    "DEFAULT_THUMB_COLOR_PRESSED",
    "DEFAULT_THUMB_RADIUS_DP",
    "DEFAULT_THUMB_STYLE",
    "MINIMUM_TARGET_RADIUS_DP",
    "NullThumb",
    "RedrawSink",
    "ResolvedThumbStyle",
    "Thumb",
    "ThumbControl",
    "ThumbStyle",
    "load_thumb_style",
    "validate_thumb_style",
]
