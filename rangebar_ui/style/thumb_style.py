from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import re
import tomllib
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

# Touchable half-size in dp, following the 48dp touch-target rhythm.
MINIMUM_TARGET_RADIUS_DP = 24.0
DEFAULT_THUMB_RADIUS_DP = 9.0
# holo_blue_light
DEFAULT_THUMB_COLOR_NORMAL = "#33B5E5"
DEFAULT_THUMB_COLOR_PRESSED = "#33B5E5"


@dataclass(frozen=True)
class ResolvedThumbStyle:
    color_normal: str
    color_pressed: str
    radius_dp: float
    target_radius_dp: float
    legacy_pressed_paint: bool


@dataclass(frozen=True)
class ThumbStyle:
    """Thumb appearance; `None` fields fall back to the documented defaults.

    `legacy_pressed_paint` paints with `color_pressed` regardless of state,
    matching the historical RangeBar rendering.
    """

    color_normal: str | None = None
    color_pressed: str | None = None
    radius_dp: float | None = None
    legacy_pressed_paint: bool = False

    def resolved(self) -> ResolvedThumbStyle:
        radius_dp = DEFAULT_THUMB_RADIUS_DP if self.radius_dp is None else float(self.radius_dp)
        # Whole-dp target zone; an unset radius only contributes the minimum.
        configured = MINIMUM_TARGET_RADIUS_DP if self.radius_dp is None else float(self.radius_dp)
        target_radius_dp = float(int(max(MINIMUM_TARGET_RADIUS_DP, configured)))
        return ResolvedThumbStyle(
            color_normal=self.color_normal or DEFAULT_THUMB_COLOR_NORMAL,
            color_pressed=self.color_pressed or DEFAULT_THUMB_COLOR_PRESSED,
            radius_dp=radius_dp,
            target_radius_dp=target_radius_dp,
            legacy_pressed_paint=self.legacy_pressed_paint,
        )


DEFAULT_THUMB_STYLE = ThumbStyle()


def validate_thumb_style(overrides: Mapping[str, Any] | None = None) -> ThumbStyle:
    """Validate and merge user style overrides against the unset defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_THUMB_STYLE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown thumb style key: {key}")
            raw[key] = value

    for key in ("color_normal", "color_pressed"):
        value = raw[key]
        if value is None:
            continue
        if not isinstance(value, str) or not _HEX_COLOR.match(value):
            raise ValueError(f"Style `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    radius = raw["radius_dp"]
    if radius is not None and (isinstance(radius, bool) or not isinstance(radius, (int, float))):
        raise ValueError("Style `radius_dp` must be a number")

    if not isinstance(raw["legacy_pressed_paint"], bool):
        raise ValueError("Style `legacy_pressed_paint` must be a boolean")

    return ThumbStyle(
        color_normal=raw["color_normal"],
        color_pressed=raw["color_pressed"],
        radius_dp=None if radius is None else float(radius),
        legacy_pressed_paint=raw["legacy_pressed_paint"],
    )


def load_thumb_style(path: str | Path) -> ThumbStyle:
    """Load the `[thumb]` table from a TOML file; a missing table means all defaults."""

    style_path = Path(path)
    if not style_path.exists():
        raise FileNotFoundError(f"thumb style file not found: {style_path}")
    with style_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("thumb", {})
    if not isinstance(table, Mapping):
        raise ValueError("`thumb` must be a TOML table")
    return validate_thumb_style(table)
