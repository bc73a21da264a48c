from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CircleRenderCommand:
    """Backend-agnostic filled-circle instruction.

    Coordinates and radius are device pixels in the host surface's frame.
    """

    component_id: str
    cx: float
    cy: float
    radius: float
    color_hex: str


class CircleRenderer(Protocol):
    """Host surface capable of painting filled circles."""

    def draw_circle(self, command: CircleRenderCommand) -> None:
        ...
