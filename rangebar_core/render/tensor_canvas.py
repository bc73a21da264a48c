from __future__ import annotations

import logging
import math

import torch
from PIL import Image

from rangebar_ui.controls.circle_renderer import CircleRenderCommand


LOGGER = logging.getLogger(__name__)

Color = tuple[int, int, int, int]


class TensorCanvas:
    """Torch-backed RGBA255 surface for headless thumb rendering."""

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0, 255)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.background = background
        self._grid_x = torch.arange(width, dtype=torch.float32).unsqueeze(0).expand(height, width)
        self._grid_y = torch.arange(height, dtype=torch.float32).unsqueeze(1).expand(height, width)
        self._frame = torch.zeros((height, width, 4), dtype=torch.uint8)
        self.clear()

    def clear(self, color: Color | None = None) -> None:
        fill = self.background if color is None else color
        bg = torch.tensor(fill, dtype=torch.uint8).view(1, 1, 4)
        self._frame = bg.expand(self.height, self.width, 4).clone()

    def snapshot(self) -> torch.Tensor:
        return self._frame.clone()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._frame.cpu().numpy())

    def draw_circle(self, command: CircleRenderCommand) -> None:
        r = float(command.radius)
        cx = float(command.cx)
        cy = float(command.cy)
        if not all(math.isfinite(v) for v in (cx, cy, r)):
            LOGGER.debug("circle `%s` has non-finite geometry; skipped", command.component_id)
            return
        if r <= 0:
            return
        x0 = max(0, int(cx - r - 1))
        y0 = max(0, int(cy - r - 1))
        x1 = min(self.width, int(cx + r + 2))
        y1 = min(self.height, int(cy + r + 2))
        if x1 <= x0 or y1 <= y0:
            LOGGER.debug("circle `%s` outside canvas; cx=%.2f cy=%.2f r=%.2f", command.component_id, cx, cy, r)
            return
        gx = self._grid_x[y0:y1, x0:x1]
        gy = self._grid_y[y0:y1, x0:x1]
        mask = ((gx - cx) ** 2 + (gy - cy) ** 2) <= (r * r)
        self._blend_mask(mask, x0=x0, y0=y0, color=parse_hex_color(command.color_hex))

    def _blend_mask(self, mask: torch.Tensor, *, x0: int, y0: int, color: Color) -> None:
        if not bool(mask.any()):
            return
        alpha = color[3] / 255.0
        if alpha <= 0:
            return
        h, w = mask.shape
        region = self._frame[y0 : y0 + h, x0 : x0 + w, :3]
        dst = region.to(torch.float32)
        src = torch.tensor(color[:3], dtype=torch.float32).view(1, 1, 3)
        blended = torch.clamp(torch.round(src * alpha + dst * (1.0 - alpha)), 0, 255).to(torch.uint8)
        self._frame[y0 : y0 + h, x0 : x0 + w, :3] = torch.where(mask.unsqueeze(-1), blended, region)
        alpha_plane = self._frame[y0 : y0 + h, x0 : x0 + w, 3]
        self._frame[y0 : y0 + h, x0 : x0 + w, 3] = torch.where(mask, torch.full_like(alpha_plane, 255), alpha_plane)


def parse_hex_color(hex_color: str) -> Color:
    value = hex_color.strip()
    if not value.startswith("#"):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    raw = value[1:]
    if len(raw) not in (6, 8):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    try:
        r = int(raw[0:2], 16)
        g = int(raw[2:4], 16)
        b = int(raw[4:6], 16)
        a = int(raw[6:8], 16) if len(raw) == 8 else 255
    except ValueError as exc:
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`") from exc
    return (r, g, b, a)
