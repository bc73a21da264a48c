from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class UnitConverter(Protocol):
    def dp_to_px(self, dp: float) -> float:
        ...


@dataclass(frozen=True)
class DisplayMetrics:
    """Density-independent pixel conversion for one display.

    `density` is the px-per-dp scale (1.0 at a 160 dpi baseline).
    """

    density: float = 1.0

    def __post_init__(self) -> None:
        if self.density <= 0:
            raise ValueError("density must be > 0")

    @classmethod
    def from_dpi(cls, dpi: float) -> "DisplayMetrics":
        if dpi <= 0:
            raise ValueError("dpi must be > 0")
        return cls(density=float(dpi) / 160.0)

    def dp_to_px(self, dp: float) -> float:
        return float(dp) * self.density

    def px_to_dp(self, px: float) -> float:
        return float(px) / self.density
