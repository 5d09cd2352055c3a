"""Layout metrics supplied by the host window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotchMetrics:
    """Geometry of the closed notch surface, in pixels."""

    closed_width: int = 185
    effective_closed_height: int = 32

    @property
    def icon_side(self) -> int:
        return max(0, self.effective_closed_height - 12)

    @property
    def time_width(self) -> int:
        return max(0, self.effective_closed_height + 30)
