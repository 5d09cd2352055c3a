"""UI package."""

from .compact_view import CompactView
from .expanded_view import ExpandedView
from .metrics import NotchMetrics

__all__ = [
    "CompactView",
    "ExpandedView",
    "NotchMetrics",
]
