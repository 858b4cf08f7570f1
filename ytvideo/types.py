"""Contains type hints for the library."""

__all__ = [
    "T",
    "TimeSeries",
    "ViewerPercentages",
]

from datetime import date
from typing import TypeVar

T = TypeVar("T")

TimeSeries = dict[date, float]
ViewerPercentages = dict[str, dict[str, float]]
