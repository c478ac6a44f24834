"""
SimpleSVG Geometry Primitives

Defines Point, Dimensions and the bounding-point helpers.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass
class Point:
    """A 2D point in user space."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def clone(self) -> 'Point':
        return Point(self.x, self.y)


@dataclass
class Dimensions:
    """A width x height extent."""
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def square(cls, size: float) -> 'Dimensions':
        """Create dimensions with equal width and height."""
        return cls(size, size)


def _points_array(points: Sequence[Point]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=float)


def get_min_point(points: Sequence[Point]) -> Optional[Point]:
    """
    Get the component-wise minimum of a sequence of points.

    The x and y of the result may come from different points.

    Args:
        points: Points to inspect

    Returns:
        Point holding the smallest x and smallest y, or None if
        the sequence is empty
    """
    if len(points) == 0:
        return None
    lo = _points_array(points).min(axis=0)
    return Point(float(lo[0]), float(lo[1]))


def get_max_point(points: Sequence[Point]) -> Optional[Point]:
    """
    Get the component-wise maximum of a sequence of points.

    Args:
        points: Points to inspect

    Returns:
        Point holding the largest x and largest y, or None if
        the sequence is empty
    """
    if len(points) == 0:
        return None
    hi = _points_array(points).max(axis=0)
    return Point(float(hi[0]), float(hi[1]))
