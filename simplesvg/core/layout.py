"""
SimpleSVG Layout

The Layout maps user-space coordinates to SVG output space.
Output space has its origin top-left with y growing downward;
the Layout lets callers pin their origin to any canvas corner
and work at any uniform scale.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union
from xml.sax.saxutils import escape

from .geometry import Dimensions, Point


class Unit(Enum):
    """Measurement unit written on the root element."""
    PX = "px"
    MM = "mm"


class Origin(Enum):
    """Canvas corner the user-space origin is pinned to."""
    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"
    TOP_RIGHT = "top-right"
    BOTTOM_RIGHT = "bottom-right"


@dataclass(frozen=True)
class Layout:
    """
    Dimensions, unit, origin, scale and origin offset of a document.

    Use the same Layout for every shape of one document.
    """
    dimensions: Dimensions = field(default_factory=lambda: Dimensions(400, 300))
    unit: Unit = Unit.MM
    origin: Origin = Origin.BOTTOM_LEFT
    scale: float = 1.0
    origin_offset: Point = field(default_factory=Point)
    precision: int = 6               # Significant digits for numbers

    def __post_init__(self):
        # Own copies, so later edits to the caller's objects cannot move the canvas
        d = self.dimensions
        object.__setattr__(self, "dimensions", Dimensions(d.width, d.height))
        object.__setattr__(self, "origin_offset", self.origin_offset.clone())

    def translate_x(self, x: float) -> float:
        return translate_x(x, self)

    def translate_y(self, y: float) -> float:
        return translate_y(y, self)

    def translate_scale(self, value: float) -> float:
        return translate_scale(value, self)


def translate_x(x: float, layout: Layout) -> float:
    """Convert a user-space x coordinate to output space."""
    if layout.origin in (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT):
        return layout.dimensions.width - (x + layout.origin_offset.x) * layout.scale
    return (layout.origin_offset.x + x) * layout.scale


def translate_y(y: float, layout: Layout) -> float:
    """Convert a user-space y coordinate to output space."""
    if layout.origin in (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT):
        return layout.dimensions.height - (y + layout.origin_offset.y) * layout.scale
    return (layout.origin_offset.y + y) * layout.scale


def translate_scale(value: float, layout: Layout) -> float:
    """Scale a length (radius, width, font size) that has no position."""
    return value * layout.scale


def format_number(value: float, precision: int = 6) -> str:
    """
    Format a number the way a default C++ stream would.

    Uses %g with the given number of significant digits, so 50.0
    becomes "50" and 1234567.0 becomes "1.23457e+06".
    """
    text = '%.*g' % (precision, value)
    if text == '-0':
        return '0'
    return text


def attribute(name: str, value: Union[str, float], unit: str = "",
              precision: int = 6) -> str:
    """
    Render a single markup attribute with a leading space.

    Args:
        name: Attribute name
        value: Attribute value; numbers go through format_number
        unit: Suffix appended to the value (e.g. "mm")
        precision: Significant digits for numeric values

    Returns:
        The attribute fragment, e.g. ' cx="50"'
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        text = format_number(value, precision)
    else:
        text = escape(str(value), {'"': '&quot;'})
    return f' {name}="{text}{unit}"'
