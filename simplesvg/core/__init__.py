"""
SimpleSVG Core Module

Contains the core data structures:
- Geometry: Point, Dimensions, bounding points
- Layout: coordinate transform from user space to output space
- Style: Color, Fill, Stroke, Font
- Shapes: Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text
- Document: Accumulates rendered shapes
"""

# Import order matters - geometry first, then layout, style, shapes, document
from .geometry import Point, Dimensions, get_min_point, get_max_point
from .layout import (
    Unit, Origin, Layout, translate_x, translate_y, translate_scale, format_number
)
from .style import Color, Fill, Stroke, Font
from .shapes import (
    Shape, Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text
)
from .document import Document

__all__ = [
    'Point', 'Dimensions', 'get_min_point', 'get_max_point',
    'Unit', 'Origin', 'Layout', 'translate_x', 'translate_y', 'translate_scale',
    'format_number',
    'Color', 'Fill', 'Stroke', 'Font',
    'Shape', 'Circle', 'Ellipse', 'Rectangle', 'Line',
    'Polygon', 'Polyline', 'Path', 'Text',
    'Document'
]
