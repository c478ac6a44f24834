"""
SimpleSVG - write SVG documents from simple shapes.
"""

from .core import (
    Point, Dimensions, get_min_point, get_max_point,
    Unit, Origin, Layout, translate_x, translate_y, translate_scale, format_number,
    Color, Fill, Stroke, Font,
    Shape, Circle, Ellipse, Rectangle, Line, Polygon, Polyline, Path, Text,
    Document
)
from .io import write_text, save_document

__version__ = "0.1.0"

__all__ = [
    'Point', 'Dimensions', 'get_min_point', 'get_max_point',
    'Unit', 'Origin', 'Layout', 'translate_x', 'translate_y', 'translate_scale',
    'format_number',
    'Color', 'Fill', 'Stroke', 'Font',
    'Shape', 'Circle', 'Ellipse', 'Rectangle', 'Line',
    'Polygon', 'Polyline', 'Path', 'Text',
    'Document',
    'write_text', 'save_document'
]
