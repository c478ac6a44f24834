"""
SimpleSVG Core Shapes Module

Defines the Shape base class and all shape types: Circle, Ellipse,
Rectangle, Line, Polygon, Polyline, Path and Text.
"""

import copy
from abc import abstractmethod
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from .geometry import Point
from .layout import Layout, attribute, format_number, translate_scale, translate_x, translate_y
from .style import Fill, Font, Serializable, Stroke


class Shape(Serializable):
    """
    Abstract base class for all shapes.

    Every shape must provide:
    - shape_name: the element name
    - shape_attributes(): geometry attributes against a Layout
    - offset(): in-place translation of the owned geometry

    Geometry is stored in user space. The Layout is only consulted
    when the shape is rendered.
    """

    shape_name: str = ""

    def __init__(self, fill: Optional[Fill] = None, stroke: Optional[Stroke] = None):
        if fill is not None and not isinstance(fill, Fill):
            raise TypeError(f"Expected a Fill, got {type(fill).__name__}")
        if stroke is not None and not isinstance(stroke, Stroke):
            raise TypeError(f"Expected a Stroke, got {type(stroke).__name__}")
        self.fill: Fill = fill if fill is not None else Fill()
        self.stroke: Stroke = stroke if stroke is not None else Stroke()
        self._description: str = ""

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, text: str) -> None:
        self._description = text

    @abstractmethod
    def shape_attributes(self, layout: Layout) -> str:
        """Return the geometry attributes, already transformed."""
        pass

    @abstractmethod
    def offset(self, delta: Point) -> None:
        """Translate the shape by delta (user-space units)."""
        pass

    def body(self, layout: Layout) -> str:
        """Text placed directly after the opening tag."""
        return ""

    def clone(self) -> 'Shape':
        """Create a deep copy of this shape."""
        return copy.deepcopy(self)

    def to_string(self, layout: Layout) -> str:
        """
        Render the shape as an element.

        The nested desc element is always written, even when the
        description is empty.
        """
        return (f"<{self.shape_name}" +
                self.shape_attributes(layout) +
                self.fill.to_string(layout) +
                self.stroke.to_string(layout) +
                ">" +
                self.body(layout) +
                "\n<desc>" + escape(self._description) + "</desc>\n" +
                f"</{self.shape_name}>\n")

    def _position(self, prefix: str, point: Point, layout: Layout) -> str:
        return (attribute(f"{prefix}x", translate_x(point.x, layout), precision=layout.precision) +
                attribute(f"{prefix}y", translate_y(point.y, layout), precision=layout.precision))

    def _length(self, name: str, value: float, layout: Layout) -> str:
        return attribute(name, translate_scale(value, layout), precision=layout.precision)


def _point_list(points: Iterable[Point], layout: Layout) -> str:
    """Render points as "x,y x,y " in output space."""
    text = ""
    for p in points:
        text += (format_number(translate_x(p.x, layout), layout.precision) + "," +
                 format_number(translate_y(p.y, layout), layout.precision) + " ")
    return text


class Circle(Shape):
    """A circle given by center and radius."""

    shape_name = "circle"

    def __init__(self, center: Point, radius: float,
                 fill: Optional[Fill] = None, stroke: Optional[Stroke] = None):
        super().__init__(fill, stroke)
        self.center = center.clone()
        self.radius = radius

    def shape_attributes(self, layout: Layout) -> str:
        return self._position("c", self.center, layout) + self._length("r", self.radius, layout)

    def offset(self, delta: Point) -> None:
        self.center.x += delta.x
        self.center.y += delta.y


class Ellipse(Shape):
    """An ellipse. Radii are half the given width and height."""

    shape_name = "ellipse"

    def __init__(self, center: Point, width: float, height: float,
                 fill: Optional[Fill] = None, stroke: Optional[Stroke] = None):
        super().__init__(fill, stroke)
        self.center = center.clone()
        self.radius_width = width / 2
        self.radius_height = height / 2

    def shape_attributes(self, layout: Layout) -> str:
        return (self._position("c", self.center, layout) +
                self._length("rx", self.radius_width, layout) +
                self._length("ry", self.radius_height, layout))

    def offset(self, delta: Point) -> None:
        self.center.x += delta.x
        self.center.y += delta.y


class Rectangle(Shape):
    """A rectangle given by its edge point, width and height."""

    shape_name = "rect"

    def __init__(self, edge: Point, width: float, height: float,
                 fill: Optional[Fill] = None, stroke: Optional[Stroke] = None):
        super().__init__(fill, stroke)
        self.edge = edge.clone()
        self.width = width
        self.height = height

    def shape_attributes(self, layout: Layout) -> str:
        return (self._position("", self.edge, layout) +
                self._length("width", self.width, layout) +
                self._length("height", self.height, layout))

    def offset(self, delta: Point) -> None:
        self.edge.x += delta.x
        self.edge.y += delta.y


class Line(Shape):
    """A straight line. A line has no interior, so its fill is always transparent."""

    shape_name = "line"

    def __init__(self, start_point: Point, end_point: Point,
                 stroke: Optional[Stroke] = None):
        super().__init__(Fill(), stroke)
        self.start_point = start_point.clone()
        self.end_point = end_point.clone()

    def shape_attributes(self, layout: Layout) -> str:
        return (attribute("x1", translate_x(self.start_point.x, layout), precision=layout.precision) +
                attribute("y1", translate_y(self.start_point.y, layout), precision=layout.precision) +
                attribute("x2", translate_x(self.end_point.x, layout), precision=layout.precision) +
                attribute("y2", translate_y(self.end_point.y, layout), precision=layout.precision))

    def offset(self, delta: Point) -> None:
        for p in (self.start_point, self.end_point):
            p.x += delta.x
            p.y += delta.y


class _PointSequence(Shape):
    """Base for shapes rendered from a single ordered point list."""

    def __init__(self, fill: Optional[Fill] = None, stroke: Optional[Stroke] = None,
                 points: Optional[Iterable[Point]] = None):
        super().__init__(fill, stroke)
        self.points: List[Point] = []
        if points is not None:
            self.extend(points)

    def add_point(self, point: Point) -> '_PointSequence':
        """Append a point and return the shape for chaining."""
        self.points.append(point.clone())
        return self

    def extend(self, points: Iterable[Point]) -> '_PointSequence':
        for p in points:
            self.add_point(p)
        return self

    def shape_attributes(self, layout: Layout) -> str:
        return f' points="{_point_list(self.points, layout)}"'

    def offset(self, delta: Point) -> None:
        for p in self.points:
            p.x += delta.x
            p.y += delta.y


class Polygon(_PointSequence):
    """A closed shape through a list of points."""

    shape_name = "polygon"


class Polyline(_PointSequence):
    """An open line through a list of points."""

    shape_name = "polyline"


class Path(Shape):
    """
    A path made of one or more closed sub-paths of straight segments.

    Points are always added to the last sub-path. Empty sub-paths are
    skipped when rendering. The even-odd fill rule is always set.
    """

    shape_name = "path"

    def __init__(self, fill: Optional[Fill] = None, stroke: Optional[Stroke] = None):
        super().__init__(fill, stroke)
        self.sub_paths: List[List[Point]] = []
        self.start_new_sub_path()

    def add_point(self, point: Point) -> 'Path':
        """Append a point to the current sub-path."""
        self.sub_paths[-1].append(point.clone())
        return self

    def start_new_sub_path(self) -> 'Path':
        """Start a new sub-path, unless the current one is still empty."""
        if not self.sub_paths or self.sub_paths[-1]:
            self.sub_paths.append([])
        return self

    def shape_attributes(self, layout: Layout) -> str:
        d = ""
        for sub_path in self.sub_paths:
            if not sub_path:
                continue
            d += "M" + _point_list(sub_path, layout) + "z "
        return f' d="{d}" fill-rule="evenodd"'

    def offset(self, delta: Point) -> None:
        for sub_path in self.sub_paths:
            for p in sub_path:
                p.x += delta.x
                p.y += delta.y


class Text(Shape):
    """
    A text element anchored at a point.

    The content becomes the element body; the Font adds size and
    family attributes.
    """

    shape_name = "text"

    def __init__(self, origin: Point, content: str,
                 fill: Optional[Fill] = None, font: Optional[Font] = None,
                 stroke: Optional[Stroke] = None):
        super().__init__(fill, stroke)
        self.origin = origin.clone()
        self.content = content
        self.font = font if font is not None else Font()

    def shape_attributes(self, layout: Layout) -> str:
        return self._position("", self.origin, layout) + self.font.to_string(layout)

    def body(self, layout: Layout) -> str:
        return escape(self.content)

    def offset(self, delta: Point) -> None:
        self.origin.x += delta.x
        self.origin.y += delta.y
