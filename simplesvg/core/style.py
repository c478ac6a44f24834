"""
SimpleSVG Style Values

Color, Fill, Stroke and Font. Each renders itself as a fragment of
attributes for a shape's opening tag.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from .layout import Layout, attribute, translate_scale


class Serializable(ABC):
    """Anything that renders to markup against a Layout."""

    @abstractmethod
    def to_string(self, layout: Layout) -> str:
        pass


# Preset name -> RGB, None means transparent
NAMED_COLORS: Dict[str, Optional[Tuple[int, int, int]]] = {
    "transparent": None,
    "aqua": (0, 255, 255),
    "black": (0, 0, 0),
    "blue": (0, 0, 255),
    "brown": (165, 42, 42),
    "cyan": (0, 255, 255),
    "fuchsia": (255, 0, 255),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "magenta": (255, 0, 255),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "red": (255, 0, 0),
    "silver": (192, 192, 192),
    "white": (255, 255, 255),
    "yellow": (255, 255, 0),
}


@dataclass(frozen=True)
class Color(Serializable):
    """An RGB color or the transparent color."""
    red: int = 0
    green: int = 0
    blue: int = 0
    transparent: bool = False

    @classmethod
    def transparent_color(cls) -> 'Color':
        return cls(transparent=True)

    @classmethod
    def named(cls, name: str) -> 'Color':
        """
        Look up a preset color by name (case-insensitive).

        Raises:
            KeyError: If the name is not a known preset
        """
        key = name.strip().lower()
        if key not in NAMED_COLORS:
            raise KeyError(f"Unknown color name: {name!r}")
        rgb = NAMED_COLORS[key]
        if rgb is None:
            return cls.transparent_color()
        return cls(*rgb)

    def to_string(self, layout: Optional[Layout] = None) -> str:
        if self.transparent:
            return "none"
        return f"rgb({self.red},{self.green},{self.blue})"


for _name in NAMED_COLORS:
    setattr(Color, _name.upper(), Color.named(_name))
del _name


ColorLike = Union[Color, str]


def _as_color(value: Optional[ColorLike]) -> Color:
    if value is None:
        return Color.transparent_color()
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.named(value)
    raise TypeError(f"Expected a Color or a color name, got {type(value).__name__}")


class Fill(Serializable):
    """Interior color of a shape."""

    def __init__(self, color: Optional[ColorLike] = None):
        self.color = _as_color(color)

    def __eq__(self, other):
        return isinstance(other, Fill) and self.color == other.color

    def __repr__(self):
        return f"Fill({self.color!r})"

    def to_string(self, layout: Layout) -> str:
        return attribute("fill", self.color.to_string(layout))


class Stroke(Serializable):
    """
    Outline of a shape.

    A negative width is the "no stroke" sentinel: nothing is rendered.
    The width is scaled by the Layout.
    """

    def __init__(self, width: float = -1, color: Optional[ColorLike] = None,
                 non_scaling: bool = False):
        self.width = width
        self.color = _as_color(color)
        self.non_scaling = non_scaling

    def __eq__(self, other):
        return (isinstance(other, Stroke) and self.width == other.width and
                self.color == other.color and self.non_scaling == other.non_scaling)

    def __repr__(self):
        return f"Stroke({self.width!r}, {self.color!r}, non_scaling={self.non_scaling!r})"

    @property
    def is_visible(self) -> bool:
        return self.width >= 0

    def to_string(self, layout: Layout) -> str:
        if not self.is_visible:
            return ""
        text = (attribute("stroke-width", translate_scale(self.width, layout),
                          precision=layout.precision) +
                attribute("stroke", self.color.to_string(layout)))
        if self.non_scaling:
            text += attribute("vector-effect", "non-scaling-stroke")
        return text


@dataclass
class Font(Serializable):
    """Font size (scaled by the Layout) and family."""
    size: float = 12.0
    family: str = "Verdana"

    def to_string(self, layout: Layout) -> str:
        return (attribute("font-size", translate_scale(self.size, layout),
                          precision=layout.precision) +
                attribute("font-family", self.family))
