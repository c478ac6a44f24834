"""
SimpleSVG Document Model

The Document collects rendered shapes and wraps them in the SVG
envelope.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .layout import Layout, attribute
from .shapes import Shape

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_DOCTYPE = ('<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
               '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">')


@dataclass
class Document:
    """
    The output document.

    Shapes are rendered against the document's Layout as soon as they
    are added; later changes to a shape do not affect what was already
    added. A shape may be added again to capture its new state.
    """
    file_name: str
    layout: Layout = field(default_factory=Layout)
    fragments: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, shape: Shape) -> 'Document':
        """Render a shape into the document and return the document."""
        if not isinstance(shape, Shape):
            raise TypeError(f"Expected a Shape, got {type(shape).__name__}")
        self.fragments.append(shape.to_string(self.layout))
        logger.debug(f"Added <{shape.shape_name}> to {self.file_name} "
                     f"({len(self.fragments)} elements)")
        return self

    def append(self, shape: Shape) -> None:
        """Render a shape into the document."""
        self.add(shape)

    def __lshift__(self, shape: Shape) -> 'Document':
        return self.add(shape)

    def __len__(self) -> int:
        return len(self.fragments)

    def __bool__(self) -> bool:
        # An empty document is still a document
        return True

    def to_string(self) -> str:
        """Return the complete SVG text."""
        unit = self.layout.unit.value
        precision = self.layout.precision
        parts = [
            '<?xml' + attribute("version", "1.0") + attribute("standalone", "no") + '?>\n',
            SVG_DOCTYPE + '\n',
            '<svg' +
            attribute("width", self.layout.dimensions.width, unit, precision) +
            attribute("height", self.layout.dimensions.height, unit, precision) +
            attribute("xmlns", SVG_NAMESPACE) +
            attribute("version", "1.1") + '>\n',
        ]
        parts.extend(self.fragments)
        parts.append('</svg>\n')
        return ''.join(parts)

    def save(self, encoding: str = "utf-8") -> bool:
        """
        Write the document to its file name.

        Returns:
            True if successful, False if the file could not be written
        """
        from ..io.svg_writer import save_document
        return save_document(self, encoding=encoding)
