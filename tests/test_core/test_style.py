"""
Tests for Color, Fill, Stroke and Font.
"""

import unittest

from simplesvg.core.layout import Layout
from simplesvg.core.style import Color, Fill, Stroke, Font, NAMED_COLORS


class TestColor(unittest.TestCase):
    """Test Color class."""

    def test_rgb(self):
        """Test the rgb() form."""
        self.assertEqual(Color(1, 2, 3).to_string(), "rgb(1,2,3)")

    def test_transparent(self):
        """Test that transparent colors print as none."""
        self.assertEqual(Color.transparent_color().to_string(), "none")
        self.assertEqual(Color(10, 20, 30, transparent=True).to_string(), "none")

    def test_named_presets(self):
        """Test case-insensitive preset lookup."""
        self.assertEqual(Color.named("Red"), Color(255, 0, 0))
        self.assertEqual(Color.named("brown"), Color(165, 42, 42))
        self.assertEqual(Color.named("Green"), Color(0, 128, 0))
        self.assertEqual(Color.named("ORANGE"), Color(255, 165, 0))
        self.assertTrue(Color.named("Transparent").transparent)

    def test_class_attributes(self):
        """Test presets exposed as class attributes."""
        self.assertEqual(Color.RED, Color(255, 0, 0))
        self.assertEqual(Color.SILVER, Color(192, 192, 192))
        self.assertTrue(Color.TRANSPARENT.transparent)

    def test_all_presets_available(self):
        """Test the full preset table."""
        expected = {"transparent", "aqua", "black", "blue", "brown", "cyan",
                    "fuchsia", "green", "lime", "magenta", "orange", "purple",
                    "red", "silver", "white", "yellow"}
        self.assertEqual(set(NAMED_COLORS), expected)

    def test_unknown_name(self):
        """Test that an unknown name raises KeyError."""
        with self.assertRaises(KeyError):
            Color.named("Chartreuse")


class TestFill(unittest.TestCase):
    """Test Fill class."""

    def test_default_is_transparent(self):
        """Test that the default fill is none."""
        self.assertEqual(Fill().to_string(Layout()), ' fill="none"')

    def test_color_and_name(self):
        """Test that a Fill accepts a Color or a preset name."""
        self.assertEqual(Fill(Color.BLUE).to_string(Layout()), ' fill="rgb(0,0,255)"')
        self.assertEqual(Fill("Blue"), Fill(Color.BLUE))

    def test_rejects_other_types(self):
        """Test that tuples are not accepted as colors."""
        with self.assertRaises(TypeError):
            Fill((255, 0, 0))


class TestStroke(unittest.TestCase):
    """Test Stroke class."""

    def test_sentinel_renders_nothing(self):
        """Test that a negative width produces no attributes at all."""
        self.assertEqual(Stroke().to_string(Layout()), "")
        self.assertEqual(Stroke(-0.5, Color.BLACK).to_string(Layout()), "")
        self.assertFalse(Stroke().is_visible)

    def test_width_is_scaled(self):
        """Test that stroke width follows the Layout scale."""
        text = Stroke(2, Color.BLACK).to_string(Layout(scale=2))
        self.assertEqual(text, ' stroke-width="4" stroke="rgb(0,0,0)"')

    def test_zero_width_is_rendered(self):
        """Test that width 0 still writes both stroke attributes."""
        text = Stroke(0).to_string(Layout())
        self.assertIn('stroke-width="0"', text)
        self.assertIn('stroke="none"', text)

    def test_non_scaling(self):
        """Test the non-scaling stroke flag."""
        text = Stroke(1, "Red", non_scaling=True).to_string(Layout())
        self.assertEqual(text, ' stroke-width="1" stroke="rgb(255,0,0)"'
                               ' vector-effect="non-scaling-stroke"')


class TestFont(unittest.TestCase):
    """Test Font class."""

    def test_defaults(self):
        """Test the default size and family."""
        self.assertEqual(Font().to_string(Layout()),
                         ' font-size="12" font-family="Verdana"')

    def test_size_is_scaled(self):
        """Test that font size follows the Layout scale."""
        self.assertEqual(Font(10, "Arial").to_string(Layout(scale=0.5)),
                         ' font-size="5" font-family="Arial"')


if __name__ == '__main__':
    unittest.main()
