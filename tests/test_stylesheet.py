"""Unit tests for stylesheet helpers, value sets and error types."""

import os
import sys
import unittest

# Add the project root to the path so we can import the vyzor package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vyzor.enums import BorderStyle, BoxMode, GradientMode
from vyzor.errors import InvalidArgument, InvalidEnum, VyzorError
from vyzor.stylesheet import format_value, join_statements, strip_style_prefix, style_value


class TestFormatValue(unittest.TestCase):
	"""Test how numbers and tokens are printed."""

	def test_integral_numbers(self):
		"""Test that integral values print without a fractional part."""
		self.assertEqual(format_value(5), "5")
		self.assertEqual(format_value(1.0), "1")
		self.assertEqual(format_value(0.0), "0")
		self.assertEqual(format_value(-2.0), "-2")

	def test_fractional_numbers(self):
		"""Test that fractions keep up to 14 significant digits."""
		self.assertEqual(format_value(0.5), "0.5")
		self.assertEqual(format_value(0.25), "0.25")
		self.assertEqual(format_value(1 / 3), "0.33333333333333")

	def test_other_values(self):
		"""Test tokens and booleans."""
		self.assertEqual(format_value("red"), "red")
		self.assertEqual(format_value(True), "true")


class TestStylePrefix(unittest.TestCase):
	"""Test stripping of property prefixes."""

	def test_strip_prefix(self):
		"""Test that a leading property name is removed."""
		self.assertEqual(strip_style_prefix("color: red"), "red")
		self.assertEqual(strip_style_prefix("background-color: rgb(1, 2, 3)"), "rgb(1, 2, 3)")

	def test_no_prefix(self):
		"""Test that values without a property name are unchanged."""
		self.assertEqual(strip_style_prefix("red"), "red")
		self.assertEqual(strip_style_prefix("#ff0000"), "#ff0000")
		gradient = "qlineargradient(x1:0, y1:0, x2:1, y2:1, stop:0 red)"
		self.assertEqual(strip_style_prefix(gradient), gradient)

	def test_style_value(self):
		"""Test entities and raw tokens."""
		class Entity:
			stylesheet = "color: blue"

		self.assertEqual(style_value(Entity()), "blue")
		self.assertEqual(style_value("green"), "green")
		self.assertEqual(style_value(0.5), "0.5")

	def test_join_statements(self):
		"""Test that empty lines are dropped and statements terminated."""
		self.assertEqual(join_statements(["a: 1", "", None, "b: 2"]), "a: 1; b: 2;")
		self.assertEqual(join_statements([]), "")


class TestValueSets(unittest.TestCase):
	"""Test the legal-value sets."""

	def test_values_in_declaration_order(self):
		"""Test that members are listed in declaration order."""
		self.assertEqual(BoxMode.values(), ("Horizontal", "Vertical", "Grid"))
		self.assertEqual(GradientMode.values(), ("Linear", "Radial", "Conical"))
		self.assertEqual(BorderStyle.values()[0], BorderStyle.NONE)

	def test_is_valid(self):
		"""Test membership checks."""
		self.assertTrue(BoxMode.is_valid("Grid"))
		self.assertFalse(BoxMode.is_valid("grid"))
		self.assertFalse(BoxMode.is_valid(None))
		self.assertFalse(BoxMode.is_valid(0))
		self.assertTrue(BorderStyle.is_valid("dot-dash"))
		self.assertFalse(GradientMode.is_valid("Solid"))


class TestErrors(unittest.TestCase):
	"""Test the error hierarchy and messages."""

	def test_hierarchy(self):
		"""Test that Vyzor errors are value errors."""
		for error_class in (InvalidArgument, InvalidEnum):
			self.assertTrue(issubclass(error_class, VyzorError))
			self.assertTrue(issubclass(error_class, ValueError))

	def test_message_prefix(self):
		"""Test that messages are prefixed once."""
		self.assertEqual(str(InvalidEnum("Bad mode.")), "Vyzor: Bad mode.")
		self.assertEqual(str(InvalidArgument("Vyzor: Missing name.")), "Vyzor: Missing name.")


if __name__ == '__main__':
	unittest.main()
