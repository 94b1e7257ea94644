"""
Fixed legal-value sets used by Vyzor components.

Each set is a plain class of string constants. The values are the literal
tokens written into stylesheets, so they can be passed around and formatted
without conversion.
"""

from __future__ import annotations


class ValueSet:
	"""Base class for a closed set of string constants.

	Every upper-case class attribute is a member. Subclasses only declare
	their constants.
	"""

	@classmethod
	def values(cls) -> tuple[str, ...]:
		"""All legal values, in declaration order."""
		members = []
		for klass in reversed(cls.__mro__):
			for key, value in vars(klass).items():
				if key.isupper() and isinstance(value, str) and value not in members:
					members.append(value)
		return tuple(members)

	@classmethod
	def is_valid(cls, value) -> bool:
		"""Check whether value is one of the legal values of this set."""
		return isinstance(value, str) and value in cls.values()


class BoxMode(ValueSet):
	"""How a Box arranges its frames."""
	HORIZONTAL = "Horizontal"
	VERTICAL = "Vertical"
	GRID = "Grid"


class GradientMode(ValueSet):
	LINEAR = "Linear"
	RADIAL = "Radial"
	CONICAL = "Conical"


class BorderStyle(ValueSet):
	"""Qt border-style values."""
	NONE = "none"
	DOTTED = "dotted"
	DASHED = "dashed"
	SOLID = "solid"
	DOUBLE = "double"
	DOT_DASH = "dot-dash"
	DOT_DOT_DASH = "dot-dot-dash"
	GROOVE = "groove"
	RIDGE = "ridge"
	INSET = "inset"
	OUTSET = "outset"


class ColorMode(ValueSet):
	NAME = "Name"
	RGB = "RGB"
	RGBA = "RGBA"
	HSV = "HSV"
	HSVA = "HSVA"
	HEX = "Hex"


class Alignment(ValueSet):
	"""Qt image-position values."""
	TOP = "top"
	BOTTOM = "bottom"
	LEFT = "left"
	RIGHT = "right"
	CENTER = "center"
	TOP_LEFT = "top left"
	TOP_RIGHT = "top right"
	BOTTOM_LEFT = "bottom left"
	BOTTOM_RIGHT = "bottom right"


class FillKind(ValueSet):
	"""Subtype tags carried by fill entities."""
	BRUSH = "Brush"
	IMAGE = "Image"
