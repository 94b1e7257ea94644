"""
BorderSide: the style of one edge of a Border.

A side has a width, a BorderStyle, a fill (a Brush or an Image, never both)
and a corner radius. Only top and bottom edges carry radii, as in Qt; a
side flagged with is_side (left or right) never emits one.

The style fragment is a tuple of 'property: value' lines without the
'border-<edge>-' prefix; Border adds that when it assembles the stylesheet.
"""

from __future__ import annotations

import logging

from .constants import DEFAULT_BORDER_STYLE, DEFAULT_RADIUS
from .enums import BorderStyle, FillKind
from .errors import InvalidArgument, InvalidEnum
from .stylesheet import format_value, style_value

logger = logging.getLogger(__name__)


def _fill_kind(fill) -> str | None:
	kind = getattr(fill, 'subtype', None)
	return kind if FillKind.is_valid(kind) else None


def _check_radius(value):
	"""Accept a number or a [left, right] pair."""
	if isinstance(value, (list, tuple)):
		if len(value) != 2:
			raise InvalidArgument(f"BorderSide radius pair must have 2 values, got {len(value)}.")
		return tuple(value)
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise InvalidArgument(f"Invalid radius passed to BorderSide: {value!r}.")
	return value


class BorderSide:
	def __init__(self, width, style: str = DEFAULT_BORDER_STYLE, fill=None, radius=DEFAULT_RADIUS):
		"""
		Args:
			width: The side's width.
			style: A BorderStyle value. Defaults to none.
			fill: A Brush or an Image, or None.
			radius: A number, or a (left, right) pair.
		"""
		if style is None:
			style = DEFAULT_BORDER_STYLE
		if radius is None:
			radius = DEFAULT_RADIUS
		if not BorderStyle.is_valid(style):
			raise InvalidEnum("Invalid BorderStyle passed to BorderSide.")

		self._width = width
		self._style = style
		self._brush = None
		self._image = None
		self._radius = _check_radius(radius)
		self._is_side = False
		self._style_fragment = None

		if fill is not None:
			kind = _fill_kind(fill)
			if kind == FillKind.BRUSH:
				self._brush = fill
			elif kind == FillKind.IMAGE:
				self._image = fill
			else:
				raise InvalidArgument("Invalid Brush or Image passed to BorderSide.")

	def _invalidate(self) -> None:
		self._style_fragment = None

	@property
	def width(self):
		return self._width

	@width.setter
	def width(self, value):
		self._width = value
		self._invalidate()

	@property
	def style(self) -> str:
		return self._style

	@style.setter
	def style(self, value: str):
		if not BorderStyle.is_valid(value):
			logger.warning("Rejected BorderStyle %r", value)
			raise InvalidEnum("Invalid BorderStyle passed to BorderSide.")
		self._style = value
		self._invalidate()

	@property
	def brush(self):
		return self._brush

	@brush.setter
	def brush(self, value):
		"""Set the Brush. Removes the Image, if any."""
		if _fill_kind(value) != FillKind.BRUSH:
			raise InvalidArgument("Invalid Brush passed to BorderSide.")
		self._brush = value
		self._image = None
		self._invalidate()

	@property
	def image(self):
		return self._image

	@image.setter
	def image(self, value):
		"""Set the Image. Removes the Brush, if any."""
		if _fill_kind(value) != FillKind.IMAGE:
			raise InvalidArgument("Invalid Image passed to BorderSide.")
		self._image = value
		self._brush = None
		self._invalidate()

	@property
	def radius(self):
		return self._radius

	@radius.setter
	def radius(self, value):
		self._radius = _check_radius(value)
		self._invalidate()

	@property
	def is_side(self) -> bool:
		"""True for left and right edges."""
		return self._is_side

	@is_side.setter
	def is_side(self, value: bool):
		if not isinstance(value, bool):
			raise InvalidArgument(f"BorderSide is_side must be a boolean, got {value!r}.")
		self._is_side = value
		self._invalidate()

	@property
	def style_fragment(self) -> tuple[str, ...]:
		"""The side's stylesheet lines, rebuilt after any change."""
		if self._style_fragment is None:
			self._style_fragment = self._build_style_fragment()
			logger.debug("BorderSide fragment built: %s", self._style_fragment)
		return self._style_fragment

	def _build_style_fragment(self) -> tuple[str, ...]:
		lines = [
			f"width: {format_value(self._width)}",
			f"style: {self._style}",
		]

		if self._brush is not None:
			lines.append(f"color: {style_value(self._brush)}")
		elif self._image is not None:
			lines.append(f"image: {self._image.url}")
			lines.append(f"image-position: {self._image.alignment}")

		if not self._is_side:
			if isinstance(self._radius, tuple):
				left, right = self._radius
				lines.append(f"left-radius: {format_value(left)}")
				lines.append(f"right-radius: {format_value(right)}")
			else:
				lines.append(f"radius: {format_value(self._radius)}")

		return tuple(lines)

	def __repr__(self):
		fill = self._brush if self._brush is not None else self._image
		return f"BorderSide({self._width!r}, {self._style!r}, {fill!r}, {self._radius!r})"
