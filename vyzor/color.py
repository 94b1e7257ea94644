"""
Color component.

A Color renders a single 'color: <token>' statement. Gradients and brushes
only use the token part, so the prefix is stripped wherever a Color is
embedded in another component.
"""

from __future__ import annotations

from .enums import ColorMode
from .errors import InvalidArgument, InvalidEnum
from .stylesheet import format_value

# Expected argument count and output template per mode
_COLOR_FORMATS = {
	ColorMode.NAME: (1, "{}"),
	ColorMode.RGB: (3, "rgb({}, {}, {})"),
	ColorMode.RGBA: (4, "rgba({}, {}, {}, {})"),
	ColorMode.HSV: (3, "hsv({}, {}, {})"),
	ColorMode.HSVA: (4, "hsva({}, {}, {}, {})"),
	ColorMode.HEX: (1, "#{}"),
}


class Color:
	def __init__(self, mode: str, *values):
		if not ColorMode.is_valid(mode):
			raise InvalidEnum("Invalid mode passed to Color.")
		expected, _ = _COLOR_FORMATS[mode]
		if len(values) != expected:
			raise InvalidArgument(f"{mode} Color expects {expected} value(s), got {len(values)}.")

		if mode == ColorMode.HEX:
			values = (str(values[0]).lstrip('#'),)

		self._mode = mode
		self._values = tuple(values)
		self._stylesheet = None

	@property
	def mode(self) -> str:
		return self._mode

	@property
	def values(self) -> tuple:
		return self._values

	@property
	def stylesheet(self) -> str:
		if self._stylesheet is None:
			_, template = _COLOR_FORMATS[self._mode]
			self._stylesheet = "color: " + template.format(*map(format_value, self._values))
		return self._stylesheet

	def __repr__(self):
		return f"Color({self._mode!r}, {', '.join(map(repr, self._values))})"
