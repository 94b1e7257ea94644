"""
Gradient component.

Expected arguments differ depending on mode:

	Linear		x1, y1, x2, y2
	Radial		cx, cy, radius, fx, fy
	Conical		cx, cy, angle

followed by any number of colour stops. Stops are given either as flat
(position, color) pairs or as ready-made 2-tuples:

	Gradient(GradientMode.LINEAR, 0, 0, 1, 1, 0, red, 1, blue)
	Gradient(GradientMode.LINEAR, 0, 0, 1, 1, (0, red), (1, blue))

Coordinates are fractions of the frame size (0.0 to 1.0). A stop colour
may be a Color, a Brush, or a raw token such as "red" or "#ff0000".
"""

from __future__ import annotations

import logging

from .constants import GRADIENT_SCALAR_COUNT
from .enums import GradientMode
from .errors import InvalidArgument, InvalidEnum
from .stylesheet import format_value, style_value

logger = logging.getLogger(__name__)

# Field names and stylesheet template per mode
_GRADIENT_FIELDS = {
	GradientMode.LINEAR: ('x1', 'y1', 'x2', 'y2'),
	GradientMode.RADIAL: ('cx', 'cy', 'radius', 'fx', 'fy'),
	GradientMode.CONICAL: ('cx', 'cy', 'angle'),
}

_GRADIENT_TEMPLATES = {
	GradientMode.LINEAR: "qlineargradient(x1:{x1}, y1:{y1}, x2:{x2}, y2:{y2}, {stops})",
	GradientMode.RADIAL: "qradialgradient(cx:{cx}, cy:{cy}, radius: {radius}, fx:{fx}, fy:{fy}, {stops})",
	GradientMode.CONICAL: "qconicalgradient(cx:{cx}, cy:{cy}, angle:{angle}, {stops})",
}


def _collect_stops(values) -> list[tuple]:
	"""Group the trailing Gradient arguments into (position, color) stops."""
	stops = []
	pending = []
	for value in values:
		if not pending and isinstance(value, (tuple, list)):
			if len(value) != 2:
				raise InvalidArgument(f"Gradient stop must be a (position, color) pair, got {value!r}.")
			stops.append(tuple(value))
			continue
		pending.append(value)
		if len(pending) == 2:
			stops.append(tuple(pending))
			pending = []
	if pending:
		raise InvalidArgument(f"Gradient stop at position {pending[0]!r} has no color.")
	return stops


class Gradient:
	"""Gradient data, used primarily as the content of a Brush."""

	def __init__(self, mode: str, *values):
		if not GradientMode.is_valid(mode):
			raise InvalidEnum("Invalid mode passed to Gradient.")

		count = GRADIENT_SCALAR_COUNT[mode]
		if len(values) < count:
			raise InvalidArgument(
				f"{mode} Gradient expects {count} values ({', '.join(_GRADIENT_FIELDS[mode])}), "
				f"got {len(values)}.")

		self._mode = mode
		self._data = dict(zip(_GRADIENT_FIELDS[mode], values[:count]))
		self._data['stops'] = _collect_stops(values[count:])
		self._stylesheet = None

	@property
	def mode(self) -> str:
		return self._mode

	@property
	def data(self) -> dict:
		"""A copy of the Gradient's data."""
		copy = dict(self._data)
		copy['stops'] = list(self._data['stops'])
		return copy

	@property
	def stops(self) -> tuple[tuple, ...]:
		return tuple(self._data['stops'])

	@property
	def stylesheet(self) -> str:
		"""The Gradient's stylesheet, generated on first use."""
		if self._stylesheet is None:
			self._stylesheet = self._build_stylesheet()
			logger.debug("Gradient stylesheet built: %s", self._stylesheet)
		return self._stylesheet

	def _build_stylesheet(self) -> str:
		style_stops = ", ".join(
			f"stop:{format_value(position)} {style_value(color)}"
			for position, color in self._data['stops']
		)
		fields = {key: format_value(self._data[key]) for key in _GRADIENT_FIELDS[self._mode]}
		return _GRADIENT_TEMPLATES[self._mode].format(stops=style_stops, **fields)

	def __repr__(self):
		return f"Gradient({self._mode!r}, stops={len(self._data['stops'])})"
