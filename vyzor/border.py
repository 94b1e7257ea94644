"""
Border component: assembles BorderSide fragments into a frame stylesheet.

A uniform border uses one BorderSide for all four edges and emits
'border-<property>' statements. A border built from individual sides emits
'border-<edge>-<property>' statements per edge, with corner radii mapped
to Qt's per-corner properties.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .border_side import BorderSide
from .constants import DEFAULT_BORDER_STYLE, DEFAULT_BORDER_WIDTH, DEFAULT_RADIUS
from .errors import InvalidArgument
from .stylesheet import join_statements

EDGES = ('top', 'right', 'bottom', 'left')
SIDE_EDGES = ('left', 'right')

# Corner properties a radius line expands to, for the uniform border
_UNIFORM_RADIUS = {
	'radius': ('border-radius',),
	'left-radius': ('border-top-left-radius', 'border-bottom-left-radius'),
	'right-radius': ('border-top-right-radius', 'border-bottom-right-radius'),
}


def _edge_radius(edge: str, prop: str) -> tuple[str, ...]:
	if prop == 'radius':
		return (f"border-{edge}-left-radius", f"border-{edge}-right-radius")
	corner = prop[:-len('-radius')]
	return (f"border-{edge}-{corner}-radius",)


def _split(line: str) -> tuple[str, str]:
	prop, _, value = line.partition(':')
	return prop.strip(), value.strip()


class Border:
	def __init__(self, width=DEFAULT_BORDER_WIDTH, style: str = DEFAULT_BORDER_STYLE,
			fill=None, radius=DEFAULT_RADIUS, sides: Optional[Mapping[str, BorderSide]] = None):
		"""
		Args:
			width, style, fill, radius: Used to build a uniform BorderSide
				when no sides are given.
			sides: Optional mapping of 'top', 'right', 'bottom' and 'left'
				to a BorderSide each.
		"""
		if sides is None:
			self._uniform: Optional[BorderSide] = BorderSide(width, style, fill, radius)
			self._sides: dict[str, BorderSide] = {}
			return

		missing = [edge for edge in EDGES if edge not in sides]
		if missing:
			raise InvalidArgument(f"Border sides missing: {', '.join(missing)}.")
		for edge, side in sides.items():
			if edge not in EDGES:
				raise InvalidArgument(f"Unknown Border side: {edge!r}.")
			if not isinstance(side, BorderSide):
				raise InvalidArgument(f"Border side {edge} must be a BorderSide.")
		if len({id(side) for side in sides.values()}) != len(sides):
			# is_side differs per edge, so edges cannot share one BorderSide
			raise InvalidArgument("Each Border side needs its own BorderSide.")

		self._uniform = None
		self._sides = {edge: sides[edge] for edge in EDGES}
		for edge, side in self._sides.items():
			side.is_side = edge in SIDE_EDGES

	@property
	def uniform(self) -> Optional[BorderSide]:
		"""The single BorderSide used for every edge, if any."""
		return self._uniform

	@property
	def sides(self) -> dict[str, BorderSide]:
		return dict(self._sides)

	def get_side(self, edge: str) -> BorderSide:
		"""Get the BorderSide drawn on an edge."""
		if edge not in EDGES:
			raise InvalidArgument(f"Unknown Border side: {edge!r}.")
		return self._uniform or self._sides[edge]

	@property
	def style_lines(self) -> tuple[str, ...]:
		lines = []
		if self._uniform is not None:
			for line in self._uniform.style_fragment:
				prop, value = _split(line)
				for name in _UNIFORM_RADIUS.get(prop, (f"border-{prop}",)):
					lines.append(f"{name}: {value}")
			return tuple(lines)

		for edge, side in self._sides.items():
			for line in side.style_fragment:
				prop, value = _split(line)
				if prop.endswith('radius'):
					names = _edge_radius(edge, prop)
				else:
					names = (f"border-{edge}-{prop}",)
				for name in names:
					lines.append(f"{name}: {value}")
		return tuple(lines)

	@property
	def stylesheet(self) -> str:
		"""The Border's stylesheet. Always reflects the current sides."""
		return join_statements(self.style_lines)
