"""
The Frame panel: a named rectangle placed inside its container.

Position and size are fractions of the container's extent, so a frame at
x=0.5 with width=0.5 always covers the right half of its parent no matter
how large the host window is.
"""

from __future__ import annotations

from typing import Optional


class Position:
	"""Top-left corner of a frame."""
	__slots__ = ('x', 'y')

	def __init__(self, x: float = 0, y: float = 0):
		self.x = x
		self.y = y

	def as_tuple(self) -> tuple[float, float]:
		return (self.x, self.y)

	def __repr__(self):
		return f"{self.__class__.__name__}(x={self.x}, y={self.y})"


class Size:
	"""Extent of a frame."""
	__slots__ = ('width', 'height')

	def __init__(self, width: float = 1, height: float = 1):
		self.width = width
		self.height = height

	def as_tuple(self) -> tuple[float, float]:
		return (self.width, self.height)

	def __repr__(self):
		return f"{self.__class__.__name__}(width={self.width}, height={self.height})"


class Frame:
	def __init__(self, name: str, x: float = 0, y: float = 0, width: float = 1, height: float = 1):
		self.name = name
		self.position = Position(x, y)
		self.size = Size(width, height)
		self.container: Optional[Frame] = None
		self._children: list[Frame] = []

	@property
	def children(self) -> tuple[Frame, ...]:
		"""Registered children, in the order they were added."""
		return tuple(self._children)

	def add(self, child) -> None:
		"""Register a child frame and make this frame its container.

		Anything exposing a 'frame' attribute (a Box) is registered through
		that frame.
		"""
		child = getattr(child, 'frame', child)
		if child in self._children:
			return
		previous = child.container
		if previous is not None and child in getattr(previous, '_children', ()):
			previous._children.remove(child)
		self._children.append(child)
		child.container = self

	def place(self, x: float, y: float, width: float, height: float) -> None:
		"""Set position and size in one call."""
		self.position.x = x
		self.position.y = y
		self.size.width = width
		self.size.height = height

	def get_rect(self) -> tuple[float, float, float, float]:
		"""Get the (x, y, width, height) rectangle."""
		return (self.position.x, self.position.y, self.size.width, self.size.height)

	def __repr__(self):
		x, y, w, h = self.get_rect()
		return f"Frame({self.name!r}, x={x}, y={y}, width={w}, height={h})"
