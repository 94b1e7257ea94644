"""
Box: a dynamically arranged collection of Frames.

A Box owns one generated container Frame and lays its child frames out
inside it. Geometry is normalised: every child ends up with a position and
size expressed as fractions of the container.

ARRANGEMENT MODES:
	HORIZONTAL	one row, equal widths, full height
	VERTICAL	one column, equal heights, full width
	GRID		floor(sqrt(N)) columns, filled row by row

The grid row height divides by (columns + N % 2) rather than by the number
of rows actually used. Scripts written against the existing layouts depend
on those exact fractions, so the formula is kept.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from .constants import DEFAULT_BOX_MODE
from .enums import BoxMode
from .errors import InvalidArgument, InvalidEnum
from .frame import Frame

logger = logging.getLogger(__name__)

# Axis indices for the strip modes, as used with Frame.get_rect() ordering
_STRIP_AXIS = {
	BoxMode.HORIZONTAL: 0,
	BoxMode.VERTICAL: 1,
}


class Box:
	def __init__(self, name: str, init_x: float = 0, init_y: float = 0,
			init_width: float = 1, init_height: float = 1,
			mode: str = DEFAULT_BOX_MODE, frames: Optional[Iterable[Frame]] = None):
		"""Create a Box and lay out its frames.

		Args:
			name: Name of the Box and of its generated container Frame. Required.
			init_x, init_y: Initial position of the container Frame.
			init_width, init_height: Initial size of the container Frame.
			mode: A BoxMode value. Defaults to Horizontal.
			frames: Frames to arrange, in order. Frames sharing a name
				replace the earlier one.
		"""
		if not name:
			raise InvalidArgument("New Box must be supplied with a name.")
		if mode is None:
			mode = DEFAULT_BOX_MODE
		if not BoxMode.is_valid(mode):
			logger.warning("Rejected BoxMode %r for Box %s", mode, name)
			raise InvalidEnum(f"Invalid BoxMode Enum passed to {name}.")

		self._name = name
		self._mode = mode

		self._frames: dict[str, Frame] = {}
		for child in frames or ():
			# A nested Box is laid out through its container Frame
			frame = getattr(child, 'frame', child)
			if not isinstance(frame, Frame):
				raise InvalidArgument(f"Box {name} can only hold Frames and Boxes, got {child!r}.")
			self._frames[frame.name] = frame

		self._frame = Frame(name, init_x, init_y, init_width, init_height)
		for frame in self._frames.values():
			self._frame.add(frame)

		self.update_frames()

	@property
	def name(self) -> str:
		return self._name

	@property
	def frame(self) -> Frame:
		"""The generated Frame containing all other Frames."""
		return self._frame

	@property
	def frames(self) -> dict[str, Frame]:
		"""A copy of the Box's frames, keyed by name, in layout order."""
		return dict(self._frames)

	@property
	def frame_count(self) -> int:
		return len(self._frames)

	@property
	def container(self) -> Optional[Frame]:
		"""The parent Frame of this Box."""
		return self._frame.container

	@container.setter
	def container(self, value: Optional[Frame]) -> None:
		self._frame.container = value

	@property
	def mode(self) -> str:
		return self._mode

	@mode.setter
	def mode(self, value: str) -> None:
		"""Change the arrangement and lay the frames out again."""
		if not BoxMode.is_valid(value):
			logger.warning("Rejected BoxMode %r for Box %s", value, self._name)
			raise InvalidEnum(f"Invalid BoxMode Enum passed to {self._name}.")
		self._mode = value
		self.update_frames()

	def update_frames(self) -> None:
		"""Update the geometry of every frame based on the current mode."""
		frame_count = len(self._frames)
		if frame_count == 0:
			return

		if self._mode == BoxMode.GRID:
			self._distribute_grid(frame_count)
		else:
			self._distribute_strip(frame_count, _STRIP_AXIS[self._mode])

		logger.debug("Box %s: %s layout over %d frame(s)", self._name, self._mode, frame_count)

	def _distribute_strip(self, frame_count: int, axis: int) -> None:
		"""Give every frame an equal slice along axis and the full cross axis."""
		share = 1 / frame_count
		for index, frame in enumerate(self._frames.values()):
			pos = [0, 0]
			size = [1, 1]
			pos[axis] = share * index
			size[axis] = share
			frame.place(pos[0], pos[1], size[0], size[1])

	def _distribute_grid(self, frame_count: int) -> None:
		columns = math.isqrt(frame_count)
		if columns == 0:
			return
		row_divisor = columns + (frame_count % 2)

		cur_hori = 1
		cur_vert = 1
		for frame in self._frames.values():
			if cur_hori > columns:
				cur_hori = 1
				cur_vert += 1

			frame.place(
				(1 / columns) * (cur_hori - 1),
				(1 / row_divisor) * (cur_vert - 1),
				1 / columns,
				1 / row_divisor,
			)
			cur_hori += 1

	def __repr__(self):
		return f"Box({self._name!r}, mode={self._mode!r}, frames={list(self._frames)})"

# -------

def describe_geometry(frame: Frame, indent: str = "") -> list[str]:
	"""Describe a frame and all of its descendants, one line per frame."""
	x, y, w, h = frame.get_rect()
	lines = [f"{indent}{frame.name}: x={x:.4g}, y={y:.4g}, width={w:.4g}, height={h:.4g}"]
	for child in frame.children:
		lines.extend(describe_geometry(child, indent + "  "))
	return lines


def run_demo():
	frames = [Frame(f"panel{i}") for i in range(1, 6)]
	box = Box("demo", 0, 0, 1, 1, BoxMode.HORIZONTAL, frames)

	for mode in BoxMode.values():
		box.mode = mode
		print(f"{mode}:")
		for line in describe_geometry(box.frame, "  "):
			print(line)
		print()

if __name__ == "__main__":
	run_demo()
