"""
Fill components: Brush and Image.

Both carry a 'subtype' tag so that consumers such as BorderSide can tell
them apart without importing this module; host-side entities with the same
tag and attributes are accepted just as well.
"""

from __future__ import annotations

from .constants import DEFAULT_IMAGE_ALIGNMENT
from .enums import Alignment, FillKind
from .errors import InvalidArgument, InvalidEnum
from .stylesheet import join_statements, style_value


class Brush:
	"""A flat colour or gradient fill."""
	subtype = FillKind.BRUSH

	def __init__(self, content, background: bool = True):
		"""
		Args:
			content: A Color, a Gradient, or a raw colour token.
			background: Paint the background ('background-color') rather
				than the foreground ('color').
		"""
		if content is None:
			raise InvalidArgument("Brush must be supplied with content.")
		self._content = content
		self._background = bool(background)
		self._stylesheet = None

	@property
	def content(self):
		return self._content

	@content.setter
	def content(self, value):
		if value is None:
			raise InvalidArgument("Brush must be supplied with content.")
		self._content = value
		self._stylesheet = None

	@property
	def background(self) -> bool:
		return self._background

	@property
	def stylesheet(self) -> str:
		if self._stylesheet is None:
			prop = "background-color" if self._background else "color"
			self._stylesheet = f"{prop}: {style_value(self._content)}"
		return self._stylesheet

	def __repr__(self):
		return f"Brush({self._content!r})"


class Image:
	"""An image fill, positioned inside the area it fills."""
	subtype = FillKind.IMAGE

	def __init__(self, path: str, alignment: str = DEFAULT_IMAGE_ALIGNMENT):
		if not path:
			raise InvalidArgument("Image must be supplied with a path.")
		if not Alignment.is_valid(alignment):
			raise InvalidEnum("Invalid Alignment passed to Image.")
		self._path = path
		self._alignment = alignment

	@property
	def path(self) -> str:
		return self._path

	@property
	def url(self) -> str:
		return f"url({self._path})"

	@property
	def alignment(self) -> str:
		return self._alignment

	@alignment.setter
	def alignment(self, value: str):
		if not Alignment.is_valid(value):
			raise InvalidEnum("Invalid Alignment passed to Image.")
		self._alignment = value

	@property
	def stylesheet(self) -> str:
		return join_statements((f"image: {self.url}", f"image-position: {self._alignment}"))

	def __repr__(self):
		return f"Image({self._path!r}, {self._alignment!r})"
