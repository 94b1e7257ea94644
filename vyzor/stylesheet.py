"""
Shared helpers for rendering stylesheet text.

Values are printed the way the host's scripting runtime prints numbers, so
that stylesheets built here match the ones scripts build by hand:
integral floats lose their fractional part, everything else keeps up to
NUMBER_PRECISION significant digits.
"""

from __future__ import annotations

from .constants import NUMBER_PRECISION


def format_value(value) -> str:
	"""Format a single stylesheet value."""
	if isinstance(value, bool):
		# bool is an int subclass, but 'True' is what the host prints
		return str(value).lower()
	if isinstance(value, int):
		return str(value)
	if isinstance(value, float):
		if value.is_integer():
			return str(int(value))
		return f"{value:.{NUMBER_PRECISION}g}"
	return str(value)


def strip_style_prefix(text: str) -> str:
	"""Strip a leading 'property: ' from a single stylesheet statement.

	'color: red' -> 'red', 'background-color: rgb(1, 2, 3)' -> 'rgb(1, 2, 3)'.
	Text without a property prefix is returned unchanged.
	"""
	prop, sep, rest = text.partition(":")
	if sep and prop and " " not in prop.strip() and "(" not in prop:
		return rest.strip()
	return text


def style_value(entity) -> str:
	"""Return the value text of a style-bearing entity or a raw token.

	Entities exposing a stylesheet attribute contribute that stylesheet
	with its property prefix stripped; anything else is formatted as is.
	"""
	stylesheet = getattr(entity, 'stylesheet', None)
	if isinstance(stylesheet, str):
		return strip_style_prefix(stylesheet)
	return format_value(entity)


def join_statements(lines) -> str:
	"""Join stylesheet lines into one statement list."""
	lines = [line for line in lines if line]
	if not lines:
		return ""
	return "; ".join(lines) + ";"
