"""
Exception types raised by Vyzor components.

Validation happens eagerly, before any state is touched, so a caller that
catches one of these can rely on the component being unchanged.
"""

from .constants import ERROR_PREFIX


class VyzorError(Exception):
	"""Base class for all Vyzor errors."""

	def __init__(self, message: str):
		if not message.startswith(ERROR_PREFIX):
			message = ERROR_PREFIX + message
		super().__init__(message)


class InvalidArgument(VyzorError, ValueError):
	"""A required argument is missing, or an argument has the wrong kind."""


class InvalidEnum(VyzorError, ValueError):
	"""A value is not one of the legal values of its enumeration."""
