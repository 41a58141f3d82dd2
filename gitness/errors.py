"""
Exception types for Gitness.

Failing to detect a gesture is a normal outcome and never raises.
These are reserved for caller bugs and bad input files/configs.
"""


class GestureError(Exception):
    """Base class for all Gitness errors."""


class EmptyInputError(GestureError):
    """Statistics were requested on an empty series."""


class ConfigError(GestureError):
    """A detection configuration value is invalid."""


class RecordingError(GestureError):
    """A recorded session could not be parsed."""
