"""Exception types raised by the identicon pipeline."""

from __future__ import annotations


class IdenticonError(ValueError):
    """Base class for every error the pipeline raises."""


class ConfigurationError(IdenticonError):
    """Raised when an IdenticonConfig is constructed with out-of-range values."""


class InvalidInputError(IdenticonError):
    """Raised when digest hex is too short or fails to parse."""


class HSVRangeError(IdenticonError):
    """Raised when hue, saturation or value falls outside its closed interval."""
