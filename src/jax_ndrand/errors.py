"""Exception hierarchy for jax_ndrand.

ShapeOverflowError marks a caller bug (a shape whose size cannot be
indexed) and is never caught inside the package. The remaining classes
are ValueError subclasses raised while validating inputs, before any
storage is allocated or any sample is drawn.
"""

from __future__ import annotations


class NdRandError(Exception):
    """Base class for all jax_ndrand errors."""


class ShapeOverflowError(NdRandError, OverflowError):
    """Element count of a shape does not fit the platform index integer."""


class InvalidShapeError(NdRandError, ValueError):
    """Shape extents or memory order are malformed."""


class InvalidParameterError(NdRandError, ValueError):
    """Distribution parameters are outside their domain."""


class ConfigError(NdRandError, ValueError):
    """An environment setting could not be parsed."""
