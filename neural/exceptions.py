"""
Exceptions raised by neural network layers.

Every error is raised from the call that failed; setters validate before
they mutate, so a layer is unchanged after any of these is raised.
"""

from typing import Any, Dict, Optional


class LayerError(Exception):
    """Base exception for all layer errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidGeometry(LayerError, ValueError):
    """Raised when a layer is requested with non-positive fan-in or fan-out."""
    pass


class InvalidNetwork(LayerError, ValueError):
    """Raised when a layer's owning network is missing or has no id."""
    pass


class UnknownRole(LayerError, ValueError):
    """Raised when a layer kind is not INPUT, HIDDEN or OUTPUT."""
    pass


class UnsupportedOperation(LayerError):
    """Raised when weights or activation are set on an INPUT layer."""
    pass


class NilArgument(LayerError, ValueError):
    """Raised when None is passed where a matrix or activation is required."""
    pass


class DimensionMismatch(LayerError, ValueError):
    """Raised when a supplied matrix does not fit the layer's weights."""
    pass
