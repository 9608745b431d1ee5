from numbers import Integral

from .LayerKind import LayerKind
from ..exceptions import InvalidGeometry, NilArgument, UnsupportedOperation


def is_size(n):
    """True for a strictly positive integer (bools excluded)."""
    return isinstance(n, Integral) and not isinstance(n, bool) and n > 0


class Layer:
    """
    Base class for a network layer.

    A layer is either an InputLayer (pass-through, no weights) or a
    ComputeLayer (weights, deltas and activation). Use new_layer() to build
    one; the kind is fixed for the layer's lifetime.
    """
    def __init__(self, layer_id, kind, fan_in, fan_out):
        if not isinstance(layer_id, str) or not layer_id:
            raise ValueError(f"Layer id must be a non-empty string, got {layer_id!r}")
        if not is_size(fan_in) or not is_size(fan_out):
            raise InvalidGeometry(
                f"Invalid layer size requested: {fan_in}, {fan_out}",
                {"fan_in": fan_in, "fan_out": fan_out},
            )
        self._id = layer_id
        self._kind = LayerKind.parse(kind)
        self.fan_in = int(fan_in)
        self.fan_out = int(fan_out)

    @property
    def id(self):
        return self._id

    @property
    def kind(self):
        return self._kind

    # Subclasses override as needed
    @property
    def weights(self):
        return None

    @property
    def deltas(self):
        return None

    @property
    def activation(self):
        return None

    def out(self, x):
        # Return the layer's output for input matrix x
        raise NotImplementedError

    def set_weights(self, w):
        raise UnsupportedOperation(
            f"Can't set weights matrix of {self._kind} layer", {"layer": self._id}
        )

    def set_activation(self, fn):
        if fn is None:
            raise NilArgument("Activation function can't be None", {"layer": self._id})
        raise UnsupportedOperation(
            f"Can't modify activation function of {self._kind} layer", {"layer": self._id}
        )

    def __repr__(self):
        shape = None if self.weights is None else tuple(self.weights.shape)
        return f"{type(self).__name__}(id={self._id!r}, kind={self._kind}, weights={shape})"
