from .Layer import Layer
from .LayerKind import LayerKind
from ..activations import ActivationFunction
from ..exceptions import DimensionMismatch, NilArgument, UnsupportedOperation
from ..helpers.Backend import backend


class ComputeLayer(Layer):
    def __init__(self, layer_id, kind, weights, activation):
        # HIDDEN or OUTPUT; weights: (fan_out, fan_in + 1), column 0 is the bias
        kind = LayerKind.parse(kind)
        if kind == LayerKind.INPUT:
            raise UnsupportedOperation(f"{kind} layer can't carry weights", {"kind": kind})
        if weights is None:
            raise NilArgument("Layer weights can't be None", {"layer": layer_id})
        weights = _as_weights(weights, layer_id)
        fan_out, cols = weights.shape
        super().__init__(layer_id, kind, cols - 1, fan_out)
        self._check_activation(activation)

        self._weights = weights
        self._deltas = backend.zeros_like(weights)
        self._activation = activation

    @property
    def weights(self):
        return self._weights

    @property
    def deltas(self):
        """
        Backprop deltas, same shape as weights.
        All zeros until a training step accumulates into them; reset
        whenever the weights are replaced.
        """
        return self._deltas

    @property
    def activation(self):
        return self._activation

    def set_weights(self, w):
        if w is None:
            raise NilArgument("Layer weights can't be None", {"layer": self.id})
        w = _as_weights(w, self.id)
        # weights dimensions must stay the same
        if w.shape != self._weights.shape:
            lr, lc = self._weights.shape
            wr, wc = w.shape
            raise DimensionMismatch(
                f"Dimension mismatch. Current: {lr} x {lc} Supplied: {wr} x {wc}",
                {"layer": self.id, "current": (lr, lc), "supplied": (wr, wc)},
            )
        self._weights = w
        self._deltas = backend.zeros_like(w)

    def set_activation(self, fn):
        if fn is None:
            raise NilArgument("Activation function can't be None", {"layer": self.id})
        self._check_activation(fn)
        self._activation = fn

    def out(self, x):
        if x is None:
            raise NilArgument("Can't calculate output for None input", {"layer": self.id})
        x = _as_matrix(x, self.id)
        # input columns + bias must match the weights columns
        in_cols = x.shape[1]
        w_cols = self._weights.shape[1]
        if in_cols + 1 != w_cols:
            raise DimensionMismatch(
                f"Dimension mismatch. Weights: {w_cols}, Input: {in_cols}",
                {"layer": self.id, "weights_cols": w_cols, "input_cols": in_cols},
            )
        # (rows, in+1) @ (in+1, out) -> (rows, out)
        z = backend.matmul(backend.add_bias(x), backend.transpose(self._weights))
        return self._activation.forward_mx(z)

    @staticmethod
    def _check_activation(fn):
        if not isinstance(fn, ActivationFunction):
            raise TypeError(f"Expected an ActivationFunction, got {type(fn).__name__}")


def _as_matrix(x, layer_id):
    # conversion errors (e.g. non-numeric entries) propagate as they are
    arr = backend.ensure_array(x)
    if arr.ndim == 1:
        return arr.reshape(1, -1)
    if arr.ndim != 2:
        raise DimensionMismatch(
            f"Expected a 2-D matrix, got {arr.ndim} dimensions",
            {"layer": layer_id, "ndim": arr.ndim},
        )
    return arr


def _as_weights(w, layer_id):
    # deltas take the weights' dtype, so integer weights are promoted to float
    w = _as_matrix(w, layer_id)
    if w.dtype.kind not in "fc":
        w = w.astype(backend.default_float)
    return w
