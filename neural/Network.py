from .layers import LayerKind, new_layer
from .layers.Layer import is_size
from .exceptions import InvalidGeometry
from .helpers.Backend import backend
from .helpers.RandomSource import default_random


class Network:
    """
    Feed-forward network assembled from layer sizes.

    sizes = (input, hidden..., output), e.g. (784, 128, 10) builds an
    INPUT layer, one HIDDEN layer and one OUTPUT layer.
    """
    def __init__(self, sizes, activation=None, random=None, verbose=0):
        sizes = list(sizes)
        if len(sizes) < 2 or not all(is_size(s) for s in sizes):
            raise InvalidGeometry(
                f"Network needs at least two positive layer sizes, got {sizes}",
                {"sizes": sizes},
            )
        self.random = default_random if random is None else random
        self.verbose = verbose
        self.id = self.random.rand_string()

        self._layers = [
            new_layer(LayerKind.INPUT, self, sizes[0], sizes[0], random=self.random)
        ]
        for i in range(1, len(sizes)):
            kind = LayerKind.OUTPUT if i == len(sizes) - 1 else LayerKind.HIDDEN
            self._layers.append(
                new_layer(kind, self, sizes[i - 1], sizes[i], activation=activation, random=self.random)
            )

        if self.verbose > 0:
            print(self.summary())

    @property
    def layers(self):
        return list(self._layers)

    @property
    def input_layer(self):
        return self._layers[0]

    @property
    def output_layer(self):
        return self._layers[-1]

    def forward(self, x):
        x = backend.ensure_matrix(x)
        for layer in self._layers:
            x = layer.out(x)
        return x

    def summary(self):
        lines = [f"Network {self.id}"]
        for i, layer in enumerate(self._layers):
            shape = "-" if layer.weights is None else "x".join(str(d) for d in layer.weights.shape)
            act = "-" if layer.activation is None else type(layer.activation).__name__
            lines.append(f"  [{i}] {str(layer.kind):<6} {layer.id}  weights: {shape:<10} activation: {act}")
        return "\n".join(lines)

    def __repr__(self):
        sizes = [self._layers[0].fan_in] + [layer.fan_out for layer in self._layers[1:]]
        return f"Network(id={self.id!r}, sizes={sizes})"
