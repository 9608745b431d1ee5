from .Layer import Layer
from .LayerKind import LayerKind
from ..exceptions import NilArgument


class InputLayer(Layer):
    # Raw features enter the network here: no weights, output is input
    def __init__(self, layer_id, fan_in, fan_out):
        super().__init__(layer_id, LayerKind.INPUT, fan_in, fan_out)

    def out(self, x):
        if x is None:
            raise NilArgument("Can't calculate output for None input", {"layer": self.id})
        return x
