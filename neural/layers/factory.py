from .LayerKind import LayerKind
from .Layer import is_size
from .InputLayer import InputLayer
from .ComputeLayer import ComputeLayer
from ..activations import Sigmoid
from ..exceptions import InvalidGeometry, InvalidNetwork
from ..helpers.RandomSource import default_random


def new_layer(kind, net, fan_in, fan_out, activation=None, random=None):
    """
    Create a layer of the given kind belonging to net.

    HIDDEN and OUTPUT layers get weights of shape (fan_out, fan_in + 1)
    drawn uniformly from (-1, 1), zero deltas and a Sigmoid activation
    unless another one is supplied. INPUT layers get none of these.

    Raises InvalidGeometry, InvalidNetwork or UnknownRole, checked in that
    order.
    """
    if not is_size(fan_in) or not is_size(fan_out):
        raise InvalidGeometry(
            f"Invalid layer size requested: {fan_in}, {fan_out}",
            {"fan_in": fan_in, "fan_out": fan_out},
        )
    # Layer must belong to an existing network
    if net is None or not getattr(net, "id", None):
        raise InvalidNetwork(f"Invalid neural network: {net!r}")
    kind = LayerKind.parse(kind)

    random = default_random if random is None else random
    layer_id = random.rand_string()
    fan_in, fan_out = int(fan_in), int(fan_out)

    if kind == LayerKind.INPUT:
        return InputLayer(layer_id, fan_in, fan_out)
    weights = random.uniform(fan_out, fan_in + 1)
    if activation is None:
        activation = Sigmoid()
    return ComputeLayer(layer_id, kind, weights, activation)
