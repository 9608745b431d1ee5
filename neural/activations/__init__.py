from .ActivationFunction import ActivationFunction
from .Sigmoid import Sigmoid
from .Tanh import Tanh
from .ReLU import ReLU

__all__ = [
    "ActivationFunction",
    "Sigmoid",
    "Tanh",
    "ReLU",
]
