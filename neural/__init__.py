from .exceptions import (
    LayerError,
    InvalidGeometry,
    InvalidNetwork,
    UnknownRole,
    UnsupportedOperation,
    NilArgument,
    DimensionMismatch,
)
from .activations import ActivationFunction, Sigmoid, Tanh, ReLU
from .layers import LayerKind, Layer, InputLayer, ComputeLayer, new_layer
from .helpers.Backend import backend
from .helpers.RandomSource import RandomSource, default_random
from .Network import Network

INPUT = LayerKind.INPUT
HIDDEN = LayerKind.HIDDEN
OUTPUT = LayerKind.OUTPUT

__all__ = [
    "LayerError",
    "InvalidGeometry",
    "InvalidNetwork",
    "UnknownRole",
    "UnsupportedOperation",
    "NilArgument",
    "DimensionMismatch",
    "ActivationFunction",
    "Sigmoid",
    "Tanh",
    "ReLU",
    "LayerKind",
    "Layer",
    "InputLayer",
    "ComputeLayer",
    "new_layer",
    "backend",
    "RandomSource",
    "default_random",
    "Network",
    "INPUT",
    "HIDDEN",
    "OUTPUT",
]
