from .LayerKind import LayerKind
from .Layer import Layer
from .InputLayer import InputLayer
from .ComputeLayer import ComputeLayer
from .factory import new_layer

__all__ = [
    "LayerKind",
    "Layer",
    "InputLayer",
    "ComputeLayer",
    "new_layer",
]
