from .ActivationFunction import ActivationFunction
from ..helpers.Backend import backend


class ReLU(ActivationFunction):
    vectorized = True

    def forward(self, row, col, value):
        return backend.maximum(0, value)

    def gradient(self, row, col, value):
        return backend.where(value > 0, 1.0, 0.0)
