from .ActivationFunction import ActivationFunction
from ..helpers.Backend import backend


class Tanh(ActivationFunction):
    vectorized = True

    def forward(self, row, col, value):
        return backend.tanh(value)

    def gradient(self, row, col, value):
        return 1.0 - backend.tanh(value) ** 2
