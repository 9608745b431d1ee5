from .ActivationFunction import ActivationFunction
from ..helpers.Backend import backend


class Sigmoid(ActivationFunction):
    """Logistic activation, the default for HIDDEN and OUTPUT layers."""
    vectorized = True

    def forward(self, row, col, value):
        # 1 / (1 + e^-x) written via tanh so large |x| does not overflow exp
        return 0.5 * (1.0 + backend.tanh(0.5 * value))

    def gradient(self, row, col, value):
        s = self.forward(row, col, value)
        return s * (1.0 - s)
