import numpy as np
from ..helpers.Backend import backend


class ActivationFunction:
    # Subclasses override forward() and gradient().
    # Both take the entry's row index, column index and value, so an
    # activation may depend on position; the shipped ones do not.
    #
    # Set vectorized = True when forward/gradient work on whole arrays
    # (NumPy broadcasting): forward_mx then calls them once with index grids.
    vectorized = False

    def forward(self, row, col, value):
        raise NotImplementedError

    def gradient(self, row, col, value):
        raise NotImplementedError

    def forward_mx(self, z):
        return self._apply(self.forward, z)

    def gradient_mx(self, z):
        return self._apply(self.gradient, z)

    def _apply(self, fn, z):
        z = backend.ensure_matrix(z)
        if self.vectorized:
            rows, cols = backend.indices(z.shape)
            return fn(rows, cols, z)
        # entry by entry, on CPU
        z_cpu = backend.to_cpu(z)
        out = np.empty(z_cpu.shape, dtype=np.result_type(z_cpu.dtype, np.float32))
        for (i, j), v in np.ndenumerate(z_cpu):
            out[i, j] = fn(i, j, v)
        return backend.ensure_array(out)

    def __repr__(self):
        return f"{type(self).__name__}()"
