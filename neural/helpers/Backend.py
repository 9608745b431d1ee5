# neural/helpers/Backend.py
import os
import numpy as np

VERBOSE_STARTUP = False  # set True to print backend selection details

try:
    import cupy as cp
    if VERBOSE_STARTUP:
        print("CuPy:", cp.__version__)
        print("GPU count:", cp.cuda.runtime.getDeviceCount())
    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
    except Exception as e:
        if VERBOSE_STARTUP:
            print(f"CuPy installed but CUDA runtime error: {e}")
            print("Falling back to CPU (NumPy)")
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False


class Backend:
    """Backend abstraction for NumPy/CuPy compatibility."""
    def __init__(self, use_gpu=True, default_float=np.float32):
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        self.default_float = default_float
        self.xp = cp if self.use_gpu else np
        if VERBOSE_STARTUP:
            print("Using GPU backend (CuPy)" if self.use_gpu else "Using CPU backend (NumPy)")

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if self.use_gpu and x is not None and not isinstance(x, np.ndarray):
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None, copy=False):
        """
        Ensure 'x' is an array of the current backend.
        Accepts list/tuple/np/cp arrays; returns xp.ndarray.
        """
        target_xp = cp if self.use_gpu else np
        if isinstance(x, target_xp.ndarray):
            # already correct backend
            if dtype is not None and x.dtype != dtype:
                return x.astype(dtype, copy=copy)
            return x
        # If it's the other backend array:
        if self.use_gpu and isinstance(x, np.ndarray):
            arr = cp.asarray(x)
            return arr.astype(dtype, copy=copy) if dtype is not None else arr
        if (not self.use_gpu) and (cp is not None) and isinstance(x, cp.ndarray):
            arr = cp.asnumpy(x)
            return arr.astype(dtype, copy=copy) if dtype is not None else arr
        # If it's list/tuple/other array-like:
        arr = target_xp.asarray(x, dtype=dtype if dtype is not None else self.default_float)
        return arr

    def ensure_matrix(self, x):
        """Like ensure_array, but always 2-D: a vector becomes a single row."""
        arr = self.ensure_array(x)
        if arr.ndim == 1:
            return arr.reshape(1, -1)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D matrix, got {arr.ndim} dimensions")
        return arr

    # -------- array creation --------
    def ones(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return self.xp.ones(*args, **kwargs)

    def zeros_like(self, x):
        return self.xp.zeros_like(x)

    def indices(self, shape):
        """Row and column index grids for a 2-D shape."""
        rows, cols = self.xp.indices(shape)
        return rows, cols

    # -------- math / linalg (thin wrappers) --------
    def tanh(self, x):                             return self.xp.tanh(x)
    def maximum(self, a, b):                       return self.xp.maximum(a, b)
    def where(self, cond, a, b):                   return self.xp.where(cond, a, b)
    def transpose(self, x, axes=None):            return self.xp.transpose(x, axes)
    def hstack(self, arrays):                      return self.xp.hstack(arrays)
    def matmul(self, a, b):                        return self.xp.matmul(a, b)

    def add_bias(self, x):
        """Prepend a column of ones: (rows, cols) -> (rows, cols + 1)."""
        ones = self.ones((x.shape[0], 1), dtype=x.dtype)
        return self.hstack([ones, x])

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        return getattr(self.xp, name)


# Global backend instance - set NEURAL_USE_GPU=0 to stay on NumPy
backend = Backend(use_gpu=os.environ.get("NEURAL_USE_GPU", "1") != "0")
