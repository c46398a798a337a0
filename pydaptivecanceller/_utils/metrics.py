import numpy as np
from .typing import ArrayLike

__all__ = ["db10", "db20", "snr_db"]


def db10(x: ArrayLike, *, eps: float = 1e-20) -> np.ndarray:
    """10*log10(x) with numerical guard."""
    x = np.asarray(x, dtype=float)
    return 10.0 * np.log10(np.maximum(x, eps))


def db20(x: ArrayLike, *, eps: float = 1e-12) -> np.ndarray:
    """20*log10(|x|) with numerical guard."""
    x = np.asarray(x)
    return 20.0 * np.log10(np.maximum(np.abs(x), eps))


def snr_db(clean: ArrayLike, estimate: ArrayLike, *, eps: float = 1e-20) -> float:
    """
    Signal-to-noise ratio of ``estimate`` against ``clean``, in dB.

    The residual is ``estimate - clean`` over the common length of both signals.
    """
    s = np.asarray(clean, dtype=float).ravel()
    y = np.asarray(estimate, dtype=float).ravel()
    n = min(s.size, y.size)
    if n == 0:
        return float("nan")
    s = s[:n]
    residual = y[:n] - s
    p_signal = float(np.mean(s ** 2))
    p_residual = float(np.mean(residual ** 2))
    return float(db10(p_signal, eps=eps) - db10(p_residual, eps=eps))
