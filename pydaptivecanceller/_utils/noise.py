# pydaptivecanceller/_utils/noise.py
from __future__ import annotations

import numpy as np

__all__ = ["gauss", "wgn_real"]


def gauss(rng: np.random.Generator, sigma: float) -> float:
    """
    Single Gaussian draw with standard deviation ``sigma``.

    Uses the polar Box-Muller form

        r = sqrt(2 sigma^2 ln(1 / (1 - u1))),   value = r cos(2 pi u2)

    with ``u1, u2`` uniform on ``[0, 1)``.
    """
    u1 = float(rng.random())
    u2 = float(rng.random())
    r = np.sqrt(2.0 * sigma * sigma * np.log(1.0 / (1.0 - u1)))
    return float(r * np.cos(2.0 * np.pi * u2))


def wgn_real(rng: np.random.Generator, shape, sigma_n2: float) -> np.ndarray:
    return rng.normal(0.0, np.sqrt(sigma_n2), size=shape).astype(float)
