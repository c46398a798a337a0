# pydaptivecanceller/_utils/sources.py
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from pydaptivecanceller.config import SignalConfig
from .nco import Nco
from .noise import gauss

__all__ = ["noisy_cosine"]


def noisy_cosine(
    cfg: SignalConfig,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Cosine test signal and its additive Gaussian noise.

    Returns
    -------
    clean : ndarray, shape (cfg.n_samples,)
        ``amplitude * cos(2 pi f n / fs)`` taken from the NCO in-phase output.
    noise : ndarray, shape (cfg.n_samples,)
        ``amplitude * g[n]`` with ``g`` Gaussian of variance ``cfg.noise_variance``.

    The noisy signal is ``clean + noise``.
    """
    if rng is None:
        rng = np.random.default_rng(cfg.seed)

    amplitude = abs(float(cfg.amplitude))
    sigma = cfg.noise_sigma

    nco = Nco(cfg.sample_rate, cfg.frequency)
    n_samples = cfg.n_samples

    clean = np.zeros(n_samples, dtype=float)
    noise = np.zeros(n_samples, dtype=float)
    for k in range(n_samples):
        i_value, _ = nco.run()
        clean[k] = amplitude * i_value
        noise[k] = amplitude * gauss(rng, sigma)

    return clean, noise
