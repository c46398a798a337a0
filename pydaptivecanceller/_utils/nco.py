# pydaptivecanceller/_utils/nco.py
from __future__ import annotations

from typing import Tuple

import numpy as np

__all__ = ["Nco"]

_TWO_PI = 2.0 * np.pi


class Nco:
    """
    Numerically controlled oscillator.

    A phase accumulator advanced by ``2 pi f / fs`` per call. Each call to
    :meth:`run` returns the in-phase and quadrature samples for the current
    phase and then advances it, so the first sample is ``(1, 0)``.

    Parameters
    ----------
    sample_rate : float
        Sample rate ``fs`` in samples per second. Must be positive.
    frequency : float
        Oscillator frequency ``f`` in Hz. Negative values rotate clockwise.
    """

    def __init__(self, sample_rate: float, frequency: float) -> None:
        sample_rate = float(sample_rate)
        if not np.isfinite(sample_rate) or sample_rate <= 0.0:
            raise ValueError(f"sample_rate must be positive. Got {sample_rate}.")
        self.sample_rate = sample_rate
        self.phase = 0.0
        self.set_frequency(frequency)

    def set_frequency(self, frequency: float) -> None:
        self.frequency = float(frequency)
        self.phase_increment = _TWO_PI * self.frequency / self.sample_rate

    def run(self) -> Tuple[float, float]:
        i_value = float(np.cos(self.phase))
        q_value = float(np.sin(self.phase))

        self.phase = (self.phase + self.phase_increment) % _TWO_PI
        return i_value, q_value

    def generate(self, n_samples: int) -> Tuple[np.ndarray, np.ndarray]:
        """Run the oscillator ``n_samples`` times; returns (in_phase, quadrature)."""
        n = int(n_samples)
        i_out = np.zeros(n, dtype=float)
        q_out = np.zeros(n, dtype=float)
        for k in range(n):
            i_out[k], q_out[k] = self.run()
        return i_out, q_out

    def reset(self) -> None:
        self.phase = 0.0
