# pydaptivecanceller/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CancellerConfig:
    """
    Parameters of one noise canceller instance and of the block loop feeding it.

    Parameters
    ----------
    filter_length : int
        Number of adaptive taps.
    reference_delay : int
        Delay used to form the reference signal.
    beta : float
        Normalized step size.
    history : str
        Sample history layout, "circular" or "linear".
    block_size : int
        Samples per block when streaming PCM.
    """
    filter_length: int = 5
    reference_delay: int = 5
    beta: float = 0.1
    history: str = "circular"
    block_size: int = 4000


@dataclass
class SignalConfig:
    """Noisy cosine test signal: ``cos(2 pi f n / fs) + noise``."""
    amplitude: float = 0.5
    frequency: float = 200.0
    sample_rate: float = 24000.0
    duration: float = 1.0
    noise_variance: float = 0.1
    seed: Optional[int] = None

    @property
    def n_samples(self) -> int:
        return int(self.sample_rate * self.duration)

    @property
    def noise_sigma(self) -> float:
        if not self.noise_variance >= 0.0:
            raise ValueError(f"noise_variance must be >= 0. Got {self.noise_variance}.")
        return float(self.noise_variance ** 0.5)
