# tests/conftest.py

from __future__ import annotations

import numpy as np
import pytest

from pydaptivecanceller import SignalConfig
from pydaptivecanceller._utils.sources import noisy_cosine


def _nlms_reference(x, filter_length, delay, beta, eps=1e-4):
    """Straight transcription of the canceller recursion. Returns (y, d, e, w_final)."""
    x = np.asarray(x, dtype=float)
    n_samples = x.size
    w = np.zeros(filter_length)
    x_padded = np.zeros(n_samples + filter_length - 1)
    x_padded[filter_length - 1:] = x

    y = np.zeros(n_samples)
    d = np.zeros(n_samples)
    e = np.zeros(n_samples)
    for k in range(n_samples):
        x_k = x_padded[k : k + filter_length][::-1]
        d[k] = x[k - delay] if k >= delay else 0.0
        y[k] = np.dot(w, x_k)
        e[k] = d[k] - y[k]
        w = w + (beta / (np.dot(x_k, x_k) + eps)) * e[k] * x_k
    return y, d, e, w


@pytest.fixture
def nlms_reference():
    """Oracle for the canceller, built from plain numpy and a padded input."""
    return _nlms_reference


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def white_signal(rng):
    return rng.standard_normal(1500).astype(np.float64, copy=False)


@pytest.fixture
def cosine_data():
    """Noisy 200 Hz cosine at 24 kS/s, 0.5 s, input SNR around 7 dB."""
    cfg = SignalConfig(amplitude=0.5, frequency=200.0, sample_rate=24000.0,
                       duration=0.5, noise_variance=0.1, seed=7)
    clean, noise = noisy_cosine(cfg)
    return {"clean": clean, "noise": noise, "x": clean + noise, "cfg": cfg}


@pytest.fixture
def pcm_signal(rng):
    """Noisy tone as int16 PCM samples."""
    n = 3000
    k = np.arange(n)
    tone = 8000.0 * np.cos(2.0 * np.pi * 0.01 * k)
    noisy = tone + 1500.0 * rng.standard_normal(n)
    return np.clip(np.trunc(noisy), -32768, 32767).astype(np.int16)
