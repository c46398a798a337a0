# pydaptivecanceller/_utils/pcm.py
"""
Raw headerless PCM helpers.

Samples are little-endian: 16-bit signed integers for PCM streams and
32-bit IEEE floats for the inspection dumps.
"""
from __future__ import annotations

from typing import BinaryIO, Iterator

import numpy as np

from .typing import ArrayLike

__all__ = ["INT16_MIN", "INT16_MAX", "to_int16", "read_int16_blocks", "write_int16", "write_float32"]

INT16_MIN = -32768
INT16_MAX = 32767

_INT16 = np.dtype("<i2")
_FLOAT32 = np.dtype("<f4")


def to_int16(values: ArrayLike) -> np.ndarray:
    """
    Cast real values to int16 without scaling.

    Values are truncated toward zero; anything outside the int16 range
    saturates at the range limits. NaN maps to 0.
    """
    v = np.trunc(np.asarray(values, dtype=float))
    v = np.nan_to_num(v, nan=0.0, posinf=INT16_MAX, neginf=INT16_MIN)
    return np.clip(v, INT16_MIN, INT16_MAX).astype(np.int16)


def read_int16_blocks(stream: BinaryIO, block_size: int) -> Iterator[np.ndarray]:
    """Yield int16 blocks of at most ``block_size`` samples until the stream is exhausted."""
    block_size = int(block_size)
    if block_size <= 0:
        raise ValueError(f"block_size must be positive. Got {block_size}.")

    n_bytes = block_size * _INT16.itemsize
    pending = b""
    while True:
        chunk = stream.read(n_bytes - len(pending))
        if not chunk:
            break
        pending += chunk
        if len(pending) < n_bytes:
            continue
        yield np.frombuffer(pending, dtype=_INT16).astype(np.int16)
        pending = b""

    # a trailing odd byte cannot form a sample and is dropped
    usable = len(pending) - (len(pending) % _INT16.itemsize)
    if usable:
        yield np.frombuffer(pending[:usable], dtype=_INT16).astype(np.int16)


def write_int16(stream: BinaryIO, samples: ArrayLike) -> None:
    stream.write(np.asarray(samples).astype(_INT16).tobytes())


def write_float32(stream: BinaryIO, samples: ArrayLike) -> None:
    stream.write(np.asarray(samples, dtype=float).astype(_FLOAT32).tobytes())
