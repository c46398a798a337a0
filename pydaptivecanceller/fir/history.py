# pydaptivecanceller/fir/history.py
#
#       Sample history buffers (tapped-delay lines) for sample-by-sample FIR
#       convolution. Two physical layouts of the same logical state are
#       provided:
#
#        . LinearShiftHistory - index i always holds x(n - i); every push
#                               moves the whole buffer one slot toward the tail.
#        . CircularHistory    - fixed storage with a rotating write index; the
#                               convolution walks backward from the newest
#                               sample with modulo wraparound.
#
#       Both hold exactly the last `length` pushed samples (zeros before that)
#       and give the same convolution for the same coefficients.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type

import numpy as np

from pydaptivecanceller._utils.typing import ArrayLike
from pydaptivecanceller._utils.validation import check_int


class SampleHistory(ABC):
    """
    Fixed-length history of the most recent input samples.

    Parameters
    ----------
    length : int
        Number of retained samples ``N`` (``N >= 1``). Allocated once, never resized.

    Notes
    -----
    The logical state is ``state[k] = x(n - k)`` for ``k = 0..N-1``, newest first.
    """

    def __init__(self, length: int) -> None:
        self.length: int = check_int(length, "length", minimum=1)
        self._buffer: np.ndarray = np.zeros(self.length, dtype=float)

    @abstractmethod
    def push(self, x: float) -> None:
        """Store ``x`` as the newest sample, evicting the oldest."""
        raise NotImplementedError

    @abstractmethod
    def convolve(self, coefficients: np.ndarray) -> float:
        """Return ``sum_k w[k] * state[k]``."""
        raise NotImplementedError

    @abstractmethod
    def ordered(self) -> np.ndarray:
        """Return the state newest-first. Callers must not write into it."""
        raise NotImplementedError

    def energy(self) -> float:
        """Sum of squares of the retained samples (order independent)."""
        return float(np.dot(self._buffer, self._buffer))

    def reset(self) -> None:
        self._buffer[:] = 0.0

    def _check_coefficients(self, coefficients: ArrayLike) -> np.ndarray:
        w = np.asarray(coefficients, dtype=float)
        if w.shape != (self.length,):
            raise ValueError(
                f"coefficients must have shape ({self.length},). Got {w.shape}."
            )
        return w

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} length={self.length}>"


class LinearShiftHistory(SampleHistory):
    """Tapped-delay line kept in natural order; ``O(N)`` data movement per push."""

    def push(self, x: float) -> None:
        self._buffer[1:] = self._buffer[:-1]
        self._buffer[0] = x

    def convolve(self, coefficients: np.ndarray) -> float:
        w = self._check_coefficients(coefficients)
        return float(np.dot(w, self._buffer))

    def ordered(self) -> np.ndarray:
        return self._buffer


class CircularHistory(SampleHistory):
    """Ring buffer with a rotating write index; a push writes one slot and moves nothing."""

    def __init__(self, length: int) -> None:
        super().__init__(length)
        self._taps: np.ndarray = np.arange(self.length)
        # slot holding the newest sample; the first push lands in slot 0
        self._head: int = self.length - 1

    def push(self, x: float) -> None:
        self._head += 1
        if self._head == self.length:
            self._head = 0
        self._buffer[self._head] = x

    def _read_order(self) -> np.ndarray:
        return (self._head - self._taps) % self.length

    def convolve(self, coefficients: np.ndarray) -> float:
        w = self._check_coefficients(coefficients)
        return float(np.dot(w, self._buffer[self._read_order()]))

    def ordered(self) -> np.ndarray:
        return self._buffer[self._read_order()]

    def reset(self) -> None:
        super().reset()
        self._head = self.length - 1


HISTORY_STRATEGIES: Dict[str, Type[SampleHistory]] = {
    "circular": CircularHistory,
    "linear": LinearShiftHistory,
}


def make_history(strategy: str, length: int) -> SampleHistory:
    """Build a history buffer by strategy name ("circular" or "linear")."""
    try:
        cls = HISTORY_STRATEGIES[strategy]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown history strategy {strategy!r}. Expected one of {sorted(HISTORY_STRATEGIES)}."
        ) from None
    return cls(length)


__all__ = [
    "SampleHistory",
    "LinearShiftHistory",
    "CircularHistory",
    "HISTORY_STRATEGIES",
    "make_history",
]
#EOF
