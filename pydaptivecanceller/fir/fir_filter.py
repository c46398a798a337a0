# pydaptivecanceller/fir/fir_filter.py

from __future__ import annotations

from typing import Optional

import numpy as np

from pydaptivecanceller._utils.typing import ArrayLike
from pydaptivecanceller._utils.validation import check_int
from pydaptivecanceller.fir.history import SampleHistory, make_history


class FirFilter:
    """
    Fixed-coefficient FIR filter with sample-by-sample processing.

    Each call to :meth:`filter_data` stores the new sample in the history and
    returns

    .. math::
        y[n] = \\sum_{k=0}^{N-1} w[k] \\, x[n-k].

    Parameters
    ----------
    coefficients : array_like of float
        Filter taps ``w``. Copied at construction, never aliased.
    filter_length : int, optional
        Number of taps ``N`` to keep. The first ``N`` entries of
        ``coefficients`` are used. If None, ``N = len(coefficients)``.
    history : {"circular", "linear"}, optional
        Layout of the sample history buffer. Default "circular".
    """

    def __init__(
        self,
        coefficients: ArrayLike,
        filter_length: Optional[int] = None,
        history: str = "circular",
    ) -> None:
        w = np.array(coefficients, dtype=float).ravel()

        if filter_length is None:
            if w.size == 0:
                raise ValueError("coefficients must contain at least one tap.")
            n = int(w.size)
        else:
            n = check_int(filter_length, "filter_length", minimum=1)
            if w.size < n:
                raise ValueError(
                    f"filter_length={n} needs at least {n} coefficients. Got {w.size}."
                )

        self._coefficients: np.ndarray = w[:n].copy()
        self._history: SampleHistory = make_history(history, n)
        self.history_strategy: str = history

    @property
    def filter_length(self) -> int:
        return self._history.length

    @property
    def coefficients(self) -> np.ndarray:
        return self._coefficients.copy()

    def filter_data(self, x: float) -> float:
        """Filter one sample."""
        self._history.push(x)
        return self._history.convolve(self._coefficients)

    def filter_signal(self, input_signal: ArrayLike) -> np.ndarray:
        """Filter a whole sequence, carrying state across calls."""
        x = np.asarray(input_signal, dtype=float).ravel()
        y = np.zeros(x.size, dtype=float)
        for k in range(x.size):
            y[k] = self.filter_data(x[k])
        return y

    def reset(self) -> None:
        """Clear filter state (coefficients are kept)."""
        self._history.reset()

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} taps={self.filter_length} "
            f"history={self.history_strategy}>"
        )
#EOF
