# base.py

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from pydaptivecanceller._utils.pcm import to_int16
from pydaptivecanceller._utils.typing import ArrayLike
from pydaptivecanceller._utils.validation import check_int


@dataclass
class CancellationResult:
    """Standard output container for a run of an adaptive canceller.

    Attributes
    ----------
    outputs:
        Estimate ``y[k]`` produced by the filter for each input sample.
    references:
        Reference (desired) sample ``d[k]`` the filter adapted towards.
    errors:
        A priori error ``e[k] = d[k] - y[k]``.
    coefficients:
        Coefficient history, shape ``(N + 1, n_coeffs)`` (initial snapshot first).
        Empty when history recording was not requested.
    algorithm:
        Algorithm name (usually class name).
    runtime_ms:
        Runtime in milliseconds.
    extra:
        Optional container for internal states / debug info.
    """

    outputs: np.ndarray
    references: np.ndarray
    errors: np.ndarray
    coefficients: np.ndarray
    algorithm: str
    runtime_ms: float
    extra: Optional[Dict[str, Any]] = None

    def mse(self) -> np.ndarray:
        """Instantaneous squared error."""
        return np.abs(self.errors) ** 2

    def __repr__(self) -> str:
        return f"<CancellationResult algo={self.algorithm} samples={len(self.outputs)}>"


def validate_input(method: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to validate and normalize `process` inputs.

    Accepts:
        process(input_signal=..., **kwargs)
        process(input_signal, **kwargs)
        process(x=..., **kwargs)          (legacy alias)

    Notes
    -----
    - The signal is converted with `np.asarray`, flattened to 1D and cast to float.
    - Complex data raises TypeError; these filters are real-valued.
    """
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        input_signal = None

        if len(args) >= 1:
            input_signal = args[0]
            args = args[1:]

        if "input_signal" in kwargs:
            input_signal = kwargs.pop("input_signal")
        if "x" in kwargs:
            input_signal = kwargs.pop("x")

        if input_signal is None:
            raise TypeError("Missing input signal: pass input_signal (or alias x).")

        x = np.ravel(np.asarray(input_signal))
        if np.iscomplexobj(x):
            raise TypeError(f"{self.__class__.__name__} does not support complex input.")
        x = x.astype(float, copy=False)

        # the signal is always the first parameter after self
        return method(self, x, *args, **kwargs)

    return wrapper


class AdaptiveFilter(ABC):
    """Abstract base class for sample-by-sample adaptive filters.

    Parameters
    ----------
    filter_length:
        Number of adaptive taps ``N`` (``N >= 1``).

    Notes
    -----
    - Subclasses implement :meth:`filter_data` and keep ``last_reference`` /
      ``last_error`` current so that :meth:`process` can report them.
    - The block adapter :meth:`accept_data` is shared by all subclasses.
    """

    def __init__(self, filter_length: int) -> None:
        self.filter_length: int = check_int(filter_length, "filter_length", minimum=1)

        self.w: np.ndarray = np.zeros(self.filter_length, dtype=float)

        self.last_reference: float = 0.0
        self.last_error: float = 0.0

        self.w_history: List[np.ndarray] = []

    @abstractmethod
    def filter_data(self, x: float) -> float:
        """Consume one input sample, adapt, and return the current estimate."""
        raise NotImplementedError

    def accept_data(self, buffer: ArrayLike, length: Optional[int] = None) -> np.ndarray:
        """Run :meth:`filter_data` over a block of samples, in order.

        Parameters
        ----------
        buffer:
            Block of samples. Integer data is treated as 16-bit PCM: each
            sample is cast to float, and each output is cast back to int16
            (truncation toward zero, saturating at the int16 limits). Float
            data is processed and returned as float64.
        length:
            Number of leading samples to process. Defaults to the whole buffer.

        Returns
        -------
        np.ndarray
            One output per processed sample, in input order.
        """
        data = np.ravel(np.asarray(buffer))
        if np.iscomplexobj(data):
            raise TypeError(f"{self.__class__.__name__} does not support complex input.")

        if length is None:
            n = int(data.size)
        else:
            n = check_int(length, "length", minimum=0)
            if n > data.size:
                raise ValueError(f"length={n} exceeds buffer size {data.size}.")

        samples = data[:n].astype(float)
        outputs = np.zeros(n, dtype=float)
        for k in range(n):
            outputs[k] = self.filter_data(samples[k])

        if np.issubdtype(data.dtype, np.integer):
            return to_int16(outputs)
        return outputs

    @validate_input
    def process(
        self,
        input_signal: np.ndarray,
        verbose: bool = False,
        record_history: bool = False,
    ) -> CancellationResult:
        """Run the filter over a whole signal and collect every internal sequence.

        Parameters
        ----------
        input_signal:
            Input signal ``x[k]``.
        verbose:
            If True, prints runtime.
        record_history:
            If True, stores a coefficient snapshot after every sample.

        Returns
        -------
        CancellationResult
        """
        tic: float = perf_counter()

        x: np.ndarray = input_signal
        n_samples: int = int(x.size)

        outputs: np.ndarray = np.zeros(n_samples, dtype=float)
        references: np.ndarray = np.zeros(n_samples, dtype=float)
        errors: np.ndarray = np.zeros(n_samples, dtype=float)

        if record_history:
            self.w_history = []
            self._record_history()

        for k in range(n_samples):
            outputs[k] = self.filter_data(x[k])
            references[k] = self.last_reference
            errors[k] = self.last_error

            if record_history:
                self._record_history()

        runtime_s: float = perf_counter() - tic
        if verbose:
            print(f"[{self.__class__.__name__}] Completed in {runtime_s * 1000:.03f} ms")

        return self._pack_results(
            outputs=outputs,
            references=references,
            errors=errors,
            runtime_s=runtime_s,
            record_history=record_history,
        )

    def _record_history(self) -> None:
        """Store a snapshot of current coefficients."""
        self.w_history.append(np.asarray(self.w).copy())

    def _pack_results(
        self,
        outputs: np.ndarray,
        references: np.ndarray,
        errors: np.ndarray,
        runtime_s: float,
        record_history: bool = False,
        extra: Optional[Dict[str, Any]] = None,
    ) -> CancellationResult:
        """Centralized output packaging to standardize results."""
        if record_history:
            coefficients = np.asarray(self.w_history)
        else:
            coefficients = np.zeros((0, self.filter_length), dtype=float)

        return CancellationResult(
            outputs=np.asarray(outputs),
            references=np.asarray(references),
            errors=np.asarray(errors),
            coefficients=coefficients,
            algorithm=self.__class__.__name__,
            runtime_ms=float(runtime_s) * 1000.0,
            extra=extra,
        )

    def reset_filter(self) -> None:
        """Reset coefficients and history."""
        self.w[:] = 0.0
        self.last_reference = 0.0
        self.last_error = 0.0
        self.w_history = []
#EOF
