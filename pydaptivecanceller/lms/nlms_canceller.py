#  lms.nlms_canceller.py
#
#       Implements an adaptive noise canceller (adaptive line enhancer) for REAL
#       valued single-channel data, using the Normalized LMS update.
#
#       The input is its own reference: a delayed copy d[n] = x[n - D] is the
#       desired signal, so the filter learns the part of x that is predictable
#       from its past (narrowband signal) and leaves out the part that is not
#       (broadband noise).

from __future__ import annotations

import numpy as np

from pydaptivecanceller.base import AdaptiveFilter
from pydaptivecanceller._utils.validation import check_int, check_positive_float
from pydaptivecanceller.fir.delay_line import DelayLine
from pydaptivecanceller.fir.history import SampleHistory, make_history

NLMS_EPSILON: float = 1e-4


class NlmsNoiseCanceller(AdaptiveFilter):
    """
    Single-channel NLMS noise canceller with an internal delayed reference.

    Parameters
    ----------
    filter_length : int
        Number of adaptive taps ``N`` (``N >= 1``).
    reference_delay : int
        Delay ``D`` (``D >= 0``) used to form the reference ``d[n] = x[n - D]``.
    beta : float
        Normalized step size. Must be finite and positive; ``0 < beta <= 2`` is
        the classical stability range.
    history : {"circular", "linear"}, optional
        Layout of the sample history buffers (own state and delay line).
    check_finite : bool, optional
        If True, :meth:`filter_data` raises ValueError on NaN/inf input instead
        of letting it propagate into the coefficients. Default False.

    Notes
    -----
    With the regressor ``x_n = [x[n], x[n-1], ..., x[n-N+1]]^T``, one call of
    :meth:`filter_data` computes

    .. math::
        d[n] = x[n - D], \\qquad y[n] = w^T[n] x_n, \\qquad e[n] = d[n] - y[n],

    .. math::
        w[n+1] = w[n] + \\frac{\\beta}{\\|x_n\\|^2 + \\epsilon} \\, e[n] \\, x_n,

    with ``epsilon = 1e-4`` so the step stays defined on silence. The output is
    the a priori estimate ``y[n]``. There is no convergence check; the filter
    keeps adapting for as long as samples arrive.
    """

    beta: float
    reference_delay: int

    def __init__(
        self,
        filter_length: int,
        reference_delay: int,
        beta: float,
        history: str = "circular",
        check_finite: bool = False,
    ) -> None:
        super().__init__(filter_length=filter_length)
        self.reference_delay = check_int(reference_delay, "reference_delay", minimum=0)
        self.beta = check_positive_float(beta, "beta")
        self.history_strategy: str = history
        self.check_finite: bool = bool(check_finite)

        self._state: SampleHistory = make_history(history, self.filter_length)
        self._delay_line: DelayLine = DelayLine(self.reference_delay, history=history)

    @property
    def delay_line(self) -> DelayLine:
        return self._delay_line

    @property
    def state(self) -> np.ndarray:
        """Copy of the sample history, newest first."""
        return np.array(self._state.ordered(), dtype=float)

    def filter_data(self, x: float) -> float:
        """
        Consume one sample, adapt the coefficients and return the estimate.

        Parameters
        ----------
        x : float
            Input sample.

        Returns
        -------
        float
            A priori estimate ``y[n]`` computed with the pre-update coefficients.
        """
        x = float(x)
        if self.check_finite and not np.isfinite(x):
            raise ValueError(f"{self.__class__.__name__}: non-finite input sample {x}.")

        self._state.push(x)
        d: float = self._delay_line.filter_data(x)

        x_n: np.ndarray = self._state.ordered()
        y: float = float(np.dot(self.w, x_n))
        e: float = d - y

        den: float = self._state.energy() + NLMS_EPSILON
        self.w += (self.beta / den) * e * x_n

        self.last_reference = d
        self.last_error = e
        return y

    def reset_filter(self) -> None:
        """Zero the coefficients, the sample history and the delay line."""
        super().reset_filter()
        self._state.reset()
        self._delay_line.reset()

    def __repr__(self) -> str:
        return (
            f"<NlmsNoiseCanceller taps={self.filter_length} delay={self.reference_delay} "
            f"beta={self.beta} history={self.history_strategy}>"
        )
# EOF
