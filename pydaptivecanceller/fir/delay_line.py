# pydaptivecanceller/fir/delay_line.py

from __future__ import annotations

import numpy as np

from pydaptivecanceller._utils.validation import check_int
from pydaptivecanceller.fir.fir_filter import FirFilter


class DelayLine(FirFilter):
    """
    Pure delay of ``D`` samples built as an FIR filter.

    The taps are ``[0, ..., 0, 1]`` (length ``D + 1``, unit tap at index ``D``),
    so ``filter_data`` returns the sample presented ``D`` calls earlier and
    ``0.0`` for the first ``D`` calls. ``D = 0`` is the identity.
    """

    def __init__(self, delay: int, history: str = "circular") -> None:
        delay = check_int(delay, "delay", minimum=0)

        taps = np.zeros(delay + 1, dtype=float)
        taps[delay] = 1.0

        super().__init__(taps, history=history)
        self.delay: int = delay

    def __repr__(self) -> str:
        return f"<DelayLine delay={self.delay} history={self.history_strategy}>"
#EOF
