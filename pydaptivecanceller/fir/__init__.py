# fir.__init__.py

from .history import CircularHistory, LinearShiftHistory, SampleHistory, make_history
from .fir_filter import FirFilter
from .delay_line import DelayLine

__all__ = [
    "SampleHistory",
    "CircularHistory",
    "LinearShiftHistory",
    "make_history",
    "FirFilter",
    "DelayLine",
]
