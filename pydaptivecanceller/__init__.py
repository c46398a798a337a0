# pydaptivecanceller/__init__.py

from .base import AdaptiveFilter, CancellationResult
from .config import CancellerConfig, SignalConfig
from .fir import *
from .lms import *

__version__ = "0.1.0"

__all__ = ["AdaptiveFilter", "CancellationResult",
    "CancellerConfig", "SignalConfig",
    "SampleHistory", "CircularHistory", "LinearShiftHistory", "make_history",
    "FirFilter", "DelayLine",
    "NlmsNoiseCanceller", "NLMS_EPSILON",
    "info"]


def info():
    """Prints an overview of the package building blocks."""
    print("\n" + "="*70)
    print("      PyDaptive Canceller - Single-channel NLMS noise cancellation")
    print("="*70)
    sections = {
        "FIR": "SampleHistory (circular / linear), FirFilter, DelayLine",
        "Adaptive": "NlmsNoiseCanceller (filter_data, accept_data, process)",
        "Programs": "pydaptive-noise-canceller, pydaptive-noisy-cosine, pydaptive-system-test",
    }
    for name, blocks in sections.items():
        print(f"\n{name:12}: {blocks}")

    print("\n" + "-"*70)
    print("Usage example: from pydaptivecanceller import NlmsNoiseCanceller")
    print("Documentation: help(pydaptivecanceller.NlmsNoiseCanceller)")
    print("="*70 + "\n")
