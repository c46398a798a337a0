# pydaptivecanceller/apps/_args.py
from __future__ import annotations

import argparse
import math

from pydaptivecanceller.config import CancellerConfig
from pydaptivecanceller.fir.history import HISTORY_STRATEGIES


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def finite_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be finite, got {text}")
    return value


def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {text!r}") from None
    if not value > 0.0 or value == float("inf"):
        raise argparse.ArgumentTypeError(f"must be finite and > 0, got {text}")
    return value


def add_canceller_arguments(parser: argparse.ArgumentParser, length_flag: str = "-f") -> None:
    """Adaptive filter options shared by the canceller programs."""
    defaults = CancellerConfig()
    parser.add_argument(
        length_flag, "--filter-length", dest="filter_length", type=positive_int,
        default=defaults.filter_length, help="number of adaptive taps (default: %(default)s)",
    )
    parser.add_argument(
        "-d", "--delay", dest="reference_delay", type=non_negative_int,
        default=defaults.reference_delay, help="reference delay in samples (default: %(default)s)",
    )
    parser.add_argument(
        "-b", "--beta", type=positive_float, default=defaults.beta,
        help="normalized step size (default: %(default)s)",
    )
    parser.add_argument(
        "--history", choices=sorted(HISTORY_STRATEGIES), default=defaults.history,
        help="sample history layout (default: %(default)s)",
    )
