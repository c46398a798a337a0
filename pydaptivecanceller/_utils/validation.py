# ._utils.validation.py

from __future__ import annotations

import numbers
from typing import Any

import numpy as np


def check_int(value: Any, name: str, *, minimum: int) -> int:
    """Return ``value`` as int, requiring an integral type and ``value >= minimum``.

    Raises
    ------
    TypeError:
        If ``value`` is not an integer (bools are rejected too).
    ValueError:
        If ``value < minimum``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer. Got {type(value).__name__}.")
    value = int(value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}. Got {name}={value}.")
    return value


def check_positive_float(value: Any, name: str) -> float:
    """Return ``value`` as float, requiring it to be finite and strictly positive."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"{name} must be a real number. Got {value!r}.") from exc
    if not np.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be finite and > 0. Got {name}={value}.")
    return value


#EOF
