"""Argument checks shared by the entity models and the growth engine."""

import numpy as np


def require_positive(name: str, value: float) -> float:
    """Return ``value`` as float, raising ValueError unless it is finite and > 0."""
    value = float(value)
    if not np.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def require_non_negative(name: str, value: float) -> float:
    """Return ``value`` as float, raising ValueError unless it is finite and >= 0."""
    value = float(value)
    if not np.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value
