"""
Efficiency calculation module.
Gaussian production-error density integrated over the delivery window.
"""

import numpy as np
from typing import Tuple, Union
from scipy.integrate import trapezoid
from scipy.stats import norm


DEFAULT_INTERVALS = 1000

ArrayLike = Union[float, np.ndarray]


class DomainError(ValueError):
    """Raised when a numeric parameter is outside the model's domain."""


def gaussian_density(x: ArrayLike, mean: float, deviation: float) -> ArrayLike:
    """
    Normal probability density at x.

    Args:
        x: Point (or array of points) to evaluate
        mean: Distribution mean
        deviation: Standard deviation, must be nonzero

    Returns:
        Density value(s); same shape as x
    """
    if deviation == 0:
        raise DomainError("deviation must be nonzero")

    coefficient = 1.0 / (deviation * np.sqrt(2.0 * np.pi))
    exponent = -((x - mean) ** 2) / (2.0 * deviation ** 2)
    return coefficient * np.exp(exponent)


def integrate_trapezoidal(start: float, end: float, intervals: int,
                          mean: float, deviation: float) -> float:
    """
    Approximate the Gaussian mass between start and end with the
    composite trapezoidal rule.

    Args:
        start: Lower bound of the window
        end: Upper bound of the window (may be below start)
        intervals: Number of equal sub-intervals
        mean: Distribution mean
        deviation: Standard deviation

    Returns:
        Integral estimate; negative when end < start
    """
    if isinstance(intervals, bool) or not isinstance(intervals, (int, np.integer)) or intervals <= 0:
        raise ValueError(f"intervals must be a positive integer, got {intervals!r}")

    step = (end - start) / intervals
    if step == 0:
        # Zero-width window carries no mass
        return 0.0

    grid = start + np.arange(intervals + 1) * step
    values = gaussian_density(grid, mean, deviation)

    return float(trapezoid(values, dx=step))


def normal_coverage(start: float, end: float, mean: float, deviation: float) -> float:
    """Closed-form Gaussian mass between start and end."""
    if deviation <= 0:
        raise DomainError(f"deviation must be positive, got {deviation}")

    return float(norm.cdf(end, loc=mean, scale=deviation) -
                 norm.cdf(start, loc=mean, scale=deviation))


def window_bounds(power: float, improved_deviation: float) -> Tuple[float, float]:
    """Delivery window shared by the before and after passes."""
    return power - improved_deviation, power + improved_deviation


def calculate_efficiencies(power: float, initial_deviation: float,
                           improved_deviation: float,
                           intervals: int = DEFAULT_INTERVALS) -> Tuple[float, float]:
    """
    Calculate efficiency before and after the improvement.

    Both passes integrate over the window built from the improved deviation;
    only the spread of the distribution changes.

    Returns:
        (efficiency_before, efficiency_after)
    """
    window_start, window_end = window_bounds(power, improved_deviation)

    efficiency_before = integrate_trapezoidal(window_start, window_end, intervals,
                                              power, initial_deviation)
    efficiency_after = integrate_trapezoidal(window_start, window_end, intervals,
                                             power, improved_deviation)

    return efficiency_before, efficiency_after
