"""
Sensitivity analysis module.
Sweeps the improved deviation and tabulates efficiency and profit figures.
"""

import numpy as np
import pandas as pd
from typing import Iterable

from .efficiency import (DEFAULT_INTERVALS, DomainError, calculate_efficiencies,
                         normal_coverage, window_bounds)
from .revenue import REPORT_KEYS, build_report


def default_sweep(initial_deviation: float, improved_deviation: float,
                  steps: int) -> np.ndarray:
    """Evenly spaced improved deviations from the improved to the initial value."""
    if steps <= 0:
        return np.array([], dtype=float)
    return np.linspace(improved_deviation, initial_deviation, steps)


def run_sensitivity(power: float, initial_deviation: float, rate: float,
                    improved_deviations: Iterable[float],
                    intervals: int = DEFAULT_INTERVALS) -> pd.DataFrame:
    """
    Run the report for each improved deviation.

    Args:
        power: Nominal plant output (MW)
        initial_deviation: Deviation before improvement (MW)
        rate: Electricity price per kWh
        improved_deviations: Candidate deviations after improvement (MW)
        intervals: Trapezoidal sub-intervals per integration

    Returns:
        DataFrame with one row per improved deviation
    """
    rows = []

    for improved in improved_deviations:
        improved = float(improved)
        window_start, window_end = window_bounds(power, improved)

        efficiency_before, efficiency_after = calculate_efficiencies(
            power, initial_deviation, improved, intervals
        )

        try:
            exact_after = normal_coverage(window_start, window_end, power, improved)
        except DomainError:
            exact_after = np.nan

        row = {
            'improved_deviation_mw': improved,
            'window_start_mw': window_start,
            'window_end_mw': window_end,
            'efficiency_before': efficiency_before,
            'efficiency_after': efficiency_after,
            'exact_efficiency_after': exact_after,
            'integration_error': efficiency_after - exact_after,
        }
        row.update(build_report(power, efficiency_before, efficiency_after, rate))
        row['net_gain'] = row['net_after'] - row['net_before']

        rows.append(row)

    columns = (['improved_deviation_mw', 'window_start_mw', 'window_end_mw',
                'efficiency_before', 'efficiency_after', 'exact_efficiency_after',
                'integration_error'] + list(REPORT_KEYS) + ['net_gain'])

    return pd.DataFrame(rows, columns=columns)
