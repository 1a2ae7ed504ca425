"""
Revenue calculation module.
Converts efficiency into daily earnings, penalties and net revenue.
"""

from typing import Dict

from .efficiency import DEFAULT_INTERVALS, calculate_efficiencies


HOURS_PER_DAY = 24
KW_PER_MW = 1000.0
DISPLAY_SCALE = 1000.0  # report figures are in thousands of currency units

REPORT_KEYS = (
    'earnings_before', 'net_before', 'penalties_before',
    'earnings_after', 'net_after', 'penalties_after',
)


def calculate_earnings(power: float, efficiency: float, rate: float) -> float:
    """Daily revenue from the delivered fraction of nameplate capacity."""
    return power * HOURS_PER_DAY * efficiency * rate * KW_PER_MW


def calculate_penalties(power: float, efficiency: float, rate: float) -> float:
    """Daily revenue lost on the undelivered fraction."""
    return power * HOURS_PER_DAY * (1 - efficiency) * rate * KW_PER_MW


def build_report(power: float, efficiency_before: float, efficiency_after: float,
                 rate: float) -> Dict[str, float]:
    """
    Build the six report figures from already computed efficiencies.

    Returns:
        Dict keyed by REPORT_KEYS, values in thousands of currency units
    """
    earnings_before = calculate_earnings(power, efficiency_before, rate)
    penalties_before = calculate_penalties(power, efficiency_before, rate)

    earnings_after = calculate_earnings(power, efficiency_after, rate)
    penalties_after = calculate_penalties(power, efficiency_after, rate)

    return {
        'earnings_before': earnings_before / DISPLAY_SCALE,
        'net_before': (earnings_before - penalties_before) / DISPLAY_SCALE,
        'penalties_before': penalties_before / DISPLAY_SCALE,
        'earnings_after': earnings_after / DISPLAY_SCALE,
        'net_after': (earnings_after - penalties_after) / DISPLAY_SCALE,
        'penalties_after': penalties_after / DISPLAY_SCALE,
    }


def compute_report(power: float, initial_deviation: float, improved_deviation: float,
                   rate: float, intervals: int = DEFAULT_INTERVALS) -> Dict[str, float]:
    """
    Calculate profitability before and after the improvement.

    Args:
        power: Nominal plant output (MW)
        initial_deviation: Forecast error deviation before improvement (MW)
        improved_deviation: Forecast error deviation after improvement (MW)
        rate: Electricity price per kWh
        intervals: Trapezoidal sub-intervals per integration

    Returns:
        Dict with earnings, net and penalties before and after (thousands)

    Raises:
        DomainError: if a deviation used as spread is zero over a non-empty window
    """
    efficiency_before, efficiency_after = calculate_efficiencies(
        power, initial_deviation, improved_deviation, intervals
    )

    return build_report(power, efficiency_before, efficiency_after, rate)
