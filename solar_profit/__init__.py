"""
Solar Profit Estimator Package
Daily profit, revenue and penalty estimates for a solar plant before and after
narrowing its production forecast error.
"""

__version__ = "1.0.0"
__author__ = "Solar Model Team"

from .efficiency import DomainError
from .revenue import compute_report
from .runner import run_estimate

__all__ = ["DomainError", "compute_report", "run_estimate"]
