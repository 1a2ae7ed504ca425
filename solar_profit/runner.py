"""
Main runner module.
Orchestrates the estimator components and generates outputs.
"""

import pandas as pd
from typing import Dict, Any, Optional, Tuple

from .inputs import load_inputs
from .efficiency import calculate_efficiencies, window_bounds
from .revenue import build_report
from .sensitivity import default_sweep, run_sensitivity
from .report import format_report
from .writer_excel import ExcelWriter


class SolarProfitEstimator:
    """Main solar profit estimator orchestrator."""

    def __init__(self, inputs_path: str):
        """
        Initialize estimator with inputs.

        Args:
            inputs_path: Path to inputs JSON file
        """
        self.inputs_path = inputs_path
        self.inputs, self.defaults_used, self.warnings = load_inputs(inputs_path)

        # Extract key parameters
        plant = self.inputs['plant']
        self.power = plant['power_mw']
        self.initial_deviation = plant['initial_deviation_mw']
        self.improved_deviation = plant['improved_deviation_mw']
        self.rate = plant['rate_per_kwh']

        settings = self.inputs['settings']
        self.intervals = settings['intervals']
        self.currency_label = settings['currency_label']
        self.sensitivity_steps = settings['sensitivity_steps']

        # Results storage
        self.report = None
        self.details = None
        self.sensitivity_df = None

    def run(self) -> Tuple[Dict[str, float], Dict[str, Any]]:
        """
        Run the estimate.

        Returns:
            (report_dict, details_dict)
        """
        print("Running Solar Profit Estimator...")

        for warning in self.warnings:
            print(f"  Warning: {warning}")

        # Step 1: Efficiency before and after
        print("  1. Integrating production error distribution...")
        window_start, window_end = window_bounds(self.power, self.improved_deviation)
        efficiency_before, efficiency_after = calculate_efficiencies(
            self.power, self.initial_deviation, self.improved_deviation, self.intervals
        )

        self.details = {
            'window_start_mw': window_start,
            'window_end_mw': window_end,
            'efficiency_before': efficiency_before,
            'efficiency_after': efficiency_after,
            'intervals': self.intervals,
        }

        # Step 2: Earnings and penalties
        print("  2. Calculating earnings and penalties...")
        self.report = build_report(self.power, efficiency_before, efficiency_after, self.rate)

        # Step 3: Sensitivity sweep
        if self.sensitivity_steps > 0:
            print("  3. Running improved deviation sensitivity...")
            sweep = default_sweep(self.initial_deviation, self.improved_deviation,
                                  self.sensitivity_steps)
            self.sensitivity_df = run_sensitivity(self.power, self.initial_deviation,
                                                  self.rate, sweep, self.intervals)
        else:
            self.sensitivity_df = None

        print("Estimate complete!")
        print(f"  Efficiency before: {efficiency_before*100:.2f}%")
        print(f"  Efficiency after: {efficiency_after*100:.2f}%")
        print(f"  Net gain: {self.report['net_after'] - self.report['net_before']:.2f} {self.currency_label}")

        return self.report, self.details

    def format(self) -> str:
        """Text block of the last run's report."""
        if self.report is None:
            raise RuntimeError("run() must be called before format()")
        return format_report(self.report, self.currency_label)

    def export_to_excel(self, output_path: str):
        """
        Export estimate to Excel workbook.

        Args:
            output_path: Path for output Excel file
        """
        if self.report is None:
            raise RuntimeError("run() must be called before export_to_excel()")

        print(f"Exporting to Excel: {output_path}")

        writer = ExcelWriter(
            self.inputs, self.report, self.details, self.sensitivity_df,
            self.defaults_used, self.warnings
        )

        writer.write_workbook(output_path)

        print("Export complete!")


def run_estimate(inputs_path: str,
                 output_path: Optional[str] = "SolarProfit.xlsx") -> Tuple[Dict[str, float], Optional[pd.DataFrame]]:
    """
    Convenience function to run the estimate and export to Excel.

    Args:
        inputs_path: Path to inputs JSON
        output_path: Path for output Excel (None to skip the workbook)

    Returns:
        (report_dict, sensitivity_dataframe)
    """
    estimator = SolarProfitEstimator(inputs_path)
    report, _ = estimator.run()
    if output_path:
        estimator.export_to_excel(output_path)

    return report, estimator.sensitivity_df
