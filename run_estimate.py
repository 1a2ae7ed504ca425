"""
Run the solar profit estimator from a JSON inputs file.
Prints the before/after report and writes the Excel workbook.
"""

import argparse
import sys

from solar_profit.efficiency import DomainError
from solar_profit.runner import SolarProfitEstimator


def run(inputs_path: str = 'example_inputs.json',
        output_path: str = 'SolarProfit.xlsx',
        write_excel: bool = True) -> int:
    """
    Run the estimate and print the report.

    Args:
        inputs_path: Path to JSON inputs
        output_path: Path for output Excel file
        write_excel: Whether to write the workbook

    Returns:
        Process exit status
    """
    print(f"  Reading inputs from: {inputs_path}")

    try:
        estimator = SolarProfitEstimator(inputs_path)
        estimator.run()
    except (DomainError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print()
    print(estimator.format())
    print()

    if write_excel:
        estimator.export_to_excel(output_path)

    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Estimate solar plant profit before and after "
                                                 "narrowing the production forecast error.")
    parser.add_argument('inputs', nargs='?', default='example_inputs.json',
                        help="Path to JSON inputs (default: example_inputs.json)")
    parser.add_argument('-o', '--output', default='SolarProfit.xlsx',
                        help="Path for output Excel file (default: SolarProfit.xlsx)")
    parser.add_argument('--no-excel', action='store_true',
                        help="Skip writing the Excel workbook")
    args = parser.parse_args(argv)

    return run(args.inputs, args.output, not args.no_excel)


if __name__ == "__main__":
    sys.exit(main())
