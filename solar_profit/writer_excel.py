"""
Excel workbook writer module.
Generates the estimate workbook with inputs, results, sensitivity and audit tabs.
"""

import pandas as pd
from typing import Dict, Any, List, Optional
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils.dataframe import dataframe_to_rows
from openpyxl.chart import LineChart, Reference

from .report import REPORT_LABELS


class ExcelWriter:
    """Writes the solar profit estimate to an Excel workbook."""

    def __init__(self, inputs: Dict[str, Any], report: Dict[str, float],
                 details: Dict[str, Any], sensitivity: Optional[pd.DataFrame],
                 defaults_used: List[str], warnings: List[str]):
        self.inputs = inputs
        self.report = report
        self.details = details
        self.sensitivity = sensitivity
        self.defaults_used = defaults_used
        self.warnings = warnings

        # Styling
        self.header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        self.header_font = Font(color="FFFFFF", bold=True)
        self.section_fill = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
        self.section_font = Font(bold=True)

    def write_workbook(self, output_path: str):
        """Write complete workbook to file."""
        wb = Workbook()

        # Remove default sheet
        if 'Sheet' in wb.sheetnames:
            wb.remove(wb['Sheet'])

        self._create_inputs_tab(wb)
        self._create_results_tab(wb)
        self._create_sensitivity_tab(wb)
        self._create_audit_trace_tab(wb)

        wb.save(output_path)

    def _create_inputs_tab(self, wb: Workbook):
        """Create Inputs tab with plant parameters and settings."""
        ws = wb.create_sheet("Inputs")

        ws['A1'] = "Solar Profit Estimator - Inputs"
        ws['A1'].font = Font(size=14, bold=True)

        row = 3
        ws[f'A{row}'] = "PLANT"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        plant = self.inputs['plant']
        plant_data = [
            ("Power (MW)", plant['power_mw']),
            ("Initial Deviation (MW)", plant['initial_deviation_mw']),
            ("Improved Deviation (MW)", plant['improved_deviation_mw']),
            ("Electricity Rate (per kWh)", plant['rate_per_kwh']),
        ]

        for label, value in plant_data:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = value
            row += 1

        row += 1
        ws[f'A{row}'] = "SETTINGS"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        settings = self.inputs['settings']
        for label, value in [("Integration Intervals", settings['intervals']),
                             ("Currency Label", settings['currency_label']),
                             ("Sensitivity Steps", settings['sensitivity_steps'])]:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = value
            row += 1

        ws.column_dimensions['A'].width = 30
        ws.column_dimensions['B'].width = 18

    def _create_results_tab(self, wb: Workbook):
        """Create Results tab with efficiencies and the six report figures."""
        ws = wb.create_sheet("Results")

        currency = self.inputs['settings']['currency_label']
        ws['A1'] = f"Results ({currency})"
        ws['A1'].font = Font(size=14, bold=True)

        row = 3
        ws[f'A{row}'] = "EFFICIENCY"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        efficiency_data = [
            ("Window Start (MW)", self.details['window_start_mw'], '0.000'),
            ("Window End (MW)", self.details['window_end_mw'], '0.000'),
            ("Efficiency Before", self.details['efficiency_before'], '0.00%'),
            ("Efficiency After", self.details['efficiency_after'], '0.00%'),
        ]

        for label, value, number_format in efficiency_data:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = value
            ws[f'B{row}'].number_format = number_format
            row += 1

        row += 1
        ws[f'A{row}'] = "PROFIT"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        for key, label in REPORT_LABELS:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = self.report[key]
            ws[f'B{row}'].number_format = '#,##0.00'
            row += 1

        ws.column_dimensions['A'].width = 32
        ws.column_dimensions['B'].width = 18

    def _create_sensitivity_tab(self, wb: Workbook):
        """Create Sensitivity tab with the sweep table and efficiency chart."""
        ws = wb.create_sheet("Sensitivity")

        ws['A1'] = "Improved Deviation Sensitivity"
        ws['A1'].font = Font(size=14, bold=True)

        if self.sensitivity is None or self.sensitivity.empty:
            ws['A3'] = "Sensitivity sweep disabled"
            return

        df = self.sensitivity.astype(object).where(pd.notna(self.sensitivity), None)
        start_row = 3

        for col_idx, col_name in enumerate(df.columns, start=1):
            cell = ws.cell(row=start_row, column=col_idx, value=col_name)
            self._apply_header_style(cell)

        for row_idx, row in enumerate(dataframe_to_rows(df, index=False, header=False), start=start_row + 1):
            for col_idx, value in enumerate(row, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)

                col_name = df.columns[col_idx - 1]
                if 'efficiency' in col_name or 'error' in col_name:
                    cell.number_format = '0.0000'
                elif col_name.endswith('_mw'):
                    cell.number_format = '0.000'
                else:
                    cell.number_format = '#,##0.00'

        last_row = start_row + len(df)

        chart = LineChart()
        chart.title = "Efficiency vs Improved Deviation"
        chart.y_axis.title = "Efficiency"
        chart.x_axis.title = "Improved Deviation (MW)"

        before_col = list(df.columns).index('efficiency_before') + 1
        data = Reference(ws, min_col=before_col, max_col=before_col + 1,
                         min_row=start_row, max_row=last_row)
        categories = Reference(ws, min_col=1, min_row=start_row + 1, max_row=last_row)
        chart.add_data(data, titles_from_data=True)
        chart.set_categories(categories)

        ws.add_chart(chart, f"A{last_row + 3}")

        for col_idx, col_name in enumerate(df.columns, start=1):
            ws.column_dimensions[ws.cell(row=start_row, column=col_idx).column_letter].width = \
                min(len(col_name) + 4, 30)

    def _create_audit_trace_tab(self, wb: Workbook):
        """Create Audit Trace tab with defaults used and warnings."""
        ws = wb.create_sheet("Audit Trace")

        ws['A1'] = "Audit Trace"
        ws['A1'].font = Font(size=14, bold=True)

        row = 3
        ws[f'A{row}'] = "DEFAULTS USED"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        for entry in self.defaults_used or ["(none)"]:
            ws[f'A{row}'] = entry
            row += 1

        row += 1
        ws[f'A{row}'] = "WARNINGS"
        self._apply_section_style(ws[f'A{row}'])
        row += 1

        for entry in self.warnings or ["(none)"]:
            ws[f'A{row}'] = entry
            row += 1

        ws.column_dimensions['A'].width = 60

    def _apply_header_style(self, cell):
        """Apply header style to cell."""
        cell.fill = self.header_fill
        cell.font = self.header_font
        cell.alignment = Alignment(horizontal='center', vertical='center')

    def _apply_section_style(self, cell):
        """Apply section header style to cell."""
        cell.fill = self.section_fill
        cell.font = self.section_font
