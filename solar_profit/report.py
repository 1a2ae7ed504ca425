"""Text rendering of the profit report."""

from typing import Dict

from .inputs import DEFAULT_CURRENCY_LABEL


REPORT_LABELS = (
    ('earnings_before', "Profit before improvement"),
    ('net_before', "Revenue before improvement"),
    ('penalties_before', "Penalty before improvement"),
    ('earnings_after', "Profit after improvement"),
    ('net_after', "Revenue after improvement"),
    ('penalties_after', "Penalty after improvement"),
)


def format_report(report: Dict[str, float], currency_label: str = DEFAULT_CURRENCY_LABEL) -> str:
    """Render the six report figures as labelled lines with two decimals."""
    return "\n".join(
        f"{label}: {report[key]:.2f} {currency_label}"
        for key, label in REPORT_LABELS
    )
