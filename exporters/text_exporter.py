"""Plain text exporter for scan results (human-friendly format)."""

from scanner.gears import ScanResult


def to_text(result: ScanResult) -> str:
    """Render the gear ratio sum as a sentence."""
    return f"The sum of all the gear ratios is {result.total}."
