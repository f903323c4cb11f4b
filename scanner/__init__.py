"""Scanner module for number extraction and gear detection."""

from .symbols import is_digit, is_gear_candidate
from .extractor import extract_number
from .gears import Gear, ScanResult, gear_numbers, gear_ratio, sum_gear_ratios, iter_gears, scan_schematic
from .loader import load_lines, load_schematic

__all__ = [
    "is_digit",
    "is_gear_candidate",
    "extract_number",
    "Gear",
    "ScanResult",
    "gear_numbers",
    "gear_ratio",
    "sum_gear_ratios",
    "iter_gears",
    "scan_schematic",
    "load_lines",
    "load_schematic",
]
