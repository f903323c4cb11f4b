"""Gear detection and gear ratio computation."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from schematic.model import Schematic
from .extractor import extract_number
from .symbols import is_gear_candidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gear:
    """A '*' cell with exactly two adjacent numbers."""
    
    row: int
    column: int
    numbers: Tuple[int, int]
    
    @property
    def ratio(self) -> int:
        return self.numbers[0] * self.numbers[1]


@dataclass
class ScanResult:
    """All gears found in one scan, in scan order."""
    
    gears: List[Gear] = field(default_factory=list)
    
    @property
    def total(self) -> int:
        return sum(gear.ratio for gear in self.gears)


def gear_numbers(row: int, col: int, schematic: Schematic) -> List[int]:
    """
    Extract every number adjacent to a gear candidate.
    
    The clipped 3x3 block around the cell is visited in row-major order and
    each non-zero extraction is collected. Extraction consumes the digits it
    reads, so a number touching several candidates goes to whichever one is
    scanned first.
    
    Args:
        row: Row of the cell.
        col: Column of the cell.
        schematic: Grid to scan. Digits of extracted numbers are overwritten.
    
    Returns:
        The extracted numbers, or an empty list if the cell is not a '*'.
    """
    if not is_gear_candidate(schematic.cell(row, col)):
        return []
    
    numbers: List[int] = []
    for i, j in schematic.neighborhood(row, col):
        value = extract_number(i, j, schematic)
        if value != 0:
            numbers.append(value)
    
    return numbers


def gear_ratio(row: int, col: int, schematic: Schematic) -> int:
    """
    Return the gear ratio of a cell.
    
    A gear is a '*' with exactly two adjacent numbers and its ratio is their
    product. Any other cell, including a '*' with 0, 1 or 3+ neighbors,
    yields 0. Neighboring digits are consumed either way.
    """
    numbers = gear_numbers(row, col, schematic)
    if len(numbers) != 2:
        return 0
    
    return numbers[0] * numbers[1]


def sum_gear_ratios(schematic: Schematic) -> int:
    """Sum the gear ratios of every cell, scanning in row-major order."""
    total = 0
    for row, col in schematic.iter_positions():
        total += gear_ratio(row, col, schematic)
    
    return total


def iter_gears(schematic: Schematic) -> Iterator[Gear]:
    """
    Iterate over the valid gears of a schematic in row-major order.
    
    Consumes the schematic exactly like ``sum_gear_ratios``.
    """
    for row, col in schematic.iter_positions():
        numbers = gear_numbers(row, col, schematic)
        if len(numbers) == 2:
            gear = Gear(row=row, column=col, numbers=(numbers[0], numbers[1]))
            logger.debug("Gear at (%d, %d): %d x %d = %d", row, col, numbers[0], numbers[1], gear.ratio)
            yield gear


def scan_schematic(schematic: Schematic) -> ScanResult:
    """
    Scan a schematic and collect its gears.
    
    Args:
        schematic: Grid to scan. It is consumed by the scan.
    
    Returns:
        ScanResult holding every gear found and their ratio sum.
    """
    result = ScanResult(gears=list(iter_gears(schematic)))
    logger.info("Found %d gears, sum of gear ratios %d", len(result.gears), result.total)
    return result
