"""Destructive extraction of numbers from a schematic."""

from schematic.model import Schematic, PLACEHOLDER
from .symbols import is_digit


def _take_digit(row: int, col: int, schematic: Schematic) -> int:
    """Read the digit at a position and overwrite it with the placeholder."""
    value = int(schematic.cell(row, col))
    schematic.set_cell(row, col, PLACEHOLDER)
    return value


def extract_number(row: int, col: int, schematic: Schematic) -> int:
    """
    Extract the number that covers a position.
    
    For example, given the schematic::
    
        ...
        4.*
        .12
        ..*
    
    ``extract_number(2, 1, schematic)`` returns 12 and replaces both digits
    with '.', so a later call landing on either column returns 0 and the
    number is never counted twice.
    
    Args:
        row: Row of a cell that may hold a digit.
        col: Column of that cell.
        schematic: Grid to read from. Consumed digits are overwritten.
    
    Returns:
        The full decimal value, or 0 if the cell is not a digit.
    """
    if not is_digit(schematic.cell(row, col)):
        return 0
    
    value = _take_digit(row, col, schematic)
    
    # Digits to the left are higher decimal places
    place = 10
    for j in range(col - 1, -1, -1):
        if not is_digit(schematic.cell(row, j)):
            break
        value += place * _take_digit(row, j, schematic)
        place *= 10
    
    # Digits to the right shift everything read so far one place up
    for j in range(col + 1, schematic.width):
        if not is_digit(schematic.cell(row, j)):
            break
        value = value * 10 + _take_digit(row, j, schematic)
    
    return value
