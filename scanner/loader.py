"""Loading schematics from text files."""

import logging
from pathlib import Path
from typing import List, Union

from schematic.model import Schematic

logger = logging.getLogger(__name__)


def load_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a text file into a list of lines.
    
    Line terminators are removed and trailing blank lines are dropped, so a
    final newline does not produce an empty row.
    
    Args:
        path: File to read (UTF-8).
    
    Returns:
        The file's lines, in order.
    """
    content = Path(path).read_text(encoding="utf-8")
    # Only "\n" ends a line; other characters splitlines() honours stay in the row
    lines = [line.rstrip("\r") for line in content.split("\n")]
    
    while lines and not lines[-1].strip():
        lines.pop()
    
    return lines


def load_schematic(path: Union[str, Path]) -> Schematic:
    """Read a file and build a Schematic from its lines."""
    schematic = Schematic.from_lines(load_lines(path))
    logger.debug("Loaded %s: %d rows x %d columns", path, schematic.height, schematic.width)
    return schematic
