"""Grid data model for engineering schematics."""

from typing import Iterable, Iterator, List, Tuple

from .errors import MalformedSchematicError


# Written over digits once the number they belong to has been consumed
PLACEHOLDER = "."

Position = Tuple[int, int]


class Schematic:
    """
    A mutable rectangular grid of characters.
    
    Rows are lists of single characters, all of the same length. Cells are
    overwritten in place while scanning, so a Schematic is meant to be built
    once, scanned once, and discarded. Use ``copy()`` to keep the original.
    """
    
    def __init__(self, rows: List[List[str]]):
        if not rows:
            raise MalformedSchematicError("schematic is empty")
        
        width = len(rows[0])
        if width == 0:
            raise MalformedSchematicError("schematic row 0 is empty")
        
        for index, row in enumerate(rows):
            if len(row) != width:
                raise MalformedSchematicError(
                    f"schematic row {index} has length {len(row)}, expected {width}"
                )
        
        # Copied so scanning never mutates the caller's lists
        self._rows: List[List[str]] = [list(row) for row in rows]
        self._height = len(rows)
        self._width = width
    
    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Schematic":
        """
        Build a schematic from text lines, one grid row per line.
        
        Trailing line terminators are stripped; nothing else is.
        """
        return cls([list(line.rstrip("\r\n")) for line in lines])
    
    @property
    def height(self) -> int:
        return self._height
    
    @property
    def width(self) -> int:
        return self._width
    
    @property
    def last_row(self) -> int:
        return self._height - 1
    
    @property
    def last_column(self) -> int:
        return self._width - 1
    
    @property
    def rows(self) -> List[List[str]]:
        """Return a copy of the grid rows."""
        return [row.copy() for row in self._rows]
    
    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position lies inside the grid."""
        return 0 <= row < self._height and 0 <= col < self._width
    
    def cell(self, row: int, col: int) -> str:
        """Return the character at a position."""
        self._check_bounds(row, col)
        return self._rows[row][col]
    
    def set_cell(self, row: int, col: int, char: str) -> None:
        """Overwrite the character at a position."""
        self._check_bounds(row, col)
        self._rows[row][col] = char
    
    def neighborhood(self, row: int, col: int, radius: int = 1) -> Iterator[Position]:
        """
        Iterate over the block of positions centred on (row, col).
        
        The block spans ``radius`` cells in every direction, clipped to the
        grid edges, and includes the centre itself. Positions are yielded in
        row-major order.
        
        Args:
            row: Centre row.
            col: Centre column.
            radius: Distance from the centre to the block edge.
        
        Yields:
            (row, column) tuples.
        """
        self._check_bounds(row, col)
        
        start_row = max(row - radius, 0)
        end_row = min(row + radius, self.last_row)
        start_col = max(col - radius, 0)
        end_col = min(col + radius, self.last_column)
        
        for i in range(start_row, end_row + 1):
            for j in range(start_col, end_col + 1):
                yield i, j
    
    def iter_positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for i in range(self._height):
            for j in range(self._width):
                yield i, j
    
    def to_lines(self) -> List[str]:
        """Render the current grid contents as strings."""
        return ["".join(row) for row in self._rows]
    
    def copy(self) -> "Schematic":
        """Return an independent copy of this schematic."""
        return Schematic(self.rows)
    
    def _check_bounds(self, row: int, col: int) -> None:
        # Negative indices would otherwise wrap around silently
        if not self.in_bounds(row, col):
            raise IndexError(
                f"position ({row}, {col}) is outside a {self._height}x{self._width} schematic"
            )
    
    def __len__(self) -> int:
        """Return the number of rows in the grid."""
        return self._height
    
    def __repr__(self) -> str:
        return f"Schematic(height={self._height}, width={self._width})"
