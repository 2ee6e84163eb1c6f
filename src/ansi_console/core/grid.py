"""Grid - fixed-size 2D array of styled points, the input of the renderer."""

from dataclasses import dataclass, field
from typing import Iterator

from ansi_console.core.style import Style


@dataclass(frozen=True, slots=True)
class Point:
    """
    One display cell: a character and the style it is drawn with.

    ``char`` is normally a single codepoint.
    """
    char: str = ' '
    style: Style = Style.BLANK


BLANK = Point()


@dataclass
class Grid:
    """
    A rows x columns array of Points.

    The size is fixed at construction; every row has ``columns`` points.
    Coordinates are (x, y) with x the column and y the row, both 0-indexed.
    """
    columns: int = 80
    rows: int = 25
    _buffer: list[list[Point]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.columns < 0 or self.rows < 0:
            raise ValueError(f"Invalid grid size {self.columns}x{self.rows}")
        self._buffer = [[BLANK] * self.columns for _ in range(self.rows)]

    @classmethod
    def from_lines(cls, lines: list[str], style: Style = Style.BLANK) -> "Grid":
        """Build a grid just large enough to hold the given lines of text."""
        columns = max((len(line) for line in lines), default=0)
        grid = cls(columns=columns, rows=len(lines))
        for y, line in enumerate(lines):
            grid.put_text(0, y, line, style)
        return grid

    def _check(self, x: int, y: int) -> None:
        if not 0 <= x < self.columns:
            raise IndexError(f"x={x} out of bounds (columns={self.columns})")
        if not 0 <= y < self.rows:
            raise IndexError(f"y={y} out of bounds (rows={self.rows})")

    def get(self, x: int, y: int) -> Point:
        """Get the point at position (x, y)."""
        self._check(x, y)
        return self._buffer[y][x]

    def set(self, x: int, y: int, point: Point) -> None:
        """Set the point at position (x, y)."""
        self._check(x, y)
        self._buffer[y][x] = point

    def __getitem__(self, pos: tuple[int, int]) -> Point:
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], point: Point) -> None:
        x, y = pos
        self.set(x, y, point)

    def put_text(self, x: int, y: int, text: str, style: Style = Style.BLANK) -> None:
        """Put a string starting at (x, y), clipped at the right edge."""
        self._check(x, y)
        for i, char in enumerate(text):
            if x + i >= self.columns:
                break
            self._buffer[y][x + i] = Point(char, style)

    def fill(self, point: Point = BLANK) -> None:
        """Set every position to the given point."""
        for row in self._buffer:
            row[:] = [point] * self.columns

    def __iter__(self) -> Iterator[list[Point]]:
        """Iterate over rows, top to bottom."""
        return iter(self._buffer)

    def __len__(self) -> int:
        return self.rows
