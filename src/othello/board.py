"""
Board module for Othello.
Holds the grid of cells and the disks placed on them. No turn logic lives here.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Sequence
import numpy as np

from .errors import OutOfBoundsError


class Position(NamedTuple):
    """Zero-based (row, col) coordinate on the board."""
    row: int
    col: int


class DiskColor(Enum):
    """Color of a disk. Empty cells have no disk, so there is no EMPTY member."""
    BLACK = 'black'
    WHITE = 'white'

    @property
    def opponent(self) -> 'DiskColor':
        return DiskColor.WHITE if self is DiskColor.BLACK else DiskColor.BLACK

    @property
    def symbol(self) -> str:
        return 'B' if self is DiskColor.BLACK else 'W'


@dataclass(eq=False)
class Disk:
    """A disk sitting on a cell. Flipping changes its color in place."""
    color: DiskColor
    position: Optional[Position] = None

    def flip(self) -> None:
        self.color = self.color.opponent


class Cell:
    """
    A single board square. Its position is fixed; only the disk changes,
    and only through Board.place_disk().
    """

    __slots__ = ('_position', '_disk')

    def __init__(self, position: Position):
        self._position = position
        self._disk: Optional[Disk] = None

    @property
    def position(self) -> Position:
        return self._position

    @property
    def disk(self) -> Optional[Disk]:
        return self._disk

    @property
    def is_empty(self) -> bool:
        return self._disk is None

    @property
    def color(self) -> Optional[DiskColor]:
        """Color of the disk in this cell, or None when empty."""
        return None if self._disk is None else self._disk.color

    def __repr__(self) -> str:
        return f"Cell({self._position.row}, {self._position.col}, {self.color})"


class Board:
    """
    Square grid of cells for Othello.

    The size is fixed at construction. Cells are created once and never
    replaced; occupancy changes only through place_disk().
    """

    # Array encoding used by get_board_state()/from_array()
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    _SYMBOLS = {'.': None, 'B': DiskColor.BLACK, 'W': DiskColor.WHITE}

    def __init__(self, size: int = 8):
        """
        Initialize an empty board.

        Args:
            size: Number of rows and columns. Must be even and at least 4.
        """
        if not isinstance(size, int) or size < 4 or size % 2 != 0:
            raise ValueError(f"Board size must be an even integer >= 4, got {size!r}")

        self.size = size
        self._cells: List[List[Cell]] = [
            [Cell(Position(row, col)) for col in range(size)]
            for row in range(size)
        ]

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, position: Position) -> Cell:
        """Get the cell at a position, raising OutOfBoundsError off the grid."""
        if not self.in_bounds(position):
            raise OutOfBoundsError(f"Position {tuple(position)} is outside the {self.size}x{self.size} board")
        return self._cells[position[0]][position[1]]

    def place_disk(self, position: Position, disk: Disk) -> None:
        """
        Put a disk on the cell at position.

        Any existing occupant is overwritten; callers check emptiness first.
        """
        cell = self.cell_at(position)
        disk.position = Position(*position)
        cell._disk = disk

    def place_opening(self) -> None:
        """Place the four standard opening disks around the center."""
        mid = self.size // 2
        self.place_disk(Position(mid - 1, mid - 1), Disk(DiskColor.WHITE))
        self.place_disk(Position(mid - 1, mid), Disk(DiskColor.BLACK))
        self.place_disk(Position(mid, mid - 1), Disk(DiskColor.BLACK))
        self.place_disk(Position(mid, mid), Disk(DiskColor.WHITE))

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._cells:
            yield from row

    def count(self, color: DiskColor) -> int:
        return sum(1 for cell in self.cells() if cell.color is color)

    def empty_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_empty)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from text rows such as "..BW....".

        Whitespace inside a row is ignored, so "B W ." works as well.
        """
        grid = [''.join(row.split()) for row in rows]
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise ValueError("Board rows must form a square grid")

        board = cls(size)
        for r, row in enumerate(grid):
            for c, symbol in enumerate(row):
                if symbol not in cls._SYMBOLS:
                    raise ValueError(f"Unknown board symbol {symbol!r} at ({r}, {c})")
                color = cls._SYMBOLS[symbol]
                if color is not None:
                    board.place_disk(Position(r, c), Disk(color))
        return board

    @classmethod
    def from_array(cls, state: np.ndarray) -> 'Board':
        """Build a board from an array in the get_board_state() encoding."""
        state = np.asarray(state)
        if state.ndim != 2 or state.shape[0] != state.shape[1]:
            raise ValueError(f"Board state must be a square 2D array, got shape {state.shape}")

        board = cls(int(state.shape[0]))
        for r, c in zip(*np.nonzero(state)):
            value = int(state[r, c])
            if value == cls.BLACK:
                color = DiskColor.BLACK
            elif value == cls.WHITE:
                color = DiskColor.WHITE
            else:
                raise ValueError(f"Unknown board value {value} at ({r}, {c})")
            board.place_disk(Position(int(r), int(c)), Disk(color))
        return board

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D int array with 0 for empty, 1 for black and 2 for white
        """
        state = np.zeros((self.size, self.size), dtype=int)
        for cell in self.cells():
            if cell.color is DiskColor.BLACK:
                state[cell.position] = self.BLACK
            elif cell.color is DiskColor.WHITE:
                state[cell.position] = self.WHITE
        return state

    def __str__(self) -> str:
        """Return a string representation of the board."""
        rows = []
        for row in self._cells:
            rows.append(' '.join('.' if cell.is_empty else cell.color.symbol for cell in row))
        return "\n".join(rows)
