"""
Move rules for Othello.

The directional walk below is the only place the sandwich rule is evaluated.
Legality checks and flip application both go through scan(), so they always
agree on which disks a move captures.
"""
from typing import List, NamedTuple, Tuple

from .board import Board, DiskColor, Position

# King-move adjacency, row-major
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class DirectionFlips(NamedTuple):
    """A qualifying direction and the opponent disks it would flip."""
    direction: Tuple[int, int]
    flips: List[Position]


def walk(board: Board, origin: Position, direction: Tuple[int, int], color: DiskColor) -> List[Position]:
    """
    Walk from origin along direction and collect the disks a move would flip.

    Args:
        board: Board to inspect
        origin: The (empty) cell the move would be placed on
        direction: Unit step (dr, dc)
        color: Color of the moving player

    Returns:
        Positions of the opponent disks bracketed by a disk of `color`, or an
        empty list if the direction does not qualify
    """
    dr, dc = direction
    opponent = color.opponent
    flips: List[Position] = []

    pos = Position(origin[0] + dr, origin[1] + dc)
    while board.in_bounds(pos):
        found = board.cell_at(pos).color
        if found is opponent:
            flips.append(pos)
        elif found is color:
            return flips
        else:
            return []
        pos = Position(pos.row + dr, pos.col + dc)

    # Ran off the board without meeting our own disk
    return []


def scan(board: Board, origin: Position, color: DiskColor) -> List[DirectionFlips]:
    """Get every direction that qualifies for a move at origin, with its flips."""
    if not board.cell_at(origin).is_empty:
        return []

    result = []
    for direction in DIRECTIONS:
        flips = walk(board, origin, direction, color)
        if flips:
            result.append(DirectionFlips(direction, flips))
    return result


def is_legal_move(board: Board, position: Position, color: DiskColor) -> bool:
    """Check if color may place a disk at position."""
    if not board.in_bounds(position):
        return False
    return bool(scan(board, Position(*position), color))


def legal_moves(board: Board, color: DiskColor) -> List[Position]:
    """
    Get all legal moves for a color.

    Returns:
        Positions in row-major order (top to bottom, left to right)
    """
    return [pos for pos in board.positions() if scan(board, pos, color)]


def has_legal_move(board: Board, color: DiskColor) -> bool:
    return any(scan(board, pos, color) for pos in board.positions())
