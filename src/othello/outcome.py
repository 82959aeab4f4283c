"""
Results returned by engine commands.

Illegal moves are an expected part of play, so submit_move() and skip_turn()
report them as values instead of raising. Callers that prefer exceptions can
call Outcome.raise_for_rejection().
"""
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from .board import Position
from .errors import IllegalMoveError, InvalidStateError, OthelloError, OutOfBoundsError

if TYPE_CHECKING:
    from .game import GameStatus, Player


class RejectReason(Enum):
    """Why the engine refused a command."""
    ALREADY_STARTED = "game has already been started"
    NOT_IN_PROGRESS = "game is not in progress"
    OUT_OF_BOUNDS = "position is outside the board"
    CELL_OCCUPIED = "cell is already occupied"
    NO_FLIPS = "move does not flip any disks"
    MOVES_AVAILABLE = "moves still available"

    @property
    def message(self) -> str:
        return self.value


_ERRORS = {
    RejectReason.ALREADY_STARTED: InvalidStateError,
    RejectReason.NOT_IN_PROGRESS: InvalidStateError,
    RejectReason.OUT_OF_BOUNDS: OutOfBoundsError,
    RejectReason.CELL_OCCUPIED: IllegalMoveError,
    RejectReason.NO_FLIPS: IllegalMoveError,
    RejectReason.MOVES_AVAILABLE: InvalidStateError,
}


@dataclass(frozen=True)
class Outcome:
    """
    Result of a start_game(), submit_move() or skip_turn() call.

    Attributes:
        accepted: Whether the engine applied the command
        reason: Why it was rejected (None when accepted)
        position: Target of a move, None for skips and game start
        flipped: Disks flipped by an accepted move
        next_player: Player to move after the command
        status: Game status after the command
        passed: Players whose turn was passed automatically afterwards
    """
    accepted: bool
    status: 'GameStatus'
    reason: Optional[RejectReason] = None
    position: Optional[Position] = None
    flipped: Tuple[Position, ...] = ()
    next_player: Optional['Player'] = None
    passed: Tuple['Player', ...] = ()

    @classmethod
    def rejected(cls, reason: RejectReason, status: 'GameStatus',
                 position: Optional[Position] = None,
                 next_player: Optional['Player'] = None) -> 'Outcome':
        return cls(accepted=False, status=status, reason=reason,
                   position=position, next_player=next_player)

    def __bool__(self) -> bool:
        return self.accepted

    @property
    def message(self) -> str:
        return "accepted" if self.accepted else self.reason.message

    def error(self) -> Optional[OthelloError]:
        """Get the exception matching the rejection reason, or None if accepted."""
        if self.accepted:
            return None
        detail = self.reason.message
        if self.position is not None:
            detail = f"{detail}: {tuple(self.position)}"
        return _ERRORS[self.reason](detail)

    def raise_for_rejection(self) -> 'Outcome':
        """Raise the matching exception if the command was rejected."""
        error = self.error()
        if error is not None:
            raise error
        return self
