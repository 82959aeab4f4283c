"""
Othello game module.
Handles game flow and state management.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union
import logging
import numpy as np

from . import rules
from .board import Board, Disk, DiskColor, Position
from .config import Config, GameConfig
from .errors import InvalidStateError
from .outcome import Outcome, RejectReason

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = 'not_started'
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    DRAWN = 'drawn'


@dataclass(frozen=True)
class Player:
    """A participant in the game, identified by name and disk color."""
    name: str
    color: DiskColor

    def __str__(self) -> str:
        return f"{self.name} ({self.color.value})"


class OthelloGame:
    """
    Main game class for Othello that manages the game state and flow.

    Commands (start_game, submit_move, skip_turn) return an Outcome that the
    caller inspects; queries never change state.
    """

    def __init__(self, players: Sequence[Player], config: Optional[GameConfig] = None):
        """
        Initialize a new Othello game.

        Args:
            players: The two players, one per disk color
            config: Game configuration (default: standard 8x8, Black first)
        """
        self.config = (config or GameConfig()).validate()
        self.size = self.config.board_size

        players = tuple(players)
        if len(players) != 2:
            raise ValueError(f"Othello needs exactly two players, got {len(players)}")
        if players[0].color is players[1].color:
            raise ValueError("Players must have different disk colors")

        self._players: Tuple[Player, Player] = players
        self._board: Optional[Board] = None
        self._status = GameStatus.NOT_STARTED
        self._current = self.player_by_color(self.config.first_disk_color)
        self._winner: Optional[Player] = None

    @classmethod
    def from_config(cls, config: Optional[Union[Config, GameConfig]] = None) -> 'OthelloGame':
        """Create a game with the players named in the configuration."""
        if isinstance(config, Config):
            config = config.game
        config = config or GameConfig()
        players = [
            Player(config.black_name, DiskColor.BLACK),
            Player(config.white_name, DiskColor.WHITE),
        ]
        return cls(players, config)

    @property
    def board(self) -> Optional[Board]:
        """The board, or None before the game starts."""
        return self._board

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    def start_game(self, board: Optional[Board] = None) -> Outcome:
        """
        Set up the board and begin play.

        Args:
            board: Optional pre-built position to start from instead of the
                standard opening. Must match the configured size.

        Returns:
            Outcome describing who moves first and the resulting status, or
            an ALREADY_STARTED rejection if the game was started before
        """
        if self._status is not GameStatus.NOT_STARTED:
            return self._reject(RejectReason.ALREADY_STARTED)

        if board is None:
            board = Board(self.size)
            board.place_opening()
        elif board.size != self.size:
            raise ValueError(f"Board size {board.size} does not match configured size {self.size}")

        self._board = board
        self._status = GameStatus.IN_PROGRESS
        self._current = self.player_by_color(self.config.first_disk_color)
        logger.info("Game started on a %dx%d board, %s moves first", self.size, self.size, self._current)

        # A supplied position may already be blocked for one or both sides
        passed = self._check_turn()
        return Outcome(accepted=True, status=self._status, next_player=self._current, passed=passed)

    def current_player(self) -> Player:
        return self._current

    def status(self) -> GameStatus:
        return self._status

    def is_game_over(self) -> bool:
        return self._status in (GameStatus.WON, GameStatus.DRAWN)

    def player_by_color(self, color: DiskColor) -> Player:
        for player in self._players:
            if player.color is color:
                return player
        raise ValueError(f"No player with color {color}")

    def opponent_of(self, player: Player) -> Player:
        return self.player_by_color(player.color.opponent)

    def legal_moves(self, player: Optional[Player] = None) -> List[Position]:
        """
        Get all legal moves for a player.

        Args:
            player: Player to get moves for. If None, uses the current player.

        Returns:
            Positions in row-major order; empty when the game is not in progress
        """
        if self._status is not GameStatus.IN_PROGRESS:
            return []
        if player is None:
            player = self._current
        return rules.legal_moves(self._board, player.color)

    def submit_move(self, row: int, col: int) -> Outcome:
        """
        Place a disk for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            Accepted Outcome with the flipped disks, or a rejection that left
            the game untouched
        """
        position = Position(row, col)
        if self._status is not GameStatus.IN_PROGRESS:
            return self._reject(RejectReason.NOT_IN_PROGRESS, position)
        if not self._board.in_bounds(position):
            return self._reject(RejectReason.OUT_OF_BOUNDS, position)
        if not self._board.cell_at(position).is_empty:
            return self._reject(RejectReason.CELL_OCCUPIED, position)

        mover = self._current
        captures = rules.scan(self._board, position, mover.color)
        if not captures:
            return self._reject(RejectReason.NO_FLIPS, position)

        self._board.place_disk(position, Disk(mover.color))
        flipped: List[Position] = []
        for capture in captures:
            for pos in capture.flips:
                self._board.cell_at(pos).disk.flip()
                flipped.append(pos)
        logger.debug("%s placed at %s, flipped %s", mover, tuple(position),
                     [tuple(p) for p in flipped])

        passed = self._advance_turn()
        return Outcome(
            accepted=True,
            status=self._status,
            position=position,
            flipped=tuple(flipped),
            next_player=self._current,
            passed=passed,
        )

    def skip_turn(self) -> Outcome:
        """
        Pass the turn. Only allowed when the current player has no legal move.
        """
        if self._status is not GameStatus.IN_PROGRESS:
            return self._reject(RejectReason.NOT_IN_PROGRESS)
        if rules.has_legal_move(self._board, self._current.color):
            return self._reject(RejectReason.MOVES_AVAILABLE)

        logger.info("%s has no legal moves and skips", self._current)
        passed = self._advance_turn()
        return Outcome(accepted=True, status=self._status, next_player=self._current, passed=passed)

    def score(self, who: Union[DiskColor, Player]) -> int:
        """
        Count the disks of a color (or a player's color) on the board.

        Returns:
            Number of disks, 0 before the game starts
        """
        color = who.color if isinstance(who, Player) else who
        if self._board is None:
            return 0
        return self._board.count(color)

    def scores(self) -> Dict[DiskColor, int]:
        return {color: self.score(color) for color in DiskColor}

    def finish_game(self) -> None:
        """Decide the result from the final scores and end the game."""
        if self._status is not GameStatus.IN_PROGRESS:
            raise InvalidStateError(f"Cannot finish a game that is {self._status.value}")

        black = self.score(DiskColor.BLACK)
        white = self.score(DiskColor.WHITE)
        if black == white:
            self._status = GameStatus.DRAWN
            self._winner = None
            logger.info("Game over, draw at %d-%d", black, white)
        else:
            self._status = GameStatus.WON
            self._winner = self.player_by_color(DiskColor.BLACK if black > white else DiskColor.WHITE)
            logger.info("Game over, %s wins %d-%d", self._winner, max(black, white), min(black, white))

    def winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning Player, or None if the game is not won (in play or drawn)
        """
        return self._winner if self._status is GameStatus.WON else None

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array, 0 empty, 1 black, 2 white (all zeros before start)
        """
        if self._board is None:
            return np.zeros((self.size, self.size), dtype=int)
        return self._board.get_board_state()

    def _reject(self, reason: RejectReason, position: Optional[Position] = None) -> Outcome:
        logger.debug("Rejected %s from %s: %s", reason.name if position is None else tuple(position),
                     self._current, reason.message)
        return Outcome.rejected(reason, self._status, position=position, next_player=self._current)

    def _advance_turn(self) -> Tuple[Player, ...]:
        self._current = self.opponent_of(self._current)
        return self._check_turn()

    def _check_turn(self) -> Tuple[Player, ...]:
        """
        Check the current player can move, ending the game on a two-sided lockout.

        Returns:
            Players whose turn was passed automatically (only with auto_pass)
        """
        if rules.has_legal_move(self._board, self._current.color):
            return ()

        other = self.opponent_of(self._current)
        if not rules.has_legal_move(self._board, other.color):
            self.finish_game()
            return ()

        if not self.config.auto_pass:
            logger.debug("%s has no legal moves and must skip", self._current)
            return ()

        stuck = self._current
        logger.info("%s has no legal moves, passing to %s", stuck, other)
        self._current = other
        return (stuck,)

    def __str__(self) -> str:
        """String representation of the game state."""
        lines = [str(self._board) if self._board is not None else "(board not set up)"]
        lines.append(f"Current player: {self._current}")
        lines.append(f"Score - Black: {self.score(DiskColor.BLACK)}, White: {self.score(DiskColor.WHITE)}")
        if self._status is GameStatus.DRAWN:
            lines.append("Game over! It's a draw!")
        elif self._status is GameStatus.WON:
            lines.append(f"Game over! {self._winner} wins!")
        return "\n".join(lines)
