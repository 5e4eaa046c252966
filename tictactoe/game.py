# tictactoe/game.py

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Mark(str, Enum):
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


# rows, columns, diagonals; order decides which line is reported
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD = (None,) * 9


@dataclass(frozen=True)
class InProgress:
    next_player: Mark


@dataclass(frozen=True)
class Won:
    player: Mark
    line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    pass


def derive_status(board, turn):
    """
    Work out where the game stands from the board alone.

    The first line in WIN_LINES whose three cells hold the same mark wins.
    A full board without such a line is a draw, anything else is still in
    progress with `turn` to move.
    """
    for a, b, c in WIN_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Won(player=board[a], line=(a, b, c))

    if all(cell is not None for cell in board):
        return Draw()

    return InProgress(next_player=turn)


@dataclass(frozen=True)
class GameState:
    board: Tuple[Optional[Mark], ...] = EMPTY_BOARD
    turn: Mark = Mark.X

    def __post_init__(self):
        if len(self.board) != 9:
            raise ValueError(f"board must have 9 cells, got {len(self.board)}")
        object.__setattr__(self, "board", tuple(self.board))

    @property
    def status(self):
        return derive_status(self.board, self.turn)

    def play(self, index):
        """Return the state after `index` is marked, or self if the move is not allowed."""
        if isinstance(index, bool) or not isinstance(index, int):
            return self
        if not 0 <= index < 9:
            return self
        if self.board[index] is not None:
            return self
        if not isinstance(self.status, InProgress):
            return self

        board = list(self.board)
        board[index] = self.turn
        return GameState(board=tuple(board), turn=self.turn.opposite())


@dataclass
class TicTacToeGame:
    chat_id: Optional[int] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    state: GameState = field(default_factory=GameState)

    @property
    def board(self):
        return self.state.board

    @property
    def turn(self):
        return self.state.turn

    @property
    def status(self):
        return self.state.status

    @property
    def is_over(self):
        return not isinstance(self.status, InProgress)

    def make_move(self, index):
        new_state = self.state.play(index)
        if new_state is self.state:
            return False  # ignored
        self.state = new_state
        return True

    def restart(self):
        self.state = GameState()
