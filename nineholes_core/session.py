from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .board import Board
from .geometry import Occupant, Player, Space
from .move import Move
from .rng import RandomSource
from .rules import moves, winner
from .stage import Stage
from .state import Position
from .variants import get_variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a front end redraws from, taken in one locked read."""
    position: Position
    picked: Optional[Space]
    winner: Occupant
    legal_moves: Tuple[Move, ...]  # human's; empty once the game is over
    last_ai_move: Optional[Move]


class GameSession:
    """One game: a board, its turn controller and its tie-breaking RNG.

    Every public method takes the session lock, so a selection and the AI reply
    it triggers finish before any other call on the same session runs.
    """

    def __init__(
        self,
        variant: str = 'nine-holes',
        seed: Optional[int] = None,
        human: Optional[Player] = None,
        ai_starts: bool = False,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.variant = get_variant(variant)
        self.human = human if human is not None else self.variant.human
        self.ai = self.variant.opponent(self.human)  # raises ValueError for unknown tokens
        self.seed = seed
        self.rng = RandomSource(seed)
        self.board = Board(self.variant)
        self._lock = threading.RLock()
        self.stage = Stage(self.board, self.human, self.ai, self.rng, on_change=on_change, ai_starts=ai_starts)
        logger.debug('new session variant=%s human=%s seed=%s', self.variant.name, self.human, seed)

    def reset(self) -> None:
        with self._lock:
            self.stage.reset()

    def submit_selection(self, space: Space) -> bool:
        with self._lock:
            return self.stage.next(space)

    def query_board(self) -> Position:
        with self._lock:
            return self.board.get()

    def query_picked(self) -> Optional[Space]:
        with self._lock:
            return self.stage.picked

    def query_winner(self) -> Occupant:
        with self._lock:
            return winner(self.board.get())

    def legal_moves(self) -> List[Move]:
        """The human's legal moves; empty once the game is over."""
        with self._lock:
            position = self.board.get()
            if winner(position) is not None:
                return []
            return moves(position, self.human)

    @property
    def last_ai_move(self) -> Optional[Move]:
        with self._lock:
            return self.stage.last_ai_move

    def snapshot(self) -> SessionSnapshot:
        """Board, pick, winner, legal moves and last AI move read together under the lock."""
        with self._lock:
            position = self.board.get()
            won = winner(position)
            return SessionSnapshot(
                position=position,
                picked=self.stage.picked,
                winner=won,
                legal_moves=tuple(moves(position, self.human)) if won is None else (),
                last_ai_move=self.stage.last_ai_move,
            )

    def select(self, space: Space) -> Tuple[bool, SessionSnapshot]:
        """Like submit_selection, but also returns the state that selection produced."""
        with self._lock:
            changed = self.stage.next(space)
            return changed, self.snapshot()

    def restart(self) -> SessionSnapshot:
        with self._lock:
            self.stage.reset()
            return self.snapshot()
