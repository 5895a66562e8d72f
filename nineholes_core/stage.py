from __future__ import annotations

import logging
from typing import Callable, Optional

from .ai import ai_pick_move
from .board import Board
from .geometry import Player, Space
from .move import Move
from .rng import RandomSource
from .rules import destinations, pickable, winner

logger = logging.getLogger(__name__)


class Stage:
    """
    Turn controller. Holds at most one picked space for the human and turns each
    selected space into a pick, a re-pick, a cancel, or a move followed by the AI's
    reply. Illegal input never raises; it falls into one of those branches.
    """

    def __init__(
        self,
        board: Board,
        human: Player,
        ai: Player,
        rng: RandomSource,
        on_change: Optional[Callable[[], None]] = None,
        ai_starts: bool = False,
    ) -> None:
        self.board = board
        self.human = human
        self.ai = ai
        self.rng = rng
        self.on_change = on_change
        self.ai_starts = ai_starts
        self.picked: Optional[Space] = None
        self.last_ai_move: Optional[Move] = None
        if ai_starts:
            self._ai_turn()

    def reset(self) -> None:
        self.picked = None
        self.last_ai_move = None
        self.board.reset()
        if self.ai_starts:
            self._ai_turn()
        self._changed()

    def next(self, space: Space) -> bool:
        """Feeds one selected space to the controller. Returns True if any state changed."""
        position = self.board.get()
        if winner(position) is not None:
            return False

        if self.picked is None:
            if space in pickable(position, self.human):
                self.picked = space
                logger.debug('pick %s', space)
                self._changed()
                return True
            return False

        start = self.picked
        if space in destinations(position, self.human, start):
            self.picked = None
            self.board.move(start, space)
            logger.debug('human %s: %s-%s', self.human, start, space)
            if winner(self.board.get()) is None:
                self._ai_turn()
            else:
                logger.debug('winner %s', self.human)
            self._changed()
            return True

        if space in pickable(position, self.human):
            self.picked = space
            logger.debug('re-pick %s', space)
        else:
            self.picked = None
            logger.debug('cancel pick %s', start)
        self._changed()
        return True

    def _ai_turn(self) -> None:
        position = self.board.get()
        move = ai_pick_move(position, self.ai, self.human, self.rng)
        self.last_ai_move = move
        if move is None:
            logger.debug('ai %s has no legal move; turn forfeited', self.ai)
            return
        self.board.move(move.start, move.end)
        logger.debug('ai %s: %s', self.ai, move)
        if winner(self.board.get()) is not None:
            logger.debug('winner %s', self.ai)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
