from __future__ import annotations

import logging
from typing import Optional

from .geometry import Player
from .move import Move
from .rng import RandomSource
from .rules import moves, winning
from .state import Position

logger = logging.getLogger(__name__)


def ai_pick_move(position: Position, player: Player, opponent: Player, rng: RandomSource) -> Optional[Move]:
    """
    Picks a move for ``player`` by strict priority, choosing at random within the first
    non-empty group: immediate wins, blocks of the opponent's wins, entries from holding
    (variants that prefer them), then any legal move. Returns None if no move exists.
    """
    legal = moves(position, player)
    if not legal:
        return None

    wins = winning(position, player)
    if wins:
        logger.debug('ai %s: %d winning moves', player, len(wins))
        return rng.pick(wins)

    threats = {m.end for m in winning(position, opponent)}
    if threats:
        blocks = [m for m in legal if m.end in threats]
        if blocks:
            logger.debug('ai %s: blocking %s', player, sorted(threats))
            return rng.pick(blocks)

    if position.variant.prefer_entry:
        geo = position.variant.geometry
        entering = [m for m in legal if geo.is_holding(m.start)]
        if entering:
            return rng.pick(entering)

    return rng.pick(legal)
