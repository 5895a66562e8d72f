from __future__ import annotations

from typing import Optional

from .geometry import Space
from .move import Move
from .state import Position
from .variants import Variant


class Board:
    """Owns the current position of one game. The only mutable board state in a session."""

    def __init__(self, variant: Variant, position: Optional[Position] = None) -> None:
        if position is not None and position.variant != variant:
            raise ValueError(f'Position belongs to {position.variant.name}, not {variant.name}')
        self.variant = variant
        self._position = position if position is not None else Position.initial(variant)

    def reset(self) -> None:
        self._position = Position.initial(self.variant)

    def get(self) -> Position:
        # Positions are frozen, so handing out the current one cannot leak mutation.
        return self._position

    def move(self, start: Space, end: Space) -> bool:
        """Relocates the piece on ``start`` to the empty ``end``; a no-op returning False otherwise.

        Legality is not checked here, callers consult the rules first.
        """
        geo = self.variant.geometry
        if start == end or not geo.contains(start) or not geo.contains(end):
            return False
        before = self._position
        if before.at(start) is None or before.at(end) is not None:
            return False
        after = before.with_move(Move(start, end))
        assert after.piece_counts() == before.piece_counts(), 'piece count changed by move'
        self._position = after
        return True
