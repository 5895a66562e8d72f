from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

Space = str  # 'a2', 'c4', 'p21', ...
Player = str  # 'x', 'y', 'white', 'black'
Occupant = Optional[Player]  # None == empty
Line = Tuple[Space, ...]


@dataclass(frozen=True)
class Geometry:
    """Fixed layout of a board: the interior grid plus each player's holding spaces."""
    files: Tuple[str, ...]  # left to right
    ranks: Tuple[str, ...]  # interior ranks, bottom to top
    holding: Tuple[Tuple[Space, ...], Tuple[Space, ...]]  # per player, in fill order
    holding_labels: Tuple[str, str] = ('', '')

    def interior(self) -> Tuple[Space, ...]:
        """Interior spaces, rank-major from the bottom rank."""
        return tuple(f + r for r in self.ranks for f in self.files)

    def spaces(self) -> Tuple[Space, ...]:
        """Every space in board order: first holding row, interior, second holding row."""
        return self.holding[0] + self.interior() + self.holding[1]

    def index(self, space: Space) -> int:
        return self.spaces().index(space)

    def contains(self, space: Space) -> bool:
        return space in self.spaces()

    def is_holding(self, space: Space) -> bool:
        return space in self.holding[0] or space in self.holding[1]

    def rows(self) -> List[Line]:
        return [tuple(f + r for f in self.files) for r in self.ranks]

    def columns(self) -> List[Line]:
        return [tuple(f + r for r in self.ranks) for f in self.files]

    def lines(self) -> List[Line]:
        """Lines that count for a win: interior rows first, then interior columns."""
        return self.rows() + self.columns()
