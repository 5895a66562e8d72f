from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .geometry import Occupant, Player, Space
from .move import Move
from .variants import Variant


@dataclass(frozen=True)
class Position:
    """Immutable snapshot of a board: the variant plus one occupant per space, in board order."""
    variant: Variant
    cells: Tuple[Occupant, ...]

    @classmethod
    def initial(cls, variant: Variant) -> 'Position':
        return cls.from_mapping(variant, variant.start_layout())

    @classmethod
    def from_mapping(cls, variant: Variant, occupants: Mapping[Space, Occupant]) -> 'Position':
        """Builds a position from a space -> occupant mapping; unlisted spaces are empty."""
        spaces = variant.geometry.spaces()
        unknown = [s for s in occupants if s not in spaces]
        if unknown:
            raise ValueError(f'Unknown spaces for {variant.name}: {unknown}')
        for occ in occupants.values():
            if occ is not None and occ not in variant.players:
                raise ValueError(f'Unknown occupant {occ!r} for {variant.name}')
        return cls(variant, tuple(occupants.get(s) for s in spaces))

    def at(self, space: Space) -> Occupant:
        return self.cells[self.variant.geometry.index(space)]

    def occupants(self) -> Dict[Space, Occupant]:
        """A fresh space -> occupant dict; editing it does not touch this position."""
        return dict(zip(self.variant.geometry.spaces(), self.cells))

    def spaces_of(self, player: Player) -> List[Space]:
        return [s for s, occ in zip(self.variant.geometry.spaces(), self.cells) if occ == player]

    def piece_counts(self) -> Dict[Player, int]:
        return {p: self.cells.count(p) for p in self.variant.players}

    def with_move(self, move: Move) -> 'Position':
        """Returns a copy with the piece on ``move.start`` relocated to ``move.end``."""
        spaces = self.variant.geometry.spaces()
        i, j = spaces.index(move.start), spaces.index(move.end)
        cells = list(self.cells)
        cells[j] = cells[i]
        cells[i] = None
        return Position(self.variant, tuple(cells))

    def pretty(self, picked: Optional[Space] = None) -> str:
        """Text rendering, top rank first, with holding rows above and below the interior."""
        geo = self.variant.geometry

        def glyph(space: Space) -> str:
            occ = self.at(space)
            g = '.' if occ is None else self.variant.symbol(occ)
            return f'[{g}]' if space == picked else f' {g} '

        width = max(len(lbl) for lbl in geo.holding_labels + geo.ranks)
        out: List[str] = []
        out.append(f"{geo.holding_labels[1]:>{width}} " + ''.join(glyph(s) for s in geo.holding[1]))
        for rank, row in reversed(list(zip(geo.ranks, geo.rows()))):
            out.append(f"{rank:>{width}} " + ''.join(glyph(s) for s in row))
        out.append(f"{geo.holding_labels[0]:>{width}} " + ''.join(glyph(s) for s in geo.holding[0]))
        out.append(' ' * (width + 1) + ''.join(f' {f} ' for f in geo.files))
        return '\n'.join(out)
