from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .geometry import Geometry, Player, Space


@dataclass(frozen=True)
class Variant:
    """A ruleset: geometry, the two players and the rule switches that differ between games."""
    name: str
    geometry: Geometry
    players: Tuple[Player, Player]
    symbols: Tuple[str, str]  # one-character glyphs for text rendering
    human: Player  # default human side
    mandatory_entry: bool  # pieces in holding must enter before any piece slides
    prefer_entry: bool  # AI enters pieces from holding before sliding

    def opponent(self, player: Player) -> Player:
        a, b = self.players
        if player == a:
            return b
        if player == b:
            return a
        raise ValueError(f'Unknown player {player!r} for variant {self.name!r}')

    def holding_of(self, player: Player) -> Tuple[Space, ...]:
        return self.geometry.holding[self.players.index(player)]

    def symbol(self, player: Player) -> str:
        return self.symbols[self.players.index(player)]

    def start_layout(self) -> Dict[Space, Player]:
        """Three pieces per player, each on its own holding spaces."""
        layout: Dict[Space, Player] = {}
        for player in self.players:
            for s in self.holding_of(player):
                layout[s] = player
        return layout


# Nine Holes proper: starting rows sit on the board below and above the 3x3 interior.
NINE_HOLES = Variant(
    name='nine-holes',
    geometry=Geometry(
        files=('a', 'b', 'c'),
        ranks=('2', '3', '4'),
        holding=(('a1', 'b1', 'c1'), ('a5', 'b5', 'c5')),
        holding_labels=('1', '5'),
    ),
    players=('x', 'y'),
    symbols=('X', 'O'),
    human='x',
    mandatory_entry=False,
    prefer_entry=True,
)

# Three Men's Morris style: pieces wait off-board and must all be dropped before sliding.
THREE_MENS = Variant(
    name='three-mens',
    geometry=Geometry(
        files=('a', 'b', 'c'),
        ranks=('1', '2', '3'),
        holding=(('p11', 'p12', 'p13'), ('p21', 'p22', 'p23')),
        holding_labels=('p1', 'p2'),
    ),
    players=('white', 'black'),
    symbols=('W', 'B'),
    human='black',
    mandatory_entry=True,
    prefer_entry=False,
)

VARIANTS: Dict[str, Variant] = {v.name: v for v in (NINE_HOLES, THREE_MENS)}


def variant_names() -> List[str]:
    return sorted(VARIANTS)


def get_variant(name: str) -> Variant:
    """Looks up a variant by name, raising ValueError for unknown names."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f'Unknown variant {name!r}; expected one of {variant_names()}') from None
