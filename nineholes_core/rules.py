from __future__ import annotations

from typing import List

from .geometry import Occupant, Player, Space
from .move import Move
from .state import Position


def pickable(position: Position, player: Player) -> List[Space]:
    """Spaces currently occupied by ``player``."""
    return position.spaces_of(player)


def starting_spaces(position: Position) -> List[Space]:
    """Holding/starting spaces. Pieces leave them and never come back."""
    holding = position.variant.geometry.holding
    return list(holding[0] + holding[1])


def playable_spaces(position: Position) -> List[Space]:
    """Empty interior spaces, i.e. every space a piece may currently move into."""
    return [s for s in position.variant.geometry.interior() if position.at(s) is None]


def moves(position: Position, player: Player) -> List[Move]:
    """All legal moves for ``player``.

    Every pickable piece may go to any playable space. When the variant has
    mandatory entry and ``player`` still holds pieces, only those pieces may move.
    """
    geo = position.variant.geometry
    origins = pickable(position, player)
    if position.variant.mandatory_entry:
        entering = [s for s in origins if geo.is_holding(s)]
        if entering:
            origins = entering
    dests = playable_spaces(position)
    return [Move(s, e) for s in origins for e in dests]


def destinations(position: Position, player: Player, start: Space) -> List[Space]:
    return [m.end for m in moves(position, player) if m.start == start]


def is_legal(position: Position, player: Player, move: Move) -> bool:
    return move in moves(position, player)


def winner(position: Position) -> Occupant:
    """The player owning a full interior row or column, rows checked first; None otherwise."""
    for line in position.variant.geometry.lines():
        first = position.at(line[0])
        if first is None:
            continue
        if all(position.at(s) == first for s in line[1:]):
            return first
    return None


def winning(position: Position, player: Player) -> List[Move]:
    """Legal moves after which ``player`` owns a complete line."""
    return [m for m in moves(position, player) if winner(position.with_move(m)) == player]
