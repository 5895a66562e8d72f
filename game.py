from __future__ import annotations

# Facade module that re-exports the Nine Holes core.
# Used by the Flask app, the console script and the tests.
# Single-responsibility modules live under nineholes_core/*.

from nineholes_core.geometry import Geometry, Line, Occupant, Player, Space  # noqa: F401
from nineholes_core.variants import (  # noqa: F401
    NINE_HOLES,
    THREE_MENS,
    VARIANTS,
    Variant,
    get_variant,
    variant_names,
)
from nineholes_core.move import Move  # noqa: F401
from nineholes_core.state import Position  # noqa: F401
from nineholes_core.board import Board  # noqa: F401
from nineholes_core.rules import (  # noqa: F401
    pickable,
    starting_spaces,
    playable_spaces,
    moves,
    destinations,
    is_legal,
    winner,
    winning,
)
from nineholes_core.rng import RandomSource  # noqa: F401
from nineholes_core.ai import ai_pick_move  # noqa: F401
from nineholes_core.stage import Stage  # noqa: F401
from nineholes_core.session import GameSession, SessionSnapshot  # noqa: F401


def play_moves(board: Board, notation) -> bool:
    """Applies 'a1-a2' style moves to ``board`` in order; False if any of them was a no-op."""
    ok = True
    for text in notation:
        m = Move.parse(text)
        ok = board.move(m.start, m.end) and ok
    return ok


def main() -> None:
    # CLI driver delegated to nineholes_core.cli
    from nineholes_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
