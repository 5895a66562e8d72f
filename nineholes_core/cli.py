from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .ai import ai_pick_move
from .logconf import configure_logging
from .rng import RandomSource
from .session import GameSession
from .variants import variant_names

logger = logging.getLogger(__name__)


def _status(session: GameSession) -> str:
    w = session.query_winner()
    if w is not None:
        return 'You win!' if w == session.human else f'{w} wins.'
    picked = session.query_picked()
    if picked is None:
        return f'Pick one of your pieces ({session.human}).'
    return f'Picked {picked}; choose a destination, another piece, or anything else to cancel.'


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Nine Holes against a rule-based AI')
    parser.add_argument('--variant', choices=variant_names(),
                        default=os.getenv('NINE_HOLES_VARIANT', 'nine-holes'), help='Ruleset to play')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for AI tie-breaks')
    parser.add_argument('--human', default=None, help='Side to play (defaults to the variant\'s human side)')
    parser.add_argument('--ai-starts', action='store_true', help='Let the AI make the opening move')
    parser.add_argument('--play', action='store_true', help='Play interactively against the AI')
    args = parser.parse_args(argv)
    configure_logging()

    session = GameSession(args.variant, seed=args.seed, human=args.human, ai_starts=args.ai_starts)
    logger.debug('cli session variant=%s human=%s seed=%s', args.variant, session.human, args.seed)

    if not args.play:
        print('Initial board:')
        print(session.query_board().pretty())
        legal = session.legal_moves()
        print(f'\n{session.human} has {len(legal)} legal moves.')
        hint = ai_pick_move(session.query_board(), session.human, session.ai, RandomSource(args.seed))
        if hint is not None:
            print('Suggested move:', hint)
        return

    print(f'You are {session.human}; the AI plays {session.ai}.')
    print("Enter a space id to select it, 'r' to reset, 'q' to quit.")
    while True:
        print()
        print(session.query_board().pretty(session.query_picked()))
        print(_status(session))
        try:
            text = input('> ').strip()
        except EOFError:
            break
        if text == 'q':
            break
        if text == 'r':
            session.reset()
            continue
        before = session.last_ai_move
        session.submit_selection(text)
        after = session.last_ai_move
        if after is not None and after is not before:
            print(f'AI moves {after}')


if __name__ == '__main__':
    main()
