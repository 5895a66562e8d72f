"""
Nine Holes core Python package.

Pure game logic for Nine Holes and its Three Men's Morris style sibling,
kept apart from the HTTP app and the CLI so it can be tested on its own.
Modules:
- geometry.py: Geometry, Space, Player, Occupant
- variants.py: Variant, NINE_HOLES, THREE_MENS
- state.py: Position (immutable board snapshot)
- board.py: Board (owner of the current position)
- move.py: Move
- rules.py: legal moves and win detection
- rng.py: RandomSource
- ai.py: rule-based opponent
- stage.py: Stage (turn controller)
- session.py: GameSession (public game API)
"""
