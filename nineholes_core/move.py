from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geometry import Space


@dataclass(frozen=True)
class Move:
    """A piece relocation from ``start`` to ``end``. Well-formed only; legality lives in rules."""
    start: Space
    end: Space

    def __str__(self) -> str:
        return f'{self.start}-{self.end}'

    @classmethod
    def parse(cls, value: Any) -> 'Move':
        """Builds a Move from 'a1-a2' text or a two-item list/tuple; raises ValueError otherwise."""
        if isinstance(value, Move):
            return value
        if isinstance(value, str):
            parts = [p.strip() for p in value.split('-')]
        elif isinstance(value, (list, tuple)):
            parts = list(value)
        else:
            raise ValueError(f'Cannot parse move from {value!r}')
        if len(parts) != 2 or not all(isinstance(p, str) and p for p in parts):
            raise ValueError(f'Move must name exactly two spaces: {value!r}')
        start, end = parts
        if start == end:
            raise ValueError(f'Move must change space: {value!r}')
        return cls(start, end)
