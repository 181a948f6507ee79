from __future__ import annotations

import itertools
from typing import Any, Callable, List, Sequence

import pytest

from falling_blocks.game import FallingBlocksGame, PieceKind


class FixedKinds:
    """Random source that hands out piece kinds in a fixed, repeating order."""

    def __init__(self, *kinds: PieceKind) -> None:
        self._kinds = itertools.cycle(kinds)

    def choice(self, seq: Sequence[Any]) -> Any:
        kind = next(self._kinds)
        assert kind in seq
        return kind


@pytest.fixture
def make_game() -> Callable[..., FallingBlocksGame]:
    def _make(*kinds: PieceKind, on_game_over=None) -> FallingBlocksGame:
        game = FallingBlocksGame(rng=FixedKinds(*(kinds or (PieceKind.O,))), on_game_over=on_game_over)
        game.start()
        return game

    return _make


@pytest.fixture
def reported_scores() -> List[int]:
    return []
