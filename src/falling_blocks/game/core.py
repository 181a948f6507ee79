from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional

import numpy as np

from .grid import GameGrid, collides
from .pieces import Piece, PieceFactory, RandomSource
from .rotation import resolve_rotation
from .rules import ScoringRules
from .scheduler import DropClock


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    spawn_y: int = 0


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of a session for rendering and UI."""

    score: int
    level: int
    lines: int
    grid: np.ndarray
    current: Optional[Piece]
    next: Optional[Piece]
    x: int
    y: int
    drop_interval_ms: int
    running: bool
    paused: bool
    game_over: bool


GameOverHandler = Callable[[int], None]


class FallingBlocksGame:
    """A single-player session: grid, falling and next piece, counters and run status.

    Every input method returns True when the action was applied and False when
    it was rejected; rejected actions leave the session untouched. Nothing is
    accepted unless the session is running.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[RandomSource] = None,
        on_game_over: Optional[GameOverHandler] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.factory = PieceFactory(rng, seed=self.config.random_seed)
        self.on_game_over = on_game_over
        self.grid = GameGrid()
        self.clock = DropClock()
        self.status = GameStatus.IDLE
        self.game_over = False
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.current_x = 0
        self.current_y = 0
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = self.rules.drop_interval_for_level(1)

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def start(self) -> None:
        self.grid.reset()
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = self.rules.drop_interval_for_level(self.level)
        self.game_over = False
        self.current_piece = None
        self.next_piece = self.factory.new_piece()
        self.clock.reset()
        self.status = GameStatus.RUNNING
        self._spawn_piece()

    def toggle_pause(self) -> bool:
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
            # Time spent paused must not count toward the next drop
            self.clock.reset()
        else:
            return False
        return True

    def _spawn_piece(self) -> None:
        self.current_piece = self.next_piece or self.factory.new_piece()
        self.next_piece = self.factory.new_piece()
        self.current_x = (self.grid.width - self.current_piece.width) // 2
        self.current_y = self.config.spawn_y
        if collides(self.grid, self.current_piece.shape, self.current_x, self.current_y):
            self._end_game()

    def _end_game(self) -> None:
        self.status = GameStatus.IDLE
        self.game_over = True
        self.clock.reset()
        if self.on_game_over is not None:
            self.on_game_over(self.score)

    def _fits(self, x: int, y: int) -> bool:
        assert self.current_piece is not None
        return not collides(self.grid, self.current_piece.shape, x, y)

    def move(self, direction: int) -> bool:
        assert direction in (-1, 1), "direction must be -1 or +1"
        if not self.running:
            return False
        new_x = self.current_x + direction
        if not self._fits(new_x, self.current_y):
            return False
        self.current_x = new_x
        return True

    def move_left(self) -> bool:
        return self.move(-1)

    def move_right(self) -> bool:
        return self.move(1)

    def rotate_current(self) -> bool:
        if not self.running:
            return False
        assert self.current_piece is not None
        resolved = resolve_rotation(self.grid, self.current_piece.shape, self.current_x, self.current_y)
        if resolved is None:
            return False
        shape, x = resolved
        self.current_piece = self.current_piece.with_shape(shape)
        self.current_x = x
        return True

    def _lock_piece(self) -> int:
        assert self.current_piece is not None
        self.grid.merge(self.current_piece.shape, self.current_x, self.current_y, self.current_piece.kind)
        cleared = self.grid.clear_full_rows()
        if cleared:
            self.score += self.rules.score_for_lines(cleared, self.level)
            self.lines += cleared
            self.level = self.rules.level_for_lines(self.lines)
            self.drop_interval_ms = self.rules.drop_interval_for_level(self.level)
        self._spawn_piece()
        return cleared

    def drop(self) -> bool:
        """Move the piece down a row, or settle it if it cannot go further."""
        if not self.running:
            return False
        if self._fits(self.current_x, self.current_y + 1):
            self.current_y += 1
        else:
            self._lock_piece()
        return True

    def soft_drop_step(self) -> bool:
        if not self.running:
            return False
        self.score += self.rules.soft_drop_points
        return self.drop()

    def hard_drop(self) -> bool:
        if not self.running:
            return False
        while self._fits(self.current_x, self.current_y + 1):
            self.current_y += 1
            self.score += self.rules.hard_drop_points
        self._lock_piece()
        return True

    def tick(self, now_ms: float) -> bool:
        """Drive automatic descent; returns True when a drop was performed."""
        if not self.running:
            return False
        if not self.clock.due(now_ms, self.drop_interval_ms):
            return False
        self.drop()
        if self.running:
            self.clock.mark(now_ms)
        return True

    def step(self, action: Action) -> bool:
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE:
            return self.rotate_current()
        if action == Action.SOFT_DROP:
            return self.soft_drop_step()
        if action == Action.HARD_DROP:
            return self.hard_drop()
        return False

    def board(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid; negative marks the falling piece
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells_at(self.current_x, self.current_y):
                if self.grid.is_inside(x, y):
                    state[y, x] = -int(self.current_piece.kind)
        return state

    def get_state(self) -> GameSnapshot:
        return GameSnapshot(
            score=self.score,
            level=self.level,
            lines=self.lines,
            grid=self.grid.clone_state(),
            current=None if self.current_piece is None else self.current_piece.with_shape(self.current_piece.shape),
            next=None if self.next_piece is None else self.next_piece.with_shape(self.next_piece.shape),
            x=self.current_x,
            y=self.current_y,
            drop_interval_ms=self.drop_interval_ms,
            running=self.running,
            paused=self.status is GameStatus.PAUSED,
            game_over=self.game_over,
        )
