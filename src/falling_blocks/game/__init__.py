"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid / collides: Playfield, occupancy and collision rules
- Piece / PieceKind / PieceFactory: Shape library and random piece creation
- rotate / resolve_rotation: Quarter-turn rotation with horizontal kicks
- ScoringRules: Line-clear scoring and level cadence
- DropClock / drop_due: Automatic descent timing
- FallingBlocksGame: Session state machine
"""

from .grid import GRID_HEIGHT, GRID_WIDTH, GameGrid, collides
from .pieces import BASE_SHAPES, Piece, PieceFactory, PieceKind, base_shape
from .rotation import KICKS, resolve_rotation, rotate
from .rules import ScoringRules
from .scheduler import DropClock, drop_due
from .core import Action, FallingBlocksGame, GameConfig, GameSnapshot, GameStatus

__all__ = [
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "GameGrid",
    "collides",
    "BASE_SHAPES",
    "Piece",
    "PieceFactory",
    "PieceKind",
    "base_shape",
    "KICKS",
    "rotate",
    "resolve_rotation",
    "ScoringRules",
    "DropClock",
    "drop_due",
    "Action",
    "FallingBlocksGame",
    "GameConfig",
    "GameSnapshot",
    "GameStatus",
]
