"""Game module for Falling Blocks.

Exports the game-state engine and supporting classes:
- GameGrid: Grid representation with row clearing
- Piece / PieceFactory: Tetromino values and random spawning
- collides / merge / try_apply: Collision checks and settling
- resolve_lines: Full-row detection and removal
- rotate_clockwise / kick_rotation: Rotation with the sideways kick search
- ScoringRules: Line clear scoring
- GameSession: Turn sequence and state machine
- GravityTimer / GameController: Real-time gravity scheduling
"""

from .grid import GameGrid
from .pieces import BASE_SHAPES, PIECE_COLORS, Piece, PieceFactory, TetrominoType
from .collision import collides, merge, try_apply
from .lines import resolve_lines
from .rotation import kick_rotation, rotate_clockwise
from .rules import ScoringRules
from .core import Action, GameConfig, GameSession, SessionState
from .timer import GravityTimer
from .controller import GameController

__all__ = [
    "GameGrid",
    "BASE_SHAPES",
    "PIECE_COLORS",
    "Piece",
    "PieceFactory",
    "TetrominoType",
    "collides",
    "merge",
    "try_apply",
    "resolve_lines",
    "kick_rotation",
    "rotate_clockwise",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameSession",
    "SessionState",
    "GravityTimer",
    "GameController",
]
