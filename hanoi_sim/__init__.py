"""
Tower of Hanoi interactive simulator.

Components:
    - state.py  : Rod/disk state machine (HanoiState, RodId, errors)
    - config.py : Session configuration (GameConfig, MAX_N)
    - prompts.py: Menu, instructions and status messages
    - render.py : Text and PNG rendering of board snapshots
    - cli.py    : Interactive console driver (hanoi-sim)
"""

from .config import MAX_N, GameConfig
from .state import (
    EmptySource,
    GamePhase,
    HanoiError,
    HanoiState,
    IllegalMove,
    InvalidConfiguration,
    RodId,
    UnrecognizedRod,
)

__all__ = [
    "MAX_N",
    "GameConfig",
    "HanoiState",
    "RodId",
    "GamePhase",
    "HanoiError",
    "InvalidConfiguration",
    "IllegalMove",
    "EmptySource",
    "UnrecognizedRod",
]
