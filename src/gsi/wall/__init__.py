"""Wall state container for gas-surface interaction models."""

from .variable_sets import VariableSet
from .wall_state import WallState

__all__ = [
    "VariableSet",
    "WallState",
]
