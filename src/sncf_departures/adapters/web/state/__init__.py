"""State management for the web adapter."""

from .board_state import BoardState
from .reports_state import ReportsState
from .state import REPORTS_TOPIC, State

__all__ = ["REPORTS_TOPIC", "BoardState", "ReportsState", "State"]
