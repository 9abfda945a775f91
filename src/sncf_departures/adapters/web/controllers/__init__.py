"""Connection controllers."""

from sncf_departures.adapters.web.controllers.board_controller import (
    DEPARTURES_ERROR,
    JOURNEY_ERROR,
    SEARCH_ERROR,
    BoardController,
)

__all__ = ["DEPARTURES_ERROR", "JOURNEY_ERROR", "SEARCH_ERROR", "BoardController"]
