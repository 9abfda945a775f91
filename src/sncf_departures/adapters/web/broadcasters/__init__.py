"""Pub/sub broadcasters."""

from sncf_departures.adapters.web.broadcasters.state_broadcaster import (
    UPDATE_MESSAGE,
    StateBroadcaster,
)

__all__ = ["UPDATE_MESSAGE", "StateBroadcaster"]
