"""Broadcaster for state updates."""

from __future__ import annotations

import logging

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

from sncf_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol

logger = logging.getLogger(__name__)

UPDATE_MESSAGE = "update"


class StateBroadcaster(StateBroadcasterProtocol):
    """Sends an update signal to the LiveViews subscribed to a topic."""

    async def broadcast_update(self, topic: str) -> None:
        """Broadcast an update signal to all subscribers on the topic.

        Delivery failures are logged and never propagate to the caller.

        Args:
            topic: The pub/sub topic to broadcast to.
        """
        try:
            pubsub = PubSub(pub_sub_hub, topic)
            await pubsub.send_all_on_topic_async(topic, UPDATE_MESSAGE)
            logger.debug(f"Broadcasted update to topic: {topic}")
        except Exception as e:
            logger.error(f"Failed to broadcast to {topic}: {e}", exc_info=True)
