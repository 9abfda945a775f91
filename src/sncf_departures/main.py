"""Main entry point for the SNCF departures application."""

import asyncio
import logging
import sys

import aiohttp

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfTransitClient
from sncf_departures.adapters.web import PyViewWebAdapter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    if not config.sncf_api_key:
        logger.error("SNCF_API_KEY is not set; get a key at https://numerique.sncf.com/startup/api/")
        sys.exit(1)

    # One session for every outgoing request of the process
    async with aiohttp.ClientSession() as session:
        transit_client = SncfTransitClient.from_config(session, config)
        display_adapter = PyViewWebAdapter(transit_client, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
