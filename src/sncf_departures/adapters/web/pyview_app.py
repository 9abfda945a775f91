"""PyView web adapter serving the departures board."""

from __future__ import annotations

import logging
from typing import Any

import uvicorn
from markupsafe import Markup
from pyview import PyView
from pyview.playground.favicon import generate_favicon_svg
from pyview.template import defaultRootTemplate
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfTransitClient

from .rate_limit_middleware import RateLimitMiddleware
from .state import State
from .views.departures import create_departures_live_view

logger = logging.getLogger(__name__)


async def healthz(_request: Request) -> PlainTextResponse:
    """Health check endpoint for load balancers and monitoring."""
    return PlainTextResponse("Ok")


class PyViewWebAdapter:
    """Builds the PyView application and runs it under uvicorn."""

    def __init__(self, transit_client: SncfTransitClient, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            transit_client: Repositories for the four remote queries.
            config: Application configuration.
        """
        self.transit_client = transit_client
        self.config = config
        self.state = State(
            report_repository=transit_client.reports,
            refresh_interval_seconds=config.report_refresh_interval_seconds,
        )
        self._server: uvicorn.Server | None = None

    def create_app(self) -> Any:
        """Create the ASGI app: LiveView at "/", health check, rate limiting."""
        app = PyView()
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=Markup('<link rel="icon" href="/favicon.svg" type="image/svg+xml">'),
        )
        app.routes.append(Route("/favicon.svg", self._favicon_route(), methods=["GET"]))

        live_view_class = create_departures_live_view(
            self.state,
            self.transit_client.stations,
            self.transit_client.departures,
            self.transit_client.journeys,
            self.config,
        )
        app.add_live_view("/", live_view_class)
        app.routes.append(Route("/healthz", healthz, methods=["GET"]))

        return RateLimitMiddleware(app, requests_per_minute=self.config.rate_limit_per_minute)

    def _favicon_route(self) -> Any:
        """Route serving an SVG favicon generated from the title and banner colour."""
        favicon_svg = generate_favicon_svg(
            self.config.title, bg_color=self.config.banner_color, text_color="#FFFFFF"
        )

        async def favicon(_request: Request) -> Response:
            response = Response(content=favicon_svg, media_type="image/svg+xml")
            response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
            return response

        return favicon

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        server_config = uvicorn.Config(
            self.create_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving departures board on http://{self.config.host}:{self.config.port}/")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server and the report poller."""
        await self.state.stop_report_poller()
        if self._server:
            self._server.should_exit = True
