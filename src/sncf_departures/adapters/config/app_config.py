"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sncf_departures.adapters.sncf_api.constants import SNCF_BASE_URL


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    title: str = Field(default="Départs des Trains", description="Page title and heading")
    banner_color: str = Field(default="#2563EB", description="Heading color (hex color code)")

    # SNCF API configuration
    sncf_api_base_url: str = Field(
        default=SNCF_BASE_URL, description="Base URL of the SNCF Navitia coverage"
    )
    sncf_api_key: str = Field(default="", description="SNCF API key (sent as basic auth user)")
    sncf_api_timeout: int = Field(default=10, description="Timeout for SNCF API requests in seconds")
    sncf_api_min_delay_seconds: float = Field(
        default=0.1, description="Minimum delay between two outgoing SNCF API requests"
    )

    # Query sizes
    search_result_count: int = Field(default=10, description="Maximum stations per search")
    departures_count: int = Field(default=20, description="Departures requested per station")
    departures_depth: int = Field(default=3, description="Expansion depth of departure objects")
    reports_count: int = Field(default=50, description="Reports requested per poll")
    reports_depth: int = Field(default=3, description="Expansion depth of report objects")

    # Interaction
    search_min_length: int = Field(
        default=2, description="Minimum query length before a station search is sent"
    )
    search_debounce_ms: int = Field(
        default=300, description="Quiet period after the last keystroke before searching"
    )
    report_refresh_interval_seconds: int = Field(
        default=300, description="Interval between disruption/equipment report refreshes"
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    @field_validator("search_min_length")
    @classmethod
    def validate_search_min_length(cls, v: int) -> int:
        """Validate the minimum search length is at least one character."""
        if v < 1:
            raise ValueError("search_min_length must be at least 1")
        return v

    @field_validator(
        "search_debounce_ms",
        "report_refresh_interval_seconds",
        "sncf_api_timeout",
        "rate_limit_per_minute",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate intervals and limits are strictly positive."""
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @property
    def search_debounce_seconds(self) -> float:
        return self.search_debounce_ms / 1000.0
