"""Personal Budget API configuration management.

Loads configuration from environment variables with sensible defaults.
The only setting the API itself needs is the listening port; the rest
tunes logging, CORS and optional metrics.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class ServerConfig:
    """HTTP listener configuration."""

    host: str = "0.0.0.0"
    port: int = 3000


@dataclass
class CORSConfig:
    """Cross-origin policy. Every origin is allowed unless narrowed."""

    allow_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class AppConfig:
    """Root application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    log_level: str = "INFO"
    json_logs: bool = False
    enable_metrics: bool = False
    api_title: str = "Personal Budget API"

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Optional (with defaults):
        - PORT: Listening port (default: 3000)
        - HOST: Bind address (default: "0.0.0.0")
        - LOG_LEVEL: Logging verbosity (default: "INFO")
        - JSON_LOGS: Emit JSON log lines (default: "false")
        - CORS_ORIGINS: Comma-separated allowed origins (default: "*")
        - ENABLE_METRICS: Expose Prometheus /metrics (default: "false")

        Raises:
            ValueError: If PORT is not a valid TCP port
        """
        return cls(
            server=ServerConfig(
                host=os.getenv("HOST", "0.0.0.0"),
                port=parse_port(os.getenv("PORT", "3000")),
            ),
            cors=CORSConfig(
                allow_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
            enable_metrics=os.getenv("ENABLE_METRICS", "false").lower() == "true",
            api_title=os.getenv("API_TITLE", "Personal Budget API"),
        )


def parse_port(raw: str) -> int:
    """Parse a TCP port number, rejecting anything outside 1..65535."""
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")
    return port


def _split_csv(raw: str) -> list[str]:
    values = [part.strip() for part in raw.split(",") if part.strip()]
    return values or ["*"]


# Singleton instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create singleton AppConfig instance from environment.

    Returns:
        AppConfig: Application configuration
    """
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
