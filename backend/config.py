"""Runtime configuration for the SEO Analyzer API.

The listen port may be overridden in a .env file in the backend root:

PORT=5000

The app loads environment variables automatically using python-dotenv.
"""

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

DEFAULT_PORT = 5000
FETCH_TIMEOUT_SECONDS = 10.0
PROBE_TIMEOUT_SECONDS = 5.0
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


@dataclass(frozen=True)
class ServerConfig:
    """Settings handed to the HTTP server at process start."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "info"


def _env_port(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        port = int(raw)
    except ValueError:
        return default
    if port < 1 or port > 65535:
        return default
    return port


def load_server_config() -> ServerConfig:
    """Build the server configuration from the environment (PORT only)."""
    return ServerConfig(port=_env_port("PORT", DEFAULT_PORT))


def configure_logging(level: str = "info") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
