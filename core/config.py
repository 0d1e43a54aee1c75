# =============================================================================
# core/config.py  —  Credentials & Service Endpoints
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the three fixed MessageBird base URLs and loads the one required
#   credential (MESSAGEBIRD_API_KEY) into an immutable Settings value.
#
# HOW IT IS USED:
#   main.py calls load_settings() exactly once at startup.  The resulting
#   Settings object is handed to MessageBirdClient; nothing below this point
#   reads the environment again.
#
#   A missing key raises ConfigError.  main.py turns that into a diagnostic
#   on stderr and exits before a single tool is registered.
# =============================================================================

from dataclasses import dataclass
import os

from core.models import ApiTarget


API_KEY_ENV = "MESSAGEBIRD_API_KEY"

BASE_URLS: dict[ApiTarget, str] = {
    ApiTarget.CONVERSATIONS: "https://conversations.messagebird.com/v1",
    ApiTarget.INTEGRATIONS: "https://integrations.messagebird.com",
    ApiTarget.REST: "https://rest.messagebird.com",
}


class ConfigError(Exception):
    """Raised when a required setting is missing from the environment."""


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once and shared read-only."""

    api_key: str

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks.
        return "Settings(api_key='***')"


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to ``os.environ``; tests
                 pass a plain dict.

    Raises:
        ConfigError: If MESSAGEBIRD_API_KEY is unset or empty.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV, "")
    if not api_key:
        raise ConfigError(
            f"Missing required environment variable: {API_KEY_ENV}\n"
            f"  {API_KEY_ENV} is required.\n"
            "  Get your API key at: https://dashboard.messagebird.com "
            "→ Developers → API access"
        )
    return Settings(api_key=api_key)


def base_url(target: ApiTarget) -> str:
    """Resolve a logical API target to its base URL."""
    return BASE_URLS[target]
