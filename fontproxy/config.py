"""
Runtime configuration for the font-face CSS proxy.

Settings are read from ``FONTPROXY_*`` environment variables. Two deployment
profiles bundle the response caching policy and CORS behaviour.

License: MIT
"""

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class Profile:
    """Response policy of a deployment target."""
    cache_control: str
    cors: bool


# Deployment profiles
PROFILES: Dict[str, Profile] = {
    "edge": Profile(
        cache_control="max-age=86400, s-maxage=1, stale-while-revalidate",
        cors=True,
    ),
    "serverless": Profile(
        cache_control="private, max-age=86400",
        cors=False,
    ),
}

DEFAULT_PROFILE = "edge"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class ProxySettings:
    """Proxy settings with defaults matching the Google Fonts API."""
    upstream_url: str = "https://fonts.googleapis.com"
    css_path: str = "/css2"
    cache_control: str = PROFILES[DEFAULT_PROFILE].cache_control
    cors: bool = PROFILES[DEFAULT_PROFILE].cors
    timeout: float = 10.0  # seconds, single attempt
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_profile(cls, name: str, **overrides) -> "ProxySettings":
        """
        Build settings from a named profile.

        Args:
            name: Profile name ('edge' or 'serverless')
            **overrides: Field values replacing the defaults

        Raises:
            ValueError: If the profile is unknown
        """
        try:
            profile = PROFILES[name]
        except KeyError:
            raise ValueError(f"Unknown profile '{name}' (expected one of: {', '.join(PROFILES)})") from None
        values = {"cache_control": profile.cache_control, "cors": profile.cors}
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProxySettings":
        """Build settings from ``FONTPROXY_*`` environment variables."""
        env = os.environ if environ is None else environ
        overrides = {}

        if "FONTPROXY_UPSTREAM_URL" in env:
            overrides["upstream_url"] = env["FONTPROXY_UPSTREAM_URL"].rstrip("/")
        if "FONTPROXY_CSS_PATH" in env:
            overrides["css_path"] = "/" + env["FONTPROXY_CSS_PATH"].lstrip("/")
        if "FONTPROXY_CACHE_CONTROL" in env:
            overrides["cache_control"] = env["FONTPROXY_CACHE_CONTROL"]
        if "FONTPROXY_CORS" in env:
            overrides["cors"] = _as_bool(env["FONTPROXY_CORS"])
        if "FONTPROXY_TIMEOUT" in env:
            overrides["timeout"] = float(env["FONTPROXY_TIMEOUT"])
        if "FONTPROXY_HOST" in env:
            overrides["host"] = env["FONTPROXY_HOST"]
        if "FONTPROXY_PORT" in env:
            overrides["port"] = int(env["FONTPROXY_PORT"])
        if "FONTPROXY_LOG_LEVEL" in env:
            overrides["log_level"] = env["FONTPROXY_LOG_LEVEL"].upper()

        return cls.from_profile(env.get("FONTPROXY_PROFILE", DEFAULT_PROFILE), **overrides)
