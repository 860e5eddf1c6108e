"""Configuration handling for Random News."""

import os
from dataclasses import dataclass
from typing import Optional

import yaml

DEFAULT_ENDPOINT_URL = "http://localhost:3000/random_article?type=random"
BROWSERS = ("chromium", "firefox", "webkit")


@dataclass
class Config:
    """Main configuration class."""

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    default_delay_ms: int = 120000
    key_delay_ms: int = 10
    start_url: Optional[str] = None
    browser: str = "chromium"
    headless: bool = False
    request_timeout_seconds: float = 30.0
    navigation_timeout_ms: int = 60000

    def __post_init__(self):
        if self.browser not in BROWSERS:
            raise ValueError(
                f"Unsupported browser {self.browser!r}, expected one of {', '.join(BROWSERS)}"
            )

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        defaults = cls()
        return cls(
            endpoint_url=data.get("endpoint_url", defaults.endpoint_url),
            default_delay_ms=int(data.get("default_delay_ms", defaults.default_delay_ms)),
            key_delay_ms=int(data.get("key_delay_ms", defaults.key_delay_ms)),
            start_url=data.get("start_url", defaults.start_url),
            browser=data.get("browser", defaults.browser),
            headless=data.get("headless", defaults.headless),
            request_timeout_seconds=float(data.get(
                "request_timeout_seconds", defaults.request_timeout_seconds
            )),
            navigation_timeout_ms=int(data.get(
                "navigation_timeout_ms", defaults.navigation_timeout_ms
            )),
        )

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment or default path."""
        config_path = os.environ.get("CONFIG_PATH", "/config/config.yaml")

        if os.path.exists(config_path):
            return cls.from_yaml(config_path)

        return cls()
