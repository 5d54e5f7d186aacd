"""Configuration for the MQTT fade proxy"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables from .env file (existing environment wins)
_repo_root = Path(__file__).parent.parent.resolve()
_env_file = _repo_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
load_dotenv(Path.cwd() / ".env")

# Broker
MQTT_KEEPALIVE = 60  # default seconds when the MQTT_KEEPALIVE env key is unset

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/fade-proxy.log")

# Required keys, all must be present and non-blank
REQUIRED_KEYS = (
    "MQTT_BROKER_HOSTNAME",
    "MQTT_BROKER_PORT",
    "MQTT_CLIENT_ID",
    "POWER_COMMAND_TOPIC_PROXY",
    "POWER_COMMAND_TOPIC_ORIGINAL",
    "BRIGHTNESS_COMMAND_TOPIC_PROXY",
    "BRIGHTNESS_COMMAND_TOPIC_ORIGINAL",
    "BRIGHTNESS_STATISTIC_TOPIC",
)


@dataclass(frozen=True)
class Settings:
    """Broker and topic settings loaded once at startup"""
    broker_host: str
    broker_port: int
    client_id: str
    power_topic_proxy: str  # commands arrive here
    power_topic_original: str  # the light listens here
    brightness_topic_proxy: str
    brightness_topic_original: str
    brightness_statistic_topic: str
    keepalive: int = MQTT_KEEPALIVE


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read the required settings from the environment.

    Raises:
        ConfigurationError: if any required key is missing or blank, or the
            port is not a valid integer. The message lists every bad key.
    """
    env = os.environ if environ is None else environ

    values = {}
    missing = []
    for key in REQUIRED_KEYS:
        value = (env.get(key) or "").strip()
        if not value:
            missing.append(key)
        values[key] = value

    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    try:
        port = int(values["MQTT_BROKER_PORT"])
    except ValueError:
        raise ConfigurationError(
            f"MQTT_BROKER_PORT must be an integer, got {values['MQTT_BROKER_PORT']!r}"
        ) from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"MQTT_BROKER_PORT out of range: {port}")

    try:
        keepalive = int(env.get("MQTT_KEEPALIVE") or MQTT_KEEPALIVE)
    except ValueError:
        raise ConfigurationError(
            f"MQTT_KEEPALIVE must be an integer, got {env.get('MQTT_KEEPALIVE')!r}"
        ) from None

    return Settings(
        broker_host=values["MQTT_BROKER_HOSTNAME"],
        broker_port=port,
        client_id=values["MQTT_CLIENT_ID"],
        power_topic_proxy=values["POWER_COMMAND_TOPIC_PROXY"],
        power_topic_original=values["POWER_COMMAND_TOPIC_ORIGINAL"],
        brightness_topic_proxy=values["BRIGHTNESS_COMMAND_TOPIC_PROXY"],
        brightness_topic_original=values["BRIGHTNESS_COMMAND_TOPIC_ORIGINAL"],
        brightness_statistic_topic=values["BRIGHTNESS_STATISTIC_TOPIC"],
        keepalive=keepalive,
    )
