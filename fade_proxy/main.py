"""
MQTT Fade Proxy

Sits between a lighting control surface and a light's command topics and
turns power/brightness commands into smooth brightness fades.
"""

import logging
import signal
import sys

from .config import load_settings
from .core import FadeProxyServer
from .exceptions import ConfigurationError
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point"""
    setup_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    server = FadeProxyServer.from_settings(settings)

    # Handle shutdown signals
    def signal_handler(sig, frame):
        logger.info(f"Received signal {sig}")
        server.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    return server.run()


if __name__ == "__main__":
    sys.exit(main())
