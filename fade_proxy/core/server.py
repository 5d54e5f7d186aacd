"""Core fade proxy server - wires the MQTT client to the fade controller"""

import logging

from ..config import Settings
from ..controllers import FadeController
from ..models import TopicPair
from ..mqtt import MQTTClient, parse_brightness, parse_power

logger = logging.getLogger(__name__)


class FadeProxyServer:
    """Connect, subscribe both command topics, and run the dispatch loop"""

    def __init__(self, gateway, controller: FadeController):
        self.gateway = gateway
        self.controller = controller

    @classmethod
    def from_settings(cls, settings: Settings) -> "FadeProxyServer":
        """Build the MQTT client and controller for one light"""
        gateway = MQTTClient(
            settings.broker_host,
            settings.broker_port,
            settings.client_id,
            keepalive=settings.keepalive,
        )
        controller = FadeController(
            gateway,
            power_topic=TopicPair(settings.power_topic_proxy, settings.power_topic_original),
            brightness_topic=TopicPair(settings.brightness_topic_proxy, settings.brightness_topic_original),
            brightness_statistic_topic=settings.brightness_statistic_topic,
        )
        return cls(gateway, controller)

    def run(self) -> int:
        """Run until the broker loop ends. Transport errors propagate."""
        logger.info("Starting fade proxy...")

        self.gateway.connect()

        self.gateway.subscribe(
            self.controller.power_topic.incoming,
            self.controller.on_power,
            parse_power,
        )
        self.gateway.subscribe(
            self.controller.brightness_topic.incoming,
            self.controller.on_brightness,
            parse_brightness,
        )

        self.gateway.loop()
        self.gateway.disconnect()

        logger.info("Fade proxy stopped")
        return 0

    def stop(self):
        """Ask the dispatch loop to end"""
        logger.info("Stopping fade proxy...")
        self.gateway.disconnect()
