"""MQTT client for the fade proxy"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

import paho.mqtt.client as mqtt

from ..config import MQTT_KEEPALIVE
from ..exceptions import BrokerConnectionError, InvalidPayloadError, TransferError

logger = logging.getLogger(__name__)


def _decode_text(topic, payload):
    return payload.decode('utf-8', errors='replace')


class MQTTClient:
    """Blocking MQTT gateway between the broker and the fade controller.

    Handlers registered with ``subscribe`` are invoked from inside
    ``loop()``, one message at a time. Exceptions raised by a handler
    (other than payload coercion errors) propagate out of ``loop()``.
    """

    def __init__(self, host: str, port: int, client_id: str, keepalive: int = MQTT_KEEPALIVE):
        self.host = host
        self.port = port
        self.keepalive = keepalive
        self.client = mqtt.Client(
            callback_api_version=mqtt.CallbackAPIVersion.VERSION2,
            client_id=client_id,
            reconnect_on_failure=False,
        )
        self.connected = False
        self.disconnect_requested = False
        self.lost_reason: Optional[str] = None
        self.callbacks: Dict[str, Tuple[Callable[[Any], None], Callable]] = {}

        # Set callbacks
        self.client.on_connect = self._on_connect
        self.client.on_disconnect = self._on_disconnect
        self.client.on_message = self._on_message

        logger.info("MQTT client initialized")

    def connect(self):
        """Connect to the MQTT broker"""
        logger.info(f"Connecting to MQTT broker at {self.host}:{self.port}")
        self.disconnect_requested = False
        try:
            rc = self.client.connect(self.host, self.port, self.keepalive)
        except OSError as e:
            raise BrokerConnectionError(self.host, self.port, str(e)) from e

        if rc != mqtt.MQTT_ERR_SUCCESS:
            raise BrokerConnectionError(self.host, self.port, mqtt.error_string(rc))

    def disconnect(self):
        """Disconnect from the MQTT broker, ending ``loop()``. Repeat calls are no-ops."""
        if self.disconnect_requested:
            return
        self.disconnect_requested = True
        self.client.disconnect()
        logger.info("Disconnecting from MQTT broker")

    def loop(self):
        """Dispatch inbound messages until ``disconnect()`` is called.

        Losing the broker is fatal: paho does not reconnect, and a failed
        disconnect ends the loop with BrokerConnectionError.
        """
        self.lost_reason = None
        self.client.loop_forever()
        if self.lost_reason is not None:
            raise BrokerConnectionError(self.host, self.port, f"connection lost: {self.lost_reason}")

    def subscribe(self, topic: str, handler: Callable[[Any], None], coerce: Optional[Callable] = None):
        """Register ``handler`` for messages on ``topic``.

        ``coerce(topic, payload)`` turns the raw payload bytes into the value
        passed to the handler; by default the handler receives decoded text.
        """
        self.callbacks[topic] = (handler, coerce or _decode_text)
        if self.connected:
            self.client.subscribe(topic)
        logger.info(f"Registered callback for {topic}")

    def publish(self, topic: str, value):
        """Publish a message, raising TransferError if paho rejects it"""
        payload = value if isinstance(value, (bytes, str)) else str(value)
        info = self.client.publish(topic, payload)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise TransferError(topic, info.rc, mqtt.error_string(info.rc))
        logger.debug(f"Published to {topic}: {payload}")

    def _on_connect(self, client, userdata, flags, reason_code, properties):
        """Callback when connected"""
        if reason_code.is_failure:
            raise BrokerConnectionError(self.host, self.port, str(reason_code))

        self.connected = True
        logger.info("Connected to MQTT broker successfully")

        # Subscribe every registered topic
        for topic in self.callbacks:
            self.client.subscribe(topic)
        logger.info("Subscribed")

    def _on_disconnect(self, client, userdata, disconnect_flags, reason_code, properties):
        """Callback when disconnected"""
        self.connected = False
        if reason_code.is_failure:
            self.lost_reason = str(reason_code)
            logger.error(f"Unexpected MQTT disconnection ({reason_code})")
        else:
            logger.info("Disconnected from MQTT broker")

    def _on_message(self, client, userdata, msg):
        """Callback when message received"""
        topic = msg.topic
        logger.debug(f"Received MQTT message - Topic: {topic}, Payload: {msg.payload!r}")

        for pattern, (handler, coerce) in self.callbacks.items():
            if not mqtt.topic_matches_sub(pattern, topic):
                continue
            try:
                value = coerce(topic, msg.payload)
            except InvalidPayloadError as e:
                logger.warning(f"Dropping message: {e}")
                continue
            handler(value)
