"""MQTT transport package"""

from .client import MQTTClient
from .payloads import parse_brightness, parse_power

__all__ = ['MQTTClient', 'parse_brightness', 'parse_power']
