"""MQTT fade proxy package"""

from .controllers import FadeController, fade_steps
from .core import FadeProxyServer
from .models import LightState, TopicPair

__all__ = ['FadeController', 'FadeProxyServer', 'LightState', 'TopicPair', 'fade_steps']
