"""Models package"""

from .light_state import LightState
from .topics import TopicPair

__all__ = ['LightState', 'TopicPair']
