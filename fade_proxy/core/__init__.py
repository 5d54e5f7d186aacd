"""Core package"""

from .server import FadeProxyServer

__all__ = ['FadeProxyServer']
