"""Controllers package"""

from .fade import FadeController, fade_steps

__all__ = ['FadeController', 'fade_steps']
