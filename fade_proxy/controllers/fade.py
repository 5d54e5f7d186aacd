"""Fade controller - the power/brightness state machine"""

import logging
import time
from typing import Callable, Iterator, Optional

from ..models import LightState, TopicPair

logger = logging.getLogger(__name__)

FADE_STEP = 2  # brightness points per published step
POWER_DEBOUNCE_SECONDS = 2.0  # power events are dropped this long after a brightness publish
POWER_ON_THRESHOLD = 1  # brightness must be strictly above this to count as on
OFF_PAYLOAD = "OFF"


def fade_steps(start: int, target: int, step: int = FADE_STEP) -> Iterator[int]:
    """Yield the intermediate brightness values from ``start`` to ``target``.

    ``start`` itself is not yielded. The last value is always exactly
    ``target``; an overshooting step is clamped to it.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    step = step if start < target else -step
    current = start
    while current != target:
        current += step
        if (step > 0 and current > target) or (step < 0 and current < target):
            current = target
        yield current


class FadeController:
    """Republish power and brightness commands as brightness fades.

    The controller owns the light's last-known state and publishes through a
    gateway exposing ``publish(topic, value)``. Handlers run synchronously:
    a whole fade is published before the handler returns.
    """

    def __init__(
        self,
        gateway,
        power_topic: TopicPair,
        brightness_topic: TopicPair,
        brightness_statistic_topic: str,
        clock: Callable[[], float] = time.monotonic,
        state: Optional[LightState] = None,
    ):
        self.gateway = gateway
        self.power_topic = power_topic
        self.brightness_topic = brightness_topic
        self.brightness_statistic_topic = brightness_statistic_topic
        self.clock = clock
        self.state = state if state is not None else LightState()
        logger.info(
            f"Fade controller initialized (power: {power_topic.to_dict()}, "
            f"brightness: {brightness_topic.to_dict()}, statistic: {brightness_statistic_topic})"
        )

    def on_power(self, power: bool):
        """Handle a power command from the control surface"""
        logger.info(f"Received Power: {'On' if power else 'Off'}")

        if self.state.brightness_changed_within(POWER_DEBOUNCE_SECONDS, self.clock()):
            logger.info("Brightness changed recently, skipping power publish.")
            return

        if power == self.state.power:
            return

        if power:
            # Turning on always ramps to full, whatever was remembered
            self.fade(0, 100)
            return

        if self.state.brightness_known:
            self.fade(self.state.brightness, 0)
        else:
            self.off()

    def on_brightness(self, brightness: int):
        """Handle a brightness command from the control surface"""
        logger.info(f"Received Brightness: {brightness}")

        if brightness == self.state.brightness:
            return

        if self.state.brightness_known:
            self.fade(self.state.brightness, brightness)
            return

        # Nothing meaningful to ramp from on the first event
        self.set_brightness_stat(brightness)
        self.set_brightness(brightness)
        self.state.brightness = brightness

    def fade(self, start: int, target: int):
        """Publish the target to the statistic topic, then step toward it"""
        self.set_brightness_stat(target)
        logger.info(f"Fading: {start} to {target}")

        for value in fade_steps(start, target):
            self.set_brightness(value)

        if target == 0:
            self.off()

        self.state.brightness = target

    def set_brightness(self, value: int):
        """Publish one brightness value and derive the power state from it"""
        self.gateway.publish(self.brightness_topic.outgoing, value)
        logger.info(f"Published Brightness: {value}")

        self.state.brightness = value
        self.state.brightness_changed_at = self.clock()
        self.state.power = value > POWER_ON_THRESHOLD

    def set_brightness_stat(self, value: int):
        """Publish the brightness the UI should show, ahead of the fade"""
        self.gateway.publish(self.brightness_statistic_topic, value)

    def off(self):
        """Switch the light off and record it"""
        logger.info("Published Power: Off")
        self.gateway.publish(self.power_topic.outgoing, OFF_PAYLOAD)
        self.state.brightness = 0
        self.state.power = False
