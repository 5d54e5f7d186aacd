"""
Shared fixtures for unit tests.

Provides a controllable clock, a recording gateway and a fade controller
wired to both, so the state machine can be exercised without a broker.
"""

from unittest.mock import MagicMock

import pytest

from fade_proxy.controllers import FadeController
from fade_proxy.models import TopicPair
from helpers import BRIGHTNESS_IN, BRIGHTNESS_OUT, BRIGHTNESS_STAT, POWER_IN, POWER_OUT, FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gateway():
    """
    Mock broker gateway.

    Records every publish so tests can assert on the exact outbound sequence.
    """
    gw = MagicMock()
    gw.publish = MagicMock()
    gw.subscribe = MagicMock()
    gw.connect = MagicMock()
    gw.loop = MagicMock()
    gw.disconnect = MagicMock()
    return gw


@pytest.fixture
def controller(gateway, clock):
    return FadeController(
        gateway,
        power_topic=TopicPair(POWER_IN, POWER_OUT),
        brightness_topic=TopicPair(BRIGHTNESS_IN, BRIGHTNESS_OUT),
        brightness_statistic_topic=BRIGHTNESS_STAT,
        clock=clock,
    )
