"""Unit tests for TopicPair and LightState"""

import dataclasses

import pytest

from fade_proxy.exceptions import ConfigurationError
from fade_proxy.models import LightState, TopicPair


class TestTopicPair:
    def test_holds_both_names(self):
        pair = TopicPair("light/power/set", "zigbee/light/power")

        assert pair.to_dict() == {"incoming": "light/power/set", "outgoing": "zigbee/light/power"}

    def test_is_immutable(self):
        pair = TopicPair("a", "b")

        with pytest.raises(dataclasses.FrozenInstanceError):
            pair.incoming = "c"

    @pytest.mark.parametrize("incoming,outgoing", [("", "b"), ("a", ""), ("  ", "b")])
    def test_rejects_blank_names(self, incoming, outgoing):
        with pytest.raises(ConfigurationError):
            TopicPair(incoming, outgoing)


class TestLightState:
    def test_starts_unknown(self):
        state = LightState()

        assert state.power is None
        assert state.brightness is None
        assert state.brightness_changed_at is None
        assert not state.brightness_known

    def test_zero_brightness_is_known(self):
        assert LightState(brightness=0).brightness_known

    def test_changed_within_window(self):
        state = LightState(brightness_changed_at=100.0)

        assert state.brightness_changed_within(2.0, 101.0)
        assert state.brightness_changed_within(2.0, 102.0)
        assert not state.brightness_changed_within(2.0, 102.5)

    def test_never_changed_is_outside_window(self):
        assert not LightState().brightness_changed_within(2.0, 0.0)

    def test_instances_do_not_share_state(self):
        first, second = LightState(), LightState()
        first.brightness = 50

        assert second.brightness is None
