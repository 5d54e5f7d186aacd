"""Topic names and publish-recording helpers shared by the unit tests"""

POWER_IN = "light/power/set"
POWER_OUT = "zigbee/light/power"
BRIGHTNESS_IN = "light/brightness/set"
BRIGHTNESS_OUT = "zigbee/light/brightness"
BRIGHTNESS_STAT = "light/brightness/state"


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def published(gateway):
    """Return the (topic, value) pairs published so far"""
    return [c.args for c in gateway.publish.call_args_list]


def brightness_values(gateway):
    """Return only the values published to the brightness-outgoing topic"""
    return [value for topic, value in published(gateway) if topic == BRIGHTNESS_OUT]

VALID_ENV = {
    "MQTT_BROKER_HOSTNAME": "broker.local",
    "MQTT_BROKER_PORT": "1883",
    "MQTT_CLIENT_ID": "fade-proxy",
    "POWER_COMMAND_TOPIC_PROXY": "light/power/set",
    "POWER_COMMAND_TOPIC_ORIGINAL": "zigbee/light/power",
    "BRIGHTNESS_COMMAND_TOPIC_PROXY": "light/brightness/set",
    "BRIGHTNESS_COMMAND_TOPIC_ORIGINAL": "zigbee/light/brightness",
    "BRIGHTNESS_STATISTIC_TOPIC": "light/brightness/state",
}
