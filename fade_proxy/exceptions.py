"""Exception types for the fade proxy.

Every failure except a malformed inbound payload is fatal to the process;
nothing here is retried.
"""


class FadeProxyError(Exception):
    """Base class for all fade proxy errors"""


class ConfigurationError(FadeProxyError):
    """Missing or invalid startup configuration"""


class BrokerConnectionError(FadeProxyError):
    """Broker unreachable or the session was refused

    Attributes:
        host: Broker hostname
        port: Broker port
        reason: Specific failure reason
    """

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Connection to {host}:{port} failed: {reason}")


class TransferError(FadeProxyError):
    """Publishing a message failed

    Attributes:
        topic: Destination topic
        rc: paho result code
    """

    def __init__(self, topic: str, rc: int, reason: str = ""):
        self.topic = topic
        self.rc = rc
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Publish to {topic} failed with rc={rc}{detail}")


class InvalidPayloadError(FadeProxyError, ValueError):
    """Inbound payload could not be coerced to the expected type"""

    def __init__(self, topic: str, payload, expected: str):
        self.topic = topic
        self.payload = payload
        self.expected = expected
        super().__init__(f"Invalid payload on {topic}: {payload!r} (expected {expected})")
