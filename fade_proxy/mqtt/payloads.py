"""Inbound payload coercion.

The controller only ever sees well-typed values; anything that cannot be
coerced here raises InvalidPayloadError and is dropped by the client.
"""

from typing import Union

from ..exceptions import InvalidPayloadError

TRUE_VALUES = ("true", "on", "1")
FALSE_VALUES = ("false", "off", "0")


def _decode(topic: str, payload: Union[bytes, str], expected: str) -> str:
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidPayloadError(topic, payload, expected) from None
    return payload.strip()


def parse_power(topic: str, payload: Union[bytes, str]) -> bool:
    """Coerce a power payload ("true"/"false", "ON"/"OFF", "1"/"0") to bool"""
    text = _decode(topic, payload, "boolean").lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise InvalidPayloadError(topic, payload, "boolean")


def parse_brightness(topic: str, payload: Union[bytes, str]) -> int:
    """Coerce a brightness payload to an integer in [0, 100]"""
    text = _decode(topic, payload, "integer 0-100")
    try:
        value = int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            raise InvalidPayloadError(topic, payload, "integer 0-100") from None
        if not number.is_integer():
            raise InvalidPayloadError(topic, payload, "integer 0-100")
        value = int(number)

    if not 0 <= value <= 100:
        raise InvalidPayloadError(topic, payload, "integer 0-100")
    return value
