"""Last-known light state"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class LightState:
    """Memory-resident record of what the light was last told.

    All fields start unset (None) and are only mutated by the fade
    controller. Nothing is persisted; a restart starts from unknown.
    """
    power: Optional[bool] = None
    brightness: Optional[int] = None  # 0-100
    brightness_changed_at: Optional[float] = None  # clock reading of the last brightness publish

    @property
    def brightness_known(self) -> bool:
        return self.brightness is not None

    def brightness_changed_within(self, window: float, now: float) -> bool:
        """True if a brightness publish happened at most ``window`` seconds before ``now``"""
        if self.brightness_changed_at is None:
            return False
        return now - self.brightness_changed_at <= window

    def to_dict(self):
        """Convert to dictionary"""
        return asdict(self)
