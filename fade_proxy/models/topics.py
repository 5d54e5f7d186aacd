"""Topic models"""

from dataclasses import dataclass

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class TopicPair:
    """A proxied command channel.

    Commands arrive on ``incoming`` and are republished, possibly as a fade
    sequence, to ``outgoing``.
    """
    incoming: str
    outgoing: str

    def __post_init__(self):
        for name in ("incoming", "outgoing"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"TopicPair.{name} must be a non-empty topic name")

    def to_dict(self):
        """Convert to dictionary"""
        return {"incoming": self.incoming, "outgoing": self.outgoing}
