"""
Channel identifiers and destination -> source channel maps.

A ChannelMap has one slot per destination channel (R, G, B, A). Each slot
holds the source channel to read from, or None when that destination is
left alone.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Mapping, Optional, Tuple, Union

from .errors import InvalidChannelError


class Channel(IntEnum):
    """Byte index of a channel inside an RGBA pixel."""
    R = 0
    G = 1
    B = 2
    A = 3

    @classmethod
    def parse(cls, value: Union["Channel", str, int]) -> "Channel":
        """
        Convert a channel name, index or Channel into a Channel.

        Raises:
            InvalidChannelError: If value does not name R, G, B or A
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidChannelError(f"Unknown channel: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            if 0 <= value <= 3:
                return cls(value)
        raise InvalidChannelError(f"Unknown channel: {value!r}")


ChannelLike = Union[Channel, str, int]


@dataclass(frozen=True)
class ChannelMap:
    """Fixed four-slot mapping of destination channel -> source channel."""
    slots: Tuple[Optional[Channel], Optional[Channel], Optional[Channel], Optional[Channel]] = (
        None, None, None, None
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[ChannelLike, ChannelLike]) -> "ChannelMap":
        """
        Build a map from a dict such as {"R": "B", "B": "R"}.

        Keys are destination channels, values are source channels.
        """
        slots = [None, None, None, None]
        for destination, source in mapping.items():
            slots[Channel.parse(destination)] = Channel.parse(source)
        return cls(tuple(slots))

    @classmethod
    def coerce(cls, channels: Union["ChannelMap", Mapping[ChannelLike, ChannelLike]]) -> "ChannelMap":
        if isinstance(channels, cls):
            return channels
        return cls.from_mapping(channels)

    def __iter__(self) -> Iterator[Tuple[Channel, Channel]]:
        for destination in Channel:
            source = self.slots[destination]
            if source is not None:
                yield destination, source

    def __len__(self) -> int:
        return sum(1 for slot in self.slots if slot is not None)

    def __contains__(self, destination) -> bool:
        return self.slots[Channel.parse(destination)] is not None

    def get(self, destination: ChannelLike) -> Optional[Channel]:
        return self.slots[Channel.parse(destination)]

    def without(self, destination: ChannelLike) -> "ChannelMap":
        """Copy of this map with one destination cleared."""
        slots = list(self.slots)
        slots[Channel.parse(destination)] = None
        return ChannelMap(tuple(slots))

    def to_dict(self) -> dict:
        return {destination.name: source.name for destination, source in self}
