"""RGBA color value type."""

import re
from dataclasses import dataclass
from typing import Any, Optional

from .base import OptionType
from .registry import OptionTypeRegistry

_HEX_PATTERN = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


@dataclass(frozen=True)
class Color:
    """RGBA color with channels in [0, 1].

    Attributes
    ----------
    r, g, b, a : float
        Red, green, blue and alpha channels
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def channels(self):
        return (self.r, self.g, self.b, self.a)


def _is_byte_exact(channel: float) -> bool:
    return round(channel * 255) / 255 == channel


def _parse_hex(text: str) -> Optional[Color]:
    if not _HEX_PATTERN.match(text):
        return None
    digits = text[1:]
    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(values) == 3:
        values.append(255)
    return Color(*(v / 255 for v in values))


@OptionTypeRegistry.register
class ColorType(OptionType):
    """Colors written as ``#RRGGBB``, ``#RRGGBBAA`` or ``r g b a`` floats."""

    type_id = "color"
    py_type = Color
    description = "RGBA color"

    def from_string(self, text: str) -> Optional[Color]:
        text = text.strip()
        if text.startswith("#"):
            return _parse_hex(text)

        parts = text.split()
        if len(parts) != 4:
            return None
        try:
            channels = [float(p) for p in parts]
        except ValueError:
            return None
        if not all(0.0 <= c <= 1.0 for c in channels):
            return None
        return Color(*channels)

    def to_string(self, value: Any) -> str:
        self.check_value(value)
        channels = value.channels()
        for channel in channels:
            if isinstance(channel, bool) or not isinstance(channel, (int, float)):
                raise TypeError(f"Color channels must be numbers, got {channel!r}")
            # NaN fails the comparison as well
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"Color channel {channel!r} is outside [0, 1]")
        if all(_is_byte_exact(c) for c in channels):
            return "#" + "".join(f"{round(c * 255):02X}" for c in channels)
        return " ".join(repr(float(c)) for c in channels)
