"""RGBA colours as used by subtitle pens and ASS overrides."""

from __future__ import annotations

import zlib
from dataclasses import dataclass

MAX_CHANNEL = 254
"""Highest value a channel may hold; larger values are clamped to it."""

_HEX_VALUES = {c: i for i, c in enumerate("0123456789abcdef")}
_HEX_VALUES.update({c: i for i, c in enumerate("0123456789ABCDEF")})


def _clamp(value: int) -> int:
    return max(0, min(int(value), MAX_CHANNEL))


@dataclass(frozen=True, order=True)
class Color:
    """An RGBA colour whose channels are clamped to ``0..MAX_CHANNEL``."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = MAX_CHANNEL

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _clamp(getattr(self, name)))

    @classmethod
    def from_hex(cls, text: str | None) -> Color:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``.

        The leading ``#`` is optional and invalid digits count as zero.
        Empty text or an unsupported length yields a fully transparent black.
        """
        if not text:
            return cls(0, 0, 0, 0)
        cleaned = text[1:] if text.startswith("#") else text
        digits = [_HEX_VALUES.get(c, 0) for c in cleaned]
        if len(digits) in (3, 4):
            channels = [d * 16 + d for d in digits]
        elif len(digits) in (6, 8):
            channels = [hi * 16 + lo for hi, lo in zip(digits[::2], digits[1::2])]
        else:
            return cls(0, 0, 0, 0)
        if len(channels) == 3:
            channels.append(MAX_CHANNEL)
        return cls(*channels)

    def to_hex(self) -> str:
        """Return ``#RRGGBB``, or ``#RRGGBBAA`` when not fully opaque."""
        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if self.a != MAX_CHANNEL:
            text += f"{self.a:02X}"
        return text

    def to_ass(self) -> str:
        """Return an ASS colour override tag, with alpha when not opaque."""
        text = f"{{\\c&H{self.b:02X}{self.g:02X}{self.r:02X}&"
        if self.a != MAX_CHANNEL:
            text += f"\\a&H{self.a:02X}&"
        return text + "}"

    def __str__(self) -> str:
        return self.to_hex()


DEFAULT_PALETTE: tuple[Color, ...] = tuple(
    Color.from_hex(code)
    for code in (
        "#ff0000", "#0000ff", "#008000", "#b22222", "#ff7f50",
        "#9acd32", "#ff4500", "#2e8b57", "#daa520", "#d2691e",
        "#5f9ea0", "#1e90ff", "#ff69b4", "#8a2be2", "#00ff7f",
    )
)


def random_color(username: str) -> Color:
    """Pick a palette colour for a user name, the same one every time."""
    digest = zlib.crc32(username.encode("utf-8"))
    return DEFAULT_PALETTE[digest % len(DEFAULT_PALETTE)]