"""Chat rendering parameters and their INI config file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

from .color import Color
from .styles import (
    EdgeType,
    FontStyle,
    TextAlignment,
    enum_from_string,
    enum_options_comment,
    enum_to_string,
)

PathType = Union[str, "PathLike[str]"]

SECTION = "General"
_COLOR_COMMENT = ";Hex color: #RGB, #RGBA, #RRGGBB or #RRGGBBAA"
_DECIMAL = re.compile(r"\s*[+-]?[0-9]+")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


def _read_ini(path: PathType) -> dict[str, dict[str, str]]:
    text = Path(path).read_text(encoding="utf-8-sig")
    sections: dict[str, dict[str, str]] = {}
    current = sections.setdefault("", {})
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            end = line.find("]")
            name = line[1:end] if end != -1 else line[1:]
            current = sections.setdefault(name.strip(), {})
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        current[key] = value
    return sections


def _quote(value: str) -> str:
    if value and (value[0].isspace() or value[-1].isspace()):
        return f'"{value}"'
    return value


def _parse_bool(value: str | None, default: bool) -> bool:
    if not value:
        return default
    first = value[0].lower()
    if first in "ty1":
        return True
    if first in "fn0":
        return False
    if first == "o":
        second = value[1:2].lower()
        if second == "n":
            return True
        if second == "f":
            return False
    return default


def _parse_long(value: str | None, default: int) -> int:
    if not value:
        return default
    if value[:2] in ("0x", "0X"):
        match = _HEX.fullmatch(value[2:])
        if not match:
            return default
        return int(match.group(1) + match.group(2), 16)
    if _DECIMAL.fullmatch(value):
        return int(value)
    return default


@dataclass
class ChatParams:
    """How chat lines are laid out and styled in the generated subtitles."""

    bold: bool = False
    italic: bool = False
    underline: bool = False

    foreground_color: Color = Color(254, 254, 254, 254)
    background_color: Color = Color(254, 254, 254, 0)
    edge_color: Color = Color(0, 0, 0, 254)

    edge_type: EdgeType = EdgeType.SOFT_SHADOW
    font_style: FontStyle = FontStyle.MONOSPACED_SANS
    font_size_percent: int = 0

    text_alignment: TextAlignment = TextAlignment.LEFT
    horizontal_margin: int = 71
    vertical_margin: int = 0
    vertical_spacing: int = -1
    total_display_lines: int = 13

    max_chars_per_line: int = 25
    username_separator: str = ":"

    def save(self, path: PathType) -> None:
        """Write the parameters to an INI file with explanatory comments."""
        entries = [
            ("bold", str(self.bold).lower(), ";true/false"),
            ("italic", str(self.italic).lower(), ";true/false"),
            ("underline", str(self.underline).lower(), ";true/false"),
            ("textForegroundColor", self.foreground_color.to_hex(), _COLOR_COMMENT),
            ("textBackgroundColor", self.background_color.to_hex(), _COLOR_COMMENT),
            ("textEdgeColor", self.edge_color.to_hex(), _COLOR_COMMENT),
            ("textEdgeType", enum_to_string(self.edge_type), enum_options_comment(EdgeType)),
            ("fontStyle", enum_to_string(self.font_style), enum_options_comment(FontStyle)),
            ("fontSizePercent", str(self.font_size_percent), ";0–300 (virtual percent)"),
            (
                "textAlignment",
                enum_to_string(self.text_alignment),
                enum_options_comment(TextAlignment),
            ),
            ("horizontalMargin", str(self.horizontal_margin), ";0–100 (virtual percent)"),
            ("verticalMargin", str(self.vertical_margin), ";0-100 (virtual percent)"),
            ("verticalSpacing", str(self.vertical_spacing), ";virtual pixels"),
            ("totalDisplayLines", str(self.total_display_lines), ";lines"),
            ("maxCharsPerLine", str(self.max_chars_per_line), ";characters"),
            (
                "usernameSeparator",
                self.username_separator,
                ";string between name and message",
            ),
        ]
        lines = [f"[{SECTION}]"]
        for key, value, comment in entries:
            lines.extend(("", comment, f"{key} = {_quote(value)}"))
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8-sig", newline="\n")

    def load(self, path: PathType) -> ChatParams:
        """Update the parameters from an INI file and return ``self``.

        Keys that are missing or cannot be read keep their current values.
        Raises OSError when the file cannot be read.
        """
        values = _read_ini(path).get(SECTION, {})

        self.bold = _parse_bool(values.get("bold"), self.bold)
        self.italic = _parse_bool(values.get("italic"), self.italic)
        self.underline = _parse_bool(values.get("underline"), self.underline)

        self.foreground_color = Color.from_hex(
            values.get("textForegroundColor", self.foreground_color.to_hex())
        )
        self.background_color = Color.from_hex(
            values.get("textBackgroundColor", self.background_color.to_hex())
        )
        self.edge_color = Color.from_hex(values.get("textEdgeColor", self.edge_color.to_hex()))

        try:
            self.edge_type = enum_from_string(
                EdgeType, values.get("textEdgeType", enum_to_string(self.edge_type))
            )
        except ValueError:
            pass
        try:
            self.font_style = enum_from_string(
                FontStyle, values.get("fontStyle", enum_to_string(self.font_style))
            )
        except ValueError:
            pass
        try:
            self.text_alignment = enum_from_string(
                TextAlignment, values.get("textAlignment", enum_to_string(self.text_alignment))
            )
        except ValueError:
            pass

        self.font_size_percent = _parse_long(values.get("fontSizePercent"), self.font_size_percent)
        self.horizontal_margin = _parse_long(values.get("horizontalMargin"), self.horizontal_margin)
        self.vertical_margin = _parse_long(values.get("verticalMargin"), self.vertical_margin)
        self.vertical_spacing = _parse_long(values.get("verticalSpacing"), self.vertical_spacing)
        self.total_display_lines = _parse_long(
            values.get("totalDisplayLines"), self.total_display_lines
        )
        self.max_chars_per_line = _parse_long(
            values.get("maxCharsPerLine"), self.max_chars_per_line
        )
        self.username_separator = values.get("usernameSeparator", self.username_separator)
        return self