"""Chat messages, line wrapping and the batches of lines shown over time."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Union

from .color import Color, random_color
from .params import ChatParams

PathType = Union[str, "PathLike[str]"]

CSV_HEADER = "time,user_name,user_color,message"

_WORD_BREAK = re.compile(r"[ \t\n\v\f\r]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class CsvFormatError(ValueError):
    """Raised when a chat CSV file does not have the expected layout."""


@dataclass(frozen=True)
class User:
    """A chat participant and the colour their name is shown in."""

    name: str
    color: Color = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message; ``time`` is in milliseconds."""

    time: int
    user: User
    message: str


@dataclass(frozen=True)
class ChatLine:
    """One wrapped line; only the first line of a message carries the user."""

    user: User | None
    text: str


@dataclass(frozen=True)
class Batch:
    """The lines on screen from ``time`` until the next batch starts."""

    time: int
    lines: tuple[ChatLine, ...]


def wrap_message(
    username: str, separator: str, message: str, max_width: int
) -> tuple[str, list[str]]:
    """Wrap a message into lines of at most ``max_width`` characters.

    The first line shares its width with the user name and starts with the
    separator. A name longer than the width is cut and gets a line of its own;
    words longer than the width are split across lines. Returns the possibly
    shortened user name and the lines.
    """
    if max_width < 1:
        raise ValueError(f"max_width must be at least 1, got {max_width}")

    lines: list[str] = []
    available = max_width
    if len(username) > max_width:
        username = username[:max_width]
        lines.append("")
    else:
        available -= len(username)

    if len(separator) > available:
        separator = separator[: max(available, 0)]
    lines.append(separator)
    available -= len(separator)

    first_word = True
    for word in _WORD_BREAK.split(message):
        if not word:
            continue
        if len(word) > max_width:
            while len(word) > max_width:
                if available < 2:
                    available = max_width
                    lines.append(word[:available])
                else:
                    if not first_word:
                        lines[-1] += " "
                        available -= 1
                    lines[-1] += word[:available]
                first_word = False
                word = word[available:]
                available = 0
            lines.append(word)
            available = max_width - len(word)
        elif len(word) < available:
            if not first_word:
                lines[-1] += " "
                available -= 1
            lines[-1] += word
            available -= len(word)
        else:
            lines.append(word)
            available = max_width - len(word)
        first_word = False
    return username, lines


def generate_batches(messages: Iterable[ChatMessage], params: ChatParams) -> list[Batch]:
    """Accumulate wrapped lines, keeping the newest ``total_display_lines``.

    A batch is recorded for each message; a message sharing the time of the
    previous batch adds its lines without starting a new batch.
    """
    limit = params.total_display_lines
    current: deque[ChatLine] = deque(maxlen=limit if limit >= 0 else None)
    batches: list[Batch] = []
    for msg in messages:
        username, wrapped = wrap_message(
            msg.user.name, params.username_separator, msg.message, params.max_chars_per_line
        )
        if not wrapped:
            continue
        current.append(ChatLine(User(username, msg.user.color), wrapped[0]))
        current.extend(ChatLine(None, text) for text in wrapped[1:])
        if batches and batches[-1].time == msg.time:
            continue
        batches.append(Batch(msg.time, tuple(current)))
    return batches


def _parse_row(row: str, line_number: int, time_multiplier: int) -> ChatMessage:
    fields = row.split(",", 3)
    match = _LEADING_INT.match(fields[0])
    if not match:
        raise CsvFormatError(f"line {line_number}: invalid time {fields[0]!r}")
    time = int(match.group(1)) * time_multiplier
    name = fields[1] if len(fields) > 1 else ""
    # A row cut short leaves the colour column holding the time text.
    color_text = fields[2] if len(fields) > 2 else fields[0]
    color = random_color(name) if not color_text else Color.from_hex(color_text)
    message = fields[3] if len(fields) > 3 else ""
    if len(message) >= 2 and message[0] == '"' and message[-1] == '"':
        message = message[1:-1]
    return ChatMessage(time, User(name, color), message)


def parse_csv(path: PathType, time_multiplier: int) -> list[ChatMessage]:
    """Read chat messages from a ``time,user_name,user_color,message`` CSV.

    Times are multiplied by ``time_multiplier`` to get milliseconds. An empty
    colour gives the user a palette colour chosen from their name. Raises
    CsvFormatError for a wrong header or an unreadable time, and OSError when
    the file cannot be read.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    if not lines or lines[0] != CSV_HEADER:
        raise CsvFormatError("Unexpected CSV header format")
    return [
        _parse_row(row, number, time_multiplier)
        for number, row in enumerate(lines[1:], start=2)
    ]