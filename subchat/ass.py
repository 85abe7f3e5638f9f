"""Advanced SubStation Alpha (ASS) subtitle output for previewing chat."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from .chat import Batch
from .params import ChatParams

_HEADER = "\ufeff[Script Info]\n"
_INFO = (
    "\n; Script generated by SubChat\n"
    "Title: SubChat preview\n"
    "ScriptType: v4.00+\n"
    "WrapStyle: 2\n"
    "ScaledBorderAndShadow: yes\n"
    "YCbCr Matrix: None\n"
)
_STYLES_HEADER = (
    "[V4+ Styles]\n"
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, "
    "Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, "
    "Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding\n"
)
_EVENTS_HEADER = (
    "[Events]\n"
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
)
_ESCAPES = str.maketrans({"\\": "\\\\", "{": "\\{", "}": "\\}", "\n": "\\n"})


def real_font_scale(ytt_font_size: int) -> float:
    """Return the scale factor a YTT font size percentage really applies."""
    return (100.0 + (ytt_font_size - 100.0) / 4.0) / 100.0


def ass_font_size(ytt_font_size: int, ass_height: int) -> float:
    """Return the ASS font size matching a YTT size on a video this tall."""
    return real_font_scale(ytt_font_size) * 64.107 / 1440.0 * ass_height


def ass_x(ytt_x: int, ytt_font_size: int, ass_width: int) -> float:
    """Return the ASS x position matching a YTT horizontal margin."""
    return (
        (51.2821 + 24.5844 * ytt_x + 15.9109 * real_font_scale(ytt_font_size))
        * ass_width
        / 2560.0
    )


def ass_y(ytt_y: int, ytt_font_size: int, ass_height: int, line: int = 0) -> float:
    """Return the ASS y position of a line placed at a YTT vertical margin."""
    y2 = ytt_y * ytt_y
    y3 = y2 * ytt_y
    scale = real_font_scale(ytt_font_size)
    scale2 = scale * scale
    return (
        (
            (0.0000036448 * scale - 0.0000102298) * y3
            + (0.0001228929 * scale + 0.0006313481) * y2
            + (-0.0299080260 * scale + 13.8373127706) * ytt_y
            + (2.3156363636 * scale2 - 2.1625454545 * scale + 30.1938181818)
            + (2.095321207 * scale2 + 64.752581827 * scale + 1.158860604) * line
        )
        * ass_height
        / 1440.0
    )


def format_time(ms: int) -> str:
    """Format milliseconds as ``H:MM:SS.CC``."""
    total = ms // 10
    hours = total // 360000
    minutes = (total // 6000) % 60
    seconds = (total // 100) % 60
    centis = total % 100
    return f"{hours}:{minutes:02}:{seconds:02}.{centis:02}"


def escape_text(raw: str) -> str:
    """Escape backslashes, braces and newlines for an ASS dialogue line."""
    return raw.translate(_ESCAPES)


def generate_ass(
    batches: Sequence[Batch], params: ChatParams, video_width: int, video_height: int
) -> str:
    """Render batches as an ASS script for a video of the given size.

    Each batch is shown until the next one starts, so the last batch only
    marks the end of the one before it.
    """
    parts = [
        _HEADER,
        _INFO,
        f"PlayResX: {video_width}\nPlayResY: {video_height}\n"
        f"LayoutResX: {video_width}\nLayoutResY: {video_height}\n\n",
        _STYLES_HEADER,
    ]
    font_size = ass_font_size(params.font_size_percent, video_height)
    parts.append(
        f"Style: Default,Lucida Console,{font_size:.2f},&H00000000,&H000000FF,&H00000000,"
        "&H00000000,0,0,0,0,100,100,0,0,1,0,2.5,7,0,0,0,1\n\n"
    )
    parts.append(_EVENTS_HEADER)

    pos_x = ass_x(params.horizontal_margin, params.font_size_percent, video_width)
    if params.vertical_spacing < 0:
        pos_y = [
            ass_y(params.vertical_margin, params.font_size_percent, video_height, index)
            for index in range(params.total_display_lines)
        ]
    else:
        pos_y = [
            ass_y(
                params.vertical_margin + params.vertical_spacing * index,
                params.font_size_percent,
                video_height,
            )
            for index in range(params.total_display_lines)
        ]

    foreground = params.foreground_color.to_ass()
    for current, following in pairwise(batches):
        start = format_time(current.time)
        end = format_time(following.time)
        for index, line in enumerate(current.lines):
            parts.append(
                f"Dialogue: 0,{start},{end},Default,,0,0,0,,"
                f"{{\\pos({pos_x:.3f},{pos_y[index]:.3f})}}"
            )
            if line.user is not None:
                parts.append(line.user.color.to_ass())
                parts.append(escape_text(line.user.name))
            parts.append(foreground)
            parts.append(escape_text(line.text))
            parts.append("\n")
    return "".join(parts)