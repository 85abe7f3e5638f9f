"""YouTube timed-text (YTT / SRV3) subtitle output."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from .chat import Batch, ChatLine
from .color import Color
from .params import ChatParams

_ZWSP = "\u200b"
_INDENT = "    "


def _escape_text(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(value: str) -> str:
    return (
        _escape_text(value).replace('"', "&quot;").replace("'", "&apos;")
    )


def _start(name: str, attrs: Sequence[tuple[str, str]]) -> str:
    rendered = "".join(f' {key}="{_escape_attr(value)}"' for key, value in attrs)
    return f"<{name}{rendered}"


def _span(pen: str, text: str) -> str:
    return f'{_start("s", [("p", pen)])}>{_escape_text(text)}</s>'


def _line_xml(line: ChatLine, pens: dict[Color, str], default_pen: str) -> str:
    parts = []
    if line.user is not None:
        parts += [_span(pens[line.user.color], line.user.name), _ZWSP]
    parts.append(_span(default_pen, line.text))
    return "".join(parts)


def _flag(value: bool) -> str:
    return "1" if value else "0"


def generate_xml(batches: Sequence[Batch], params: ChatParams) -> str:
    """Render batches as an SRV3 document.

    Each batch is shown until the next one starts, so the last batch only
    marks the end of the one before it. With ``vertical_spacing == -1`` a
    batch is one paragraph; otherwise each line gets its own window position.
    """
    colors = {params.foreground_color}
    colors.update(
        line.user.color for batch in batches for line in batch.lines if line.user is not None
    )
    pens = {color: str(index) for index, color in enumerate(sorted(colors))}
    default_pen = pens[params.foreground_color]

    head = []
    for color, pen_id in pens.items():
        attrs = [
            ("id", pen_id),
            ("b", _flag(params.bold)),
            ("i", _flag(params.italic)),
            ("u", _flag(params.underline)),
            ("fc", color.to_hex()),
            ("fo", str(params.foreground_color.a)),
            ("bc", params.background_color.to_hex()),
            ("bo", str(params.background_color.a)),
            ("ec", params.edge_color.to_hex()),
            ("et", str(int(params.edge_type))),
            ("fs", str(int(params.font_style))),
            ("sz", str(params.font_size_percent)),
        ]
        head.append(_start("pen", attrs) + "/>")
    head.append(_start("ws", [("id", "1"), ("ju", str(int(params.text_alignment)))]) + "/>")
    for index in range(params.total_display_lines):
        attrs = [
            ("id", str(index)),
            ("ap", "0"),
            ("ah", str(params.horizontal_margin)),
            ("av", str(index * params.vertical_spacing)),
        ]
        head.append(_start("wp", attrs) + "/>")

    paragraphs = []
    for batch, following in pairwise(batches):
        timing = [("t", str(batch.time)), ("d", str(following.time - batch.time))]
        if params.vertical_spacing == -1:
            attrs = timing + [("wp", "0"), ("ws", "1"), ("p", default_pen)]
            content = "".join(
                _line_xml(line, pens, default_pen) + "\n" for line in batch.lines
            )
            paragraphs.append(f"{_start('p', attrs)}>{content}</p>")
        else:
            for index, line in enumerate(batch.lines):
                attrs = timing + [("wp", str(index)), ("ws", "1"), ("p", default_pen)]
                content = _line_xml(line, pens, default_pen)
                paragraphs.append(f"{_start('p', attrs)}>{content}</p>")

    parts = [_start("timedtext", [("format", "3")]) + ">", f"\n{_INDENT}<head>"]
    parts += [f"\n{_INDENT * 2}{element}" for element in head]
    parts.append(f"\n{_INDENT}</head>")
    if paragraphs:
        parts.append(f"\n{_INDENT}<body>")
        parts += [f"\n{_INDENT * 2}{paragraph}" for paragraph in paragraphs]
        parts.append(f"\n{_INDENT}</body>")
    else:
        parts.append(f"\n{_INDENT}<body/>")
    parts.append("\n</timedtext>\n")
    return "".join(parts)