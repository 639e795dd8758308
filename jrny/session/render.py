"""Render pipeline: session state in, terminal frame out.

Every function here is pure. The frame is a single ``rich.text.Text``
made of three zones:

    header  file name in a bordered title box joined to a rule
    body    the content view's visible lines, word-wrapped
    footer  a rule joined to a scroll-percentage box, then the input line
"""

import io
from typing import TYPE_CHECKING

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from jrny.models import RenderStyle

if TYPE_CHECKING:
    from jrny.session.controller import SessionController

# Only used for its wrapping defaults, never printed to
_WRAP_CONSOLE = Console(file=io.StringIO(), color_system=None, width=80)


def wrap_text(text: Text, width: int) -> list[Text]:
    """Word-wrap one line of text to ``width`` cells.

    Words longer than ``width`` are folded. An empty line stays a single
    empty line.
    """
    if not text.plain:
        return [Text("")]
    return list(text.wrap(_WRAP_CONSOLE, max(1, width)))


def header_lines(title: str, width: int, style: RenderStyle) -> list[Text]:
    """Title box on the left, rule filling the rest of the middle row."""
    inner = cell_len(title) + 2
    top = Text(
        style.border_top_left + style.border_horizontal * inner + style.border_top_right,
        style=style.border_style,
    )
    middle = Text(style.border_vertical + " ", style=style.border_style)
    middle.append(title, style=style.title_style)
    middle.append(" " + style.title_join, style=style.border_style)
    middle.append(style.rule * max(0, width - (inner + 2)), style=style.border_style)
    bottom = Text(
        style.border_bottom_left + style.border_horizontal * inner + style.border_bottom_right,
        style=style.border_style,
    )
    return [top, middle, bottom]


def format_percent(fraction: float) -> str:
    return f"{fraction * 100:3.0f}%"


def footer_lines(scroll_percent: float, width: int, input_line: Text, style: RenderStyle) -> list[Text]:
    """Rule with the scroll-percentage box on the right, then the input."""
    info = f" {format_percent(scroll_percent)} "
    inner = cell_len(info)
    pad = max(0, width - (inner + 2))
    top = Text(
        " " * pad + style.border_top_left + style.border_horizontal * inner + style.border_top_right,
        style=style.border_style,
    )
    middle = Text(style.rule * pad + style.info_join, style=style.border_style)
    middle.append(info)
    middle.append(style.border_vertical, style=style.border_style)
    bottom = Text(
        " " * pad + style.border_bottom_left + style.border_horizontal * inner + style.border_bottom_right,
        style=style.border_style,
    )
    return [top, middle, bottom, input_line]


def chrome_height(style: RenderStyle) -> tuple[int, int]:
    """Heights of the header and footer zones."""
    return len(header_lines("", 0, style)), len(footer_lines(0.0, 0, Text(""), style))


def render_body(lines: list[Text], width: int, height: int, style: RenderStyle) -> list[Text]:
    body = []
    for line in lines:
        body.extend(wrap_text(line, width - style.body_margin))
    return body[:max(0, height)]


def render_frame(session: "SessionController") -> Text:
    """Compose the full terminal frame for the session's current state."""
    style = session.style
    if not session.ready:
        return Text(style.initializing)

    view = session.view
    lines = header_lines(session.title, view.width, style)
    lines += render_body(view.visible_lines(), view.width, view.height, style)
    lines += footer_lines(
        view.scroll_percent(),
        view.width,
        session.line_input.render(style.cursor_style),
        style,
    )
    return Text("\n").join(lines)
