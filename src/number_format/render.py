"""
Default rich-number renderer.

The formatting core only produces strings: the plain (unreduced) number and a
rich content fragment. Turning those into markup is the renderer's job; hosts
with their own template layer pass a different callable to the registry.
"""

from __future__ import annotations

import html
from typing import Callable

#: renderer(plain_number, rich_content, has_context_menu) -> markup
Renderer = Callable[[str, str, bool], str]


def render_tooltip(plain_number: str, rich_content: str, has_context_menu: bool = False) -> str:
    """Wrap `rich_content` in a span whose tooltip and data attribute carry the plain number."""
    classes = ["tooltipExtention", "showTooltipDefault"]
    if has_context_menu:
        classes.append("number-menu")
    # apostrophe separators ("1'234") must survive unescaped in the data attribute
    plain = html.escape(plain_number, quote=False).replace('"', "&quot;")
    return f'<span class="{" ".join(classes)}" title="{plain}" data="{plain}">{rich_content}</span>'


__all__ = ["Renderer", "render_tooltip"]
