from __future__ import annotations

import html

import bleach

from memo_client.core.markup import ImageBlock, split_blocks
from memo_client.core.models import Note
from memo_client.settings import THEME_DEEP_BLUE, THEME_LIGHT_PINK, normalize_theme

ALLOWED_TAGS = frozenset({"h1", "p", "img"})
ALLOWED_ATTRS = {"img": ["src", "alt"]}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "data"})

IMAGE_ALT = "メモの画像"

THEME_PAGE_COLORS = {
    THEME_LIGHT_PINK: ("linear-gradient(135deg, #fff0f5, #ffe4e1, #ffb6c1)", "#1f2937"),
    THEME_DEEP_BLUE: ("linear-gradient(135deg, #1a237e, #0d47a1, #000000)", "#ffffff"),
}


def render_note_body(content: str) -> str:
    """
    content -> safe HTML fragment:
      строка с разметкой картинки -> <img>, любая другая строка -> <p>.
    """
    parts: list[str] = []
    for block in split_blocks(content):
        if isinstance(block, ImageBlock):
            parts.append(
                f'<img src="{html.escape(block.url, quote=True)}" alt="{IMAGE_ALT}">'
            )
        else:
            parts.append(f"<p>{html.escape(block.text)}</p>")
    return sanitize_html("".join(parts))


def sanitize_html(fragment: str) -> str:
    return bleach.clean(
        fragment,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )


def render_detail_page(note: Note, theme: str) -> str:
    """Full HTML document for the detail view."""
    background, color = THEME_PAGE_COLORS[normalize_theme(theme)]
    title = html.escape(note.title)
    body = render_note_body(note.content)
    return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    body {{ font-family: sans-serif; padding: 16px; line-height: 1.5;
            background: {background}; color: {color}; }}
    h1 {{ font-size: 1.6em; margin: 0 0 16px 0; }}
    p {{ margin: 0; white-space: pre-wrap; min-height: 1.5em; opacity: 0.9; }}
    img {{ max-width: 100%; height: auto; border-radius: 8px; margin: 16px 0; }}
  </style>
</head>
<body><h1>{title}</h1>{body}</body>
</html>
"""
