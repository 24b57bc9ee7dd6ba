from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

IMAGE_MARKUP = re.compile(r"!\[.*?\]\((.*?)\)")
IMAGE_PLACEHOLDER = "[画像]"
DEFAULT_CAPTION = "画像"


@dataclass(frozen=True)
class TextBlock:
    text: str


@dataclass(frozen=True)
class ImageBlock:
    url: str


Block = Union[TextBlock, ImageBlock]


def split_blocks(content: str) -> list[Block]:
    """
    Разбивает содержимое заметки на блоки для detail-вида.

    Строка считается картинкой, только если она начинается с "![" и в ней
    находится разметка ![caption](url); всё остальное считается обычным текстом
    (включая пустые строки).
    """
    blocks: list[Block] = []
    for line in (content or "").split("\n"):
        if line.startswith("!["):
            m = IMAGE_MARKUP.search(line)
            if m:
                blocks.append(ImageBlock(m.group(1)))
                continue
        blocks.append(TextBlock(line))
    return blocks


def preview_text(content: str) -> str:
    """List preview: image markup -> placeholder, lines joined by spaces."""
    replaced = IMAGE_MARKUP.sub(IMAGE_PLACEHOLDER, content or "")
    return " ".join(line.strip() for line in replaced.splitlines() if line.strip())


def image_markup_line(url: str, caption: str = DEFAULT_CAPTION) -> str:
    return f"![{caption}]({url})"
