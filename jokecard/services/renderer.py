"""Rasterize a joke onto a dark-mode PNG card."""

import io
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from jokecard.schemas import Joke, RenderOptions
from jokecard.services.layout import FontMeasurer, layout_joke

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

BACKGROUND: RGB = (30, 30, 30)
TEXT_COLOR: RGB = (255, 255, 255)
CREDIT_COLOR: RGB = (200, 200, 200)

TEXT_X = 50
TEXT_Y = 50
TAG_Y = 30
TAG_PADDING = 5
TAG_RIGHT_MARGIN = 50

CREDIT_TEXT = "Thanks, JokeAPI (https://v2.jokeapi.dev)"
CREDIT_FONT_SIZE = 13.0
CREDIT_BOTTOM_MARGIN = 15

DEFAULT_TAG_COLOR: RGB = (52, 73, 94)
CATEGORY_TAG_COLORS = {
    "Programming": (41, 128, 185),
    "Misc": (46, 204, 113),
    "Dark": (44, 62, 80),
    "Pun": (155, 89, 182),
    "Spooky": (231, 76, 60),
    "Christmas": (192, 57, 43),
}


class FontLoadError(RuntimeError):
    pass


@lru_cache(maxsize=None)
def load_font(path: str, size: float) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(path, size)
    except OSError as exc:
        logger.error("font load failed path=%s size=%s error=%s", path, size, exc)
        raise FontLoadError(f"Could not load font {path!r}") from exc


@dataclass(frozen=True)
class FontSet:
    body: ImageFont.FreeTypeFont
    tag: ImageFont.FreeTypeFont
    credit: ImageFont.FreeTypeFont

    @classmethod
    def load(cls, path: str, options: RenderOptions) -> "FontSet":
        return cls(
            body=load_font(path, options.font_scale),
            tag=load_font(path, options.tag_font_scale),
            credit=load_font(path, CREDIT_FONT_SIZE),
        )


def category_colors(category: str) -> Tuple[RGB, RGB]:
    return CATEGORY_TAG_COLORS.get(category, DEFAULT_TAG_COLOR), TEXT_COLOR


def _draw_tag(draw: ImageDraw.ImageDraw, category: str, width: int, options: RenderOptions, font) -> None:
    label = f" {category} "
    label_width = int(FontMeasurer(font).text_width(label))
    box_width = label_width + TAG_PADDING * 2
    box_height = int(options.tag_font_scale) + TAG_PADDING * 2
    tag_x = max(0, width - box_width - TAG_RIGHT_MARGIN)

    background, foreground = category_colors(category)
    draw.rectangle(
        [tag_x, TAG_Y, tag_x + box_width - 1, TAG_Y + box_height - 1],
        fill=background,
    )
    draw.text((tag_x + TAG_PADDING, TAG_Y + TAG_PADDING), label, font=font, fill=foreground)


def render_joke_card(joke: Joke, options: RenderOptions, fonts: FontSet) -> bytes:
    layout = layout_joke(joke.text, options)
    img = Image.new("RGB", (layout.width, layout.height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    _draw_tag(draw, joke.category, layout.width, options, fonts.tag)

    y = TEXT_Y
    for line in layout.lines:
        draw.text((TEXT_X, y), line, font=fonts.body, fill=TEXT_COLOR)
        y += layout.line_height

    if options.show_credit_line:
        credit_y = layout.height - int(CREDIT_FONT_SIZE) - CREDIT_BOTTOM_MARGIN
        draw.text((TEXT_X, credit_y), CREDIT_TEXT, font=fonts.credit, fill=CREDIT_COLOR)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
