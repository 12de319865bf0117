import textwrap
from dataclasses import dataclass
from typing import List, Protocol

from PIL import ImageFont

from jokecard.schemas import RenderOptions

TEXT_MARGIN = 75
VERTICAL_PADDING = 100
MIN_HEIGHT = 200
LINE_SPACING = 1.2
CHAR_WIDTH_RATIO = 0.6


class TextMeasurer(Protocol):
    def text_width(self, text: str) -> float: ...

    def max_chars(self, max_width: float) -> int: ...


class ApproximateMeasurer:
    """Every glyph is assumed to be ``char_ratio`` of the font size wide."""

    def __init__(self, font_size: float, char_ratio: float = CHAR_WIDTH_RATIO):
        self.char_width = font_size * char_ratio

    def text_width(self, text: str) -> float:
        return len(text) * self.char_width

    def max_chars(self, max_width: float) -> int:
        return max(1, int(max_width / self.char_width))


class FontMeasurer:
    def __init__(self, font: ImageFont.FreeTypeFont):
        self.font = font

    def text_width(self, text: str) -> float:
        return self.font.getlength(text)

    def max_chars(self, max_width: float) -> int:
        # widest common glyph keeps the bound conservative
        return max(1, int(max_width / self.font.getlength("M")))


@dataclass(frozen=True)
class Layout:
    lines: List[str]
    width: int
    height: int
    line_height: int


def wrap_text(text: str, max_chars: int) -> List[str]:
    """Wrap each paragraph on word boundaries; blank lines are kept."""
    lines: List[str] = []
    for paragraph in text.split("\n"):
        wrapped = textwrap.wrap(
            paragraph,
            width=max_chars,
            break_long_words=False,
            break_on_hyphens=False,
        )
        lines.extend(wrapped or [""])
    return lines


def max_text_width(canvas_width: int) -> int:
    return canvas_width - TEXT_MARGIN


def line_height(font_size: float) -> int:
    return int(font_size * LINE_SPACING)


def canvas_height(line_count: int, height_per_line: int) -> int:
    return max(line_count * height_per_line + VERTICAL_PADDING, MIN_HEIGHT)


def layout_joke(text: str, options: RenderOptions, measurer: TextMeasurer | None = None) -> Layout:
    if measurer is None:
        measurer = ApproximateMeasurer(options.font_scale)
    lines = wrap_text(text, measurer.max_chars(max_text_width(options.canvas_width)))
    step = line_height(options.font_scale)
    return Layout(
        lines=lines,
        width=options.canvas_width,
        height=canvas_height(len(lines), step),
        line_height=step,
    )
