import pytest

from jokecard.schemas import RenderOptions
from jokecard.services.layout import (
    ApproximateMeasurer,
    canvas_height,
    layout_joke,
    line_height,
    max_text_width,
    wrap_text,
)

LONG_JOKE = (
    "A SQL query walks into a bar, walks up to two tables and asks, "
    "'Can I join you?' The tables were not amused, so the query left "
    "with an outer join and a heavy sense of regret."
)


def test_default_wrap_width_matches_heuristic():
    measurer = ApproximateMeasurer(25.0)
    assert measurer.char_width == pytest.approx(15.0)
    assert measurer.max_chars(max_text_width(550)) == 31
    assert measurer.text_width("abc") == pytest.approx(45.0)


@pytest.mark.parametrize("max_chars", [5, 12, 31, 60])
def test_wrap_respects_limit_and_keeps_words(max_chars):
    lines = wrap_text(LONG_JOKE, max_chars)
    words = LONG_JOKE.split()
    for line in lines:
        if len(line) > max_chars:
            # only an unbreakable word may overflow, alone on its line
            assert line in words
    assert " ".join(lines).split() == words


def test_wrap_never_hyphenates():
    lines = wrap_text("state-of-the-art well-known", 8)
    assert lines == ["state-of-the-art", "well-known"]


def test_wrap_keeps_twopart_blank_line():
    assert wrap_text("Setup here\n\nDelivery", 31) == ["Setup here", "", "Delivery"]


def test_canvas_height_is_clamped():
    assert canvas_height(1, 30) == 200
    assert canvas_height(3, 30) == 200
    assert canvas_height(4, 30) == 220
    assert canvas_height(10, 30) == 400


def test_layout_joke_dimensions():
    options = RenderOptions()
    layout = layout_joke(LONG_JOKE, options)
    assert layout.width == 550
    assert layout.line_height == line_height(25.0) == 30
    assert layout.height == max(len(layout.lines) * 30 + 100, 200)
    assert all(len(line) <= 31 for line in layout.lines)


def test_layout_uses_custom_measurer():
    class Narrow:
        def text_width(self, text):
            return float(len(text))

        def max_chars(self, max_width):
            return 10

    layout = layout_joke("one two three four five", RenderOptions(), measurer=Narrow())
    assert layout.lines == ["one two", "three four", "five"]


def test_failed_fetch_text_fits_on_one_line():
    layout = layout_joke("Failed to fetch joke", RenderOptions())
    assert layout.lines == ["Failed to fetch joke"]
    assert layout.height == 200
