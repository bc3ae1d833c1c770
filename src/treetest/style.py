"""Console glyphs and color codes used when rendering results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

COLOR_RESET = "\x1b[0m"
COLOR_FG_BLACK = "\x1b[30m"
COLOR_BG_RED = "\x1b[41m"
COLOR_BG_GREEN = "\x1b[42m"


class GlyphSet(str, Enum):
    EMOJI = "emoji"
    ASCII = "ascii"


_GLYPHS: dict[GlyphSet, dict[bool, str]] = {
    GlyphSet.EMOJI: {True: "✔️", False: "❌"},
    GlyphSet.ASCII: {True: "PASS", False: "FAIL"},
}


def boolean_to_color(value: bool) -> str:
    """Black text on green for True, black text on red for False."""
    if value:
        return COLOR_FG_BLACK + COLOR_BG_GREEN
    return COLOR_FG_BLACK + COLOR_BG_RED


@dataclass(frozen=True)
class Style:
    color: bool = True
    glyphs: GlyphSet = GlyphSet.EMOJI

    def glyph(self, passed: bool) -> str:
        return _GLYPHS[self.glyphs][passed]

    def mark(self, passed: bool) -> str:
        """Pass/fail glyph, wrapped in color codes when color is enabled."""
        glyph = self.glyph(passed)
        if not self.color:
            return glyph
        return f"{boolean_to_color(passed)}{glyph}{COLOR_RESET}"


DEFAULT_STYLE = Style()
PLAIN_STYLE = Style(color=False, glyphs=GlyphSet.ASCII)
