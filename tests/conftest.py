import pytest

from ttf2ugui.errors import SourceError
from ttf2ugui.glyph import Glyph, SizeSpec


def make_glyph(art, left=0, top=None, advance=None, pad=0):
    """Build a 1bpp Glyph from rows of '#' (ink) and '.' (paper)."""
    rows = len(art)
    width = len(art[0]) if art else 0
    pitch = (width + 7) // 8 + pad
    buffer = [0] * (pitch * rows)
    for y, line in enumerate(art):
        for x, c in enumerate(line):
            if c == '#':
                buffer[y * pitch + x // 8] |= 0x80 >> (x % 8)
    if top is None:
        top = rows
    if advance is None:
        advance = width + 1
    return Glyph(width, rows, pitch, left, top, advance, buffer)


def pattern(code, width, rows):
    return [''.join('#' if (x + y + code) % 3 == 0 else '.' for x in range(width))
            for y in range(rows)]


class FakeGlyphSource:
    """Glyph source backed by a dict, counts how often each code is rendered."""

    def __init__(self, glyphs, size_spec=SizeSpec(8, 0)):
        self.glyphs = glyphs
        self.size_spec = size_spec
        self.loads = {}

    def load_glyph(self, code):
        self.loads[code] = self.loads.get(code, 0) + 1
        if code not in self.glyphs:
            raise SourceError(f"Missing glyph for 0x{code:X}")
        return self.glyphs[code]


def ascii_glyphs():
    """
    Printable ASCII where the widest glyph is 6px ('W'), the tallest
    ascent is 6 and the deepest descent 2 ('g').
    """
    glyphs = {}
    for code in range(32, 127):
        if code == ord(' '):
            glyphs[code] = make_glyph([], advance=3)
        elif code == ord('W'):
            glyphs[code] = make_glyph(pattern(code, 6, 6), top=6, advance=7)
        elif code == ord('g'):
            glyphs[code] = make_glyph(pattern(code, 5, 6), top=4, advance=6)
        elif code == ord('.'):
            glyphs[code] = make_glyph(['##', '##'], left=1, top=2, advance=4)
        else:
            glyphs[code] = make_glyph(pattern(code, 5, 6), top=6, advance=6)
    return glyphs


@pytest.fixture
def ascii_source():
    return FakeGlyphSource(ascii_glyphs())
