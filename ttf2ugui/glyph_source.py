import os

import freetype
from fontTools.ttLib import TTFont, TTLibError

from ttf2ugui.errors import SourceError
from ttf2ugui.glyph import Glyph

LOAD_FLAGS = freetype.FT_LOAD_RENDER | freetype.FT_LOAD_TARGET_MONO


def font_family(font_path):
    """Family name from the sfnt name table, or None for non-sfnt fonts."""
    try:
        tt = TTFont(font_path, lazy=True, fontNumber=0)
    except TTLibError:
        return None
    try:
        if 'name' not in tt:
            return None
        return tt['name'].getDebugName(1)
    finally:
        tt.close()


class FreeTypeGlyphSource:
    """Renders single characters of one face at one size."""

    def __init__(self, font_path, size_spec):
        if not os.path.isfile(font_path):
            raise SourceError(f"Font file not found: {font_path}")

        self.font_path = font_path
        self.size_spec = size_spec

        try:
            self.face = freetype.Face(font_path)
        except freetype.ft_errors.FT_Exception as e:
            raise SourceError(f"FreeType failed to load '{font_path}': {e}") from e

        try:
            if size_spec.dpi > 0:
                self.face.set_char_size(0, int(size_spec.size * 64), size_spec.dpi, size_spec.dpi)
            else:
                self.face.set_pixel_sizes(0, int(size_spec.size))
        except freetype.ft_errors.FT_Exception as e:
            raise SourceError(f"Cannot set size {size_spec.size:g} on '{font_path}': {e}") from e

    def load_glyph(self, code):
        if self.face.get_char_index(code) == 0:
            raise SourceError(f"Missing glyph for 0x{code:X} in '{self.font_path}'")

        try:
            self.face.load_char(code, LOAD_FLAGS)
        except freetype.ft_errors.FT_Exception as e:
            raise SourceError(f"Cannot render 0x{code:X}: {e}") from e

        slot = self.face.glyph
        bitmap = slot.bitmap
        return Glyph(
            width=bitmap.width,
            rows=bitmap.rows,
            pitch=bitmap.pitch,
            left=slot.bitmap_left,
            top=slot.bitmap_top,
            # 26.6 fixed point
            advance=slot.advance.x >> 6,
            buffer=list(bitmap.buffer),
        )
