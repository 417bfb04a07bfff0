from collections import namedtuple


class Cell(namedtuple('Cell', ['width', 'ascent', 'descent'])):
    """Uniform glyph box, baseline at row `ascent`."""
    __slots__ = ()

    @property
    def height(self):
        return self.ascent + self.descent

    @property
    def bytes_per_row(self):
        return (self.width + 7) // 8

    @property
    def bytes_per_char(self):
        return self.bytes_per_row * self.height


def glyph_extent(glyph):
    """Return (ascent, descent) of one glyph relative to the baseline."""
    descent = max(0, glyph.rows - glyph.top)
    ascent = max(0, max(glyph.top, glyph.rows) - descent)
    return ascent, descent


def compute_cell(source, start, end):
    """
    Scan every character in [start, end] and find the smallest cell that
    holds all of them on a common baseline. Every glyph has to be loadable,
    a failure from the source aborts the scan.
    """
    max_width = 0
    max_ascent = 0
    max_descent = 0

    for code in range(start, end + 1):
        glyph = source.load_glyph(code)
        ascent, descent = glyph_extent(glyph)

        max_ascent = max(max_ascent, ascent)
        max_descent = max(max_descent, descent)
        max_width = max(max_width, glyph.width)

    return Cell(max_width, max_ascent, max_descent)
