from ttf2ugui.glyph import SizeSpec

FONT_TYPE_1BPP = 1


class FontAsset:
    """Finished bitmap font: one packed cell and one advance width per code."""

    bits_per_pixel = FONT_TYPE_1BPP

    def __init__(self, start_char, end_char, cell, bitmaps, widths,
                 font_path='', size_spec=SizeSpec(0, 0), family=None):
        if end_char < start_char:
            raise ValueError(f"empty character range {start_char}..{end_char}")
        if cell.width <= 0 or cell.height <= 0:
            raise ValueError(f"degenerate cell {cell.width}x{cell.height}")

        count = end_char - start_char + 1
        bitmaps = tuple(bytes(b) for b in bitmaps)
        widths = tuple(int(w) for w in widths)
        if len(bitmaps) != count or len(widths) != count:
            raise ValueError(
                f"expected {count} glyphs, got {len(bitmaps)} bitmaps and {len(widths)} widths")
        for code, bits in zip(range(start_char, end_char + 1), bitmaps):
            if len(bits) != cell.bytes_per_char:
                raise ValueError(
                    f"bitmap for 0x{code:X} is {len(bits)} bytes, expected {cell.bytes_per_char}")

        self._start_char = start_char
        self._end_char = end_char
        self._cell = cell
        self._bitmaps = bitmaps
        self._widths = widths
        self._font_path = font_path
        self._size_spec = size_spec
        self._family = family

    start_char = property(lambda self: self._start_char)
    end_char = property(lambda self: self._end_char)
    cell = property(lambda self: self._cell)
    bitmaps = property(lambda self: self._bitmaps)
    widths = property(lambda self: self._widths)
    font_path = property(lambda self: self._font_path)
    size_spec = property(lambda self: self._size_spec)
    family = property(lambda self: self._family)

    def __len__(self):
        return len(self._bitmaps)

    def __contains__(self, code):
        return self._start_char <= code <= self._end_char

    def glyph(self, code):
        """Return (packed bitmap, advance width) for `code`."""
        index = code - self._start_char
        return self._bitmaps[index], self._widths[index]

    def pixel(self, code, x, y):
        bits, _ = self.glyph(code)
        return bits[y * self._cell.bytes_per_row + x // 8] & (1 << (x % 8)) != 0
