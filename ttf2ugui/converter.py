from ttf2ugui.cell import compute_cell
from ttf2ugui.errors import SourceError
from ttf2ugui.font_asset import FontAsset
from ttf2ugui.glyph_source import FreeTypeGlyphSource, font_family
from ttf2ugui.packer import pack_char

# Printable ASCII
FIRST_CHAR = 32
LAST_CHAR = 126


def build_asset(source, start=FIRST_CHAR, end=LAST_CHAR, font_path='', family=None):
    """
    Two passes over the range: size the cell from every glyph, then render
    each glyph again and pack it into that cell.
    """
    cell = compute_cell(source, start, end)
    if cell.width == 0 or cell.height == 0:
        raise SourceError(
            f"No ink in characters 0x{start:X}..0x{end:X}, cell would be {cell.width}x{cell.height}")
    print(f"Cell: {cell.width}x{cell.height} (ascent {cell.ascent}, descent {cell.descent})")
    print(f"Bytes per glyph: {cell.bytes_per_char}, total table: {cell.bytes_per_char * (end - start + 1)} bytes")

    bitmaps = []
    widths = []
    for code in range(start, end + 1):
        packed, advance = pack_char(source, code, cell)
        bitmaps.append(packed)
        widths.append(advance)

    return FontAsset(start, end, cell, bitmaps, widths,
                     font_path=font_path,
                     size_spec=source.size_spec,
                     family=family)


def convert_font(font_path, size_spec, start=FIRST_CHAR, end=LAST_CHAR):
    print(f"Loading font: {font_path}")
    source = FreeTypeGlyphSource(font_path, size_spec)
    return build_asset(source, start, end, font_path=font_path,
                       family=font_family(font_path))
