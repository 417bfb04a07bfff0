import sys

from ttf2ugui.errors import CellOverflowError


def source_pixel(glyph, x, y):
    byte = glyph.buffer[y * glyph.pitch + x // 8]
    return byte & (0x80 >> (x % 8)) != 0


def x_offset(glyph, cell):
    """Left bearing clamped so the glyph bitmap stays inside the cell."""
    return min(max(0, glyph.left), cell.width - glyph.width)


def pack_glyph(glyph, cell):
    """
    Copy a rendered 1bpp glyph into a zeroed cell buffer.

    Cell rows are `cell.bytes_per_row` bytes, pixel x lives in bit
    (x % 8) of byte x // 8, least significant bit first as uGUI reads it.
    The glyph's baseline lands on row `cell.ascent`.
    """
    if glyph.top > cell.ascent:
        raise CellOverflowError(
            f"glyph top {glyph.top} is above cell ascent {cell.ascent}")
    if glyph.width > cell.width:
        raise CellOverflowError(
            f"glyph width {glyph.width} exceeds cell width {cell.width}")

    bytes_per_row = cell.bytes_per_row
    data = bytearray(cell.bytes_per_char)
    xoff = x_offset(glyph, cell)

    for i in range(glyph.rows):
        for j in range(glyph.width):
            if not source_pixel(glyph, j, i):
                continue

            xpos = j + xoff
            ypos = cell.ascent + i - glyph.top
            if not (0 <= xpos < cell.width and 0 <= ypos < cell.height):
                raise CellOverflowError(
                    f"pixel ({j}, {i}) lands outside the {cell.width}x{cell.height} cell")

            data[ypos * bytes_per_row + xpos // 8] |= 1 << (xpos % 8)

    return bytes(data)


def has_ink(glyph):
    return any(source_pixel(glyph, x, y) for y in range(glyph.rows) for x in range(glyph.width))


def pack_char(source, code, cell):
    """Render `code` again and return (packed bitmap, advance width)."""
    glyph = source.load_glyph(code)
    xoff = x_offset(glyph, cell)
    if xoff != glyph.left and glyph.width <= cell.width and has_ink(glyph):
        print(f"Warning: 0x{code:X} left bearing {glyph.left} moved to {xoff} "
              f"to fit the {cell.width}px cell", file=sys.stderr)
    try:
        packed = pack_glyph(glyph, cell)
    except CellOverflowError as e:
        raise CellOverflowError(f"0x{code:X}: {e}") from e
    return packed, glyph.advance
