from collections import namedtuple

# One rendered 1bpp glyph, rows are `pitch` bytes wide and MSB-first.
Glyph = namedtuple('Glyph', ['width', 'rows', 'pitch', 'left', 'top', 'advance', 'buffer'])

# dpi == 0 means `size` is a pixel height, otherwise a point size.
SizeSpec = namedtuple('SizeSpec', ['size', 'dpi'])
