"""Convert TTF/OTF fonts into fixed-cell 1bpp uGUI font tables."""

VERSION = '1.0'
