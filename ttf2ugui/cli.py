#!/usr/bin/env python
#-------------------------------------------------------------------------
#
#    TTF Font to uGUI bitmap font converter
#
#    Converts a TTF/OTF font into a fixed-cell 1bpp UG_FONT table
#    (<font>_<w>X<h>.c and .h) and/or previews sample text with it.
#
#    Usage:
#        ttf2ugui {--show text|--dump} --font=fontfile [--dpi=displaydpi] --size=fontsize
#
#    Arguments:
#        --font: Path to the font file.
#        --size: Font size, in pixels unless --dpi is given, then points.
#        --dpi: Display resolution.
#        --dump: Write the C source and header.
#        --show: Render text with the converted font.
#-------------------------------------------------------------------------
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
#-------------------------------------------------------------------------

import sys
import math
import argparse

from ttf2ugui import VERSION
from ttf2ugui.converter import FIRST_CHAR, LAST_CHAR, convert_font
from ttf2ugui.emitter import dump_font
from ttf2ugui.errors import ConfigError, ConversionError, OutputError
from ttf2ugui.glyph import SizeSpec
from ttf2ugui.preview import PREVIEW_SCALE, render_text, save_preview, to_ascii


class ArgumentParser(argparse.ArgumentParser):
    """argparse that raises instead of exiting, so main() owns exit codes."""

    def error(self, message):
        raise ConfigError(message)


def parse_codepoint(s):
    """Accept decimal or 0x-prefixed hex codepoint strings."""
    return int(s, 0)


def build_parser():
    parser = ArgumentParser(
        prog='ttf2ugui',
        description='TTF to uGUI bitmap font converter. If --dpi is not given, font size is assumed to be pixels.')
    parser.add_argument('--font', dest='font_path', help='Path to the font file.')
    parser.add_argument('--size', dest='font_size', type=float, default=0, help='Font size.')
    parser.add_argument('--dpi', type=int, default=0, help='Display DPI, makes --size a point size.')
    parser.add_argument('--dump', action='store_true', help='Write <font>_<w>X<h>.c and .h.')
    parser.add_argument('--show', dest='show_text', help='Render this text with the converted font.')
    parser.add_argument('--first', type=parse_codepoint, default=FIRST_CHAR, help='First character code (default: 32).')
    parser.add_argument('--last', type=parse_codepoint, default=LAST_CHAR, help='Last character code (default: 126).')
    parser.add_argument('--out', dest='out_dir', default='.', help='Output directory for --dump.')
    parser.add_argument('--preview', dest='preview_image', help='Also save the --show rendering as PNG.')
    parser.add_argument('--scale', type=int, default=PREVIEW_SCALE, help='PNG preview scale factor.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser


def parse_args(argv):
    args = build_parser().parse_args(argv)

    if not args.dump and args.show_text is None:
        raise ConfigError("one of --dump or --show is required")
    if not args.font_path:
        raise ConfigError("--font is required")
    if not math.isfinite(args.font_size) or args.font_size <= 0:
        raise ConfigError("--size must be greater than zero")
    if args.dpi < 0:
        raise ConfigError("--dpi must not be negative")
    if args.first < 0 or args.first > args.last:
        raise ConfigError("--first must be <= --last")
    if args.scale < 1:
        raise ConfigError("--scale must be at least 1")
    if args.preview_image and args.show_text is None:
        raise ConfigError("--preview needs --show")
    return args


def run(args):
    size_spec = SizeSpec(args.font_size, args.dpi)
    font = convert_font(args.font_path, size_spec, args.first, args.last)

    if args.show_text is not None:
        img = render_text(font, args.show_text)
        print(to_ascii(img))
        if args.preview_image:
            try:
                save_preview(img, args.preview_image, args.scale)
            except OSError as e:
                raise OutputError(f"{args.preview_image}: {e}") from e

    if args.dump:
        dump_font(font, args.out_dir)


def main(argv=None):
    try:
        args = parse_args(argv)
        run(args)
    except ConversionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        if isinstance(e, ConfigError):
            print("usage: ttf2ugui {--show text|--dump} --font=fontfile [--dpi=displaydpi] --size=fontsize",
                  file=sys.stderr)
        return e.exit_code
    return 0


if (__name__ == '__main__'):
    sys.exit(main())
