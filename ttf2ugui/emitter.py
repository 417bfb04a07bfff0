import os
import re
import tempfile
import unicodedata

from ttf2ugui.errors import OutputError


def is_printable(char):
    """Exclude control and invisible characters."""
    category = unicodedata.category(char)
    return not category.startswith("C")


def char_label(code):
    char = chr(code)
    if is_printable(char):
        return f"'{char}'"
    return f"U+{code:04X}"


def font_name(font_path, cell):
    """<base name up to the first dot>_<width>X<height>, usable as a C identifier."""
    base = os.path.basename(font_path).split('.', 1)[0]
    base = re.sub(r'[^A-Za-z0-9_]', '_', base)
    if not base or base[0].isdigit():
        base = '_' + base
    return f"{base}_{cell.width}X{cell.height}"


def render_source(asset, name):
    cell = asset.cell
    size_spec = asset.size_spec
    lines = []

    lines.append(f"// Converted from {asset.font_path}")
    lines.append(f"//  --size {size_spec.size:g}")
    if size_spec.dpi > 0:
        lines.append(f"//  --dpi {size_spec.dpi}")
    if asset.family:
        lines.append(f"// Font: {asset.family}")
    lines.append("// For copyright, see original font file.")
    lines.append("")
    lines.append('#include "ugui.h"')
    lines.append("")

    # Bitmaps, one row per character
    lines.append(f"static __UG_FONT_DATA unsigned char fontBits_{name}[{len(asset)}][{cell.bytes_per_char}] = {{")
    for code, bits in zip(range(asset.start_char, asset.end_char + 1), asset.bitmaps):
        hex_bytes = ",".join(f"0x{b:02X}" for b in bits)
        sep = "," if code < asset.end_char else " "
        lines.append(f"  {{{hex_bytes} }}{sep} // 0x{code:X} {char_label(code)}")
    lines.append("};")

    lines.append(f"static const UG_U8 fontWidths_{name}[] = {{")
    lines.append(",".join(str(w) for w in asset.widths) + "};")

    lines.append(
        f"const UG_FONT font_{name} = {{ (unsigned char*)fontBits_{name}, FONT_TYPE_1BPP, "
        f"{cell.width}, {cell.height}, {asset.start_char}, {asset.end_char}, fontWidths_{name} }};")
    lines.append("")
    return "\n".join(lines)


def render_header(name):
    return f"extern const UG_FONT font_{name};\n"


def file_mode():
    """Mode a plain open(..., "w") would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_atomic(files, out_dir):
    """
    Write {filename: text} into out_dir. Everything goes to temporary files
    first and is renamed into place only when all writes succeeded.
    """
    pending = []
    mode = file_mode()
    try:
        for filename, text in files.items():
            fd, tmp_path = tempfile.mkstemp(prefix='.' + filename + '.', suffix='.tmp', dir=out_dir)
            pending.append((tmp_path, os.path.join(out_dir, filename)))
            with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
                f.write(text)
            os.chmod(tmp_path, mode)
        for tmp_path, path in pending:
            os.replace(tmp_path, path)
    except OSError as e:
        for tmp_path, _ in pending:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        raise OutputError(f"{e.filename or out_dir}: {e.strerror or e}") from e

    return [path for _, path in pending]


def dump_font(asset, out_dir='.'):
    """Write <name>.c and <name>.h for `asset`, return their paths."""
    name = font_name(asset.font_path, asset.cell)
    if not os.path.isdir(out_dir):
        raise OutputError(f"{out_dir}: not a directory")

    files = {
        f"{name}.c": render_source(asset, name),
        f"{name}.h": render_header(name),
    }
    paths = write_atomic(files, out_dir)
    for path in paths:
        print(f"{path} written")
    return paths
