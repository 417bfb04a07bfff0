from PIL import Image, ImageDraw

# Mode "1" colors
INK = 0
PAPER = 1

MARGIN = 2
PREVIEW_SCALE = 3


def text_size(asset, text):
    lines = text.split("\n")
    width = 0
    for line in lines:
        width = max(width, sum(asset.glyph(ord(ch))[1] for ch in line if ord(ch) in asset))
    return width, len(lines) * asset.cell.height


def draw_char(draw, asset, code, x, y):
    """Blit one cell, clipped to the advance width. Returns the advance."""
    _, advance = asset.glyph(code)
    cell = asset.cell
    for row in range(cell.height):
        for col in range(min(advance, cell.width)):
            if asset.pixel(code, col, row):
                draw.point((x + col, y + row), fill=INK)
    return advance


def render_text(asset, text):
    """Draw `text` with the converted font inside a framed box."""
    width, height = text_size(asset, text)
    img = Image.new("1", (width + MARGIN * 2, height + MARGIN * 2), PAPER)
    draw = ImageDraw.Draw(img)
    draw.rectangle([0, 0, img.width - 1, img.height - 1], outline=INK)

    y = MARGIN
    for line in text.split("\n"):
        x = MARGIN
        for ch in line:
            code = ord(ch)
            if code not in asset:
                continue
            x += draw_char(draw, asset, code, x, y)
        y += asset.cell.height
    return img


def to_ascii(img):
    pixels = img.load()
    rows = []
    for y in range(img.height):
        rows.append("".join("*" if pixels[x, y] == INK else " " for x in range(img.width)).rstrip())
    return "\n".join(rows)


def save_preview(img, path, scale=PREVIEW_SCALE):
    big = img.resize((img.width * scale, img.height * scale), Image.NEAREST)
    big.convert("RGB").save(path)
    print(f"Preview saved to {path}")
