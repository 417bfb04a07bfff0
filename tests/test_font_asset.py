import pytest

from ttf2ugui.cell import Cell
from ttf2ugui.font_asset import FontAsset


def small_asset(**kw):
    args = dict(start_char=65, end_char=66, cell=Cell(3, 2, 0),
                bitmaps=[b'\x01\x02', b'\x07\x00'], widths=[4, 3])
    args.update(kw)
    return FontAsset(**args)


def test_lookup():
    asset = small_asset()
    assert len(asset) == 2
    assert 65 in asset and 67 not in asset
    assert asset.glyph(66) == (b'\x07\x00', 3)
    assert asset.pixel(65, 0, 0)
    assert not asset.pixel(65, 1, 0)
    assert asset.pixel(65, 1, 1)
    assert asset.bits_per_pixel == 1


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        small_asset(start_char=66, end_char=65)


@pytest.mark.parametrize('cell', [Cell(0, 2, 0), Cell(3, 0, 0)])
def test_degenerate_cell_rejected(cell):
    with pytest.raises(ValueError):
        small_asset(cell=cell, bitmaps=[b'', b''])


def test_table_lengths_must_match_range():
    with pytest.raises(ValueError):
        small_asset(widths=[4])
    with pytest.raises(ValueError):
        small_asset(bitmaps=[b'\x01\x02'])


def test_bitmap_length_checked():
    with pytest.raises(ValueError, match='0x42'):
        small_asset(bitmaps=[b'\x01\x02', b'\x07'])


def test_read_only():
    asset = small_asset()
    with pytest.raises(AttributeError):
        asset.cell = Cell(8, 8, 0)
    with pytest.raises(TypeError):
        asset.widths[0] = 9
