import json
import random

from palette_theme_generator.color import HSL, hex_to_hsl, hsl_to_hex
from palette_theme_generator.palette import (
    PaletteStore,
    add_color,
    build_custom_palette,
    build_palette,
    palette_from_dict,
    palette_to_dict,
    remove_color,
    replace_color,
)

NOW = 1700000000000


def _palette(**kwargs):
    return build_palette(
        "#4a90d9", "complementary", rng=random.Random(1), now=NOW, **kwargs
    )


def test_complementary_palette_from_base():
    palette = _palette()
    assert [c.name for c in palette.colors] == ["Primary Color", "Opposite Hue"]
    assert palette.colors[0].hex == hsl_to_hex(hex_to_hsl("#4a90d9"))
    assert palette.colors[1].hsl == HSL(31, 65, 57)
    assert palette.base_color.hex == "#4a90d9"
    assert palette.base_color.name == "Base"
    assert palette.harmony == "complementary"
    assert palette.name == "complementary palette"
    assert palette.created_at == NOW


def test_palette_id_format():
    prefix, stamp, suffix = _palette().id.split("-")
    assert prefix == "palette"
    assert stamp == str(NOW)
    assert len(suffix) == 6
    assert suffix.isalnum() and suffix == suffix.lower()


def test_injected_rng_and_clock_reproduce_palettes():
    first = build_palette(
        "#cc3399", "tetradic", variation=0.3, rng=random.Random(7), now=NOW
    )
    second = build_palette(
        "#cc3399", "tetradic", variation=0.3, rng=random.Random(7), now=NOW
    )
    assert first == second


def test_color_info_fields_agree():
    for color in build_palette("#0dbc79", "monochromatic", now=NOW).colors:
        assert color.hex == hsl_to_hex(color.hsl)
        assert all(isinstance(v, int) for v in color.hsl)


def test_custom_palette():
    palette = build_custom_palette("Mine", ["#FF0000", "00ff00"], now=NOW)
    assert [c.hex for c in palette.colors] == ["#ff0000", "#00ff00"]
    assert [c.name for c in palette.colors] == ["Custom 1", "Custom 2"]
    assert palette.base_color == palette.colors[0]
    assert palette.harmony == "complementary"
    assert palette.id.startswith(f"custom-{NOW}-")


def test_empty_custom_palette():
    palette = build_custom_palette("Empty", [])
    assert palette.colors == ()
    assert palette.base_color.hex == "#000000"


def test_edits_return_new_palettes():
    palette = _palette()
    added = add_color(palette, "#123456")
    assert len(added.colors) == 3
    assert added.colors[-1].name == "Custom 3"
    assert len(palette.colors) == 2

    removed = remove_color(added, 0)
    assert [c.name for c in removed.colors] == ["Opposite Hue", "Custom 3"]

    replaced = replace_color(palette, 1, "#abcdef")
    assert replaced.colors[1].hex == "#abcdef"
    assert replaced.colors[1].name == "Color 2"
    assert replace_color(palette, 0, "#abcdef", name="Sky").colors[0].name == "Sky"


def test_edits_out_of_range_return_none():
    palette = _palette()
    assert remove_color(palette, 2) is None
    assert remove_color(palette, -1) is None
    assert replace_color(palette, 5, "#000000") is None


def test_palette_dict_round_trip():
    palette = _palette()
    data = palette_to_dict(palette)
    assert data["baseColor"]["hex"] == "#4a90d9"
    assert data["createdAt"] == NOW
    assert palette_from_dict(json.loads(json.dumps(data))) == palette


def test_store_in_memory():
    store = PaletteStore()
    palette = _palette()
    store.add(palette)
    assert store.get_by_id(palette.id) == palette
    assert store.get_by_id("missing") is None
    assert store.update(palette.id, name="Renamed")
    assert store.get_by_id(palette.id).name == "Renamed"
    assert not store.update("missing", name="x")
    assert store.remove(palette.id)
    assert not store.remove(palette.id)
    assert store.get_all() == []


def test_store_persists_to_file(tmp_path):
    path = tmp_path / "nested" / "palettes.json"
    store = PaletteStore(str(path))
    palette = _palette()
    store.add(palette)
    assert store.add_color_to_palette(palette.id, "#ff8800")
    assert store.remove_color_from_palette(palette.id, 0)
    assert not store.remove_color_from_palette(palette.id, 9)
    assert not store.add_color_to_palette("missing", "#ff8800")

    reloaded = PaletteStore(str(path)).get_by_id(palette.id)
    assert [c.hex for c in reloaded.colors] == [palette.colors[1].hex, "#ff8800"]

    store.clear()
    assert PaletteStore(str(path)).get_all() == []


def test_store_with_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "palettes.json"
    path.write_text("{not json")
    assert PaletteStore(str(path)).get_all() == []

    path.write_text(json.dumps([{"id": "x"}]))
    assert PaletteStore(str(path)).get_all() == []


def test_saturation_factor_keeps_color_fields_consistent():
    for factor in (2.0, -1.0):
        palette = build_palette("#4a90d9", "complementary", saturation=factor, now=NOW)
        for color in palette.colors:
            assert 0 <= color.hsl.s <= 100
            assert color.hex == hsl_to_hex(color.hsl)


def test_store_update_rejects_unknown_fields():
    store = PaletteStore()
    palette = _palette()
    store.add(palette)
    assert not store.update(palette.id, colour="red")
    assert store.get_by_id(palette.id) == palette
