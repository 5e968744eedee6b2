import logging
import random

from palette_theme_generator.color import HSL, hsl_to_hex
from palette_theme_generator.export import theme_to_dict
from palette_theme_generator.palette import build_palette
from palette_theme_generator.theme import (
    convert_theme_to_palette,
    detect_harmony_type,
    detect_type_from_colors,
    extract_key_colors,
    is_grayscale,
    map_palette_to_theme,
)

DARK_PLUS_LIKE = {
    "editor.background": "#1e1e1e",
    "editor.foreground": "#d4d4d4",
    "statusBar.background": "#007acc",
    "terminal.ansiBlue": "#2472c8",
    "terminal.ansiGreen": "#0dbc79",
    "terminal.ansiMagenta": "#cc3399",
}


def test_reconstructs_triadic_from_workbench_colors():
    palette = convert_theme_to_palette(
        {"name": "Dark Plus-ish", "colors": DARK_PLUS_LIKE},
        rng=random.Random(0),
        now=42,
    )
    assert [c.hex for c in palette.colors] == [
        "#007acc",
        "#2472c8",
        "#0dbc79",
        "#cc3399",
    ]
    assert palette.harmony == "triadic"
    assert [c.name for c in palette.colors] == [
        "Color 1",
        "Color 2",
        "Color 3",
        "Color 4",
    ]
    assert palette.base_color == palette.colors[0]
    assert palette.name == "Dark Plus-ish"
    assert palette.created_at == 42
    assert palette.id.startswith("imported-42-")
    assert len(palette.id.split("-")[2]) == 9


def test_grayscale_filter():
    assert is_grayscale("#808080")
    assert is_grayscale("#1e1e1e")
    assert not is_grayscale("#807060")


def test_extract_skips_gray_duplicates_and_alpha():
    colors = {
        "statusBar.background": "#007ACC",
        "focusBorder": "#007acc80",
        "button.background": "#333333",
        "editorCursor.foreground": "not a color",
    }
    assert extract_key_colors(colors) == ["#007acc"]


def test_extract_scans_all_colors_when_priority_keys_are_sparse():
    colors = {
        "statusBar.background": "#007acc",
        "editor.background": "#1e1e1e",
        "gitDecoration.addedResourceForeground": "#81b88b",
        "charts.red": "#f48771",
        "charts.orange": "#d18616",
    }
    assert extract_key_colors(colors) == ["#007acc", "#81b88b", "#f48771", "#d18616"]


def test_extract_caps_at_six_colors():
    colors = {f"custom.color{i}": hsl_to_hex(HSL(i * 40, 70, 50)) for i in range(9)}
    assert len(extract_key_colors(colors)) == 6


def test_fallback_when_no_chromatic_colors():
    palette = convert_theme_to_palette(
        {"colors": {"editor.background": "#1e1e1e", "editor.foreground": "#d4d4d4"}}
    )
    assert [c.hex for c in palette.colors] == ["#4a90d9"]
    assert palette.harmony == "monochromatic"
    assert palette.name == "Imported Theme"


def test_detect_type_from_colors():
    assert detect_type_from_colors({}) == "dark"
    assert detect_type_from_colors({"editor.background": "#ffffff"}) == "light"
    assert detect_type_from_colors({"editor.background": "#fafafa80"}) == "light"


def test_detect_harmony_type_rules():
    red = "#ff0000"
    assert detect_harmony_type([red]) == "monochromatic"
    assert detect_harmony_type([red, "#ff1a00"]) == "monochromatic"
    assert detect_harmony_type([red, "#00ffff"]) == "complementary"
    assert detect_harmony_type([red, hsl_to_hex(HSL(45, 100, 50))]) == "analogous"
    assert (
        detect_harmony_type([red, hsl_to_hex(HSL(75, 100, 50))])
        == "split-complementary"
    )
    tetradic = [red] + [hsl_to_hex(HSL(h, 100, 50)) for h in (90, 10, 20)]
    assert detect_harmony_type(tetradic) == "tetradic"


def test_embedded_palette_is_restored():
    palette = build_palette(
        "#4a90d9", "tetradic", variation=0.2, rng=random.Random(9), now=1
    )
    theme_data = theme_to_dict(map_palette_to_theme(palette, theme_name="Exported"))

    restored = convert_theme_to_palette(theme_data, rng=random.Random(1), now=99)
    assert restored.colors == palette.colors
    assert restored.base_color == palette.base_color
    assert restored.harmony == "tetradic"
    assert restored.name == "Exported"
    assert restored.id != palette.id
    assert restored.id.startswith("imported-99-")


def test_detected_theme_type_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="palette_theme_generator.theme.reconstruct")
    convert_theme_to_palette({"colors": DARK_PLUS_LIKE})
    assert "as triadic from a dark theme" in caplog.text
