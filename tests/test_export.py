import json
import random

import pytest

from palette_theme_generator.color import HSL, hsl_to_hex
from palette_theme_generator.export import (
    ThemeImportError,
    build_color_customizations,
    default_theme_filename,
    export_theme,
    generate_readability_report,
    import_theme_file,
    load_theme_file,
    theme_to_dict,
)
from palette_theme_generator.export.report import TEXT_ROLE_PAIRS
from palette_theme_generator.palette import build_palette
from palette_theme_generator.theme import map_palette_to_theme


@pytest.fixture
def theme():
    palette = build_palette(
        hsl_to_hex(HSL(220, 50, 20)), "triadic", rng=random.Random(0), now=0
    )
    return map_palette_to_theme(palette, theme_name="Midnight Harbor")


def test_default_theme_filename():
    assert default_theme_filename("My Cool Theme!") == "my-cool-theme-color-theme.json"
    assert default_theme_filename("Neon_Nights v2") == "neon_nights-v2-color-theme.json"
    assert default_theme_filename("Ocean   Deep") == "ocean-deep-color-theme.json"


def test_theme_to_dict_shape(theme):
    data = theme_to_dict(theme)
    assert set(data) == {"name", "type", "colors", "tokenColors", "_palette"}
    assert data["type"] == "dark"
    assert data["_palette"]["harmony"] == "triadic"

    bare = theme_to_dict(theme._replace(source_palette=None))
    assert "_palette" not in bare


def test_export_into_directory(theme, tmp_path):
    path = export_theme(theme, str(tmp_path))
    assert path == str(tmp_path / "midnight-harbor-color-theme.json")
    with open(path) as f:
        data = json.load(f)
    assert data["name"] == "Midnight Harbor"
    assert data["colors"]["editor.background"] == theme.colors["editor.background"]


def test_export_to_explicit_file(theme, tmp_path):
    target = tmp_path / "out" / "custom.json"
    assert export_theme(theme, str(target)) == str(target)
    assert target.exists()


def test_export_import_round_trip(theme, tmp_path):
    path = export_theme(theme, str(tmp_path))
    palette = import_theme_file(path, rng=random.Random(2), now=5)
    assert palette.colors == theme.source_palette.colors
    assert palette.name == "Midnight Harbor"
    assert palette.id.startswith("imported-5-")


def test_import_without_embedded_palette(theme, tmp_path):
    path = tmp_path / "plain.json"
    path.write_text(
        json.dumps({"name": "Plain", "colors": {"statusBar.background": "#007acc"}})
    )
    palette = import_theme_file(str(path))
    assert palette.name == "Plain"
    assert palette.colors[0].hex == "#007acc"


def test_load_rejects_files_without_colors(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"editor.fontSize": 14}))
    with pytest.raises(ThemeImportError, match="missing colors or tokenColors"):
        load_theme_file(str(path))
    assert import_theme_file(str(path)) is None


def test_import_failures_return_none(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{ nope")
    assert import_theme_file(str(broken)) is None
    assert import_theme_file(str(tmp_path / "missing.json")) is None

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2, 3]")
    assert import_theme_file(str(listing)) is None


def test_token_colors_only_theme_is_accepted(tmp_path):
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"tokenColors": []}))
    palette = import_theme_file(str(path))
    assert palette.name == "Imported Theme"
    assert palette.colors[0].hex == "#4a90d9"


def test_color_customizations(theme):
    settings = build_color_customizations(theme)
    assert settings["workbench.colorCustomizations"] == theme.colors
    assert settings["editor.tokenColorCustomizations"] == {
        "textMateRules": theme.token_colors
    }


def test_readability_report(theme):
    report, issues = generate_readability_report(theme)
    assert "READABILITY REPORT" in report
    assert "Midnight Harbor" in report
    text_labels = {label for label, _, _ in TEXT_ROLE_PAIRS}
    assert [issue for issue in issues if issue[0] in text_labels] == []
    for label, hex_val, achieved, required in issues:
        assert achieved < required


def test_readability_report_flags_overridden_colors(theme):
    colors = dict(theme.colors)
    colors["editor.foreground"] = colors["editor.background"]
    bad = theme._replace(colors=colors)
    report, issues = generate_readability_report(bad)
    assert ("editor", bad.colors["editor.background"], 1.0, 4.5) in [
        (label, hex_val, round(achieved, 2), required)
        for label, hex_val, achieved, required in issues
    ]
    assert "ISSUES FOUND" in report
