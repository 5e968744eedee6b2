import json

import pytest

from palette_theme_generator.cli import main
from palette_theme_generator.palette import PaletteStore


def _generate(tmp_path, *extra):
    store = str(tmp_path / "palettes.json")
    args = [
        "generate",
        "#4a90d9",
        "--seed",
        "1",
        "--output",
        str(tmp_path / "themes"),
        "--store",
        store,
    ]
    return main(args + list(extra)), store


def test_generate_exports_theme(tmp_path, capsys):
    code, _ = _generate(tmp_path, "--preview")
    assert code == 0

    theme_path = tmp_path / "themes" / "complementary-palette-theme-color-theme.json"
    data = json.loads(theme_path.read_text())
    assert data["name"] == "complementary palette Theme"
    assert (tmp_path / "themes" / "complementary-palette-theme-settings.json").exists()

    out = capsys.readouterr().out
    assert "READABILITY REPORT" in out
    assert "Exported:" in out


def test_generate_save_list_export_delete(tmp_path, capsys):
    code, store = _generate(tmp_path, "--save", "--name", "Harbor")
    assert code == 0
    [palette] = PaletteStore(store).get_all()
    assert palette.name == "Harbor"

    assert main(["list", "--store", store]) == 0
    assert palette.id in capsys.readouterr().out

    out_dir = str(tmp_path / "again")
    assert main(["export", palette.id, "--output", out_dir, "--store", store]) == 0
    assert (tmp_path / "again" / "harbor-theme-color-theme.json").exists()

    assert main(["delete", palette.id, "--store", store]) == 0
    assert main(["delete", palette.id, "--store", store]) == 1
    assert main(["export", palette.id, "--store", store]) == 1


def test_custom_and_import(tmp_path):
    store = str(tmp_path / "palettes.json")
    out_dir = tmp_path / "themes"
    code = main(
        [
            "custom",
            "Duo",
            "#ff0000",
            "#00ff00",
            "--output",
            str(out_dir),
            "--store",
            store,
        ]
    )
    assert code == 0

    theme_path = out_dir / "duo-theme-color-theme.json"
    assert main(["import", str(theme_path), "--save", "--store", store]) == 0
    [imported] = PaletteStore(store).get_all()
    assert [c.hex for c in imported.colors] == ["#ff0000", "#00ff00"]


def test_import_failure_exit_code(tmp_path):
    assert main(["import", str(tmp_path / "missing.json")]) == 1


def test_invalid_base_color_is_rejected(tmp_path):
    with pytest.raises(SystemExit):
        main(["generate", "#zzzzzz", "--output", str(tmp_path)])
    with pytest.raises(SystemExit):
        main(["custom", "Bad", "#12345", "--output", str(tmp_path)])
