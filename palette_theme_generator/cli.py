import argparse
import json
import logging
import os
import random
import sys

from .color import is_valid_hex, normalize_hex
from .export import (
    build_color_customizations,
    default_theme_filename,
    export_theme,
    generate_readability_report,
    import_theme_file,
    print_palette,
)
from .export.json_export import THEME_FILE_SUFFIX
from .harmony import HARMONY_TYPES, random_hex
from .image import dominant_color
from .palette import PaletteStore, build_custom_palette, build_palette
from .theme import map_palette_to_theme

DEFAULT_STORE_PATH = os.path.join(
    os.path.expanduser("~"), ".palette-theme-generator", "palettes.json"
)
DEFAULT_HARMONY = "complementary"


def _add_store_argument(parser):
    parser.add_argument(
        "--store",
        metavar="PATH",
        default=DEFAULT_STORE_PATH,
        help=f"Saved palettes file (default: {DEFAULT_STORE_PATH})",
    )


def _add_theme_arguments(parser):
    parser.add_argument("--theme-name", help="Theme name (default: '<palette> Theme')")
    parser.add_argument(
        "--syntax-saturation",
        type=float,
        default=1.0,
        help="Saturation factor for syntax colors (default: 1.0)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory for the theme file (default: current directory)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Also write a settings.json block that previews the theme",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="palette-theme-generator",
        description="Generate color palettes and editor color themes",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_gen = sub.add_parser("generate", help="Generate a harmony palette and theme")
    p_gen.add_argument(
        "base",
        nargs="?",
        default=None,
        help="Base color as hex (default: random, or taken from --from-image)",
    )
    p_gen.add_argument("--harmony", choices=HARMONY_TYPES, default=DEFAULT_HARMONY)
    p_gen.add_argument("--name", help="Palette name (default: '<harmony> palette')")
    p_gen.add_argument("--saturation", type=float, help="Saturation multiplier")
    p_gen.add_argument("--luminosity", type=float, help="Lightness factor (0.5 neutral)")
    p_gen.add_argument("--variation", type=float, help="Random variation 0.0-1.0")
    p_gen.add_argument("--seed", type=int, help="Random seed for reproducible output")
    p_gen.add_argument(
        "--from-image", metavar="IMG", help="Use the dominant color of an image"
    )
    p_gen.add_argument("--save", action="store_true", help="Save the palette")
    _add_theme_arguments(p_gen)
    _add_store_argument(p_gen)

    p_custom = sub.add_parser("custom", help="Build a palette from explicit colors")
    p_custom.add_argument("name")
    p_custom.add_argument("colors", nargs="+", metavar="HEX")
    p_custom.add_argument("--save", action="store_true", help="Save the palette")
    _add_theme_arguments(p_custom)
    _add_store_argument(p_custom)

    p_import = sub.add_parser("import", help="Rebuild a palette from a theme file")
    p_import.add_argument("theme_json")
    p_import.add_argument("--save", action="store_true", help="Save the palette")
    _add_store_argument(p_import)

    p_list = sub.add_parser("list", help="List saved palettes")
    _add_store_argument(p_list)

    p_del = sub.add_parser("delete", help="Delete a saved palette")
    p_del.add_argument("palette_id")
    _add_store_argument(p_del)

    p_export = sub.add_parser("export", help="Export a saved palette as a theme")
    p_export.add_argument("palette_id")
    _add_theme_arguments(p_export)
    _add_store_argument(p_export)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "generate":
        if args.base is not None and args.from_image:
            parser.error("Cannot use both BASE and --from-image")
        if args.base is not None and not is_valid_hex(args.base):
            parser.error(f"Invalid hex color: {args.base}")
        if args.variation is not None and not 0 <= args.variation <= 1:
            parser.error("--variation must be between 0.0 and 1.0")
        return _run_generate(args)
    if args.command == "custom":
        invalid = [c for c in args.colors if not is_valid_hex(c)]
        if invalid:
            parser.error(f"Invalid hex color(s): {', '.join(invalid)}")
        return _run_custom(args)
    if args.command == "import":
        return _run_import(args)
    if args.command == "list":
        return _run_list(args)
    if args.command == "delete":
        return _run_delete(args)
    return _run_export(args)


def _run_generate(args):
    """Generate a palette from a base color and export its theme."""
    rng = random.Random(args.seed)

    if args.from_image:
        print(f"Analyzing: {args.from_image}")
        base = dominant_color(args.from_image)
    elif args.base is not None:
        base = normalize_hex(args.base)
    else:
        base = random_hex(rng)

    palette = build_palette(
        base,
        args.harmony,
        name=args.name,
        saturation=args.saturation,
        luminosity=args.luminosity,
        variation=args.variation,
        rng=rng,
    )
    return _finish_palette(palette, args)


def _run_custom(args):
    palette = build_custom_palette(
        args.name, [normalize_hex(c) for c in args.colors]
    )
    return _finish_palette(palette, args)


def _finish_palette(palette, args):
    print_palette(palette)
    if args.save:
        PaletteStore(args.store).add(palette)
        print(f"\nSaved palette {palette.id} to {args.store}")
    return _export(palette, args)


def _export(palette, args):
    """Map a palette to a theme, report its readability and write it out."""
    theme = map_palette_to_theme(
        palette,
        theme_name=args.theme_name,
        syntax_saturation=args.syntax_saturation,
    )
    report, issues = generate_readability_report(theme)
    print("\n" + report)

    theme_path = export_theme(theme, _ensure_dir(args.output))
    exported = [theme_path]

    if args.preview:
        preview_name = default_theme_filename(theme.name).replace(
            THEME_FILE_SUFFIX, "-settings.json"
        )
        preview_path = os.path.join(args.output, preview_name)
        with open(preview_path, "w") as f:
            json.dump(build_color_customizations(theme), f, indent=2)
        exported.append(preview_path)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print(f"\nTheme: {theme.name} ({theme.type}), {len(issues)} contrast issue(s)")
    print("=" * 60)
    return 0


def _ensure_dir(path):
    os.makedirs(path, exist_ok=True)
    return path


def _run_import(args):
    print(f"Loading theme: {args.theme_json}")
    palette = import_theme_file(args.theme_json)
    if palette is None:
        print(f"Could not import {args.theme_json}", file=sys.stderr)
        return 1

    print_palette(palette)
    if args.save:
        PaletteStore(args.store).add(palette)
        print(f"\nSaved palette {palette.id} to {args.store}")
    return 0


def _run_list(args):
    palettes = PaletteStore(args.store).get_all()
    if not palettes:
        print("No saved palettes.")
        return 0
    for palette in palettes:
        swatches = " ".join(c.hex for c in palette.colors)
        print(f"{palette.id:32} {palette.name:24} {palette.harmony:20} {swatches}")
    return 0


def _run_delete(args):
    if not PaletteStore(args.store).remove(args.palette_id):
        print(f"Palette not found: {args.palette_id}", file=sys.stderr)
        return 1
    print(f"Deleted {args.palette_id}")
    return 0


def _run_export(args):
    palette = PaletteStore(args.store).get_by_id(args.palette_id)
    if palette is None:
        print(f"Palette not found: {args.palette_id}", file=sys.stderr)
        return 1
    return _export(palette, args)


if __name__ == "__main__":
    sys.exit(main())
