from collections import namedtuple

from ..color import HSL, RGB, ColorInfo

Palette = namedtuple(
    "Palette", ["id", "name", "base_color", "harmony", "colors", "created_at"]
)


def color_info_to_dict(color):
    data = {
        "hex": color.hex,
        "rgb": {"r": color.rgb.r, "g": color.rgb.g, "b": color.rgb.b},
        "hsl": {"h": color.hsl.h, "s": color.hsl.s, "l": color.hsl.l},
    }
    if color.name is not None:
        data["name"] = color.name
    return data


def color_info_from_dict(data):
    rgb = data["rgb"]
    hsl = data["hsl"]
    return ColorInfo(
        hex=data["hex"],
        rgb=RGB(rgb["r"], rgb["g"], rgb["b"]),
        hsl=HSL(hsl["h"], hsl["s"], hsl["l"]),
        name=data.get("name"),
    )


def palette_to_dict(palette):
    """Serialize a Palette to the camelCase shape stored in theme files."""
    return {
        "id": palette.id,
        "name": palette.name,
        "baseColor": color_info_to_dict(palette.base_color),
        "harmony": palette.harmony,
        "colors": [color_info_to_dict(c) for c in palette.colors],
        "createdAt": palette.created_at,
    }


def palette_from_dict(data):
    """Inverse of palette_to_dict."""
    return Palette(
        id=data["id"],
        name=data["name"],
        base_color=color_info_from_dict(data["baseColor"]),
        harmony=data["harmony"],
        colors=tuple(color_info_from_dict(c) for c in data["colors"]),
        created_at=data["createdAt"],
    )
