from collections import namedtuple

from ..color import adjust_brightness, adjust_saturation, hex_to_hsl
from ..contrast import ensure_contrast_ratio, pick_readable_color
from .roles import (
    TEXT_CONTRAST,
    TOKEN_RULES,
    UI_CONTRAST,
    WORKBENCH_ROLES,
    evaluate_rule,
)

ThemeDefinition = namedtuple(
    "ThemeDefinition", ["name", "type", "colors", "token_colors", "source_palette"]
)

# Lightness steps from the base color: surface, editor, sidebar, activity bar
BACKGROUND_STEPS = (20, 25, 30, 35)
COMMENT_SHADE = 30
DARK_THRESHOLD = 50


def detect_theme_type(palette):
    return "dark" if hex_to_hsl(palette.base_color.hex).l < DARK_THRESHOLD else "light"


def derive_backgrounds(base_hex, is_dark):
    """Background tiers, darker than the base for dark themes and lighter otherwise.

    Returns:
        tuple: (surface, editor, sidebar, activity_bar)
    """
    sign = -1 if is_dark else 1
    return tuple(adjust_brightness(base_hex, sign * step) for step in BACKGROUND_STEPS)


def build_context(palette, is_dark, syntax_saturation=1.0):
    """Named working colors the role table refers to."""
    hexes = [c.hex for c in palette.colors] or [palette.base_color.hex]

    def pick(i):
        return hexes[i % len(hexes)]

    base, accent, secondary, tertiary = pick(0), pick(1), pick(2), pick(3)
    surface_bg, editor_bg, sidebar_bg, activity_bar_bg = derive_backgrounds(
        base, is_dark
    )
    fg = pick_readable_color(editor_bg, TEXT_CONTRAST)

    def syntax(color, ratio):
        return ensure_contrast_ratio(
            adjust_saturation(color, syntax_saturation), editor_bg, ratio
        )

    accent_syntax = syntax(accent, UI_CONTRAST)
    comment = ensure_contrast_ratio(
        adjust_brightness(fg, -COMMENT_SHADE if is_dark else COMMENT_SHADE),
        editor_bg,
        UI_CONTRAST,
        prefer_brighter=False,
    )

    return {
        "base": base,
        "accent": accent,
        "secondary": secondary,
        "tertiary": tertiary,
        "surface_bg": surface_bg,
        "editor_bg": editor_bg,
        "sidebar_bg": sidebar_bg,
        "activity_bar_bg": activity_bar_bg,
        "no_folder_bg": adjust_brightness(base, -10),
        "fg": fg,
        "sidebar_fg": pick_readable_color(sidebar_bg, TEXT_CONTRAST),
        "activity_bar_fg": pick_readable_color(activity_bar_bg, TEXT_CONTRAST),
        "accent_safe": ensure_contrast_ratio(accent, editor_bg, UI_CONTRAST),
        "secondary_safe": ensure_contrast_ratio(secondary, editor_bg, TEXT_CONTRAST),
        "tertiary_safe": ensure_contrast_ratio(tertiary, editor_bg, TEXT_CONTRAST),
        "accent_syntax": accent_syntax,
        "secondary_syntax": syntax(secondary, TEXT_CONTRAST),
        "tertiary_syntax": syntax(tertiary, TEXT_CONTRAST),
        "operator_syntax": ensure_contrast_ratio(
            accent_syntax, editor_bg, UI_CONTRAST
        ),
        "comment": comment,
    }


def build_token_colors(context):
    token_colors = []
    for name, scopes, source, font_style in TOKEN_RULES:
        settings = {"foreground": context[source]}
        if font_style:
            settings["fontStyle"] = font_style
        token_colors.append({"name": name, "scope": list(scopes), "settings": settings})
    return token_colors


def map_palette_to_theme(
    palette, theme_name=None, syntax_saturation=1.0, overrides=None
):
    """Generate an editor color theme from a palette.

    Args:
        palette: Source Palette
        theme_name: Theme name (default "<palette name> Theme")
        syntax_saturation: Saturation factor for syntax token colors
        overrides: Optional {role_key: color} applied after the role table

    Returns:
        ThemeDefinition
    """
    theme_type = detect_theme_type(palette)
    is_dark = theme_type == "dark"
    context = build_context(palette, is_dark, syntax_saturation)

    colors = {}
    for role_key, rule in WORKBENCH_ROLES:
        colors[role_key] = evaluate_rule(rule, context, is_dark)
    if overrides:
        colors.update(overrides)

    return ThemeDefinition(
        name=theme_name or f"{palette.name} Theme",
        type=theme_type,
        colors=colors,
        token_colors=build_token_colors(context),
        source_palette=palette,
    )


def update_theme_color(theme, role_key, color):
    """Return a copy of theme with one workbench color replaced."""
    colors = dict(theme.colors)
    colors[role_key] = color
    return theme._replace(colors=colors)
