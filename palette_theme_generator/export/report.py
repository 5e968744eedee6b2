import logging

from ..contrast import contrast_ratio
from ..theme.roles import TEXT_CONTRAST, UI_CONTRAST

logger = logging.getLogger(__name__)

# (label, foreground role, background role); every foreground here is
# picked as black or white for its exact background
TEXT_ROLE_PAIRS = [
    ("editor", "editor.foreground", "editor.background"),
    ("sideBar", "sideBar.foreground", "sideBar.background"),
    ("activityBar", "activityBar.foreground", "activityBar.background"),
    ("titleBar", "titleBar.activeForeground", "titleBar.activeBackground"),
    ("statusBar", "statusBar.foreground", "statusBar.background"),
    (
        "statusBar.debugging",
        "statusBar.debuggingForeground",
        "statusBar.debuggingBackground",
    ),
    (
        "statusBar.noFolder",
        "statusBar.noFolderForeground",
        "statusBar.noFolderBackground",
    ),
    ("tab.active", "tab.activeForeground", "tab.activeBackground"),
    ("terminal", "terminal.foreground", "terminal.background"),
    ("panelTitle", "panelTitle.activeForeground", "panel.background"),
    ("button", "button.foreground", "button.background"),
    ("badge", "badge.foreground", "badge.background"),
    ("activityBarBadge", "activityBarBadge.foreground", "activityBarBadge.background"),
    (
        "extensionButton",
        "extensionButton.prominentForeground",
        "extensionButton.prominentBackground",
    ),
    (
        "statusBarItem.prominent",
        "statusBarItem.prominentForeground",
        "statusBarItem.prominentBackground",
    ),
    (
        "statusBarItem.remote",
        "statusBarItem.remoteForeground",
        "statusBarItem.remoteBackground",
    ),
    ("editorWidget", "editorWidget.foreground", "editorWidget.background"),
    (
        "editorSuggestWidget",
        "editorSuggestWidget.foreground",
        "editorSuggestWidget.background",
    ),
    ("editorHoverWidget", "editorHoverWidget.foreground", "editorHoverWidget.background"),
    ("notifications", "notifications.foreground", "notifications.background"),
    (
        "notificationCenterHeader",
        "notificationCenterHeader.foreground",
        "notificationCenterHeader.background",
    ),
    ("peekViewTitle", "peekViewTitleLabel.foreground", "peekViewTitle.background"),
    ("menu", "menu.foreground", "menu.background"),
    ("quickInput", "quickInput.foreground", "quickInput.background"),
]

DIAGNOSTIC_ROLES = [
    "editorError.foreground",
    "editorWarning.foreground",
    "editorInfo.foreground",
]

TERMINAL_ROLES = [
    f"terminal.ansi{bright}{name}"
    for bright in ("", "Bright")
    for name in ("Red", "Green", "Yellow", "Blue", "Magenta", "Cyan")
]


def _syntax_pairs(theme):
    for token in theme.token_colors:
        yield token["name"], token["settings"]["foreground"]


def generate_readability_report(theme):
    """Generate a contrast report for a generated theme.

    Returns:
        tuple: (report text, list of (label, hex, achieved, required) issues)
    """
    colors = theme.colors
    editor_bg = colors["editor.background"]

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {theme.name} ({theme.type.upper()})")
    report.append(f"Editor background:  {editor_bg}")
    report.append(f"Sidebar background: {colors['sideBar.background']}")
    report.append("")

    categories = [
        (
            "TEXT",
            [(label, colors[fg], colors[bg]) for label, fg, bg in TEXT_ROLE_PAIRS],
            TEXT_CONTRAST,
        ),
        (
            "SYNTAX",
            [(name, fg, editor_bg) for name, fg in _syntax_pairs(theme)],
            UI_CONTRAST,
        ),
        (
            "DIAGNOSTICS",
            [(key, colors[key], editor_bg) for key in DIAGNOSTIC_ROLES],
            UI_CONTRAST,
        ),
        (
            "TERMINAL",
            [
                (key, colors[key], colors["terminal.background"])
                for key in TERMINAL_ROLES
            ],
            UI_CONTRAST,
        ),
    ]

    issues = []

    for cat_name, pairs, min_contrast in categories:
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for label, fg, bg in pairs:
            cr = contrast_ratio(fg, bg)
            status = "✓" if cr >= min_contrast else "✗ FAIL"
            if cr < min_contrast:
                issues.append((label, fg, cr, min_contrast))
            report.append(f"  {label:26} {fg} on {bg}  {cr:5.2f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        logger.warning(
            "%d color pairs in %s fall below their contrast minimum",
            len(issues),
            theme.name,
        )
        report.append(f"ISSUES FOUND: {len(issues)}")
        for label, hex_val, achieved, required in issues:
            report.append(
                f"  - {label}: {hex_val} has {achieved:.1f}:1, needs {required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(palette):
    """Print palette info"""
    print("\n" + "=" * 60)
    print(f"PALETTE: {palette.name} ({palette.harmony})")
    print("=" * 60)
    print(f"  id:   {palette.id}")
    print(f"  base: {palette.base_color.hex}")
    print("-" * 60)
    for color in palette.colors:
        h, s, l = color.hsl
        print(f"  {color.name or '':22} {color.hex}  hsl({h}, {s}%, {l}%)")
