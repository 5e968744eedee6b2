"""
Declarative role tables for the palette -> editor theme mapping.

Each workbench role is a (role_key, rule) pair. Rules name a source color,
either a literal "#rrggbb" or a key of the mapping context built in
mapper.py, and how to transform it:

    ref(source, shade, alpha)           source shaded, then an alpha suffix
    contrast(source, against, ratio)    source pushed to a contrast ratio
    readable(source)                    black or white text for source
    fixed(dark, light)                  literal per theme type

A shade is a lightness offset applied as-is in dark themes and mirrored in
light ones, so shade=5 means "slightly further from the background" in both.
"""

from collections import namedtuple

from ..color import adjust_brightness
from ..contrast import ensure_contrast_ratio, pick_readable_color

RoleRule = namedtuple(
    "RoleRule", ["kind", "source", "shade", "alpha", "against", "ratio", "light"]
)

# === ANCHOR COLORS ===
ERROR = "#f48771"
WARNING = "#cca700"
INFO = "#75beff"
SUCCESS = "#89d185"
GIT_ADDED = "#81b88b"
GIT_MODIFIED = "#e2c08d"
GIT_DELETED = "#c74e39"
GIT_UNTRACKED = "#73c991"
GIT_CONFLICTING = "#e4676b"
MERGE_CURRENT = "#367366"
MERGE_INCOMING = "#395f8f"

# Contrast minimums
TEXT_CONTRAST = 4.5
UI_CONTRAST = 3.0
OVERVIEW_CONTRAST = 2.0


def ref(source, shade=0, alpha=""):
    return RoleRule("ref", source, shade, alpha, None, None, None)


def contrast(source, against, ratio, alpha=""):
    return RoleRule("contrast", source, 0, alpha, against, ratio, None)


def readable(source):
    return RoleRule("readable", source, 0, "", None, None, None)


def fixed(dark, light=None):
    return RoleRule("fixed", dark, 0, "", None, None, light)


TRANSPARENT_BORDER = fixed("#ffffff00", "#00000000")


def _resolve(source, context):
    return source if source.startswith("#") else context[source]


def evaluate_rule(rule, context, is_dark):
    """Compute the color string for one rule."""
    if rule.kind == "fixed":
        if is_dark or rule.light is None:
            return rule.source
        return rule.light

    color = _resolve(rule.source, context)
    if rule.kind == "readable":
        return pick_readable_color(color, TEXT_CONTRAST)
    if rule.kind == "contrast":
        color = ensure_contrast_ratio(
            color, _resolve(rule.against, context), rule.ratio
        )
    elif rule.shade:
        color = adjust_brightness(color, rule.shade if is_dark else -rule.shade)
    return color + rule.alpha


# Symbol-kind icons and the working color each takes
SYMBOL_ICON_SOURCES = [
    ("array", "tertiary_safe"),
    ("boolean", "tertiary_safe"),
    ("class", "secondary_safe"),
    ("color", "tertiary_safe"),
    ("constant", "tertiary_safe"),
    ("constructor", "accent_safe"),
    ("enumerator", "secondary_safe"),
    ("enumeratorMember", "tertiary_safe"),
    ("event", "secondary_safe"),
    ("field", "tertiary_safe"),
    ("file", "sidebar_fg"),
    ("folder", "sidebar_fg"),
    ("function", "accent_safe"),
    ("interface", "secondary_safe"),
    ("key", "tertiary_safe"),
    ("keyword", "accent_safe"),
    ("method", "accent_safe"),
    ("module", "secondary_safe"),
    ("namespace", "secondary_safe"),
    ("null", "tertiary_safe"),
    ("number", "tertiary_safe"),
    ("object", "secondary_safe"),
    ("operator", "accent_safe"),
    ("package", "secondary_safe"),
    ("property", "tertiary_safe"),
    ("reference", "tertiary_safe"),
    ("snippet", "fg"),
    ("string", "secondary_safe"),
    ("struct", "secondary_safe"),
    ("text", "fg"),
    ("typeParameter", "secondary_safe"),
    ("unit", "tertiary_safe"),
    ("variable", "tertiary_safe"),
]

WORKBENCH_ROLES = [
    # === EDITOR ===
    ("editor.background", ref("editor_bg")),
    ("editor.foreground", ref("fg")),
    ("editor.lineHighlightBackground", ref("editor_bg", 5)),
    ("editor.selectionBackground", ref("accent_safe", alpha="44")),
    ("editor.wordHighlightBackground", ref("accent_safe", alpha="22")),
    ("editorCursor.foreground", ref("accent_safe")),
    ("editorWhitespace.foreground", ref("editor_bg", 10)),
    ("editorLineNumber.foreground", ref("fg", -30)),
    ("editorLineNumber.activeForeground", ref("fg")),
    # === SIDEBAR ===
    ("sideBar.background", ref("sidebar_bg")),
    ("sideBar.foreground", ref("sidebar_fg")),
    ("sideBarTitle.foreground", contrast("accent", "sidebar_bg", TEXT_CONTRAST)),
    # === ACTIVITY BAR ===
    ("activityBar.background", ref("activity_bar_bg")),
    ("activityBar.foreground", ref("activity_bar_fg")),
    ("activityBar.activeBorder", ref("accent_safe")),
    ("activityBarBadge.background", ref("accent")),
    ("activityBarBadge.foreground", readable("accent")),
    # === TITLE BAR ===
    ("titleBar.activeBackground", ref("activity_bar_bg")),
    ("titleBar.activeForeground", ref("activity_bar_fg")),
    ("titleBar.inactiveBackground", ref("activity_bar_bg", -5)),
    ("titleBar.inactiveForeground", ref("activity_bar_fg", alpha="99")),
    # === STATUS BAR ===
    ("statusBar.background", ref("accent")),
    ("statusBar.foreground", readable("accent")),
    ("statusBar.debuggingBackground", ref("secondary")),
    ("statusBar.debuggingForeground", readable("secondary")),
    ("statusBar.noFolderBackground", ref("no_folder_bg")),
    ("statusBar.noFolderForeground", readable("no_folder_bg")),
    # === TABS ===
    ("tab.activeBackground", ref("editor_bg")),
    ("tab.activeForeground", ref("fg")),
    ("tab.inactiveBackground", ref("sidebar_bg")),
    ("tab.inactiveForeground", ref("sidebar_fg", alpha="88")),
    ("tab.activeBorder", ref("accent_safe")),
    # === TERMINAL ===
    ("terminal.background", ref("editor_bg")),
    ("terminal.foreground", ref("fg")),
    ("terminalCursor.foreground", ref("accent_safe")),
    # === INPUTS & BUTTONS ===
    ("input.background", ref("editor_bg", 5)),
    ("input.foreground", ref("fg")),
    ("input.border", ref("accent_safe", alpha="66")),
    ("focusBorder", ref("accent_safe")),
    ("button.background", ref("accent")),
    ("button.foreground", readable("accent")),
    ("button.hoverBackground", ref("accent", 10)),
    # === LISTS ===
    ("list.activeSelectionBackground", ref("accent_safe", alpha="44")),
    ("list.activeSelectionForeground", ref("fg")),
    ("list.hoverBackground", ref("sidebar_bg", 5)),
    ("list.hoverForeground", ref("sidebar_fg")),
    ("list.inactiveSelectionBackground", ref("accent_safe", alpha="22")),
    ("list.inactiveSelectionForeground", ref("fg")),
    ("list.focusBackground", ref("accent_safe", alpha="33")),
    ("list.focusForeground", ref("fg")),
    ("dropdown.background", ref("editor_bg", 8)),
    ("dropdown.foreground", ref("fg")),
    ("dropdown.border", ref("accent_safe", alpha="66")),
    ("dropdown.listBackground", ref("sidebar_bg", 5)),
    ("checkbox.background", ref("editor_bg", 8)),
    ("checkbox.foreground", ref("fg")),
    ("checkbox.border", ref("accent_safe", alpha="66")),
    ("inputValidation.errorBackground", fixed("#5a1d1d", "#f2dede")),
    ("inputValidation.errorBorder", fixed("#be1100")),
    ("inputValidation.warningBackground", fixed("#5b5418", "#f6f5d2")),
    ("inputValidation.warningBorder", fixed("#b89500")),
    ("inputValidation.infoBackground", fixed("#1e3a5f", "#d6ecf2")),
    ("inputValidation.infoBorder", fixed("#4ba3ce")),
    # === PANEL ===
    ("panel.background", ref("editor_bg")),
    ("panel.border", ref("editor_bg", 10)),
    ("panelTitle.activeBorder", ref("accent_safe")),
    ("panelTitle.activeForeground", ref("fg")),
    ("panelTitle.inactiveForeground", ref("fg", -30)),
    # === TERMINAL ANSI ===
    ("terminal.ansiBlack", fixed("#000000")),
    ("terminal.ansiRed", contrast("#cd3131", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiGreen", contrast("#0dbc79", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiYellow", contrast("#e5e510", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBlue", contrast("#2472c8", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiMagenta", contrast("#bc3fbc", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiCyan", contrast("#11a8cd", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiWhite", fixed("#e5e5e5", "#555555")),
    ("terminal.ansiBrightBlack", fixed("#666666")),
    ("terminal.ansiBrightRed", contrast("#f14c4c", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBrightGreen", contrast("#23d18b", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBrightYellow", contrast("#f5f543", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBrightBlue", contrast("#3b8eea", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBrightMagenta", contrast("#d670d6", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBrightCyan", contrast("#29b8db", "editor_bg", UI_CONTRAST)),
    ("terminal.ansiBrightWhite", fixed("#e5e5e5", "#a5a5a5")),
    ("terminal.selectionBackground", ref("accent_safe", alpha="44")),
    # === BADGES & SCROLLBARS ===
    ("badge.background", ref("accent")),
    ("badge.foreground", readable("accent")),
    ("scrollbar.shadow", fixed("#00000088", "#00000044")),
    ("scrollbarSlider.background", ref("editor_bg", 20, "44")),
    ("scrollbarSlider.hoverBackground", ref("editor_bg", 25, "66")),
    ("scrollbarSlider.activeBackground", ref("editor_bg", 30, "88")),
    # === BREADCRUMBS ===
    ("breadcrumb.foreground", ref("fg", -20)),
    ("breadcrumb.focusForeground", ref("fg")),
    ("breadcrumb.activeSelectionForeground", ref("accent_safe")),
    ("breadcrumbPicker.background", ref("sidebar_bg")),
    # === WIDGETS ===
    ("editorWidget.background", ref("sidebar_bg")),
    ("editorWidget.foreground", ref("sidebar_fg")),
    ("editorWidget.border", ref("accent_safe", alpha="66")),
    ("editorSuggestWidget.background", ref("sidebar_bg")),
    ("editorSuggestWidget.foreground", ref("sidebar_fg")),
    ("editorSuggestWidget.selectedBackground", ref("accent_safe", alpha="44")),
    ("editorSuggestWidget.highlightForeground", ref("accent_safe")),
    ("editorHoverWidget.background", ref("sidebar_bg")),
    ("editorHoverWidget.foreground", ref("sidebar_fg")),
    ("editorHoverWidget.border", ref("accent_safe", alpha="44")),
    # === PEEK VIEW ===
    ("peekView.border", ref("accent_safe")),
    ("peekViewEditor.background", ref("editor_bg", -5)),
    ("peekViewResult.background", ref("sidebar_bg")),
    ("peekViewResult.selectionBackground", ref("accent_safe", alpha="44")),
    ("peekViewTitle.background", ref("activity_bar_bg")),
    ("peekViewTitleLabel.foreground", ref("activity_bar_fg")),
    # === NOTIFICATIONS & MENUS ===
    ("notificationCenter.border", ref("accent_safe", alpha="66")),
    ("notificationCenterHeader.background", ref("activity_bar_bg")),
    ("notificationCenterHeader.foreground", ref("activity_bar_fg")),
    ("notifications.background", ref("sidebar_bg")),
    ("notifications.foreground", ref("sidebar_fg")),
    ("notifications.border", ref("accent_safe", alpha="66")),
    ("notificationLink.foreground", ref("accent_safe")),
    ("menu.background", ref("sidebar_bg")),
    ("menu.foreground", ref("sidebar_fg")),
    ("menu.selectionBackground", ref("accent_safe", alpha="44")),
    ("menu.selectionForeground", ref("fg")),
    ("menu.separatorBackground", ref("sidebar_bg", 10)),
    # === SETTINGS EDITOR ===
    ("settings.headerForeground", ref("fg")),
    ("settings.modifiedItemIndicator", ref("accent_safe")),
    ("settings.dropdownBackground", ref("editor_bg", 8)),
    ("settings.dropdownForeground", ref("fg")),
    ("settings.dropdownBorder", ref("accent_safe", alpha="66")),
    ("settings.dropdownListBorder", ref("accent_safe", alpha="66")),
    ("settings.checkboxBackground", ref("editor_bg", 8)),
    ("settings.checkboxForeground", ref("fg")),
    ("settings.checkboxBorder", ref("accent_safe", alpha="66")),
    ("settings.textInputBackground", ref("editor_bg", 5)),
    ("settings.textInputForeground", ref("fg")),
    ("settings.textInputBorder", ref("accent_safe", alpha="66")),
    ("settings.numberInputBackground", ref("editor_bg", 5)),
    ("settings.numberInputForeground", ref("fg")),
    ("settings.numberInputBorder", ref("accent_safe", alpha="66")),
    # === GIT, DIFF & MERGE ===
    (
        "gitDecoration.addedResourceForeground",
        contrast(GIT_ADDED, "sidebar_bg", UI_CONTRAST),
    ),
    (
        "gitDecoration.modifiedResourceForeground",
        contrast(GIT_MODIFIED, "sidebar_bg", UI_CONTRAST),
    ),
    (
        "gitDecoration.deletedResourceForeground",
        contrast(GIT_DELETED, "sidebar_bg", UI_CONTRAST),
    ),
    (
        "gitDecoration.untrackedResourceForeground",
        contrast(GIT_UNTRACKED, "sidebar_bg", UI_CONTRAST),
    ),
    ("gitDecoration.ignoredResourceForeground", ref("sidebar_fg", -30)),
    (
        "gitDecoration.conflictingResourceForeground",
        contrast(GIT_CONFLICTING, "sidebar_bg", UI_CONTRAST),
    ),
    ("diffEditor.insertedTextBackground", fixed("#9bb95533", "#9bb95544")),
    ("diffEditor.removedTextBackground", fixed("#ff000033", "#ff000044")),
    ("diffEditor.border", ref("editor_bg", 10)),
    ("merge.currentHeaderBackground", fixed(MERGE_CURRENT, "#c2e0c6")),
    ("merge.currentContentBackground", fixed(MERGE_CURRENT + "33", "#c2e0c666")),
    ("merge.incomingHeaderBackground", fixed(MERGE_INCOMING, "#b3d7f9")),
    ("merge.incomingContentBackground", fixed(MERGE_INCOMING + "33", "#b3d7f966")),
    ("progressBar.background", ref("accent_safe")),
    # === GUTTER ===
    ("editorGutter.background", ref("editor_bg")),
    (
        "editorGutter.modifiedBackground",
        contrast(GIT_MODIFIED, "editor_bg", UI_CONTRAST),
    ),
    ("editorGutter.addedBackground", contrast(GIT_ADDED, "editor_bg", UI_CONTRAST)),
    (
        "editorGutter.deletedBackground",
        contrast(GIT_DELETED, "editor_bg", UI_CONTRAST),
    ),
    # === QUICK INPUT, EXTENSIONS, DEBUG ===
    ("quickInput.background", ref("sidebar_bg")),
    ("quickInput.foreground", ref("sidebar_fg")),
    ("quickInputList.focusBackground", ref("accent_safe", alpha="44")),
    ("quickInputList.focusForeground", ref("fg")),
    ("extensionBadge.remoteBackground", ref("accent")),
    ("extensionBadge.remoteForeground", readable("accent")),
    ("debugToolBar.background", ref("activity_bar_bg")),
    ("debugToolBar.border", ref("accent_safe", alpha="44")),
    # === TREE VIEW ===
    ("sideBarSectionHeader.background", ref("sidebar_bg", 8)),
    ("sideBarSectionHeader.foreground", ref("sidebar_fg")),
    ("sideBarSectionHeader.border", ref("sidebar_bg", 15)),
    ("listFilterWidget.background", ref("sidebar_bg", 15)),
    ("listFilterWidget.outline", ref("accent_safe")),
    (
        "listFilterWidget.noMatchesOutline",
        contrast(GIT_DELETED, "sidebar_bg", UI_CONTRAST),
    ),
    ("tree.indentGuidesStroke", ref("sidebar_bg", 20)),
    ("extensionButton.prominentBackground", ref("accent")),
    ("extensionButton.prominentForeground", readable("accent")),
    ("extensionButton.prominentHoverBackground", ref("accent", 10)),
    # === WELCOME PAGE ===
    ("welcomePage.background", ref("editor_bg")),
    ("welcomePage.buttonBackground", ref("editor_bg", 10)),
    ("welcomePage.buttonHoverBackground", ref("editor_bg", 15)),
    ("walkThrough.embeddedEditorBackground", ref("editor_bg", -5)),
]

WORKBENCH_ROLES += [
    (f"symbolIcon.{kind}Foreground", ref(source))
    for kind, source in SYMBOL_ICON_SOURCES
]

WORKBENCH_ROLES += [
    # === DIAGNOSTICS ===
    ("editorError.foreground", contrast(ERROR, "editor_bg", UI_CONTRAST)),
    ("editorError.border", TRANSPARENT_BORDER),
    ("editorWarning.foreground", contrast(WARNING, "editor_bg", UI_CONTRAST)),
    ("editorWarning.border", TRANSPARENT_BORDER),
    ("editorInfo.foreground", contrast(INFO, "editor_bg", UI_CONTRAST)),
    ("editorInfo.border", TRANSPARENT_BORDER),
    ("editorHint.foreground", ref("fg", -20)),
    ("editorBracketMatch.background", ref("accent_safe", alpha="22")),
    ("editorBracketMatch.border", ref("accent_safe")),
    # === OVERVIEW RULER ===
    ("editorOverviewRuler.border", ref("editor_bg", 10)),
    (
        "editorOverviewRuler.currentContentForeground",
        contrast(MERGE_CURRENT, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "editorOverviewRuler.incomingContentForeground",
        contrast(MERGE_INCOMING, "editor_bg", OVERVIEW_CONTRAST),
    ),
    ("editorOverviewRuler.findMatchForeground", ref("accent_safe", alpha="88")),
    ("editorOverviewRuler.rangeHighlightForeground", ref("accent_safe", alpha="66")),
    (
        "editorOverviewRuler.selectionHighlightForeground",
        ref("accent_safe", alpha="44"),
    ),
    ("editorOverviewRuler.wordHighlightForeground", ref("accent_safe", alpha="44")),
    (
        "editorOverviewRuler.wordHighlightStrongForeground",
        ref("accent_safe", alpha="66"),
    ),
    (
        "editorOverviewRuler.modifiedForeground",
        contrast(GIT_MODIFIED, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "editorOverviewRuler.addedForeground",
        contrast(GIT_ADDED, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "editorOverviewRuler.deletedForeground",
        contrast(GIT_DELETED, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "editorOverviewRuler.errorForeground",
        contrast(ERROR, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "editorOverviewRuler.warningForeground",
        contrast(WARNING, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "editorOverviewRuler.infoForeground",
        contrast(INFO, "editor_bg", OVERVIEW_CONTRAST),
    ),
    ("editorOverviewRuler.bracketMatchForeground", ref("accent_safe", alpha="88")),
    # === GUIDES, RULERS, LENSES ===
    ("editorIndentGuide.background", ref("editor_bg", 15)),
    ("editorIndentGuide.activeBackground", ref("editor_bg", 25)),
    ("editorRuler.foreground", ref("editor_bg", 15)),
    ("editorCodeLens.foreground", ref("fg", -30)),
    ("editorLink.activeForeground", ref("accent_safe")),
    # === HIGHLIGHTS & FIND ===
    ("editor.rangeHighlightBackground", ref("accent_safe", alpha="11")),
    ("editor.rangeHighlightBorder", TRANSPARENT_BORDER),
    ("editor.selectionHighlightBackground", ref("accent_safe", alpha="22")),
    ("editor.selectionHighlightBorder", TRANSPARENT_BORDER),
    ("editor.wordHighlightStrongBackground", ref("accent_safe", alpha="33")),
    ("editor.wordHighlightStrongBorder", TRANSPARENT_BORDER),
    ("editor.findMatchBackground", ref("accent_safe", alpha="66")),
    ("editor.findMatchHighlightBackground", ref("accent_safe", alpha="33")),
    ("editor.findMatchBorder", ref("accent_safe")),
    ("editor.findMatchHighlightBorder", TRANSPARENT_BORDER),
    ("editor.findRangeHighlightBackground", ref("accent_safe", alpha="22")),
    ("editor.findRangeHighlightBorder", TRANSPARENT_BORDER),
    ("editorWidget.resizeBorder", ref("accent_safe")),
    ("editorFindWidget.background", ref("sidebar_bg")),
    ("editorFindWidget.border", ref("accent_safe", alpha="66")),
    # === MINIMAP ===
    ("minimap.findMatchHighlight", ref("accent_safe", alpha="88")),
    ("minimap.selectionHighlight", ref("accent_safe", alpha="66")),
    (
        "minimap.errorHighlight",
        contrast(ERROR, "editor_bg", OVERVIEW_CONTRAST, alpha="88"),
    ),
    (
        "minimap.warningHighlight",
        contrast(WARNING, "editor_bg", OVERVIEW_CONTRAST, alpha="88"),
    ),
    ("minimapSlider.background", ref("editor_bg", 20, "44")),
    ("minimapSlider.hoverBackground", ref("editor_bg", 25, "66")),
    ("minimapSlider.activeBackground", ref("editor_bg", 30, "88")),
    (
        "minimapGutter.addedBackground",
        contrast(GIT_ADDED, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "minimapGutter.modifiedBackground",
        contrast(GIT_MODIFIED, "editor_bg", OVERVIEW_CONTRAST),
    ),
    (
        "minimapGutter.deletedBackground",
        contrast(GIT_DELETED, "editor_bg", OVERVIEW_CONTRAST),
    ),
    # === MARKER NAVIGATION ===
    ("editorMarkerNavigation.background", ref("sidebar_bg")),
    (
        "editorMarkerNavigationError.background",
        contrast(ERROR, "sidebar_bg", UI_CONTRAST),
    ),
    (
        "editorMarkerNavigationWarning.background",
        contrast(WARNING, "sidebar_bg", UI_CONTRAST),
    ),
    (
        "editorMarkerNavigationInfo.background",
        contrast(INFO, "sidebar_bg", UI_CONTRAST),
    ),
    # === INLAY HINTS, GHOST TEXT, STICKY SCROLL ===
    ("editorInlayHint.background", ref("editor_bg", 10, "cc")),
    ("editorInlayHint.foreground", ref("fg", -20)),
    ("editorInlayHint.typeBackground", ref("editor_bg", 10, "cc")),
    ("editorInlayHint.typeForeground", ref("fg", -20)),
    ("editorInlayHint.parameterBackground", ref("editor_bg", 10, "cc")),
    ("editorInlayHint.parameterForeground", ref("fg", -20)),
    ("editorGhostText.foreground", ref("fg", -40)),
    ("editorGhostText.border", TRANSPARENT_BORDER),
    ("editorStickyScroll.background", ref("editor_bg")),
    ("editorStickyScrollHover.background", ref("editor_bg", 5)),
    ("searchEditor.findMatchBackground", ref("accent_safe", alpha="44")),
    ("searchEditor.findMatchBorder", ref("accent_safe", alpha="88")),
    ("searchEditor.textInputBorder", ref("accent_safe", alpha="66")),
    # === CHARTS & TESTING ===
    ("charts.foreground", ref("fg")),
    ("charts.lines", ref("editor_bg", 20)),
    ("charts.red", contrast(ERROR, "editor_bg", UI_CONTRAST)),
    ("charts.blue", contrast(INFO, "editor_bg", UI_CONTRAST)),
    ("charts.yellow", contrast(WARNING, "editor_bg", UI_CONTRAST)),
    ("charts.orange", contrast("#d18616", "editor_bg", UI_CONTRAST)),
    ("charts.green", contrast(SUCCESS, "editor_bg", UI_CONTRAST)),
    ("charts.purple", contrast("#b180d7", "editor_bg", UI_CONTRAST)),
    ("testing.iconFailed", contrast(ERROR, "sidebar_bg", UI_CONTRAST)),
    ("testing.iconErrored", contrast(ERROR, "sidebar_bg", UI_CONTRAST)),
    ("testing.iconPassed", contrast(SUCCESS, "sidebar_bg", UI_CONTRAST)),
    ("testing.runAction", ref("accent_safe")),
    ("testing.iconQueued", contrast(WARNING, "sidebar_bg", UI_CONTRAST)),
    ("testing.iconUnset", ref("sidebar_fg", -20)),
    ("testing.iconSkipped", ref("sidebar_fg", -20)),
    ("problemsErrorIcon.foreground", contrast(ERROR, "sidebar_bg", UI_CONTRAST)),
    ("problemsWarningIcon.foreground", contrast(WARNING, "sidebar_bg", UI_CONTRAST)),
    ("problemsInfoIcon.foreground", contrast(INFO, "sidebar_bg", UI_CONTRAST)),
    # === STATUS BAR ITEMS ===
    ("statusBarItem.activeBackground", ref("accent", -15)),
    ("statusBarItem.hoverBackground", ref("accent", -10)),
    ("statusBarItem.prominentBackground", ref("secondary")),
    ("statusBarItem.prominentForeground", readable("secondary")),
    ("statusBarItem.prominentHoverBackground", ref("secondary", 10)),
    ("statusBarItem.remoteBackground", ref("accent")),
    ("statusBarItem.remoteForeground", readable("accent")),
    ("statusBarItem.errorBackground", contrast(GIT_DELETED, "editor_bg", UI_CONTRAST)),
    ("statusBarItem.errorForeground", readable(GIT_DELETED)),
    ("statusBarItem.warningBackground", contrast(WARNING, "editor_bg", UI_CONTRAST)),
    ("statusBarItem.warningForeground", readable(WARNING)),
    # === TABS & EDITOR GROUPS ===
    ("tab.border", ref("editor_bg", 10)),
    ("tab.unfocusedActiveBorder", ref("accent_safe", alpha="88")),
    ("tab.unfocusedActiveBackground", ref("editor_bg")),
    ("tab.unfocusedActiveForeground", ref("fg", -20)),
    ("tab.unfocusedInactiveBackground", ref("sidebar_bg")),
    ("tab.unfocusedInactiveForeground", ref("sidebar_fg", alpha="88")),
    ("tab.hoverBackground", ref("editor_bg", 5)),
    ("tab.hoverBorder", ref("accent_safe", alpha="66")),
    ("tab.lastPinnedBorder", ref("sidebar_bg", 15)),
    ("editorGroup.border", ref("editor_bg", 10)),
    ("editorGroup.dropBackground", ref("accent_safe", alpha="22")),
    ("editorGroupHeader.tabsBackground", ref("sidebar_bg")),
    ("editorGroupHeader.noTabsBackground", ref("editor_bg")),
    ("editorGroupHeader.border", ref("editor_bg", 10)),
    ("sideBySideEditor.horizontalBorder", ref("editor_bg", 10)),
    ("sideBySideEditor.verticalBorder", ref("editor_bg", 10)),
    # === NOTEBOOKS ===
    ("interactive.activeCodeBorder", ref("accent_safe")),
    ("interactive.inactiveCodeBorder", ref("editor_bg", 10)),
    ("notebook.cellBorderColor", ref("editor_bg", 10)),
    ("notebook.focusedCellBorder", ref("accent_safe")),
    ("notebook.cellStatusBarItemHoverBackground", ref("editor_bg", 10)),
    ("notebook.cellInsertionIndicator", ref("accent_safe")),
    ("notebook.cellToolbarSeparator", ref("editor_bg", 15)),
    ("notebook.selectedCellBackground", ref("editor_bg", 5)),
    (
        "notebookStatusSuccessIcon.foreground",
        contrast(SUCCESS, "editor_bg", UI_CONTRAST),
    ),
    ("notebookStatusErrorIcon.foreground", contrast(ERROR, "editor_bg", UI_CONTRAST)),
    ("notebookStatusRunningIcon.foreground", ref("accent_safe")),
    # === KEYBINDING LABELS ===
    ("keybindingLabel.background", ref("editor_bg", 10)),
    ("keybindingLabel.foreground", ref("fg")),
    ("keybindingLabel.border", ref("editor_bg", 20)),
    ("keybindingLabel.bottomBorder", ref("editor_bg", 25)),
]

# (name, scopes, source, fontStyle)
TOKEN_RULES = [
    ("Comments", ["comment", "punctuation.definition.comment"], "comment", "italic"),
    ("Keywords", ["keyword", "storage.type", "storage.modifier"], "accent_syntax", None),
    ("Strings", ["string", "string.quoted"], "secondary_syntax", None),
    ("Numbers", ["constant.numeric"], "tertiary_syntax", None),
    ("Functions", ["entity.name.function", "support.function"], "accent_syntax", None),
    (
        "Classes & Types",
        ["entity.name.type", "entity.name.class", "support.type"],
        "secondary_syntax",
        None,
    ),
    ("Variables", ["variable", "variable.other"], "fg", None),
    ("Constants", ["constant", "variable.other.constant"], "tertiary_syntax", None),
    ("Operators", ["keyword.operator"], "operator_syntax", None),
    ("Tags (HTML/XML)", ["entity.name.tag"], "accent_syntax", None),
    ("Attributes", ["entity.other.attribute-name"], "secondary_syntax", "italic"),
    ("CSS Properties", ["support.type.property-name.css"], "secondary_syntax", None),
]
