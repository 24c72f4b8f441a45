from nicegui import ui

from presentation.ui.styles import APP_CSS

_THEME_APPLIED = False


def apply_global_ui_theme() -> None:
    global _THEME_APPLIED
    # Colors belong to the page being built, so every page sets them.
    ui.colors(primary="#0f172a", secondary="#64748b", accent="#f59e0b", dark="#0f172a")
    if _THEME_APPLIED:
        return
    ui.add_head_html(APP_CSS, shared=True)
    _THEME_APPLIED = True
