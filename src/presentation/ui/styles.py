from __future__ import annotations

"""
Light slate design tokens for the todo screens.

Pages use the C_* constants instead of long inline class strings.
"""

C_FONT_STACK = '"Inter", system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'

# CSS braces are doubled so the f-string leaves them alone.
APP_CSS = f"""
<style>
  :root, body, .q-body {{
    font-family: {C_FONT_STACK};
    letter-spacing: -0.01em;
    color-scheme: light;

    --todo-bg: #f8fafc;
    --todo-surface: #ffffff;
    --todo-border: #e2e8f0;
    --todo-text: #0f172a;
    --todo-muted: #64748b;
    --brand-primary: #f59e0b;
  }}

  body, .q-body, .nicegui-content {{
    background: var(--todo-bg) !important;
    color: var(--todo-text) !important;
  }}

  [class*="q-elevation--"],
  .q-card,
  .q-dialog,
  .q-notification {{
    box-shadow: none !important;
  }}
  .q-btn {{
    box-shadow: none !important;
  }}

  .q-checkbox__inner--truthy .q-checkbox__bg {{
    background: var(--brand-primary);
    border-color: var(--brand-primary);
  }}

  .todo-qr-frame {{
    border: 1px solid var(--todo-border);
    border-radius: 12px;
    overflow: hidden;
    background: var(--todo-surface);
  }}
</style>
"""

STYLE_CONTAINER = "w-full max-w-3xl mx-auto px-6 py-6 gap-6"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_SECTION_TITLE = "text-sm font-semibold text-slate-900"
STYLE_TEXT_MUTED = "text-sm text-slate-600"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
STYLE_BTN_SECONDARY = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 active:scale-[0.99] rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_GHOST = (
    "text-slate-600 hover:text-slate-900 hover:bg-slate-100 active:scale-[0.99] rounded-md px-3 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)

STYLE_INPUT = "w-full text-sm"

STYLE_TAG_CHIP = "bg-slate-100 text-slate-700 border border-slate-200 px-2 py-0.5 rounded-full text-xs font-medium"
STYLE_ERROR_BOX = "w-full bg-rose-50 text-rose-700 border border-rose-200 rounded-xl p-4 text-sm text-center"

C_CONTAINER = STYLE_CONTAINER
C_CARD = STYLE_CARD
C_BTN_PRIM = STYLE_BTN_PRIMARY
C_BTN_SEC = STYLE_BTN_SECONDARY
C_BTN_GHOST = STYLE_BTN_GHOST
C_INPUT = STYLE_INPUT
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_SECTION_TITLE = STYLE_SECTION_TITLE
C_TAG_CHIP = STYLE_TAG_CHIP
C_ERROR_BOX = STYLE_ERROR_BOX
