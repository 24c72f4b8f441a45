from __future__ import annotations

import logging
from typing import Any

from nicegui import run, ui

from application.qr.payload import build_qr_content
from domain.qr.qr_code_generator import DEFAULT_QR_SIZE, QRCodeGenerator
from domain.todo.exceptions.todo_exceptions import QRCodeGenerationError
from presentation.ui.styles import C_BTN_GHOST, C_CARD, C_ERROR_BOX, C_PAGE_TITLE, STYLE_TEXT_SUBTLE

logger = logging.getLogger(__name__)


async def show_qr_code_dialog(
    todo: dict[str, Any],
    generator: QRCodeGenerator,
    size: int = DEFAULT_QR_SIZE,
) -> None:
    """Open a dialog and fill it with the todo's QR code once it is rendered.

    Rendering runs on a worker thread. Closing the dialog early does not
    cancel it; the late result is written into the hidden dialog.
    """
    with ui.dialog() as dialog, ui.card().classes(f"{C_CARD} p-6 items-center gap-4 w-[360px]"):
        ui.label("Todo QR Code").classes(C_PAGE_TITLE)
        ui.label(todo["title"]).classes("text-base font-medium text-slate-900 line-clamp-2")
        body = ui.column().classes("items-center gap-2")
        with body:
            with ui.column().classes("w-[280px] h-[280px] items-center justify-center bg-slate-100 rounded-xl"):
                ui.label("Generating QR Code...").classes(STYLE_TEXT_SUBTLE)
        with ui.row().classes("w-full justify-end"):
            ui.button("Close", on_click=dialog.close).props("flat").classes(C_BTN_GHOST)
    dialog.open()

    content = build_qr_content(todo["title"], todo.get("description") or "")
    logger.debug("QR code content: %s", content)
    try:
        image = await run.io_bound(generator.generate_image, content, size)
    except QRCodeGenerationError as exc:
        logger.warning("QR code generation failed for todo %s: %s", todo["id"], exc)
        body.clear()
        with body:
            ui.label(f"Failed to generate QR code: {exc}").classes(C_ERROR_BOX)
        return

    body.clear()
    with body:
        ui.image(image).classes("w-[280px] h-[280px] todo-qr-frame")
        ui.label("Scan this QR code to view the todo details").classes("text-xs text-slate-500")
