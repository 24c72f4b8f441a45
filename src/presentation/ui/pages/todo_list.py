from __future__ import annotations

from typing import Any, Callable

from nicegui import ui

from application.navigation.navigator import AddTodoDestination, EditTodoDestination, Navigator
from presentation.controllers.todo_controller import TodoController
from presentation.ui.styles import (
    C_BTN_GHOST,
    C_BTN_PRIM,
    C_CARD,
    C_PAGE_TITLE,
    C_TAG_CHIP,
    STYLE_TEXT_MUTED,
    STYLE_TEXT_SUBTLE,
)
from presentation.ui.viewmodels.todo_viewmodel import todos_to_viewmodels


def _render_empty_state() -> None:
    with ui.column().classes("w-full items-center py-12 gap-2"):
        ui.label("No todos yet!").classes("text-xl font-semibold text-slate-500")
        ui.label("Add your first todo above").classes(STYLE_TEXT_SUBTLE)


def _render_todo_item(
    todo: dict[str, Any],
    controller: TodoController,
    navigator: Navigator,
    on_show_qr: Callable[[dict[str, Any]], Any],
) -> None:
    with ui.card().classes(f"{C_CARD} p-4 w-full gap-2"):
        with ui.row().classes("w-full items-start gap-3 no-wrap"):
            ui.checkbox(
                value=todo["is_completed"],
                on_change=lambda _e, todo_id=todo["id"]: controller.toggle_todo(todo_id),
            )
            with ui.column().classes("flex-1 gap-1 min-w-0"):
                title_classes = "text-base font-medium text-slate-900"
                if todo["is_completed"]:
                    title_classes = "text-base font-medium line-through text-slate-400"
                ui.label(todo["title"]).classes(title_classes)
                if todo["has_description"]:
                    ui.label(todo["description"]).classes(f"{STYLE_TEXT_MUTED} line-clamp-2")
            with ui.row().classes("gap-1 no-wrap"):
                ui.button(
                    "QR",
                    on_click=lambda _e, item=todo: on_show_qr(item),
                ).props("flat").classes(C_BTN_GHOST)
                ui.button(
                    "Edit",
                    on_click=lambda _e, todo_id=todo["id"]: navigator.navigate(EditTodoDestination(todo_id)),
                ).props("flat").classes(C_BTN_GHOST)
                ui.button(
                    "Delete",
                    on_click=lambda _e, todo_id=todo["id"]: controller.delete_todo(todo_id),
                ).props("flat").classes(C_BTN_GHOST)
        if todo["tags"]:
            with ui.row().classes("gap-1 pl-10"):
                for tag in todo["tags"]:
                    ui.label(tag).classes(C_TAG_CHIP)


def render_todo_list(
    controller: TodoController,
    navigator: Navigator,
    on_show_qr: Callable[[dict[str, Any]], Any],
) -> None:
    ui.label("Todo List").classes(C_PAGE_TITLE)

    ui.button("Add New Todo", on_click=lambda: navigator.navigate(AddTodoDestination())).classes(
        f"{C_BTN_PRIM} w-full"
    )

    todos = todos_to_viewmodels(controller.list_todos())
    if not todos:
        _render_empty_state()
        return
    with ui.column().classes("w-full gap-2"):
        for todo in todos:
            _render_todo_item(todo, controller, navigator, on_show_qr)
