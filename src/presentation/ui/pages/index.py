from __future__ import annotations

from typing import Any

from nicegui import ui

from application.navigation.navigator import (
    AddTodoDestination,
    EditTodoDestination,
    Navigator,
)
from composition_root import AppContainer
from presentation.controllers.todo_controller import TodoController
from presentation.ui.page_binding import PageBinding
from presentation.ui.pages.add_edit_todo import render_add_edit_todo
from presentation.ui.pages.qr_code_dialog import show_qr_code_dialog
from presentation.ui.pages.todo_list import render_todo_list
from presentation.ui.styles import C_CONTAINER
from presentation.ui.theme import apply_global_ui_theme


def register_pages(container: AppContainer) -> None:
    controller = TodoController(container)

    @ui.page("/")
    def index(deeplink: str = "") -> None:
        apply_global_ui_theme()
        navigator = Navigator()

        async def show_qr(todo: dict[str, Any]) -> None:
            await show_qr_code_dialog(todo, container.qr_code_generator, container.settings.qr_size)

        @ui.refreshable
        def screen() -> None:
            destination = navigator.current
            with ui.column().classes(C_CONTAINER):
                if isinstance(destination, AddTodoDestination):
                    render_add_edit_todo(controller, navigator)
                elif isinstance(destination, EditTodoDestination):
                    render_add_edit_todo(controller, navigator, destination.todo_id)
                else:
                    render_todo_list(controller, navigator, show_qr)

        screen()
        binding = PageBinding(container, navigator, screen.refresh)
        binding.attach()
        if deeplink.strip():
            container.uri_handler.on_new_uri(deeplink.strip())

        ui.context.client.on_delete(binding.detach)
