from __future__ import annotations

from nicegui import ui

from application.navigation.navigator import Navigator
from presentation.controllers.todo_controller import TodoController
from presentation.ui.styles import (
    C_BTN_GHOST,
    C_BTN_PRIM,
    C_BTN_SEC,
    C_CARD,
    C_INPUT,
    C_PAGE_TITLE,
    C_SECTION_TITLE,
    C_TAG_CHIP,
)
from presentation.ui.viewmodels.todo_viewmodel import add_tag, remove_tag


def render_add_edit_todo(
    controller: TodoController,
    navigator: Navigator,
    todo_id: str | None = None,
) -> None:
    """Form for a new todo, or for editing ``todo_id`` when given.

    An id that no longer exists renders an empty form; saving it leaves the
    store untouched.
    """
    todo = controller.get_todo(todo_id) if todo_id is not None else None
    tags: list[str] = list(todo["tags"]) if todo else []

    with ui.row().classes("w-full items-center gap-2"):
        ui.button("Back", on_click=navigator.pop_back_stack).props("flat").classes(C_BTN_GHOST)
        ui.label("Edit Todo" if todo_id is not None else "Add Todo").classes(C_PAGE_TITLE)

    with ui.card().classes(f"{C_CARD} p-4 w-full gap-3"):
        title_input = ui.input(
            "Title",
            placeholder="Enter todo title",
            value=todo["title"] if todo else "",
        ).classes(C_INPUT)
        description_input = ui.textarea(
            "Description (Optional)",
            placeholder="Enter description",
            value=todo["description"] if todo else "",
        ).classes(C_INPUT)

        ui.label("Tags").classes(C_SECTION_TITLE)
        with ui.row().classes("w-full items-center gap-2 no-wrap"):
            tag_input = ui.input(placeholder="Add a tag").classes("flex-1 text-sm")
            add_tag_button = ui.button("Add").classes(C_BTN_SEC)
            add_tag_button.bind_enabled_from(tag_input, "value", backward=lambda v: bool((v or "").strip()))

        @ui.refreshable
        def tag_chips() -> None:
            if not tags:
                return
            with ui.row().classes("w-full gap-1"):
                for tag in tags:
                    with ui.row().classes(f"{C_TAG_CHIP} items-center gap-1"):
                        ui.label(tag)
                        ui.icon("close").classes("cursor-pointer text-xs").on(
                            "click", lambda _e, value=tag: handle_remove_tag(value)
                        )

        def handle_add_tag() -> None:
            tags[:] = add_tag(tags, tag_input.value or "")
            tag_input.value = ""
            tag_chips.refresh()

        def handle_remove_tag(value: str) -> None:
            tags[:] = remove_tag(tags, value)
            tag_chips.refresh()

        add_tag_button.on_click(handle_add_tag)
        tag_input.on("keydown.enter", handle_add_tag)
        tag_chips()

    def handle_save() -> None:
        title = (title_input.value or "").strip()
        if not title:
            ui.notify("Please enter a title for the todo.", color="orange")
            return
        description = description_input.value or ""
        if todo_id is None:
            controller.create_todo(title, description, tags)
        else:
            controller.update_todo(todo_id, title, description, tags)
        navigator.pop_back_stack()

    with ui.row().classes("w-full justify-end gap-2"):
        ui.button("Cancel", on_click=navigator.pop_back_stack).classes(C_BTN_SEC)
        save_button = ui.button("Save", on_click=handle_save).classes(C_BTN_PRIM)
        save_button.bind_enabled_from(title_input, "value", backward=lambda v: bool((v or "").strip()))
