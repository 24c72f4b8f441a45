from __future__ import annotations

from dataclasses import dataclass

from application.navigation.external_uri_handler import ExternalUriHandler
from application.todo.commands.create_todo import CreateTodoCommand
from application.todo.commands.delete_todo import DeleteTodoCommand
from application.todo.commands.toggle_todo import ToggleTodoCommand
from application.todo.commands.update_todo import UpdateTodoCommand
from application.todo.queries.get_todo import GetTodoQuery
from application.todo.queries.list_todos import ListTodosQuery
from application.todo.store import TodoStore
from domain.qr.qr_code_generator import QRCodeGenerator
from infrastructure.config.settings import Settings
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from infrastructure.qr.pillow_qr_code_generator import PillowQRCodeGenerator


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    store: TodoStore
    uri_handler: ExternalUriHandler
    qr_code_generator: QRCodeGenerator
    create_todo_command: CreateTodoCommand
    update_todo_command: UpdateTodoCommand
    toggle_todo_command: ToggleTodoCommand
    delete_todo_command: DeleteTodoCommand
    list_todos_query: ListTodosQuery
    get_todo_query: GetTodoQuery


def create_app_container(settings: Settings | None = None) -> AppContainer:
    store = TodoStore(InMemoryTodoRepository())
    return AppContainer(
        settings=settings or Settings(),
        store=store,
        uri_handler=ExternalUriHandler(),
        qr_code_generator=PillowQRCodeGenerator(),
        create_todo_command=CreateTodoCommand(store),
        update_todo_command=UpdateTodoCommand(store),
        toggle_todo_command=ToggleTodoCommand(store),
        delete_todo_command=DeleteTodoCommand(store),
        list_todos_query=ListTodosQuery(store),
        get_todo_query=GetTodoQuery(store),
    )
