from __future__ import annotations

from typing import Any, Iterable

from application.contracts.todo_dtos import CreateTodoRequest, TodoItemDto, UpdateTodoRequest
from composition_root import AppContainer

TodoDict = dict[str, Any]


def _to_dict(todo: TodoItemDto) -> TodoDict:
    return {
        "id": todo.id,
        "title": todo.title,
        "description": todo.description,
        "tags": list(todo.tags),
        "is_completed": todo.is_completed,
    }


class TodoController:
    def __init__(self, container: AppContainer) -> None:
        self._container = container

    def create_todo(self, title: str, description: str = "", tags: Iterable[str] = ()) -> TodoDict | None:
        todo = self._container.create_todo_command.execute(
            CreateTodoRequest(title=title, description=description, tags=tuple(tags))
        )
        return _to_dict(todo) if todo else None

    def update_todo(
        self,
        todo_id: str,
        title: str,
        description: str = "",
        tags: Iterable[str] = (),
    ) -> TodoDict | None:
        todo = self._container.update_todo_command.execute(
            UpdateTodoRequest(todo_id=todo_id, title=title, description=description, tags=tuple(tags))
        )
        return _to_dict(todo) if todo else None

    def toggle_todo(self, todo_id: str) -> TodoDict | None:
        todo = self._container.toggle_todo_command.execute(todo_id)
        return _to_dict(todo) if todo else None

    def delete_todo(self, todo_id: str) -> bool:
        return self._container.delete_todo_command.execute(todo_id)

    def get_todo(self, todo_id: str) -> TodoDict | None:
        todo = self._container.get_todo_query.execute(todo_id)
        return _to_dict(todo) if todo else None

    def list_todos(self) -> list[TodoDict]:
        return [_to_dict(todo) for todo in self._container.list_todos_query.execute()]
