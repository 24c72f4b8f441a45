from __future__ import annotations

from application.contracts.todo_dtos import TodoItemDto, UpdateTodoRequest
from application.todo.store import TodoStore


class UpdateTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: UpdateTodoRequest) -> TodoItemDto | None:
        todo = self._store.update(
            request.todo_id,
            request.title,
            request.description,
            request.tags,
        )
        return TodoItemDto.from_todo(todo) if todo else None
