from __future__ import annotations

from application.contracts.todo_dtos import TodoItemDto
from application.todo.store import TodoStore


class ToggleTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, todo_id: str) -> TodoItemDto | None:
        todo = self._store.toggle_complete(todo_id)
        return TodoItemDto.from_todo(todo) if todo else None
