from __future__ import annotations

from application.contracts.todo_dtos import CreateTodoRequest, TodoItemDto
from application.todo.store import TodoStore


class CreateTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: CreateTodoRequest) -> TodoItemDto | None:
        todo = self._store.add(request.title, request.description, request.tags)
        return TodoItemDto.from_todo(todo) if todo else None
