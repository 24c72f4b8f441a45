from __future__ import annotations

from application.contracts.todo_dtos import TodoItemDto
from application.todo.store import TodoStore


class ListTodosQuery:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self) -> list[TodoItemDto]:
        return [TodoItemDto.from_todo(todo) for todo in self._store.todos]
