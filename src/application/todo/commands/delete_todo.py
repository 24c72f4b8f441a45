from __future__ import annotations

from application.todo.store import TodoStore


class DeleteTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, todo_id: str) -> bool:
        return self._store.delete(todo_id)
