from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from domain.todo.entities.todo import Todo
from domain.todo.repositories.todo_repository import TodoListObserver, TodoRepository

logger = logging.getLogger(__name__)


class InMemoryTodoRepository(TodoRepository):
    """In-memory repository backed by an immutable tuple."""

    def __init__(self, initial_items: Optional[Iterable[Todo]] = None) -> None:
        self._items: tuple[Todo, ...] = tuple(initial_items or ())
        self._observers: list[TodoListObserver] = []

    def list(self) -> tuple[Todo, ...]:
        return self._items

    def replace_all(self, todos: tuple[Todo, ...]) -> None:
        self._items = tuple(todos)
        for observer in list(self._observers):
            observer(self._items)

    def subscribe(self, observer: TodoListObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe
