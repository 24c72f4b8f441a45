from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, Optional

from domain.todo.entities.todo import Todo
from domain.todo.repositories.todo_repository import TodoListObserver, TodoRepository
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)

logger = logging.getLogger(__name__)


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    return tuple(tag.strip() for tag in tags if tag and tag.strip())


class TodoStore:
    """Ordered todo list with add/update/toggle/delete.

    Every mutation replaces the whole sequence in the repository, which
    notifies subscribers. Writes with a blank title and lookups of unknown
    ids are silent no-ops.
    """

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self._repository = repository if repository is not None else InMemoryTodoRepository()

    @property
    def todos(self) -> tuple[Todo, ...]:
        return self._repository.list()

    def subscribe(self, observer: TodoListObserver) -> Callable[[], None]:
        return self._repository.subscribe(observer)

    def add(self, title: str, description: str = "", tags: Iterable[str] = ()) -> Todo | None:
        title = (title or "").strip()
        if not title:
            logger.debug("Ignoring todo with blank title")
            return None
        todo = Todo(
            title=title,
            description=(description or "").strip(),
            tags=normalize_tags(tags),
        )
        self._repository.replace_all(self.todos + (todo,))
        logger.info("Added todo %s", todo.id)
        return todo

    def update(
        self,
        todo_id: str,
        title: str,
        description: str = "",
        tags: Iterable[str] = (),
    ) -> Todo | None:
        title = (title or "").strip()
        if not title:
            logger.debug("Ignoring update of %s with blank title", todo_id)
            return None
        current = self.find_by_id(todo_id)
        if current is None:
            logger.debug("Ignoring update of unknown todo %s", todo_id)
            return None
        updated = replace(
            current,
            title=title,
            description=(description or "").strip(),
            tags=normalize_tags(tags),
        )
        self._replace(updated)
        logger.info("Updated todo %s", todo_id)
        return updated

    def toggle_complete(self, todo_id: str) -> Todo | None:
        current = self.find_by_id(todo_id)
        if current is None:
            return None
        toggled = current.toggle_complete()
        self._replace(toggled)
        logger.info("Todo %s completed=%s", todo_id, toggled.is_completed)
        return toggled

    def delete(self, todo_id: str) -> bool:
        todos = self.todos
        remaining = tuple(todo for todo in todos if todo.id != todo_id)
        if len(remaining) == len(todos):
            return False
        self._repository.replace_all(remaining)
        logger.info("Deleted todo %s", todo_id)
        return True

    def find_by_id(self, todo_id: str) -> Todo | None:
        return next((todo for todo in self.todos if todo.id == todo_id), None)

    def _replace(self, updated: Todo) -> None:
        self._repository.replace_all(
            tuple(updated if todo.id == updated.id else todo for todo in self.todos)
        )
