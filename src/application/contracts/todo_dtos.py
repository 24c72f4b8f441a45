from __future__ import annotations

from dataclasses import dataclass

from domain.todo.entities.todo import Todo


@dataclass(frozen=True)
class CreateTodoRequest:
    title: str
    description: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class UpdateTodoRequest:
    todo_id: str
    title: str
    description: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class TodoItemDto:
    id: str
    title: str
    description: str
    tags: tuple[str, ...]
    is_completed: bool

    @classmethod
    def from_todo(cls, todo: Todo) -> TodoItemDto:
        return cls(
            id=todo.id,
            title=todo.title,
            description=todo.description,
            tags=todo.tags,
            is_completed=todo.is_completed,
        )
