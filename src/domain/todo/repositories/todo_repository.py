from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from domain.todo.entities.todo import Todo

TodoListObserver = Callable[[tuple[Todo, ...]], None]


@runtime_checkable
class TodoRepository(Protocol):
    """Ordered, observable holder of the todo sequence."""

    def list(self) -> tuple[Todo, ...]:
        ...

    def replace_all(self, todos: tuple[Todo, ...]) -> None:
        ...

    def subscribe(self, observer: TodoListObserver) -> Callable[[], None]:
        ...
