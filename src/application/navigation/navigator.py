from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

logger = logging.getLogger(__name__)

OPEN_TODO_VIEW = "open-todo-view"
DEEP_LINK_ADD_TODO = f"demo://{OPEN_TODO_VIEW}"


@dataclass(frozen=True)
class TodoListDestination:
    pass


@dataclass(frozen=True)
class AddTodoDestination:
    pass


@dataclass(frozen=True)
class EditTodoDestination:
    todo_id: str


Destination = Union[TodoListDestination, AddTodoDestination, EditTodoDestination]
NavigationObserver = Callable[[Destination], None]


class Navigator:
    """Back stack of screens, starting at the todo list."""

    def __init__(self) -> None:
        self._stack: list[Destination] = [TodoListDestination()]
        self._observers: list[NavigationObserver] = []

    @property
    def current(self) -> Destination:
        return self._stack[-1]

    @property
    def back_stack(self) -> tuple[Destination, ...]:
        return tuple(self._stack)

    def subscribe(self, observer: NavigationObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def navigate(self, destination: Destination) -> None:
        self._stack.append(destination)
        logger.debug("Navigate to %s", destination)
        self._notify()

    def pop_back_stack(self) -> bool:
        if len(self._stack) <= 1:
            return False
        self._stack.pop()
        self._notify()
        return True

    def handle_deep_link(self, uri: str) -> bool:
        if OPEN_TODO_VIEW in uri:
            logger.info("Deep link %s opens the add screen", uri)
            self.navigate(AddTodoDestination())
            return True
        logger.info("Ignoring deep link %s", uri)
        return False

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self.current)
