from __future__ import annotations

from typing import Callable

from application.navigation.navigator import Navigator, TodoListDestination
from composition_root import AppContainer


class PageBinding:
    """Ties one browser page to the shared store and deep-link relay.

    Subscriptions live until ``detach`` is called, which the page does when
    its client is deleted; a dropped websocket that reconnects keeps them.
    """

    def __init__(self, container: AppContainer, navigator: Navigator, refresh: Callable[[], None]) -> None:
        self._container = container
        self._navigator = navigator
        self._refresh = refresh
        self._unsubscribers: list[Callable[[], None]] = []

    def attach(self) -> None:
        self._unsubscribers = [
            self._navigator.subscribe(lambda _destination: self._refresh()),
            self._container.store.subscribe(self._on_todos_changed),
        ]
        self._container.uri_handler.listener = self._navigator.handle_deep_link

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        uri_handler = self._container.uri_handler
        if uri_handler.listener == self._navigator.handle_deep_link:
            uri_handler.listener = None

    def _on_todos_changed(self, _todos) -> None:
        # Forms keep their own state until saved.
        if isinstance(self._navigator.current, TodoListDestination):
            self._refresh()
