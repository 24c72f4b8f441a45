from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from application.navigation.external_uri_handler import ExternalUriHandler
from application.navigation.navigator import Navigator
from application.todo.store import TodoStore
from composition_root import AppContainer, create_app_container
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)


@pytest.fixture()
def in_memory_todo_repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture()
def todo_store(in_memory_todo_repo: InMemoryTodoRepository) -> TodoStore:
    return TodoStore(in_memory_todo_repo)


@pytest.fixture()
def container() -> AppContainer:
    return create_app_container()


@pytest.fixture()
def uri_handler() -> ExternalUriHandler:
    return ExternalUriHandler()


@pytest.fixture()
def navigator() -> Navigator:
    return Navigator()
