from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def todo_to_viewmodel(todo: dict[str, Any]) -> dict[str, Any]:
    description = str(todo.get("description") or "")
    return {
        "id": todo["id"],
        "title": todo["title"],
        "description": description,
        "has_description": bool(description),
        "tags": list(todo.get("tags") or []),
        "is_completed": bool(todo.get("is_completed")),
    }


def todos_to_viewmodels(todos: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    return [todo_to_viewmodel(todo) for todo in todos]


def add_tag(tags: list[str], tag_input: str) -> list[str]:
    """Tag list after pressing "Add"; unchanged for blank or duplicate input."""
    tag = (tag_input or "").strip()
    if not tag or tag in tags:
        return list(tags)
    return [*tags, tag]


def remove_tag(tags: list[str], tag: str) -> list[str]:
    return [existing for existing in tags if existing != tag]
