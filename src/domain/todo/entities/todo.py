from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace


def _new_todo_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Todo:
    title: str
    description: str = ""
    tags: tuple[str, ...] = ()
    is_completed: bool = False
    id: str = field(default_factory=_new_todo_id)

    def toggle_complete(self) -> Todo:
        return replace(self, is_completed=not self.is_completed)
