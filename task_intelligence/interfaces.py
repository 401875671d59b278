"""Contracts for the task store and speech transport collaborators."""

from __future__ import annotations

from typing import Optional, Protocol

from task_intelligence.schema import Task


class TaskStore(Protocol):
    """Key/value persistence for tasks, keyed by ``task_id``."""

    def put(self, task: Task) -> None:
        ...

    def get(self, task_id: str) -> Optional[Task]:
        ...

    def delete(self, task_id: str) -> None:
        ...

    def all(self) -> list[Task]:
        ...


class SpeechTransport(Protocol):
    """Text-to-speech output; audio capture happens upstream of the engine."""

    def speak(self, text: str) -> None:
        ...


class InMemoryTaskStore:
    """Dict-backed task store preserving insertion order."""

    def __init__(self, tasks: Optional[list[Task]] = None) -> None:
        self._tasks: dict[str, Task] = {}
        for task in tasks or []:
            self.put(task)

    def put(self, task: Task) -> None:
        self._tasks[task.task_id] = task

    def get(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    def delete(self, task_id: str) -> None:
        self._tasks.pop(task_id, None)

    def all(self) -> list[Task]:
        return list(self._tasks.values())
