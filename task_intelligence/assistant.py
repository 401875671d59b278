"""Dispatch of transcribed voice utterances against a task store."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional

from task_intelligence.commands import confirmation_phrase
from task_intelligence.engine import TaskIntelligence
from task_intelligence.interfaces import SpeechTransport, TaskStore
from task_intelligence.schema import (
    AddTaskCommand,
    CompleteTaskCommand,
    DeleteTaskCommand,
    SearchCommand,
    ShowTasksCommand,
    Task,
    VoiceCommand,
)

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when a complete/delete utterance names no stored task."""


@dataclass
class DispatchResult:
    command: VoiceCommand
    tasks: list[Task] = field(default_factory=list)
    confirmation: str = ""


def _new_task_id() -> str:
    return uuid.uuid4().hex


def find_task(tasks: list[Task], utterance: str, *, pending_only: bool = False) -> Optional[Task]:
    """Task whose title appears in the utterance; the longest title wins."""

    lowered = utterance.lower()
    matches = [
        task
        for task in tasks
        if task.title and task.title.lower() in lowered and not (pending_only and task.is_done)
    ]
    if not matches:
        return None
    return max(matches, key=lambda task: len(task.title))


class VoiceAssistant:
    """Turns an utterance into a store mutation or query and speaks the confirmation.

    Store and speech errors are not caught here; they reach the caller.
    """

    def __init__(
        self,
        engine: TaskIntelligence,
        store: TaskStore,
        speech: Optional[SpeechTransport] = None,
        id_factory: Callable[[], str] = _new_task_id,
    ) -> None:
        self.engine = engine
        self.store = store
        self.speech = speech
        self.id_factory = id_factory

    def handle(self, utterance: str) -> DispatchResult:
        command = self.engine.classify_command(utterance)
        tasks = self._dispatch(command)
        confirmation = confirmation_phrase(command.type)
        if self.speech is not None:
            self.speech.speak(confirmation)
        logger.info("Handled %s command affecting %d task(s)", command.type.name, len(tasks))
        return DispatchResult(command=command, tasks=tasks, confirmation=confirmation)

    def add_task(self, text: str) -> Task:
        """Create and store a task whose priority and due date come from its text."""

        task = Task(task_id=self.id_factory(), title=text).with_analysis(self.engine.analyze_text(text))
        self.store.put(task)
        return task

    def search(self, query: str) -> list[Task]:
        needle = query.lower()
        return [
            task
            for task in self.store.all()
            if needle in task.title.lower() or (task.note and needle in task.note.lower())
        ]

    def complete(self, utterance: str) -> Task:
        task = find_task(self.store.all(), utterance, pending_only=True)
        if task is None:
            raise TaskNotFoundError(f"No pending task matches {utterance!r}")
        done = task.replace(is_done=True, completed_at=self.engine.clock.now())
        self.store.put(done)
        return done

    def delete(self, utterance: str) -> Task:
        task = find_task(self.store.all(), utterance)
        if task is None:
            raise TaskNotFoundError(f"No task matches {utterance!r}")
        self.store.delete(task.task_id)
        return task

    def _dispatch(self, command: VoiceCommand) -> list[Task]:
        if isinstance(command, AddTaskCommand):
            return [self.add_task(command.task_text)]
        if isinstance(command, SearchCommand):
            return self.search(command.query)
        if isinstance(command, ShowTasksCommand):
            return self.store.all()
        if isinstance(command, CompleteTaskCommand):
            return [self.complete(command.task_text)]
        if isinstance(command, DeleteTaskCommand):
            return [self.delete(command.task_text)]
        return []
