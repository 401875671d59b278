"""Core data schema for task intelligence results."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Union


class Priority(IntEnum):
    """Task priority tier, stored as 0-2 on persisted tasks."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


class Category(Enum):
    """Suggested task category with its display label."""

    WORK = "العمل"
    PERSONAL = "شخصي"
    STUDY = "التعلم"
    HEALTH = "الصحة"
    GENERAL = "عام"

    @property
    def label(self) -> str:
        return self.value


class TimeOfDay(Enum):
    """Work period bucket with its display label."""

    MORNING = "الصباح"
    AFTERNOON = "بعد الظهر"
    EVENING = "المساء"

    @property
    def label(self) -> str:
        return self.value


class VoiceCommandType(Enum):
    ADD_TASK = "add_task"
    SEARCH = "search"
    SHOW_TASKS = "show_tasks"
    COMPLETE_TASK = "complete_task"
    DELETE_TASK = "delete_task"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TaskAnalysis:
    """Structured metadata extracted from free-form task text."""

    priority: Priority = Priority.LOW
    due_date: Optional[datetime] = None
    estimated_duration_minutes: int = 30
    suggested_category: Category = Category.GENERAL


@dataclass(frozen=True)
class ProductivityAnalysis:
    """Score, preferred work period and advice computed from completions."""

    score: int = 0
    best_time_of_day: TimeOfDay = TimeOfDay.MORNING
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class AddTaskCommand:
    type: ClassVar[VoiceCommandType] = VoiceCommandType.ADD_TASK

    task_text: str

    @property
    def payload(self) -> Mapping[str, str]:
        return MappingProxyType({"taskText": self.task_text})


@dataclass(frozen=True)
class SearchCommand:
    type: ClassVar[VoiceCommandType] = VoiceCommandType.SEARCH

    query: str

    @property
    def payload(self) -> Mapping[str, str]:
        return MappingProxyType({"query": self.query})


@dataclass(frozen=True)
class ShowTasksCommand:
    type: ClassVar[VoiceCommandType] = VoiceCommandType.SHOW_TASKS

    @property
    def payload(self) -> Mapping[str, str]:
        return MappingProxyType({})


@dataclass(frozen=True)
class CompleteTaskCommand:
    type: ClassVar[VoiceCommandType] = VoiceCommandType.COMPLETE_TASK

    task_text: str

    @property
    def payload(self) -> Mapping[str, str]:
        return MappingProxyType({"taskText": self.task_text})


@dataclass(frozen=True)
class DeleteTaskCommand:
    type: ClassVar[VoiceCommandType] = VoiceCommandType.DELETE_TASK

    task_text: str

    @property
    def payload(self) -> Mapping[str, str]:
        return MappingProxyType({"taskText": self.task_text})


@dataclass(frozen=True)
class UnknownCommand:
    type: ClassVar[VoiceCommandType] = VoiceCommandType.UNKNOWN

    text: str

    @property
    def payload(self) -> Mapping[str, str]:
        return MappingProxyType({"text": self.text})


VoiceCommand = Union[
    AddTaskCommand,
    SearchCommand,
    ShowTasksCommand,
    CompleteTaskCommand,
    DeleteTaskCommand,
    UnknownCommand,
]


@dataclass(frozen=True)
class Task:
    """Persisted task record as handed to and from the task store."""

    task_id: str
    title: str
    note: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Priority = Priority.LOW
    is_done: bool = False
    completed_at: Optional[datetime] = None

    def replace(self, **changes) -> "Task":
        """Return a copy with the given fields changed."""

        return replace(self, **changes)

    def with_analysis(self, analysis: TaskAnalysis) -> "Task":
        """Merge analyzed priority and due date into a copy of this task."""

        due_date = analysis.due_date if analysis.due_date is not None else self.due_date
        return replace(self, priority=analysis.priority, due_date=due_date)


@dataclass
class CompletedTask:
    """Completion record loaded from a task export."""

    task_id: str
    completed_at: datetime
    title: Optional[str] = None
