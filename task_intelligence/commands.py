"""Voice command classification and spoken confirmations."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Iterable

from task_intelligence.schema import (
    AddTaskCommand,
    CompleteTaskCommand,
    DeleteTaskCommand,
    SearchCommand,
    ShowTasksCommand,
    UnknownCommand,
    VoiceCommand,
    VoiceCommandType,
)
from task_intelligence.taxonomy import COMMAND_TIERS, PAYLOAD_STRIP_PHRASES, first_match

logger = logging.getLogger(__name__)

CONFIRMATION_PHRASES = MappingProxyType(
    {
        VoiceCommandType.ADD_TASK: "تم إضافة المهمة",
        VoiceCommandType.SEARCH: "جاري البحث",
        VoiceCommandType.SHOW_TASKS: "عرض المهام",
        VoiceCommandType.COMPLETE_TASK: "تم إكمال المهمة",
        VoiceCommandType.DELETE_TASK: "تم حذف المهمة",
        VoiceCommandType.UNKNOWN: "لم أفهم الأمر",
    }
)


def confirmation_phrase(command_type: VoiceCommandType) -> str:
    """Phrase the speech transport reads back after a command."""

    return CONFIRMATION_PHRASES.get(command_type, CONFIRMATION_PHRASES[VoiceCommandType.UNKNOWN])


def strip_phrases(text: str, phrases: Iterable[str]) -> str:
    """Remove every phrase case-insensitively, falling back to ``text`` when nothing is left."""

    result = text
    for phrase in phrases:
        result = re.sub(re.escape(phrase), "", result, flags=re.IGNORECASE).strip()
    return result or text


def classify(text: str) -> VoiceCommand:
    """Classify a transcribed utterance; the first matching intent wins."""

    text = text or ""
    command_type = first_match(text.lower(), COMMAND_TIERS, default=VoiceCommandType.UNKNOWN)

    if command_type is VoiceCommandType.ADD_TASK:
        command = AddTaskCommand(task_text=strip_phrases(text, PAYLOAD_STRIP_PHRASES[command_type]))
    elif command_type is VoiceCommandType.SEARCH:
        command = SearchCommand(query=strip_phrases(text, PAYLOAD_STRIP_PHRASES[command_type]))
    elif command_type is VoiceCommandType.SHOW_TASKS:
        command = ShowTasksCommand()
    elif command_type is VoiceCommandType.COMPLETE_TASK:
        command = CompleteTaskCommand(task_text=text)
    elif command_type is VoiceCommandType.DELETE_TASK:
        command = DeleteTaskCommand(task_text=text)
    else:
        command = UnknownCommand(text=text)

    logger.debug("Classified %r as %s", text, command.type.name)
    return command
