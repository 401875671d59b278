from task_intelligence.commands import CONFIRMATION_PHRASES, classify, confirmation_phrase, strip_phrases
from task_intelligence.schema import (
    AddTaskCommand,
    CompleteTaskCommand,
    DeleteTaskCommand,
    SearchCommand,
    ShowTasksCommand,
    UnknownCommand,
    VoiceCommandType,
)


def test_add_task_strips_triggers():
    command = classify("add task: buy milk")
    assert isinstance(command, AddTaskCommand)
    assert command.type == VoiceCommandType.ADD_TASK
    assert "buy milk" in command.task_text
    assert "add" not in command.task_text.lower()
    assert "task" not in command.task_text.lower()
    assert dict(command.payload) == {"taskText": command.task_text}


def test_add_task_arabic():
    command = classify("أضف مهمة اجتماع غداً")
    assert command == AddTaskCommand(task_text="اجتماع غداً")


def test_add_task_strips_case_insensitively_from_original_text():
    command = classify("CREATE New Task Call Mom")
    assert command == AddTaskCommand(task_text="Call Mom")


def test_add_task_falls_back_to_original_text():
    assert classify("Add Task") == AddTaskCommand(task_text="Add Task")


def test_search_extracts_query():
    assert classify("search about doctor") == SearchCommand(query="doctor")
    assert classify("ابحث عن الطبيب") == SearchCommand(query="الطبيب")
    assert dict(classify("find invoices").payload) == {"query": "invoices"}


def test_show_tasks_has_no_payload():
    command = classify("Show my tasks")
    assert isinstance(command, ShowTasksCommand)
    assert dict(command.payload) == {}
    assert isinstance(classify("اعرض المهام"), ShowTasksCommand)


def test_complete_and_delete_carry_original_text():
    assert classify("Complete the report") == CompleteTaskCommand(task_text="Complete the report")
    assert classify("اكمل مهمة التقرير") == CompleteTaskCommand(task_text="اكمل مهمة التقرير")
    assert classify("delete groceries") == DeleteTaskCommand(task_text="delete groceries")
    assert classify("امسح التذكير") == DeleteTaskCommand(task_text="امسح التذكير")


def test_unknown_command():
    command = classify("hello there")
    assert command == UnknownCommand(text="hello there")
    assert dict(command.payload) == {"text": "hello there"}
    assert classify("") == UnknownCommand(text="")


def test_first_intent_wins():
    assert classify("add a search task").type == VoiceCommandType.ADD_TASK
    # "news" contains the add trigger "new".
    assert classify("find news").type == VoiceCommandType.ADD_TASK
    assert classify("show done items").type == VoiceCommandType.SHOW_TASKS


def test_strip_phrases_escapes_literals():
    assert strip_phrases("a.b c", ["a.b"]) == "c"
    assert strip_phrases("abc", ["a.c"]) == "abc"


def test_confirmation_phrases_cover_every_type():
    assert set(CONFIRMATION_PHRASES) == set(VoiceCommandType)
    assert confirmation_phrase(VoiceCommandType.ADD_TASK) == "تم إضافة المهمة"
    assert confirmation_phrase(VoiceCommandType.UNKNOWN) == "لم أفهم الأمر"
    assert confirmation_phrase(classify("search x").type) == "جاري البحث"
