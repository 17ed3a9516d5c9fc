"""Pure transitions over TodoState.

Every function takes a state and returns a new one; nothing here touches the
network. The controller pairs these with service calls.
"""

from collections.abc import Iterable

from todoview.models.todo import Task, TodoState


def with_todos(state: TodoState, todos: Iterable[Task] | None) -> TodoState:
    """Replace the displayed list wholesale with a fetched snapshot."""
    return state.model_copy(update={"todos": tuple(todos or ())})


def with_new_todo_text(state: TodoState, text: str) -> TodoState:
    return state.model_copy(update={"new_todo_text": text})


def clear_new_todo_text(state: TodoState) -> TodoState:
    return state.model_copy(update={"new_todo_text": ""})


def start_edit(state: TodoState, todo: Task) -> TodoState:
    """Capture a copy of ``todo`` as the edit target, replacing any active edit."""
    return state.model_copy(update={"editing_todo": todo.model_copy(), "edit_text": todo.text})


def with_edit_text(state: TodoState, text: str) -> TodoState:
    return state.model_copy(update={"edit_text": text})


def cancel_edit(state: TodoState) -> TodoState:
    return state.model_copy(update={"editing_todo": None, "edit_text": ""})


# --- Guards ---


def can_create(state: TodoState) -> bool:
    return bool(state.new_todo_text.strip())


def can_save_edit(state: TodoState) -> bool:
    return state.editing_todo is not None and bool(state.edit_text.strip())


# --- Request bodies ---


def toggled(todo: Task) -> Task:
    return todo.model_copy(update={"completed": not todo.completed})


def edited(state: TodoState) -> Task:
    """The captured edit target with its text replaced by the working copy."""
    return state.editing_todo.model_copy(update={"text": state.edit_text})
