"""Todo view-controller.

Owns the page state and maps each user action onto the todo service. The
service is the single source of truth: after every successful mutation the
whole collection is fetched again and replaces the local list (see
``_resync``). Failed calls are logged and leave the state as it was; they
never propagate to the caller.
"""

import logging
import threading
from collections.abc import Callable

from todoview import state as transitions
from todoview.exceptions import RequestFailedError
from todoview.models.todo import Task, TodoState
from todoview.services import todos as todos_service

logger = logging.getLogger(__name__)


class TodoViewController:
    def __init__(self, initial: TodoState | None = None):
        self._state = initial or TodoState()
        self._lock = threading.Lock()
        self._loaded = False

    @property
    def state(self) -> TodoState:
        return self._state

    def _apply(self, transition: Callable[[TodoState], TodoState]) -> TodoState:
        # Only the swap is serialized; network calls happen outside the lock.
        with self._lock:
            self._state = transition(self._state)
            return self._state

    # --- List ---

    def refresh(self) -> TodoState:
        """Replace the list with the service's collection, or with [] on failure."""
        logger.debug("Fetching todo list")
        try:
            todos = todos_service.list_todos()
        except RequestFailedError as e:
            logger.error("Failed to fetch todos: %s", e)
            todos = []
        self._loaded = True
        return self._apply(lambda s: transitions.with_todos(s, todos))

    def ensure_loaded(self) -> TodoState:
        """Fetch the list once, the first time the page is shown."""
        if not self._loaded:
            return self.refresh()
        return self._state

    def _resync(self) -> TodoState:
        return self.refresh()

    # --- Create ---

    def set_new_todo_text(self, text: str) -> TodoState:
        return self._apply(lambda s: transitions.with_new_todo_text(s, text))

    def create(self) -> TodoState:
        current = self._state
        if not transitions.can_create(current):
            return current
        logger.debug("Creating todo %r", current.new_todo_text)
        try:
            todos_service.create_todo(current.new_todo_text)
        except RequestFailedError as e:
            logger.error("Failed to add todo: %s", e)
            return self._state
        self._apply(transitions.clear_new_todo_text)
        return self._resync()

    # --- Toggle ---

    def toggle_complete(self, todo: Task) -> TodoState:
        logger.debug("Toggling todo %s", todo.id)
        try:
            todos_service.replace_todo(transitions.toggled(todo))
        except RequestFailedError as e:
            logger.error("Failed to update todo %s: %s", todo.id, e)
            return self._state
        return self._resync()

    # --- Edit ---

    def start_edit(self, todo: Task) -> TodoState:
        return self._apply(lambda s: transitions.start_edit(s, todo))

    def set_edit_text(self, text: str) -> TodoState:
        return self._apply(lambda s: transitions.with_edit_text(s, text))

    def cancel_edit(self) -> TodoState:
        return self._apply(transitions.cancel_edit)

    def save_edit(self) -> TodoState:
        current = self._state
        if not transitions.can_save_edit(current):
            return current
        updated = transitions.edited(current)
        logger.debug("Saving todo %s", updated.id)
        try:
            todos_service.replace_todo(updated)
        except RequestFailedError as e:
            logger.error("Failed to update todo %s: %s", updated.id, e)
            return self._state
        self._apply(transitions.cancel_edit)
        return self._resync()

    # --- Delete ---

    def delete(self, todo_id: int | str) -> TodoState:
        logger.debug("Deleting todo %s", todo_id)
        try:
            todos_service.delete_todo(todo_id)
        except RequestFailedError as e:
            logger.error("Failed to delete todo %s: %s", todo_id, e)
            return self._state
        return self._resync()


_controller = TodoViewController()


def get_controller() -> TodoViewController:
    return _controller
