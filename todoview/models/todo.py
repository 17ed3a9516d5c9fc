from pydantic import BaseModel


class Task(BaseModel):
    id: int | str
    text: str
    completed: bool = False

    model_config = {"frozen": True}


class CreateTodoRequest(BaseModel):
    text: str
    completed: bool = False


class TodoState(BaseModel):
    todos: tuple[Task, ...] = ()
    new_todo_text: str = ""
    editing_todo: Task | None = None  # captured copy of the task being edited
    edit_text: str = ""

    model_config = {"frozen": True}

    @property
    def is_editing(self) -> bool:
        return self.editing_todo is not None

    def find(self, todo_id: int | str) -> Task | None:
        """Return the displayed task whose id renders as ``todo_id``."""
        for todo in self.todos:
            if str(todo.id) == str(todo_id):
                return todo
        return None
