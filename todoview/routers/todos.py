from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from todoview.controller import TodoViewController, get_controller
from todoview.models.todo import TodoState
from todoview.views import page_response

router = APIRouter(tags=["todos"])


def _back_to_page() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
def page(request: Request, controller: TodoViewController = Depends(get_controller)):
    return page_response(request, controller.ensure_loaded())


@router.get("/api/state")
def current_state(controller: TodoViewController = Depends(get_controller)) -> TodoState:
    return controller.state


@router.post("/refresh")
def refresh(controller: TodoViewController = Depends(get_controller)):
    controller.refresh()
    return _back_to_page()


# --- Create ---


@router.post("/todos")
def add_todo(text: str = Form(""), controller: TodoViewController = Depends(get_controller)):
    controller.set_new_todo_text(text)
    controller.create()
    return _back_to_page()


# --- Per-item actions (only on displayed todos) ---


@router.post("/todos/{todo_id:path}/toggle")
def toggle_todo(todo_id: str, controller: TodoViewController = Depends(get_controller)):
    todo = controller.state.find(todo_id)
    if todo is not None:
        controller.toggle_complete(todo)
    return _back_to_page()


@router.post("/todos/{todo_id:path}/edit")
def start_edit(todo_id: str, controller: TodoViewController = Depends(get_controller)):
    todo = controller.state.find(todo_id)
    if todo is not None:
        controller.start_edit(todo)
    return _back_to_page()


@router.post("/todos/{todo_id:path}/delete")
def delete_todo(todo_id: str, controller: TodoViewController = Depends(get_controller)):
    todo = controller.state.find(todo_id)
    controller.delete(todo.id if todo is not None else todo_id)
    return _back_to_page()


# --- Edit panel ---


@router.post("/edit/save")
def save_edit(text: str = Form(""), controller: TodoViewController = Depends(get_controller)):
    controller.set_edit_text(text)
    controller.save_edit()
    return _back_to_page()


@router.post("/edit/cancel")
def cancel_edit(controller: TodoViewController = Depends(get_controller)):
    controller.cancel_edit()
    return _back_to_page()
