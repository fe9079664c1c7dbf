"""Todos router for Taskboard Server."""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from ...services.task_store import TaskStore
from ..dependencies import get_task_store, read_json_object
from ..responses import result_to_response
from ..schemas.common import MessageResponse
from ..schemas.todos import TodoCreateRequest, TodoResponse, TodoUpdateRequest

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}}


def _request_body(model) -> dict:
    # Bodies are parsed by hand, so document them explicitly.
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
    openapi_extra=_request_body(TodoCreateRequest),
)
async def create_todo(request: Request, store: TaskStore = Depends(get_task_store)):
    """Create a new todo."""
    payload = await read_json_object(request)
    return result_to_response(store.create(payload.get("title")))


@router.get("", response_model=List[TodoResponse])
async def list_todos(store: TaskStore = Depends(get_task_store)):
    """List all todos in creation order."""
    return result_to_response(store.list())


@router.get("/{todo_id}", response_model=TodoResponse, responses=NOT_FOUND_RESPONSE)
async def get_todo(todo_id: str, store: TaskStore = Depends(get_task_store)):
    """Get todo by ID."""
    return result_to_response(store.get_by_id(todo_id))


@router.patch(
    "/{todo_id}",
    response_model=TodoResponse,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
    openapi_extra=_request_body(TodoUpdateRequest),
)
async def update_todo(
    todo_id: str, request: Request, store: TaskStore = Depends(get_task_store)
):
    """Partially update a todo."""
    payload = await read_json_object(request)
    return result_to_response(store.update(todo_id, payload))


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_todo(todo_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a todo."""
    return result_to_response(store.delete(todo_id))
