from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path

from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import Message, TodoIn, TodoOut
from todo_api.services.todo_service import TodoService
from todo_api.storage import get_repo

router = APIRouter()

NOT_FOUND = {404: {"model": Message, "description": "Todo not found"}}
TodoId = Annotated[str, Path(description="ID of the todo; parsed leniently as an integer")]

def get_service(repo: TodoRepository = Depends(get_repo)) -> TodoService:
    return TodoService(repo)

@router.get(
    "",
    response_model=list[TodoOut],
    response_model_exclude_unset=True,
    summary="Get all todos",
    response_description="A list of todos",
)
async def list_todos(service: TodoService = Depends(get_service)):
    return service.list_todos()

@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
    summary="Get a todo by ID",
    response_description="The todo with the specified ID",
)
async def get_todo(todo_id: TodoId, service: TodoService = Depends(get_service)):
    return service.get_todo(todo_id)

@router.post(
    "",
    response_model=TodoOut,
    response_model_exclude_unset=True,
    status_code=201,
    responses={400: {"model": Message, "description": "Bad request (missing title)"}},
    summary="Create a new todo",
    response_description="The newly created todo",
)
async def create_todo(
    todo_in: Optional[TodoIn] = None, service: TodoService = Depends(get_service)
):
    return service.create_todo(todo_in or TodoIn())

@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
    summary="Update a todo by ID",
    response_description="The updated todo",
)
async def replace_todo(
    todo_id: TodoId,
    todo_in: Optional[TodoIn] = None,
    service: TodoService = Depends(get_service),
):
    return service.replace_todo(todo_id, todo_in or TodoIn())

@router.delete(
    "/{todo_id}",
    response_model=Message,
    responses=NOT_FOUND,
    summary="Delete a todo by ID",
    response_description="Todo deleted",
)
async def delete_todo(todo_id: TodoId, service: TodoService = Depends(get_service)):
    service.delete_todo(todo_id)
    return Message(message="Todo deleted")
