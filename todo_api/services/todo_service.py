import re
from typing import Any, Optional

from todo_api.errors import TitleRequiredError, TodoNotFoundError
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import TodoIn, TodoOut

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

def parse_todo_id(raw: str) -> Optional[int]:
    """Lenient integer parse of a path id.

    Leading whitespace and a sign are allowed and anything after the leading
    digits is ignored, so "12abc" is 12. Returns None when there are no
    leading digits; None matches no todo.
    """
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None

def is_blank(value: Any) -> bool:
    """Missing, null, false, 0 or "". Empty arrays and objects count as present."""
    if isinstance(value, (list, dict)):
        return False
    return not value

class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def list_todos(self) -> list[TodoOut]:
        return self.repo.list()

    def get_todo(self, raw_id: str) -> TodoOut:
        todo_id = parse_todo_id(raw_id)
        todo = self.repo.get(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def create_todo(self, todo_in: TodoIn) -> TodoOut:
        if is_blank(todo_in.title):
            raise TitleRequiredError()
        return self.repo.create(todo_in)

    def replace_todo(self, raw_id: str, todo_in: TodoIn) -> TodoOut:
        todo_id = parse_todo_id(raw_id)
        todo = self.repo.replace(todo_id, todo_in)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def delete_todo(self, raw_id: str) -> None:
        todo_id = parse_todo_id(raw_id)
        if not self.repo.delete(todo_id):
            raise TodoNotFoundError(todo_id)
