import logging
import threading
from typing import Iterable, Optional

from todo_api.schemas.todo import TodoIn, TodoOut

logger = logging.getLogger(__name__)

class TodoRepository:
    """In-memory, insertion-ordered todo list.

    Every method holds the lock for the whole read or mutation, so callers
    never observe a half-applied change regardless of the server's threading.
    """

    def __init__(self, initial: Iterable[TodoOut] = ()):
        self._todos: list[TodoOut] = list(initial)
        self._lock = threading.Lock()

    def list(self) -> list[TodoOut]:
        with self._lock:
            return list(self._todos)

    def count(self) -> int:
        with self._lock:
            return len(self._todos)

    def get(self, todo_id: Optional[int]) -> Optional[TodoOut]:
        with self._lock:
            index = self._find_index(todo_id)
            return None if index is None else self._todos[index]

    def create(self, todo_in: TodoIn) -> TodoOut:
        with self._lock:
            # length + 1 can collide with a surviving id after a delete
            todo = TodoOut.from_payload(len(self._todos) + 1, todo_in)
            self._todos.append(todo)
        logger.debug("created todo %s", todo.id, extra={"todo_id": todo.id})
        return todo

    def replace(self, todo_id: Optional[int], todo_in: TodoIn) -> Optional[TodoOut]:
        with self._lock:
            index = self._find_index(todo_id)
            if index is None:
                return None
            todo = TodoOut.from_payload(todo_id, todo_in)
            self._todos[index] = todo
        logger.debug("replaced todo %s", todo_id, extra={"todo_id": todo_id})
        return todo

    def delete(self, todo_id: Optional[int]) -> bool:
        with self._lock:
            index = self._find_index(todo_id)
            if index is None:
                return False
            del self._todos[index]
        logger.debug("deleted todo %s", todo_id, extra={"todo_id": todo_id})
        return True

    def _find_index(self, todo_id: Optional[int]) -> Optional[int]:
        # None is the unparseable id and matches nothing
        if todo_id is None:
            return None
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return None
