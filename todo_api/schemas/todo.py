from pydantic import BaseModel, Field
from typing import Any

# Payload values are stored exactly as sent; the declared types only feed the docs.
def _documented(json_type: str, **kwargs) -> Any:
    return Field(default=None, json_schema_extra={"type": json_type}, **kwargs)

class TodoBase(BaseModel):
    # unset fields are left out of responses (response_model_exclude_unset)
    title: Any = _documented("string")
    description: Any = _documented("string")
    due_date: Any = _documented("string", alias="dueDate")
    completed: Any = _documented("boolean")
    priority: Any = _documented("number")

class TodoIn(TodoBase):
    """Request body for create and replace. Every field may be omitted."""

class TodoOut(TodoBase):
    id: int

    @classmethod
    def from_payload(cls, todo_id: int, todo_in: TodoIn) -> "TodoOut":
        # copy only the fields the client sent so absent stays absent
        sent = {
            todo_in.model_fields[name].alias or name: getattr(todo_in, name)
            for name in todo_in.model_fields_set
        }
        return cls.model_validate({"id": todo_id, **sent})

class Message(BaseModel):
    message: str
