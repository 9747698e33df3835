from typing import Optional

class TodoApiError(Exception):
    """Domain error reported to the client as {"message": ...}."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

class TitleRequiredError(TodoApiError):
    status_code = 400
    message = "Title is required"

class TodoNotFoundError(TodoApiError):
    status_code = 404
    message = "Todo not found"

    def __init__(self, todo_id: Optional[int] = None):
        self.todo_id = todo_id
        super().__init__()
