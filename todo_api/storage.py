from todo_api import config
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import TodoOut

SEED_TODO = {
    "id": 123,
    "title": "Play Red Dead Redemption 2",
    "description": "Really interesting game.",
    "completed": False,
    "priority": 3,
    "dueDate": "Sat Dec 10 2022 04:08:42 GMT+0000 (Coordinated Universal Time)",
}

def new_repository(seed: bool = True) -> TodoRepository:
    """A fresh repository, optionally holding the seed record."""
    initial = [TodoOut.model_validate(SEED_TODO)] if seed else []
    return TodoRepository(initial)

# process-lifetime state, reset on restart
repository = new_repository(seed=config.SEED_TODOS)

def get_repo() -> TodoRepository:
    return repository
