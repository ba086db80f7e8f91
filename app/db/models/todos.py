from datetime import datetime
from sqlmodel import Field

from .base import BaseModelDB, utc_field

class Todo(BaseModelDB, table=True):
    """Tâche rattachée à un unique propriétaire, fixé à la création."""

    title: str = Field(max_length=200)
    due_date: datetime = utc_field()
    done: bool = Field(default=False)
    owner_id: int = Field(index=True, foreign_key="user.id")
