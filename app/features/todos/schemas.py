"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoCreate → corps de requête POST /todo

TodoUpdate → corps PATCH /todo/edit/{id} (mise à jour partielle)

TodoOut → réponse de l’API (dates converties dans le fuseau d'affichage)

Les champs JSON sont en camelCase (dueDate, userId...) comme le front l'attend.
"""

from datetime import datetime, tzinfo
from typing import Optional

from pydantic import BaseModel, Field

from app.db.models.todos import Todo
from app.utils.datetimes import localize

_CONFIG = {"populate_by_name": True}

class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, examples=["Acheter du lait"])
    due_date: Optional[datetime] = Field(None, alias="dueDate", examples=["2030-01-01T10:00:00Z"])
    done: bool = Field(False, examples=[False])

    model_config = _CONFIG

class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200, examples=["Aller courir"])
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    done: Optional[bool] = Field(None, examples=[True])

    model_config = _CONFIG

class TodoOut(BaseModel):
    id: int
    title: str
    due_date: datetime = Field(alias="dueDate")
    done: bool
    owner_id: int = Field(alias="userId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = _CONFIG

    @classmethod
    def present(cls, todo: Todo, tz: tzinfo) -> "TodoOut":
        return cls(
            id=todo.id,
            title=todo.title,
            due_date=localize(todo.due_date, tz),
            done=todo.done,
            owner_id=todo.owner_id,
            created_at=localize(todo.created_at, tz),
            updated_at=localize(todo.updated_at, tz),
        )

# ---------- Enveloppes de réponse ----------

class TodoCreatedOut(BaseModel):
    message: str = "Todo created successfully"
    todo: TodoOut

class TodoUpdatedOut(BaseModel):
    message: str = "Todo updated successfully"
    todo: TodoOut

class TodoItemOut(BaseModel):
    todo: TodoOut

class TodoListOut(BaseModel):
    todos: list[TodoOut]
