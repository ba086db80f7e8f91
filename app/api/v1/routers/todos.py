"""
➡️ But : Définir les endpoints de l’API todos.

Toutes les routes exigent un token (dépendance get_current_user_id) :
l'utilisateur courant est le seul propriétaire possible des todos manipulés.

Les routes ne contiennent ni SQL ni logique métier.
"""

from datetime import tzinfo

from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import (
    get_current_user_id,
    get_display_tz,
    get_todo_id,
    get_todo_service,
    pagination,
)
from app.features.authentication.schemas import MessageOut
from app.features.todos.schemas import (
    TodoCreate,
    TodoUpdate,
    TodoOut,
    TodoCreatedOut,
    TodoUpdatedOut,
    TodoItemOut,
    TodoListOut,
)
from app.features.todos.services import TodoService

_AUTH_RESPONSES = {
    401: {"description": "Token manquant"},
    403: {"description": "Token invalide"},
}
_NOT_FOUND = {404: {"description": "Todo introuvable (ou appartenant à un autre utilisateur)"}}

router = APIRouter(tags=["todos"], responses=_AUTH_RESPONSES)

@router.post(
    "/todo",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoCreatedOut,
    responses={400: {"description": "dueDate absente ou passée"}},
)
def create_todo(
    payload: TodoCreate,
    user_id: int = Depends(get_current_user_id),
    svc: TodoService = Depends(get_todo_service),
    tz: tzinfo = Depends(get_display_tz),
):
    todo = svc.create(user_id, payload)
    return TodoCreatedOut(todo=TodoOut.present(todo, tz))

@router.get(
    "/todos",
    summary="Lister mes todos",
    description="Sans offset/limit, retourne tous les todos de l'utilisateur courant.",
    response_model=TodoListOut,
)
def list_todos(
    user_id: int = Depends(get_current_user_id),
    p=Depends(pagination),
    svc: TodoService = Depends(get_todo_service),
    tz: tzinfo = Depends(get_display_tz),
):
    todos = svc.list(user_id, **p)
    return TodoListOut(todos=[TodoOut.present(t, tz) for t in todos])

@router.get(
    "/todo/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoItemOut,
    responses=_NOT_FOUND,
)
def get_todo(
    user_id: int = Depends(get_current_user_id),
    todo_id: int = Depends(get_todo_id),
    svc: TodoService = Depends(get_todo_service),
    tz: tzinfo = Depends(get_display_tz),
):
    return TodoItemOut(todo=TodoOut.present(svc.get(user_id, todo_id), tz))

@router.patch(
    "/todo/edit/{todo_id}",
    summary="Mettre à jour un todo",
    description="Mise à jour partielle : seuls les champs envoyés sont modifiés.",
    response_model=TodoUpdatedOut,
    responses={**_NOT_FOUND, 400: {"description": "dueDate passée ou champ null"}},
)
def update_todo(
    payload: TodoUpdate,
    user_id: int = Depends(get_current_user_id),
    todo_id: int = Depends(get_todo_id),
    svc: TodoService = Depends(get_todo_service),
    tz: tzinfo = Depends(get_display_tz),
):
    todo = svc.update(user_id, todo_id, payload)
    return TodoUpdatedOut(todo=TodoOut.present(todo, tz))

@router.delete(
    "/todo/remove/{todo_id}",
    summary="Supprimer un todo",
    response_model=MessageOut,
    responses=_NOT_FOUND,
)
def delete_todo(
    user_id: int = Depends(get_current_user_id),
    todo_id: int = Depends(get_todo_id),
    svc: TodoService = Depends(get_todo_service),
):
    svc.delete(user_id, todo_id)
    return MessageOut(message="Todo deleted successfully")
