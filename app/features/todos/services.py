"""
➡️ But : Contenir la logique métier des todos : validation des dates et contrôle d'appartenance.

TodoService reçoit toujours l'owner_id résolu depuis le token (jamais depuis le corps de requête).
Une tâche qui existe mais appartient à un autre utilisateur lève exactement la même
erreur NotFound qu'une tâche inexistante.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from app.core.errors import NotFound, ValidationError
from app.db.models.base import utcnow
from app.db.models.todos import Todo
from app.db.repositories.todos import TodoRepository
from app.features.todos.schemas import TodoCreate, TodoUpdate
from app.utils.datetimes import as_utc

logger = logging.getLogger(__name__)

# champ -> nom JSON
_NOT_NULLABLE = {"title": "title", "due_date": "dueDate", "done": "done"}

class TodoService:
    def __init__(self, repo: TodoRepository, now_fn: Callable[[], datetime] = utcnow):
        self.repo = repo
        self.now_fn = now_fn

    def _check_due_date(self, due_date: Optional[datetime]) -> datetime:
        """Règle unique pour la création et l'édition : date obligatoire et strictement future."""
        if due_date is None:
            raise ValidationError("dueDate is required")
        due = as_utc(due_date)
        if due <= as_utc(self.now_fn()):
            raise ValidationError("dueDate must be in the future")
        return due

    def list(self, owner_id: int, *, offset: int = 0, limit: Optional[int] = None) -> Sequence[Todo]:
        return self.repo.list_by_owner(owner_id, offset=offset, limit=limit)

    def get(self, owner_id: int, todo_id: int) -> Todo:
        todo = self.repo.get_owned(todo_id, owner_id)
        if not todo:
            raise NotFound()
        return todo

    def create(self, owner_id: int, payload: TodoCreate) -> Todo:
        due = self._check_due_date(payload.due_date)
        todo = self.repo.create(
            title=payload.title,
            due_date=due,
            done=payload.done,
            owner_id=owner_id,
        )
        logger.info("User %s created todo %s", owner_id, todo.id)
        return todo

    def update(self, owner_id: int, todo_id: int, payload: TodoUpdate) -> Todo:
        # Seuls les champs présents dans le corps sont appliqués
        changes = payload.model_dump(exclude_unset=True)
        for field, json_name in _NOT_NULLABLE.items():
            if field in changes and changes[field] is None:
                raise ValidationError(f"{json_name} cannot be null")
        if "due_date" in changes:
            changes["due_date"] = self._check_due_date(changes["due_date"])
        changes["updated_at"] = utcnow()

        todo = self.repo.update_owned(todo_id, owner_id, **changes)
        if not todo:
            raise NotFound()
        logger.info("User %s updated todo %s", owner_id, todo_id)
        return todo

    def delete(self, owner_id: int, todo_id: int) -> None:
        if not self.repo.delete_owned(todo_id, owner_id):
            raise NotFound()
        logger.info("User %s deleted todo %s", owner_id, todo_id)
