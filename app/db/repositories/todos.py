"""
➡️ But : Encapsuler toutes les opérations de base de données sur Todo.

Toutes les requêtes sont filtrées par (id, owner_id) : le repository ne sait pas
lire ni modifier une tâche sans connaître son propriétaire.

Les écritures sont des UPDATE/DELETE conditionnels en une seule requête :
la vérification d'appartenance et la modification sont atomiques au niveau de la ligne.
"""

from typing import Any, Optional, Sequence
from sqlalchemy import delete, update
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.todos import Todo

class TodoRepository(BaseRepository[Todo]):
    model = Todo

    def list_by_owner(
        self,
        owner_id: int,
        *,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Sequence[Todo]:
        statement = (
            select(self.model)
            .where(self.model.owner_id == owner_id)
            .order_by(self.model.id)
            .offset(offset)
            .limit(limit)
        )
        return self.session.exec(statement).all()

    def get_owned(self, todo_id: int, owner_id: int) -> Optional[Todo]:
        return self.session.exec(
            select(self.model)
            .where(self.model.id == todo_id)
            .where(self.model.owner_id == owner_id)
        ).first()

    def update_owned(self, todo_id: int, owner_id: int, **changes: Any) -> Optional[Todo]:
        """
        Applique `changes` si la tâche existe ET appartient à owner_id.
        Retourne la tâche rechargée, ou None si aucune ligne ne correspond.
        """
        result = self.session.exec(
            update(self.model)
            .where(self.model.id == todo_id)
            .where(self.model.owner_id == owner_id)
            .values(**changes)
        )
        if result.rowcount == 0:
            self.session.rollback()
            return None
        self.session.commit()
        return self.get_owned(todo_id, owner_id)

    def delete_owned(self, todo_id: int, owner_id: int) -> bool:
        """Supprime la tâche si elle appartient à owner_id. False si rien n'a été supprimé."""
        result = self.session.exec(
            delete(self.model)
            .where(self.model.id == todo_id)
            .where(self.model.owner_id == owner_id)
        )
        if result.rowcount == 0:
            self.session.rollback()
            return False
        self.session.commit()
        return True
