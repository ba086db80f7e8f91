from __future__ import annotations

from typing import Optional
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.users import User

class UserRepository(BaseRepository[User]):
    """Accès à la table User : insertion (héritée) et recherche par email."""
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        """Retourne un utilisateur par son email (comparaison exacte), ou None."""
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()
