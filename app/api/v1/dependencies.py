"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_auth_service() : crée un AuthService à partir d’une session DB.

get_current_user_id() : lit le token, le vérifie et rattache l'utilisateur à la requête.

pagination() : paramètres optionnels offset et limit.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()), et à remplacer dans les tests
(app.dependency_overrides).
"""

import logging
import re
from datetime import tzinfo
from typing import Optional

from fastapi import Depends, Path, Query, Request, Security
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from app.core.config import settings, jwt_settings
from app.core.errors import NotFound, Unauthenticated
from app.db.session import get_session

from app.db.repositories.users import UserRepository
from app.features.authentication.services import AuthService

from app.db.repositories.todos import TodoRepository
from app.features.todos.services import TodoService

from app.security.tokens import JWTSettings, decode_access_token

logger = logging.getLogger(__name__)


def pagination(
    offset: int = Query(0, ge=0, description="Nombre d'éléments à sauter", examples=[0]),
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Taille max (absent : tout)", examples=[20]),
):
    return {"offset": offset, "limit": limit}


# -----------------------------
# Configuration
# -----------------------------
def get_jwt_settings() -> JWTSettings:
    return jwt_settings

def get_display_tz() -> tzinfo:
    return settings.display_tz


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(
    session: Session = Depends(get_session),
    jwt: JWTSettings = Depends(get_jwt_settings),
) -> AuthService:
    return AuthService(
        user_repo=UserRepository(session),
        jwt_settings=jwt,
        bcrypt_rounds=settings.BCRYPT_ROUNDS,
    )


# -----------------------------
# Todos
# -----------------------------
def get_todo_service(session: Session = Depends(get_session)) -> TodoService:
    return TodoService(TodoRepository(session))

_TODO_ID = re.compile(r"[0-9]+")
# Plus grand entier stockable dans une colonne INTEGER (SQLite, BIGINT)
_MAX_TODO_ID = 2**63 - 1

def get_todo_id(todo_id: str = Path(..., description="Identifiant du todo")) -> int:
    # Un identifiant non numérique ou hors plage ne peut désigner aucun todo
    if not _TODO_ID.fullmatch(todo_id) or len(todo_id) > 19 or int(todo_id) > _MAX_TODO_ID:
        raise NotFound()
    return int(todo_id)


# -----------------------------
# Identité de la requête
# -----------------------------
token_scheme = APIKeyHeader(
    name=settings.AUTH_TOKEN_HEADER,
    auto_error=False,
    description="Token renvoyé par /signin",
)

def get_current_user_id(
    request: Request,
    token: Optional[str] = Security(token_scheme),
    jwt: JWTSettings = Depends(get_jwt_settings),
) -> int:
    """
    Vérifie le token (absent -> 401, invalide -> 403) et rattache l'id
    de l'utilisateur à la requête (request.state.user_id).
    """
    if not token:
        logger.info("Rejected %s %s: token missing", request.method, request.url.path)
        raise Unauthenticated()
    user_id = decode_access_token(token, jwt)
    request.state.user_id = user_id
    return user_id
