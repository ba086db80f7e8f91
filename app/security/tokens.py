import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, TypedDict

from jose import jwt, JWTError

from app.core.errors import InvalidToken

logger = logging.getLogger(__name__)

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `algorithm` : algo de signature (HS256 recommandé)
    - `access_ttl` : durée de vie d’un token. None (défaut) = le token n'expire jamais,
      il reste valide tant que le secret ne change pas.
    """
    secret: str
    algorithm: str = "HS256"
    access_ttl: Optional[timedelta] = None


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    sub: str            # identifiant utilisateur
    exp: int            # seulement si access_ttl est configuré


# ==========================================================
# 🎟️ Génération
# ==========================================================

def create_access_token(*, user_id: int, settings: JWTSettings) -> str:
    """
    Crée un token JWT ne portant qu'une seule information : l'id de l'utilisateur.
    """
    payload: DecodedToken = {"sub": str(user_id)}
    if settings.access_ttl is not None:
        payload["exp"] = int((datetime.now(timezone.utc) + settings.access_ttl).timestamp())
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_access_token(token: str, settings: JWTSettings) -> int:
    """
    Vérifie la signature (et l'expiration si présente) et retourne l'id utilisateur.
    Lève InvalidToken pour tout token illisible, mal signé, expiré ou sans `sub` exploitable.
    """
    try:
        decoded: DecodedToken = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            options={"verify_aud": False},
        )
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        raise InvalidToken() from e

    sub = decoded.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        logger.info("Rejected token: unusable subject")
        raise InvalidToken()
