"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URL DB, secret JWT, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, figé (frozen), lu une seule fois au démarrage :

from app.core.config import settings
print(settings.APP_NAME)

⚠️ DATABASE_URL et JWT_SECRET_KEY n'ont pas de valeur par défaut :
s'ils manquent (ou sont vides), l'import échoue et le serveur ne démarre pas.
"""

from datetime import timedelta
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from app.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-Back"
    ENV: str = "dev"  # dev | prod | test
    API_PREFIX: str = ""
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    REQUEST_TIMEOUT_SECONDS: float = Field(default=30.0, ge=0)  # 0 = pas de timeout

    # -----------------------------
    # DB
    # -----------------------------
    DATABASE_URL: str

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TTL_MINUTES: Optional[int] = Field(default=None, gt=0)  # None = pas d'expiration
    AUTH_TOKEN_HEADER: str = "token"
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # -----------------------------
    # Affichage
    # -----------------------------
    DISPLAY_TIMEZONE: str = "Asia/Kolkata"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "frozen": True,
    }

    # -----------------------------
    # Validation des valeurs
    # -----------------------------
    @field_validator("DATABASE_URL", "JWT_SECRET_KEY")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("DISPLAY_TIMEZONE")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone: {value!r}")
        return value

    @property
    def display_tz(self) -> ZoneInfo:
        return ZoneInfo(self.DISPLAY_TIMEZONE)


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET_KEY,
    algorithm=settings.JWT_ALGORITHM,
    access_ttl=(
        timedelta(minutes=settings.ACCESS_TTL_MINUTES)
        if settings.ACCESS_TTL_MINUTES
        else None
    ),
)
