import logging
from functools import lru_cache

from sqlalchemy.exc import IntegrityError

from app.core.errors import DuplicateEmail, InvalidCredentials
from app.db.models.users import User
from app.db.repositories.users import UserRepository
from app.security.password import verify_password, hash_password
from app.security.tokens import JWTSettings, create_access_token
from app.features.authentication.schemas import SignUpIn, SignInIn

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    # Un email inconnu coûte autant qu'un mauvais mot de passe
    return hash_password("dummy-password", rounds=rounds)


class AuthService:
    """
    Service d'authentification : orchestre le repository des users, le hachage et les tokens.
    Ne contient pas d'accès SQL direct et lève des erreurs métier (app.core.errors).
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        jwt_settings: JWTSettings,
        bcrypt_rounds: int = 12,
    ):
        self.user_repo = user_repo
        self.jwt = jwt_settings
        self.bcrypt_rounds = bcrypt_rounds

    # ---------- Sign up ----------
    def sign_up(self, payload: SignUpIn) -> User:
        try:
            user = self.user_repo.create(
                email=payload.email,
                name=payload.name,
                hashed_password=hash_password(payload.password, rounds=self.bcrypt_rounds),
            )
        except IntegrityError:
            logger.info("Sign-up rejected: email already registered")
            raise DuplicateEmail()
        logger.info("User %s signed up", user.id)
        return user

    # ---------- Sign in ----------
    def sign_in(self, payload: SignInIn) -> str:
        user = self.user_repo.get_by_email(payload.email)
        if user is None:
            verify_password(payload.password, _dummy_hash(self.bcrypt_rounds))
            matched = False
        else:
            matched = verify_password(payload.password, user.hashed_password)

        if not matched:
            # Ne pas révéler si l'utilisateur existe
            logger.info("Sign-in rejected")
            raise InvalidCredentials()

        return create_access_token(user_id=user.id, settings=self.jwt)
