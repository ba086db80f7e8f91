"""
➡️ But : Définir les erreurs métier de l'application.

Les services lèvent ces exceptions (jamais de HTTPException dans la logique métier) ;
app.main enregistre un handler qui les convertit en réponse JSON {"message": ...}
avec le bon code HTTP.
"""


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid Data format"


class DuplicateEmail(AppError):
    status_code = 400
    default_message = "Email already exists"


class Unauthenticated(AppError):
    """Token absent."""
    status_code = 401
    default_message = "Token missing"


class InvalidToken(Unauthenticated):
    """Token présent mais illisible, mal signé ou expiré."""
    status_code = 403
    default_message = "Invalid or expired token"


class InvalidCredentials(AppError):
    # Même réponse pour "utilisateur inconnu" et "mauvais mot de passe"
    status_code = 403
    default_message = "Incorrect Credentials"


class NotFound(AppError):
    # Même réponse pour "n'existe pas" et "appartient à quelqu'un d'autre"
    status_code = 404
    default_message = "Todo not found"


class InternalFailure(AppError):
    status_code = 500
    default_message = "Internal Server Error"
