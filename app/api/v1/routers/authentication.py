from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_auth_service
from app.features.authentication.services import AuthService
from app.features.authentication.schemas import (
    SignUpIn,
    SignInIn,
    MessageOut,
    TokenOut,
)

router = APIRouter(tags=["auth"])

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/signup",
    summary="Créer un compte",
    description="Aucun token n'est émis : il faut ensuite se connecter via /signin.",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageOut,
    responses={
        400: {"description": "Données invalides ou email déjà utilisé"},
        500: {"description": "Erreur interne"},
    },
)
def sign_up(payload: SignUpIn, svc: AuthService = Depends(get_auth_service)):
    svc.sign_up(payload)
    return MessageOut(message="You are Signed Up")

# -----------------------------
# Sign-in
# -----------------------------
@router.post(
    "/signin",
    summary="Se connecter",
    description="Retourne un token à passer dans le header `token` des routes protégées.",
    response_model=TokenOut,
    responses={403: {"description": "Identifiants incorrects"}},
)
def sign_in(payload: SignInIn, svc: AuthService = Depends(get_auth_service)):
    return TokenOut(token=svc.sign_in(payload))
