"""
Point d'entrée de l'API todos.

Assemble logging, CORS, middleware (chronométrage + timeout), gestion des erreurs,
routers auth et todos, et crée les tables au démarrage.

Lancement : uvicorn app.main:app --reload (ou python -m app.main).
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db
from app.api.handlers import register_exception_handlers
from app.api.middleware import register_middleware

from app.api.v1.routers import authentication, todos

import uvicorn

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    openapi_tags=[
        {"name": "auth", "description": "Inscription et connexion"},
        {"name": "todos", "description": "Todos de l'utilisateur connecté"},
    ],
)

register_middleware(app, timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS)

# CORS ajouté en dernier : couche la plus externe, y compris pour les 504
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)
register_exception_handlers(app)

# Routers
app.include_router(authentication.router, prefix=settings.API_PREFIX)
app.include_router(todos.router, prefix=settings.API_PREFIX)

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(
    app,
    token_header=settings.AUTH_TOKEN_HEADER,
    display_timezone=settings.DISPLAY_TIMEZONE,
)

# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
