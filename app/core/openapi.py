"""
Schéma OpenAPI enrichi : rappelle dans Swagger le header d'authentification,
le fuseau d'affichage des dates et le format des erreurs.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app, *, token_header: str = "token", display_timezone: str = "UTC"):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de todos par utilisateur.\n\n"
            "### Conventions\n"
            f"- Authentification : header `{token_header}` avec le token renvoyé par `/signin`.\n"
            "- Un todo d'un autre utilisateur répond 404, comme un todo inexistant.\n"
            f"- Les dates sont renvoyées dans le fuseau `{display_timezone}` (ISO 8601).\n"
            "- Les erreurs ont la forme `{\"message\": ...}`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
