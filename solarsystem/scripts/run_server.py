"""
Script de serveur de développement.

Lance l'application FastAPI avec uvicorn, sur l'hôte et le port configurés (APP_HOST/APP_PORT).
"""

import uvicorn

from solarsystem.core.container import container


def main():
    """Point d'entrée principal du serveur."""
    settings = container.settings
    uvicorn.run(
        "solarsystem.app.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
