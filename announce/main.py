"""Web entrypoint and composition."""

from fastapi import FastAPI

from announce.config import get_settings
from announce.errors import register_exception_handlers
from announce.logging import configure_logging
from announce.middleware import install_middlewares
from announce.routes import home
from announce.routes import infra as infra_routes


def create_app(*, force_debug: bool | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    force_debug:
        - None: use settings.debug.
        - True: enable debug mode.
        - False: force non-debug mode (for 500.html testing).
    """
    # Clear cached settings to ensure fresh config on app creation (tests with monkeypatch)
    get_settings.cache_clear()
    settings = get_settings()

    debug = settings.debug if force_debug is None else bool(force_debug)
    configure_logging(debug=debug)
    app = FastAPI(title=settings.app_name, debug=debug)

    install_middlewares(app)

    app.include_router(home.router)
    app.include_router(infra_routes.router)

    register_exception_handlers(app)

    return app


app = create_app()
