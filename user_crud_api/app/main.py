"""
Main entrypoint for the User CRUD API.

This module assembles the FastAPI application: it sets up logging,
wires the user store and id generator into ``app.state``, installs
the error handlers and includes the routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn user_crud_api.app.main:app --port 3000

or through ``run.py``, which honours the ``APP_ENV`` switch.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.errors import setup_error_handling
from .core.logging_config import setup_logging
from .services.id_generator import IdGenerator
from .services.user_service import UserService
from .services.user_store import UserStore


def create_app(
    store: Optional[UserStore] = None,
    id_generator: Optional[IdGenerator] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Storage shared by all requests of this app.  A fresh, empty
        store is created when omitted.
    id_generator : Optional[IdGenerator]
        Source of ids for new users.  Defaults to random UUIDs.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first, so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.user_service = UserService(
        store if store is not None else UserStore(),
        id_generator,
    )

    setup_error_handling(app)
    app.include_router(router)

    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
