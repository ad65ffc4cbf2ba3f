"""Entry point for the User CRUD API.

Starts the FastAPI application under uvicorn on ``HOST``/``PORT``
(defaults ``0.0.0.0`` and ``3000``).  With ``APP_ENV=test`` the script
exits without starting the listener.

Usage:
    python run.py
"""
from user_crud_api.app.server import main


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
