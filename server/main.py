# server/main.py

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from server.api import auth, thoughts
from server.config import Settings, load_settings
from server.core.errors import register_exception_handlers
from server.core.logger import setup_logger
from server.database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger(__name__)

ROUTES = {
    "/register": "POST request where you register your profile",
    "/login": "POST request to log in and receive your access token",
    "/thoughts": "GET the 20 latest thoughts (requires Authorization) and POST a new thought",
    "/thoughts/{id}/like": "POST request to like a thought (requires Authorization)",
}


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logger(settings.LOG_LEVEL)

    engine = create_db_engine(settings.DATABASE_URL)
    init_db(engine)

    app = FastAPI(title="Happy Thoughts API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(thoughts.router)

    @app.get("/")
    def index():
        return {
            "message": "Backend for login to our project page",
            "routes": [ROUTES],
        }

    logger.info("API ready, store at %s", engine.url.render_as_string(hide_password=True))
    return app
