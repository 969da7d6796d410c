# server/main.py

import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from api import auth, user, post
from config import Settings, configure_logging, get_settings
from core.handlers import register_exception_handlers
from core.media import MediaStore
from database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_db_engine(settings.database_url)
    init_db(engine)

    media_store = MediaStore(settings.media_root, settings.media_url)
    media_store.ensure_root()

    app = FastAPI(title="Social Photo API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.media_store = media_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api")
    app.include_router(user.router, prefix="/api")
    app.include_router(post.router, prefix="/api")
    app.mount(settings.media_url, StaticFiles(directory=settings.media_root), name="media")

    @app.get("/")
    def read_root():
        return {"message": "Social Photo API is running"}

    logger.info("App ready (environment=%s)", settings.environment)
    return app


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(create_app(), host="0.0.0.0", port=port)
