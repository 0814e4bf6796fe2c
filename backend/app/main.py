# cnrxad - 2026

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.itag import router as itag_router
from app.core.config import get_settings
from app.core.logging import setup_logging

import logging
import uvicorn

load_dotenv()

logger = logging.getLogger(__name__)


# -------------------------------
# APP
# -------------------------------
def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(itag_router, prefix="/api")

    @app.get("/api")
    def root_api():
        return {"message": "itag API funcionando"}

    return app


app = create_app()


# -------------------------------
# SERVER
# -------------------------------
def start_server():
    settings = get_settings()

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    server = uvicorn.Server(config)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    start_server()
