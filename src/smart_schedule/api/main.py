"""FastAPI application.

Run locally with ``uvicorn smart_schedule.api.main:app --reload``.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smart_schedule import __version__
from smart_schedule.api.events import router as events_router
from smart_schedule.config import get_settings
from smart_schedule.log import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    app = FastAPI(title="Smart Schedule", version=__version__, debug=settings.debug)

    # The upload UI runs on a separate dev server.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(events_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
