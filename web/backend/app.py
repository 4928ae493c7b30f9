import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from goalboard.logger import get_logger
from web.backend.routers import goals

logger = get_logger("api")


def create_app() -> FastAPI:
    app = FastAPI(title="Goalboard API", version="1.0")

    raw_origins = os.getenv("GOALBOARD_ALLOWED_ORIGINS", "*")
    allow_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    allow_credentials = "*" not in allow_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "Goalboard"}

    app.include_router(goals.router, prefix="/api/v1/goals", tags=["goals"])

    @app.get("/")
    async def root():
        return {
            "message": "Goalboard API is running",
            "docs": "/docs",
            "health": "/health",
        }

    logger.info("Goalboard API app created")
    return app


app = create_app()
