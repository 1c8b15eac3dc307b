# bobo_site/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from bobo_site.api.errors import register_exception_handlers
from bobo_site.api.v1.api import api_router
from bobo_site.core.config import settings
from bobo_site.core.logger import setup_logging
from bobo_site.db.init_db import init_db, seed_initial_data
from bobo_site.db.session import SessionLocal, engine
from bobo_site.middleware.request_logging import RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    logger.info(f"Database: {settings.database_url} | uploads: {settings.uploads_dir}")

    settings.posters_dir.mkdir(parents=True, exist_ok=True)
    init_db(engine)

    if settings.seed_on_startup:
        db = SessionLocal()
        try:
            seed_initial_data(db)
        finally:
            db.close()

    yield

    logger.info("Shutting down")


def create_application() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- STATIC FILES ----------
    # Uploaded posters: uploads/posters/<name> is served as /uploads/posters/<name>
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.uploads_dir, check_dir=False),
        name="uploads",
    )

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bobo_site.main:app", host="0.0.0.0", port=3000, reload=settings.debug)
