"""ML Course Platform - FastAPI app entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from mlcourse.core.config import BASE_DIR, get_settings
from mlcourse.core.errors import ApiError, api_error_handler, validation_error_handler
from mlcourse.core.logconfig import configure_logging
from mlcourse.db.base import Base
from mlcourse.db.session import engine
from mlcourse.routers import auth, users, web

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)

    # create tables (async); alembic owns schema changes after this
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield


app = FastAPI(
    title=settings.app_name,
    description="Machine learning course with quizzes, progress tracking and a certificate",
    debug=settings.debug,
    lifespan=lifespan,
)

# Mount static files at /static
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.include_router(web.router)
app.include_router(auth.router)
app.include_router(users.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
