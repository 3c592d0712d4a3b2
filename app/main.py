import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.database import engine, Base
from app.core.errors import TodoError, StoreError
from app.core.logging_setup import setup_logging
from app.models import category, task  # noqa: F401  (enregistre les tables)
from app.routers import health, tasks, categories

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Todo List API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router)
app.include_router(categories.router)


@app.exception_handler(TodoError)
async def todo_error_handler(request: Request, exc: TodoError):
    if isinstance(exc, StoreError):
        # message générique, le détail est déjà loggé
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal server error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Unhandled database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
