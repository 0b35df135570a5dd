import logging

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from api.endpoints import (
    root_router,
    users_router,
    session_router,
    statuses_router,
    labels_router,
    tasks_router,
)
from auth import LoginRequired
from config import PUBLIC_DIR, get_settings
from database import engine, Base
from error_reporting import build_error_reporter, unhandled_exception_handler
from logging_setup import setup_logging
from middleware import MethodOverrideMiddleware
from views import redirect
import models  # noqa: F401  регистрирует таблицы в Base.metadata

settings = get_settings()
setup_logging(level=settings.log_level, log_dir=settings.log_dir)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="1.0.0", docs_url=None, redoc_url=None)
app.state.error_reporter = build_error_reporter(settings)

app.add_middleware(MethodOverrideMiddleware)
app.mount("/public", StaticFiles(directory=str(PUBLIC_DIR)), name="public")

app.include_router(root_router)
app.include_router(users_router)
app.include_router(session_router)
app.include_router(statuses_router)
app.include_router(labels_router)
app.include_router(tasks_router)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return redirect("/session/new", "flash.authError", "danger")


app.add_exception_handler(Exception, unhandled_exception_handler)


@app.on_event("startup")
def create_tables():
    """Создаёт таблицы при запуске, если их ещё нет"""
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.app_name} started ({settings.env})")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=not settings.is_production)

#Запуск через консоль: uvicorn main:app --reload
