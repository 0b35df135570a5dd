"""
Отправка необработанных исключений во внешний сервис мониторинга.

Репортёр выбирается настройками: при заданном ERROR_REPORTER_URL события
отправляются HTTP POST'ом, иначе только пишутся в лог.
"""

import datetime
import logging
import traceback
from typing import Optional, Protocol

import httpx
from fastapi import Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from config import Settings
from i18n import resolve_locale, translate

logger = logging.getLogger(__name__)


class ErrorReporter(Protocol):
    def report(self, exc: BaseException, request: Optional[Request] = None) -> None: ...


def build_event(exc: BaseException, request: Optional[Request] = None, environment: str = "") -> dict:
    event = {
        "level": "error",
        "environment": environment,
        "timestamp": datetime.datetime.utcnow().isoformat(),
        "exception": {
            "class": type(exc).__name__,
            "message": str(exc),
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    }
    if request is not None:
        event["request"] = {
            "method": request.method,
            "url": str(request.url),
            "user_agent": request.headers.get("user-agent"),
        }
    return event


class LoggingErrorReporter:
    """Репортёр по умолчанию: только лог"""

    def report(self, exc: BaseException, request: Optional[Request] = None) -> None:
        where = f" during {request.method} {request.url.path}" if request is not None else ""
        logger.error(f"Unhandled {type(exc).__name__}{where}: {exc}")


class HttpErrorReporter:
    """Отправляет JSON-событие на внешний коллектор ошибок"""

    def __init__(self, url: str, timeout: float = 5.0, environment: str = "", client: Optional[httpx.Client] = None):
        self.url = url
        self.environment = environment
        self.client = client or httpx.Client(timeout=timeout)

    def report(self, exc: BaseException, request: Optional[Request] = None) -> None:
        event = build_event(exc, request, environment=self.environment)
        try:
            response = self.client.post(self.url, json=event)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to deliver error report to {self.url}: {e}")


def build_error_reporter(settings: Settings) -> ErrorReporter:
    if settings.error_reporter_url:
        logger.info(f"Error reports will be sent to {settings.error_reporter_url}")
        return HttpErrorReporter(
            settings.error_reporter_url,
            timeout=settings.error_reporter_timeout,
            environment=settings.env,
        )
    return LoggingErrorReporter()


async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    """
    Глобальный обработчик: лог, отправка во внешний сервис, общий ответ 500.

    Репортёры синхронные, поэтому отправка идёт в пуле потоков.
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    reporter = getattr(request.app.state, "error_reporter", None)
    if reporter is not None:
        await run_in_threadpool(reporter.report, exc, request)
    message = translate(resolve_locale(request), "views.errors.serverError")
    return HTMLResponse(f"<h1>500</h1><p>{message}</p>", status_code=500)
