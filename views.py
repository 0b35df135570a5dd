from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from auth import dump_cookie, load_cookie
from config import TEMPLATES_DIR, get_settings
from i18n import LOCALE_COOKIE, LOCALE_PARAM, get_translator, resolve_locale

FLASH_COOKIE = "flash"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def set_flash(response, message: str, type_: str = "success") -> None:
    """Одноразовое уведомление для следующей страницы: message это ключ перевода"""
    response.set_cookie(FLASH_COOKIE, dump_cookie({"type": type_, "message": message}, FLASH_COOKIE),
                        httponly=True, samesite="lax")


def pop_flash(request: Request) -> Optional[Dict[str, str]]:
    flash = load_cookie(request.cookies.get(FLASH_COOKIE), FLASH_COOKIE)
    if not isinstance(flash, dict) or "message" not in flash:
        return None
    return {"type": flash.get("type", "info"), "message": flash["message"]}


def render(
        request: Request,
        name: str,
        context: Optional[Dict[str, Any]] = None,
        status_code: int = 200,
) -> HTMLResponse:
    """Отрисовать шаблон с переводчиком, текущим пользователем и flash-сообщением"""
    locale = resolve_locale(request)
    flash = pop_flash(request)
    full_context = {
        "t": get_translator(locale),
        "lng": locale,
        "app_name": get_settings().app_name,
        "current_user": getattr(request.state, "current_user", None),
        "flash": flash,
    }
    if context:
        full_context.update(context)

    response = templates.TemplateResponse(request, name, full_context, status_code=status_code)
    if FLASH_COOKIE in request.cookies:
        response.delete_cookie(FLASH_COOKIE)
    if request.query_params.get(LOCALE_PARAM) == locale:
        response.set_cookie(LOCALE_COOKIE, locale, samesite="lax")
    return response


def redirect(url: str, flash: Optional[str] = None, flash_type: str = "success") -> RedirectResponse:
    response = RedirectResponse(url, status_code=302)
    if flash:
        set_flash(response, flash, flash_type)
    return response


def not_found(request: Request) -> HTMLResponse:
    return render(request, "errors/404.html", status_code=404)
