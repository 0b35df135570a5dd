import logging
from urllib.parse import parse_qs

logger = logging.getLogger(__name__)

METHOD_FIELD = "_method"
OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}
FORM_CONTENT_TYPE = b"application/x-www-form-urlencoded"


class MethodOverrideMiddleware:
    """
    Позволяет HTML-формам отправлять PATCH/PUT/DELETE через POST.

    Метод берётся из поля _method в теле urlencoded-формы или из query string.
    Тело запроса читается целиком и затем отдаётся приложению заново.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        override = self._from_query(scope)
        body = b""
        content_type = dict(scope.get("headers") or []).get(b"content-type", b"")

        if override is None and content_type.startswith(FORM_CONTENT_TYPE):
            body, more_body = b"", True
            while more_body:
                message = await receive()
                body += message.get("body", b"")
                more_body = message.get("more_body", False)
            override = self._from_body(body)

            replayed = False

            async def replay():
                nonlocal replayed
                if not replayed:
                    replayed = True
                    return {"type": "http.request", "body": body, "more_body": False}
                return await receive()

            receive_next = replay
        else:
            receive_next = receive

        if override is not None:
            logger.debug(f"Method override: POST -> {override} {scope['path']}")
            scope = dict(scope, method=override)

        await self.app(scope, receive_next, send)

    @staticmethod
    def _normalize(value):
        if value is None:
            return None
        value = value.strip().upper()
        return value if value in OVERRIDABLE_METHODS else None

    def _from_query(self, scope):
        params = parse_qs(scope.get("query_string", b"").decode("latin-1"))
        values = params.get(METHOD_FIELD)
        return self._normalize(values[0]) if values else None

    def _from_body(self, body: bytes):
        params = parse_qs(body.decode("utf-8", errors="replace"))
        values = params.get(METHOD_FIELD)
        return self._normalize(values[0]) if values else None
