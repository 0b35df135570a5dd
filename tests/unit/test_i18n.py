from starlette.requests import Request


def _request(query_string: bytes = b"", cookie: str = "") -> Request:
    headers = [(b"cookie", cookie.encode())] if cookie else []
    return Request({"type": "http", "method": "GET", "path": "/", "query_string": query_string, "headers": headers})


class TestTranslate:

    def test_known_key(self):
        from i18n import translate

        assert translate("en", "flash.statuses.create.success") == "Status created successfully"
        assert translate("ru", "flash.statuses.create.success") == "Статус успешно создан"

    def test_unknown_locale_falls_back_to_default(self):
        from i18n import translate

        assert translate("de", "layouts.application.tasks") == "Tasks"

    def test_unknown_key_returns_key(self):
        from i18n import get_translator

        t = get_translator("en")
        assert t("no.such.key") == "no.such.key"
        assert t("views") == "views"

    def test_locales_have_the_same_keys(self):
        from locales import LOCALES

        def keys(tree, prefix=""):
            for key, value in tree.items():
                path = f"{prefix}{key}"
                if isinstance(value, dict):
                    yield from keys(value, path + ".")
                else:
                    yield path

        assert set(keys(LOCALES["en"])) == set(keys(LOCALES["ru"]))


class TestResolveLocale:

    def test_query_param_wins(self):
        from i18n import resolve_locale

        assert resolve_locale(_request(b"lng=ru", cookie="lng=en")) == "ru"

    def test_cookie_then_default(self):
        from i18n import resolve_locale

        assert resolve_locale(_request(cookie="lng=ru")) == "ru"
        assert resolve_locale(_request()) == "en"
        assert resolve_locale(_request(b"lng=xx")) == "en"
