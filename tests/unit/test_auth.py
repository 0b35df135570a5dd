class TestPasswordHashing:

    def test_hash_and_verify(self):
        from auth import hash_password, verify_password

        digest = hash_password("secret")
        assert digest != "secret"
        assert digest.startswith("$argon2")
        assert verify_password("secret", digest) is True
        assert verify_password("wrong", digest) is False

    def test_hash_is_salted(self):
        from auth import hash_password

        assert hash_password("secret") != hash_password("secret")


class TestSignedCookies:

    def test_round_trip(self):
        from auth import dump_cookie, load_cookie

        raw = dump_cookie(42, "userId")
        assert raw != "42"
        assert load_cookie(raw, "userId") == 42

    def test_tampered_cookie_is_rejected(self):
        from auth import dump_cookie, load_cookie

        raw = dump_cookie(42, "userId")
        assert load_cookie(raw[:-2] + "xx", "userId") is None
        assert load_cookie("42", "userId") is None
        assert load_cookie(None, "userId") is None

    def test_salt_separates_cookies(self):
        """Значение flash нельзя подставить в userId"""
        from auth import dump_cookie, load_cookie

        raw = dump_cookie(1, "flash")
        assert load_cookie(raw, "userId") is None
