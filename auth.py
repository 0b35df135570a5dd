import logging
from typing import Any, Optional

from fastapi import Depends, Request
from itsdangerous import BadSignature, URLSafeSerializer
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from starlette.responses import Response

from config import get_settings
from database import get_db
from models.user import UserDB

logger = logging.getLogger(__name__)

SESSION_COOKIE = "userId"

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class LoginRequired(Exception):
    """Маршрут доступен только вошедшему пользователю"""


def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def _serializer(salt: str) -> URLSafeSerializer:
    return URLSafeSerializer(get_settings().secret_key, salt=salt)


def dump_cookie(value: Any, salt: str) -> str:
    return _serializer(salt).dumps(value)


def load_cookie(raw: Optional[str], salt: str) -> Optional[Any]:
    """Прочитать подписанную cookie; подделанное значение считается отсутствующим"""
    if not raw:
        return None
    try:
        return _serializer(salt).loads(raw)
    except BadSignature:
        logger.warning(f"Rejected cookie with bad signature (salt={salt})")
        return None


def log_in(response: Response, user: UserDB) -> None:
    response.set_cookie(SESSION_COOKIE, dump_cookie(user.id, SESSION_COOKIE), httponly=True, samesite="lax")


def log_out(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE)


def current_user_auth(request: Request, db: Session = Depends(get_db)) -> Optional[UserDB]:
    """Текущий пользователь по cookie userId или None"""
    user_id = load_cookie(request.cookies.get(SESSION_COOKIE), SESSION_COOKIE)
    if not isinstance(user_id, int):
        return None
    user = db.query(UserDB).filter(UserDB.id == user_id).first()
    request.state.current_user = user
    return user


def require_login(current_user: Optional[UserDB] = Depends(current_user_auth)) -> UserDB:
    if current_user is None:
        raise LoginRequired()
    return current_user
