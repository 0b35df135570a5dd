import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from auth import hash_password, verify_password
from models.user import UserDB
from models.task import TaskDB
from schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[UserDB]:
    return db.query(UserDB).filter(UserDB.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[UserDB]:
    return db.query(UserDB).filter(UserDB.email == email.strip().lower()).first()


def get_users(db: Session) -> List[UserDB]:
    return db.query(UserDB).order_by(UserDB.id).all()


def create_user(db: Session, user: UserCreate) -> Optional[UserDB]:
    if get_user_by_email(db, user.email):
        return None

    db_user = UserDB(
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        password_digest=hash_password(user.password),
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Email {user.email} already registered")
        return None
    db.refresh(db_user)
    logger.info(f"Created user {db_user.id} ({db_user.email})")
    return db_user


def update_user(db: Session, user_id: int, user_update: UserUpdate) -> Optional[UserDB]:
    db_user = get_user(db, user_id)
    if not db_user:
        return None

    update_data = user_update.model_dump(exclude_unset=True)

    if update_data.get('email') and update_data['email'] != db_user.email:
        if get_user_by_email(db, update_data['email']):
            return None

    password = update_data.pop('password', None)
    for field, value in update_data.items():
        if value is not None:
            setattr(db_user, field, value)
    if password:
        db_user.password_digest = hash_password(password)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, user_id: int) -> bool:
    """Удалить пользователя; False, если его нет или он автор задач"""
    db_user = get_user(db, user_id)
    if not db_user:
        return False

    if db.query(TaskDB).filter(TaskDB.creator_id == user_id).count() > 0:
        logger.info(f"User {user_id} is a task creator, deletion blocked")
        return False

    db.delete(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"User {user_id} is still referenced, deletion blocked")
        return False
    logger.info(f"Deleted user {user_id}")
    return True


def authenticate_user(db: Session, email: str, password: str) -> Optional[UserDB]:
    db_user = get_user_by_email(db, email)
    if not db_user or not verify_password(password, db_user.password_digest):
        logger.info(f"Failed login attempt for {email}")
        return None
    return db_user
