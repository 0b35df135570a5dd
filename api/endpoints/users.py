import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from auth import current_user_auth, log_out, require_login
from database import get_db
from models.user import UserDB
from schemas.user import UserCreate, UserUpdate
from views import not_found, redirect, render
import crud.user as crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(current_user_auth)])


@router.get("")
def read_users(request: Request, db: Session = Depends(get_db)):
    """Список пользователей"""
    return render(request, "users/index.html", {"users": crud.get_users(db)})


@router.get("/new")
def new_user(request: Request):
    return render(request, "users/new.html")


@router.post("")
def create_user(
        request: Request,
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        password: str = Form(""),
        db: Session = Depends(get_db)
):
    """Регистрация нового пользователя"""
    try:
        user = UserCreate(first_name=first_name, last_name=last_name, email=email, password=password)
    except ValidationError as e:
        logger.info(f"Invalid registration form: {e.error_count()} errors")
        return redirect("/users/new", "flash.users.create.error", "danger")

    if crud.create_user(db, user) is None:
        return redirect("/users/new", "flash.users.create.emailTaken", "danger")
    return redirect("/", "flash.users.create.success")


def _own_account(user_id: int, current_user: UserDB) -> bool:
    return current_user.id == user_id


@router.get("/{user_id}/edit")
def edit_user(
        request: Request,
        user_id: int,
        db: Session = Depends(get_db),
        current_user: UserDB = Depends(require_login)
):
    db_user = crud.get_user(db, user_id)
    if db_user is None:
        return not_found(request)
    if not _own_account(user_id, current_user):
        return redirect("/users", "flash.users.edit.forbidden", "danger")
    return render(request, "users/edit.html", {"user": db_user})


@router.patch("/{user_id}")
def update_user(
        request: Request,
        user_id: int,
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        password: Optional[str] = Form(None),
        db: Session = Depends(get_db),
        current_user: UserDB = Depends(require_login)
):
    """Обновить данные пользователя"""
    if crud.get_user(db, user_id) is None:
        return not_found(request)
    if not _own_account(user_id, current_user):
        return redirect("/users", "flash.users.edit.forbidden", "danger")

    try:
        user_update = UserUpdate(first_name=first_name, last_name=last_name, email=email, password=password)
    except ValidationError:
        return redirect(f"/users/{user_id}/edit", "flash.users.update.error", "danger")

    if crud.update_user(db, user_id, user_update) is None:
        return redirect(f"/users/{user_id}/edit", "flash.users.update.error", "danger")
    return redirect("/users", "flash.users.update.success")


@router.delete("/{user_id}")
def delete_user(
        request: Request,
        user_id: int,
        db: Session = Depends(get_db),
        current_user: UserDB = Depends(require_login)
):
    """Удалить пользователя (только себя и только без созданных задач)"""
    if crud.get_user(db, user_id) is None:
        return not_found(request)
    if not _own_account(user_id, current_user):
        return redirect("/users", "flash.users.edit.forbidden", "danger")

    if not crud.delete_user(db, user_id):
        return redirect("/users", "flash.users.delete.error", "danger")

    response = redirect("/users", "flash.users.delete.success")
    log_out(response)
    return response
