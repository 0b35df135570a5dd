from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from auth import current_user_auth, log_in, log_out
from database import get_db
from schemas.user import UserCredentials
from views import redirect, render
import crud.user as crud

router = APIRouter(prefix="/session", tags=["session"], dependencies=[Depends(current_user_auth)])


@router.get("/new")
def new_session(request: Request):
    return render(request, "session/new.html")


@router.post("")
def create_session(
        request: Request,
        email: str = Form(""),
        password: str = Form(""),
        db: Session = Depends(get_db)
):
    """Вход по email и паролю"""
    credentials = UserCredentials(email=email, password=password)
    user = crud.authenticate_user(db, email=credentials.email, password=credentials.password)
    if user is None:
        return redirect("/session/new", "flash.session.create.error", "danger")

    response = redirect("/", "flash.session.create.success")
    log_in(response, user)
    return response


@router.delete("")
def delete_session(request: Request):
    """Выход"""
    response = redirect("/", "flash.session.delete.success")
    log_out(response)
    return response
