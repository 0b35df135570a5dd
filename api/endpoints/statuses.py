from fastapi import APIRouter, Depends, Form, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from auth import current_user_auth, require_login
from database import get_db
from schemas.status import StatusCreate, StatusUpdate
from views import not_found, redirect, render
import crud.status as crud

router = APIRouter(
    prefix="/statuses",
    tags=["statuses"],
    dependencies=[Depends(current_user_auth), Depends(require_login)],
)


@router.get("")
def read_statuses(request: Request, db: Session = Depends(get_db)):
    return render(request, "statuses/index.html", {"statuses": crud.get_statuses(db)})


@router.get("/new")
def new_status(request: Request):
    return render(request, "statuses/new.html")


@router.post("")
def create_status(request: Request, name: str = Form(""), db: Session = Depends(get_db)):
    """Создать статус"""
    try:
        status = StatusCreate(name=name)
    except ValidationError:
        return redirect("/statuses/new", "flash.statuses.create.error", "danger")

    if crud.create_status(db, status) is None:
        return redirect("/statuses/new", "flash.statuses.create.error", "danger")
    return redirect("/statuses", "flash.statuses.create.success")


@router.get("/{status_id}/edit")
def edit_status(request: Request, status_id: int, db: Session = Depends(get_db)):
    db_status = crud.get_status(db, status_id)
    if db_status is None:
        return not_found(request)
    return render(request, "statuses/edit.html", {"status": db_status})


@router.patch("/{status_id}")
def update_status(request: Request, status_id: int, name: str = Form(""), db: Session = Depends(get_db)):
    """Переименовать статус"""
    if crud.get_status(db, status_id) is None:
        return not_found(request)
    try:
        status_update = StatusUpdate(name=name)
    except ValidationError:
        return redirect(f"/statuses/{status_id}/edit", "flash.statuses.update.error", "danger")

    if crud.update_status(db, status_id, status_update) is None:
        return redirect(f"/statuses/{status_id}/edit", "flash.statuses.update.error", "danger")
    return redirect("/statuses", "flash.statuses.update.success")


@router.delete("/{status_id}")
def delete_status(request: Request, status_id: int, db: Session = Depends(get_db)):
    """Удалить статус, если он не используется задачами"""
    if crud.get_status(db, status_id) is None:
        return not_found(request)
    if not crud.delete_status(db, status_id):
        return redirect("/statuses", "flash.statuses.delete.error", "danger")
    return redirect("/statuses", "flash.statuses.delete.success")
