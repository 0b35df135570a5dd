from fastapi import APIRouter, Depends, Form, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from auth import current_user_auth, require_login
from database import get_db
from schemas.label import LabelCreate, LabelUpdate
from views import not_found, redirect, render
import crud.label as crud

router = APIRouter(
    prefix="/labels",
    tags=["labels"],
    dependencies=[Depends(current_user_auth), Depends(require_login)],
)


@router.get("")
def read_labels(request: Request, db: Session = Depends(get_db)):
    return render(request, "labels/index.html", {"labels": crud.get_labels(db)})


@router.get("/new")
def new_label(request: Request):
    return render(request, "labels/new.html")


@router.post("")
def create_label(request: Request, name: str = Form(""), db: Session = Depends(get_db)):
    try:
        label = LabelCreate(name=name)
    except ValidationError:
        return redirect("/labels/new", "flash.labels.create.error", "danger")

    if crud.create_label(db, label) is None:
        return redirect("/labels/new", "flash.labels.create.error", "danger")
    return redirect("/labels", "flash.labels.create.success")


@router.get("/{label_id}/edit")
def edit_label(request: Request, label_id: int, db: Session = Depends(get_db)):
    db_label = crud.get_label(db, label_id)
    if db_label is None:
        return not_found(request)
    return render(request, "labels/edit.html", {"label": db_label})


@router.patch("/{label_id}")
def update_label(request: Request, label_id: int, name: str = Form(""), db: Session = Depends(get_db)):
    if crud.get_label(db, label_id) is None:
        return not_found(request)
    try:
        label_update = LabelUpdate(name=name)
    except ValidationError:
        return redirect(f"/labels/{label_id}/edit", "flash.labels.update.error", "danger")

    if crud.update_label(db, label_id, label_update) is None:
        return redirect(f"/labels/{label_id}/edit", "flash.labels.update.error", "danger")
    return redirect("/labels", "flash.labels.update.success")


@router.delete("/{label_id}")
def delete_label(request: Request, label_id: int, db: Session = Depends(get_db)):
    """Удалить метку, если она не привязана к задачам"""
    if crud.get_label(db, label_id) is None:
        return not_found(request)
    if not crud.delete_label(db, label_id):
        return redirect("/labels", "flash.labels.delete.error", "danger")
    return redirect("/labels", "flash.labels.delete.success")
