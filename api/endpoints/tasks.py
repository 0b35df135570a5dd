import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from auth import current_user_auth, require_login
from database import get_db
from models.user import UserDB
from schemas.task import TaskCreate, TaskUpdate, TaskFilter
from views import not_found, redirect, render
import crud.task as task_crud
import crud.user as user_crud
import crud.status as status_crud
import crud.label as label_crud

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(current_user_auth), Depends(require_login)],
)


def _form_choices(db: Session) -> dict:
    return {
        "statuses": status_crud.get_statuses(db),
        "users": user_crud.get_users(db),
        "labels": label_crud.get_labels(db),
    }


@router.get("")
def read_tasks(
        request: Request,
        status_id: Optional[str] = Query(None, alias="statusId"),
        executor_id: Optional[str] = Query(None, alias="executorId"),
        label_id: Optional[str] = Query(None, alias="labelId"),
        has_label: Optional[str] = Query(None, alias="hasLabel"),
        is_creator_user: Optional[str] = Query(None, alias="isCreatorUser"),
        db: Session = Depends(get_db),
        current_user: UserDB = Depends(require_login)
):
    """Список задач с фильтрацией"""
    try:
        filters = TaskFilter(
            status_id=status_id,
            executor_id=executor_id,
            label_id=label_id,
            has_label=has_label,
            is_creator_user=is_creator_user,
        )
    except ValidationError:
        logger.info(f"Ignoring invalid task filters: {request.url.query}")
        return redirect("/tasks")

    if filters.is_creator_user:
        filters.creator_id = current_user.id

    return render(request, "tasks/index.html", {
        "tasks": task_crud.get_tasks(db, filters),
        "filters": filters,
        **_form_choices(db),
    })


@router.get("/new")
def new_task(request: Request, db: Session = Depends(get_db)):
    return render(request, "tasks/new.html", _form_choices(db))


@router.post("")
def create_task(
        request: Request,
        name: str = Form(""),
        description: Optional[str] = Form(None),
        status_id: Optional[str] = Form(None),
        executor_id: Optional[str] = Form(None),
        label_ids: List[str] = Form([]),
        db: Session = Depends(get_db),
        current_user: UserDB = Depends(require_login)
):
    """Создать задачу от имени текущего пользователя"""
    try:
        task = TaskCreate(
            name=name,
            description=description,
            status_id=status_id,
            executor_id=executor_id,
            label_ids=label_ids,
            creator_id=current_user.id,
        )
    except ValidationError:
        return redirect("/tasks/new", "flash.tasks.create.error", "danger")

    if task_crud.create_task(db, task) is None:
        return redirect("/tasks/new", "flash.tasks.create.error", "danger")
    return redirect("/tasks", "flash.tasks.create.success")


@router.get("/{task_id}")
def read_task(request: Request, task_id: int, db: Session = Depends(get_db)):
    db_task = task_crud.get_task(db, task_id)
    if db_task is None:
        return not_found(request)
    return render(request, "tasks/show.html", {"task": db_task})


@router.get("/{task_id}/edit")
def edit_task(request: Request, task_id: int, db: Session = Depends(get_db)):
    db_task = task_crud.get_task(db, task_id)
    if db_task is None:
        return not_found(request)
    return render(request, "tasks/edit.html", {
        "task": db_task,
        "selected_label_ids": [label.id for label in db_task.labels],
        **_form_choices(db),
    })


@router.patch("/{task_id}")
def update_task(
        request: Request,
        task_id: int,
        name: str = Form(""),
        description: Optional[str] = Form(None),
        status_id: Optional[str] = Form(None),
        executor_id: Optional[str] = Form(None),
        label_ids: List[str] = Form([]),
        db: Session = Depends(get_db)
):
    """Обновить задачу; метки заменяются целиком"""
    if task_crud.get_task(db, task_id) is None:
        return not_found(request)
    try:
        task_update = TaskUpdate(
            name=name,
            description=description,
            status_id=status_id,
            executor_id=executor_id,
            label_ids=label_ids,
        )
    except ValidationError:
        return redirect(f"/tasks/{task_id}/edit", "flash.tasks.update.error", "danger")

    if task_crud.update_task(db, task_id, task_update) is None:
        return redirect(f"/tasks/{task_id}/edit", "flash.tasks.update.error", "danger")
    return redirect("/tasks", "flash.tasks.update.success")


@router.delete("/{task_id}")
def delete_task(
        request: Request,
        task_id: int,
        db: Session = Depends(get_db),
        current_user: UserDB = Depends(require_login)
):
    """Удалить задачу (только автор)"""
    if task_crud.get_task(db, task_id) is None:
        return not_found(request)
    if not task_crud.delete_task(db, task_id, current_user_id=current_user.id):
        return redirect("/tasks", "flash.tasks.delete.error", "danger")
    return redirect("/tasks", "flash.tasks.delete.success")
