import logging
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy import and_, desc, exists
from typing import List, Optional

from models.task import TaskDB, TaskLabelDB
from models.status import StatusDB
from models.user import UserDB
from models.label import LabelDB
from schemas.task import TaskCreate, TaskUpdate, TaskFilter

logger = logging.getLogger(__name__)


def _with_relations(query):
    return query.options(
        joinedload(TaskDB.status),
        joinedload(TaskDB.creator),
        joinedload(TaskDB.executor),
        selectinload(TaskDB.label_links).joinedload(TaskLabelDB.label),
    )


def get_task(db: Session, task_id: int) -> Optional[TaskDB]:
    """Получить задачу по ID со всеми связями"""
    return _with_relations(db.query(TaskDB)).filter(TaskDB.id == task_id).first()


def get_tasks(db: Session, filters: Optional[TaskFilter] = None) -> List[TaskDB]:
    """Получить список задач; условия фильтра объединяются через AND"""
    query = _with_relations(db.query(TaskDB))
    if filters is None:
        filters = TaskFilter()

    if filters.status_id is not None:
        query = query.filter(TaskDB.status_id == filters.status_id)
    if filters.executor_id is not None:
        query = query.filter(TaskDB.executor_id == filters.executor_id)
    if filters.creator_id is not None:
        query = query.filter(TaskDB.creator_id == filters.creator_id)
    if filters.label_id is not None:
        query = query.filter(
            exists().where(
                and_(
                    TaskLabelDB.task_id == TaskDB.id,
                    TaskLabelDB.label_id == filters.label_id
                )
            )
        )
    if filters.has_label is not None:
        has_any_label = exists().where(TaskLabelDB.task_id == TaskDB.id)
        query = query.filter(has_any_label if filters.has_label else ~has_any_label)

    return query.order_by(desc(TaskDB.created_at), desc(TaskDB.id)).all()


def _references_valid(db: Session, status_id: int, executor_id: Optional[int]) -> bool:
    if not db.query(StatusDB).filter(StatusDB.id == status_id).first():
        return False
    if executor_id is not None and not db.query(UserDB).filter(UserDB.id == executor_id).first():
        return False
    return True


def set_task_labels(db: Session, task: TaskDB, label_ids: List[int]) -> None:
    """Заменить метки задачи; несуществующие ID игнорируются"""
    task.label_links.clear()
    db.flush()
    if not label_ids:
        return
    for label in db.query(LabelDB).filter(LabelDB.id.in_(set(label_ids))).all():
        task.label_links.append(TaskLabelDB(label_id=label.id))


def create_task(db: Session, task: TaskCreate) -> Optional[TaskDB]:
    """Создать задачу; None, если статус, автор или исполнитель не найдены"""
    if not db.query(UserDB).filter(UserDB.id == task.creator_id).first():
        return None
    if not _references_valid(db, task.status_id, task.executor_id):
        return None

    db_task = TaskDB(
        name=task.name,
        description=task.description,
        status_id=task.status_id,
        creator_id=task.creator_id,
        executor_id=task.executor_id,
    )
    db.add(db_task)
    set_task_labels(db, db_task, task.label_ids)
    db.commit()
    logger.info(f"Created task {db_task.id} by user {db_task.creator_id}")
    return get_task(db, db_task.id)


def update_task(db: Session, task_id: int, task_update: TaskUpdate) -> Optional[TaskDB]:
    db_task = get_task(db, task_id)
    if not db_task:
        return None
    if not _references_valid(db, task_update.status_id, task_update.executor_id):
        return None

    db_task.name = task_update.name
    db_task.description = task_update.description
    db_task.status_id = task_update.status_id
    db_task.executor_id = task_update.executor_id
    set_task_labels(db, db_task, task_update.label_ids)
    db.commit()
    return get_task(db, task_id)


def delete_task(db: Session, task_id: int, current_user_id: int) -> bool:
    """Удалить задачу; разрешено только её автору"""
    db_task = get_task(db, task_id)
    if not db_task:
        return False
    if db_task.creator_id != current_user_id:
        logger.info(f"User {current_user_id} is not the creator of task {task_id}, deletion denied")
        return False

    db.delete(db_task)
    db.commit()
    logger.info(f"Deleted task {task_id}")
    return True
