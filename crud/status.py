import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from models.status import StatusDB
from models.task import TaskDB
from schemas.status import StatusCreate, StatusUpdate

logger = logging.getLogger(__name__)


def get_status(db: Session, status_id: int) -> Optional[StatusDB]:
    return db.query(StatusDB).filter(StatusDB.id == status_id).first()


def get_status_by_name(db: Session, name: str) -> Optional[StatusDB]:
    return db.query(StatusDB).filter(StatusDB.name == name).first()


def get_statuses(db: Session) -> List[StatusDB]:
    return db.query(StatusDB).order_by(StatusDB.id).all()


def create_status(db: Session, status: StatusCreate) -> Optional[StatusDB]:
    if get_status_by_name(db, status.name):
        return None

    db_status = StatusDB(name=status.name)
    db.add(db_status)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(db_status)
    logger.info(f"Created status {db_status.id} '{db_status.name}'")
    return db_status


def update_status(db: Session, status_id: int, status_update: StatusUpdate) -> Optional[StatusDB]:
    db_status = get_status(db, status_id)
    if not db_status:
        return None

    existing = get_status_by_name(db, status_update.name)
    if existing and existing.id != status_id:
        return None

    db_status.name = status_update.name
    db.commit()
    db.refresh(db_status)
    return db_status


def delete_status(db: Session, status_id: int) -> bool:
    """Удалить статус; False, если его нет или он используется задачами"""
    db_status = get_status(db, status_id)
    if not db_status:
        return False

    if db.query(TaskDB).filter(TaskDB.status_id == status_id).count() > 0:
        logger.info(f"Status {status_id} is in use, deletion blocked")
        return False

    db.delete(db_status)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Status {status_id} is still referenced, deletion blocked")
        return False
    logger.info(f"Deleted status {status_id}")
    return True
