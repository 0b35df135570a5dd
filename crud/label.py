import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from models.label import LabelDB
from models.task import TaskLabelDB
from schemas.label import LabelCreate, LabelUpdate

logger = logging.getLogger(__name__)


def get_label(db: Session, label_id: int) -> Optional[LabelDB]:
    return db.query(LabelDB).filter(LabelDB.id == label_id).first()


def get_label_by_name(db: Session, name: str) -> Optional[LabelDB]:
    return db.query(LabelDB).filter(LabelDB.name == name).first()


def get_labels(db: Session) -> List[LabelDB]:
    return db.query(LabelDB).order_by(LabelDB.id).all()


def get_labels_by_ids(db: Session, label_ids: List[int]) -> List[LabelDB]:
    if not label_ids:
        return []
    return db.query(LabelDB).filter(LabelDB.id.in_(label_ids)).order_by(LabelDB.id).all()


def create_label(db: Session, label: LabelCreate) -> Optional[LabelDB]:
    if get_label_by_name(db, label.name):
        return None

    db_label = LabelDB(name=label.name)
    db.add(db_label)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return None
    db.refresh(db_label)
    logger.info(f"Created label {db_label.id} '{db_label.name}'")
    return db_label


def update_label(db: Session, label_id: int, label_update: LabelUpdate) -> Optional[LabelDB]:
    db_label = get_label(db, label_id)
    if not db_label:
        return None

    existing = get_label_by_name(db, label_update.name)
    if existing and existing.id != label_id:
        return None

    db_label.name = label_update.name
    db.commit()
    db.refresh(db_label)
    return db_label


def delete_label(db: Session, label_id: int) -> bool:
    """Удалить метку; False, если её нет или она привязана к задачам"""
    db_label = get_label(db, label_id)
    if not db_label:
        return False

    if db.query(TaskLabelDB).filter(TaskLabelDB.label_id == label_id).count() > 0:
        logger.info(f"Label {label_id} is attached to tasks, deletion blocked")
        return False

    db.delete(db_label)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return False
    logger.info(f"Deleted label {label_id}")
    return True
