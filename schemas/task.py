from pydantic import BaseModel, validator, Field
from typing import List, Optional


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class TaskBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    status_id: int
    executor_id: Optional[int] = None
    label_ids: List[int] = Field(default_factory=list)

    @validator('name')
    def name_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()

    @validator('description', 'executor_id', 'status_id', pre=True)
    def blank_fields(cls, v):
        return _blank_to_none(v)

    @validator('label_ids', pre=True)
    def drop_blank_labels(cls, v):
        if v is None:
            return []
        return [item for item in v if _blank_to_none(item) is not None]


class TaskCreate(TaskBase):
    creator_id: int = Field(..., description="ID пользователя-создателя задачи")


class TaskUpdate(TaskBase):
    pass


class TaskFilter(BaseModel):
    """Фильтры списка задач; все заданные условия объединяются через AND"""
    status_id: Optional[int] = None
    executor_id: Optional[int] = None
    label_id: Optional[int] = None
    has_label: Optional[bool] = None
    is_creator_user: Optional[bool] = None
    creator_id: Optional[int] = None

    @validator('status_id', 'executor_id', 'label_id', 'has_label', 'is_creator_user', 'creator_id', pre=True)
    def blank_fields(cls, v):
        return _blank_to_none(v)
