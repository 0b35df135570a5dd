from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
import datetime
from database import Base


class TaskDB(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    status_id = Column(Integer, ForeignKey("statuses.id", ondelete="RESTRICT"), nullable=False)
    creator_id = Column(Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False)
    executor_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    status = relationship("StatusDB", back_populates="tasks")
    creator = relationship("UserDB", back_populates="created_tasks", foreign_keys=[creator_id])
    executor = relationship("UserDB", back_populates="executed_tasks", foreign_keys=[executor_id])
    label_links = relationship(
        "TaskLabelDB", back_populates="task", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def labels(self):
        return [link.label for link in self.label_links]

    def __repr__(self):
        return f"<Task(id={self.id}, name='{self.name}', status_id={self.status_id})>"


class TaskLabelDB(Base):
    __tablename__ = "tasks_labels"

    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True)
    label_id = Column(Integer, ForeignKey("labels.id", ondelete="RESTRICT"), primary_key=True)

    # Связи
    task = relationship("TaskDB", back_populates="label_links")
    label = relationship("LabelDB", back_populates="task_links")

    def __repr__(self):
        return f"<TaskLabel(task_id={self.task_id}, label_id={self.label_id})>"
