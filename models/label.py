from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
import datetime
from database import Base


class LabelDB(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    task_links = relationship("TaskLabelDB", back_populates="label", passive_deletes="all")

    def __repr__(self):
        return f"<Label(id={self.id}, name='{self.name}')>"
