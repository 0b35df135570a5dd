from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
import datetime
from database import Base


class StatusDB(Base):
    __tablename__ = "statuses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    tasks = relationship("TaskDB", back_populates="status", passive_deletes="all")

    def __repr__(self):
        return f"<Status(id={self.id}, name='{self.name}')>"
