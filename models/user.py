from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
import datetime
from database import Base


class UserDB(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_digest = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    # Связи: удаление исполнителя обнуляет executor_id на стороне БД
    created_tasks = relationship(
        "TaskDB", back_populates="creator", foreign_keys="TaskDB.creator_id", passive_deletes="all"
    )
    executed_tasks = relationship(
        "TaskDB", back_populates="executor", foreign_keys="TaskDB.executor_id", passive_deletes="all"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
