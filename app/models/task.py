"""Task model"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship, validates
from datetime import datetime
from app.core.database import Base
from app.core.errors import ValidationError
from app.models.category import Category

TITLE_MAX_LENGTH = 200
PRIORITIES = ("low", "medium", "high")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    priority = Column(String, nullable=False, default="medium")
    due_date = Column(DateTime, nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship(Category, back_populates="tasks")

    @validates("title")
    def validate_title(self, key, value):
        if value is None or not value.strip():
            raise ValidationError("Title is required")
        if len(value) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
        return value

    @validates("priority")
    def validate_priority(self, key, value):
        if value not in PRIORITIES:
            raise ValidationError("Priority must be low, medium, or high")
        return value
