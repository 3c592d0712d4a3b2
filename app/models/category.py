"""Category model"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship, validates
from datetime import datetime
from app.core.config import settings
from app.core.database import Base
from app.core.errors import ValidationError

NAME_MAX_LENGTH = 50


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(NAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    color = Column(String, nullable=False, default=settings.DEFAULT_CATEGORY_COLOR)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # pas de cascade: les tâches sont détachées, jamais supprimées
    tasks = relationship("Task", back_populates="category", passive_deletes=True)

    @validates("name")
    def validate_name(self, key, value):
        if value is None or not value.strip():
            raise ValidationError("Category name is required")
        if len(value) > NAME_MAX_LENGTH:
            raise ValidationError(f"Category name must be at most {NAME_MAX_LENGTH} characters")
        return value
