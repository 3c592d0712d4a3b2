"""Pydantic schemas for category request/response validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional, List

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Category name is required")
    if len(v) > 50:
        raise ValueError("Category name must be at most 50 characters")
    return v


class CategoryCreate(BaseModel):
    name: str
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v):
        return _check_name(v)


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v):
        if v is None:
            raise ValueError("Category name cannot be null")
        return _check_name(v)


class CategorySummary(BaseModel):
    """Forme embarquée dans chaque tâche (id, name, color)."""

    id: int
    name: str
    color: str

    model_config = ConfigDict(from_attributes=True)


class CategoryResponse(CategorySummary):
    created_at: datetime
    updated_at: datetime


class CategoryTaskSummary(BaseModel):
    id: int
    title: str
    completed: bool

    model_config = ConfigDict(from_attributes=True)


class CategoryDetail(CategoryResponse):
    tasks: List[CategoryTaskSummary] = []
