"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime, timezone
from typing import Optional, List, Literal

from app.schemas.category import CategorySummary

Priority = Literal["low", "medium", "high"]


def _check_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Title is required")
    if len(v) > 200:
        raise ValueError("Title must be at most 200 characters")
    return v


def _to_utc(v: Optional[datetime]) -> Optional[datetime]:
    # la colonne DateTime est naive: on stocke en UTC sans offset
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    completed: bool = False
    priority: Priority = "medium"
    due_date: Optional[datetime] = None
    category_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _check_title(v)

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v):
        return _to_utc(v)


class TaskUpdate(BaseModel):
    """Mise à jour partielle: seuls les champs envoyés sont appliqués."""

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None
    category_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        if v is None:
            raise ValueError("Title cannot be null")
        return _check_title(v)

    # completed/priority envoyés à null n'ont pas de sens (colonnes NOT NULL)
    @field_validator("completed", "priority")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v):
        return _to_utc(v)


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    completed: bool
    priority: str
    due_date: Optional[datetime]
    category_id: Optional[int]
    category: Optional[CategorySummary]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PaginationMeta(BaseModel):
    total: int
    current_page: int
    per_page: int
    total_pages: int


class TaskListResponse(BaseModel):
    items: List[TaskResponse]
    pagination: PaginationMeta
