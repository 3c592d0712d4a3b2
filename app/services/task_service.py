"""Task service: filtres, liste paginée et mutations"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.core.database import commit
from app.core.errors import NotFoundError, ValidationError
from app.models.category import Category
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskUpdate
from app.services.pagination import Window, pagination_meta

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class TaskFilters:
    """None = filtre absent (completed=None n'est pas completed=False)."""

    search: Optional[str] = None
    category_id: Optional[int] = None
    priority: Optional[str] = None
    completed: Optional[bool] = None


def parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized == "":
        return None
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid boolean value: {value!r}")


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_task_filter(filters: TaskFilters) -> list:
    """Clauses combinées en AND; liste vide = toutes les tâches."""
    clauses = []

    # texte tel que saisi: seuls None et "" valent absence
    if filters.search:
        pattern = f"%{_escape_like(filters.search)}%"
        clauses.append(or_(
            Task.title.ilike(pattern, escape="\\"),
            Task.description.ilike(pattern, escape="\\"),
        ))

    if filters.category_id is not None:
        clauses.append(Task.category_id == filters.category_id)

    if filters.priority is not None:
        clauses.append(Task.priority == filters.priority)

    if filters.completed is not None:
        clauses.append(Task.completed == filters.completed)

    return clauses


def list_tasks(db: Session, filters: TaskFilters, window: Window) -> dict:
    query = db.query(Task).filter(*build_task_filter(filters))

    # count et fetch sur la même requête filtrée
    total = query.count()
    items = (
        query.options(joinedload(Task.category))
        .order_by(Task.created_at.desc(), Task.id.asc())
        .offset(window.offset)
        .limit(window.limit)
        .all()
    )

    return {"items": items, "pagination": pagination_meta(total, window)}


def get_task(db: Session, task_id: int) -> Task:
    task = db.query(Task).options(joinedload(Task.category)).filter(Task.id == task_id).first()
    if not task:
        logger.warning(f"Task {task_id} not found")
        raise NotFoundError("Task not found")
    return task


def _check_category_exists(db: Session, category_id: Optional[int]) -> None:
    if category_id is None:
        return
    if not db.query(Category.id).filter(Category.id == category_id).first():
        raise ValidationError(f"Category {category_id} does not exist")


def create_task(db: Session, data: TaskCreate) -> Task:
    _check_category_exists(db, data.category_id)

    new_task = Task(
        title=data.title,
        description=data.description,
        completed=data.completed,
        priority=data.priority,
        due_date=data.due_date,
        category_id=data.category_id,
    )
    db.add(new_task)
    commit(db)

    logger.info(f"Task {new_task.id} created")
    return get_task(db, new_task.id)


def update_task(db: Session, task_id: int, data: TaskUpdate) -> Task:
    task = get_task(db, task_id)

    update_data = data.model_dump(exclude_unset=True)
    if "category_id" in update_data:
        _check_category_exists(db, update_data["category_id"])

    for field, value in update_data.items():
        setattr(task, field, value)

    commit(db)
    # recharge la catégorie si category_id a changé
    db.refresh(task)

    logger.info(f"Task {task_id} updated ({', '.join(update_data) or 'no fields'})")
    return task


def toggle_task(db: Session, task_id: int) -> Task:
    task = get_task(db, task_id)
    task.completed = not task.completed
    commit(db)
    db.refresh(task)

    logger.info(f"Task {task_id} toggled to completed={task.completed}")
    return task


def delete_task(db: Session, task_id: int) -> None:
    task = get_task(db, task_id)
    db.delete(task)
    commit(db)

    logger.info(f"Task {task_id} deleted")

