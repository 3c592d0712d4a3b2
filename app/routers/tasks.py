from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.core.database import get_db
from app.schemas.task import Priority, TaskCreate, TaskUpdate, TaskResponse, TaskListResponse
from app.services import task_service
from app.services.pagination import make_window
from app.services.task_service import TaskFilters, parse_bool

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=TaskListResponse)
def list_tasks(
    db: Session = Depends(get_db),
    page: Optional[int] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    limit: Optional[int] = Query(None, description="Alias de pageSize"),
    search: Optional[str] = Query(None, description="Recherche dans titre et description"),
    category: Optional[int] = Query(None),
    priority: Optional[Priority] = Query(None),
    completed: Optional[str] = Query(None, description="true / false"),
):
    window = make_window(page, page_size if page_size is not None else limit)
    filters = TaskFilters(
        search=search,
        category_id=category,
        priority=priority,
        completed=parse_bool(completed),
    )
    return task_service.list_tasks(db, filters, window)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    return task_service.get_task(db, task_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create_task(db, task_data)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_data: TaskUpdate, db: Session = Depends(get_db)):
    return task_service.update_task(db, task_id, task_data)


@router.patch("/{task_id}/toggle", response_model=TaskResponse)
def toggle_task(task_id: int, db: Session = Depends(get_db)):
    # inverse completed (à ne pas confondre avec PUT completed=...)
    return task_service.toggle_task(db, task_id)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    task_service.delete_task(db, task_id)
