"""Category service"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.core.config import settings
from app.core.database import commit
from app.core.errors import DuplicateError, NotFoundError
from app.models.category import Category
from app.models.task import Task
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category(db: Session, category_id: int) -> Category:
    category = (
        db.query(Category)
        .options(selectinload(Category.tasks))
        .filter(Category.id == category_id)
        .first()
    )
    if not category:
        logger.warning(f"Category {category_id} not found")
        raise NotFoundError("Category not found")
    return category


def _ensure_unique_name(db: Session, name: str, exclude_id: Optional[int] = None) -> None:
    # comparaison exacte, sensible à la casse (comme la contrainte UNIQUE)
    query = db.query(Category.id).filter(Category.name == name)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first():
        logger.warning(f"Category name already exists: {name!r}")
        raise DuplicateError("Category already exists")


def _commit_category(db: Session, name: str) -> None:
    # deux requêtes concurrentes peuvent passer le check: la contrainte UNIQUE tranche
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Unique constraint hit for category name {name!r}: {e.orig}")
        raise DuplicateError("Category already exists") from e
    commit(db)


def create_category(db: Session, data: CategoryCreate) -> Category:
    _ensure_unique_name(db, data.name)

    category = Category(
        name=data.name,
        color=data.color or settings.DEFAULT_CATEGORY_COLOR,
    )
    db.add(category)
    _commit_category(db, data.name)
    db.refresh(category)

    logger.info(f"Category {category.id} created ({category.name!r})")
    return category


def update_category(db: Session, category_id: int, data: CategoryUpdate) -> Category:
    category = get_category(db, category_id)
    update_data = data.model_dump(exclude_unset=True)

    new_name = update_data.get("name")
    if new_name is not None and new_name != category.name:
        _ensure_unique_name(db, new_name, exclude_id=category.id)
        category.name = new_name

    # color=null -> on garde la couleur actuelle
    if update_data.get("color") is not None:
        category.color = update_data["color"]

    _commit_category(db, category.name)
    db.refresh(category)

    logger.info(f"Category {category_id} updated")
    return category


def delete_category(db: Session, category_id: int) -> int:
    """Supprime la catégorie et détache ses tâches (category_id = NULL).

    Les deux écritures partent dans le même commit: soit tout passe, soit rien.
    Retourne le nombre de tâches détachées.
    """
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        logger.warning(f"Category {category_id} not found")
        raise NotFoundError("Category not found")

    detached = (
        db.query(Task)
        .filter(Task.category_id == category_id)
        .update({Task.category_id: None}, synchronize_session="fetch")
    )
    db.delete(category)
    commit(db)

    logger.info(f"Category {category_id} deleted, {detached} task(s) detached")
    return detached
