"""Pagination offset/limit"""

from dataclasses import dataclass
from math import ceil
from typing import Optional
from app.core.config import settings
from app.core.errors import ValidationError


@dataclass(frozen=True)
class Window:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def make_window(page: Optional[int] = None, page_size: Optional[int] = None) -> Window:
    # Valeurs par défaut: page 1, DEFAULT_PAGE_SIZE éléments
    if page is None:
        page = 1
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE

    if page < 1:
        raise ValidationError("page must be a positive integer")
    if page_size < 1:
        raise ValidationError("pageSize must be a positive integer")
    if page_size > settings.MAX_PAGE_SIZE:
        raise ValidationError(f"pageSize must be at most {settings.MAX_PAGE_SIZE}")

    return Window(page=page, page_size=page_size)


def total_pages(total: int, page_size: int) -> int:
    return ceil(total / page_size) if total > 0 else 0


def pagination_meta(total: int, window: Window) -> dict:
    return {
        "total": total,
        "current_page": window.page,
        "per_page": window.page_size,
        "total_pages": total_pages(total, window.page_size),
    }
