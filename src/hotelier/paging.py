"""Page requests and paged results for ordered listings."""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, TypeVar

from hotelier.config import config

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """A zero-based page index and a page size."""

    page_index: int = 0
    page_size: int = field(default_factory=lambda: config.default_page_size)

    def __post_init__(self):
        if self.page_index < 0:
            raise ValueError(f"Page index must be >= 0, got {self.page_index}")
        if not 1 <= self.page_size <= config.max_page_size:
            raise ValueError(
                f"Page size must be between 1 and {config.max_page_size}, got {self.page_size}"
            )

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size


@dataclass
class Page(Generic[T]):
    """A slice of an ordered listing plus the total number of matching items."""

    items: List[T]
    page_index: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    def to_dict(self, item_to_dict: Callable[[T], Any] = None) -> dict:
        convert = item_to_dict or (lambda item: item.to_dict())
        return {
            "items": [convert(item) for item in self.items],
            "page": self.page_index,
            "size": self.page_size,
            "total": self.total,
            "pages": self.total_pages,
        }
