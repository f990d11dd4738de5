"""
Page

select_page 결과 컨테이너
"""
import logging
import math
from typing import Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 200


class Page(Generic[T]):
    """
    페이지 요청 + 결과

    Args:
        current: 1부터 시작하는 페이지 번호
        size: 페이지당 건수 (MAX_PAGE_SIZE 초과 시 잘라냄)
    """

    def __init__(self, current: int = 1, size: int = DEFAULT_PAGE_SIZE):
        if current < 1:
            raise ValueError(f"current must be >= 1, got {current}")
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        if size > MAX_PAGE_SIZE:
            logger.warning(f"Page size {size} exceeds {MAX_PAGE_SIZE}, clamping")
            size = MAX_PAGE_SIZE

        self.current = current
        self.size = size
        self.total = 0
        self.records: List[T] = []

    @property
    def offset(self) -> int:
        return (self.current - 1) * self.size

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.current < self.pages

    @property
    def has_previous(self) -> bool:
        return self.current > 1

    def __repr__(self):
        return (
            f"<Page current={self.current} size={self.size} "
            f"total={self.total} records={len(self.records)}>"
        )
