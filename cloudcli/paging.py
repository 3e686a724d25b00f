"""Page arithmetic and item selection used when listing cloud resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 25


@dataclass(frozen=True)
class Pagination:
    """A page number (starting at 1) and the size of each page."""

    page: int
    page_size: int


def window_pagination(limit: int, skip: int) -> tuple[Pagination, int, int]:
    """Plan a listing whose page size equals the limit.

    Returns the pagination to request, and the start and end positions of
    the wanted items among those read from that page onwards.
    """
    start = skip % limit
    return Pagination(page=skip // limit + 1, page_size=limit), start, start + limit


def take_window(items: Iterable[T], start: int, end: int) -> list[T]:
    """Read items until ``end`` are collected or the source runs dry.

    When no more than ``start`` items were read, all of them are returned.
    """
    collected: list[T] = []
    for item in items:
        if item is None or len(collected) == end:
            break
        collected.append(item)
    if len(collected) <= start:
        return collected
    return collected[start:]


def fixed_pagination(skip: int, page_size: int = DEFAULT_PAGE_SIZE) -> tuple[Pagination, int]:
    """Plan a listing with a fixed page size.

    Returns the pagination to request and how many items to drop from it.
    """
    return Pagination(page=skip // page_size + 1, page_size=page_size), skip % page_size


def take_after_skip(items: Iterable[T], skip: int, limit: int) -> list[T]:
    """Drop the first ``skip`` items, then collect until ``limit`` are taken.

    At least one item is taken when any remain.
    """
    taken: list[T] = []
    for item in items:
        if item is None:
            break
        if skip > 0:
            skip -= 1
            continue
        taken.append(item)
        if len(taken) >= limit:
            break
    return taken