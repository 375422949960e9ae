"""Pagination helpers based on info.current_page / info.total_pages."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from .errors import EnigmaDecodeError

PageT = TypeVar("PageT")


def next_page_number(current_page: int | None, total_pages: int | None) -> int | None:
    if current_page is None or total_pages is None:
        return None
    if current_page >= total_pages:
        return None
    return current_page + 1


def iterate_pages(
    fetch_page: Callable[[int], PageT],
    page_position: Callable[[PageT], tuple[int | None, int | None]],
    *,
    start_page: int = 1,
    max_pages: int = 10_000,
) -> Iterator[PageT]:
    current = start_page
    seen_pages: set[int] = {start_page}

    for _ in range(max_pages):
        page = fetch_page(current)
        yield page

        current_page, total_pages = page_position(page)
        next_page = next_page_number(current_page, total_pages)
        if next_page is None:
            return
        if next_page in seen_pages:
            raise EnigmaDecodeError("page loop detected", cause="decode")
        seen_pages.add(next_page)
        current = next_page

    raise EnigmaDecodeError("Exceeded pagination guardrail (max_pages)", cause="decode")


__all__ = [
    "next_page_number",
    "iterate_pages",
]
