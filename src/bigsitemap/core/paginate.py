# BigSitemap — Pagination of entries into sitemap pages
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Tuple

from ..errors import ConfigurationError, IndexOutOfRangeError


# Per-document limit of the sitemap protocol
PAGE_SIZE = 50_000


def check_page_size(page_size: int) -> int:
	if isinstance(page_size, bool) or not isinstance(page_size, int):
		raise ConfigurationError(f"page size must be an integer, got {page_size!r}")
	if page_size < 1 or page_size > PAGE_SIZE:
		raise ConfigurationError(f"page size must be between 1 and {PAGE_SIZE}, got {page_size}")
	return page_size


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
	"""Number of pages needed for ``total`` entries (ceiling division, 0 for 0)."""
	check_page_size(page_size)
	if total < 0:
		raise ValueError(f"total must be >= 0, got {total}")
	return -(-total // page_size)


def page_bounds(index: int, total: int, page_size: int = PAGE_SIZE) -> Tuple[int, int]:
	"""Half-open ``(start, stop)`` range of entries on page ``index`` (0-based).

	Every page but the last is full; the last holds 1..page_size entries.
	"""
	count = page_count(total, page_size)
	if isinstance(index, bool) or not isinstance(index, int):
		raise IndexOutOfRangeError(f"page index must be an integer, got {index!r}")
	if index < 0 or index >= count:
		raise IndexOutOfRangeError(f"page index {index} out of range [0, {count})")
	start = index * page_size
	return start, min(start + page_size, total)


__all__ = [
	"PAGE_SIZE",
	"check_page_size",
	"page_count",
	"page_bounds",
]
