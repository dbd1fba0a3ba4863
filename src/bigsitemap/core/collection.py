# BigSitemap — Entry collection (append-only, isolate-and-continue)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Any, List, Optional, Tuple

from ..errors import CollectionFrozenError, ValidationError
from ..utils.urls import has_trailing_slash
from .entry import Entry, make_entry
from .index import build_index, check_base_uri, check_name_pattern, page_filename
from .page import SitemapPage, build_page
from .paginate import PAGE_SIZE, check_page_size, page_bounds, page_count


logger = logging.getLogger(__name__)


class AddResult:
	def __init__(self, entry: Optional[Entry] = None, error: Optional[ValidationError] = None) -> None:
		self.entry = entry
		self.error = error

	@property
	def ok(self) -> bool:
		return self.error is None

	def __bool__(self) -> bool:
		return self.ok

	def __repr__(self) -> str:
		if self.ok:
			return f"AddResult(ok, {self.entry.location!r})"
		return f"AddResult(failed, {str(self.error)!r})"


class SitemapCollection:
	"""Ordered, append-only collection of sitemap entries.

	Built once through ``add`` and then read per page and for the index.
	Malformed entries are counted in ``failed_count`` and never abort the batch.
	"""

	def __init__(self, base_uri: str, name_pattern: str = "sitemap%d.xml.gz", page_size: int = PAGE_SIZE) -> None:
		self.base_uri = check_base_uri(base_uri)
		self.name_pattern = check_name_pattern(name_pattern)
		self.page_size = check_page_size(page_size)
		self.failed_count = 0
		self._entries: List[Entry] = []
		self._frozen = False
		if not has_trailing_slash(self.base_uri):
			logger.warning("Base URI %s has no trailing slash; page names are appended verbatim", self.base_uri)

	def add(self, *args: Any, **fields: Any) -> AddResult:
		"""Add one entry: ``add(url)``, ``add(mapping)`` or ``add(loc=..., priority=...)``."""
		if self._frozen:
			raise CollectionFrozenError("cannot add entries to a frozen collection")
		try:
			entry = make_entry(*args, **fields)
		except ValidationError as e:
			return self.record_failure(e, args or fields)
		self._entries.append(entry)
		return AddResult(entry=entry)

	def record_failure(self, error: ValidationError, params: Any = None) -> AddResult:
		"""Count and log one rejected entry; also used by readers for unparseable input."""
		if self._frozen:
			raise CollectionFrozenError("cannot add entries to a frozen collection")
		self.failed_count += 1
		logger.warning("Failed to add url (%s). Parameters: %r", error, params)
		return AddResult(error=error)

	def freeze(self) -> "SitemapCollection":
		self._frozen = True
		return self

	@property
	def frozen(self) -> bool:
		return self._frozen

	@property
	def entries(self) -> Tuple[Entry, ...]:
		return tuple(self._entries)

	def __len__(self) -> int:
		return len(self._entries)

	def __iter__(self):
		return iter(self._entries)

	def urls_count(self) -> int:
		return len(self._entries)

	def attempts_count(self) -> int:
		return len(self._entries) + self.failed_count

	def sitemap_count(self) -> int:
		return page_count(len(self._entries), self.page_size)

	def page_entries(self, index: int) -> List[Entry]:
		start, stop = page_bounds(index, len(self._entries), self.page_size)
		return self._entries[start:stop]

	def page_filename(self, index: int) -> str:
		page_bounds(index, len(self._entries), self.page_size)
		return page_filename(self.name_pattern, index)

	def sitemap_index(self) -> List[str]:
		return build_index(self.base_uri, self.name_pattern, self.sitemap_count())

	def sitemap(self, index: int) -> SitemapPage:
		return build_page(self._entries, index, self.page_size)

	def __repr__(self) -> str:
		return (
			f"SitemapCollection(base_uri={self.base_uri!r}, urls={len(self._entries)}, "
			f"failed={self.failed_count}, pages={self.sitemap_count()})"
		)


__all__ = [
	"AddResult",
	"SitemapCollection",
]
