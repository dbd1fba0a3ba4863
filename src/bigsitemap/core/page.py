# BigSitemap — Page builder: one sitemap document's worth of entries
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from ..errors import ValidationError
from .entry import Entry
from .paginate import PAGE_SIZE, page_bounds


logger = logging.getLogger(__name__)

# sitemap protocol limit for <loc>
MAX_LOC_LENGTH = 2048

# characters outside the XML 1.0 Char production
_XML_ILLEGAL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class SitemapPage:
	"""Serializable view of one page: protocol field mappings in entry order."""

	def __init__(self, index: int, urls: List[Dict[str, str]], skipped: int = 0) -> None:
		self.index = index
		self.urls = urls
		self.skipped = skipped

	def __len__(self) -> int:
		return len(self.urls)

	@property
	def lastmod(self) -> Optional[str]:
		"""Newest lastmod on the page, or None when no entry carries one."""
		values = [u["lastmod"] for u in self.urls if "lastmod" in u]
		if not values:
			return None
		return max(values, key=_lastmod_sort_key)


def _lastmod_sort_key(value: str) -> datetime:
	return datetime.fromisoformat(value)


def format_lastmod(value: datetime) -> str:
	"""W3C datetime; naive values are taken as UTC."""
	if value.tzinfo is None:
		value = value.replace(tzinfo=timezone.utc)
	return value.isoformat(timespec="seconds")


def format_priority(value: float) -> str:
	text = f"{value:.4f}".rstrip("0")
	if text.endswith("."):
		text += "0"
	return text


def entry_to_fields(entry: Entry) -> Dict[str, str]:
	"""Map an entry to sitemap protocol field names.

	Raises ValidationError when the entry cannot be written as a <url> element.
	"""
	loc = entry.location
	if len(loc) > MAX_LOC_LENGTH:
		raise ValidationError(f"loc longer than {MAX_LOC_LENGTH} characters ({len(loc)})")
	if _XML_ILLEGAL_RE.search(loc):
		raise ValidationError("loc contains characters not allowed in XML")
	fields = {"loc": loc}
	if entry.last_modified is not None:
		fields["lastmod"] = format_lastmod(entry.last_modified)
	if entry.change_frequency is not None:
		fields["changefreq"] = entry.change_frequency.value
	if entry.priority is not None:
		fields["priority"] = format_priority(entry.priority)
	return fields


def build_page(entries: Sequence[Entry], index: int, page_size: int = PAGE_SIZE) -> SitemapPage:
	"""Build page ``index`` (0-based) from ``entries``.

	Entries that cannot be serialized are skipped with a warning; the rest of
	the page is kept.
	"""
	start, stop = page_bounds(index, len(entries), page_size)
	urls: List[Dict[str, str]] = []
	skipped = 0
	for entry in entries[start:stop]:
		try:
			urls.append(entry_to_fields(entry))
		except ValidationError as e:
			skipped += 1
			logger.warning("Skipping sitemap entry on page %d: %r (%s)", index, entry.location[:200], e)
	return SitemapPage(index=index, urls=urls, skipped=skipped)


__all__ = [
	"MAX_LOC_LENGTH",
	"SitemapPage",
	"entry_to_fields",
	"format_lastmod",
	"format_priority",
	"build_page",
]
