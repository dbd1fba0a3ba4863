# BigSitemap — Error hierarchy
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Any, Dict, List, Optional


class SitemapError(Exception):
	"""Base error for all sitemap operations."""


class ValidationError(SitemapError):
	"""An entry's fields violate the sitemap format constraints.

	Always recovered locally: the collection counts it, logs it and moves on.
	"""

	def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
		super().__init__(message)
		self.errors = errors or []


class ConfigurationError(SitemapError):
	"""Malformed name pattern, base URI, page size or missing configuration."""


class IndexOutOfRangeError(SitemapError, IndexError):
	"""Requested page index is outside [0, page_count)."""


class CollectionFrozenError(SitemapError):
	"""Entries were added after the collection was frozen."""
