# BigSitemap — Cache writer (sitemap index + page files)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import os
from typing import List

from ..core.collection import SitemapCollection
from ..core.index import page_filename
from ..errors import ConfigurationError
from ..utils.io import ensure_dirs, write_bytes_atomic
from .sitemap_xml import encode_for, render_sitemap_index, render_urlset


logger = logging.getLogger(__name__)

DEFAULT_INDEX_NAME = "sitemap_index.xml"


class WriteReport:
	def __init__(self) -> None:
		self.index_path: str = ""
		self.page_paths: List[str] = []
		self.urls_count = 0
		self.failed_count = 0
		self.skipped_count = 0
		self.removed_paths: List[str] = []

	@property
	def pages_count(self) -> int:
		return len(self.page_paths)

	def as_dict(self) -> dict:
		return {
			"index": self.index_path,
			"pages": self.pages_count,
			"urls": self.urls_count,
			"failed": self.failed_count,
			"skipped": self.skipped_count,
			"removed": len(self.removed_paths),
		}


class SitemapCacheWriter:
	"""Writes the sitemap index and every page of a collection under cache_dir."""

	def __init__(self, cache_dir: str) -> None:
		if not cache_dir:
			raise ConfigurationError("cache_dir is required")
		self.cache_dir = cache_dir

	def write(self, collection: SitemapCollection, index_name: str = DEFAULT_INDEX_NAME) -> WriteReport:
		if not index_name:
			raise ConfigurationError("index name must not be empty")
		ensure_dirs(self.cache_dir)
		collection.freeze()
		report = WriteReport()
		report.urls_count = collection.urls_count()
		report.failed_count = collection.failed_count

		# index is written last and only references pages already on disk
		lastmods = []
		for i in range(collection.sitemap_count()):
			page = collection.sitemap(i)
			filename = collection.page_filename(i)
			path = os.path.join(self.cache_dir, filename)
			write_bytes_atomic(path, encode_for(filename, render_urlset(page)))
			report.page_paths.append(path)
			report.skipped_count += page.skipped
			lastmods.append(page.lastmod)
			logger.info("Wrote sitemap page %d (%d urls) to %s", i + 1, len(page), path)

		index_path = os.path.join(self.cache_dir, index_name)
		data = render_sitemap_index(collection.sitemap_index(), lastmods)
		write_bytes_atomic(index_path, encode_for(index_name, data))
		report.index_path = index_path
		logger.info("Wrote sitemap index with %d pages to %s", report.pages_count, index_path)
		report.removed_paths = self._remove_stale_pages(collection)
		return report

	def _remove_stale_pages(self, collection: SitemapCollection) -> List[str]:
		"""Delete page files of an earlier, larger build that the index no longer lists."""
		removed: List[str] = []
		i = collection.sitemap_count()
		while True:
			path = os.path.join(self.cache_dir, page_filename(collection.name_pattern, i))
			if not os.path.isfile(path):
				break
			os.remove(path)
			removed.append(path)
			logger.info("Removed stale sitemap page %s", path)
			i += 1
		return removed
