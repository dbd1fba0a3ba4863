# BigSitemap — Endpoint sources feeding a collection
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
from typing import Any, Callable, Dict, Iterable, Optional

from ..errors import ValidationError
from .collection import SitemapCollection


logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(r"\s*(?:,|=>)\s*")
# a comma only ends a value when the next "key =>" follows it
_PAIR_SPLIT_RE = re.compile(r"\s*,\s*(?=[A-Za-z_]\w*\s*=>)")

# marker asking the endpoint's generator to add its own entries
BULK = "*"


class Endpoint:
	"""A discoverable application location and its sitemap declaration.

	``sitemap`` is ``""`` for a plain location, a number for its priority,
	``"key => value, ..."`` for named fields, or ``"*"`` to hand the
	collection to ``generator`` for bulk generation.
	"""

	def __init__(
		self,
		location: Optional[str] = None,
		sitemap: str = "",
		generator: Optional[Callable[[SitemapCollection], Any]] = None,
	) -> None:
		self.location = location
		self.sitemap = sitemap
		self.generator = generator

	def __repr__(self) -> str:
		return f"Endpoint({self.location!r}, sitemap={self.sitemap!r})"


def _as_priority(token: str) -> Optional[float]:
	try:
		value = float(token)
	except ValueError:
		return None
	return value if value > 0 else None


def parse_sitemap_attr(text: str) -> Dict[str, Any]:
	"""Parse an endpoint's sitemap declaration into entry fields.

	A lone positive number becomes the priority. With ``=>`` present, pairs are
	separated by a comma followed by the next ``key =>``, so values may contain
	commas; otherwise tokens alternate key, value separated by ``,``. Raises
	ValidationError for a declaration that is not key/value pairs.
	"""
	text = (text or "").strip()
	if not text or text == BULK:
		return {}
	if "=>" in text:
		return _parse_arrow_pairs(text)
	tokens = [t for t in _SPLIT_RE.split(text) if t != ""]
	if len(tokens) == 1:
		priority = _as_priority(tokens[0])
		if priority is None:
			logger.debug("Ignoring sitemap declaration %r", text)
			return {}
		return {"priority": priority}
	if len(tokens) % 2:
		raise ValidationError(f"sitemap declaration needs key/value pairs: {text!r}")
	return {_unquote(tokens[i]): _unquote(tokens[i + 1]) for i in range(0, len(tokens), 2)}


def _unquote(token: str) -> str:
	return token.strip().strip("'\"")


def _parse_arrow_pairs(text: str) -> Dict[str, Any]:
	fields: Dict[str, Any] = {}
	for chunk in _PAIR_SPLIT_RE.split(text):
		key, sep, value = chunk.partition("=>")
		if not sep or not key.strip() or not value.strip() or "=>" in value:
			raise ValidationError(f"sitemap declaration needs key/value pairs: {text!r}")
		fields[_unquote(key)] = _unquote(value)
	return fields


def visit(collection: SitemapCollection, endpoint: Endpoint) -> None:
	declaration = (endpoint.sitemap or "").strip()
	if declaration == BULK and endpoint.generator is not None:
		endpoint.generator(collection)
		return
	try:
		fields = parse_sitemap_attr(declaration)
	except ValidationError as e:
		collection.record_failure(e, endpoint)
		return
	if endpoint.location is not None:
		fields.pop("location", None)
		fields["loc"] = endpoint.location
	collection.add(**fields)


def populate(collection: SitemapCollection, endpoints: Iterable[Endpoint]) -> SitemapCollection:
	"""Visit endpoints in order, adding their entries to ``collection``."""
	before = collection.failed_count
	visited = 0
	for endpoint in endpoints:
		visit(collection, endpoint)
		visited += 1
	logger.info(
		"Visited %d endpoints: %d urls, %d rejected",
		visited,
		collection.urls_count(),
		collection.failed_count - before,
	)
	return collection


__all__ = [
	"BULK",
	"Endpoint",
	"parse_sitemap_attr",
	"visit",
	"populate",
]
