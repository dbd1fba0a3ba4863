# BigSitemap — Sitemap index: page filenames and page URIs
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from typing import List

from ..errors import ConfigurationError
from ..utils.urls import is_absolute_uri


# printf conversion: "%%" literal, or flags/width/precision + conversion char
_CONVERSION_RE = re.compile(r"%(?:%|[-+ #0]*(?:\d+)?(?:\.\d+)?([A-Za-z]?))")
_INTEGER_CONVERSIONS = frozenset("diu")


def check_name_pattern(name_pattern: str) -> str:
	"""Require exactly one integer placeholder (``%d``, ``%i``, ``%u``, ``%05d``...)."""
	if not isinstance(name_pattern, str) or not name_pattern:
		raise ConfigurationError("name pattern must be a non-empty string")
	conversions = []
	for m in _CONVERSION_RE.finditer(name_pattern):
		if m.group(0) == "%%":
			continue
		conversions.append(m.group(1))
	if len(conversions) != 1 or conversions[0] not in _INTEGER_CONVERSIONS:
		raise ConfigurationError(
			f"name pattern must contain exactly one integer placeholder such as %d: {name_pattern!r}"
		)
	return name_pattern


def check_base_uri(base_uri: str) -> str:
	if not base_uri:
		raise ConfigurationError("base URI is required")
	if not is_absolute_uri(base_uri):
		raise ConfigurationError(f"base URI must be absolute: {base_uri!r}")
	return base_uri


def page_filename(name_pattern: str, index: int) -> str:
	"""Filename of the page at 0-based ``index``; files are numbered from 1."""
	check_name_pattern(name_pattern)
	return name_pattern % (index + 1)


def build_index(base_uri: str, name_pattern: str, page_count: int) -> List[str]:
	"""Page URIs for the sitemap index, in page order."""
	check_base_uri(base_uri)
	check_name_pattern(name_pattern)
	return [base_uri + (name_pattern % (i + 1)) for i in range(page_count)]


__all__ = [
	"check_name_pattern",
	"check_base_uri",
	"page_filename",
	"build_index",
]
