# BigSitemap — URL utilities: absolute URI checks
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from urllib.parse import urlparse
import re


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def is_absolute_uri(url: str) -> bool:
	"""True for a syntactically valid absolute URI with scheme and host.

	Whitespace anywhere in the string is rejected; it has to be percent-encoded.
	"""
	if not isinstance(url, str) or not url:
		return False
	if any(ch.isspace() for ch in url):
		return False
	try:
		p = urlparse(url)
		# port parsing raises on junk like host:abc
		p.port
	except ValueError:
		return False
	if not p.scheme or not _SCHEME_RE.match(p.scheme):
		return False
	return bool(p.hostname)


def has_trailing_slash(url: str) -> bool:
	return url.endswith("/")


__all__ = [
	"is_absolute_uri",
	"has_trailing_slash",
]
