# BigSitemap — Sitemap XML rendering (urlset, sitemapindex, gzip)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import gzip
from typing import Iterable, Optional, Sequence
import xml.etree.ElementTree as ET

from ..core.page import SitemapPage


SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
_DECLARATION = b'<?xml version="1.0" encoding="UTF-8"?>\n'

# protocol order of <url> children
_URL_FIELDS = ("loc", "lastmod", "changefreq", "priority")


def _serialize(root: ET.Element) -> bytes:
	return _DECLARATION + ET.tostring(root, encoding="utf-8", xml_declaration=False) + b"\n"


def render_urlset(page: SitemapPage) -> bytes:
	"""<urlset> document for one page."""
	urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})
	for fields in page.urls:
		url_el = ET.SubElement(urlset, "url")
		for name in _URL_FIELDS:
			value = fields.get(name)
			if value is not None:
				ET.SubElement(url_el, name).text = value
	return _serialize(urlset)


def render_sitemap_index(locations: Sequence[str], lastmods: Optional[Iterable[Optional[str]]] = None) -> bytes:
	"""<sitemapindex> document; ``lastmods`` aligns with ``locations`` when given."""
	index = ET.Element("sitemapindex", {"xmlns": SITEMAP_NS})
	stamps = list(lastmods) if lastmods is not None else [None] * len(locations)
	if len(stamps) != len(locations):
		raise ValueError(f"got {len(stamps)} lastmods for {len(locations)} locations")
	for loc, lastmod in zip(locations, stamps):
		sm = ET.SubElement(index, "sitemap")
		ET.SubElement(sm, "loc").text = loc
		if lastmod:
			ET.SubElement(sm, "lastmod").text = lastmod
	return _serialize(index)


def is_compressed_name(filename: str) -> bool:
	return filename.lower().endswith(".gz")


def encode_for(filename: str, data: bytes) -> bytes:
	"""Gzip ``data`` when ``filename`` ends in .gz, else return it unchanged."""
	if is_compressed_name(filename):
		return gzip.compress(data, mtime=0)
	return data


__all__ = [
	"SITEMAP_NS",
	"render_urlset",
	"render_sitemap_index",
	"is_compressed_name",
	"encode_for",
]
