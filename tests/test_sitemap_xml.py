import gzip
import xml.etree.ElementTree as ET

import pytest

from bigsitemap.core.entry import make_entry
from bigsitemap.core.page import build_page
from bigsitemap.storage.sitemap_xml import SITEMAP_NS, encode_for, render_sitemap_index, render_urlset


NS = "{" + SITEMAP_NS + "}"


def test_render_urlset():
	entries = [
		make_entry(loc="http://example.com/a?x=1&y=2", changefreq="daily", priority=0.7),
		make_entry("http://example.com/b"),
	]
	data = render_urlset(build_page(entries, 0))
	assert data.startswith(b'<?xml version="1.0" encoding="UTF-8"?>')
	root = ET.fromstring(data)
	assert root.tag == NS + "urlset"
	urls = root.findall(NS + "url")
	assert [u.findtext(NS + "loc") for u in urls] == ["http://example.com/a?x=1&y=2", "http://example.com/b"]
	assert [c.tag for c in urls[0]] == [NS + "loc", NS + "changefreq", NS + "priority"]
	assert urls[0].findtext(NS + "priority") == "0.7"
	assert urls[1].find(NS + "priority") is None


def test_render_sitemap_index():
	locs = ["http://example.com/sitemap1.xml", "http://example.com/sitemap2.xml"]
	root = ET.fromstring(render_sitemap_index(locs, ["2024-01-01T00:00:00+00:00", None]))
	assert root.tag == NS + "sitemapindex"
	sitemaps = root.findall(NS + "sitemap")
	assert [s.findtext(NS + "loc") for s in sitemaps] == locs
	assert sitemaps[0].findtext(NS + "lastmod") == "2024-01-01T00:00:00+00:00"
	assert sitemaps[1].find(NS + "lastmod") is None


def test_render_empty_index():
	root = ET.fromstring(render_sitemap_index([]))
	assert root.findall(NS + "sitemap") == []


def test_index_lastmods_must_align():
	with pytest.raises(ValueError):
		render_sitemap_index(["http://example.com/sitemap1.xml"], [])


def test_encode_for_gzip():
	data = b"<urlset/>"
	packed = encode_for("sitemap1.xml.gz", data)
	assert gzip.decompress(packed) == data
	assert encode_for("sitemap1.xml.gz", data) == packed
	assert encode_for("sitemap1.xml", data) == data
