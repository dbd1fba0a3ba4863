# BigSitemap — Entry source files (plain URL lists and JSONL)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import codecs
import json
import logging
from typing import Iterator, Tuple, Union

from ..core.collection import SitemapCollection
from ..errors import ValidationError


logger = logging.getLogger(__name__)


def iter_source_lines(path: str) -> Iterator[Tuple[int, bytes]]:
	"""Yield (line number, raw bytes) for non-blank, non-comment lines.

	Lines are decoded one at a time by the caller so a bad byte only costs its line.
	"""
	with open(path, "rb") as f:
		for lineno, line in enumerate(f, start=1):
			if lineno == 1 and line.startswith(codecs.BOM_UTF8):
				line = line[len(codecs.BOM_UTF8):]
			raw = line.strip()
			if not raw or raw.startswith(b"#"):
				continue
			yield lineno, raw


def decode_source_line(raw: bytes) -> str:
	try:
		return raw.decode("utf-8")
	except UnicodeDecodeError as e:
		raise ValidationError(f"invalid UTF-8 at byte {e.start}") from e


def parse_source_line(text: str) -> Union[str, dict]:
	"""A JSON object line becomes a field mapping; anything else is a location.

	Raises ValidationError for a line that starts like JSON but does not parse
	to an object.
	"""
	if not text.startswith("{"):
		return text
	try:
		obj = json.loads(text)
	except json.JSONDecodeError as e:
		raise ValidationError(f"malformed JSON: {e.msg}") from e
	if not isinstance(obj, dict):
		raise ValidationError("JSON entry must be an object")
	return obj


def load_source(collection: SitemapCollection, path: str) -> SitemapCollection:
	"""Add every entry of the source file at ``path`` to ``collection``."""
	lines = 0
	for lineno, raw in iter_source_lines(path):
		lines += 1
		try:
			value = parse_source_line(decode_source_line(raw))
		except ValidationError as e:
			collection.record_failure(e, f"{path}:{lineno}")
			continue
		collection.add(value)
	logger.info("Read %d entries from %s (%d rejected so far)", lines, path, collection.failed_count)
	return collection
