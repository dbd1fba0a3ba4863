# BigSitemap — Sitemap entry model and validation
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ValidationError
from ..utils.urls import is_absolute_uri


class ChangeFreq(str, Enum):
	ALWAYS = "always"
	HOURLY = "hourly"
	DAILY = "daily"
	WEEKLY = "weekly"
	MONTHLY = "monthly"
	YEARLY = "yearly"
	NEVER = "never"


class Entry(BaseModel):
	"""One sitemap location plus optional metadata.

	Fields accept either their descriptive names or the sitemap protocol
	names (loc, lastmod, changefreq). Instances are immutable.
	"""

	model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

	location: str = Field(alias="loc")
	last_modified: Optional[datetime] = Field(default=None, alias="lastmod")
	change_frequency: Optional[ChangeFreq] = Field(default=None, alias="changefreq")
	priority: Optional[float] = Field(default=None, ge=0.0, le=1.0)

	@field_validator("location", mode="before")
	@classmethod
	def _strip_location(cls, v: Any) -> Any:
		if isinstance(v, str):
			return v.strip()
		# objects like URI wrappers stringify to their location
		if v is not None and not isinstance(v, (bytes, int, float, bool)):
			return str(v).strip()
		return v

	@field_validator("location")
	@classmethod
	def _absolute_location(cls, v: str) -> str:
		if not v:
			raise ValueError("location must not be empty")
		if not is_absolute_uri(v):
			raise ValueError(f"not an absolute URI: {v!r}")
		return v

	@field_validator("change_frequency", mode="before")
	@classmethod
	def _lower_changefreq(cls, v: Any) -> Any:
		if isinstance(v, str):
			return v.strip().lower()
		return v


def _describe(exc: pydantic.ValidationError) -> str:
	parts = []
	for err in exc.errors():
		where = ".".join(str(x) for x in err.get("loc", ())) or "entry"
		parts.append(f"{where}: {err.get('msg', 'invalid')}")
	return "; ".join(parts)


def make_entry(*args: Any, **fields: Any) -> Entry:
	"""Build an Entry from a location string, a field mapping or named fields.

	Raises ValidationError on any constraint violation.
	"""
	if args and fields:
		raise ValidationError("pass either a single positional value or named fields, not both")
	if len(args) > 1:
		raise ValidationError(f"expected at most one positional argument, got {len(args)}")
	if not args and not fields:
		raise ValidationError("add requires at least one argument")

	data: Dict[str, Any]
	if args:
		value = args[0]
		if isinstance(value, Entry):
			return value
		if isinstance(value, Mapping):
			data = dict(value)
		else:
			data = {"location": value}
	else:
		data = fields

	if not data:
		raise ValidationError("add requires at least one argument")
	try:
		return Entry.model_validate(data)
	except pydantic.ValidationError as e:
		raise ValidationError(_describe(e), errors=e.errors(include_url=False)) from e


__all__ = [
	"ChangeFreq",
	"Entry",
	"make_entry",
]
