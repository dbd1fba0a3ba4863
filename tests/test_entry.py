from datetime import datetime, timezone

import pydantic
import pytest

from bigsitemap.core.entry import ChangeFreq, Entry, make_entry
from bigsitemap.errors import ValidationError


def test_single_string_is_location():
	e = make_entry("http://example.com/a")
	assert e.location == "http://example.com/a"
	assert e.last_modified is None
	assert e.change_frequency is None
	assert e.priority is None


def test_protocol_field_names():
	e = make_entry(loc="https://example.com/b", changefreq="Daily", priority="0.5", lastmod="2024-01-02T03:04:05Z")
	assert e.location == "https://example.com/b"
	assert e.change_frequency is ChangeFreq.DAILY
	assert e.priority == 0.5
	assert e.last_modified == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_descriptive_field_names_and_mapping():
	e = make_entry({"location": "https://example.com/c", "change_frequency": "never", "priority": 1})
	assert e.change_frequency is ChangeFreq.NEVER
	assert e.priority == 1.0


def test_existing_entry_passes_through():
	e = make_entry("http://example.com/")
	assert make_entry(e) is e


def test_location_whitespace_is_trimmed():
	assert make_entry("  http://example.com/x \n").location == "http://example.com/x"


@pytest.mark.parametrize(
	"args,fields",
	[
		((), {}),
		(("",), {}),
		(("   ",), {}),
		(("not a url",), {}),
		(("/relative/path",), {}),
		(("example.com/page",), {}),
		(("http://",), {}),
		(("http://exa mple.com/",), {}),
		(("http://example.com:port/",), {}),
		((), {"priority": 0.5}),
		((), {"loc": "http://example.com/", "priority": 1.5}),
		((), {"loc": "http://example.com/", "priority": -0.1}),
		((), {"loc": "http://example.com/", "priority": "high"}),
		((), {"loc": "http://example.com/", "changefreq": "sometimes"}),
		((), {"loc": "http://example.com/", "lastmod": "yesterday"}),
		((), {"loc": "http://example.com/", "colour": "blue"}),
		(("http://example.com/",), {"priority": 0.5}),
		(("http://example.com/a", "http://example.com/b"), {}),
	],
)
def test_invalid_entries_raise(args, fields):
	with pytest.raises(ValidationError):
		make_entry(*args, **fields)


def test_empty_location_reason():
	with pytest.raises(ValidationError) as exc:
		make_entry(loc="")
	assert "location must not be empty" in str(exc.value)
	assert exc.value.errors


def test_priority_bounds_inclusive():
	assert make_entry(loc="http://example.com/", priority=0.0).priority == 0.0
	assert make_entry(loc="http://example.com/", priority=1.0).priority == 1.0


def test_all_change_frequencies_accepted():
	for freq in ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never"):
		assert make_entry(loc="http://example.com/", changefreq=freq).change_frequency.value == freq


def test_entry_is_immutable():
	e = make_entry("http://example.com/")
	with pytest.raises(pydantic.ValidationError):
		e.location = "http://other.example.com/"
	assert isinstance(e, Entry)
