# BigSitemap — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Sitemap build settings with sane defaults.

	Environment variables are prefixed with BIGSITEMAP_. CLI flags can override.
	base_uri has no default; keep the trailing slash, page names are appended to it.
	"""

	model_config = SettingsConfigDict(env_prefix="BIGSITEMAP_", env_file=".env", extra="ignore")

	base_uri: str = Field(default="")
	name_pattern: str = Field(default="sitemap%d.xml.gz")
	index_name: str = Field(default="sitemap_index.xml")
	cache_dir: str = Field(default="sitemaps")
	page_size: int = Field(default=50_000)
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")
