# BigSitemap — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import typer
from typing import List, Optional
from rich import print
from rich.markup import escape

from .config import Settings
from .core.collection import SitemapCollection
from .errors import ConfigurationError
from .logging_config import configure_logging
from .storage.readers import load_source
from .storage.writers import SitemapCacheWriter

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def build(
	source: List[str] = typer.Argument(..., help="Entry file(s): one URL or JSON object per line"),
	base_uri: Optional[str] = typer.Option(None, help="Absolute URI prefix for page files (overrides env)"),
	name_pattern: Optional[str] = typer.Option(None, help="Page filename pattern with one %d placeholder"),
	index_name: Optional[str] = typer.Option(None, help="Sitemap index filename"),
	cache_dir: Optional[str] = typer.Option(None, help="Output directory"),
	page_size: Optional[int] = typer.Option(None, help="Entries per page (max 50000)"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	log_dir: Optional[str] = typer.Option(None, help="Log directory (empty string disables the log file)"),
	fail_on_rejects: bool = typer.Option(False, "--fail-on-rejects", help="Exit 1 if any entry was rejected"),
):
	"""Build the sitemap index and page files from entry source files."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=log_dir if log_dir is not None else cfg.log_dir)
	try:
		collection = SitemapCollection(
			base_uri=base_uri or cfg.base_uri,
			name_pattern=name_pattern or cfg.name_pattern,
			page_size=page_size if page_size is not None else cfg.page_size,
		)
		writer = SitemapCacheWriter(cache_dir or cfg.cache_dir)
		for s in source:
			print(f"[bold]Reading:[/bold] {escape(s)}")
			load_source(collection, s)
		report = writer.write(collection, index_name or cfg.index_name)
	except ConfigurationError as e:
		print(f"[red]Configuration error:[/red] {escape(str(e))}")
		raise typer.Exit(code=2)
	except OSError as e:
		print(f"[red]I/O error:[/red] {escape(str(e))}")
		raise typer.Exit(code=2)
	print(report.as_dict())
	if fail_on_rejects and report.failed_count:
		raise typer.Exit(code=1)


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
