import logging
import logging.handlers
import os

from bigsitemap.logging_config import configure_logging


def test_rotating_file_handler(tmp_path):
	path = configure_logging(level="debug", log_dir=str(tmp_path / "logs"))
	try:
		assert path == os.path.join(str(tmp_path / "logs"), "bigsitemap.log")
		root = logging.getLogger()
		assert root.level == logging.DEBUG
		assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
	finally:
		for h in list(logging.getLogger().handlers):
			logging.getLogger().removeHandler(h)
			if isinstance(h, logging.FileHandler):
				h.close()


def test_stream_only(tmp_path):
	assert configure_logging(level="WARNING", log_dir=None) is None
	root = logging.getLogger()
	assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
	for h in list(root.handlers):
		root.removeHandler(h)
