# BigSitemap — IO helpers (directories, atomic file writes)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
import tempfile
import threading


_dir_lock = threading.Lock()


def ensure_dirs(*paths: str) -> None:
	with _dir_lock:
		for p in paths:
			os.makedirs(p, exist_ok=True)


def write_bytes_atomic(path: str, data: bytes) -> None:
	"""Write to a temp file in the same directory, then rename over ``path``."""
	directory = os.path.dirname(os.path.abspath(path))
	fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", dir=directory)
	try:
		with os.fdopen(fd, "wb") as f:
			f.write(data)
		os.replace(tmp_path, path)
	except BaseException:
		if os.path.exists(tmp_path):
			os.remove(tmp_path)
		raise
