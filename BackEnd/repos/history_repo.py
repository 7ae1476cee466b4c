import contextlib
import json
import logging
import os

from BackEnd.core.entries import HistoryEntry
from BackEnd.core.errors import StorageError
from BackEnd.core.paths import history_path

logger = logging.getLogger(__name__)


def load_history(path=None):
	"""Read the stored history list.

	A missing file is an empty history. An unreadable or corrupt file is also
	treated as empty, with a warning, so the app still starts. Single malformed
	entries are dropped.
	"""
	path = path or history_path()
	if not path.exists():
		return []
	try:
		with open(path, "r", encoding="utf-8") as f:
			data = json.load(f)
	except (OSError, ValueError, RecursionError) as e:
		logger.warning("Ignoring unreadable history at %s: %s", path, e)
		return []
	if not isinstance(data, list):
		logger.warning("Ignoring history at %s: expected a list, got %s", path, type(data).__name__)
		return []
	entries = []
	for i, item in enumerate(data):
		try:
			entries.append(HistoryEntry.from_dict(item))
		except (KeyError, TypeError, ValueError) as e:
			logger.warning("Skipping history entry %d: %s", i, e)
	logger.info("Loaded %d history entries from %s", len(entries), path)
	return entries


def save_history(entries, path=None):
	"""Overwrite the stored history with the full list of entries."""
	path = path or history_path()
	tmp = path.with_name(path.name + ".tmp")
	try:
		path.parent.mkdir(parents=True, exist_ok=True)
		with open(tmp, "w", encoding="utf-8") as f:
			json.dump([e.to_dict() for e in entries], f, indent=2)
		os.replace(tmp, path)
	except OSError as e:
		logger.exception("Could not write history to %s", path)
		with contextlib.suppress(OSError):
			tmp.unlink()
		raise StorageError(f"could not write history to {path}: {e}") from e
	logger.debug("Wrote %d history entries to %s", len(entries), path)
