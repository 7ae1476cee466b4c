import logging

from PySide6.QtCore import QObject, Signal
from BackEnd.repos import history_repo

logger = logging.getLogger(__name__)


class SessionRecorder(QObject):
	"""Owns the in-memory history and mirrors it to disk after each change."""

	history_changed = Signal(int)  # emits number of entries

	def __init__(self, path=None):
		super().__init__()
		self.path = path
		self._entries = []

	@property
	def entries(self):
		return tuple(self._entries)

	def __len__(self):
		return len(self._entries)

	def load(self):
		self._entries = list(history_repo.load_history(self.path))
		self.history_changed.emit(len(self._entries))
		return self.entries

	def record(self, entry):
		"""Append at the tail and write the full snapshot.

		If the write fails the entry stays in memory and StorageError
		propagates; the next successful write brings the file back in line.
		"""
		self._entries.append(entry)
		logger.info("Recorded %s: %ss (%s)", entry.name, entry.duration, entry.mode.value)
		self.history_changed.emit(len(self._entries))
		history_repo.save_history(self._entries, self.path)

	def clear(self, confirm):
		"""Empty the history if confirm() says yes. Returns True when cleared."""
		if not confirm():
			logger.info("Clear history cancelled")
			return False
		self._entries = []
		self.history_changed.emit(0)
		history_repo.save_history(self._entries, self.path)
		logger.info("History cleared")
		return True
