import logging

from PySide6.QtCore import QObject, Signal
from BackEnd.core.errors import ValidationError
from BackEnd.core.modes import DEFAULT_MODE, Mode
from BackEnd.services import report_exporter
from BackEnd.services.categorizer import categorize
from BackEnd.services.session_recorder import SessionRecorder
from BackEnd.services.threshold_store import ThresholdStore
from BackEnd.services.timer_service import TimerService

logger = logging.getLogger(__name__)


class SpeechController(QObject):
	"""Ties thresholds, the ticking timer and the history together.

	The window talks only to this object. Call load() once at startup and
	shutdown() on close so no tick outlives the window.
	"""

	mode_changed = Signal(str)
	visibility_changed = Signal()

	def __init__(self, history_path=None, store=None):
		super().__init__()
		self.store = store or ThresholdStore()
		self.timer = TimerService()
		self.recorder = SessionRecorder(history_path)
		self.mode = DEFAULT_MODE
		self.timer_visible = True
		self.history_visible = False

	def load(self):
		return self.recorder.load()

	@property
	def running(self):
		return self.timer.running

	@property
	def history(self):
		return self.recorder.entries

	def set_mode(self, mode):
		if self.running:
			raise ValidationError("Cannot change mode while a session is running")
		mode = Mode(mode)
		if mode != self.mode:
			self.mode = mode
			self.mode_changed.emit(mode.value)

	def current_thresholds(self):
		return self.store.get_thresholds(self.mode)

	def set_threshold(self, color, field, value):
		return self.store.set_threshold(self.mode, color, field, value)

	def start(self, speaker_name):
		self.timer.start(speaker_name, self.current_thresholds(), self.mode)

	def stop(self):
		"""Stop the session and append it to the history; returns the entry or None."""
		entry = self.timer.stop()
		if entry is None:
			return None
		self._show_timer()
		self.recorder.record(entry)
		return entry

	def reset(self):
		self.timer.reset()
		self._show_timer()

	def _show_timer(self):
		if not self.timer_visible:
			self.timer_visible = True
			self.visibility_changed.emit()

	def toggle_timer_visible(self):
		self.timer_visible = not self.timer_visible
		self.visibility_changed.emit()
		return self.timer_visible

	def toggle_history_visible(self):
		self.history_visible = not self.history_visible
		self.visibility_changed.emit()
		return self.history_visible

	def categorized(self):
		return categorize(self.recorder.entries)

	def export_report(self, directory=None, moment=None):
		return report_exporter.export_report(self.categorized(), directory, moment)

	def clear_history(self, confirm):
		return self.recorder.clear(confirm)

	def shutdown(self):
		self.timer.shutdown()
		logger.debug("Controller shut down")
