import logging

from PySide6.QtCore import QObject, Signal, QTimer
from BackEnd.core.entries import HistoryEntry
from BackEnd.core.errors import ValidationError
from BackEnd.core.modes import TICK_INTERVAL_MS, DisplayState, classify

logger = logging.getLogger(__name__)


class TimerService(QObject):
	tick = Signal(int)  # emits elapsed seconds
	state_changed = Signal(str)  # emits 'idle', 'running'
	display_changed = Signal(str)  # emits a DisplayState value

	def __init__(self):
		super().__init__()
		self.running = False
		self.elapsed_sec = 0
		self.speaker_name = ""
		self.mode = None
		# frozen at start(); later edits in the threshold store don't reach a running session
		self.thresholds = None
		self.display_state = DisplayState.DEFAULT
		self._timer = QTimer()
		self._timer.setInterval(TICK_INTERVAL_MS)
		self._timer.timeout.connect(self._on_tick)

	@property
	def state(self):
		return "running" if self.running else "idle"

	def start(self, speaker_name, thresholds, mode):
		if self.running:
			raise ValidationError("A session is already running")
		name = (speaker_name or "").strip()
		if not name:
			raise ValidationError("Please enter a speaker name")
		if not thresholds.is_ordered():
			raise ValidationError("Please ensure that Green < Yellow < Red timings")
		self.speaker_name = name
		self.mode = mode
		self.thresholds = thresholds
		self.elapsed_sec = 0
		self.running = True
		self._set_display(classify(0, thresholds))
		self._timer.start()
		logger.info("Started %s for %s (%s)", mode.value, name, thresholds)
		self.state_changed.emit('running')

	def stop(self):
		"""End the running session; returns its entry, or None when idle."""
		if not self.running:
			return None
		self._timer.stop()
		entry = HistoryEntry(
			name=self.speaker_name,
			duration=self.elapsed_sec,
			mode=self.mode,
			thresholds=self.thresholds,
			color=self.display_state,
		)
		logger.info("Stopped %s after %ss", entry.name, entry.duration)
		self._clear()
		self.state_changed.emit('idle')
		return entry

	def reset(self):
		"""Drop the current session, if any, without recording it."""
		was_running = self.running
		self._timer.stop()
		self._clear()
		if was_running:
			logger.info("Session reset")
			self.state_changed.emit('idle')

	def shutdown(self):
		"""Teardown: cancel the tick and drop any session, like reset()."""
		self._timer.stop()
		self._clear()

	def is_ticking(self):
		return self._timer.isActive()

	def _clear(self):
		self.running = False
		self.elapsed_sec = 0
		self.speaker_name = ""
		self.mode = None
		self.thresholds = None
		self._set_display(DisplayState.DEFAULT)
		self.tick.emit(0)

	def _set_display(self, state):
		if state != self.display_state:
			self.display_state = state
			self.display_changed.emit(state.value)

	def _on_tick(self):
		if not self.running:
			return
		self.elapsed_sec += 1
		self._set_display(classify(self.elapsed_sec, self.thresholds))
		self.tick.emit(self.elapsed_sec)
