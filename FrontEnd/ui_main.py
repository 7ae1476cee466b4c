import logging

from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
	QComboBox, QLineEdit, QSpinBox, QMessageBox, QFileDialog, QScrollArea
)
from PySide6.QtCore import Qt
from BackEnd.core.clock import fmt_mmss
from BackEnd.core.errors import SpeechTimerError, StorageError, ValidationError
from BackEnd.core.modes import COLOR_FIELDS
from BackEnd.core.paths import reports_dir
from BackEnd.services.speech_controller import SpeechController
from FrontEnd.components.history_panel import HistoryPanel
from FrontEnd.styles.design_tokens import COLORS, FONTS, STATE_COLORS

logger = logging.getLogger(__name__)


def _button(text, color_key):
	btn = QPushButton(text)
	btn.setMinimumHeight(44)
	btn.setCursor(Qt.PointingHandCursor)
	btn.setStyleSheet(
		f"QPushButton {{ background: {COLORS[color_key]}; color: white; font-weight: 600;"
		f" font-size: {FONTS['button_size']}px; border-radius: 6px; padding: 6px 16px; }}"
		"QPushButton:disabled { background: #C7CDD6; }"
	)
	return btn


class MainWindow(QMainWindow):
	def __init__(self, controller=None):
		super().__init__()
		self.setWindowTitle("Speech Timer")
		self.resize(900, 760)

		self.controller = controller or SpeechController()
		self.controller.load()

		content = QWidget()
		content.setObjectName("Content")
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(16)
		outer.setAlignment(Qt.AlignmentFlag.AlignHCenter)

		self.title_label = QLabel()
		self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.title_label.setStyleSheet(f"font-size: {FONTS['title_size']}px; font-weight: bold; color: {COLORS['text_strong']};")
		outer.addWidget(self.title_label)

		# Mode selector
		mode_row = QHBoxLayout()
		mode_row.addStretch()
		mode_row.addWidget(QLabel("Select Mode:"))
		self.mode_combo = QComboBox()
		self.mode_combo.setMinimumWidth(160)
		for mode in self.controller.store.modes():
			self.mode_combo.addItem(mode.value, mode)
		mode_row.addWidget(self.mode_combo)
		mode_row.addStretch()
		outer.addLayout(mode_row)

		outer.addWidget(self._build_timings())

		self.timer_label = QLabel("00:00")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.timer_label.setStyleSheet(f"font-size: {FONTS['timer_size']}px; font-weight: bold; color: {COLORS['text_strong']};")
		outer.addWidget(self.timer_label)

		self.name_input = QLineEdit()
		self.name_input.setPlaceholderText("Enter speaker's name")
		self.name_input.setMinimumHeight(36)
		self.name_input.setMaximumWidth(420)
		outer.addWidget(self.name_input, alignment=Qt.AlignmentFlag.AlignHCenter)

		# Session buttons
		btn_row = QHBoxLayout()
		btn_row.setSpacing(16)
		btn_row.addStretch()
		self.start_btn = _button("Start", 'start_bg')
		self.stop_btn = _button("Stop", 'stop_bg')
		self.reset_btn = _button("Reset", 'reset_bg')
		self.visibility_btn = _button("Hide Timer", 'toggle_bg')
		for btn in (self.start_btn, self.stop_btn, self.reset_btn, self.visibility_btn):
			btn_row.addWidget(btn)
		btn_row.addStretch()
		outer.addLayout(btn_row)

		# History buttons
		hist_row = QHBoxLayout()
		hist_row.setSpacing(16)
		hist_row.addStretch()
		self.history_btn = _button("Show History", 'history_bg')
		self.download_btn = _button("Download PDF", 'download_bg')
		self.clear_btn = _button("Clear History", 'clear_bg')
		for btn in (self.history_btn, self.download_btn, self.clear_btn):
			hist_row.addWidget(btn)
		hist_row.addStretch()
		outer.addLayout(hist_row)

		self.history_panel = HistoryPanel()
		self.history_panel.setMinimumHeight(360)
		outer.addWidget(self.history_panel)
		outer.addStretch()
		content.setLayout(outer)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setFrameShape(QScrollArea.NoFrame)
		scroll.setWidget(content)
		self.setCentralWidget(scroll)
		self._content = content

		# Signals
		timer = self.controller.timer
		timer.tick.connect(self._on_tick)
		timer.state_changed.connect(self._on_state)
		timer.display_changed.connect(self._on_display)
		self.controller.recorder.history_changed.connect(self._on_history_changed)
		self.controller.visibility_changed.connect(self._update_visibility)
		self.controller.mode_changed.connect(self._on_mode_changed)
		self.mode_combo.currentIndexChanged.connect(self._on_mode_selected)
		self.start_btn.clicked.connect(self._start)
		self.stop_btn.clicked.connect(self._stop)
		self.reset_btn.clicked.connect(self._reset)
		self.visibility_btn.clicked.connect(self.controller.toggle_timer_visible)
		self.history_btn.clicked.connect(self.controller.toggle_history_visible)
		self.download_btn.clicked.connect(self._download)
		self.clear_btn.clicked.connect(self._clear_history)

		self._on_display(timer.display_state.value)
		self._load_timings()
		self._on_state(timer.state)
		self._on_history_changed(len(self.controller.history))
		self._update_visibility()

	def _build_timings(self):
		box = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		heading = QLabel("Set Timings (Minutes:Seconds)")
		heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
		heading.setStyleSheet("font-size: 18px; font-weight: 600;")
		layout.addWidget(heading)
		grid = QGridLayout()
		grid.setHorizontalSpacing(24)
		# color -> {'minutes': QSpinBox, 'seconds': QSpinBox}
		self.timing_inputs = {}
		for col, color in enumerate(COLOR_FIELDS):
			label = QLabel(f"{color.capitalize()}:")
			label.setAlignment(Qt.AlignmentFlag.AlignCenter)
			label.setStyleSheet("font-weight: bold;")
			grid.addWidget(label, 0, col)
			pair = QHBoxLayout()
			minutes = QSpinBox()
			minutes.setRange(0, 999)
			minutes.setSuffix(" min")
			seconds = QSpinBox()
			seconds.setRange(0, 59)
			seconds.setSuffix(" s")
			pair.addWidget(minutes)
			pair.addWidget(seconds)
			grid.addLayout(pair, 1, col)
			self.timing_inputs[color] = {'minutes': minutes, 'seconds': seconds}
			minutes.valueChanged.connect(lambda v, c=color: self._on_timing_changed(c, 'minutes', v))
			seconds.valueChanged.connect(lambda v, c=color: self._on_timing_changed(c, 'seconds', v))
		wrapper = QHBoxLayout()
		wrapper.addStretch()
		wrapper.addLayout(grid)
		wrapper.addStretch()
		layout.addLayout(wrapper)
		box.setLayout(layout)
		return box

	def closeEvent(self, event):
		# Stop the tick so nothing fires into a closed window. A running
		# session is discarded, same as Reset.
		self.controller.shutdown()
		super().closeEvent(event)

	def _load_timings(self):
		mode = self.controller.mode
		for color, inputs in self.timing_inputs.items():
			minutes, seconds = self.controller.store.get_mmss(mode, color)
			for field, value in (('minutes', minutes), ('seconds', seconds)):
				spin = inputs[field]
				spin.blockSignals(True)
				spin.setValue(value)
				spin.blockSignals(False)
		self.title_label.setText(f"Speech Timer for {mode.value}")

	def _on_timing_changed(self, color, field, value):
		self.controller.set_threshold(color, field, value)

	def _on_mode_selected(self, index):
		try:
			self.controller.set_mode(self.mode_combo.itemData(index))
		except ValidationError as e:
			QMessageBox.warning(self, "Speech Timer", str(e))
			self._select_mode(self.controller.mode)

	def _on_mode_changed(self, value):
		self._select_mode(self.controller.mode)
		self._load_timings()

	def _select_mode(self, mode):
		self.mode_combo.blockSignals(True)
		self.mode_combo.setCurrentIndex(self.mode_combo.findText(mode.value))
		self.mode_combo.blockSignals(False)

	def _on_tick(self, elapsed):
		self.timer_label.setText(fmt_mmss(elapsed))

	def _on_display(self, state):
		self._content.setStyleSheet(f"QWidget#Content {{ background: {STATE_COLORS[state]}; }}")

	def _on_state(self, state):
		running = state == "running"
		self.start_btn.setEnabled(not running)
		self.stop_btn.setEnabled(running)
		self.mode_combo.setEnabled(not running)
		self.name_input.setEnabled(not running)
		for inputs in self.timing_inputs.values():
			for spin in inputs.values():
				spin.setEnabled(not running)
		if not running:
			self.name_input.clear()
			self.timer_label.setText("00:00")
		self._update_visibility()

	def _update_visibility(self):
		self.visibility_btn.setVisible(self.controller.running)
		self.visibility_btn.setText("Hide Timer" if self.controller.timer_visible else "Show Timer")
		self.timer_label.setVisible(self.controller.timer_visible)
		self.history_btn.setText("Hide History" if self.controller.history_visible else "Show History")
		self.history_panel.setVisible(self.controller.history_visible)

	def _on_history_changed(self, count):
		self.download_btn.setEnabled(count > 0)
		self.clear_btn.setEnabled(count > 0)
		self.history_panel.set_history(self.controller.categorized())

	def _start(self):
		try:
			self.controller.start(self.name_input.text())
		except ValidationError as e:
			QMessageBox.warning(self, "Speech Timer", str(e))

	def _stop(self):
		try:
			self.controller.stop()
		except StorageError as e:
			QMessageBox.critical(self, "Speech Timer", f"The session was kept but could not be saved:\n{e}")

	def _reset(self):
		self.controller.reset()
		self.name_input.clear()

	def _download(self):
		directory = QFileDialog.getExistingDirectory(self, "Save report to", str(reports_dir()))
		if not directory:
			return
		try:
			path = self.controller.export_report(directory)
		except SpeechTimerError as e:
			logger.warning("Report export failed: %s", e)
			QMessageBox.critical(self, "Speech Timer", str(e))
			return
		QMessageBox.information(self, "Speech Timer", f"Report saved to:\n{path}")

	def _confirm_clear(self):
		answer = QMessageBox.question(
			self, "Clear History", "Are you sure you want to clear the history?",
			QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
			QMessageBox.StandardButton.No,
		)
		return answer == QMessageBox.StandardButton.Yes

	def _clear_history(self):
		try:
			self.controller.clear_history(self._confirm_clear)
		except StorageError as e:
			QMessageBox.critical(self, "Speech Timer", str(e))
