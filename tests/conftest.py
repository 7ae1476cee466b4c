import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from PySide6.QtWidgets import QApplication

from BackEnd.core.modes import Mode, Thresholds
from BackEnd.core.entries import HistoryEntry


@pytest.fixture(scope="session")
def qapp():
	app = QApplication.instance() or QApplication([])
	yield app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
	path = tmp_path / "data"
	monkeypatch.setenv("SPEECH_TIMER_DATA_DIR", str(path))
	return path


@pytest.fixture
def thresholds():
	return Thresholds(on_pace=30, warning=45, over_time=60)


@pytest.fixture
def make_entry(thresholds):
	def _make(name="Alice", duration=50, mode=Mode.INTRODUCTIONS, t=None):
		return HistoryEntry(name=name, duration=duration, mode=mode, thresholds=t or thresholds)
	return _make


@pytest.fixture
def run_ticks():
	"""Drive a timer without waiting on the wall clock."""
	def _run(timer, n):
		for _ in range(n):
			timer._on_tick()
	return _run
